"""VAT rules for the Nordic and Baltic countries."""

from __future__ import annotations

import re

from vatcheck.country import CountryRules, CountryValidator, int_at


def _weighted_sum(vat: str, weights: tuple[int, ...]) -> int:
    """Sum of each leading digit multiplied by its weight."""
    return sum(int_at(vat, position) * weight for position, weight in enumerate(weights))


def _mod11_digit(total: int) -> int:
    """Remainder modulo 11, with 10 folded onto 0."""
    rest = total % 11
    return 0 if rest == 10 else rest


class Denmark(CountryValidator):
    """Danish CVR numbers: the weighted digit sum is a multiple of 11."""

    def calc(self, vat: str) -> bool:
        return _weighted_sum(vat, self.rules.multipliers["common"]) % 11 == 0


class Estonia(CountryValidator):
    """Estonian KMKR numbers with a modulus 10 check digit."""

    def calc(self, vat: str) -> bool:
        total = _weighted_sum(vat, self.rules.multipliers["common"])
        check = 10 - total % 10
        if check == 10:
            check = 0
        return check == int_at(vat, 8)


class Finland(CountryValidator):
    """Finnish ALV numbers with a modulus 11 check digit."""

    def calc(self, vat: str) -> bool:
        total = _weighted_sum(vat, self.rules.multipliers["common"])
        check = 11 - total % 11
        if check > 9:
            check = 0
        return check == int_at(vat, 7)


class Sweden(CountryValidator):
    """Swedish numbers: a Luhn check over the ten digits before the 01 suffix."""

    def calc(self, vat: str) -> bool:
        odd = sum(
            digit // 5 + (digit * 2) % 10
            for digit in (int_at(vat, position) for position in range(0, 9, 2))
        )
        even = sum(int_at(vat, position) for position in range(1, 9, 2))
        check = (10 - (odd + even) % 10) % 10
        return check == int_at(vat, 9)


class Norway(CountryValidator):
    """Norwegian organisation numbers; a computed check digit of 10 is invalid."""

    def calc(self, vat: str) -> bool:
        total = _weighted_sum(vat, self.rules.multipliers["common"])
        check = 11 - total % 11
        if check == 11:
            check = 0
        if check >= 10:
            return False
        return check == int_at(vat, 8)


class Latvia(CountryValidator):
    """Latvian numbers for legal entities and natural persons."""

    def calc(self, vat: str) -> bool:
        # Natural persons start with a DDMM date; only its shape is checked.
        if re.match(r"[0-3]", vat, re.ASCII):
            return re.match(r"[0-3][0-9][0-1][0-9]", vat, re.ASCII) is not None

        total = _weighted_sum(vat, self.rules.multipliers["common"])
        if total % 11 == 4 and int_at(vat, 0) == 9:
            total -= 45

        rest = total % 11
        if rest == 4:
            check = 0
        elif rest > 4:
            check = 14 - rest
        else:
            check = 3 - rest
        return check == int_at(vat, 10)


class Lithuania(CountryValidator):
    """Lithuanian numbers: nine digits for legal persons, twelve for temporary payers."""

    def calc(self, vat: str) -> bool:
        return self._check_legal_person(vat) or self._check_temporary_payer(vat)

    def _check_legal_person(self, vat: str) -> bool:
        if len(vat) != 9:
            return False
        # The eighth character must be a one.
        if not re.match(r"\d{7}1", vat, re.ASCII):
            return False

        total = sum(int_at(vat, position) * (position + 1) for position in range(8))
        if total % 11 == 10:
            total = _weighted_sum(vat, self.rules.multipliers["short"])
        return _mod11_digit(total) == int_at(vat, 8)

    def _check_temporary_payer(self, vat: str) -> bool:
        if len(vat) != 12:
            return False
        if not self.rules.check:
            return False

        total = _weighted_sum(vat, self.rules.multipliers["med"])
        if total % 11 == 10:
            total = _weighted_sum(vat, self.rules.multipliers["alt"])
        return _mod11_digit(total) == int_at(vat, 11)


DENMARK = Denmark(
    "Denmark",
    ("DK", "DNK", "208"),
    CountryRules(
        multipliers={"common": (2, 7, 6, 5, 4, 3, 2, 1)},
        regex=(r"^(DK)(\d{8})$",),
    ),
)

ESTONIA = Estonia(
    "Estonia",
    ("EE", "EST", "233"),
    CountryRules(
        multipliers={"common": (3, 7, 1, 3, 7, 1, 3, 7)},
        regex=(r"^(EE)(10\d{7})$",),
    ),
)

FINLAND = Finland(
    "Finland",
    ("FI", "FIN", "246"),
    CountryRules(
        multipliers={"common": (7, 9, 10, 5, 8, 4, 2)},
        regex=(r"^(FI)(\d{8})$",),
    ),
)

SWEDEN = Sweden(
    "Sweden",
    ("SE", "SWE", "752"),
    CountryRules(regex=(r"^(SE)(\d{10}01)$",)),
)

NORWAY = Norway(
    "Norway",
    ("NO", "NOR", "578"),
    CountryRules(
        multipliers={"common": (3, 2, 7, 6, 5, 4, 3, 2)},
        regex=(r"^(NO)(\d{9})(MVA)?$",),
    ),
)

LATVIA = Latvia(
    "Latvia",
    ("LV", "LVA", "428"),
    CountryRules(
        multipliers={"common": (9, 1, 4, 8, 3, 10, 2, 5, 7, 6)},
        regex=(r"^(LV)(\d{11})$",),
    ),
)

LITHUANIA = Lithuania(
    "Lithuania",
    ("LT", "LTU", "440"),
    CountryRules(
        multipliers={
            "short": (3, 4, 5, 6, 7, 8, 9, 1),
            "med": (1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 2),
            "alt": (3, 4, 5, 6, 7, 8, 9, 1, 2, 3, 4),
        },
        check=r"^\d{10}1",
        regex=(r"^(LT)(\d{9}|\d{12})$",),
    ),
)