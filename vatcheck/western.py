"""VAT rules for western European countries."""

from __future__ import annotations

import re

from vatcheck.country import CountryRules, CountryValidator, int_at, string_at

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    return int(text) if _SIGNED_INT.fullmatch(text) else 0


def _matches(pattern: str, text: str) -> bool:
    return re.search(pattern, text, re.ASCII) is not None


def _digit_sum(value: int) -> int:
    return value // 10 + value % 10 if value > 9 else value


class Austria(CountryValidator):
    """Austrian UID numbers (ATU followed by eight digits)."""

    def calc(self, vat: str) -> bool:
        weights = self.rules.multipliers["common"]
        total = sum(
            _digit_sum(int_at(vat, position) * weight)
            for position, weight in enumerate(weights)
        )
        check = 10 - (total + 4) % 10
        if check == 10:
            check = 0
        return check == int_at(vat, len(vat) - 1)


class Belgium(CountryValidator):
    """Belgian enterprise numbers with a modulus 97 check."""

    def calc(self, vat: str) -> bool:
        padded = "0" + vat if len(vat) == 9 else vat
        check = 97 - _atoi(padded[:8]) % 97
        return check == _atoi(padded[8:10])


class France(CountryValidator):
    """French numbers; only the all-digit form carries a checkable key."""

    def calc(self, vat: str) -> bool:
        if not re.fullmatch(r"\d{11}", vat, re.ASCII):
            return True
        check = (_atoi(vat[2:]) * 100 + 12) % 97
        return check == _atoi(vat[:2])


class Germany(CountryValidator):
    """German numbers with an ISO 7064 MOD 11-10 style check digit."""

    def calc(self, vat: str) -> bool:
        product = 10
        for position in range(8):
            running = (int_at(vat, position) + product) % 10 or 10
            product = (2 * running) % 11
        check = 0 if 11 - product == 10 else 11 - product
        return check == _atoi(vat[8:])


class Luxembourg(CountryValidator):
    """Luxembourg numbers: the last two digits are the first six modulo 89."""

    def calc(self, vat: str) -> bool:
        return _atoi(vat[:6]) % 89 == _atoi(vat[6:8])


def _char_value(char: str) -> int:
    if char == "+":
        return 36
    if char == "*":
        return 37
    code = ord(char) - 55
    if 9 < code < 91:
        return code
    return int_at(char, 0)


class Netherlands(CountryValidator):
    """Dutch numbers, accepted by either the 11-proof or the 97-modulus proof."""

    def calc(self, vat: str) -> bool:
        vat = re.sub(r"[ \-_]", "", vat).upper()
        if not self.rules.additional:
            return False
        if not _matches(self.rules.additional[0], vat):
            return False

        concatenated = "".join(str(_char_value(char)) for char in f"NL{vat}")
        passes_mod97 = int(concatenated) % 97 == 1

        weights = self.rules.multipliers["common"]
        total = sum(int_at(vat, position) * weight for position, weight in enumerate(weights))
        total %= 11
        if total > 9:
            total = 0
        return total == int_at(vat, 8) or passes_mod97


class Switzerland(CountryValidator):
    """Swiss UID numbers with a modulus 11 check digit."""

    def calc(self, vat: str) -> bool:
        weights = self.rules.multipliers["common"]
        total = sum(int_at(vat, position) * weight for position, weight in enumerate(weights))
        check = 11 - total % 11
        if check == 10:
            return False
        if check == 11:
            check = 0
        return check == int_at(vat, 8)


class Ireland(CountryValidator):
    """Irish numbers in the old, the current and the two-letter formats."""

    def calc(self, vat: str) -> bool:
        formats = self.rules.type_formats
        if "first" not in formats or "third" not in formats:
            return False

        number = vat
        # Old style numbers are rearranged into the current layout first.
        if _matches(formats["first"], vat):
            number = "0" + vat[2:7] + vat[:1] + vat[7:]

        weights = self.rules.multipliers["common"]
        total = sum(
            int_at(number, position) * weight for position, weight in enumerate(weights)
        )

        # Two-letter numbers weigh the trailing A (1 * 9) or H (8 * 9) as well.
        if _matches(formats["third"], number):
            total += 72 if string_at(number, 8) == "H" else 9

        total %= 23
        expected = "W" if total == 0 else chr(total + 64)
        return expected == string_at(number, 7)


def _is_government_department(vat: str) -> bool:
    return int_at(vat, 2) < 500


def _is_health_authority(vat: str) -> bool:
    return int_at(vat, 2) > 499


def _is_standard_or_commercial(vat: str, weights: tuple[int, ...]) -> bool:
    if _atoi(vat) == 0:
        return False

    leading = _atoi(vat[:7])
    total = sum(int_at(vat, position) * weight for position, weight in enumerate(weights))

    # Distance from total up to the next multiple of 97.
    check = -total % 97
    last_digits = _atoi(vat[7:9])

    if (
        check == last_digits
        and leading < 9990001
        and (leading < 100000 or leading > 999999)
        and (leading < 9490001 or leading > 9700000)
    ):
        return True

    # Newer numbers use the same remainder shifted by 55.
    check = check - 55 if check >= 55 else check + 42
    return check == last_digits and leading > 1000000


class UnitedKingdom(CountryValidator):
    """UK standard, branch, government department and health authority numbers."""

    def calc(self, vat: str) -> bool:
        prefix = vat[:2]
        if prefix == "GD":
            return _is_government_department(vat)
        if prefix == "HA":
            return _is_health_authority(vat)
        return _is_standard_or_commercial(vat, self.rules.multipliers["common"])


AUSTRIA = Austria(
    "Austria",
    ("AT", "AUT", "040"),
    CountryRules(
        multipliers={"common": (1, 2, 1, 2, 1, 2, 1)},
        regex=(r"^(AT)U(\d{8})$",),
    ),
)

BELGIUM = Belgium(
    "Belgium",
    ("BE", "BEL", "056"),
    CountryRules(regex=(r"^(BE)([01]?\d{9})$",)),
)

FRANCE = France(
    "France",
    ("FR", "FRA", "250"),
    CountryRules(
        regex=(
            r"^(FR)(\d{11})$",
            r"^(FR)([A-HJ-NP-Z]\d{10})$",
            r"^(FR)(\d[A-HJ-NP-Z]\d{9})$",
            r"^(FR)([A-HJ-NP-Z]{2}\d{9})$",
        )
    ),
)

GERMANY = Germany(
    "Germany",
    ("DE", "DEU", "276"),
    CountryRules(regex=(r"^(DE)([1-9]\d{8})$",)),
)

LUXEMBOURG = Luxembourg(
    "Luxembourg",
    ("LU", "LUX", "442"),
    CountryRules(regex=(r"^(LU)(\d{8})$",)),
)

NETHERLANDS = Netherlands(
    "Netherlands",
    ("NL", "NLD", "528"),
    CountryRules(
        multipliers={"common": (9, 8, 7, 6, 5, 4, 3, 2)},
        regex=(r"^(NL)(\d{9}B\d{2})$",),
        additional=(r"^(\d{9})B\d{2}$",),
    ),
)

SWITZERLAND = Switzerland(
    "Switzerland",
    ("CH", "CHE", "756"),
    CountryRules(
        multipliers={"common": (5, 4, 3, 2, 7, 6, 5, 4)},
        regex=(r"^(CHE)(\d{9})(MWST|TVA|IVA)?$",),
    ),
)

IRELAND = Ireland(
    "Ireland",
    ("IE", "IRL", "372"),
    CountryRules(
        multipliers={"common": (8, 7, 6, 5, 4, 3, 2)},
        type_formats={
            "first": r"^\d[A-Z*+]",
            "third": r"^\d{7}[A-Z][AH]$",
        },
        regex=(
            r"^(IE)(\d{7}[A-W])$",
            r"^(IE)([7-9][A-Z*+)]\d{5}[A-W])$",
            r"^(IE)(\d{7}[A-W][AH])$",
        ),
    ),
)

UNITED_KINGDOM = UnitedKingdom(
    "United Kingdom",
    ("GB", "GBR", "826"),
    CountryRules(
        multipliers={"common": (8, 7, 6, 5, 4, 3, 2)},
        regex=(
            r"^(GB)?(\d{9})$",
            r"^(GB)?(\d{12})$",
            r"^(GB)?(GD\d{3})$",
            r"^(GB)?(HA\d{3})$",
        ),
    ),
)