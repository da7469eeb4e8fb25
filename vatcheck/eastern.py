"""VAT rules for eastern European countries."""

from __future__ import annotations

import re

from vatcheck.country import CountryRules, CountryValidator, int_at

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_BULGARIAN_PERSON = re.compile(r"\d\d[0-5]\d[0-3]\d\d{4}", re.ASCII)


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    return int(text) if _SIGNED_INT.fullmatch(text) else 0


def _weighted_sum(vat: str, weights: tuple[int, ...]) -> int:
    """Sum of each leading digit multiplied by its weight."""
    return sum(int_at(vat, position) * weight for position, weight in enumerate(weights))


def _iso7064_product(vat: str, count: int) -> int:
    """Running product of the ISO 7064 MOD 11-10 scheme over ``count`` digits."""
    product = 10
    for position in range(count):
        running = (int_at(vat, position) + product) % 10 or 10
        product = (2 * running) % 11
    return product


def _bulgarian_nine_digits(vat: str) -> bool:
    expected = int_at(vat, 8)
    check = sum(int_at(vat, position) * (position + 1) for position in range(8)) % 11
    if check != 10:
        return check == expected
    check = sum(int_at(vat, position) * (position + 3) for position in range(8)) % 11
    if check == 10:
        check = 0
    return check == expected


def _bulgarian_physical_person(vat: str, weights: tuple[int, ...]) -> bool:
    if not _BULGARIAN_PERSON.fullmatch(vat):
        return False
    month = _atoi(vat[2:4])
    if not (0 < month < 13 or 20 < month < 33 or 40 < month < 53):
        return False
    check = _weighted_sum(vat, weights) % 11
    if check == 10:
        check = 0
    return check == int_at(vat, 9)


def _bulgarian_foreigner(vat: str, weights: tuple[int, ...]) -> bool:
    return _weighted_sum(vat, weights) % 10 == int_at(vat, 9)


def _bulgarian_miscellaneous(vat: str, weights: tuple[int, ...]) -> bool:
    check = 11 - _weighted_sum(vat, weights) % 11
    if check == 10:
        return False
    if check == 11:
        check = 0
    return check == int_at(vat, 9)


class Bulgaria(CountryValidator):
    """Bulgarian numbers: nine digits for companies, ten for people and others."""

    def calc(self, vat: str) -> bool:
        if len(vat) == 9:
            return _bulgarian_nine_digits(vat)
        weights = self.rules.multipliers
        return (
            _bulgarian_physical_person(vat, weights["physical"])
            or _bulgarian_foreigner(vat, weights["foreigner"])
            or _bulgarian_miscellaneous(vat, weights["miscellaneous"])
        )


class Romania(CountryValidator):
    """Romanian CIF numbers of two to ten digits with a modulus 11 check."""

    def calc(self, vat: str) -> bool:
        weights = self.rules.multipliers["common"]
        offset = len(weights) + 1 - len(vat)
        if offset < 0:
            raise ValueError(f"number too long for the Romanian check: {vat!r}")
        # Shorter numbers use the right-hand end of the weights.
        check = (10 * _weighted_sum(vat, weights[offset:])) % 11
        if check == 10:
            check = 0
        return check == int_at(vat, len(vat) - 1)


def _inn_digit(vat: str, weights: tuple[int, ...]) -> int:
    total = _weighted_sum(vat, weights) % 11
    return total % 10 if total > 9 else total


class Russia(CountryValidator):
    """Russian INN numbers of ten (organisations) or twelve (individuals) digits."""

    def calc(self, vat: str) -> bool:
        weights = self.rules.multipliers
        if len(vat) == 10:
            return _inn_digit(vat, weights["m_1"]) == int_at(vat, 9)
        if len(vat) == 12:
            return _inn_digit(vat, weights["m_2"]) == int_at(vat, 10) and _inn_digit(
                vat, weights["m_3"][:11]
            ) == int_at(vat, 11)
        return False


class Croatia(CountryValidator):
    """Croatian OIB numbers with an ISO 7064 MOD 11-10 check digit."""

    def calc(self, vat: str) -> bool:
        return (_iso7064_product(vat, 10) + int_at(vat, 10)) % 10 == 1


class Serbia(CountryValidator):
    """Serbian PIB numbers with an ISO 7064 MOD 11-10 check digit."""

    def calc(self, vat: str) -> bool:
        return (_iso7064_product(vat, 8) + int_at(vat, 8)) % 10 == 1


BULGARIA = Bulgaria(
    "Bulgaria",
    ("BG", "BGR", "100"),
    CountryRules(
        multipliers={
            "physical": (2, 4, 8, 5, 10, 9, 7, 3, 6),
            "foreigner": (21, 19, 17, 13, 11, 9, 7, 3, 1),
            "miscellaneous": (4, 3, 2, 7, 6, 5, 4, 3, 2),
        },
        regex=(r"^(BG)(\d{9,10})$",),
    ),
)

ROMANIA = Romania(
    "Romania",
    ("RO", "ROU", "642"),
    CountryRules(
        multipliers={"common": (7, 5, 3, 2, 1, 7, 5, 3, 2)},
        regex=(r"^(RO)([1-9]\d{1,9})$",),
    ),
)

RUSSIA = Russia(
    "Russia",
    ("RU", "RUS", "643"),
    CountryRules(
        multipliers={
            "m_1": (2, 4, 10, 3, 5, 9, 4, 6, 8, 0),
            "m_2": (7, 2, 4, 10, 3, 5, 9, 4, 6, 8, 0),
            "m_3": (3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8, 0),
        },
        regex=(r"^(RU)(\d{10}|\d{12})$",),
    ),
)

CROATIA = Croatia(
    "Croatia",
    ("HR", "HRV", "191"),
    CountryRules(regex=(r"^(HR)(\d{11})$",)),
)

SERBIA = Serbia(
    "Serbia",
    ("RS", "SRB", "688"),
    CountryRules(regex=(r"^(RS)(\d{9})$",)),
)