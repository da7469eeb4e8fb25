"""VAT rules for central European countries."""

from __future__ import annotations

import re

from vatcheck.country import CountryRules, CountryValidator, int_at

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    return int(text) if _SIGNED_INT.fullmatch(text) else 0


def _matches(pattern: str, text: str) -> bool:
    return re.search(pattern, text, re.ASCII) is not None


def _weighted_sum(vat: str, weights: tuple[int, ...], offset: int = 0) -> int:
    """Sum of digits, starting at ``offset``, each multiplied by its weight."""
    return sum(
        int_at(vat, position + offset) * weight for position, weight in enumerate(weights)
    )


def _is_legal_entity(vat: str, weights: tuple[int, ...], pattern: str) -> bool:
    if not _matches(pattern, vat):
        return False
    check = 11 - _weighted_sum(vat, weights) % 11
    if check == 10:
        check = 0
    elif check == 11:
        check = 1
    return check == int_at(vat, 7)


def _is_individual_type1(vat: str, pattern: str) -> bool:
    if not _matches(pattern, vat):
        return False
    return _atoi(vat[:2]) <= 62


def _is_individual_type2(
    vat: str, weights: tuple[int, ...], pattern: str, lookup: tuple[int, ...]
) -> bool:
    if not _matches(pattern, vat):
        return False
    total = _weighted_sum(vat, weights, offset=1)
    # Distance to the next multiple of 11 strictly above total, less one.
    pointer = 10 - total % 11
    if not lookup:
        return False
    return lookup[pointer] == int_at(vat, 8)


def _is_individual_type3(vat: str, pattern: str) -> bool:
    if not _matches(pattern, vat):
        return False
    pairs = (vat[:2], vat[2:4], vat[4:6], vat[6:8], vat[8:])
    pair_sum = sum(_atoi(pair) for pair in pairs)
    return pair_sum % 11 == 0 and _atoi(vat) % 11 == 0


class CzechRepublic(CountryValidator):
    """Czech DIC numbers for legal entities and three kinds of individuals."""

    def calc(self, vat: str) -> bool:
        additional = self.rules.additional
        if not additional:
            return False
        weights = self.rules.multipliers["common"]
        return (
            _is_legal_entity(vat, weights, additional[0])
            or _is_individual_type2(vat, weights, additional[2], self.rules.lookup)
            or _is_individual_type3(vat, additional[3])
            or _is_individual_type1(vat, additional[1])
        )


class Slovakia(CountryValidator):
    """Slovak numbers: the whole number is divisible by 11."""

    def calc(self, vat: str) -> bool:
        return _atoi(vat) % 11 == 0


class Hungary(CountryValidator):
    """Hungarian numbers with a modulus 10 check digit."""

    def calc(self, vat: str) -> bool:
        check = 10 - _weighted_sum(vat, self.rules.multipliers["common"]) % 10
        if check == 10:
            check = 0
        return check == int_at(vat, 7)


class Poland(CountryValidator):
    """Polish NIP numbers with a modulus 11 check digit."""

    def calc(self, vat: str) -> bool:
        check = _weighted_sum(vat, self.rules.multipliers["common"]) % 11
        if check > 9:
            check = 0
        return check == int_at(vat, 9)


class Slovenia(CountryValidator):
    """Slovenian numbers with a modulus 11 check digit."""

    def calc(self, vat: str) -> bool:
        check = 11 - _weighted_sum(vat, self.rules.multipliers["common"]) % 11
        if check == 10:
            check = 0
        return check != 11 and check == int_at(vat, 7)


CZECH_REPUBLIC = CzechRepublic(
    "Czech Republic",
    ("CZ", "CZE", "203"),
    CountryRules(
        multipliers={"common": (8, 7, 6, 5, 4, 3, 2)},
        lookup=(8, 7, 6, 5, 4, 3, 2, 1, 0, 9, 8),
        regex=(r"^(CZ)(\d{8,10})(\d{3})?$",),
        additional=(
            r"^\d{8}$",
            r"^[0-5][0-9][0|1|5|6]\d[0-3]\d\d{3}$",
            r"^6\d{8}$",
            r"^\d{2}[0-3|5-8]\d[0-3]\d\d{4}$",
        ),
    ),
)

SLOVAKIA = Slovakia(
    "Slovakia",
    ("SK", "SVK", "703"),
    CountryRules(regex=(r"^(SK)([1-9]\d[2346-9]\d{7})$",)),
)

HUNGARY = Hungary(
    "Hungary",
    ("HU", "HUN", "348"),
    CountryRules(
        multipliers={"common": (9, 7, 3, 1, 9, 7, 3)},
        regex=(r"^(HU)(\d{8})$",),
    ),
)

POLAND = Poland(
    "Poland",
    ("PL", "POL", "616"),
    CountryRules(
        multipliers={"common": (6, 5, 7, 2, 3, 4, 5, 6, 7)},
        regex=(r"^(PL)(\d{10})$",),
    ),
)

SLOVENIA = Slovenia(
    "Slovenia",
    ("SI", "SVN", "705"),
    CountryRules(
        multipliers={"common": (8, 7, 6, 5, 4, 3, 2)},
        regex=(r"^(SI)([1-9]\d{7})$",),
    ),
)