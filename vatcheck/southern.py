"""VAT rules for southern European countries."""

from __future__ import annotations

import re

from vatcheck.country import CountryRules, CountryValidator, int_at, string_at

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")

# The letter order is the algorithm itself; it must not be sorted.
_NIF_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 for anything that is not one."""
    return int(text) if _SIGNED_INT.fullmatch(text) else 0


def _matches(pattern: str, text: str) -> bool:
    return re.search(pattern, text, re.ASCII) is not None


def _digit_sum(value: int) -> int:
    return value // 10 + value % 10 if value > 9 else value


class Italy(CountryValidator):
    """Italian partita IVA numbers with a Luhn-style check digit."""

    def calc(self, vat: str) -> bool:
        if _atoi(vat[:7]) == 0:
            return False

        # The issuing office cannot exceed 201, except for 888 and 999.
        office = _atoi(vat[7:10])
        if office < 1 or (office > 201 and office not in (888, 999)):
            return False

        weights = self.rules.multipliers["common"]
        total = sum(
            _digit_sum(int_at(vat, position) * weight)
            for position, weight in enumerate(weights)
        )
        check = 10 - total % 10
        if check > 9:
            check = 0
        return check == int_at(vat, 10)


def _weighted_digit_sum(vat: str, weights: tuple[int, ...]) -> int:
    """Digit-summed products of the seven digits after the leading letter."""
    return sum(
        _digit_sum(int_at(vat, position + 1) * weight)
        for position, weight in enumerate(weights)
    )


def _is_national_juridical_entity(vat: str, weights: tuple[int, ...]) -> bool:
    check = 10 - _weighted_digit_sum(vat, weights) % 10
    if check == 10:
        check = 0
    return check == int_at(vat, len(vat) - 1)


def _is_non_national_juridical_entity(vat: str, weights: tuple[int, ...]) -> bool:
    check = 10 - _weighted_digit_sum(vat, weights) % 10
    return chr(check + 64) == string_at(vat, len(vat) - 1)


def _is_personal_y_to_z(vat: str) -> bool:
    number = vat
    first = string_at(vat, 0)
    if first == "Y":
        number = vat.replace("Y", "1")
    if first == "Z":
        number = vat.replace("Z", "2")

    last = len(number) - 1
    expected = string_at(_NIF_LETTERS, _atoi(number[:last]) % 23)
    return string_at(number, last) == expected


def _is_personal_k_to_x(vat: str) -> bool:
    expected = string_at(_NIF_LETTERS, _atoi(vat[1 : len(vat) - 2]) % 23)
    return string_at(vat, len(vat) - 1) == expected


class Spain(CountryValidator):
    """Spanish CIF and NIF numbers for entities and individuals."""

    def calc(self, vat: str) -> bool:
        additional = self.rules.additional
        if not additional:
            return False

        weights = self.rules.multipliers["common"]
        if _matches(additional[0], vat):
            return _is_national_juridical_entity(vat, weights)
        if _matches(additional[1], vat):
            return _is_non_national_juridical_entity(vat, weights)
        if _matches(additional[2], vat):
            return _is_personal_y_to_z(vat)
        if _matches(additional[3], vat):
            return _is_personal_k_to_x(vat)
        return False


class Portugal(CountryValidator):
    """Portuguese NIF numbers with a modulus 11 check digit."""

    def calc(self, vat: str) -> bool:
        # The weights apply to the character codes; the constant offset of
        # the digit '0' vanishes modulo 11 for these weights.
        data = vat.encode("utf-8")
        weights = self.rules.multipliers["common"]
        total = sum(data[position] * weight for position, weight in enumerate(weights))

        check = 11 - total % 11
        if check > 9:
            check = 0

        last = chr(data[-1])
        if last not in "0123456789":
            return False
        return check == int(last)


class Malta(CountryValidator):
    """Maltese numbers whose last two digits form a modulus 37 check."""

    def calc(self, vat: str) -> bool:
        weights = self.rules.multipliers["common"]
        total = sum(int_at(vat, position) * weight for position, weight in enumerate(weights))
        return 37 - total % 37 == _atoi(vat[6:])


class Greece(CountryValidator):
    """Greek numbers, written with the EL prefix, with a modulus 11 check."""

    def calc(self, vat: str) -> bool:
        padded = "0" + vat if len(vat) == 8 else vat
        weights = self.rules.multipliers["common"]
        total = sum(
            int_at(padded, position) * weight for position, weight in enumerate(weights)
        )
        check = total % 11
        if check > 9:
            check = 0
        return check == int_at(vat, 8)


_CYPRUS_EVEN_DIGITS = {0: 1, 1: 0, 2: 5, 3: 7, 4: 9}


class Cyprus(CountryValidator):
    """Cypriot numbers ending in a check letter."""

    def calc(self, vat: str) -> bool:
        if _atoi(vat[:2]) == 12:
            return False

        total = 0
        for position in range(8):
            digit = int_at(vat, position)
            if position % 2 == 0:
                digit = _CYPRUS_EVEN_DIGITS.get(digit, digit * 2 + 3)
            total += digit

        return chr(total % 26 + 65) == string_at(vat, 8)


ITALY = Italy(
    "Italy",
    ("IT", "ITA", "380"),
    CountryRules(
        multipliers={"common": (1, 2, 1, 2, 1, 2, 1, 2, 1, 2)},
        regex=(r"^(IT)(\d{11})$",),
    ),
)

SPAIN = Spain(
    "Spain",
    ("ES", "ESP", "724"),
    CountryRules(
        multipliers={"common": (2, 1, 2, 1, 2, 1, 2)},
        regex=(
            r"^(ES)([A-Z]\d{8})$",
            r"^(ES)([A-HN-SW]\d{7}[A-J])$",
            r"^(ES)([0-9YZ]\d{7}[A-Z])$",
            r"^(ES)([KLMX]\d{7}[A-Z])$",
        ),
        additional=(
            r"^[A-H|J|U|V]\d{8}$",
            r"^[A-H|N-S|W]\d{7}[A-J]$",
            r"^[0-9|Y|Z]\d{7}[A-Z]$",
            r"^[K|L|M|X]\d{7}[A-Z]$",
        ),
    ),
)

PORTUGAL = Portugal(
    "Portugal",
    ("PT", "PRT", "020"),
    CountryRules(
        multipliers={"common": (9, 8, 7, 6, 5, 4, 3, 2)},
        regex=(r"^(PT)(\d{9})$",),
    ),
)

MALTA = Malta(
    "Malta",
    ("MT", "MLT", "470"),
    CountryRules(
        multipliers={"common": (3, 4, 6, 7, 8, 9)},
        regex=(r"^(MT)([1-9]\d{7})$",),
    ),
)

GREECE = Greece(
    "Greece",
    ("GR", "GRC", "300"),
    CountryRules(
        multipliers={"common": (256, 128, 64, 32, 16, 8, 4, 2)},
        regex=(r"^(EL)(\d{9})$",),
    ),
)

CYPRUS = Cyprus(
    "Cyprus",
    ("CY", "CYP", "196"),
    CountryRules(regex=(r"^(CY)([0-59]\d{7}[A-Z])$",)),
)