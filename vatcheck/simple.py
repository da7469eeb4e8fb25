"""Countries checked by length or format alone, plus Canada and Brazil."""

from __future__ import annotations

import re
from dataclasses import dataclass

from vatcheck.country import CountryRules, CountryValidator


@dataclass(frozen=True, eq=False)
class FixedLengthCountry(CountryValidator):
    """A country whose only check is the length of the number."""

    length: int

    def calc(self, vat: str) -> bool:
        # Length is counted in bytes of the UTF-8 encoding.
        return len(vat.encode("utf-8")) == self.length


class Canada(CountryValidator):
    """Canadian business, GST, PST and QST numbers."""

    def calc(self, vat: str) -> bool:
        prefixed = f"CA{vat}"
        regexes = self.rules.regex
        # GST, business name, PST British Columbia, PST Manitoba,
        # PST Saskatchewan, QST Quebec.
        order = (regexes[2], regexes[1], regexes[3], regexes[0], regexes[0], regexes[4])
        return any(re.fullmatch(pattern, prefixed, re.ASCII) for pattern in order)


_BRAZIL_VALIDATORS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _remaining(total: int) -> int:
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


class Brazil(CountryValidator):
    """Brazilian CNPJ numbers with their two check digits."""

    def calc(self, vat: str) -> bool:
        if not all(char in "0123456789" for char in vat):
            return False
        numbers = [int(char) for char in vat]
        if len(set(numbers)) <= 1:
            return False
        first = sum(n * v for n, v in zip(numbers, _BRAZIL_VALIDATORS[1:]))
        second = sum(n * v for n, v in zip(numbers, _BRAZIL_VALIDATORS))
        return numbers[12] == _remaining(first) and numbers[13] == _remaining(second)


def _fixed(name: str, codes: tuple[str, ...], pattern: str, length: int) -> FixedLengthCountry:
    return FixedLengthCountry(name, codes, CountryRules(regex=(pattern,)), length)


ALBANIA = _fixed("Albania", ("AL", "ALB", "008"), r"^(AL)([JKL]\d{8}[A-Z])$", 10)
ANDORRA = _fixed(
    "Andorra",
    ("AD", "AND", "020"),
    r"^(AD)([fealecdgopuFEALECDGOPU]{1}\d{6}[fealecdgopuFEALECDGOPU]{1})$",
    8,
)
ARGENTINA = _fixed("Argentina", ("AR", "ARG", "032"), r"^(AR)(\d{11})$", 11)
BELARUS = _fixed("Belarus", ("BY", "BLR", "112"), r"^(BY)(\d{9})$", 9)
BOLIVIA = _fixed("Bolivia", ("BO", "BOL", "068"), r"^(BO)(\d{7})$", 7)
HONG_KONG = _fixed("Hong Kong", ("HK", "HKG", "344"), r"^(HK)(\d{8})$", 8)
KAZAKHSTAN = _fixed("Kazakhstan", ("KZ", "KAZ", "398"), r"^(KZ)(\d{12})$", 12)
LIECHTENSTEIN = _fixed("Liechtenstein", ("LI", "LIE", "807"), r"^(FL)(\d{11})$", 11)
NORTH_MACEDONIA = _fixed("North Macedonia", ("MK", "MKD", "807"), r"^(MK)(\d{13})$", 13)
PERU = _fixed("Peru", ("PE", "PER", "604"), r"^(PE)(\d{11})$", 11)
SAN_MARINO = _fixed("San Marino", ("SM", "SMR", "674"), r"^(SM)(\d{5})$", 5)
TURKEY = _fixed("Turkey", ("TR", "TUR", "792"), r"^(TR)(\d{10})$", 10)
UKRAINE = _fixed("Ukraine", ("UA", "UKR", "804"), r"^(UA)(\d{12})$", 12)

CANADA = Canada(
    "Canada",
    ("CA", "CAN", "124"),
    CountryRules(
        regex=(
            r"^(CA)(\d{7})$",
            r"^(CA)(\d{9})$",
            r"^(CA)(\d{9}R[C|M|P|T]\d{4})$",
            r"^(CA)(PST\d{8})$",
            r"^(CA)(\d{10}TQ\d{4})$",
        )
    ),
)

BRAZIL = Brazil(
    "Brazil",
    ("BR", "BRA", "076"),
    CountryRules(regex=(r"^(BR)?(\d{14}|\d{2}\.\d{3}\.\d{3}\/\d{4}-\d{2})$",)),
)

FIXED_LENGTH_COUNTRIES = (
    ALBANIA,
    ANDORRA,
    ARGENTINA,
    BELARUS,
    BOLIVIA,
    HONG_KONG,
    KAZAKHSTAN,
    LIECHTENSTEIN,
    NORTH_MACEDONIA,
    PERU,
    SAN_MARINO,
    TURKEY,
    UKRAINE,
)