"""Entry point: clean a VAT number, find its country and check it."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from vatcheck.central import CZECH_REPUBLIC, HUNGARY, POLAND, SLOVAKIA, SLOVENIA
from vatcheck.country import CountryValidator
from vatcheck.eastern import BULGARIA, CROATIA, ROMANIA, RUSSIA, SERBIA
from vatcheck.northern import DENMARK, ESTONIA, FINLAND, LATVIA, LITHUANIA, NORWAY, SWEDEN
from vatcheck.simple import (
    ALBANIA,
    ANDORRA,
    ARGENTINA,
    BELARUS,
    BOLIVIA,
    BRAZIL,
    CANADA,
    HONG_KONG,
    KAZAKHSTAN,
    LIECHTENSTEIN,
    NORTH_MACEDONIA,
    PERU,
    SAN_MARINO,
    TURKEY,
    UKRAINE,
)
from vatcheck.southern import CYPRUS, GREECE, ITALY, MALTA, PORTUGAL, SPAIN
from vatcheck.western import (
    AUSTRIA,
    BELGIUM,
    FRANCE,
    GERMANY,
    IRELAND,
    LUXEMBOURG,
    NETHERLANDS,
    SWITZERLAND,
    UNITED_KINGDOM,
)

ALL_COUNTRIES: tuple[CountryValidator, ...] = (
    ALBANIA,
    ANDORRA,
    ARGENTINA,
    AUSTRIA,
    BELARUS,
    BELGIUM,
    BOLIVIA,
    BRAZIL,
    BULGARIA,
    CANADA,
    CROATIA,
    CYPRUS,
    CZECH_REPUBLIC,
    DENMARK,
    ESTONIA,
    FINLAND,
    FRANCE,
    GERMANY,
    GREECE,
    HONG_KONG,
    HUNGARY,
    IRELAND,
    ITALY,
    KAZAKHSTAN,
    LATVIA,
    LIECHTENSTEIN,
    LITHUANIA,
    LUXEMBOURG,
    MALTA,
    NETHERLANDS,
    NORTH_MACEDONIA,
    NORWAY,
    PERU,
    POLAND,
    PORTUGAL,
    ROMANIA,
    RUSSIA,
    SAN_MARINO,
    SERBIA,
    SLOVAKIA,
    SLOVENIA,
    SPAIN,
    SWEDEN,
    SWITZERLAND,
    TURKEY,
    UKRAINE,
    UNITED_KINGDOM,
)

# Countries whose numbers are written without a country prefix.
_UNPREFIXED_COUNTRY_NAMES = frozenset({BRAZIL.name})

_EXTRA_CHARS = re.compile(r"[\t\n\f\r \-./]+")
_TWO_LEADING_DIGITS = re.compile(r"\d{2}", re.ASCII)


class UnsupportedCountryError(ValueError):
    """No supported country matches the VAT number."""


@dataclass(frozen=True)
class CheckResult:
    """Outcome of validating one VAT number."""

    value: str
    is_valid: bool
    is_supported_country: bool
    country: CountryValidator | None = None


def remove_extra_chars(vat: str) -> str:
    """Upper-case the number and drop whitespace, dashes, dots and slashes."""
    return _EXTRA_CHARS.sub("", vat.upper())


def country_codes(country: CountryValidator) -> list[str]:
    """Prefixes a number of ``country`` may start with, including EL and FL."""
    codes = list(country.codes)
    if country.name == GREECE.name:
        codes.append("EL")
    elif country.name == LIECHTENSTEIN.name:
        codes.append("FL")
    return codes


def _starts_with_code(vat: str, country: CountryValidator) -> bool:
    return any(vat.startswith(code) for code in country_codes(country))


def find_country(vat: str, countries: Iterable[CountryValidator]) -> CountryValidator:
    """Return the first country the cleaned number belongs to."""
    for country in countries:
        if _starts_with_code(vat, country):
            return country
        if country.name in _UNPREFIXED_COUNTRY_NAMES and _TWO_LEADING_DIGITS.match(vat):
            return country
    raise UnsupportedCountryError("cannot retrieve a supported country")


def _is_vat_valid(vat: str, country: CountryValidator) -> bool:
    for pattern in country.rules.regex:
        match = re.search(pattern, vat, re.ASCII)
        if match:
            return country.calc(match.group(2))
    return False


def validate(vat: str, *args: CountryValidator | None) -> CheckResult:
    """Validate ``vat`` against the given countries, or all of them if none are given.

    A leading ``None`` among the countries also selects all of them. Raises
    UnsupportedCountryError when no country matches the number.
    """
    if not vat.strip(" "):
        return CheckResult(vat, False, False, None)

    clean = remove_extra_chars(vat)
    candidates = args if args and args[0] is not None else ALL_COUNTRIES
    country = find_country(clean, candidates)
    return CheckResult(clean, _is_vat_valid(clean, country), True, country)