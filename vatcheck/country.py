"""Shared country description and helpers used by every VAT rule set."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

_ASCII_DIGITS = "0123456789"


@dataclass(frozen=True)
class CountryRules:
    """Formats, weights and tables that drive a country's VAT check."""

    regex: tuple[str, ...] = ()
    multipliers: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    type_formats: Mapping[str, str] = field(default_factory=dict)
    lookup: tuple[int, ...] = ()
    check: str = ""
    additional: tuple[str, ...] = ()


@dataclass(frozen=True, eq=False)
class CountryValidator(ABC):
    """A country whose VAT numbers can be checked.

    ``calc`` receives the number without its country prefix, as captured by
    the second group of one of the country's ``rules.regex`` patterns.
    """

    name: str
    codes: tuple[str, ...]
    rules: CountryRules

    @abstractmethod
    def calc(self, vat: str) -> bool:
        """Return whether the prefix-free VAT number passes the checksum."""


def string_at(text: str, index: int) -> str:
    """Return the character at ``index``; raise IndexError when out of range."""
    if index < 0 or index >= len(text):
        raise IndexError(f"index {index} out of range for {text!r}")
    return text[index]


def int_at(text: str, index: int) -> int:
    """Return the digit at ``index``, or 0 when that character is not a digit."""
    char = string_at(text, index)
    return int(char) if char in _ASCII_DIGITS else 0