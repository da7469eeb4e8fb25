from dataclasses import replace

import pytest

from vatcheck.northern import (
    DENMARK,
    ESTONIA,
    FINLAND,
    LATVIA,
    LITHUANIA,
    NORWAY,
    SWEDEN,
)

DIGITS = "0123456789"


def _passing_digits(country, prefix, suffix=""):
    return [digit for digit in DIGITS if country.calc(prefix + digit + suffix)]


@pytest.mark.parametrize(
    "country, number, suffix_length",
    [
        (DENMARK, "88146328", 0),
        (ESTONIA, "100931558", 0),
        (FINLAND, "20774740", 0),
        (SWEDEN, "556188840401", 2),
        (NORWAY, "974761076", 0),
        (LATVIA, "40003009497", 0),
        (LITHUANIA, "119511515", 0),
        (LITHUANIA, "100001919017", 0),
    ],
)
def test_known_number_has_unique_check_digit(country, number, suffix_length):
    end = len(number) - suffix_length
    prefix, digit, suffix = number[: end - 1], number[end - 1], number[end:]
    assert _passing_digits(country, prefix, suffix) == [digit]


@pytest.mark.parametrize(
    "country, prefix, suffix",
    [
        (ESTONIA, "10000000", ""),
        (ESTONIA, "10987654", ""),
        (FINLAND, "1234567", ""),
        (FINLAND, "0000000", ""),
        (SWEDEN, "123456789", "01"),
        (SWEDEN, "999999999", "01"),
        (LATVIA, "4123456789", ""),
        (LATVIA, "9876543210", ""),
        (LITHUANIA, "12345671", ""),
        (LITHUANIA, "99999991", ""),
        (LITHUANIA, "12345678901", ""),
    ],
)
def test_exactly_one_check_digit_passes(country, prefix, suffix):
    assert len(_passing_digits(country, prefix, suffix)) == 1


@pytest.mark.parametrize("prefix", ["1234567", "0000000", "9999999", "8814632"])
def test_denmark_at_most_one_check_digit(prefix):
    passing = [digit for digit in DIGITS if DENMARK.calc(prefix + digit)]
    assert len(passing) <= 1


def test_norway_computed_ten_rejects_every_digit():
    passing = [digit for digit in DIGITS if NORWAY.calc("00000040" + digit)]
    assert passing == []


def test_norway_at_most_one_check_digit():
    for prefix in ("12345678", "97476107", "00000000"):
        passing = [digit for digit in DIGITS if NORWAY.calc(prefix + digit)]
        assert len(passing) <= 1


def test_latvia_natural_person_checks_only_date_shape():
    assert all(LATVIA.calc("3112991234" + digit) for digit in DIGITS)
    assert not any(LATVIA.calc("3152991234" + digit) for digit in DIGITS)


def test_lithuania_eighth_character_must_be_one():
    passing = [digit for digit in DIGITS if LITHUANIA.calc("11951152" + digit)]
    assert passing == []


@pytest.mark.parametrize("length", [8, 10, 11, 13])
def test_lithuania_rejects_other_lengths(length):
    assert not any(LITHUANIA.calc("1" * (length - 1) + digit) for digit in DIGITS)


def test_lithuania_temporary_payer_needs_check_rule():
    without_check = replace(LITHUANIA, rules=replace(LITHUANIA.rules, check=""))
    assert _passing_digits(without_check, "10000191901") == []
    assert without_check.calc("119511515") == LITHUANIA.calc("119511515")


def test_changing_a_digit_breaks_estonia_number():
    valid = "100931558"
    assert ESTONIA.calc(valid)
    assert not ESTONIA.calc("100931568")


def test_short_input_raises_index_error():
    with pytest.raises(IndexError):
        DENMARK.calc("123")


@pytest.mark.parametrize(
    "country, name, codes",
    [
        (DENMARK, "Denmark", ("DK", "DNK", "208")),
        (ESTONIA, "Estonia", ("EE", "EST", "233")),
        (FINLAND, "Finland", ("FI", "FIN", "246")),
        (SWEDEN, "Sweden", ("SE", "SWE", "752")),
        (NORWAY, "Norway", ("NO", "NOR", "578")),
        (LATVIA, "Latvia", ("LV", "LVA", "428")),
        (LITHUANIA, "Lithuania", ("LT", "LTU", "440")),
    ],
)
def test_country_identity(country, name, codes):
    assert (country.name, country.codes) == (name, codes)