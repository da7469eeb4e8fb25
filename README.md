# vatcheck

Offline validation of VAT and tax identification numbers.

`vatcheck` checks the format of a number and, where the country defines one,
its check digits. It makes no network lookups, so it tells you whether a
number *could* be valid, not whether it is registered with a tax authority.

## Supported countries

Albania, Andorra, Argentina, Austria, Belarus, Belgium, Bolivia, Brazil,
Bulgaria, Canada, Croatia, Cyprus, Czech Republic, Denmark, Estonia,
Finland, France, Germany, Greece, Hong Kong, Hungary, Ireland, Italy,
Kazakhstan, Latvia, Liechtenstein, Lithuania, Luxembourg, Malta,
Netherlands, North Macedonia, Norway, Peru, Poland, Portugal, Romania,
Russia, San Marino, Serbia, Slovakia, Slovenia, Spain, Sweden, Switzerland,
Turkey, Ukraine and the United Kingdom.

For some of them (for example Albania, Argentina, Hong Kong, Turkey) only
the format and length are checked, as they have no check digit rule here.

## Installation

```
pip install vatcheck
```

## Usage

```python
from vatcheck.validator import validate

result = validate("DE 136 695 976")
print(result.value)                 # "DE136695976"
print(result.is_valid)              # True or False
print(result.is_supported_country)  # True
print(result.country.name)          # "Germany"
```

`validate` returns a frozen `CheckResult` with the fields `value`,
`is_valid`, `is_supported_country` and `country`.

Before checking, the input is upper-cased and whitespace, dashes, dots and
slashes are removed (`remove_extra_chars`). The cleaned value is what
`result.value` holds.

The country is found by prefix, trying the countries in order
(`find_country`). Greek numbers use the `EL` prefix and Liechtenstein
numbers the `FL` prefix (`country_codes` lists every accepted prefix).
Brazilian CNPJ numbers are written without a prefix: when Brazil is among
the countries tried, a number that starts with two digits and has not
already matched an earlier country is taken as Brazilian.

### Restricting the countries

Each country is available as a ready-made validator constant in the module
that holds its rules: `vatcheck.simple`, `vatcheck.western`,
`vatcheck.southern`, `vatcheck.northern`, `vatcheck.central` and
`vatcheck.eastern`. Pass one or more of them to check only against those:

```python
from vatcheck.southern import SPAIN
from vatcheck.validator import validate
from vatcheck.western import FRANCE

result = validate("ESA13585625", SPAIN, FRANCE)
```

With no countries given, or with `None` as the first one, every country in
`vatcheck.validator.ALL_COUNTRIES` is tried.

### Errors

An empty string, or one made only of spaces, is not an error: it gives a
result that is neither valid nor from a supported country, with the input
kept as `value` and `country` set to `None`. A number that matches none of
the countries being tried raises `UnsupportedCountryError`, a subclass of
`ValueError`:

```python
from vatcheck.validator import UnsupportedCountryError, validate

try:
    validate("XX123456789")
except UnsupportedCountryError:
    ...
```

## What it does not do

There is no command-line tool and no online lookup against VIES or any
national register; `vatcheck` is a library of offline checks only.

## Running the tests

```
pip install -e ".[test]"
pytest
```