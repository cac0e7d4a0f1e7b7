"""
Invariant checks for built-in and standard library types.

Importing this module registers the checks with ``validate``.
"""

import datetime
import decimal
import enum
import math
from fractions import Fraction
from typing import Any

from .annotation import decorate_list, tuple_element_label
from .derive import annotate, generic_validate, validate, is_namedtuple_type
from .validation import Validation, concat_all, declare, trivial_validation


# Trivially valid: the runtime representation admits no invalid values.
# Floats are trivially valid, NaN and infinities included; use
# validate_not_nan / validate_not_infinite when a type needs more.
for _trivial in (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    type(None),
    enum.Enum,
    decimal.Decimal,
    datetime.date,
    datetime.time,
    datetime.timedelta,
):
    validate.register(_trivial)(trivial_validation)


@validate.register(tuple)
def validate_tuple(value: tuple) -> Validation:
    """Any tuple is valid if all of its elements are valid."""
    if is_namedtuple_type(type(value)):
        return generic_validate(value)
    size = len(value)
    return concat_all(
        annotate(element, tuple_element_label(index, size))
        for index, element in enumerate(value)
    )


@validate.register(list)
def validate_list(value: list) -> Validation:
    """
    A list is valid if all of its elements are valid.

    The empty list is valid. Types for which it should not be need a check of
    their own.
    """
    return decorate_list(value, validate)


@validate.register(dict)
def validate_dict(value: dict) -> Validation:
    """A mapping is valid if every key and every value is valid."""
    return decorate_list(
        value.items(),
        lambda item: concat_all([annotate(item[0], "The key"), annotate(item[1], "The value")]),
    )


@validate.register(set)
@validate.register(frozenset)
def validate_set(value: Any) -> Validation:
    """
    A set is valid if all of its elements are valid.

    Elements are visited in ``repr`` order, not iteration order, so that the
    report does not depend on the hash seed.
    """
    return decorate_list(sorted(value, key=repr), validate)


@validate.register(Fraction)
def validate_fraction(value: Fraction) -> Validation:
    """Valid if both parts are valid, the denominator is positive and the ratio is in lowest terms."""
    numerator, denominator = value.numerator, value.denominator
    return concat_all([
        annotate(numerator, "The numerator"),
        annotate(denominator, "The denominator"),
        declare("The denominator is strictly positive.", denominator > 0),
        declare(
            "The Ratio is normalised.",
            denominator != 0 and math.gcd(numerator, denominator) == 1,
        ),
    ])


def is_utf16_surrogate_code_point(char: str) -> bool:
    return ord(char) & 0x1FF800 == 0xD800


def validate_char_not_utf16_surrogate_code_point(char: str) -> Validation:
    return declare(
        "The character is not a UTF16 surrogate codepoint",
        not is_utf16_surrogate_code_point(char),
    )


def is_line_separator(char: str) -> bool:
    return char in ("\n", "\r")


def validate_char_not_line_separator(char: str) -> Validation:
    return declare("The character is not a line separator", not is_line_separator(char))


def is_single_line(text: str) -> bool:
    return not any(is_line_separator(char) for char in text)


def validate_string_single_line(text: str) -> Validation:
    """Report every line separator in ``text`` by its index."""
    return decorate_list(text, validate_char_not_line_separator)


def validate_not_nan(number: float) -> Validation:
    return declare("The RealFloat is not NaN.", not math.isnan(number))


def validate_not_infinite(number: float) -> Validation:
    return declare("The RealFloat is not infinite.", not math.isinf(number))
