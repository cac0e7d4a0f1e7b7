"""
Invariants beyond the type system, checked uniformly.

Importing the package registers the checks for built-in, standard library
and numpy types.
"""

from .validation import (
    Location,
    Validation,
    Violated,
    ViolationChain,
    check,
    concat,
    concat_all,
    declare,
    invalid,
    trivial_validation,
    valid,
)
from .annotation import decorate, decorate_list
from .derive import NoValidityInstance, Shape, Validity, annotate, delve, generic_validate, shape_of, type_shape, validate
from .instances import (
    is_line_separator,
    is_single_line,
    is_utf16_surrogate_code_point,
    validate_char_not_line_separator,
    validate_char_not_utf16_surrogate_code_point,
    validate_not_infinite,
    validate_not_nan,
    validate_string_single_line,
)
from .numeric import Int8, Int16, Int32, Int64, Natural, Word8, Word16, Word32, Word64
from .diagnostics import (
    InvalidValueError,
    UnsafeConstructionError,
    check_validity,
    construct_valid,
    construct_valid_unsafe,
    is_invalid,
    is_valid,
    pretty_validate,
    pretty_validation,
    render,
    validation_is_valid,
)

__version__ = "0.1.0"

__all__ = [
    "Location",
    "Validation",
    "Violated",
    "ViolationChain",
    "check",
    "concat",
    "concat_all",
    "declare",
    "invalid",
    "trivial_validation",
    "valid",
    "decorate",
    "decorate_list",
    "NoValidityInstance",
    "Shape",
    "Validity",
    "annotate",
    "delve",
    "generic_validate",
    "shape_of",
    "type_shape",
    "validate",
    "is_line_separator",
    "is_single_line",
    "is_utf16_surrogate_code_point",
    "validate_char_not_line_separator",
    "validate_char_not_utf16_surrogate_code_point",
    "validate_not_infinite",
    "validate_not_nan",
    "validate_string_single_line",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Natural",
    "Word8",
    "Word16",
    "Word32",
    "Word64",
    "InvalidValueError",
    "UnsafeConstructionError",
    "check_validity",
    "construct_valid",
    "construct_valid_unsafe",
    "is_invalid",
    "is_valid",
    "pretty_validate",
    "pretty_validation",
    "render",
    "validation_is_valid",
]
