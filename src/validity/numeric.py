"""
Fixed-width numbers.

Python integers are unbounded, so a value that is meant to fit in N bits is
only guaranteed to do so by an explicit range check. ``Int8`` .. ``Word64`` and
``Natural`` are ``int`` subclasses that carry that check.

numpy scalars are different: their dtype storage cannot hold an out-of-range
value, so they are trivially valid. Arrays are valid when every element is.
"""

from typing import ClassVar

import numpy as np

from .annotation import decorate_list
from .derive import Validity, validate
from .validation import Validation, concat_all, declare, trivial_validation


class _FixedWidthInt(Validity, int):
    bits: ClassVar[int]
    signed: ClassVar[bool]

    def validate(self) -> Validation:
        value = int(self)
        if self.signed:
            upper = 2 ** (self.bits - 1)
            return concat_all([
                declare(
                    f"The contained integer is smaller than 2^{self.bits - 1} = {upper}",
                    value <= upper - 1,
                ),
                declare(
                    f"The contained integer is greater than or equal to -2^{self.bits - 1} = {-upper}",
                    value >= -upper,
                ),
            ])
        upper = 2 ** self.bits
        return concat_all([
            declare(f"The contained integer is smaller than 2^{self.bits} = {upper}", value <= upper - 1),
            declare("The contained integer is positive", value >= 0),
        ])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Int8(_FixedWidthInt):
    bits = 8
    signed = True


class Int16(_FixedWidthInt):
    bits = 16
    signed = True


class Int32(_FixedWidthInt):
    bits = 32
    signed = True


class Int64(_FixedWidthInt):
    bits = 64
    signed = True


class Word8(_FixedWidthInt):
    bits = 8
    signed = False


class Word16(_FixedWidthInt):
    bits = 16
    signed = False


class Word32(_FixedWidthInt):
    bits = 32
    signed = False


class Word64(_FixedWidthInt):
    bits = 64
    signed = False


class Natural(Validity, int):
    """A non-negative integer of unbounded size."""

    def validate(self) -> Validation:
        return declare("The Natural is valid.", int(self) >= 0)

    def __repr__(self) -> str:
        return f"Natural({int(self)})"


# Any numpy scalar, datetime64 included, is bounded by its dtype.
validate.register(np.generic)(trivial_validation)


@validate.register(np.ndarray)
def validate_array(value: np.ndarray) -> Validation:
    """An array is valid if every element is, visited in flat (C) order."""
    return decorate_list(value.flat, validate)
