"""
Structural derivation of invariant checks.

``validate`` is the invariant-check capability: a dispatch table keyed by type.
Types register an implementation with ``validate.register``, subclass
``Validity`` and override ``validate``, or get a derived implementation when
they decompose into a structural shape:

- UNIT: ``None``, the empty tuple, a dataclass or NamedTuple without fields
- VOID: a type with no possible values (an empty ``Enum``, ``NoReturn``)
- PRODUCT: dataclasses and NamedTuples, fields in declared order
- SUM: ``Enum`` classes and ``Union`` types
- LEAF: anything with its own invariant check

A sum type built from a class hierarchy needs no special handling: the value
always carries its concrete class, so only that alternative's fields are
derived and the others are never looked at.

Derivation only composes the invariants of the sub-parts. Cross-field
invariants have to be added by hand:

    @dataclass(frozen=True)
    class Interval(Validity):
        low: int
        high: int

        def validate(self) -> Validation:
            return concat(
                generic_validate(self),
                check(self.low <= self.high, "low is at most high"),
            )
"""

import dataclasses
import enum
import types
import typing
from functools import singledispatch
from typing import Any, List, Tuple

from .annotation import decorate
from .logging import get_logger
from .validation import Validation, annotate_validation, concat_all, valid

logger = get_logger(__name__)


class NoValidityInstance(TypeError):
    """Raised when a value has neither a registered nor a derivable invariant check."""


class Shape(enum.Enum):
    UNIT = "unit"
    VOID = "void"
    PRODUCT = "product"
    SUM = "sum"
    LEAF = "leaf"


class Validity:
    """
    Base class for types that declare their own invariants.

    The default ``validate`` is the structurally derived one, so a dataclass
    that only needs its fields checked can subclass ``Validity`` and stop there.
    """

    def validate(self) -> Validation:
        return generic_validate(self)


@singledispatch
def validate(value: Any) -> Validation:
    """Compute every reason why ``value`` is invalid."""
    if _is_product_value(value):
        logger.debug(f"Deriving validation for unregistered {type(value).__name__}")
        return generic_validate(value)
    raise NoValidityInstance(
        f"No invariant check registered or derivable for {type(value).__qualname__}"
    )


@validate.register(Validity)
def _validate_validity(value: Validity) -> Validation:
    return value.validate()


def annotate(value: Any, label: str) -> Validation:
    """
    Validate a sub-part of a value and record where it sits.

    Example:

        concat_all([
            annotate(a, "The first element of the tuple"),
            annotate(b, "The second element of the tuple"),
        ])
    """
    return annotate_validation(validate(value), label)


def delve(label: str, value: Any) -> Validation:
    """``annotate`` with the arguments flipped."""
    return annotate(value, label)


def _is_product_value(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or is_namedtuple_type(type(value))


def is_namedtuple_type(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields")


def _has_own_check(tp: type) -> bool:
    if isinstance(tp, type) and issubclass(tp, Validity):
        return tp.validate is not Validity.validate
    if is_namedtuple_type(tp) and tp not in validate.registry:
        # inherits the plain tuple check, but is still a product
        return False
    return validate.dispatch(tp) is not validate.dispatch(object)


def product_fields(value: Any) -> List[Tuple[str, Any]]:
    """Named fields of a product value in declared order."""
    if dataclasses.is_dataclass(value):
        return [(field.name, getattr(value, field.name)) for field in dataclasses.fields(value)]
    return list(zip(type(value)._fields, value))


def type_shape(tp: Any) -> Shape:
    """
    Classify a type by how its values are validated.

    Raises:
        NoValidityInstance: If the type has no check and no structural shape
    """
    if tp is None or tp is type(None):
        return Shape.UNIT
    if tp is typing.NoReturn or tp is getattr(typing, "Never", typing.NoReturn):
        return Shape.VOID
    if typing.get_origin(tp) is typing.Union or isinstance(tp, types.UnionType):
        return Shape.SUM
    if not isinstance(tp, type):
        raise NoValidityInstance(f"Cannot determine the shape of {tp!r}")
    if issubclass(tp, enum.Enum):
        return Shape.SUM if len(tp) else Shape.VOID
    if _has_own_check(tp):
        return Shape.LEAF
    if dataclasses.is_dataclass(tp):
        return Shape.PRODUCT if dataclasses.fields(tp) else Shape.UNIT
    if is_namedtuple_type(tp):
        return Shape.PRODUCT if tp._fields else Shape.UNIT
    raise NoValidityInstance(f"Cannot determine the shape of {tp.__qualname__}")


def shape_of(value: Any) -> Shape:
    """Shape of the type of ``value``, with the empty tuple as a unit."""
    if isinstance(value, tuple) and not is_namedtuple_type(type(value)) and not value:
        return Shape.UNIT
    return type_shape(type(value))


def generic_validate(value: Any) -> Validation:
    """
    Validate ``value`` by recursing over its structural shape.

    A product validates each field with ``annotate(field, field_name)`` in
    declared order and wraps the whole in the constructor (class) name. Leaves
    inside a product delegate to their own checks.

    Raises:
        NoValidityInstance: If ``value`` is neither a product, a unit nor an
            enum member
    """
    tp = type(value)
    if isinstance(value, enum.Enum):
        # sum of unit alternatives
        return valid()
    if value is None or (isinstance(value, tuple) and not is_namedtuple_type(tp) and not value):
        return valid()
    if not _is_product_value(value):
        raise NoValidityInstance(f"{tp.__qualname__} has no structural shape to derive from")
    fields = product_fields(value)
    return decorate(
        tp.__name__,
        concat_all(annotate(field_value, name) for name, field_value in fields),
    )
