"""
Human-readable rendering of validations and checked construction.

The rendering format is stable and compared character for character in
tests. Each violation chain becomes one block: its location labels from the
outside in, then ``Violated: <reason>``. Line ``i`` of a block (``i > 0``) is
indented by ``i`` spaces and starts with ``\\ ``. Blocks are joined with a
single newline.
"""

from typing import List, Optional, TypeVar

from .derive import validate
from .validation import Validation, ViolationChain, chain_labels, chain_reason

T = TypeVar("T")


class InvalidValueError(ValueError):
    """Raised by ``pretty_validate`` when a value violates its invariants."""

    def __init__(self, value, rendered: str):
        super().__init__(rendered)
        self.value = value
        self.rendered = rendered


class UnsafeConstructionError(RuntimeError):
    """
    Raised by ``construct_valid_unsafe`` for a value that was asserted to be valid.

    This signals a programming error, not bad input, and is not meant to be
    caught.
    """


def _chain_lines(chain: ViolationChain) -> List[str]:
    return list(chain_labels(chain)) + [f"Violated: {chain_reason(chain)}"]


def _cascade(lines: List[str]) -> str:
    return "\n".join(
        line if depth == 0 else " " * depth + "\\ " + line
        for depth, line in enumerate(lines)
    )


def render(validation: Validation) -> Optional[str]:
    """
    Render ``validation`` as cascaded text.

    Returns:
        None for a valid result, otherwise one block per violation chain
    """
    if validation.is_valid:
        return None
    return "\n".join(_cascade(_chain_lines(chain)) for chain in validation.chains)


pretty_validation = render


def validation_is_valid(validation: Validation) -> bool:
    return validation.is_valid


def check_validity(value) -> List[ViolationChain]:
    """All violation chains of ``value``; an empty list is evidence of validity."""
    return list(validate(value).chains)


def is_valid(value) -> bool:
    return validate(value).is_valid


def is_invalid(value) -> bool:
    return not is_valid(value)


def pretty_validate(value: T) -> T:
    """
    Return ``value`` if it is valid.

    Raises:
        InvalidValueError: Carrying the rendered violations otherwise
    """
    rendered = render(validate(value))
    if rendered is not None:
        raise InvalidValueError(value, rendered)
    return value


def construct_valid(value: T) -> Optional[T]:
    """``value`` when it is valid, None otherwise."""
    if is_valid(value):
        return value
    return None


def construct_valid_unsafe(value: T) -> T:
    """
    Like ``construct_valid`` for call sites that already know ``value`` is valid.

    Raises:
        UnsafeConstructionError: If ``value`` turns out to be invalid
    """
    rendered = render(validate(value))
    if rendered is not None:
        raise UnsafeConstructionError(f"{value!r} is not valid\n{rendered}")
    return value
