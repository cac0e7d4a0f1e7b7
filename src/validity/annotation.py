"""Location labels for accumulated violations."""

from typing import Callable, Iterable, TypeVar

from .validation import Validation, annotate_validation, concat_all

T = TypeVar("T")

_TUPLE_NAMES = {
    2: "tuple",
    3: "triple",
    4: "quadruple",
    5: "quintuple",
    6: "sextuple",
}

_ORDINALS = ("first", "second", "third", "fourth", "fifth", "sixth")


def decorate(label: str, validation: Validation) -> Validation:
    """Decorate an already computed validation with a location."""
    return annotate_validation(validation, label)


def list_index_label(index: int) -> str:
    return f"The element at index {index} in the list"


def decorate_list(items: Iterable[T], func: Callable[[T], Validation]) -> Validation:
    """
    Validate every element of ``items`` independently, in index order.

    The result for element ``i`` is wrapped in
    ``Location("The element at index i in the list", ...)``. An empty sequence
    is valid.

    Args:
        items: Finite ordered sequence to validate
        func: Per-element invariant check

    Returns:
        Index-ordered concatenation of the decorated element validations
    """
    return concat_all(
        decorate(list_index_label(index), func(item))
        for index, item in enumerate(items)
    )


def tuple_element_label(index: int, size: int) -> str:
    """Label for element ``index`` of a plain tuple of length ``size``."""
    name = _TUPLE_NAMES.get(size)
    if name is None:
        return f"The element at index {index} in the tuple"
    return f"The {_ORDINALS[index]} element of the {name}"
