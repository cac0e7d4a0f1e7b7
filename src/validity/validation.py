"""
Violation accumulator and the primitive invariant DSL.

A ``Validation`` is an ordered sequence of ``ViolationChain`` values. Each chain
is the path from the root of a value down to exactly one violated invariant.
The empty ``Validation`` means the value satisfies every declared invariant.

``Validation.empty`` and ``concat`` form a monoid: ``concat`` is ordered
concatenation, it is associative, and the empty validation is its identity.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union


@dataclass(frozen=True)
class Violated:
    """Leaf of a chain: the description of the invariant that does not hold."""
    reason: str


@dataclass(frozen=True)
class Location:
    """Intermediate node of a chain naming where in the value we are."""
    label: str
    child: "ViolationChain"


ViolationChain = Union[Violated, Location]


@dataclass(frozen=True)
class Validation:
    """The result of validating a value; no chains means the value is valid."""
    chains: Tuple[ViolationChain, ...] = ()

    @classmethod
    def empty(cls) -> "Validation":
        return cls(())

    @property
    def is_valid(self) -> bool:
        return not self.chains

    def __len__(self) -> int:
        return len(self.chains)

    def __iter__(self):
        return iter(self.chains)


def concat(a: Validation, b: Validation) -> Validation:
    """Ordered concatenation: every chain of ``a`` followed by every chain of ``b``."""
    if not b.chains:
        return a
    if not a.chains:
        return b
    return Validation(a.chains + b.chains)


def concat_all(validations: Iterable[Validation]) -> Validation:
    """Fold ``concat`` over ``validations`` from the left, starting at the identity."""
    chains = []
    for validation in validations:
        chains.extend(validation.chains)
    return Validation(tuple(chains))


def check(condition: bool, reason: str) -> Validation:
    """
    Check that an invariant holds.

    ``reason`` describes the invariant, not the violation:

        check(x < 5, "x is strictly smaller than 5")

    Args:
        condition: Whether the invariant holds
        reason: Positive description of the invariant

    Returns:
        The empty validation, or a single ``Violated(reason)`` chain
    """
    if condition:
        return Validation.empty()
    return Validation((Violated(reason),))


def declare(reason: str, condition: bool) -> Validation:
    """``check`` with the arguments flipped."""
    return check(condition, reason)


def invalid(reason: str) -> Validation:
    """A validation that always reports ``reason`` as violated."""
    return check(False, reason)


def valid() -> Validation:
    return Validation.empty()


def trivial_validation(value: Any) -> Validation:
    """
    Declare ``value`` valid after forcing it to be inspected.

    Used for types whose representation already guarantees every invariant.
    The value is hashed (or rendered when unhashable) so that an object which
    cannot even be inspected raises here instead of passing silently.
    """
    try:
        hash(value)
    except TypeError:
        repr(value)
    return Validation.empty()


def annotate_validation(validation: Validation, label: str) -> Validation:
    """Wrap every chain of ``validation`` in ``Location(label, ...)``, keeping order."""
    return Validation(tuple(Location(label, chain) for chain in validation.chains))


def chain_labels(chain: ViolationChain) -> Tuple[str, ...]:
    """Location labels of ``chain`` from the outermost inwards."""
    labels = []
    while isinstance(chain, Location):
        labels.append(chain.label)
        chain = chain.child
    return tuple(labels)


def chain_reason(chain: ViolationChain) -> str:
    """The violated invariant at the bottom of ``chain``."""
    while isinstance(chain, Location):
        chain = chain.child
    return chain.reason
