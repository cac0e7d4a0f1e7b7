"""
Generator capability consumed by the law combinators.

Value generation itself is Hypothesis' job: a ``Generator`` pairs a
``SearchStrategy`` with the name of its tier ("valid", "unchecked", ...) and
an optional shrink function that is applied on top of Hypothesis' own
shrinking when a counterexample is found.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ..diagnostics import is_invalid, is_valid

T = TypeVar("T")

Shrink = Callable[[Any], Iterable[Any]]


def no_shrink(value: Any) -> Tuple[()]:
    return ()


@dataclass(frozen=True)
class Generator(Generic[T]):
    """A strategy, the name of what it generates, and how to shrink its values."""
    strategy: SearchStrategy
    name: str
    shrink: Shrink = no_shrink

    def map(self, func: Callable[[T], Any], name: Optional[str] = None) -> "Generator":
        """Map generated values; mapped values are only shrunk by Hypothesis."""
        return Generator(self.strategy.map(func), name or self.name)


def shrink_tuple(*shrinks: Shrink) -> Callable[[tuple], Iterator[tuple]]:
    """
    Shrink a tuple one component at a time, left to right.

    Every candidate differs from the input in exactly one position.
    """
    def shrink(values: tuple) -> Iterator[tuple]:
        for index, component_shrink in enumerate(shrinks):
            for candidate in component_shrink(values[index]):
                yield values[:index] + (candidate,) + values[index + 1:]

    return shrink


def zip_generators(*generators: Generator) -> Generator:
    """Tuples drawn from ``generators`` position by position."""
    return Generator(
        st.tuples(*(generator.strategy for generator in generators)),
        ", ".join(generator.name for generator in generators),
        shrink_tuple(*(generator.shrink for generator in generators)),
    )


def pairs_of(generator: Generator) -> Generator:
    return Generator(
        st.tuples(generator.strategy, generator.strategy),
        generator.name,
        shrink_tuple(generator.shrink, generator.shrink),
    )


def triples_of(generator: Generator) -> Generator:
    return Generator(
        st.tuples(generator.strategy, generator.strategy, generator.strategy),
        generator.name,
        shrink_tuple(generator.shrink, generator.shrink, generator.shrink),
    )


@dataclass(frozen=True)
class GeneratorTiers:
    """
    The sampling distributions available for one type.

    valid: values expected to satisfy every invariant
    unchecked: raw values with no constraint applied
    arbitrary: whatever Hypothesis produces for the type
    invalid: values expected to violate at least one invariant
    """
    valid: Generator
    unchecked: Generator
    arbitrary: Generator
    invalid: Optional[Generator] = None

    @classmethod
    def for_type(cls, tp: type) -> "GeneratorTiers":
        """
        Default tiers built from ``hypothesis.strategies.from_type``.

        The valid and invalid tiers filter unchecked values with the type's
        invariant check, so they only work when such values are common.
        """
        unchecked = st.from_type(tp)
        return cls(
            valid=Generator(unchecked.filter(is_valid), "valid"),
            unchecked=Generator(unchecked, "unchecked"),
            arbitrary=Generator(st.from_type(tp), "arbitrary"),
            invalid=Generator(unchecked.filter(is_invalid), "invalid"),
        )

    def tier(self, name: str) -> Generator:
        generator = getattr(self, name, None)
        if not isinstance(generator, Generator):
            raise KeyError(f"No {name!r} generator tier")
        return generator
