"""
Properties of binary relations, on elements and lifted to generators.

The ``*_on_elem(s)`` predicates are pure functions of one to three sampled
values. The ``*_on_gen`` builders turn them into scenarios that quantify over
everything a generator produces.
"""

from typing import Any, Callable

from .generators import Generator, pairs_of, triples_of
from .scenario import Scenario

Relation = Callable[[Any, Any], bool]


def reflexive_on_elem(relation: Relation, a: Any) -> bool:
    """a R a"""
    return bool(relation(a, a))


def antireflexive_on_elem(relation: Relation, a: Any) -> bool:
    """not (a R a)"""
    return not relation(a, a)


def symmetric_on_elems(relation: Relation, a: Any, b: Any) -> bool:
    """a R b implies b R a"""
    return not relation(a, b) or bool(relation(b, a))


def antisymmetric_on_elems(relation: Relation, a: Any, b: Any) -> bool:
    """a R b and b R a imply a == b"""
    return not (relation(a, b) and relation(b, a)) or a == b


def transitive_on_elems(relation: Relation, a: Any, b: Any, c: Any) -> bool:
    """a R b and b R c imply a R c"""
    return not (relation(a, b) and relation(b, c)) or bool(relation(a, c))


def equivalent_on_elem(f: Callable[[Any], Any], g: Callable[[Any], Any], a: Any) -> bool:
    return f(a) == g(a)


def equivalent_on_elems2(f: Callable[[Any, Any], Any], g: Callable[[Any, Any], Any], a: Any, b: Any) -> bool:
    """Two binary functions (or relations) agree on (a, b)."""
    return f(a, b) == g(a, b)


def reflexivity_on_gen(relation: Relation, generator: Generator, name: str = "is reflexive") -> Scenario:
    return Scenario(name, generator, lambda a: reflexive_on_elem(relation, a))


def antireflexivity_on_gen(relation: Relation, generator: Generator, name: str = "is antireflexive") -> Scenario:
    return Scenario(name, generator, lambda a: antireflexive_on_elem(relation, a))


def symmetry_on_gens(relation: Relation, generator: Generator, name: str = "is symmetric") -> Scenario:
    return Scenario(name, pairs_of(generator), lambda ab: symmetric_on_elems(relation, *ab))


def antisymmetry_on_gens(relation: Relation, generator: Generator, name: str = "is antisymmetric") -> Scenario:
    return Scenario(name, pairs_of(generator), lambda ab: antisymmetric_on_elems(relation, *ab))


def transitivity_on_gens(relation: Relation, generator: Generator, name: str = "is transitive") -> Scenario:
    return Scenario(name, triples_of(generator), lambda abc: transitive_on_elems(relation, *abc))


def equivalent_on_gen(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    generator: Generator,
    name: str = "are equivalent",
) -> Scenario:
    return Scenario(name, generator, lambda a: equivalent_on_elem(f, g, a))


def equivalent_on_gens2(
    f: Callable[[Any, Any], Any],
    g: Callable[[Any, Any], Any],
    generator: Generator,
    name: str = "are equivalent",
) -> Scenario:
    return Scenario(name, pairs_of(generator), lambda ab: equivalent_on_elems2(f, g, *ab))
