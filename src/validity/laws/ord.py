"""
Total order laws for ``<=``, ``>=``, ``<``, ``>``, ``min`` and ``max``.

Example:

    tiers = GeneratorTiers(
        valid=Generator(st.integers(), "valid"),
        unchecked=Generator(st.integers(), "unchecked"),
        arbitrary=Generator(st.integers(), "arbitrary"),
    )

    @pytest.mark.parametrize("scenario", ord_spec_on_valid(tiers, "int").pytest_params())
    def test_int_ord(scenario):
        scenario.check()
"""

import enum
import operator
from typing import Any, Callable, List

from .generators import Generator, GeneratorTiers
from .relations import (
    antireflexivity_on_gen,
    antisymmetry_on_gens,
    equivalent_on_gens2,
    reflexivity_on_gen,
    transitivity_on_gens,
)
from .scenario import ScenarioGroup


class Ordering(enum.Enum):
    LT = -1
    EQ = 0
    GT = 1


def compare(a: Any, b: Any) -> Ordering:
    """Three-way comparison built from ``<`` and ``==``."""
    if a < b:
        return Ordering.LT
    if a == b:
        return Ordering.EQ
    return Ordering.GT


def ord_spec_on_gen(
    generator: Generator,
    type_name: str,
    compare: Callable[[Any, Any], Ordering] = compare,
) -> ScenarioGroup:
    """
    Order laws for the values produced by ``generator``.

    Args:
        generator: Source of values, its name is the tier shown in law names
        type_name: Name of the type under test
        compare: Three-way comparison the operators must agree with

    Returns:
        ScenarioGroup named "Ord <type_name> (<tier>)"
    """
    def for_values(text: str) -> str:
        return f"{text} for {generator.name} {type_name} values"

    return ScenarioGroup(f"Ord {type_name} ({generator.name})", [
        ScenarioGroup("<=", [
            reflexivity_on_gen(operator.le, generator, for_values("is reflexive")),
            antisymmetry_on_gens(operator.le, generator, for_values("is antisymmetric")),
            transitivity_on_gens(operator.le, generator, for_values("is transitive")),
            equivalent_on_gens2(
                operator.le,
                lambda a, b: compare(a, b) is not Ordering.GT,
                generator,
                for_values("is equivalent to (lambda a, b: compare(a, b) != GT)"),
            ),
        ]),
        ScenarioGroup(">=", [
            reflexivity_on_gen(operator.ge, generator, for_values("is reflexive")),
            antisymmetry_on_gens(operator.ge, generator, for_values("is antisymmetric")),
            transitivity_on_gens(operator.ge, generator, for_values("is transitive")),
            equivalent_on_gens2(
                operator.ge,
                lambda a, b: compare(a, b) is not Ordering.LT,
                generator,
                for_values("is equivalent to (lambda a, b: compare(a, b) != LT)"),
            ),
        ]),
        ScenarioGroup("<", [
            antireflexivity_on_gen(operator.lt, generator, for_values("is antireflexive")),
            transitivity_on_gens(operator.lt, generator, for_values("is transitive")),
            equivalent_on_gens2(
                operator.lt,
                lambda a, b: compare(a, b) is Ordering.LT,
                generator,
                for_values("is equivalent to (lambda a, b: compare(a, b) == LT)"),
            ),
        ]),
        ScenarioGroup(">", [
            antireflexivity_on_gen(operator.gt, generator, for_values("is antireflexive")),
            transitivity_on_gens(operator.gt, generator, for_values("is transitive")),
            equivalent_on_gens2(
                operator.gt,
                lambda a, b: compare(a, b) is Ordering.GT,
                generator,
                for_values("is equivalent to (lambda a, b: compare(a, b) == GT)"),
            ),
        ]),
        ScenarioGroup("min", [
            equivalent_on_gens2(
                min,
                lambda a, b: a if a <= b else b,
                generator,
                for_values("is equivalent to (lambda a, b: a if a <= b else b)"),
            ),
        ]),
        ScenarioGroup("max", [
            equivalent_on_gens2(
                max,
                lambda a, b: a if a >= b else b,
                generator,
                for_values("is equivalent to (lambda a, b: a if a >= b else b)"),
            ),
        ]),
    ])


def ord_spec_on_valid(tiers: GeneratorTiers, type_name: str) -> ScenarioGroup:
    return ord_spec_on_gen(tiers.valid, type_name)


def ord_spec_on_invalid(tiers: GeneratorTiers, type_name: str) -> ScenarioGroup:
    return ord_spec_on_gen(tiers.tier("invalid"), type_name)


def ord_spec(tiers: GeneratorTiers, type_name: str) -> ScenarioGroup:
    """Order laws for unchecked values."""
    return ord_spec_on_gen(tiers.unchecked, type_name)


def ord_spec_on_arbitrary(tiers: GeneratorTiers, type_name: str) -> ScenarioGroup:
    return ord_spec_on_gen(tiers.arbitrary, type_name)


def ord_specs(tiers: GeneratorTiers, type_name: str) -> List[ScenarioGroup]:
    """The order laws once per tier: valid, unchecked and arbitrary."""
    return [
        ord_spec_on_valid(tiers, type_name),
        ord_spec(tiers, type_name),
        ord_spec_on_arbitrary(tiers, type_name),
    ]
