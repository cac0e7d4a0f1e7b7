"""Scenario targets loaded by name in the CLI tests."""

import operator

from hypothesis import strategies as st

from validity.laws import Generator, ScenarioGroup, ord_spec_on_gen, reflexivity_on_gen, transitivity_on_gens

small_ints = Generator(st.integers(min_value=-50, max_value=50), "valid")

digits = Generator(st.integers(min_value=0, max_value=2), "digit")

int_ord_laws = ord_spec_on_gen(small_ints, "int")


def unsatisfiable_laws():
    """The first law draws from a filter that never passes."""
    return ScenarioGroup("unsatisfiable", [
        reflexivity_on_gen(
            operator.eq,
            Generator(st.integers().filter(lambda n: False), "never"),
            "== is reflexive on nothing",
        ),
        reflexivity_on_gen(operator.eq, digits, "== is reflexive on digits"),
    ])


def broken_laws():
    """``!=`` is not transitive: 1 != 2 and 2 != 1 but not 1 != 1."""
    return ScenarioGroup("broken", [
        transitivity_on_gens(operator.ne, digits, "!= is transitive"),
    ])


not_scenarios = 42
