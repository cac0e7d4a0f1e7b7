"""Tests for the order law suite."""

import math

import pytest
from hypothesis import strategies as st

from validity.config import Settings
from validity.laws import (
    Generator,
    GeneratorTiers,
    Ordering,
    compare,
    ord_spec,
    ord_spec_on_arbitrary,
    ord_spec_on_gen,
    ord_spec_on_invalid,
    ord_spec_on_valid,
    ord_specs,
)

FAST = Settings(max_examples=50, derandomize=True)

INT_TIERS = GeneratorTiers(
    valid=Generator(st.integers(min_value=-1000, max_value=1000), "valid"),
    unchecked=Generator(st.integers(), "unchecked"),
    arbitrary=Generator(st.integers(), "arbitrary"),
)

TEXT_TIERS = GeneratorTiers(
    valid=Generator(st.text(max_size=5), "valid"),
    unchecked=Generator(st.text(), "unchecked"),
    arbitrary=Generator(st.text(), "arbitrary"),
)


@pytest.mark.parametrize("scenario", ord_spec_on_valid(INT_TIERS, "int").pytest_params())
def test_int_order_laws(scenario):
    scenario.check(FAST)


@pytest.mark.parametrize("scenario", ord_spec(TEXT_TIERS, "str").pytest_params())
def test_str_order_laws(scenario):
    scenario.check(FAST)


class TestCompare:
    def test_three_way(self):
        assert compare(1, 2) is Ordering.LT
        assert compare(2, 2) is Ordering.EQ
        assert compare(3, 2) is Ordering.GT


class TestOrdGroups:
    def test_group_structure(self):
        group = ord_spec_on_valid(INT_TIERS, "int")
        assert group.name == "Ord int (valid)"
        assert [child.name for child in group.children] == ["<=", ">=", "<", ">", "min", "max"]
        assert len(list(group.scenarios())) == 16

    def test_full_names(self):
        names = [name for name, _ in ord_spec_on_valid(INT_TIERS, "int").scenarios()]
        assert names[0] == "Ord int (valid) <= is reflexive for valid int values"
        assert "Ord int (valid) < is antireflexive for valid int values" in names

    def test_tier_variants(self):
        assert ord_spec(INT_TIERS, "int").name == "Ord int (unchecked)"
        assert ord_spec_on_arbitrary(INT_TIERS, "int").name == "Ord int (arbitrary)"
        assert [group.name for group in ord_specs(INT_TIERS, "int")] == [
            "Ord int (valid)",
            "Ord int (unchecked)",
            "Ord int (arbitrary)",
        ]

    def test_invalid_tier_must_be_supplied(self):
        with pytest.raises(KeyError):
            ord_spec_on_invalid(INT_TIERS, "int")
        tiers = GeneratorTiers(
            valid=INT_TIERS.valid,
            unchecked=INT_TIERS.unchecked,
            arbitrary=INT_TIERS.arbitrary,
            invalid=Generator(st.integers(min_value=1001), "invalid"),
        )
        assert ord_spec_on_invalid(tiers, "int").name == "Ord int (invalid)"

    def test_default_tiers_from_type(self):
        results = ord_spec_on_valid(GeneratorTiers.for_type(int), "int").run(FAST)
        assert all(result.passed for result in results)


class TestBrokenOrders:
    def test_inconsistent_compare_is_reported(self):
        results = ord_spec_on_gen(
            INT_TIERS.valid,
            "int",
            compare=lambda a, b: Ordering.EQ,
        ).run(FAST)
        failed = {result.name for result in results if not result.passed}
        assert "Ord int (valid) <= is equivalent to (lambda a, b: compare(a, b) != GT) for valid int values" in failed
        assert "Ord int (valid) <= is reflexive for valid int values" not in failed

    def test_nan_breaks_reflexivity(self):
        results = ord_spec_on_gen(Generator(st.just(math.nan), "nan"), "float").run(FAST)
        by_name = {result.name: result for result in results}
        reflexive = by_name["Ord float (nan) <= is reflexive for nan float values"]
        assert not reflexive.passed
        assert math.isnan(reflexive.counterexample)

    def test_every_law_runs_after_a_failure(self):
        results = ord_spec_on_gen(Generator(st.just(math.nan), "nan"), "float").run(FAST)
        assert len(results) == 16
        assert any(result.passed for result in results)
