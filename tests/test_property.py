"""Tests for the sampling and shrinking engine behind every law."""

import pytest
from hypothesis import strategies as st

from validity.config import Settings
from validity.laws import (
    Generator,
    LawResult,
    LawViolation,
    Scenario,
    ScenarioGroup,
    for_all_shrink,
    minimize,
    no_shrink,
    pairs_of,
    shrink_tuple,
    zip_generators,
)
from validity.laws.property import failure_reason


def halve_or_decrement(n):
    """Shrink candidates for non-negative integers."""
    if n > 0:
        yield n // 2
        yield n - 1


FAST = Settings(max_examples=50, derandomize=True)


class TestMinimize:
    def test_finds_local_minimum(self):
        assert minimize(100, lambda n: n >= 10, halve_or_decrement) == 10

    def test_value_without_failing_candidates_is_kept(self):
        assert minimize(7, lambda n: n == 7, halve_or_decrement) == 7

    def test_no_shrink(self):
        assert list(no_shrink(42)) == []
        assert minimize(42, lambda n: True, no_shrink) == 42

    def test_takes_first_failing_candidate(self):
        seen = []

        def shrink(n):
            seen.append(n)
            return [n - 1, n - 2] if n > 0 else []

        assert minimize(4, lambda n: n % 2 == 0, shrink) == 0
        assert seen == [4, 2, 0]


class TestShrinkTuple:
    def test_one_component_at_a_time(self):
        shrink = shrink_tuple(halve_or_decrement, halve_or_decrement)
        assert list(shrink((2, 4))) == [(1, 4), (1, 4), (2, 2), (2, 3)]

    def test_pairs_shrink_component_wise(self):
        generator = pairs_of(Generator(st.integers(), "ints", halve_or_decrement))
        assert list(generator.shrink((1, 0))) == [(0, 0), (0, 0)]

    def test_zip_generators_names(self):
        zipped = zip_generators(Generator(st.integers(), "a"), Generator(st.text(), "b"))
        assert zipped.name == "a, b"
        assert list(zipped.shrink((1, "x"))) == []


class TestFailureReason:
    def test_holds(self):
        assert failure_reason(lambda x: True, 1) is None

    def test_false(self):
        assert failure_reason(lambda x: False, 1) == "the property does not hold"

    def test_exception_counts_as_failure(self):
        assert failure_reason(lambda x: 1 // x, 0).startswith("ZeroDivisionError: ")


class TestForAllShrink:
    def test_passing_law(self):
        result = for_all_shrink("abs is non-negative", Generator(st.integers(), "ints"), lambda n: abs(n) >= 0, FAST)
        assert result == LawResult(name="abs is non-negative", passed=True)

    def test_failing_law_is_shrunk_by_hypothesis(self):
        result = for_all_shrink(
            "small",
            Generator(st.integers(min_value=0, max_value=10_000), "ints"),
            lambda n: n < 10,
            FAST,
        )
        assert not result.passed
        assert result.counterexample == 10
        assert result.reason == "the property does not hold"

    def test_custom_shrink_minimises_further(self):
        result = for_all_shrink(
            "small",
            Generator(st.just(100), "hundred", halve_or_decrement),
            lambda n: n < 10,
            FAST,
        )
        assert result.counterexample == 10

    def test_exception_is_reported(self):
        result = for_all_shrink(
            "reciprocal",
            Generator(st.integers(min_value=0, max_value=5), "ints"),
            lambda n: 1 / n > 0,
            FAST,
        )
        assert not result.passed
        assert result.counterexample == 0
        assert result.reason.startswith("ZeroDivisionError")

    def test_seeded_runs_agree(self):
        settings = Settings(max_examples=30, seed=1234)
        generator = Generator(st.integers(min_value=0, max_value=1000), "ints")
        first = for_all_shrink("law", generator, lambda n: n < 500, settings)
        second = for_all_shrink("law", generator, lambda n: n < 500, settings)
        assert first == second

    def test_unsatisfiable_generator_is_a_failure(self):
        never = Generator(st.integers().filter(lambda n: False), "never")
        result = for_all_shrink("law", never, lambda n: True, FAST)
        assert not result.passed
        assert result.counterexample is None
        assert result.reason.startswith("Unsatisfiable")

    def test_default_settings(self):
        result = for_all_shrink("law", Generator(st.booleans(), "bools"), lambda b: b in (True, False))
        assert result.passed


class TestScenario:
    def test_check_passes_silently(self):
        Scenario("ok", Generator(st.integers(), "ints"), lambda n: n == n).check(FAST)

    def test_check_raises_law_violation(self):
        scenario = Scenario("is zero", Generator(st.integers(min_value=1, max_value=100), "ints"), lambda n: n == 0)
        with pytest.raises(LawViolation) as excinfo:
            scenario.check(FAST)
        assert excinfo.value.law == "is zero"
        assert excinfo.value.counterexample == 1
        assert "counterexample: 1" in str(excinfo.value)
        assert isinstance(excinfo.value, AssertionError)

    def test_describe(self):
        assert LawResult("law", True).describe() == "law: passed"
        assert LawResult("law", False, [1], "boom").describe() == (
            "law: failed\n  counterexample: [1]\n  reason: boom"
        )


class TestScenarioGroup:
    def test_unsatisfiable_sibling_does_not_stop_the_group(self):
        group = ScenarioGroup("ints", [
            Scenario("filtered away", Generator(st.integers().filter(lambda n: False), "never"), lambda n: True),
            Scenario("is an int", Generator(st.integers(), "ints"), lambda n: isinstance(n, int)),
        ])
        results = group.run(FAST)
        assert [(result.name, result.passed) for result in results] == [
            ("ints filtered away", False),
            ("ints is an int", True),
        ]
        assert results[0].reason.startswith("Unsatisfiable")
