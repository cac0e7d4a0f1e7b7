"""Tests for the violation accumulator and the invariant DSL."""

import pytest
from hypothesis import given, strategies as st

from validity import (
    Location,
    Validation,
    Violated,
    check,
    concat,
    concat_all,
    declare,
    invalid,
    trivial_validation,
    valid,
)
from validity.validation import annotate_validation, chain_labels, chain_reason

from tests.helpers.strategies import reasons, validations


class TestMonoidLaws:
    """Identity and associativity of ``concat``."""

    @given(validations)
    def test_right_identity(self, a):
        assert concat(a, Validation.empty()) == a

    @given(validations)
    def test_left_identity(self, a):
        assert concat(Validation.empty(), a) == a

    @given(validations, validations, validations)
    def test_associativity(self, a, b, c):
        assert concat(concat(a, b), c) == concat(a, concat(b, c))

    @given(validations, validations)
    def test_concat_preserves_order(self, a, b):
        assert concat(a, b).chains == a.chains + b.chains

    @given(st.lists(validations, max_size=5))
    def test_concat_all_is_left_fold(self, parts):
        expected = Validation.empty()
        for part in parts:
            expected = concat(expected, part)
        assert concat_all(parts) == expected

    def test_concat_all_accepts_generators(self):
        result = concat_all(invalid(str(i)) for i in range(3))
        assert result.chains == (Violated("0"), Violated("1"), Violated("2"))


class TestCheck:
    @given(reasons)
    def test_check_true_is_identity(self, reason):
        assert check(True, reason) == Validation.empty()

    @given(reasons)
    def test_check_false_is_single_violation(self, reason):
        assert check(False, reason) == Validation((Violated(reason),))

    @given(st.booleans(), reasons)
    def test_declare_is_flipped_check(self, condition, reason):
        assert declare(reason, condition) == check(condition, reason)

    def test_invalid_and_valid(self):
        assert invalid("always") == check(False, "always")
        assert valid() == Validation.empty()
        assert valid().is_valid
        assert not invalid("always").is_valid

    def test_validation_is_immutable(self):
        validation = invalid("x")
        with pytest.raises(AttributeError):
            validation.chains = ()  # type: ignore

    def test_length_and_iteration(self):
        validation = concat(invalid("a"), invalid("b"))
        assert len(validation) == 2
        assert list(validation) == [Violated("a"), Violated("b")]


class TestTrivialValidation:
    @given(st.one_of(st.integers(), st.text(), st.none(), st.lists(st.integers())))
    def test_always_valid(self, value):
        assert trivial_validation(value) == Validation.empty()

    def test_uninspectable_value_raises(self):
        class Broken:
            def __hash__(self):
                raise RuntimeError("cannot be inspected")

        with pytest.raises(RuntimeError):
            trivial_validation(Broken())


class TestChains:
    def test_annotate_validation_wraps_every_chain_in_order(self):
        validation = concat(invalid("a"), invalid("b"))
        annotated = annotate_validation(validation, "L")
        assert annotated.chains == (
            Location("L", Violated("a")),
            Location("L", Violated("b")),
        )

    def test_chain_labels_and_reason(self):
        chain = Location("outer", Location("inner", Violated("reason")))
        assert chain_labels(chain) == ("outer", "inner")
        assert chain_reason(chain) == "reason"
        assert chain_labels(Violated("bare")) == ()
