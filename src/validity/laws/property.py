"""
Universally quantified properties checked by sampling.

``for_all_shrink`` draws samples with Hypothesis until the predicate fails or
the example budget runs out. Hypothesis shrinks a failing sample on its own;
the result is then minimised further with the generator's shrink function,
one failing candidate at a time, until no candidate fails any more.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from hypothesis import given
from hypothesis.errors import HypothesisException
from hypothesis import seed as hypothesis_seed

from ..config import Settings
from ..logging import get_logger
from .generators import Generator

logger = get_logger(__name__)

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class LawResult:
    """Outcome of one law: passed, or the minimal counterexample and why it fails."""
    name: str
    passed: bool
    counterexample: Any = None
    reason: Optional[str] = None

    def describe(self) -> str:
        if self.passed:
            return f"{self.name}: passed"
        return (
            f"{self.name}: failed\n"
            f"  counterexample: {self.counterexample!r}\n"
            f"  reason: {self.reason}"
        )


class LawViolation(AssertionError):
    """Raised when a checked law has a counterexample."""

    def __init__(self, result: LawResult):
        super().__init__(result.describe())
        self.result = result

    @property
    def law(self) -> str:
        return self.result.name

    @property
    def counterexample(self) -> Any:
        return self.result.counterexample


class _Falsified(Exception):
    """Signals a failing sample to Hypothesis so that it gets shrunk."""


def failure_reason(predicate: Predicate, sample: Any) -> Optional[str]:
    """
    Evaluate ``predicate`` on ``sample``.

    Returns:
        None if it holds, otherwise a description of the failure; an
        exception raised by the predicate counts as a failure
    """
    try:
        holds = predicate(sample)
    except Exception as exc:
        return f"{type(exc).__name__}: {exc}"
    if holds:
        return None
    return "the property does not hold"


def minimize(value: Any, falsifies: Callable[[Any], bool], shrink: Callable[[Any], Iterable[Any]]) -> Any:
    """
    Walk down the shrink tree of ``value`` while candidates keep failing.

    The first failing candidate replaces the current value; the search stops
    at a value none of whose candidates fails. ``shrink`` must produce finite
    candidate sequences that do not shrink forever.
    """
    current = value
    while True:
        for candidate in shrink(current):
            if falsifies(candidate):
                current = candidate
                break
        else:
            return current


def for_all_shrink(
    name: str,
    generator: Generator,
    predicate: Predicate,
    settings: Optional[Settings] = None,
) -> LawResult:
    """
    Check that ``predicate`` holds for every value ``generator`` produces.

    Args:
        name: Name of the law, used in the result
        generator: Source of samples and of the extra shrink function
        predicate: The property for a single sample
        settings: Example budget and randomisation; defaults to ``Settings()``

    Returns:
        LawResult with the minimal counterexample if the law fails. A law
        Hypothesis cannot check (for example because a filter never passes)
        fails without a counterexample, its reason naming the error
    """
    settings = settings or Settings()
    failures: List[Tuple[Any, str]] = []

    def attempt(sample: Any) -> None:
        reason = failure_reason(predicate, sample)
        if reason is not None:
            failures.append((sample, reason))
            raise _Falsified(reason)

    test = settings.to_hypothesis()(given(generator.strategy)(attempt))
    if settings.seed is not None:
        test = hypothesis_seed(settings.seed)(test)

    logger.debug(f"Checking law: {name}")
    try:
        test()
    except HypothesisException as exc:
        # Hypothesis gave up before it found a counterexample
        reason = f"{type(exc).__name__}: {exc}"
        logger.warning(f"Law could not be checked: {name} ({reason})")
        return LawResult(name=name, passed=False, reason=reason)
    except _Falsified:
        # Hypothesis replays the shrunk example last before re-raising.
        sample, reason = failures[-1]
    else:
        return LawResult(name=name, passed=True)

    counterexample = minimize(
        sample,
        lambda candidate: failure_reason(predicate, candidate) is not None,
        generator.shrink,
    )
    if counterexample is not sample:
        reason = failure_reason(predicate, counterexample)

    logger.info(f"Law failed: {name} (counterexample: {counterexample!r})")
    return LawResult(name=name, passed=False, counterexample=counterexample, reason=reason)
