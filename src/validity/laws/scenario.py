"""
Named, composable law scenarios.

A ``Scenario`` is one law over one generator. ``ScenarioGroup`` nests
scenarios under a common name, the way a test runner nests ``describe``
blocks. Scenarios share no state, so they can be run in any order or in
parallel; running a group always runs every scenario in it.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

import pytest

from ..config import Settings
from ..logging import get_logger
from .generators import Generator
from .property import LawResult, LawViolation, for_all_shrink

logger = get_logger(__name__)


@dataclass(frozen=True)
class Scenario:
    """A named law: ``predicate`` must hold for every sample of ``generator``."""
    name: str
    generator: Generator
    predicate: Callable[[Any], bool] = field(repr=False)

    def run(self, settings: Optional[Settings] = None) -> LawResult:
        return for_all_shrink(self.name, self.generator, self.predicate, settings)

    def check(self, settings: Optional[Settings] = None) -> None:
        """
        Run the law and fail loudly.

        Raises:
            LawViolation: With the minimal counterexample if the law fails
        """
        result = self.run(settings)
        if not result.passed:
            raise LawViolation(result)


@dataclass(frozen=True)
class ScenarioGroup:
    name: str
    children: Tuple[Union[Scenario, "ScenarioGroup"], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def scenarios(self, prefix: str = "") -> Iterator[Tuple[str, Scenario]]:
        """Every scenario in the group with its space-joined full name, in declaration order."""
        path = f"{prefix} {self.name}".strip()
        for child in self.children:
            if isinstance(child, ScenarioGroup):
                yield from child.scenarios(path)
            else:
                yield f"{path} {child.name}", child

    def run(self, settings: Optional[Settings] = None) -> List[LawResult]:
        """Run every scenario; one failing law never stops the others."""
        results = []
        for full_name, scenario in self.scenarios():
            result = dataclasses.replace(scenario.run(settings), name=full_name)
            results.append(result)
        failed = sum(1 for result in results if not result.passed)
        logger.info(f"{self.name}: {len(results) - failed}/{len(results)} laws hold")
        return results

    def pytest_params(self) -> List[Any]:
        """
        Parameters for ``pytest.mark.parametrize``, one per scenario.

        Example:

            @pytest.mark.parametrize("scenario", ord_spec_on_valid(tiers, "int").pytest_params())
            def test_ord_laws(scenario):
                scenario.check()
        """
        return [pytest.param(scenario, id=full_name) for full_name, scenario in self.scenarios()]


def iter_scenarios(target: Union[Scenario, ScenarioGroup, Sequence[Any]]) -> Iterator[Tuple[str, Scenario]]:
    """Flatten a scenario, a group, or a sequence of either into (full name, scenario) pairs."""
    if isinstance(target, Scenario):
        yield target.name, target
    elif isinstance(target, ScenarioGroup):
        yield from target.scenarios()
    elif isinstance(target, (list, tuple)):
        for item in target:
            yield from iter_scenarios(item)
    else:
        raise TypeError(f"Not a scenario or scenario group: {target!r}")
