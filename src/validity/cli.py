import importlib
from typing import Any, List, Optional, Tuple

import typer

from .config import Settings
from .laws.scenario import Scenario, iter_scenarios
from .logging import get_logger

app = typer.Typer(help="validity – run law scenarios outside a test runner", no_args_is_help=True)


class TargetLoadError(Exception):
    """Raised when a ``module:attribute`` target cannot be resolved to scenarios."""


def load_target(target: str) -> List[Tuple[str, Scenario]]:
    """
    Resolve ``module:attribute`` to the scenarios it names.

    The attribute may be a Scenario, a ScenarioGroup, a list of either, or a
    zero-argument callable returning one of those.

    Raises:
        TargetLoadError: If the module, the attribute or the scenarios cannot be loaded
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise TargetLoadError(f"Target must look like 'module:attribute', got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetLoadError(f"Cannot import module {module_name!r}: {exc}") from exc

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetLoadError(f"{module_name!r} has no attribute {attribute!r}") from exc

    if callable(obj) and not isinstance(obj, Scenario):
        obj = obj()

    try:
        return list(iter_scenarios(obj))
    except TypeError as exc:
        raise TargetLoadError(str(exc)) from exc


def _settings(max_examples: Optional[int], derandomize: bool, seed: Optional[int], verbose: bool) -> Settings:
    defaults = Settings.from_env()
    return Settings(
        max_examples=max_examples if max_examples is not None else defaults.max_examples,
        derandomize=derandomize or defaults.derandomize,
        seed=seed if seed is not None else defaults.seed,
        verbose=verbose or defaults.verbose,
    )


@app.command()
def run(
    target: str = typer.Argument(..., help="Scenarios to run, as 'module:attribute'"),
    max_examples: Optional[int] = typer.Option(None, help="Samples per law (default: VALIDITY_MAX_EXAMPLES or 100)"),
    derandomize: bool = typer.Option(False, "--derandomize/--randomize", help="Use a fixed sampling sequence"),
    seed: Optional[int] = typer.Option(None, help="Random seed for sampling"),
    verbose: bool = typer.Option(False, "--verbose", help="Print every sample Hypothesis tries"),
) -> None:
    """
    Run every law in TARGET and report the ones that fail.

    Exits with 1 if any law has a counterexample, 2 if TARGET cannot be loaded.
    """
    logger = get_logger(__name__)

    try:
        scenarios = load_target(target)
    except TargetLoadError as exc:
        logger.error(f"Failed to load {target}: {exc}")
        raise typer.Exit(code=2) from exc

    settings = _settings(max_examples, derandomize, seed, verbose)
    logger.info(f"Running {len(scenarios)} laws from {target}")

    failed = 0
    for full_name, scenario in scenarios:
        result = scenario.run(settings)
        if result.passed:
            typer.echo(f"PASS {full_name}")
        else:
            failed += 1
            typer.echo(f"FAIL {full_name}")
            typer.echo(f"  counterexample: {result.counterexample!r}")
            typer.echo(f"  reason: {result.reason}")

    typer.echo(f"\n{len(scenarios) - failed} passed, {failed} failed")
    if failed:
        raise typer.Exit(code=1)


@app.command("list")
def list_scenarios(
    target: str = typer.Argument(..., help="Scenarios to list, as 'module:attribute'"),
) -> None:
    """Print the full name of every law in TARGET."""
    logger = get_logger(__name__)

    try:
        scenarios = load_target(target)
    except TargetLoadError as exc:
        logger.error(f"Failed to load {target}: {exc}")
        raise typer.Exit(code=2) from exc

    for full_name, _ in scenarios:
        typer.echo(full_name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
