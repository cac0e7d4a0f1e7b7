"""Round-trip laws for rendering a value as text and parsing it back."""

import ast
from typing import Any, Callable, List

from .generators import Generator, GeneratorTiers
from .scenario import Scenario, ScenarioGroup

_NO_PARSE = (ValueError, SyntaxError, TypeError, MemoryError, RecursionError)


def round_trips(render: Callable[[Any], str], parse: Callable[[str], Any], value: Any) -> bool:
    """
    ``parse(render(value)) == value``.

    Raises:
        AssertionError: Describing the rendered text and what it parsed to
    """
    text = render(value)
    try:
        parsed = parse(text)
    except _NO_PARSE as exc:
        raise AssertionError(f"{text!r} does not parse: {exc}") from exc
    if parsed != value:
        raise AssertionError(f"{text!r} parses to {parsed!r}")
    return True


def show_read_round_trip_on_gen(
    generator: Generator,
    render: Callable[[Any], str] = repr,
    parse: Callable[[str], Any] = ast.literal_eval,
    name: str = "round-trips through its textual form",
) -> Scenario:
    return Scenario(name, generator, lambda value: round_trips(render, parse, value))


def show_read_spec_on_gen(
    generator: Generator,
    type_name: str,
    render: Callable[[Any], str] = repr,
    parse: Callable[[str], Any] = ast.literal_eval,
) -> ScenarioGroup:
    """
    Round-trip law for ``generator``'s values.

    ``render`` and ``parse`` default to ``repr`` and ``ast.literal_eval``.
    """
    render_name = getattr(render, "__name__", "render")
    parse_name = getattr(parse, "__name__", "parse")
    return ScenarioGroup(
        f"{render_name} {type_name} and {parse_name} {type_name}",
        [
            show_read_round_trip_on_gen(
                generator,
                render,
                parse,
                f"are implemented such that {parse_name}({render_name}(x)) == x "
                f"for {generator.name} values",
            ),
        ],
    )


def show_read_spec_on_valid(tiers: GeneratorTiers, type_name: str, **codec: Any) -> ScenarioGroup:
    return show_read_spec_on_gen(tiers.valid, type_name, **codec)


def show_read_spec(tiers: GeneratorTiers, type_name: str, **codec: Any) -> ScenarioGroup:
    """Round-trip law for unchecked values."""
    return show_read_spec_on_gen(tiers.unchecked, type_name, **codec)


def show_read_spec_on_arbitrary(tiers: GeneratorTiers, type_name: str, **codec: Any) -> ScenarioGroup:
    return show_read_spec_on_gen(tiers.arbitrary, type_name, **codec)


def show_read_specs(tiers: GeneratorTiers, type_name: str, **codec: Any) -> List[ScenarioGroup]:
    return [
        show_read_spec_on_valid(tiers, type_name, **codec),
        show_read_spec(tiers, type_name, **codec),
        show_read_spec_on_arbitrary(tiers, type_name, **codec),
    ]
