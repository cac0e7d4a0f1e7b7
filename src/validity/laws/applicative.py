"""
Composition laws for wrapping types (lists, optional values, ...).

Python has no applicative interface, so a wrapping type is described by an
``Applicative`` adapter holding its ``pure``, ``ap`` and ``fmap`` (and
optionally the sequencing operators ``then`` and ``before``). The laws are
checked against generators supplied per wrapping type.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from .generators import Generator, GeneratorTiers, zip_generators
from .scenario import Scenario, ScenarioGroup


def identity(value: Any) -> Any:
    return value


def compose(f: Callable) -> Callable:
    """Curried composition: ``compose(f)(g)(x) == f(g(x))``."""
    return lambda g: lambda x: f(g(x))


@dataclass(frozen=True)
class Applicative:
    name: str
    pure: Callable[[Any], Any]
    ap: Callable[[Any, Any], Any]
    fmap: Callable[[Callable, Any], Any]
    then: Optional[Callable[[Any, Any], Any]] = None
    before: Optional[Callable[[Any, Any], Any]] = None
    wrap: Optional[Callable[[SearchStrategy], SearchStrategy]] = None

    def lift_a2(self, func: Callable[[Any, Any], Any], u: Any, v: Any) -> Any:
        return self.ap(self.fmap(lambda a: lambda b: func(a, b), u), v)


LIST = Applicative(
    name="list",
    pure=lambda x: [x],
    ap=lambda fs, xs: [f(x) for f in fs for x in xs],
    fmap=lambda f, xs: [f(x) for x in xs],
    then=lambda u, v: [y for _ in u for y in v],
    before=lambda u, v: [x for x in u for _ in v],
    wrap=lambda elements: st.lists(elements, max_size=4),
)

# None stands for the absent value, so the wrapped values must not be None.
OPTIONAL = Applicative(
    name="optional",
    pure=lambda x: x,
    ap=lambda f, x: None if f is None or x is None else f(x),
    fmap=lambda f, x: None if x is None else f(x),
    then=lambda u, v: None if u is None else v,
    before=lambda u, v: None if u is None or v is None else u,
    wrap=lambda elements: st.none() | elements,
)


def applicative_spec_on_gens(
    applicative: Applicative,
    gen_a: Generator,
    gen_fa: Generator,
    gen_fb: Generator,
    gen_fun: Generator,
    gen_f_fun_ab: Generator,
    gen_f_fun_bc: Generator,
) -> ScenarioGroup:
    """
    Applicative laws for ``applicative`` over custom generators.

    Args:
        applicative: The wrapping type under test
        gen_a: Plain values
        gen_fa: Wrapped values
        gen_fb: Wrapped values used as the second operand of sequencing
        gen_fun: Plain functions from a to b
        gen_f_fun_ab: Wrapped functions from a to b
        gen_f_fun_bc: Wrapped functions from b to c

    Returns:
        ScenarioGroup named "Applicative <name>"
    """
    app = applicative

    def identity_law(v):
        return app.ap(app.pure(identity), v) == v

    def composition_law(uvw):
        u, v, w = uvw
        return app.ap(app.ap(app.ap(app.pure(compose), u), v), w) == app.ap(u, app.ap(v, w))

    def homomorphism_law(fx):
        f, x = fx
        return app.ap(app.pure(f), app.pure(x)) == app.pure(f(x))

    def interchange_law(uy):
        u, y = uy
        return app.ap(u, app.pure(y)) == app.ap(app.pure(lambda f: f(y)), u)

    def fmap_law(fx):
        f, x = fx
        return app.fmap(f, x) == app.ap(app.pure(f), x)

    children = [
        ScenarioGroup("pure and ap", [
            Scenario(
                f"satisfy the identity law: ap(pure(identity), v) == v for {gen_fa.name}",
                gen_fa,
                identity_law,
            ),
            Scenario(
                "satisfy the composition law: "
                "ap(ap(ap(pure(compose), u), v), w) == ap(u, ap(v, w)) "
                f"for {gen_f_fun_bc.name} composed with {gen_f_fun_ab.name} and {gen_fa.name}",
                zip_generators(gen_f_fun_bc, gen_f_fun_ab, gen_fa),
                composition_law,
            ),
            Scenario(
                "satisfy the homomorphism law: ap(pure(f), pure(x)) == pure(f(x)) "
                f"for {gen_fun.name} and {gen_a.name}",
                zip_generators(gen_fun, gen_a),
                homomorphism_law,
            ),
            Scenario(
                "satisfy the interchange law: ap(u, pure(y)) == ap(pure(lambda f: f(y)), u) "
                f"for {gen_f_fun_ab.name} and {gen_a.name}",
                zip_generators(gen_f_fun_ab, gen_a),
                interchange_law,
            ),
        ]),
        ScenarioGroup("fmap", [
            Scenario(
                f"is equivalent to ap(pure(f), x) for {gen_fun.name} and {gen_fa.name}",
                zip_generators(gen_fun, gen_fa),
                fmap_law,
            ),
        ]),
    ]

    if app.then is not None:
        children.append(ScenarioGroup("then", [
            Scenario(
                f"is equivalent to ap(fmap(lambda _: identity, u), v) for {gen_fa.name} and {gen_fb.name}",
                zip_generators(gen_fa, gen_fb),
                lambda uv: app.then(*uv) == app.ap(app.fmap(lambda _: identity, uv[0]), uv[1]),
            ),
        ]))
    if app.before is not None:
        children.append(ScenarioGroup("before", [
            Scenario(
                f"is equivalent to lift_a2(lambda a, b: a, u, v) for {gen_fa.name} and {gen_fb.name}",
                zip_generators(gen_fa, gen_fb),
                lambda uv: app.before(*uv) == app.lift_a2(lambda a, b: a, *uv),
            ),
        ]))

    return ScenarioGroup(f"Applicative {app.name}", children)


def applicative_spec_on_gen(applicative: Applicative, element: Generator) -> ScenarioGroup:
    """
    Applicative laws with every operand derived from one element generator.

    Functions are drawn with ``hypothesis.strategies.functions`` returning
    elements, and wrapped with the adapter's ``wrap``.

    Raises:
        ValueError: If the adapter has no ``wrap`` strategy builder
    """
    if applicative.wrap is None:
        raise ValueError(f"Applicative {applicative.name} cannot wrap generated values")
    wrapped_name = f"{applicative.name} of {element.name} values"
    functions = Generator(
        st.functions(like=lambda a: a, returns=element.strategy, pure=True),
        f"functions to {element.name} values",
    )
    wrapped = Generator(applicative.wrap(element.strategy), wrapped_name)
    wrapped_functions = Generator(
        applicative.wrap(functions.strategy),
        f"{applicative.name} of {functions.name}",
    )
    return applicative_spec_on_gens(
        applicative,
        gen_a=element,
        gen_fa=wrapped,
        gen_fb=wrapped,
        gen_fun=functions,
        gen_f_fun_ab=wrapped_functions,
        gen_f_fun_bc=wrapped_functions,
    )


def applicative_specs(applicative: Applicative, tiers: GeneratorTiers) -> List[ScenarioGroup]:
    """The laws once per tier of element values: valid, unchecked and arbitrary."""
    return [
        applicative_spec_on_gen(applicative, tiers.valid),
        applicative_spec_on_gen(applicative, tiers.unchecked),
        applicative_spec_on_gen(applicative, tiers.arbitrary),
    ]
