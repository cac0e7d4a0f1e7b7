"""
Reusable law suites: relation properties lifted to generators, run as named
scenarios with counterexample shrinking.
"""

from .generators import Generator, GeneratorTiers, no_shrink, pairs_of, shrink_tuple, triples_of, zip_generators
from .property import LawResult, LawViolation, for_all_shrink, minimize
from .scenario import Scenario, ScenarioGroup, iter_scenarios
from .relations import (
    antireflexive_on_elem,
    antireflexivity_on_gen,
    antisymmetric_on_elems,
    antisymmetry_on_gens,
    equivalent_on_elem,
    equivalent_on_elems2,
    equivalent_on_gen,
    equivalent_on_gens2,
    reflexive_on_elem,
    reflexivity_on_gen,
    symmetric_on_elems,
    symmetry_on_gens,
    transitive_on_elems,
    transitivity_on_gens,
)
from .ord import Ordering, compare, ord_spec, ord_spec_on_arbitrary, ord_spec_on_gen, ord_spec_on_invalid, ord_spec_on_valid, ord_specs
from .show import (
    round_trips,
    show_read_round_trip_on_gen,
    show_read_spec,
    show_read_spec_on_arbitrary,
    show_read_spec_on_gen,
    show_read_spec_on_valid,
    show_read_specs,
)
from .applicative import LIST, OPTIONAL, Applicative, applicative_spec_on_gen, applicative_spec_on_gens, applicative_specs

__all__ = [
    "Generator",
    "GeneratorTiers",
    "no_shrink",
    "pairs_of",
    "shrink_tuple",
    "triples_of",
    "zip_generators",
    "LawResult",
    "LawViolation",
    "for_all_shrink",
    "minimize",
    "Scenario",
    "ScenarioGroup",
    "iter_scenarios",
    "antireflexive_on_elem",
    "antireflexivity_on_gen",
    "antisymmetric_on_elems",
    "antisymmetry_on_gens",
    "equivalent_on_elem",
    "equivalent_on_elems2",
    "equivalent_on_gen",
    "equivalent_on_gens2",
    "reflexive_on_elem",
    "reflexivity_on_gen",
    "symmetric_on_elems",
    "symmetry_on_gens",
    "transitive_on_elems",
    "transitivity_on_gens",
    "Ordering",
    "compare",
    "ord_spec",
    "ord_spec_on_arbitrary",
    "ord_spec_on_gen",
    "ord_spec_on_invalid",
    "ord_spec_on_valid",
    "ord_specs",
    "round_trips",
    "show_read_round_trip_on_gen",
    "show_read_spec",
    "show_read_spec_on_arbitrary",
    "show_read_spec_on_gen",
    "show_read_spec_on_valid",
    "show_read_specs",
    "LIST",
    "OPTIONAL",
    "Applicative",
    "applicative_spec_on_gen",
    "applicative_spec_on_gens",
    "applicative_specs",
]
