"""Runtime settings for law execution."""

import os
from dataclasses import dataclass
from typing import Optional

from hypothesis import HealthCheck, Verbosity
from hypothesis import settings as hypothesis_settings


def _flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    max_examples: int = 100
    derandomize: bool = False
    seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``VALIDITY_*`` environment variables.

        Unset variables keep the dataclass defaults.
        """
        max_examples = int(os.getenv("VALIDITY_MAX_EXAMPLES", cls.max_examples))
        derandomize = _flag("VALIDITY_DERANDOMIZE")
        seed_text = os.getenv("VALIDITY_SEED")
        seed = int(seed_text) if seed_text else None
        verbose = _flag("VALIDITY_VERBOSE")
        return cls(max_examples=max_examples, derandomize=derandomize, seed=seed, verbose=verbose)

    def to_hypothesis(self) -> hypothesis_settings:
        """Translate into a Hypothesis settings object for a single law run."""
        return hypothesis_settings(
            max_examples=self.max_examples,
            derandomize=self.derandomize,
            database=None,
            deadline=None,
            report_multiple_bugs=False,
            suppress_health_check=list(HealthCheck),
            verbosity=Verbosity.verbose if self.verbose else Verbosity.quiet,
        )
