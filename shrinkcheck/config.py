# shrinkcheck/config.py
"""
Generation configuration and value previewing.

``GenerationConfig`` gathers the knobs used when drawing values outside of a
property run; ``sample`` uses them to preview what an arbitrary produces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, TypeVar

from shrinkcheck.arbitrary import Arbitrary
from shrinkcheck.errors import ConfigurationError
from shrinkcheck.rng import Random

__all__ = ["GenerationConfig", "sample"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class GenerationConfig:
    """Tuning knobs for previewing an arbitrary."""
    seed: int = 42
    num_samples: int = 10
    bias_frequency: Optional[int] = None

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.num_samples < 0:
            warnings.append("num_samples must be non-negative")
        if self.bias_frequency is not None and self.bias_frequency < 2:
            warnings.append("bias_frequency must be at least 2")
        return warnings


def sample(arbitrary: Arbitrary[T], config: Optional[GenerationConfig] = None) -> List[T]:
    """Draw ``config.num_samples`` values from *arbitrary*, in order.

    All values come from a single ``Random`` seeded with ``config.seed``, so
    the same configuration always yields the same list.
    """
    config = config or GenerationConfig()
    problems = config.validate()
    for problem in problems:
        logger.warning("GenerationConfig: %s", problem)
    if problems:
        raise ConfigurationError("; ".join(problems))
    if config.bias_frequency is not None:
        arbitrary = arbitrary.with_bias(config.bias_frequency)
    random = Random(config.seed)
    return [arbitrary.generate(random).value for _ in range(config.num_samples)]
