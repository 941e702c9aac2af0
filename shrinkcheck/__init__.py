"""shrinkcheck — generation and shrinking core for property-based testing.

This package provides composable value producers (``Arbitrary``) that draw
reproducible pseudo-random values and attach to each one a lazy tree of
smaller candidates used to minimise failing counterexamples.

Submodules
----------
rng
    ``Random``: seeded, cloneable random source.
shrinkable
    ``Shrinkable`` nodes and ``NextValue`` shrink candidates.
arbitrary
    The ``Arbitrary`` contract and its combinators (``filter``, ``map``,
    ``chain``, ``no_shrink``, ``with_bias``, ``no_bias``).
frequency
    Weighted choice (``FrequencyArbitrary``) and ``one_of``.
primitives
    Reference leaves ``integer`` and ``constant``.
shrink_tree
    Build, walk and render shrink trees.
config
    ``GenerationConfig`` and ``sample``.
errors
    Exception hierarchy rooted at ``ShrinkcheckError``.

Usage
-----
::

    from shrinkcheck import Random, integer, one_of, constant

    evens = integer(0, 10).filter(lambda v: v % 2 == 0)
    arb = one_of(evens, constant(-1))
    node = arb.generate(Random(7))
    print(node.value, [s.value for s in node.shrinks()])

"""

from __future__ import annotations

from shrinkcheck.arbitrary import (
    Arbitrary,
    Biased,
    Chained,
    Filtered,
    Mapped,
    NoShrink,
    Unbiased,
)
from shrinkcheck.config import GenerationConfig, sample
from shrinkcheck.errors import (
    ConfigurationError,
    EmptyChoiceError,
    InvalidBiasFrequencyError,
    InvalidParameterError,
    InvalidWeightError,
    PredicateExhaustedError,
    ShrinkcheckError,
)
from shrinkcheck.frequency import (
    FrequencyArbitrary,
    FrequencyConstraints,
    WeightedArbitrary,
    one_of,
)
from shrinkcheck.primitives import constant, integer
from shrinkcheck.rng import Random
from shrinkcheck.shrink_tree import (
    TRUNCATED,
    NodeBudget,
    ShrinkTree,
    build_shrink_tree,
    count_nodes,
    render_tree,
    shrink_tree_of,
    walk_tree,
)
from shrinkcheck.shrinkable import NextValue, Shrinkable

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    # core
    "Random",
    "Shrinkable",
    "NextValue",
    "Arbitrary",
    "Filtered",
    "Mapped",
    "Chained",
    "NoShrink",
    "Biased",
    "Unbiased",
    # choice
    "FrequencyArbitrary",
    "FrequencyConstraints",
    "WeightedArbitrary",
    "one_of",
    # leaves
    "integer",
    "constant",
    # trees
    "TRUNCATED",
    "NodeBudget",
    "ShrinkTree",
    "build_shrink_tree",
    "shrink_tree_of",
    "walk_tree",
    "render_tree",
    "count_nodes",
    # config
    "GenerationConfig",
    "sample",
    # errors
    "ShrinkcheckError",
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidBiasFrequencyError",
    "InvalidWeightError",
    "EmptyChoiceError",
    "PredicateExhaustedError",
]
