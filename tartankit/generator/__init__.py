"""
Seeded, constraint-driven tartan generation.

Provides the deterministic PRNG, generator constraints and presets, and the
single, batch and variation generators.
"""

from .constraints import (
    CONSTRAINT_PRESETS,
    DEFAULT_CONSTRAINTS,
    GeneratorConstraints,
    IntRange,
    SymmetryChoice,
    constraints_from_dict,
    get_preset,
    list_presets,
    load_presets,
)
from .generator import (
    GeneratorResult,
    VariationType,
    generate_batch,
    generate_tartan,
    generate_variations,
    random_seed,
    select_colors,
    synthesize_stripes,
)
from .rng import SeededRandom

__all__ = [
    # rng
    "SeededRandom",
    # constraints
    "IntRange",
    "SymmetryChoice",
    "GeneratorConstraints",
    "DEFAULT_CONSTRAINTS",
    "CONSTRAINT_PRESETS",
    "constraints_from_dict",
    "load_presets",
    "get_preset",
    "list_presets",
    # generation
    "VariationType",
    "GeneratorResult",
    "random_seed",
    "select_colors",
    "synthesize_stripes",
    "generate_tartan",
    "generate_batch",
    "generate_variations",
]
