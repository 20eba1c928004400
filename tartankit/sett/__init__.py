"""
Sett (threadcount) model.

Parses and formats threadcount notation, expands setts into thread
sequences, computes comparison signatures, transforms and validates setts.
"""

from .examples import EXAMPLE_SETTS, get_example_sett
from .expansion import expand_sett, get_thread_at
from .notation import (
    InvalidNotation,
    build_sett,
    format_stripes,
    parse_threadcount,
    to_threadcount_string,
)
from .signatures import compare_signatures, generate_signatures
from .transforms import normalize_sett, reverse_sett, scale_sett, shift_colors
from .types import (
    ExpandedSett,
    Sett,
    SettSignature,
    SignatureComparison,
    Symmetry,
    ThreadStripe,
)
from .validation import SettValidation, ValidationOptions, validate_sett

__all__ = [
    # types
    "Symmetry",
    "ThreadStripe",
    "Sett",
    "ExpandedSett",
    "SettSignature",
    "SignatureComparison",
    "SettValidation",
    "ValidationOptions",
    # errors
    "InvalidNotation",
    # notation
    "parse_threadcount",
    "to_threadcount_string",
    "format_stripes",
    "build_sett",
    # expansion
    "expand_sett",
    "get_thread_at",
    # signatures
    "generate_signatures",
    "compare_signatures",
    # transforms
    "scale_sett",
    "normalize_sett",
    "shift_colors",
    "reverse_sett",
    # validation
    "validate_sett",
    # examples
    "EXAMPLE_SETTS",
    "get_example_sett",
]
