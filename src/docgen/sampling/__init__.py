"""Word-count sampling and random source helpers."""

from .seed import make_rng, resolve_seed
from .triangular import effective_mean, mode_for, triangular_word_count

__all__ = [
    "effective_mean",
    "make_rng",
    "mode_for",
    "resolve_seed",
    "triangular_word_count",
]
