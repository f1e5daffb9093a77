"""Single-document generation.

A document is ``n`` words drawn uniformly with replacement from the
dictionary, joined by single spaces and terminated by ``"\\n"``.  ``n`` comes
from :func:`docgen.sampling.triangular_word_count`.  The RNG is consumed in a
fixed order per document: one draw for the word count, then one per word.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from ..sampling.triangular import triangular_word_count
from ..utils.errors import ConfigError, EmptyDictionaryError

__all__ = ["GenerationParams", "document_words", "generate_document", "pick_words"]


@dataclass(frozen=True)
class GenerationParams:
    """Immutable parameters for one generation run."""

    num_documents: int
    min_words: int
    max_words: int
    avg_words: float

    def __post_init__(self) -> None:
        if self.num_documents < 0:
            raise ConfigError("num_documents must be >= 0")
        if self.min_words < 0:
            raise ConfigError("min_words must be >= 0")
        if self.max_words < self.min_words:
            raise ConfigError(
                f"max_words ({self.max_words}) must be >= min_words ({self.min_words})"
            )


def pick_words(rng: random.Random, dictionary: Sequence[str], count: int) -> list[str]:
    """Return ``count`` words drawn uniformly with replacement."""

    if not dictionary:
        raise EmptyDictionaryError("Cannot pick words from an empty dictionary")
    if count <= 0:
        return []
    return rng.choices(dictionary, k=count)


def document_words(
    rng: random.Random,
    dictionary: Sequence[str],
    min_words: int,
    max_words: int,
    target_avg: float,
) -> list[str]:
    """Sample a word count, then that many words."""

    count = triangular_word_count(rng, min_words, max_words, target_avg)
    return pick_words(rng, dictionary, count)


def generate_document(
    rng: random.Random,
    dictionary: Sequence[str],
    min_words: int,
    max_words: int,
    target_avg: float,
) -> str:
    """Return one newline-terminated document."""

    if not dictionary:
        raise EmptyDictionaryError("Cannot generate documents from an empty dictionary")
    words = document_words(rng, dictionary, min_words, max_words, target_avg)
    return " ".join(words) + "\n"
