"""Bulk corpus generation.

:func:`write_corpus` drives the main loop: it produces ``num_documents``
documents one at a time and hands each to the sink in a single ``write``
call, so peak memory is bounded by the longest document rather than the
corpus.  The sink is flushed explicitly once, after the last document.

Failure semantics
-----------------
- An empty dictionary raises :class:`EmptyDictionaryError` before anything is
  written.
- Any error from ``write`` or the final ``flush`` is re-raised as
  :class:`OutputWriteError` and generation stops; whatever reached the sink
  stays there.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from ..utils.errors import EmptyDictionaryError, OutputWriteError
from ..utils.logging import get_logger
from .document import GenerationParams, document_words, generate_document

__all__ = [
    "CorpusStats",
    "DocumentSink",
    "ProgressCallback",
    "iter_documents",
    "progress_interval",
    "write_corpus",
]

log = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


class DocumentSink(Protocol):
    """Minimal writable text stream accepted by :func:`write_corpus`."""

    def write(self, text: str, /) -> object: ...

    def flush(self) -> None: ...


@dataclass(frozen=True)
class CorpusStats:
    """Totals for a completed run."""

    documents: int
    words: int

    @property
    def mean_words(self) -> float:
        if self.documents == 0:
            return 0.0
        return self.words / self.documents


def progress_interval(total: int, steps: int = 10) -> int:
    """Return how many documents separate two progress notifications."""

    return max(1, total // max(1, steps))


def iter_documents(
    rng: random.Random, dictionary: Sequence[str], params: GenerationParams
) -> Iterator[str]:
    """Yield ``params.num_documents`` documents in generation order."""

    if not dictionary:
        raise EmptyDictionaryError("Cannot generate documents from an empty dictionary")
    for _ in range(params.num_documents):
        yield generate_document(
            rng, dictionary, params.min_words, params.max_words, params.avg_words
        )


def write_corpus(
    sink: DocumentSink,
    rng: random.Random,
    dictionary: Sequence[str],
    params: GenerationParams,
    *,
    on_progress: ProgressCallback | None = None,
    progress_steps: int = 10,
) -> CorpusStats:
    """Generate the corpus into ``sink`` and return its totals.

    ``on_progress(done, total)`` is called every
    :func:`progress_interval` documents and after the final one.
    """

    if not dictionary:
        raise EmptyDictionaryError("Cannot generate documents from an empty dictionary")

    total = params.num_documents
    interval = progress_interval(total, progress_steps)
    words = 0

    log.debug("Generating %d documents from %d words", total, len(dictionary))
    for done in range(1, total + 1):
        picked = document_words(
            rng, dictionary, params.min_words, params.max_words, params.avg_words
        )
        try:
            sink.write(" ".join(picked) + "\n")
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"Failed writing document {done} of {total}: {exc}") from exc
        words += len(picked)
        if on_progress is not None and (done % interval == 0 or done == total):
            on_progress(done, total)

    try:
        sink.flush()
    except (OSError, ValueError) as exc:
        raise OutputWriteError(f"Failed flushing output: {exc}") from exc
    log.debug("Flushed %d documents", total)

    return CorpusStats(documents=total, words=words)
