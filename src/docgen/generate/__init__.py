"""Document and corpus generation."""

from .corpus import CorpusStats, iter_documents, progress_interval, write_corpus
from .document import GenerationParams, document_words, generate_document, pick_words

__all__ = [
    "CorpusStats",
    "GenerationParams",
    "document_words",
    "generate_document",
    "iter_documents",
    "pick_words",
    "progress_interval",
    "write_corpus",
]
