"""Dictionary input and corpus output.

The words file is read by :func:`load_dictionary`; the corpus destination is
opened by :func:`open_output`.  Both translate low-level I/O failures into the
typed errors of :mod:`docgen.utils.errors`, keeping the original exception as
``__cause__``.
"""

from __future__ import annotations

from .readers.dictionary_reader import load_dictionary
from .writers.corpus_writer import open_output

__all__ = ["load_dictionary", "open_output"]
