"""Words-file reader.

The dictionary is a newline-delimited text file.  Every line is stripped of
surrounding whitespace and blank lines are skipped; each remaining line is one
dictionary entry.  The file is streamed rather than read whole.  A UTF-8
byte-order mark is consumed by the ``"utf-8-sig"`` default codec.
"""

from __future__ import annotations

import os

from ...utils.errors import DictionaryLoadError, EmptyDictionaryError
from ...utils.logging import get_logger

PathLikeStr = os.PathLike[str]

log = get_logger(__name__)


def load_dictionary(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
) -> tuple[str, ...]:
    """Load the words in ``path`` as an immutable tuple.

    Raises
    ------
    DictionaryLoadError
        If the file cannot be opened, read or decoded with ``encoding``.
    EmptyDictionaryError
        If the file holds no non-blank lines.
    """

    words: list[str] = []
    try:
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                word = line.strip()
                if word:
                    words.append(word)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Failed to read words file '{path}': {exc}") from exc

    if not words:
        raise EmptyDictionaryError(f"No words found in '{path}'")

    log.debug("Loaded %d words from %s", len(words), path)
    return tuple(words)


__all__ = ["load_dictionary"]
