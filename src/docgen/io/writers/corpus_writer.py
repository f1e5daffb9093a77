"""Corpus output sink.

:func:`open_output` creates (or truncates) the destination file and returns a
buffered text stream.  ``newline=""`` is passed to :func:`open` so the
``"\\n"`` terminating each document is written verbatim on every platform.
Parent directories are created as needed.  The caller owns the stream and is
expected to flush and close it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

from ...utils.errors import OutputOpenError

PathLikeStr = os.PathLike[str]

DEFAULT_BUFFER_SIZE = 1 << 20


def open_output(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8",
    buffering: int = DEFAULT_BUFFER_SIZE,
) -> TextIO:
    """Open ``path`` for writing documents.

    Raises
    ------
    OutputOpenError
        If the file or one of its parent directories cannot be created.
    """

    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return open(file_path, "w", encoding=encoding, newline="", buffering=buffering)
    except OSError as exc:
        raise OutputOpenError(f"Failed to create output file '{path}': {exc}") from exc


__all__ = ["DEFAULT_BUFFER_SIZE", "open_output"]
