"""docgen: bulk synthetic text corpus generator.

Documents are whitespace-joined words drawn from a dictionary file, one
document per line, with per-document word counts following a triangular
distribution tuned to a target average.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
