"""Random source construction.

The generator owns exactly one :class:`random.Random` per run.  It is created
here and passed explicitly to the sampler and the word picker; nothing in the
package touches the module-level ``random`` state.
"""

from __future__ import annotations

import random
import time

from ..utils.logging import get_logger

__all__ = ["make_rng", "resolve_seed"]

log = get_logger(__name__)


def resolve_seed(seed: int | None) -> int:
    """Return ``seed`` or, when ``None``, a wall-clock derived seed."""

    if seed is not None:
        return int(seed)
    return time.time_ns()


def make_rng(seed: int | None = None) -> tuple[random.Random, int]:
    """Return a fresh RNG together with the seed it was created from.

    The seed is reported back so a run started without one can be replayed
    byte for byte with ``--seed``.
    """

    resolved = resolve_seed(seed)
    log.debug("Seeding random source with %d", resolved)
    return random.Random(resolved), resolved
