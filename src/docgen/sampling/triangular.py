"""Triangular word-count sampler.

A triangular distribution over ``[minimum, maximum]`` has mean
``(minimum + maximum + mode) / 3``.  Solving for the mode gives
``mode = 3 * target_avg - minimum - maximum``; the result is clamped into the
range, so an unreachable target degenerates into a left or right triangle
instead of failing.  Samples are drawn by inverting the piecewise CDF and
truncated toward zero.

Only the ``random()`` method of the supplied RNG is used, exactly once per
call, which keeps a seeded run reproducible draw for draw.
"""

from __future__ import annotations

import math
import random

__all__ = ["effective_mean", "mode_for", "triangular_word_count"]


def mode_for(minimum: int, maximum: int, target_avg: float) -> float:
    """Return the mode yielding ``target_avg``, clamped into the range."""

    mode = 3.0 * target_avg - minimum - maximum
    if mode < minimum:
        return float(minimum)
    if mode > maximum:
        return float(maximum)
    return mode


def effective_mean(minimum: int, maximum: int, target_avg: float) -> float:
    """Return the mean of the distribution actually sampled.

    Equals ``target_avg`` whenever the unclamped mode lies inside
    ``[minimum, maximum]``.  Word counts are truncated, so observed averages
    run slightly (under one word) below this value.
    """

    return (minimum + maximum + mode_for(minimum, maximum, target_avg)) / 3.0


def triangular_word_count(
    rng: random.Random, minimum: int, maximum: int, target_avg: float
) -> int:
    """Sample one word count in ``[minimum, maximum]``.

    Parameters
    ----------
    rng:
        Shared random source, advanced by one ``random()`` draw.
    minimum, maximum:
        Inclusive bounds; ``maximum >= minimum >= 0`` is validated by the
        configuration layer, not here.
    target_avg:
        Desired average word count.  Values outside the reachable band clamp
        the mode to the nearest bound.

    Notes
    -----
    ``minimum == maximum`` is a single-point distribution and returns
    ``minimum`` without touching ``rng``.
    """

    if maximum == minimum:
        return minimum

    mode = mode_for(minimum, maximum, target_avg)
    span = float(maximum - minimum)
    u = rng.random()
    split = (mode - minimum) / span

    if u < split:
        result = minimum + math.sqrt(u * span * (mode - minimum))
    else:
        result = maximum - math.sqrt((1.0 - u) * span * (maximum - mode))
    return int(result)
