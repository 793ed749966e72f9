"""
Utility functions shared by the `hypothesis-semver` generators.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import icontract
from hypothesis import strategies as st

T = TypeVar("T")

# Probabilities are resolved against an integer draw so that Hypothesis can
# shrink them like any other integer.
_PROBABILITY_RESOLUTION = 10_000


@icontract.require(
    lambda options: len(options) > 0 and sum(weight for weight, _ in options) > 0,
    "a weighted choice needs at least one option with a positive weight",
)
@icontract.require(
    lambda options: all(weight >= 0 for weight, _ in options),
    "weights are never negative",
)
def weighted_choice(draw: st.DrawFn, options: Sequence[tuple[int, T]]) -> T:
    """
    Pick one of `options`, a sequence of `(weight, value)` pairs.

    Shrinking moves toward the first option, so callers list the most
    ordinary choice first.
    """
    total = sum(weight for weight, _ in options)
    point = draw(st.integers(0, total - 1))
    for weight, value in options:
        if point < weight:
            return value
        point -= weight

    # Unreachable: `point` is always below the total weight.
    raise AssertionError("weighted choice fell off the end of its options")


def draw_probability(draw: st.DrawFn, probability: float) -> bool:
    """
    Draw `True` with the given probability.

    Shrinks toward `False`.
    """
    if probability <= 0.0:
        return False
    if probability >= 1.0:
        return True

    threshold = _PROBABILITY_RESOLUTION - round(probability * _PROBABILITY_RESOLUTION)
    return draw(st.integers(0, _PROBABILITY_RESOLUTION - 1)) >= threshold


@st.composite
def optional(
    draw: st.DrawFn, strategy: st.SearchStrategy[T], probability: float = 0.5
) -> T | None:
    """
    Draw from `strategy` with the given probability, `None` otherwise.
    """
    if draw_probability(draw, probability):
        return draw(strategy)
    return None
