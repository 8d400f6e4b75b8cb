"""Small numeric helpers shared by the graph classes."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

__all__ = ["prefix_sum"]


def prefix_sum(values: Iterable[int]) -> list[int]:
    """Return the inclusive running sums of ``values``.

    An empty input yields an empty list.
    """
    return list(accumulate(values))