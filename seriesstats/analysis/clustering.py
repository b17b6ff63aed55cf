"""Head/tail breaks partitioning."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import numpy as np

from seriesstats.settings import get_settings

T = TypeVar("T")


def _identity(value: Any) -> float:
    return value


def head_tails_breaks(
    elements: Iterable[T],
    key: Callable[[T], float] | None = None,
    threshold: float | None = None,
) -> list[T]:
    """Isolate the cluster of elements whose ``key`` sits above the running mean.

    The elements above the mean form the head. While the head still holds at
    least ``threshold`` of the current elements the split is repeated on it.
    An empty head ends the search with the current elements.
    https://en.wikipedia.org/wiki/Head/tail_breaks
    """

    keyfn = key or _identity
    if threshold is None:
        threshold = get_settings().threshold

    current = list(elements)
    while current:
        mean = float(np.mean([keyfn(element) for element in current]))
        head = [element for element in current if keyfn(element) > mean]
        if not head:
            return current
        if len(head) / len(current) < threshold:
            return head
        current = head
    return current


__all__ = ["head_tails_breaks"]
