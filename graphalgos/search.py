"""Binary search over a sorted sequence."""

from __future__ import annotations

from typing import Any, Sequence

NOT_FOUND = -1


def binary_search(
    array: Sequence[Any],
    element: Any,
    start: int = 0,
    end: int | None = None,
) -> int:
    """Return the index of ``element`` within ``array[start:end + 1]``, or -1.

    ``array`` must be sorted in ascending order. ``end`` is inclusive and
    defaults to the last index.
    """
    if end is None:
        end = len(array) - 1
    while start <= end:
        middle = start + (end - start) // 2
        value = array[middle]
        if value == element:
            return middle
        if value < element:
            start = middle + 1
        else:
            end = middle - 1
    return NOT_FOUND