"""Grid flood fill and walks over the Petersen graph."""

from __future__ import annotations

from collections import deque
from typing import Sequence

PETERSEN_EDGES: frozenset[frozenset[int]] = frozenset(
    frozenset(edge)
    for edge in [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
        (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
        (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
    ]
)

_LETTERS = "ABCDE"
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def flood_fill(
    image: Sequence[Sequence[int]], row: int, column: int, new_color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the 4-connected region at (row, column) recoloured."""
    filled = [list(line) for line in image]
    if not filled or not 0 <= row < len(filled) or not 0 <= column < len(filled[row]):
        raise IndexError(f"pixel ({row}, {column}) out of range")

    old_color = filled[row][column]
    if old_color == new_color:
        return filled

    filled[row][column] = new_color
    queue = deque([(row, column)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < len(filled) and 0 <= ny < len(filled[nx]):
                if filled[nx][ny] == old_color:
                    filled[nx][ny] = new_color
                    queue.append((nx, ny))
    return filled


def _adjacent(u: int, v: int) -> bool:
    return frozenset((u, v)) in PETERSEN_EDGES


def _walk_from(letters: str, vertex: int) -> str | None:
    path = [vertex]
    for letter in letters[1:]:
        outer = _LETTERS.index(letter)
        if _adjacent(vertex, outer):
            vertex = outer
        elif _adjacent(vertex, outer + 5):
            vertex = outer + 5
        else:
            return None
        path.append(vertex)
    return "".join(map(str, path))


def petersen_walk(letters: str) -> str | None:
    """Find a walk in the Petersen graph spelling ``letters``.

    Vertices ``i`` and ``i + 5`` carry the letter ``"ABCDE"[i]``. Returns the
    visited vertices as a string of digits, or None if no walk exists.
    """
    if not letters:
        raise ValueError("letters must not be empty")
    invalid = set(letters) - set(_LETTERS)
    if invalid:
        raise ValueError(f"letters must be from {_LETTERS!r}, got {sorted(invalid)}")
    first = _LETTERS.index(letters[0])
    return _walk_from(letters, first) or _walk_from(letters, first + 5)