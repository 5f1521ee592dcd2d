"""Row index resolution policies.

Keyboard operations resolve a requested row index in one of three ways:

- ``wrap_row_index``: out-of-range indices wrap with ``abs(index) % rows``,
  so ``-1`` on a three-row keyboard lands on row ``1``, not the last row.
  Used by ``push``, ``remove_row`` and ``empty_row``.
- ``modulo_row_index``: only indices past the end wrap, by plain modulo.
  Negative indices are rejected. Used by ``pop``.
- ``from_end_row_index``: negative indices count from the end, positive
  indices never wrap. Used by ``row_length``.

The policies disagree on purpose; callers rely on each operation keeping
its own behaviour.
"""

from __future__ import annotations

from tgkeyboards.exceptions import EmptyGridError, IndexOutOfBoundsError


def wrap_row_index(index: int, row_count: int) -> int:
    """Resolve ``index`` into ``[0, row_count - 1]`` using the abs-modulo rule."""
    if row_count <= 0:
        raise EmptyGridError(index)
    if 0 <= index < row_count:
        return index
    # Same as the absolute value of a truncated remainder.
    return abs(index) % row_count


def modulo_row_index(index: int, row_count: int) -> int:
    """Resolve ``index`` by plain modulo when it runs past the last row."""
    if row_count <= 0:
        raise EmptyGridError(index)
    if index < 0:
        raise IndexOutOfBoundsError(
            index,
            row_count,
            f"Negative row index {index} is not supported here",
        )
    if index > row_count - 1:
        return index % row_count
    return index


def from_end_row_index(index: int, row_count: int) -> int:
    """Resolve negative ``index`` from the end; never wrap positive ones."""
    if row_count <= 0:
        raise EmptyGridError(index)
    resolved = row_count + index if index < 0 else index
    if not 0 <= resolved < row_count:
        raise IndexOutOfBoundsError(index, row_count)
    return resolved
