"""Row/grid engine shared by inline and reply keyboards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

import structlog

from tgkeyboards.exceptions import EntryTypeError, IndexOutOfBoundsError

from .indexing import from_end_row_index, modulo_row_index, wrap_row_index

logger = structlog.get_logger()

EntryPredicate = Callable[[Any], bool]


def accept_any(entry: Any) -> bool:
    """Entry predicate that accepts every value."""
    return True


@dataclass(frozen=True)
class GridResult:
    """Outcome of a row-count changing operation.

    ``keyboard`` is the same object the operation was called on, so calls can
    keep chaining from it.
    """

    keyboard: Any
    row_count: int

    @property
    def length(self) -> int:
        """Row count right after the operation."""
        return self.row_count


class KeyboardGrid:
    """Ordered, jagged rows of button entries.

    Not thread-safe: callers sharing a grid across threads must lock around it.
    """

    def __init__(self, accepts: EntryPredicate = accept_any) -> None:
        self._accepts = accepts
        self._rows: List[List[Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows!r})"

    @property
    def length(self) -> int:
        """Current row count."""
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Tuple[Any, ...], ...]:
        """Read-only snapshot of the grid content."""
        return tuple(tuple(row) for row in self._rows)

    def content(self) -> List[List[Any]]:
        """Return the live row lists. Callers must not mutate them."""
        return self._rows

    def add_row(self, *entries: Any) -> GridResult:
        """Append a new row holding every accepted entry, in order."""
        row: List[Any] = []
        self._rows.append(row)
        for entry in entries:
            if self._accepts(entry):
                row.append(entry)
            else:
                logger.debug(
                    "Dropped invalid keyboard entry",
                    row=len(self._rows) - 1,
                    entry_type=type(entry).__name__,
                )
        return GridResult(keyboard=self, row_count=len(self._rows))

    def push(self, row_index: int, entry: Any) -> "KeyboardGrid":
        """Append a single ``entry`` to the row at ``row_index``."""
        index = wrap_row_index(row_index, len(self._rows))

        if isinstance(entry, (list, tuple)):
            raise EntryTypeError(
                "Misusage: cannot add a list of entries as a single button."
            )

        self._rows[index].append(entry)
        return self

    def remove_row(self, row_index: int) -> GridResult:
        """Delete the row at ``row_index``."""
        index = wrap_row_index(row_index, len(self._rows))
        del self._rows[index]
        return GridResult(keyboard=self, row_count=len(self._rows))

    def empty_row(self, row_index: int) -> "KeyboardGrid":
        """Clear the row at ``row_index`` while keeping it in place."""
        index = wrap_row_index(row_index, len(self._rows))
        self._rows[index] = []
        return self

    def pop_row(self) -> GridResult:
        """Remove the last row."""
        if not self._rows:
            raise IndexOutOfBoundsError(
                -1, 0, "Cannot pop a row: keyboard has no rows"
            )
        self._rows.pop()
        return GridResult(keyboard=self, row_count=len(self._rows))

    def pop(self, row_index: int) -> "KeyboardGrid":
        """Remove the last entry of the row at ``row_index``.

        Popping an already empty row leaves it unchanged.
        """
        index = modulo_row_index(row_index, len(self._rows))
        row = self._rows[index]
        if row:
            row.pop()
        return self

    def row_length(self, row_index: int) -> int:
        """Return the number of entries in the row at ``row_index``."""
        index = from_end_row_index(row_index, len(self._rows))
        return len(self._rows[index])
