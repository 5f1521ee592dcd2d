"""Common surface of keyboard builders backed by a ``KeyboardGrid``."""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional, Tuple

from tgkeyboards.exceptions import MarkupError

from .codec import MarkupType, export_markup, extract_markup
from .grid import EntryPredicate, GridResult, KeyboardGrid, accept_any


class KeyboardMarkup:
    """Builder that owns a grid and the discriminator it is exported under."""

    def __init__(
        self,
        markup_type: Optional[MarkupType] = None,
        accepts: EntryPredicate = accept_any,
    ) -> None:
        self._grid = KeyboardGrid(accepts)
        self.markup_type = markup_type

    def __len__(self) -> int:
        return len(self._grid)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(markup_type={self.markup_type!r}, "
            f"rows={self._grid.content()!r})"
        )

    @property
    def length(self) -> int:
        """Current row count."""
        return len(self._grid)

    @property
    def rows(self) -> Tuple[Tuple[Any, ...], ...]:
        """Read-only snapshot of the keyboard rows."""
        return self._grid.rows

    def add_row(self, *entries: Any) -> GridResult:
        """Add a row of buttons; returns the new row count."""
        self._grid.add_row(*entries)
        return GridResult(keyboard=self, row_count=len(self._grid))

    def push(self, row_index: int, entry: Any) -> "KeyboardMarkup":
        """Append one button to a row; wraps out-of-range indices."""
        self._grid.push(row_index, entry)
        return self

    def remove_row(self, row_index: int) -> GridResult:
        """Delete a row; wraps out-of-range indices."""
        self._grid.remove_row(row_index)
        return GridResult(keyboard=self, row_count=len(self._grid))

    def empty_row(self, row_index: int) -> "KeyboardMarkup":
        """Clear a row's buttons; wraps out-of-range indices."""
        self._grid.empty_row(row_index)
        return self

    def pop_row(self) -> GridResult:
        """Remove the last row."""
        self._grid.pop_row()
        return GridResult(keyboard=self, row_count=len(self._grid))

    def pop(self, row_index: int) -> "KeyboardMarkup":
        """Remove the last button of a row."""
        self._grid.pop(row_index)
        return self

    def row_length(self, row_index: int) -> int:
        """Number of buttons in a row; negative indices count from the end."""
        return self._grid.row_length(row_index)

    def export(self, override: Any = None) -> Dict[str, Any]:
        """Return the ``reply_markup`` envelope for this keyboard.

        Args:
            override: Value sent in place of the rows (``True`` when removing
                a reply keyboard). ``None`` sends a copy of the rows.
        """
        if self.markup_type is None:
            raise MarkupError(
                f"{type(self).__name__} has no markup type yet; open or close it first"
            )
        content = (
            override if override is not None else copy.deepcopy(self._grid.content())
        )
        return export_markup(self.markup_type, content)

    def extract(self, envelope: Any) -> Any:
        """Return this keyboard kind's content from a received envelope."""
        return extract_markup(envelope, self.markup_type)
