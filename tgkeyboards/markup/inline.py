"""Inline keyboard builder.

See https://core.telegram.org/bots/api#inlinekeyboardmarkup
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from telegram import InlineKeyboardButton

from .base import KeyboardMarkup
from .codec import MarkupType
from .grid import GridResult


def is_inline_button(entry: Any) -> bool:
    """Inline buttons are mappings carrying at least a ``text`` field."""
    return isinstance(entry, Mapping) and "text" in entry


def _plain_entry(entry: Any) -> Any:
    """Store telegram buttons as their JSON mapping so exports stay plain."""
    if isinstance(entry, InlineKeyboardButton):
        return entry.to_dict()
    return entry


class InlineKeyboard(KeyboardMarkup):
    """Inline keyboard; buttons keep any extra fields (callback_data, url, ...).

    ``InlineKeyboardButton`` objects are accepted wherever a button mapping is
    and are stored as their ``to_dict()`` form.

    Args:
        button: Optional button placed alone on the first row. Ignored
            unless it is a mapping with a ``text`` field.
    """

    def __init__(
        self, button: Optional[Union[Mapping[str, Any], InlineKeyboardButton]] = None
    ) -> None:
        super().__init__(MarkupType.INLINE_KEYBOARD, accepts=is_inline_button)
        button = _plain_entry(button)
        if button is not None and is_inline_button(button):
            self.add_row(button)

    def add_row(self, *entries: Any) -> GridResult:
        """Add a row of buttons; entries without ``text`` are dropped."""
        return super().add_row(*(_plain_entry(entry) for entry in entries))

    def push(self, row_index: int, entry: Any) -> "InlineKeyboard":
        """Append one button to a row; wraps out-of-range indices."""
        super().push(row_index, _plain_entry(entry))
        return self
