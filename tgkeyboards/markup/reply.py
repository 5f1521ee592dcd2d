"""Reply keyboard builder with open/close helpers.

See https://core.telegram.org/bots/api#replykeyboardmarkup and
https://core.telegram.org/bots/api#replykeyboardremove
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import structlog

from .base import KeyboardMarkup
from .codec import MarkupType
from .grid import GridResult

logger = structlog.get_logger()


class ReplyKeyboard(KeyboardMarkup):
    """Reply keyboard. Buttons are texts or button mappings, never validated.

    The keyboard has no markup type until ``open()`` or ``close()`` is called.
    """

    def __init__(self, *keys: Any, resize_keyboard: bool = True) -> None:
        super().__init__(markup_type=None)
        self.resize_keyboard = resize_keyboard
        self._keys: List[Any] = []
        if keys:
            self.add_row(*keys)

    @property
    def keys(self) -> Tuple[Any, ...]:
        """Every button ever added through ``add_row``, in insertion order.

        This is a log: removing rows or popping buttons does not shrink it.
        """
        return tuple(self._keys)

    def add_row(self, *entries: Any) -> GridResult:
        """Add a row of buttons and record them in ``keys``."""
        result = super().add_row(*entries)
        self._keys.extend(entries)
        return result

    def open(self) -> Dict[str, Any]:
        """Switch to ``keyboard`` and return the payload that shows it."""
        self.markup_type = MarkupType.KEYBOARD
        payload = self.export()
        payload["resize_keyboard"] = self.resize_keyboard
        logger.debug("Reply keyboard opened", rows=len(self))
        return payload

    def close(self) -> Dict[str, Any]:
        """Switch to ``remove_keyboard`` and return the payload that hides it."""
        self.markup_type = MarkupType.REMOVE_KEYBOARD
        logger.debug("Reply keyboard closed", rows=len(self))
        return self.export(True)
