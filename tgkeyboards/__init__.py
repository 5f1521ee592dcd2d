"""tgkeyboards.

Builders for Telegram Bot API keyboards, producing the exact JSON
``reply_markup`` payloads the API expects.

Features:
- Inline and reply keyboard builders with chainable row operations
- ``export()`` / ``extract()`` for outgoing and received payloads
- Conversion to python-telegram-bot markup objects
- Command line rendering of payloads
"""

from tgkeyboards.exceptions import (
    EmptyGridError,
    EntryTypeError,
    IndexOutOfBoundsError,
    KeyboardError,
    MarkupError,
)
from tgkeyboards.markup import GridResult, InlineKeyboard, MarkupType, ReplyKeyboard

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "EmptyGridError",
    "EntryTypeError",
    "GridResult",
    "IndexOutOfBoundsError",
    "InlineKeyboard",
    "KeyboardError",
    "MarkupError",
    "MarkupType",
    "ReplyKeyboard",
]
