"""Keyboard builders and the Telegram ``reply_markup`` codec.

Key Components:
- InlineKeyboard: inline button grids (callback/url buttons)
- ReplyKeyboard: reply button grids with open/close payloads
- KeyboardGrid: row engine shared by both builders
"""

from .base import KeyboardMarkup
from .codec import MarkupType, export_markup, extract_markup
from .grid import GridResult, KeyboardGrid
from .indexing import from_end_row_index, modulo_row_index, wrap_row_index
from .inline import InlineKeyboard
from .reply import ReplyKeyboard

__all__ = [
    "GridResult",
    "InlineKeyboard",
    "KeyboardGrid",
    "KeyboardMarkup",
    "MarkupType",
    "ReplyKeyboard",
    "export_markup",
    "extract_markup",
    "from_end_row_index",
    "modulo_row_index",
    "wrap_row_index",
]
