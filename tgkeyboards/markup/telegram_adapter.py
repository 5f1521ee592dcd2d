"""Conversion between keyboard builders and python-telegram-bot markup objects."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
)

from tgkeyboards.exceptions import MarkupError

from .base import KeyboardMarkup
from .codec import MarkupType
from .inline import InlineKeyboard
from .reply import ReplyKeyboard

TelegramMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove]


def button_entry(button: Any) -> Any:
    """Turn a telegram button into a plain entry; other values pass through."""
    if isinstance(button, (InlineKeyboardButton, KeyboardButton)):
        return button.to_dict()
    return button


def _reply_button(entry: Any) -> Union[str, KeyboardButton]:
    if isinstance(entry, KeyboardButton):
        return entry
    if isinstance(entry, Mapping):
        return KeyboardButton.de_json(dict(entry), None)
    return str(entry)


def _inline_button(entry: Any) -> InlineKeyboardButton:
    if isinstance(entry, InlineKeyboardButton):
        return entry
    if isinstance(entry, Mapping):
        return InlineKeyboardButton.de_json(dict(entry), None)
    raise MarkupError(
        f"Inline keyboard entry must be a button mapping, got {type(entry).__name__}"
    )


def build_reply_markup(keyboard: KeyboardMarkup) -> TelegramMarkup:
    """Build the telegram markup object matching a keyboard's current state."""
    if keyboard.markup_type == MarkupType.INLINE_KEYBOARD:
        return InlineKeyboardMarkup(
            [[_inline_button(entry) for entry in row] for row in keyboard.rows]
        )

    if keyboard.markup_type == MarkupType.KEYBOARD:
        resize = bool(getattr(keyboard, "resize_keyboard", True))
        return ReplyKeyboardMarkup(
            [[_reply_button(entry) for entry in row] for row in keyboard.rows],
            resize_keyboard=resize,
        )

    if keyboard.markup_type == MarkupType.REMOVE_KEYBOARD:
        return ReplyKeyboardRemove()

    raise MarkupError(
        f"{type(keyboard).__name__} has no markup type yet; open or close it first"
    )


def inline_keyboard_from_markup(markup: InlineKeyboardMarkup) -> InlineKeyboard:
    """Rebuild an ``InlineKeyboard`` from a received telegram markup."""
    keyboard = InlineKeyboard()
    for row in markup.inline_keyboard:
        keyboard.add_row(*(button_entry(button) for button in row))
    return keyboard


def reply_keyboard_from_markup(markup: ReplyKeyboardMarkup) -> ReplyKeyboard:
    """Rebuild an opened ``ReplyKeyboard`` from a telegram markup."""
    keyboard = ReplyKeyboard(resize_keyboard=bool(markup.resize_keyboard))
    for row in markup.keyboard:
        keyboard.add_row(*(_plain_reply_entry(button) for button in row))
    keyboard.markup_type = MarkupType.KEYBOARD
    return keyboard


def _plain_reply_entry(button: KeyboardButton) -> Union[str, Dict[str, Any]]:
    """Keep text-only buttons as strings, richer buttons as mappings."""
    data = button.to_dict()
    if set(data) == {"text"}:
        return data["text"]
    return data
