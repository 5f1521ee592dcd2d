"""Tests for python-telegram-bot markup conversion."""

import pytest
from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
)

from tgkeyboards.exceptions import MarkupError
from tgkeyboards.markup import (
    InlineKeyboard,
    KeyboardMarkup,
    MarkupType,
    ReplyKeyboard,
)
from tgkeyboards.markup.telegram_adapter import (
    build_reply_markup,
    button_entry,
    inline_keyboard_from_markup,
    reply_keyboard_from_markup,
)


def test_build_reply_markup_for_inline_keyboard():
    keyboard = InlineKeyboard({"text": "Hi", "callback_data": "hi"})
    keyboard.add_row({"text": "Docs", "url": "https://example.com"})

    markup = build_reply_markup(keyboard)

    assert isinstance(markup, InlineKeyboardMarkup)
    assert markup.inline_keyboard[0][0].text == "Hi"
    assert markup.inline_keyboard[0][0].callback_data == "hi"
    assert markup.inline_keyboard[1][0].url == "https://example.com"


def test_build_reply_markup_for_opened_reply_keyboard():
    keyboard = ReplyKeyboard("a", {"text": "Share", "request_contact": True})
    keyboard.open()

    markup = build_reply_markup(keyboard)

    assert isinstance(markup, ReplyKeyboardMarkup)
    assert markup.keyboard[0][0].text == "a"
    assert markup.keyboard[0][1].request_contact is True
    assert markup.resize_keyboard is True


def test_build_reply_markup_for_closed_reply_keyboard():
    keyboard = ReplyKeyboard("a")
    keyboard.close()

    markup = build_reply_markup(keyboard)

    assert isinstance(markup, ReplyKeyboardRemove)
    assert markup.remove_keyboard is True


def test_build_reply_markup_requires_markup_type():
    with pytest.raises(MarkupError):
        build_reply_markup(ReplyKeyboard("a"))


def test_inline_keyboard_from_markup_keeps_button_fields():
    markup = InlineKeyboardMarkup(
        [
            [
                InlineKeyboardButton("A", callback_data="a"),
                InlineKeyboardButton("Site", url="https://example.com"),
            ]
        ]
    )

    keyboard = inline_keyboard_from_markup(markup)

    assert keyboard.export() == {
        "reply_markup": {
            "inline_keyboard": [
                [
                    {"text": "A", "callback_data": "a"},
                    {"text": "Site", "url": "https://example.com"},
                ]
            ]
        }
    }


def test_reply_keyboard_from_markup_keeps_text_buttons_as_strings():
    markup = ReplyKeyboardMarkup(
        [["a", KeyboardButton("Where", request_location=True)]],
        resize_keyboard=False,
    )

    keyboard = reply_keyboard_from_markup(markup)

    assert keyboard.markup_type == MarkupType.KEYBOARD
    assert keyboard.rows == (("a", {"text": "Where", "request_location": True}),)
    assert keyboard.resize_keyboard is False


def test_button_entry_passes_plain_values_through():
    assert button_entry({"text": "x"}) == {"text": "x"}
    assert button_entry(InlineKeyboardButton("x", callback_data="y")) == {
        "text": "x",
        "callback_data": "y",
    }


def test_pushed_inline_button_is_stored_as_mapping():
    """Telegram buttons pushed into an inline keyboard stay JSON-exportable."""
    keyboard = InlineKeyboard({"text": "a"})

    keyboard.push(0, InlineKeyboardButton("b", callback_data="b"))
    markup = build_reply_markup(keyboard)

    assert keyboard.rows == (({"text": "a"}, {"text": "b", "callback_data": "b"}),)
    assert markup.inline_keyboard[0][1].callback_data == "b"


def test_add_row_keeps_inline_button_objects():
    keyboard = InlineKeyboard(InlineKeyboardButton("seed", callback_data="s"))

    keyboard.add_row(InlineKeyboardButton("b", url="https://example.com"))

    assert keyboard.export() == {
        "reply_markup": {
            "inline_keyboard": [
                [{"text": "seed", "callback_data": "s"}],
                [{"text": "b", "url": "https://example.com"}],
            ]
        }
    }


def test_build_reply_markup_passes_inline_button_objects_through():
    button = InlineKeyboardButton("b", callback_data="b")
    keyboard = KeyboardMarkup(MarkupType.INLINE_KEYBOARD)
    keyboard.add_row(button)

    markup = build_reply_markup(keyboard)

    assert markup.inline_keyboard[0][0] is button


def test_build_reply_markup_rejects_non_mapping_inline_entry():
    """A pushed plain string cannot become an inline button."""
    keyboard = InlineKeyboard({"text": "a"})
    keyboard.push(0, "str")

    with pytest.raises(MarkupError):
        build_reply_markup(keyboard)
