"""Wire envelope encoding for Telegram ``reply_markup`` payloads.

See https://core.telegram.org/bots/api#sendmessage for the envelope shape.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

import structlog

logger = structlog.get_logger()

REPLY_MARKUP_KEY = "reply_markup"


class MarkupType(str, Enum):
    """Keyboard kinds, keyed into ``reply_markup`` on the wire."""

    INLINE_KEYBOARD = "inline_keyboard"
    KEYBOARD = "keyboard"
    REMOVE_KEYBOARD = "remove_keyboard"


def export_markup(
    markup_type: Union[MarkupType, str], content: Any
) -> Dict[str, Dict[str, Any]]:
    """Wrap ``content`` into ``{"reply_markup": {<markup_type>: content}}``."""
    return {REPLY_MARKUP_KEY: {MarkupType(markup_type).value: content}}


def _as_mapping(envelope: Any) -> Any:
    """Convert Telegram objects to plain dicts, leave everything else as is."""
    to_dict = getattr(envelope, "to_dict", None)
    if callable(to_dict) and not isinstance(envelope, Mapping):
        return to_dict()
    return envelope


def extract_markup(
    envelope: Any, markup_type: Optional[Union[MarkupType, str]]
) -> Any:
    """Return the content stored under ``markup_type`` in an envelope.

    A missing ``reply_markup`` is not fatal: a warning is logged and an
    empty dict is returned. A present ``reply_markup`` without the requested
    kind yields ``None``.
    """
    envelope = _as_mapping(envelope)
    if not isinstance(envelope, Mapping) or REPLY_MARKUP_KEY not in envelope:
        logger.warning(
            "reply_markup not found in envelope",
            envelope_type=type(envelope).__name__,
        )
        return {}

    markup = envelope[REPLY_MARKUP_KEY]
    if markup is None:
        logger.warning("reply_markup is empty", markup_type=markup_type)
        return None
    if not isinstance(markup, Mapping):
        logger.warning(
            "reply_markup is not an object",
            markup_type=markup_type,
            value_type=type(markup).__name__,
        )
        return None
    if markup_type is None:
        return None
    return markup.get(MarkupType(markup_type).value)
