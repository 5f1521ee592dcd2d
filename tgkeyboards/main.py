"""Command line entry point: render and inspect ``reply_markup`` payloads."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import structlog

from tgkeyboards import __version__
from tgkeyboards.config.settings import Settings, load_settings
from tgkeyboards.exceptions import ConfigurationError, KeyboardError
from tgkeyboards.markup import InlineKeyboard, MarkupType, ReplyKeyboard, extract_markup

URL_PREFIXES = ("http://", "https://", "tg://")


def setup_logging(debug: bool = False, level: str = "INFO") -> None:
    """Configure structured logging.

    Logs go to stderr so that stdout only carries the rendered JSON.
    """
    log_level = logging.DEBUG if debug else getattr(logging, level, logging.INFO)

    # Configure standard logging
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.processors.JSONRenderer()
                if not debug
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_inline_button(spec: str) -> Dict[str, str]:
    """Parse ``label=value`` into an inline button.

    Values that look like links become ``url`` buttons, anything else is used
    as ``callback_data``. A bare label doubles as its own callback data.
    """
    label, sep, value = spec.partition("=")
    if not sep:
        return {"text": label, "callback_data": label}
    if value.startswith(URL_PREFIXES):
        return {"text": label, "url": value}
    return {"text": label, "callback_data": value}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tgkeyboards",
        description="Render Telegram keyboard payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"tgkeyboards {__version__}"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--indent", type=int, default=None, help="JSON indentation (0 for compact)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    inline = subparsers.add_parser("inline", help="Render an inline keyboard")
    inline.add_argument(
        "--row",
        action="append",
        nargs="+",
        default=[],
        metavar="LABEL=VALUE",
        help="One keyboard row; repeat for more rows",
    )

    reply = subparsers.add_parser("reply", help="Render a reply keyboard")
    reply.add_argument(
        "--row",
        action="append",
        nargs="+",
        default=[],
        metavar="TEXT",
        help="One keyboard row; repeat for more rows",
    )
    reply.add_argument(
        "--close", action="store_true", help="Render the remove-keyboard payload"
    )
    reply.add_argument(
        "--no-resize", action="store_true", help="Do not ask clients to resize"
    )

    extract = subparsers.add_parser(
        "extract", help="Print keyboard content of a received payload"
    )
    extract.add_argument(
        "file", nargs="?", type=Path, help="JSON payload file (default: stdin)"
    )
    extract.add_argument(
        "--type",
        dest="markup_type",
        choices=[markup_type.value for markup_type in MarkupType],
        default=MarkupType.INLINE_KEYBOARD.value,
        help="Keyboard kind to extract",
    )

    return parser


def render_inline(rows: List[List[str]]) -> Dict[str, Any]:
    """Build and export an inline keyboard from row specs."""
    keyboard = InlineKeyboard()
    for row in rows:
        keyboard.add_row(*(parse_inline_button(spec) for spec in row))
    return keyboard.export()


def render_reply(rows: List[List[str]], *, close: bool, resize: bool) -> Dict[str, Any]:
    """Build a reply keyboard and return its open or close payload."""
    keyboard = ReplyKeyboard(resize_keyboard=resize)
    for row in rows:
        keyboard.add_row(*row)
    return keyboard.close() if close else keyboard.open()


def _read_envelope(path: Optional[Path]) -> Any:
    raw = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    return json.loads(raw)


def run_command(args: argparse.Namespace, settings: Settings) -> Any:
    """Execute the selected subcommand and return the value to print."""
    if args.command == "inline":
        return render_inline(args.row)
    if args.command == "reply":
        resize = settings.resize_keyboard and not args.no_resize
        return render_reply(args.row, close=args.close, resize=resize)
    return extract_markup(_read_envelope(args.file), args.markup_type)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(debug=args.debug or settings.debug, level=settings.log_level)
    logger = structlog.get_logger()
    logger.debug("Running command", command=args.command, version=__version__)

    try:
        result = run_command(args, settings)
    except json.JSONDecodeError as e:
        logger.error("Payload is not valid JSON", error=str(e))
        return 1
    except OSError as e:
        logger.error("Cannot read payload", error=str(e))
        return 1
    except KeyboardError as e:
        logger.error("Keyboard error", error=str(e))
        return 1

    indent = settings.json_indent if args.indent is None else args.indent
    print(json.dumps(result, ensure_ascii=False, indent=indent or None))
    return 0


def run() -> None:
    """Synchronous entry point for setuptools."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
