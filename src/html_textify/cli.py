from __future__ import annotations

import argparse
import logging
import sys

from html_textify.config import get_settings
from html_textify.services.formatter import textify
from html_textify.services.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _parse_tags(value: str) -> list[str]:
    return [tag.strip().lower() for tag in value.split(",") if tag.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert HTML to plain text.")
    parser.add_argument("file", nargs="?", help="HTML file to read. Defaults to stdin.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strip",
        dest="preserve_formatting",
        action="store_false",
        default=None,
        help="Remove tags without markdown-like formatting.",
    )
    mode.add_argument(
        "--preserve",
        dest="preserve_formatting",
        action="store_true",
        default=None,
        help="Keep markdown-like formatting even when PRESERVE_FORMATTING is off.",
    )
    parser.add_argument(
        "--ignore-tags",
        default=None,
        help="Comma-separated tag names to keep verbatim.",
    )
    parser.add_argument("--wrap-words", type=int, default=None, help="Words per output line.")
    parser.add_argument("--wrap-length", type=int, default=None, help="Max characters per output line.")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.wrap_words is not None and args.wrap_words < 0:
        parser.error("--wrap-words must not be negative")
    if args.wrap_length is not None and args.wrap_length < 0:
        parser.error("--wrap-length must not be negative")

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as handle:
                html = handle.read()
        except OSError as exc:
            logger.error("Could not read input file", extra={"event": "input_read_failed", "path": args.file})
            parser.error(f"cannot read {args.file}: {exc.strerror}")
        except UnicodeDecodeError as exc:
            logger.error("Input file is not UTF-8", extra={"event": "input_decode_failed", "path": args.file})
            parser.error(f"cannot decode {args.file} as UTF-8: {exc.reason} at byte {exc.start}")
    else:
        html = sys.stdin.read()

    preserve_formatting = args.preserve_formatting
    if preserve_formatting is None:
        preserve_formatting = settings.preserve_formatting

    ignore_tags = _parse_tags(args.ignore_tags) if args.ignore_tags is not None else settings.ignore_tag_list
    output = textify(
        html,
        preserve_formatting=preserve_formatting,
        ignore_tags=ignore_tags,
        wrap_words=args.wrap_words if args.wrap_words is not None else settings.wrap_words,
        wrap_length=args.wrap_length if args.wrap_length is not None else settings.wrap_length,
    )
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
