# src/string_helpers/demo.py
import argparse
import json
import logging
import sys

from .text import (
    count_chars,
    decode_text,
    is_palindrome,
    split_into_n_parts,
    split_keeping_delimiter,
    split_on_delimiters,
    split_on_preset,
    string_reverse,
)
from .utils import log

PACKAGE_LOGGER = "string_helpers"

_debug_handler: logging.Handler | None = None


def _enable_debug_logging() -> None:
    """Send the package's logging records to stderr at DEBUG level."""
    global _debug_handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _debug_handler is not None:
        logger.removeHandler(_debug_handler)
    _debug_handler = logging.StreamHandler(sys.stderr)
    _debug_handler.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
    logger.addHandler(_debug_handler)
    logger.setLevel(logging.DEBUG)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strh-demo",
        description="Run the string helpers on text given as arguments or read from stdin.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("palindrome", help="Check whether text is a palindrome")
    p.add_argument("text", nargs="?")

    p = sub.add_parser("count", help="Count occurrences of one character")
    p.add_argument("char")
    p.add_argument("text", nargs="?")

    p = sub.add_parser("reverse", help="Reverse text by code point")
    p.add_argument("text", nargs="?")

    p = sub.add_parser("split-any", help="Split on any of the given delimiters")
    p.add_argument("delimiters", help="Delimiter characters, e.g. ',; '")
    p.add_argument("text", nargs="?")

    p = sub.add_parser("split-keep", help="Split keeping the delimiter on each segment")
    p.add_argument("delimiter")
    p.add_argument("text", nargs="?")

    p = sub.add_parser("split-n", help="Split into exactly N parts")
    p.add_argument("delimiter")
    p.add_argument("n", type=int)
    p.add_argument("text", nargs="?")

    p = sub.add_parser("preset", help="Split with a named delimiter preset")
    p.add_argument("name")
    p.add_argument("text", nargs="?")

    return parser


def _read_text(arg: str | None) -> str:
    if arg is not None:
        return arg
    return decode_text(sys.stdin.buffer.read())


def run(args: argparse.Namespace):
    text = _read_text(args.text)
    log.debug(f"command={args.command} chars={len(text)}", topic="cli")

    if args.command == "palindrome":
        return is_palindrome(text)
    if args.command == "count":
        return count_chars(args.char, text)
    if args.command == "reverse":
        return string_reverse(text)
    if args.command == "split-any":
        return split_on_delimiters(text, args.delimiters)
    if args.command == "split-keep":
        return split_keeping_delimiter(text, args.delimiter)
    if args.command == "split-n":
        return split_into_n_parts(text, args.delimiter, args.n)
    if args.command == "preset":
        return split_on_preset(text, args.name)
    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> None:
    """CLI demo: apply one string helper and print the result as JSON."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        log.enable_topics("all")
        _enable_debug_logging()

    try:
        result = run(args)
    except (ValueError, LookupError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, ensure_ascii=False))


if __name__ == "__main__":
    main()
