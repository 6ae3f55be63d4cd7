"""Command-line interface."""

from __future__ import annotations

import argparse
import json
from typing import Any, Sequence

from assertroute.catalog import describe
from assertroute.summarize import summarize


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="assertroute", description="assertroute CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the public functions")

    summarize_parser = subparsers.add_parser("summarize", help="Summarize a JSON value")
    summarize_parser.add_argument("value", type=str, help="JSON text; plain text is used as a string")
    summarize_parser.add_argument("--max-items", type=non_negative_int, dest="max_items")
    summarize_parser.add_argument("--max-chars", type=non_negative_int, dest="max_chars")
    return parser.parse_args(argv)


def load_value(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.command == "list":
        for name, doc in describe(print_table=False).items():
            print(f"{name}: {doc}")
        return 0
    print(summarize(load_value(args.value), max_items=args.max_items, max_chars=args.max_chars))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
