"""Command line front end.

Usage:
    sibylline-slice replace template.txt -o out.txt --table site --set '${year}=2026'
    sibylline-slice between page.html '<li>' '</li>'
    sibylline-slice split data.csv , --drop-empty --take 10
    sibylline-slice count notes.txt TODO
    sibylline-slice demo
"""

import argparse
import logging
import sys
from pathlib import Path

from .bounds import Between
from .config import TableConfig
from .demo import demo_batch_replace
from .files import Write, load_file_content
from .primitives import Count
from .ranges import DropIf, Take
from .replace import BatchReplace
from .split import Split, SplitBetween

log = logging.getLogger(__name__)


def _parse_assignment(text: str) -> tuple[str, str]:
    token, sep, replacement = text.partition("=")
    if not sep or not token:
        raise argparse.ArgumentTypeError(f"expected TOKEN=VALUE, got {text!r}")
    return token, replacement


def _emit(lines) -> None:
    for line in lines:
        print(line)


def cmd_replace(args: argparse.Namespace) -> int:
    pairs: list[tuple[str, str]] = list(args.set or [])
    markers: dict[str, str] = {}

    if args.table:
        table_path = Path(args.table)
        if table_path.suffix == ".yaml" and table_path.is_file():
            config = TableConfig(search_paths=[table_path.parent])
            name = table_path.stem
        else:
            config = TableConfig()
            name = args.table
        try:
            loaded = config.get_table(name)
        except ValueError as exc:
            log.error("%s", exc)
            return 1
        # --set entries come first so they win over the table file
        pairs.extend(loaded.pairs)
        markers = {"open_marker": loaded.open_marker, "close_marker": loaded.close_marker}

    source = load_file_content(args.input)
    result = BatchReplace(*pairs, **markers).within(source)

    if args.output:
        if not Write(result).to(args.output):
            return 1
    else:
        sys.stdout.write(result)
    return 0


def cmd_between(args: argparse.Namespace) -> int:
    source = load_file_content(args.input)
    if args.first:
        print(source | Between(args.left, args.right))
    else:
        _emit(source | SplitBetween(args.left, args.right))
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    source = load_file_content(args.input)
    pieces = source | Split(args.delimiter)
    if args.drop_empty:
        pieces = pieces | DropIf(lambda piece: not piece)
    if args.take is not None:
        pieces = pieces | Take(args.take)
    _emit(pieces)
    return 0


def cmd_count(args: argparse.Namespace) -> int:
    print(Count(args.pattern).within(load_file_content(args.input)))
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    print(demo_batch_replace())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sibylline-slice",
        description="Slice, split and rewrite text files without regular expressions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("replace", help="Substitute ${tokens} in a file")
    p.add_argument("input", help="File to rewrite")
    p.add_argument("-o", "--output", help="Write here instead of stdout")
    p.add_argument("--table", help="Table name or path to a table .yaml file")
    p.add_argument(
        "--set",
        action="append",
        type=_parse_assignment,
        metavar="TOKEN=VALUE",
        help="Extra substitution, may be repeated (checked before --table)",
    )
    p.set_defaults(func=cmd_replace)

    p = sub.add_parser("between", help="Print text enclosed by LEFT and RIGHT")
    p.add_argument("input")
    p.add_argument("left")
    p.add_argument("right")
    p.add_argument("--first", action="store_true", help="Only the first enclosed span")
    p.set_defaults(func=cmd_between)

    p = sub.add_parser("split", help="Print the pieces of a file split on a character")
    p.add_argument("input")
    p.add_argument("delimiter")
    p.add_argument("--drop-empty", action="store_true", help="Skip empty pieces")
    p.add_argument("--take", type=int, help="Stop after N pieces")
    p.set_defaults(func=cmd_split)

    p = sub.add_parser("count", help="Count non-overlapping occurrences of PATTERN")
    p.add_argument("input")
    p.add_argument("pattern")
    p.set_defaults(func=cmd_count)

    p = sub.add_parser("demo", help="Show a sample token substitution")
    p.set_defaults(func=cmd_demo)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "split" and len(args.delimiter) != 1:
        parser.error("split delimiter must be a single character")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
