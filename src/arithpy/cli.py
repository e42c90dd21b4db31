from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from typing import Iterable

from .api import iter_lines, iter_sources, parse_source, read_lines
from .errors import ParseError


def _to_jsonable(obj):
    if is_dataclass(obj):
        out = {f.name: _to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
        out["type"] = type(obj).__name__
        return out
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(x) for x in obj]
    return obj


def _print_values(lines: Iterable[str], *, skip_whitespace: bool) -> bool:
    ok = True
    for res in iter_lines(lines, skip_whitespace=skip_whitespace):
        if res.ok:
            print(res.value)
        else:
            print(f"error: {res.error}", file=sys.stderr)
            ok = False
    return ok


def _print_ast(lines: Iterable[str], *, skip_whitespace: bool) -> bool:
    ok = True
    for _, src in iter_sources(lines):
        try:
            node = parse_source(src, skip_whitespace=skip_whitespace)
        except ParseError as e:
            print(f"error: {e}", file=sys.stderr)
            ok = False
            continue
        print(json.dumps(_to_jsonable(node), indent=2, sort_keys=True))
    return ok


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="arithpy", description="Evaluate arithmetic expressions")
    ap.add_argument("exprs", nargs="*", help="Expressions to evaluate (default: read lines from stdin)")
    ap.add_argument("-f", "--file", help="Evaluate each non-blank line of FILE")
    ap.add_argument("--json", action="store_true", help="Print the parsed AST as JSON instead of the value")
    ap.add_argument(
        "--preserve-whitespace",
        action="store_true",
        help="Treat whitespace as significant instead of skipping it",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    lines: Iterable[str]
    if args.file:
        lines = read_lines(args.file)
    elif args.exprs:
        lines = args.exprs
    else:
        lines = sys.stdin

    emit = _print_ast if args.json else _print_values
    ok = emit(lines, skip_whitespace=not args.preserve_whitespace)
    return 0 if ok else 1
