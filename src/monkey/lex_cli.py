"""Simple CLI to lex a Monkey source file and print tokens."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .lexer import Lexer, LexerError
from .repl import format_token


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Lex a Monkey source file")
    parser.add_argument("path", type=Path, help="Path to Monkey source (.mk)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first illegal character",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print progress lines"
    )
    args = parser.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log_error(f"file not found: {args.path}")
        return 1

    if args.verbose:
        log_step(f"lexing {args.path}")
    try:
        tokens = Lexer(text).scan(strict=args.strict)
    except LexerError as e:
        log_error(f"lexer error: {e}")
        return 1

    for t in tokens:
        print(format_token(t))
    if args.verbose:
        log_step(f"{len(tokens)} tokens")
    return 0


def log_step(msg: str) -> None:
    print(f"[monkey-lex] {msg}...")


def log_error(msg: str) -> None:
    print(f"[monkey-lex:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
