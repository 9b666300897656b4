"""Interactive loop: read a line, lex it, echo the tokens."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .lexer import Lexer, LexerError
from .token import Token

BANNER = "Welcome to the Monkey Language"
PROMPT = ">> "
QUIT_COMMAND = ":quit"


def format_token(tok: Token) -> str:
    return f"{tok.kind.name}\t{tok.literal!r}"


def start(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = PROMPT,
    strict: bool = False,
) -> None:
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # EOF (Ctrl-D)
            stdout.write("\n")
            return
        line = line.rstrip("\n")
        if line.strip() == QUIT_COMMAND:
            return

        try:
            tokens: List[Token] = Lexer(line).scan(strict=strict)
        except LexerError as e:
            stdout.write(f"lexer error: {e}\n")
            continue

        for tok in tokens:
            stdout.write(format_token(tok) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Monkey token REPL")
    parser.add_argument("--prompt", default=PROMPT, help="Prompt string")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report illegal characters as errors instead of ILLEGAL tokens",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the welcome line"
    )
    args = parser.parse_args(argv)

    if not args.no_banner:
        print(BANNER)
    try:
        start(sys.stdin, sys.stdout, prompt=args.prompt, strict=args.strict)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
