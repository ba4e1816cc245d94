"""Command that prints the tokens read from standard input."""

from __future__ import annotations

import argparse
import sys

from yamlot.tokens import Token, Tokenizer


def format_token(token: Token) -> str:
    """Render a token with its line and column."""
    return f"line={token.line:03d} column={token.column:02d}: {token}"


def main(argv: list[str] | None = None) -> int:
    """Tokenize standard input and print one token per line."""
    parser = argparse.ArgumentParser(
        prog="yamlot-tokenizer",
        description="Print the YAML tokens read from standard input.",
    )
    parser.add_argument("--debug", action="store_true", help="trace the tokenizer")
    args = parser.parse_args(argv)

    try:
        for token in Tokenizer(sys.stdin, args.debug):
            print(format_token(token))
    except OSError as exc:
        print(f"error: {exc}", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())