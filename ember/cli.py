"""
ember-lex: dump the token stream of an Ember source file.

Usage:
    ember-lex program.em
    ember-lex - --format json < program.em
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .lexer import Tokenizer, Token, LexerError


def _format_text(tokens: List[Token]) -> str:
    return "\n".join(
        f"{token.start}-{token.end} {token.kind.name} {token.raw!r}" for token in tokens
    )


def _format_json(tokens: List[Token]) -> str:
    return json.dumps([
        {"kind": token.kind.name, "raw": token.raw, "start": token.start, "end": token.end}
        for token in tokens
    ], indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ember-lex",
        description="Tokenize Ember source and print the resulting tokens",
    )
    parser.add_argument("path", nargs="?", default="-",
                        help="Source file to tokenize ('-' reads stdin)")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path == "-":
        source, filename = sys.stdin.read(), "<stdin>"
    else:
        try:
            with open(args.path, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"ember-lex: cannot read {args.path}: {e.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"ember-lex: {args.path} is not valid UTF-8 "
                  f"(byte offset {e.start}: {e.reason})", file=sys.stderr)
            return 1
        filename = args.path

    tokenizer = Tokenizer(source, filename)
    try:
        tokenizer.process()
    except LexerError as e:
        print(e, file=sys.stderr, end="")
        return 1

    tokens = list(tokenizer)
    output = _format_json(tokens) if args.format == "json" else _format_text(tokens)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
