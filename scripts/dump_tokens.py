#!/usr/bin/env python
"""Print the token stream of a scene file, one token per line."""

import argparse
from pathlib import Path

from pbrtpy.diagnostics import PbrtParseError
from pbrtpy.lexer import Lexer, TokenKind, token_text


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump PBRT scene tokens")
    parser.add_argument("scene", type=Path)
    parser.add_argument("--trivia", action="store_true", help="Include whitespace, newlines and comments")
    args = parser.parse_args()

    text = args.scene.read_text(encoding="utf-8")
    lexer = Lexer(text, path=str(args.scene))

    count = 0
    try:
        while True:
            token = lexer.next_token()
            if token.kind == TokenKind.EOF:
                break
            if token.kind.is_trivia and not args.trivia:
                continue
            print(f"{count:05d} {token.kind.name:<12} range={token.range.as_tuple()} text={token_text(text, token)!r}")
            count += 1
    except PbrtParseError as error:
        print(error.format())
        return 1

    print(f"{count} tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
