"""Arithmetic-expression tokenizer built on the generic lexer.

    $ python -m generic_lexer.calc "a = 420 + 69 * 3.14;"
    Token(NAME, 'a')
    Token(EQUALS, '=')
    ...
"""

import argparse
import logging
import sys
from enum import Enum, auto

from .cursor import Cursor
from .errors import LexError
from .lexer import Lexer
from .matcher import RuleMatcher

DEFAULT_INPUT = "a = 420 + 69 * 3.14;"


class TokenKind(Enum):
    INT = auto()
    FLOAT = auto()
    NAME = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    SEMICOLON = auto()
    EQUALS = auto()


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def lex_int(first_char: str, cursor: Cursor) -> TokenKind:
    cursor.consume_while(is_digit)
    if cursor.consume_if(lambda c: c == ".") is not None:
        return lex_float(first_char, cursor)
    return TokenKind.INT


def lex_float(first_char: str, cursor: Cursor) -> TokenKind:
    # No check for a second "."; "1.2.3" lexes as FLOAT then fails on "."
    cursor.consume_while(is_digit)
    return TokenKind.FLOAT


def lex_name(first_char: str, cursor: Cursor) -> TokenKind:
    cursor.consume_while(lambda c: c == "_" or is_letter(c))
    return TokenKind.NAME


lex = RuleMatcher(
    literals={
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        ";": TokenKind.SEMICOLON,
        "=": TokenKind.EQUALS,
    },
    rules=[
        (is_digit, lex_int),
        (is_letter, lex_name),
    ],
)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="generic_lexer.calc",
        description="Tokenize an arithmetic expression",
    )
    parser.add_argument("source", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="report every error instead of stopping at the first one",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(message)s"
        )

    status = 0
    for outcome in Lexer(args.source, lex, skip_whitespace=True).outcomes():
        if isinstance(outcome, LexError):
            print(f"Error: {outcome}", file=sys.stderr)
            status = 1
            if not args.keep_going:
                break
        else:
            print(outcome)
    return status


if __name__ == "__main__":
    sys.exit(main())
