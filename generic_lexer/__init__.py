"""
Generic lexer: a reusable tokenization engine for hand-written lexers.

You supply a matcher, a callable that classifies a token from its first
character and a cursor; the lexer turns a source into a lazy token sequence.
"""

__version__ = "0.1.0"

from .cursor import BufferedCursor, Cursor, SliceCursor, is_ascii_whitespace
from .errors import InvalidEncoding, LexError, MatchError, UnexpectedCharacter
from .lexer import BufferedLexer, Lexer, tokenize
from .matcher import Double, Matcher, RuleMatcher
from .token import Token

__all__ = [
    "Cursor",
    "SliceCursor",
    "BufferedCursor",
    "is_ascii_whitespace",
    "Token",
    "Matcher",
    "RuleMatcher",
    "Double",
    "Lexer",
    "BufferedLexer",
    "tokenize",
    "LexError",
    "MatchError",
    "UnexpectedCharacter",
    "InvalidEncoding",
]
