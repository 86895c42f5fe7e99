"""Matcher contract and a table-driven matcher.

A matcher classifies one token. The lexer consumes the token's first
character, then calls ``matcher(first_char, cursor)``; the matcher consumes
whatever else belongs to the token and returns its kind, or raises a
``MatchError``. It must not consume characters of the next token.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Protocol, Tuple, TypeVar, Union

from .cursor import Cursor, Predicate, Source
from .errors import UnexpectedCharacter

K = TypeVar("K")
K_co = TypeVar("K_co", covariant=True)


class Matcher(Protocol[K_co]):
    """Anything callable as ``matcher(first_char, cursor) -> kind``"""

    def __call__(self, first_char: Source, cursor: Cursor) -> K_co: ...


Handler = Callable[[Source, Cursor], K]


@dataclass(frozen=True)
class Double:
    """Literal that becomes double_kind when followed by follow, else single_kind"""

    follow: Source
    double_kind: Any
    single_kind: Any


LiteralEntry = Union[K, Double]


class RuleMatcher:
    """Matcher built from a literal table and an ordered list of rules.

    ``literals`` maps a leading character either to a kind, or to a
    ``Double(follow, double_kind, single_kind)``: if the next character is
    ``follow`` it is consumed and ``double_kind`` is returned, otherwise
    ``single_kind`` (``=`` vs ``==``).

    ``rules`` are ``(predicate, handler)`` pairs tried in order when no
    literal matches; ``handler(first_char, cursor)`` returns the kind.

    Example:
        >>> matcher = RuleMatcher(
        ...     literals={"+": Kind.PLUS, "=": Double("=", Kind.EQ_EQ, Kind.EQ)},
        ...     rules=[(str.isdigit, lex_int)],
        ... )
    """

    def __init__(
        self,
        literals: Mapping[Source, LiteralEntry] = None,
        rules: Iterable[Tuple[Predicate, Handler]] = (),
    ):
        self.literals = dict(literals or {})
        self.rules = list(rules)

    def __call__(self, first_char: Source, cursor: Cursor):
        if first_char in self.literals:
            entry = self.literals[first_char]
            if isinstance(entry, Double):
                return cursor.consume_or(
                    lambda c: c == entry.follow, entry.double_kind, entry.single_kind
                )
            return entry

        for predicate, handler in self.rules:
            if predicate(first_char):
                return handler(first_char, cursor)

        raise UnexpectedCharacter(first_char)
