import logging
from typing import Generic, Iterator, List, Type, TypeVar, Union

from .cursor import BufferedCursor, Cursor, SliceCursor, Source
from .errors import InvalidEncoding, LexError, MatchError
from .matcher import Matcher
from .token import Token

logger = logging.getLogger(__name__)

K = TypeVar("K")


class Lexer(Generic[K]):
    """Splits a source into tokens using a caller-supplied matcher.

    The lexer is a one-shot iterator. Each ``next()`` optionally skips
    whitespace, consumes the first character of a token, lets the matcher
    classify it and returns a ``Token``. At end of input it raises
    ``StopIteration`` and stays exhausted.

    A matcher failure is raised as a ``MatchError`` located in the source.
    The lexer keeps running after a failure: the failed step's characters
    stay consumed and the next pull resumes right after them.

    Args:
        source: Text (``str``) or raw bytes to lex
        matcher: Callable ``(first_char, cursor) -> kind``
        skip_whitespace: Skip ASCII whitespace before every token
        decode: For byte sources, decode each token's text as UTF-8
    """

    cursor_class: Type[Cursor] = SliceCursor

    def __init__(
        self,
        source: Source,
        matcher: Matcher[K],
        skip_whitespace: bool = False,
        decode: bool = True,
    ):
        if not callable(matcher):
            raise TypeError(f"matcher must be callable, got {matcher!r}")
        self.cursor = self.cursor_class(source)
        self.matcher = matcher
        self.skip_whitespace = skip_whitespace
        self.decode = decode
        self._exhausted = False

    @property
    def position(self) -> int:
        return self.cursor.position

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "Lexer[K]":
        return self

    def __next__(self) -> Token[K]:
        if self._exhausted:
            raise StopIteration

        if self.skip_whitespace:
            self.cursor.skip_whitespace()

        mark = self.cursor.mark()
        start = self.cursor.position
        first_char = self.cursor.consume()
        if first_char is None:
            logger.debug("end of input at %d", start)
            self._exhausted = True
            raise StopIteration

        try:
            kind = self.matcher(first_char, self.cursor)
        except MatchError as error:
            self.cursor.discard()
            raise self._locate(error, start)
        except StopIteration as error:
            self.cursor.discard()
            raise RuntimeError("matcher raised StopIteration") from error

        text = self.cursor.text_since(mark)
        end = self.cursor.position
        if self.decode and isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as error:
                raise self._locate(InvalidEncoding(text, error.reason), start) from error

        token = Token(kind, text, start, end)
        logger.debug("token %r at %d:%d", token, start, end)
        return token

    def _locate(self, error: LexError, start: int) -> LexError:
        line, column = self.cursor.location(start)
        error.locate(start, self.cursor.position, line, column)
        logger.debug("lex error at %d:%d: %s", start, error.end, error.message)
        return error

    def outcomes(self) -> Iterator[Union[Token[K], LexError]]:
        """Yield every step's outcome, a ``Token`` or a ``LexError``, until end of input"""
        while True:
            try:
                yield next(self)
            except StopIteration:
                return
            except LexError as error:
                yield error


class BufferedLexer(Lexer[K]):
    """Lexer whose token text is the characters the matcher accepted.

    Matchers get a ``BufferedCursor``: ``consume*`` keeps characters in the
    token text, ``skip*`` drops them, ``push`` adds replacement text.
    """

    cursor_class = BufferedCursor


def tokenize(
    source: Source,
    matcher: Matcher[K],
    skip_whitespace: bool = False,
    buffered: bool = False,
    decode: bool = True,
) -> List[Token[K]]:
    """Lex the whole source into a list, raising the first error"""
    lexer_class = BufferedLexer if buffered else Lexer
    return list(lexer_class(source, matcher, skip_whitespace, decode))
