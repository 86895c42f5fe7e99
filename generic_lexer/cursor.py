from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Union

Source = Union[str, bytes]
Predicate = Callable[[Source], bool]

# ASCII whitespace, vertical tab excluded
ASCII_WHITESPACE = " \t\n\x0c\r"
_ASCII_WHITESPACE_BYTES = ASCII_WHITESPACE.encode("ascii")


def is_ascii_whitespace(char: Source) -> bool:
    """True if char is one of space, tab, newline, form feed or carriage return"""
    if isinstance(char, str):
        return char in ASCII_WHITESPACE
    return char in _ASCII_WHITESPACE_BYTES


class Cursor(ABC):
    """Position over an immutable source with peek/consume/skip navigation.

    A character is a length-1 slice of the source: a one-character ``str``
    for text, a one-byte ``bytes`` for raw bytes. ``None`` means end of input.

    Subclasses decide what "consuming" keeps around for the token text, see
    ``SliceCursor`` and ``BufferedCursor``.
    """

    def __init__(self, source: Source):
        if isinstance(source, bytearray):
            source = bytes(source)
        if not isinstance(source, (str, bytes)):
            raise TypeError(
                f"source must be str or bytes, not {type(source).__name__}"
            )
        self.source = source
        self.pos = 0

    @property
    def position(self) -> int:
        return self.pos

    def peek(self, offset: int = 0) -> Optional[Source]:
        """Look at character at current position + offset without consuming"""
        pos = self.pos + offset
        if 0 <= pos < len(self.source):
            return self.source[pos : pos + 1]
        return None

    def peek_any(self, candidates) -> Optional[Source]:
        """Return the next character if it is one of candidates (set/dict/str)"""
        char = self.peek()
        if char is not None and char in candidates:
            return char
        return None

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def remaining(self) -> Source:
        """Get remaining source from current position"""
        return self.source[self.pos :]

    def _advance(self) -> Optional[Source]:
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    @abstractmethod
    def consume(self) -> Optional[Source]:
        """Consume the next character as part of the current token"""

    def skip(self) -> Optional[Source]:
        """Advance past the next character without keeping it"""
        return self._advance()

    def consume_if(self, predicate: Predicate) -> Optional[Source]:
        """Consume the next character only if predicate holds for it"""
        char = self.peek()
        if char is not None and predicate(char):
            return self.consume()
        return None

    def consume_while(self, predicate: Predicate) -> None:
        while self.consume_if(predicate) is not None:
            pass

    def consume_or(self, predicate: Predicate, matched, default):
        """Consume one character and return matched, or else return default.

        Handy for telling single- and multi-character tokens apart::

            if first == "=":
                return cursor.consume_or(lambda c: c == "=", Kind.EQ_EQ, Kind.EQ)
        """
        if self.consume_if(predicate) is not None:
            return matched
        return default

    def skip_if(self, predicate: Predicate) -> Optional[Source]:
        char = self.peek()
        if char is not None and predicate(char):
            return self.skip()
        return None

    def skip_while(self, predicate: Predicate) -> None:
        while self.skip_if(predicate) is not None:
            pass

    def skip_whitespace(self) -> None:
        """Skip ASCII whitespace, leaving any accepted text untouched"""
        self.skip_while(is_ascii_whitespace)

    def location(self, offset: int) -> tuple[int, int]:
        """1-based (line, column) of a source offset"""
        newline = "\n" if isinstance(self.source, str) else b"\n"
        offset = min(offset, len(self.source))
        line = self.source.count(newline, 0, offset) + 1
        column = offset - (self.source.rfind(newline, 0, offset) + 1) + 1
        return line, column

    @abstractmethod
    def mark(self):
        """Start capturing the text of a new token"""

    @abstractmethod
    def text_since(self, mark) -> Source:
        """Text of the token started at mark"""

    def discard(self) -> None:
        """Drop whatever was captured for an abandoned token"""


class SliceCursor(Cursor):
    """Zero-copy cursor: token text is the source slice between two positions.

    Consuming and skipping are the same thing here, a skipped character in the
    middle of a token still ends up in its slice.
    """

    def consume(self) -> Optional[Source]:
        return self._advance()

    def mark(self) -> int:
        return self.pos

    def text_since(self, mark: int) -> Source:
        return self.source[mark : self.pos]


class BufferedCursor(Cursor):
    """Cursor that copies every accepted character into a buffer.

    Token text is whatever the buffer holds at the end of the step, so
    matchers can leave characters out (``skip*``) or substitute them
    (``push``), e.g. to strip quotes or unescape a string literal.
    """

    def __init__(self, source: Source):
        super().__init__(source)
        self.buffer: List[Source] = []

    def consume(self) -> Optional[Source]:
        char = self._advance()
        if char is not None:
            self.buffer.append(char)
        return char

    def push(self, text: Source) -> None:
        """Append text to the buffer without touching the position"""
        if type(text) is not type(self.source):
            raise TypeError(
                f"cannot push {type(text).__name__} into a "
                f"{type(self.source).__name__} buffer"
            )
        self.buffer.append(text)

    def take_buffer(self) -> Source:
        """Copy out the buffer and clear it"""
        text = self.source[:0].join(self.buffer)
        self.buffer.clear()
        return text

    def clear_buffer(self) -> None:
        self.buffer.clear()

    def mark(self) -> None:
        return None

    def text_since(self, mark) -> Source:
        return self.take_buffer()

    def discard(self) -> None:
        self.clear_buffer()
