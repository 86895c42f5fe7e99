class LexError(Exception):
    """Base class for failures of a single lexing step.

    The lexer fills in ``start``/``end`` (source offsets of the failed step)
    and ``line``/``column`` (1-based location of ``start``) before the error
    reaches the consumer.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.start: int | None = None
        self.end: int | None = None
        self.line: int | None = None
        self.column: int | None = None

    def locate(self, start: int, end: int, line: int, column: int) -> "LexError":
        """Attach the source location of the failed step"""
        self.start = start
        self.end = end
        self.line = line
        self.column = column
        return self

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}, column {self.column}: {self.message}"


class MatchError(LexError):
    """Failure raised by a matcher while classifying a token"""


class UnexpectedCharacter(MatchError):
    """The first character of a token matches no classification rule"""

    def __init__(self, char):
        super().__init__(f"Unexpected character: {char!r}")
        self.char = char


class InvalidEncoding(LexError):
    """A token lexed from a byte source is not valid UTF-8"""

    def __init__(self, text: bytes, reason: str):
        super().__init__(f"Invalid UTF-8 in {text!r}: {reason}")
        self.text = text
