import pytest
from generic_lexer.cursor import (
    BufferedCursor,
    SliceCursor,
    is_ascii_whitespace,
)


def is_digit(char):
    return char.isdigit()


@pytest.mark.parametrize(
    "char,expected",
    [
        (" ", True),
        ("\t", True),
        ("\n", True),
        ("\r", True),
        ("\x0c", True),
        ("\x0b", False),  # Vertical tab is not ASCII whitespace
        ("\xa0", False),  # No-break space is not ASCII
        ("a", False),
        (b" ", True),
        (b"\n", True),
        (b"x", False),
    ],
)
def test_is_ascii_whitespace(char, expected):
    assert is_ascii_whitespace(char) is expected


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_peek_does_not_advance(cursor_class):
    cursor = cursor_class("ab")

    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.peek(1) == "b"
    assert cursor.peek(2) is None
    assert cursor.peek(-1) is None
    assert cursor.position == 0


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_consume_until_end(cursor_class):
    cursor = cursor_class("ab")

    assert cursor.consume() == "a"
    assert cursor.consume() == "b"
    assert cursor.at_end()
    assert cursor.consume() is None
    assert cursor.position == 2  # Never past the end


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_consume_if(cursor_class):
    cursor = cursor_class("1a")

    assert cursor.consume_if(str.isalpha) is None
    assert cursor.position == 0
    assert cursor.consume_if(is_digit) == "1"
    assert cursor.position == 1
    assert cursor.remaining() == "a"


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_consume_while(cursor_class):
    cursor = cursor_class("123abc")

    assert cursor.consume_while(is_digit) is None
    assert cursor.position == 3
    cursor.consume_while(is_digit)  # No-op when the predicate fails at once
    assert cursor.position == 3


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_consume_while_stops_at_end(cursor_class):
    cursor = cursor_class("999")
    cursor.consume_while(is_digit)
    assert cursor.at_end()


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
@pytest.mark.parametrize(
    "source,expected,position",
    [
        ("==", "EQ_EQ", 1),
        ("=1", "EQ", 0),
        ("", "EQ", 0),
    ],
)
def test_consume_or(cursor_class, source, expected, position):
    cursor = cursor_class(source)
    assert cursor.consume_or(lambda c: c == "=", "EQ_EQ", "EQ") == expected
    assert cursor.position == position


def test_buffered_consume_or_accepts_the_matched_character():
    cursor = BufferedCursor("==")
    cursor.consume()

    assert cursor.consume_or(lambda c: c == "=", "EQ_EQ", "EQ") == "EQ_EQ"
    assert cursor.buffer == ["=", "="]

    cursor = BufferedCursor("=1")
    cursor.consume()

    assert cursor.consume_or(lambda c: c == "=", "EQ_EQ", "EQ") == "EQ"
    assert cursor.buffer == ["="]


@pytest.mark.parametrize("cursor_class", [SliceCursor, BufferedCursor])
def test_skip_if(cursor_class):
    cursor = cursor_class(" x")

    assert cursor.skip_if(str.isalpha) is None
    assert cursor.position == 0
    assert cursor.skip_if(is_ascii_whitespace) == " "
    assert cursor.position == 1
    assert cursor.skip_if(str.isspace) is None
    assert cursor.peek() == "x"
    assert getattr(cursor, "buffer", []) == []  # Skipping never buffers


def test_peek_any():
    cursor = SliceCursor("+1")

    assert cursor.peek_any({"+", "-"}) == "+"
    assert cursor.peek_any({"*": 1}) is None
    assert cursor.peek_any("+-") == "+"
    cursor.consume()
    cursor.consume()
    assert cursor.peek_any({"+"}) is None


def test_slice_cursor_text_since_mark():
    cursor = SliceCursor("abc def")
    cursor.skip_whitespace()
    mark = cursor.mark()
    cursor.consume_while(str.isalpha)

    assert cursor.text_since(mark) == "abc"
    cursor.skip_whitespace()
    mark = cursor.mark()
    cursor.consume()
    cursor.skip()  # Skipped characters are still inside the slice
    assert cursor.text_since(mark) == "de"


def test_buffered_cursor_accepts_and_skips():
    cursor = BufferedCursor('"hi"')

    cursor.skip()  # Opening quote
    cursor.consume_while(lambda c: c != '"')
    cursor.skip_if(lambda c: c == '"')

    assert cursor.at_end()
    assert cursor.take_buffer() == "hi"
    assert cursor.take_buffer() == ""  # Taking clears


def test_buffered_cursor_skip_whitespace_preserves_buffer():
    cursor = BufferedCursor("ab  \tcd")

    cursor.consume_while(str.isalpha)
    cursor.skip_whitespace()
    assert cursor.buffer == ["a", "b"]
    cursor.consume_while(str.isalpha)
    assert cursor.take_buffer() == "abcd"


def test_buffered_cursor_skip_while():
    cursor = BufferedCursor("   x")
    cursor.skip_while(is_ascii_whitespace)
    assert cursor.position == 3
    assert cursor.buffer == []


def test_buffered_cursor_push_and_clear():
    cursor = BufferedCursor(r"a\n")

    cursor.consume()
    cursor.skip()  # Backslash
    cursor.skip()
    cursor.push("\n")
    assert cursor.take_buffer() == "a\n"

    cursor.push("junk")
    cursor.clear_buffer()
    assert cursor.take_buffer() == ""


@pytest.mark.parametrize(
    "source,text",
    [
        (b"ab", "a"),
        ("ab", b"a"),
    ],
)
def test_buffered_cursor_push_rejects_mismatched_type(source, text):
    cursor = BufferedCursor(source)
    cursor.consume()

    with pytest.raises(TypeError):
        cursor.push(text)
    assert len(cursor.buffer) == 1  # Nothing was appended


def test_byte_source():
    cursor = SliceCursor(b"1 +")

    assert cursor.peek() == b"1"
    assert cursor.consume_if(lambda c: c.isdigit()) == b"1"
    cursor.skip_whitespace()
    assert cursor.peek() == b"+"
    assert cursor.remaining() == b"+"


def test_buffered_byte_source_joins_bytes():
    cursor = BufferedCursor(bytearray(b"xy"))
    cursor.consume_while(lambda c: c.isalpha())
    assert cursor.take_buffer() == b"xy"


@pytest.mark.parametrize("source", [None, 42, ["a", "b"]])
def test_rejects_non_text_source(source):
    with pytest.raises(TypeError):
        SliceCursor(source)


@pytest.mark.parametrize(
    "source,offset,expected",
    [
        ("abc", 0, (1, 1)),
        ("abc", 2, (1, 3)),
        ("ab\ncd", 3, (2, 1)),
        ("ab\ncd", 4, (2, 2)),
        ("a\n\nb", 3, (3, 1)),
        (b"x\ny", 2, (2, 1)),
    ],
)
def test_location(source, offset, expected):
    assert SliceCursor(source).location(offset) == expected
