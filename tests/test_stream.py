import time

import pytest

from espcore.stream import Stream
from espcore.wstring import ArduinoString


class BytesStream(Stream):
    def __init__(self, data=b""):
        self.incoming = bytearray(data.encode() if isinstance(data, str) else data)
        self.outgoing = bytearray()
        self.timeout = 0

    def write_byte(self, value):
        self.outgoing.append(value)
        return 1

    def available(self):
        return len(self.incoming)

    def read(self):
        if not self.incoming:
            return -1
        value = self.incoming[0]
        del self.incoming[0]
        return value

    def peek(self):
        return self.incoming[0] if self.incoming else -1

    def flush(self):
        pass


def test_default_timeout_is_one_second():
    stream = BytesStream.__new__(BytesStream)
    stream.incoming = bytearray(b"7x")
    assert Stream.parse_int(stream) == 7
    assert bytes(stream.incoming) == b"x"
    assert stream.timeout == 1000


def test_find_consumes_through_target():
    stream = BytesStream("header OK rest")
    assert Stream.find(stream, "OK") is True
    assert bytes(stream.incoming) == b" rest"


def test_find_missing_returns_false():
    stream = BytesStream("nothing here")
    assert Stream.find(stream, "XYZ") is False
    assert stream.available() == 0


def test_find_empty_target_is_true():
    stream = BytesStream("abc")
    assert Stream.find(stream, "") is True
    assert stream.available() == 3


def test_find_single_char():
    stream = BytesStream("abc:def")
    assert Stream.find(stream, ":") is True
    assert bytes(stream.incoming) == b"def"


def test_find_until_stops_at_terminator():
    stream = BytesStream("abc\r\nTARGET")
    assert Stream.find_until(stream, "TARGET", "\r\n") is False
    assert bytes(stream.incoming) == b"TARGET"


def test_find_until_target_first():
    stream = BytesStream("xxTARGET\r\n")
    assert Stream.find_until(stream, "TARGET", "\r\n") is True


def test_parse_int_skips_leading_text():
    stream = BytesStream("abc-123def")
    assert Stream.parse_int(stream) == -123
    assert bytes(stream.incoming) == b"def"


def test_parse_int_with_skip_char():
    stream = BytesStream("1,234;")
    assert Stream.parse_int(stream, ",") == 1234


def test_parse_int_timeout_gives_zero():
    assert Stream.parse_int(BytesStream("no digits")) == 0


def test_parse_float_fraction():
    assert Stream.parse_float(BytesStream("x3.5y")) == 3.5


def test_parse_float_negative():
    assert Stream.parse_float(BytesStream("-2.25")) == -2.25


def test_parse_float_integer():
    assert Stream.parse_float(BytesStream("42 ")) == 42.0


def test_read_bytes_limits_length():
    stream = BytesStream(b"abcdef")
    assert Stream.read_bytes(stream, 4) == b"abcd"
    assert Stream.read_bytes(stream, 10) == b"ef"


def test_read_bytes_until_consumes_terminator():
    stream = BytesStream(b"key=value")
    assert Stream.read_bytes_until(stream, "=", 20) == b"key"
    assert bytes(stream.incoming) == b"value"


def test_read_bytes_until_zero_length():
    stream = BytesStream(b"abc")
    assert Stream.read_bytes_until(stream, "=", 0) == b""
    assert stream.available() == 3


def test_read_string_reads_everything():
    stream = BytesStream("hello")
    result = Stream.read_string(stream)
    assert isinstance(result, ArduinoString)
    assert str(result) == "hello"
    assert stream.available() == 0


def test_read_string_until():
    stream = BytesStream("line one\nline two")
    assert str(Stream.read_string_until(stream, "\n")) == "line one"
    assert str(Stream.read_string_until(stream, "\n")) == "line two"


def test_timeout_waits_before_giving_up():
    stream = BytesStream()
    stream.timeout = 30
    start = time.monotonic()
    assert Stream.read_bytes(stream, 1) == b""
    assert time.monotonic() - start >= 0.025


def test_bad_terminator():
    with pytest.raises(ValueError):
        Stream.read_string_until(BytesStream("abc"), "ab")


def test_stream_is_printable_sink():
    stream = BytesStream()
    assert Stream.println(stream, 7) == 3
    assert bytes(stream.outgoing) == b"7\r\n"