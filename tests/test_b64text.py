import base64

import pytest

from espcore.b64text import encode
from espcore.wstring import ArduinoString


def test_known_value():
    assert str(encode(b"Man")) == "TWFu"


def test_empty_input():
    result = encode(b"")
    assert str(result) == ""
    assert bool(result)


@pytest.mark.parametrize(
    "payload",
    [b"a", b"ab", b"abc", b"abcd", bytes(range(256)), b"\x00\xff" * 50],
)
def test_round_trip(payload):
    result = str(encode(payload))
    assert base64.b64decode(result) == payload
    assert len(result) % 4 == 0


def test_long_input_has_no_line_breaks():
    result = str(encode(bytes(200)))
    assert "\n" not in result
    assert base64.b64decode(result) == bytes(200)


def test_text_input_is_utf8():
    text = "gr\u00fc\u00dfe"
    assert encode(text) == encode(text.encode("utf-8"))


def test_arduino_string_input():
    assert encode(ArduinoString("hello")) == encode(b"hello")


def test_result_is_arduino_string():
    result = encode(bytearray(b"xyz"))
    assert base64.b64decode(str(result)) == b"xyz"
    assert result.length() if hasattr(result, "length") else len(result) == 4