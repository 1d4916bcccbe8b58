import datetime
import math
import time

import pytest

from espcore.printer import BIN, HEX, OCT, Print, Printable
from espcore.wstring import ArduinoString


class BufferPrint(Print):
    def __init__(self):
        self.out = bytearray()

    def write_byte(self, value):
        self.out.append(value)
        return 1

    @property
    def text(self):
        return self.out.decode("utf-8")


class RefusingPrint(Print):
    def write_byte(self, value):
        return 0


class Tag(Printable):
    def __init__(self, name):
        self.name = name

    def print_to(self, printer):
        return printer.print("<") + printer.print(self.name) + printer.print(">")


@pytest.fixture
def printer():
    return BufferPrint()


def test_write_bytes_counts(printer):
    assert Print.write(printer, b"abc") == 3
    assert printer.out == b"abc"


def test_write_none_writes_nothing(printer):
    assert Print.write(printer, None) == 0
    assert printer.out == b""


def test_write_text_is_utf8(printer):
    text = "h\u00e9llo"
    assert Print.write(printer, text) == len(text.encode("utf-8"))
    assert printer.text == text


def test_print_positive_decimal(printer):
    assert Print.print(printer, 12345) == 5
    assert printer.text == "12345"


def test_print_negative_decimal(printer):
    assert Print.print(printer, -42) == 3
    assert printer.text == "-42"


@pytest.mark.parametrize("base", [HEX, OCT, BIN])
@pytest.mark.parametrize("number", [0, 1, 255, 48879, 123456789])
def test_print_in_base_round_trips(base, number):
    p = BufferPrint()
    count = Print.print(p, number, base)
    assert count == len(p.out)
    assert int(p.text, base) == number
    assert p.text == p.text.upper()


def test_negative_hex_is_unsigned_32_bit(printer):
    assert Print.print(printer, -1, HEX) == 8
    assert printer.text == "FFFFFFFF"


def test_base_below_two_falls_back_to_decimal(printer):
    assert Print.print(printer, 77, 1) == 2
    assert printer.text == "77"


def test_base_zero_writes_raw_byte(printer):
    assert Print.print(printer, 65, 0) == 1
    assert printer.out == bytes([65])


def test_float_rounds_up(printer):
    Print.print(printer, 1.999, 2)
    assert printer.text == "2.00"


def test_float_default_two_decimals(printer):
    Print.print(printer, 3.14159)
    whole, decimals = printer.text.split(".")
    assert len(decimals) == 2
    assert float(printer.text) == pytest.approx(3.14159, abs=0.005)


def test_float_without_decimals(printer):
    Print.print(printer, 2.4, 0)
    assert "." not in printer.text
    assert int(printer.text) == round(2.4)


def test_negative_float(printer):
    Print.print(printer, -7.25, 3)
    assert printer.text.startswith("-")
    assert float(printer.text) == pytest.approx(-7.25)


@pytest.mark.parametrize(
    "value, expected",
    [
        (math.nan, "nan"),
        (math.inf, "inf"),
        (-math.inf, "inf"),
        (5e9, "ovf"),
        (-5e9, "ovf"),
    ],
)
def test_float_special_values(value, expected):
    p = BufferPrint()
    assert Print.print(p, value) == len(expected)
    assert p.text == expected


def test_println_appends_crlf(printer):
    count = Print.println(printer, "hi")
    assert printer.text == "hi\r\n"
    assert count == 4


def test_println_without_value(printer):
    assert Print.println(printer) == 2
    assert printer.out == b"\r\n"


def test_println_number_with_base(printer):
    Print.println(printer, 10, BIN)
    assert printer.text.endswith("\r\n")
    assert int(printer.text[:-2], 2) == 10


def test_print_printable(printer):
    count = Print.print(printer, Tag("x"))
    assert printer.text == "<x>"
    assert count == 3


def test_print_arduino_string(printer):
    assert Print.print(printer, ArduinoString("abc")) == 3
    assert printer.text == "abc"


def test_print_invalid_arduino_string_writes_nothing(printer):
    assert Print.print(printer, ArduinoString(None)) == 0
    assert printer.out == b""


def test_printf_formats(printer):
    count = Print.printf(printer, "%s=%d", "a", 5)
    assert printer.text == "a=5"
    assert count == len(printer.out)


def test_print_time_struct(printer):
    t = time.struct_time((2020, 1, 2, 3, 4, 5, 3, 2, 0))
    count = Print.print_time(printer, t, "%Y-%m-%d")
    assert printer.text == "2020-01-02"
    assert count == 10


def test_print_time_datetime(printer):
    moment = datetime.datetime(2021, 6, 7, 8, 9, 10)
    Print.print_time(printer, moment, "%H:%M:%S")
    assert printer.text == "08:09:10"


def test_print_time_too_long_writes_nothing(printer):
    t = time.struct_time((2020, 1, 2, 3, 4, 5, 3, 2, 0))
    assert Print.print_time(printer, t, "x" * 64) == 0
    assert printer.out == b""


def test_print_time_empty_format_writes_nothing(printer):
    t = time.struct_time((2020, 1, 2, 3, 4, 5, 3, 2, 0))
    assert Print.print_time(printer, t, "") == 0
    assert printer.out == b""


def test_println_time_appends_crlf(printer):
    t = time.struct_time((2020, 1, 2, 3, 4, 5, 3, 2, 0))
    Print.println_time(printer, t, "%Y")
    assert printer.text == "2020\r\n"


def test_counts_reflect_refused_bytes():
    p = RefusingPrint()
    assert Print.print(p, "abc") == 0
    assert Print.println(p, 12) == 0


def test_clear_write_error(printer):
    printer.write_error = 3
    Print.clear_write_error(printer)
    assert printer.write_error == 0


def test_unsupported_value_raises(printer):
    with pytest.raises(TypeError):
        Print.print(printer, object())


def test_base_with_text_raises(printer):
    with pytest.raises(TypeError):
        Print.print(printer, "abc", HEX)