"""Byte-oriented text output with number, float and time formatting.

:class:`Print` is the base for anything that accepts output one byte at a
time. A subclass supplies :meth:`Print.write_byte`; every other method is
built on it and returns the number of bytes that were accepted.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Optional, Union

from .wstring import ArduinoString

__all__ = ["Printable", "Print", "DEC", "HEX", "OCT", "BIN"]

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_CRLF = "\r\n"
_OVERFLOW_LIMIT = 4294967040.0
_TIME_BUFFER = 64
_ULONG_MASK = 0xFFFFFFFF
_MISSING = object()

Writable = Union[bytes, bytearray, memoryview, str, ArduinoString, int, None]


class Printable(ABC):
    """An object that knows how to write itself to a :class:`Print`."""

    @abstractmethod
    def print_to(self, printer: "Print") -> int:
        """Write this object to ``printer`` and return the bytes written."""


class Print(ABC):
    """Base class for byte sinks with ``print``/``println`` helpers."""

    write_error: int = 0

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Write one byte; return 1 if it was accepted, 0 otherwise."""

    def write(self, data: Writable) -> int:
        """Write bytes, text (UTF-8 encoded) or a single byte value."""
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, ArduinoString):
            data = str(data)
        if isinstance(data, str):
            payload = data.encode("utf-8")
        else:
            payload = bytes(data)
        return sum(self.write_byte(byte) for byte in payload)

    def clear_write_error(self) -> None:
        self.write_error = 0

    def printf(self, fmt: str, *args: object) -> int:
        """Write ``fmt % args``."""
        return self.write(fmt % args)

    def print(self, value: object, base: Optional[int] = None) -> int:
        """Write text, a number or a :class:`Printable`.

        For integers ``base`` is the radix (default 10; 0 writes the raw
        byte). For floats it is the number of decimals (default 2).
        """
        if isinstance(value, Printable):
            return value.print_to(self)
        if isinstance(value, (str, ArduinoString, bytes, bytearray, memoryview)):
            if base is not None:
                raise TypeError("a base applies only to numbers")
            return self.write(value)
        if isinstance(value, int):
            return self._print_integer(value, DEC if base is None else base)
        if isinstance(value, float):
            return self._print_float(value, 2 if base is None else base)
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value: object = _MISSING, base: Optional[int] = None) -> int:
        """Like :meth:`print`, followed by a CR LF line ending."""
        if value is _MISSING:
            return self.write(_CRLF)
        return self.print(value, base) + self.write(_CRLF)

    def print_time(self, timeinfo: object, fmt: Optional[str] = None) -> int:
        """Write ``timeinfo`` formatted with strftime ``fmt`` (default ``%c``).

        ``timeinfo`` is a ``time.struct_time`` or anything with ``strftime``.
        Nothing is written when the result is empty or 64 bytes or longer.
        """
        pattern = "%c" if fmt is None else fmt
        if hasattr(timeinfo, "strftime"):
            text = timeinfo.strftime(pattern)
        else:
            text = time.strftime(pattern, timeinfo)  # type: ignore[arg-type]
        if not text or len(text.encode("utf-8")) >= _TIME_BUFFER:
            return 0
        return self.write(text)

    def println_time(self, timeinfo: object, fmt: Optional[str] = None) -> int:
        return self.print_time(timeinfo, fmt) + self.write(_CRLF)

    def _print_integer(self, number: int, base: int) -> int:
        if base == 0:
            return self.write_byte(number & 0xFF)
        if base == DEC:
            if number < 0:
                return self.write("-") + self.write(_number_text(-number, DEC))
            return self.write(_number_text(number, DEC))
        if number < 0:
            number &= _ULONG_MASK
        return self.write(_number_text(number, base))

    def _print_float(self, number: float, digits: int) -> int:
        if number != number:
            return self.write("nan")
        if number in (float("inf"), float("-inf")):
            return self.write("inf")
        if number > _OVERFLOW_LIMIT or number < -_OVERFLOW_LIMIT:
            return self.write("ovf")

        written = 0
        if number < 0.0:
            written += self.write("-")
            number = -number

        rounding = 0.5
        for _ in range(max(digits, 0)):
            rounding /= 10.0
        number += rounding

        int_part = int(number)
        remainder = number - float(int_part)
        written += self.write(_number_text(int_part, DEC))
        if digits > 0:
            written += self.write(".")
        for _ in range(max(digits, 0)):
            remainder *= 10.0
            digit = int(remainder)
            written += self.write(_number_text(digit, DEC))
            remainder -= digit
        return written


def _number_text(number: int, base: int) -> str:
    """Unsigned ``number`` in ``base`` with upper-case letters; bases below 2 mean 10."""
    if base < 2:
        base = DEC
    chars = []
    while True:
        number, digit = divmod(number, base)
        chars.append(chr(digit + 48) if digit < 10 else chr(digit + 55))
        if not number:
            break
    return "".join(reversed(chars))