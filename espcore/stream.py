"""Readable byte streams with timed reads and lenient number parsing.

A :class:`Stream` subclass supplies ``available``, ``read``, ``peek`` and
``flush`` (plus ``write_byte`` from :class:`Print`); the search, parsing
and bulk-read helpers are built on them. Reads wait up to :attr:`Stream.timeout`
milliseconds for data before giving up.
"""

from __future__ import annotations

import struct
import time
from abc import abstractmethod
from typing import Optional, Union

from .printer import Print
from .wstring import ArduinoString

__all__ = ["Stream"]

_NO_SKIP_CHAR = 1
_MINUS = ord("-")
_DOT = ord(".")

Target = Union[str, bytes, bytearray, memoryview, int, ArduinoString]


def _as_bytes(value: Optional[Target]) -> bytes:
    if value is None:
        return b""
    if isinstance(value, int):
        return bytes([value & 0xFF])
    if isinstance(value, ArduinoString):
        value = str(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _char_code(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value & 0xFF
    encoded = value.encode("latin-1")
    if len(encoded) != 1:
        raise ValueError("expected a single character")
    return encoded[0]


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _millis() -> float:
    return time.monotonic() * 1000.0


class Stream(Print):
    """Base class for character streams that can be read and searched."""

    timeout: float = 1000
    """Milliseconds to wait for the next byte before a read gives up."""

    @abstractmethod
    def available(self) -> int:
        """Number of bytes that can be read now."""

    @abstractmethod
    def read(self) -> int:
        """Consume and return the next byte, or -1 if there is none."""

    @abstractmethod
    def peek(self) -> int:
        """Return the next byte without consuming it, or -1 if there is none."""

    @abstractmethod
    def flush(self) -> None:
        """Finish any pending output."""

    # -- timed primitives --------------------------------------------------

    def _timed(self, fetch) -> int:
        start = _millis()
        while True:
            c = fetch()
            if c >= 0:
                return c
            if _millis() - start >= self.timeout:
                return -1

    def _timed_read(self) -> int:
        return self._timed(self.read)

    def _timed_peek(self) -> int:
        return self._timed(self.peek)

    def _peek_next_digit(self) -> int:
        while True:
            c = self._timed_peek()
            if c < 0 or c == _MINUS or _is_digit(c):
                return c
            self.read()

    # -- searching ---------------------------------------------------------

    def find(self, target: Target) -> bool:
        """Read until ``target`` has been seen; False on timeout."""
        return self.find_until(target, None)

    def find_until(self, target: Target, terminator: Optional[Target] = None) -> bool:
        """Read until ``target`` is seen; False if ``terminator`` comes first or on timeout."""
        wanted = _as_bytes(target)
        stop = _as_bytes(terminator)
        if not wanted:
            return True
        index = 0
        term_index = 0
        while True:
            c = self._timed_read()
            if c <= 0:
                return False
            if c != wanted[index]:
                index = 0
            if c == wanted[index]:
                index += 1
                if index >= len(wanted):
                    return True
            if stop and c == stop[term_index]:
                term_index += 1
                if term_index >= len(stop):
                    return False
            else:
                term_index = 0

    # -- parsing -----------------------------------------------------------

    def parse_int(self, skip_char: Union[str, int, None] = None) -> int:
        """The first integer in the stream, skipping leading non-digits.

        ``skip_char`` is ignored inside the number (e.g. a thousands comma).
        Zero is returned on timeout.
        """
        skip = _NO_SKIP_CHAR if skip_char is None else _char_code(skip_char)
        c = self._peek_next_digit()
        if c < 0:
            return 0
        negative = False
        value = 0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif _is_digit(c):
                value = value * 10 + c - 0x30
            self.read()
            c = self._timed_peek()
            if not (_is_digit(c) or c == skip):
                break
        return -value if negative else value

    def parse_float(self, skip_char: Union[str, int, None] = None) -> float:
        """The first number in the stream, with an optional fraction, in single precision."""
        skip = _NO_SKIP_CHAR if skip_char is None else _char_code(skip_char)
        c = self._peek_next_digit()
        if c < 0:
            return 0.0
        negative = False
        is_fraction = False
        value = 0
        fraction = 1.0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                is_fraction = True
            elif _is_digit(c):
                value = value * 10 + c - 0x30
                if is_fraction:
                    fraction = _f32(fraction * 0.1)
            self.read()
            c = self._timed_peek()
            if not (_is_digit(c) or c == _DOT or c == skip):
                break
        if negative:
            value = -value
        if is_fraction:
            return _f32(_f32(float(value)) * fraction)
        return _f32(float(value))

    # -- bulk reads --------------------------------------------------------

    def read_bytes(self, length: int) -> bytes:
        """Up to ``length`` bytes; fewer if the stream times out."""
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0:
                break
            out.append(c)
        return bytes(out)

    def read_bytes_until(self, terminator: Union[str, int], length: int) -> bytes:
        """Up to ``length`` bytes, stopping at (and consuming) ``terminator``."""
        stop = _char_code(terminator)
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0 or c == stop:
                break
            out.append(c)
        return bytes(out)

    def read_string(self) -> ArduinoString:
        """Everything up to the next timeout, one character per byte."""
        chars = []
        c = self._timed_read()
        while c >= 0:
            chars.append(chr(c))
            c = self._timed_read()
        return ArduinoString("".join(chars))

    def read_string_until(self, terminator: Union[str, int]) -> ArduinoString:
        """Characters up to ``terminator`` (consumed, not included) or a timeout."""
        stop = _char_code(terminator)
        chars = []
        c = self._timed_read()
        while c >= 0 and c != stop:
            chars.append(chr(c))
            c = self._timed_read()
        return ArduinoString("".join(chars))