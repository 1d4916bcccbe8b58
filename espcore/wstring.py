"""A mutable string type with the semantics of the microcontroller core string.

An :class:`ArduinoString` either holds text or is *invalid* (the state a
failed allocation or a null source leaves behind). An invalid string is
falsy and has length zero; most operations treat it as empty. Lengths are
capped at :data:`MAX_LENGTH`; operations that would exceed the cap fail
and leave the string unchanged.
"""

from __future__ import annotations

import math
import string as _stringmod
import struct
import sys
from typing import Iterator, Optional, Union

from .numfmt import float_to_str, int_to_str, parse_double, parse_long

__all__ = ["ArduinoString", "MAX_LENGTH"]

MAX_LENGTH = 65519
"""Longest text a string can hold; longer buffers cannot be allocated."""

_C_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(_stringmod.ascii_uppercase, _stringmod.ascii_lowercase)
_TO_UPPER = str.maketrans(_stringmod.ascii_lowercase, _stringmod.ascii_uppercase)

StrLike = Union["ArduinoString", str, None]


def _text_of(value: StrLike) -> Optional[str]:
    """Text of a string-like argument; None stands for an invalid string."""
    if isinstance(value, ArduinoString):
        return value._text
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"expected a string, not {type(value).__name__}")


def _unsigned(index: int) -> int:
    """Map a negative index to a huge one, as an unsigned parameter would."""
    return index if index >= 0 else sys.maxsize


def _strcmp(a: str, b: str) -> int:
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(a) < len(b):
        return -ord(b[len(a)])
    return 0


def _last_occurrence(text: str, sub: str, from_index: int) -> int:
    if not sub or not text or len(sub) > len(text):
        return -1
    if from_index < 0 or from_index >= len(text):
        from_index = len(text) - 1
    return text.rfind(sub, 0, from_index + len(sub))


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class ArduinoString:
    """Mutable text with lenient, never-raising string operations."""

    __slots__ = ("_text",)

    def __init__(self, value: object = "", base: Optional[int] = None) -> None:
        """Build from text, another string, an integer or a float.

        For integers ``base`` is the radix (default 10); for floats it is the
        number of decimal places (default 2). ``None`` gives an invalid string.
        """
        text: Optional[str]
        if value is None:
            text = None
        elif isinstance(value, ArduinoString):
            text = value._text
        elif isinstance(value, str):
            text = value
        elif isinstance(value, int):
            text = int_to_str(value, 10 if base is None else base)
        elif isinstance(value, float):
            places = 2 if base is None else base
            text = float_to_str(value, places + 2, places)
        else:
            raise TypeError(f"cannot build a string from {type(value).__name__}")
        if text is not None and len(text) > MAX_LENGTH:
            text = None
        self._text = text

    # -- memory ------------------------------------------------------------

    def reserve(self, size: int) -> bool:
        """Make room for ``size`` characters; validates an invalid string."""
        if size > MAX_LENGTH:
            return False
        if self._text is None:
            self._text = ""
        return True

    def clear(self) -> None:
        """Empty the string; an invalid string stays invalid."""
        if self._text is not None:
            self._text = ""

    def is_empty(self) -> bool:
        return len(self) == 0

    # -- dunder protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._text) if self._text is not None else 0

    def __bool__(self) -> bool:
        return self._text is not None

    def __str__(self) -> str:
        return self._text or ""

    def __repr__(self) -> str:
        if self._text is None:
            return "ArduinoString(None)"
        return f"ArduinoString({self._text!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._text or "")

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ArduinoString, str)):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: StrLike) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: StrLike) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: StrLike) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: StrLike) -> bool:
        return self.compare_to(other) >= 0

    def __iadd__(self, other: object) -> "ArduinoString":
        self.concat(other)
        return self

    def __add__(self, other: object) -> "ArduinoString":
        result = ArduinoString(self)
        if not result.concat(other):
            result._text = None
        return result

    def __radd__(self, other: object) -> "ArduinoString":
        if not isinstance(other, str):
            return NotImplemented
        result = ArduinoString(other)
        if not result.concat(self):
            result._text = None
        return result

    # -- concatenation -----------------------------------------------------

    def concat(self, value: object) -> bool:
        """Append text or a number; return False and change nothing on failure."""
        if value is None or isinstance(value, (ArduinoString, str)):
            text = _text_of(value)  # type: ignore[arg-type]
        elif isinstance(value, int):
            text = str(int(value))
        elif isinstance(value, float):
            text = float_to_str(value, 4, 2)
        else:
            raise TypeError(f"cannot concatenate {type(value).__name__}")
        if text is None:
            return False
        if not text:
            return True
        if len(self) + len(text) > MAX_LENGTH:
            return False
        self._text = (self._text or "") + text
        return True

    # -- comparison --------------------------------------------------------

    def compare_to(self, other: StrLike) -> int:
        """Negative, zero or positive as this string sorts before, with or after."""
        other_text = _text_of(other)
        if self._text is None or other_text is None:
            if other_text:
                return -ord(other_text[0])
            if self._text:
                return ord(self._text[0])
            return 0
        return _strcmp(self._text, other_text)

    def equals(self, other: StrLike) -> bool:
        if isinstance(other, ArduinoString):
            return len(self) == len(other) and self.compare_to(other) == 0
        other_text = _text_of(other)
        if len(self) == 0:
            return not other_text
        if other_text is None:
            return False
        return self._text == other_text

    def equals_ignore_case(self, other: StrLike) -> bool:
        other_text = _text_of(other) or ""
        mine = self._text or ""
        if len(mine) != len(other_text):
            return False
        return mine.translate(_TO_LOWER) == other_text.translate(_TO_LOWER)

    def equals_constant_time(self, other: StrLike) -> bool:
        """Compare without stopping early at the first difference."""
        other_text = _text_of(other) or ""
        mine = self._text or ""
        if len(mine) != len(other_text):
            return False
        if not mine:
            return True
        equal = diff = 0
        for a, b in zip(mine, other_text):
            if a == b:
                equal += 1
            else:
                diff += 1
        return bool((equal == len(mine)) & (diff == 0))

    def starts_with(self, prefix: StrLike, offset: Optional[int] = None) -> bool:
        prefix_text = _text_of(prefix)
        if offset is None:
            if len(self) < len(prefix_text or ""):
                return False
            offset = 0
        if self._text is None or prefix_text is None:
            return False
        if offset < 0 or offset + len(prefix_text) > len(self._text):
            return False
        return self._text.startswith(prefix_text, offset)

    def ends_with(self, suffix: StrLike) -> bool:
        suffix_text = _text_of(suffix)
        if self._text is None or suffix_text is None:
            return False
        if len(self._text) < len(suffix_text):
            return False
        return self._text.endswith(suffix_text)

    # -- character access --------------------------------------------------

    def char_at(self, index: int) -> str:
        """The character at ``index``, or ``"\\0"`` when out of range."""
        if self._text is None or index < 0 or index >= len(self._text):
            return "\0"
        return self._text[index]

    def set_char_at(self, index: int, c: str) -> None:
        """Replace the character at ``index``; ignored when out of range."""
        if len(c) != 1:
            raise ValueError("expected a single character")
        if self._text is not None and 0 <= index < len(self._text):
            self._text = self._text[:index] + c + self._text[index + 1:]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Up to ``bufsize - 1`` characters from ``index``, UTF-8 encoded."""
        if bufsize <= 0:
            return b""
        if index < 0 or index >= len(self):
            return b""
        count = min(bufsize - 1, len(self) - index)
        return self._text[index:index + count].encode("utf-8")  # type: ignore[index]

    # -- search ------------------------------------------------------------

    def index_of(self, target: StrLike, from_index: int = 0) -> int:
        """Position of the first ``target`` at or after ``from_index``, or -1."""
        from_index = _unsigned(from_index)
        if from_index >= len(self):
            return -1
        return self._text.find(_text_of(target) or "", from_index)  # type: ignore[union-attr]

    def last_index_of(self, target: StrLike, from_index: Optional[int] = None) -> int:
        """Position of the last ``target`` starting at or before ``from_index``.

        A single character gives -1 when ``from_index`` lies past the end;
        a longer target clamps ``from_index`` to the last position instead.
        """
        size = len(self)
        if isinstance(target, str) and len(target) == 1:
            start = size - 1 if from_index is None else from_index
            if start < 0 or start >= size:
                return -1
            return self._text.rfind(target, 0, start + 1)  # type: ignore[union-attr]
        sub = _text_of(target) or ""
        start = size - len(sub) if from_index is None else from_index
        return _last_occurrence(self._text or "", sub, start)

    def substring(self, begin: int, end: Optional[int] = None) -> "ArduinoString":
        """Characters from ``begin`` up to ``end``; the bounds may be given swapped."""
        size = len(self)
        begin = _unsigned(begin)
        end = size if end is None else _unsigned(end)
        if begin > end:
            begin, end = end, begin
        if begin >= size:
            return ArduinoString()
        return ArduinoString(self._text[begin:min(end, size)])  # type: ignore[index]

    # -- modification ------------------------------------------------------

    def replace(self, find: StrLike, replacement: StrLike) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place.

        Growing replacements are applied from the end of the string backwards.
        """
        find_text = _text_of(find) or ""
        repl = _text_of(replacement) or ""
        if not self._text or not find_text:
            return
        diff = len(repl) - len(find_text)
        if diff <= 0:
            self._text = self._text.replace(find_text, repl)
            return
        size = len(self._text) + diff * self._text.count(find_text)
        if size == len(self._text) or size > MAX_LENGTH:
            return
        text = self._text
        index = len(text) - 1
        while index >= 0:
            index = _last_occurrence(text, find_text, index)
            if index < 0:
                break
            text = text[:index] + repl + text[index + len(find_text):]
            index -= 1
        self._text = text

    def remove(self, index: int, count: Optional[int] = None) -> None:
        """Delete ``count`` characters from ``index`` (to the end by default)."""
        index = _unsigned(index)
        if index >= len(self):
            return
        count = sys.maxsize if count is None else _unsigned(count)
        if count == 0:
            return
        self._text = self._text[:index] + self._text[index + count:]  # type: ignore[index]

    def to_lower_case(self) -> None:
        """Lower-case ASCII letters in place."""
        if self._text is not None:
            self._text = self._text.translate(_TO_LOWER)

    def to_upper_case(self) -> None:
        """Upper-case ASCII letters in place."""
        if self._text is not None:
            self._text = self._text.translate(_TO_UPPER)

    def trim(self) -> None:
        """Strip leading and trailing whitespace in place."""
        if self._text:
            self._text = self._text.strip(_C_WHITESPACE)

    # -- conversion --------------------------------------------------------

    def to_int(self) -> int:
        return parse_long(self._text) if self._text is not None else 0

    def to_float(self) -> float:
        """The leading number, rounded to single precision."""
        if self._text is None:
            return 0.0
        return _to_float32(parse_double(self._text))

    def to_double(self) -> float:
        return parse_double(self._text) if self._text is not None else 0.0