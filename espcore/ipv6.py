"""A sixteen-byte IPv6 address with fixed-width colon-hex text form."""

from __future__ import annotations

import re
import struct
from typing import Iterable, Iterator, Optional, Union

from .printer import Print, Printable
from .wstring import ArduinoString

__all__ = ["IPv6Address"]

_SIZE = 16
_TEXT_LENGTH = 39
_GROUP_STRIDE = 5
_HEX_PAIR = re.compile(r"[ \t\n\v\f\r]*([0-9a-fA-F]{1,2})")

AddressLike = Union[bytes, bytearray, memoryview, Iterable[int], None]


def _scan_hex_byte(text: str, pos: int) -> int:
    """Read up to two hex digits at ``pos``, skipping leading whitespace."""
    match = _HEX_PAIR.match(text, pos)
    if match is None:
        raise ValueError(f"expected hex digits at position {pos} in {text!r}")
    return int(match.group(1), 16)


class IPv6Address(Printable):
    """An IPv6 address stored as sixteen raw bytes."""

    __slots__ = ("_bytes",)

    def __init__(self, address: AddressLike = None) -> None:
        """Build from sixteen bytes; with no argument the address is all zeros."""
        if address is None:
            raw = bytearray(_SIZE)
        else:
            raw = bytearray(address)
        if len(raw) != _SIZE:
            raise ValueError(f"an IPv6 address has {_SIZE} bytes, not {len(raw)}")
        self._bytes = raw

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "IPv6Address":
        """Build from four 32-bit words laid out little-endian in memory."""
        values = list(words)
        if len(values) != 4:
            raise ValueError(f"expected 4 words, not {len(values)}")
        return cls(struct.pack("<4I", *(value & 0xFFFFFFFF for value in values)))

    @classmethod
    def from_string(cls, address: Union[str, ArduinoString]) -> "IPv6Address":
        """Parse the full form ``0011:2233:4455:6677:8899:aabb:ccdd:eeff``.

        Only the full 39-character form is accepted; abbreviations are not.
        """
        text = str(address)
        if len(text) != _TEXT_LENGTH:
            raise ValueError(
                f"an IPv6 address must be {_TEXT_LENGTH} characters, not {len(text)}"
            )
        raw = bytearray()
        for group in range(_SIZE // 2):
            pos = group * _GROUP_STRIDE
            raw.append(_scan_hex_byte(text, pos))
            raw.append(_scan_hex_byte(text, pos + 2))
        return cls(raw)

    @property
    def words(self) -> tuple[int, int, int, int]:
        """The address as four little-endian 32-bit words."""
        return struct.unpack("<4I", bytes(self._bytes))

    def print_to(self, printer: Print) -> int:
        written = 0
        for group in range(_SIZE // 2):
            if group:
                written += printer.print(":")
            written += printer.printf("%02x", self._bytes[2 * group])
            written += printer.printf("%02x", self._bytes[2 * group + 1])
        return written

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __str__(self) -> str:
        hex_text = self._bytes.hex()
        return ":".join(hex_text[i:i + 4] for i in range(0, len(hex_text), 4))

    def __repr__(self) -> str:
        return f"IPv6Address({str(self)!r})"

    def __len__(self) -> int:
        return _SIZE

    def __iter__(self) -> Iterator[int]:
        return iter(self._bytes)

    def __getitem__(self, index: int) -> int:
        return self._bytes[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._bytes[index] = value & 0xFF

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IPv6Address):
            return self._bytes == other._bytes
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(other) == bytes(self._bytes)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "IPv6Address":
        return IPv6Address(self._bytes)

    @staticmethod
    def _optional(text: Optional[str]) -> Optional["IPv6Address"]:
        return None if text is None else IPv6Address.from_string(text)