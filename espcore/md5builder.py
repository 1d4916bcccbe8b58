"""Incremental MD5 hashing of bytes, text, hex strings and streams."""

from __future__ import annotations

import hashlib
from typing import Union

from .stream import Stream
from .wstring import ArduinoString

__all__ = ["MD5Builder"]

_DIGEST_SIZE = 16
_CHUNK = 512

Data = Union[bytes, bytearray, memoryview, str, ArduinoString]


def _nibble(c: str) -> int:
    """Value of a hex digit; any other character counts as zero."""
    if "a" <= c <= "f":
        return ord(c) - ord("a") + 10
    if "A" <= c <= "F":
        return ord(c) - ord("A") + 10
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    return 0


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, ArduinoString):
        data = str(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class MD5Builder:
    """Feed data with the ``add`` methods, then :meth:`calculate` the digest."""

    def __init__(self) -> None:
        self.begin()

    def begin(self) -> None:
        """Start a new hash and zero the stored digest."""
        self._ctx = hashlib.md5()
        self._digest = bytes(_DIGEST_SIZE)

    def add(self, data: Data) -> None:
        """Hash raw bytes, or text encoded as UTF-8."""
        self._ctx.update(_as_bytes(data))

    def add_hex_string(self, data: Union[str, ArduinoString]) -> None:
        """Hash the bytes a hex string spells out.

        Characters that are not hex digits count as zero, and a trailing
        unpaired digit is ignored.
        """
        text = str(data)
        pairs = zip(text[0::2], text[1::2])
        self._ctx.update(bytes((_nibble(hi) << 4) | _nibble(lo) for hi, lo in pairs))

    def add_stream(self, stream: Stream, max_len: int) -> bool:
        """Hash up to ``max_len`` bytes that ``stream`` has available.

        Returns False if the stream reports data but delivers none.
        """
        left = max_len
        available = stream.available()
        while available > 0 and left > 0:
            chunk = stream.read_bytes(min(available, left, _CHUNK))
            if not chunk:
                return False
            self._ctx.update(chunk)
            left -= len(chunk)
            available = stream.available()
        return True

    def calculate(self) -> None:
        """Finish the hash and store the digest."""
        self._digest = self._ctx.digest()

    def digest(self) -> bytes:
        """The stored 16-byte digest (all zeros before :meth:`calculate`)."""
        return self._digest

    def hexdigest(self) -> str:
        """The stored digest as 32 lower-case hex digits."""
        return self._digest.hex()

    def __str__(self) -> str:
        return self.hexdigest()