"""A string that is also a stream: writes append, reads consume from the front."""

from __future__ import annotations

from typing import Union

from .stream import Stream
from .wstring import ArduinoString

__all__ = ["StreamString"]

Writable = Union[bytes, bytearray, memoryview, str, ArduinoString, int, None]


class StreamString(Stream, ArduinoString):
    """An :class:`ArduinoString` that can be written to and read from as a stream.

    Each byte written becomes one character; reading returns character codes.
    """

    def write_byte(self, value: int) -> int:
        return 1 if self.concat(chr(value & 0xFF)) else 0

    def write(self, data: Writable) -> int:
        """Append bytes (text is UTF-8 encoded); return the count, or 0 on failure."""
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data)
        if isinstance(data, ArduinoString):
            data = str(data)
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        if not payload:
            return 0
        return len(payload) if self.concat(payload.decode("latin-1")) else 0

    def available(self) -> int:
        return len(self)

    def read(self) -> int:
        if not len(self):
            return -1
        c = self.char_at(0)
        self.remove(0, 1)
        return ord(c) & 0xFF

    def peek(self) -> int:
        if not len(self):
            return -1
        return ord(self.char_at(0)) & 0xFF

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to flush."""

    def __repr__(self) -> str:
        return f"StreamString({str(self)!r})"