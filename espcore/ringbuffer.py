"""A fixed-capacity FIFO byte buffer that can be resized without losing data."""

from __future__ import annotations

from typing import Union

__all__ = ["RingBuffer"]


class RingBuffer:
    """A first-in, first-out byte queue holding at most ``capacity`` bytes."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, not {size}")
        self._capacity = size
        self._data = bytearray()

    @property
    def capacity(self) -> int:
        """Most bytes the buffer can hold."""
        return self._capacity

    @property
    def size(self) -> int:
        """Number of slots in the buffer, one more than its capacity."""
        return self._capacity + 1

    def __len__(self) -> int:
        return len(self._data)

    def resize_add(self, add_size: int) -> int:
        """Resize to ``size + add_size``; the capacity grows by ``add_size + 1``."""
        return self.resize(self.size + add_size)

    def resize(self, new_size: int) -> int:
        """Set the capacity to ``new_size`` and return the new slot count.

        The buffer is left alone if the new capacity could not hold the
        bytes already stored.
        """
        if new_size < len(self._data) or new_size == self._capacity:
            return self.size
        self._capacity = new_size
        return self.size

    def available(self) -> int:
        """Bytes waiting to be read."""
        return len(self._data)

    def room(self) -> int:
        """Bytes that can still be written."""
        return self._capacity - len(self._data)

    def empty(self) -> bool:
        return not self._data

    def full(self) -> bool:
        return len(self._data) >= self._capacity

    def peek(self, size: int | None = None) -> Union[int, bytes]:
        """Without consuming: the next byte (or -1), or up to ``size`` bytes."""
        if size is None:
            return self._data[0] if self._data else -1
        if size < 0:
            raise ValueError(f"size must not be negative, not {size}")
        return bytes(self._data[:size])

    def read(self, size: int | None = None) -> Union[int, bytes]:
        """Consume the next byte (or -1 when empty), or up to ``size`` bytes."""
        if size is None:
            if not self._data:
                return -1
            value = self._data[0]
            del self._data[0]
            return value
        if size < 0:
            raise ValueError(f"size must not be negative, not {size}")
        chunk = bytes(self._data[:size])
        del self._data[:size]
        return chunk

    def write(self, data: Union[int, bytes, bytearray, memoryview]) -> int:
        """Append a byte value or as many bytes as fit; return how many were stored."""
        if isinstance(data, int):
            if self.full():
                return 0
            self._data.append(data & 0xFF)
            return 1
        if isinstance(data, str):
            raise TypeError("expected bytes, not str")
        chunk = bytes(data)[: self.room()]
        self._data += chunk
        return len(chunk)

    def flush(self) -> None:
        """Discard everything stored."""
        self._data.clear()

    def remove(self, size: int) -> int:
        """Discard ``size`` bytes from the front and return how many remain.

        Removing as many bytes as are stored, or more, empties the buffer.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, not {size}")
        if size >= len(self._data):
            self.flush()
            return 0
        del self._data[:size]
        return len(self._data)