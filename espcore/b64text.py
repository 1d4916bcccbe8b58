"""Base64 encoding into the core string type."""

from __future__ import annotations

import base64 as _base64
from typing import Union

from .wstring import ArduinoString

__all__ = ["encode"]


def encode(data: Union[bytes, bytearray, memoryview, str, ArduinoString]) -> ArduinoString:
    """Standard, padded base64 of ``data`` on a single line.

    Text is encoded as UTF-8 first.
    """
    if isinstance(data, ArduinoString):
        payload = str(data).encode("utf-8")
    elif isinstance(data, str):
        payload = data.encode("utf-8")
    else:
        payload = bytes(data)
    return ArduinoString(_base64.b64encode(payload).decode("ascii"))