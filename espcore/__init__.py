"""Microcontroller-style utilities: mutable strings, number formatting, print and stream bases, a ring buffer, IPv6 addresses, MD5, base64 and integer math helpers."""

__version__ = "0.1.0"