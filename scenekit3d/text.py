"""Text conversion and debug logging helpers."""

from __future__ import annotations

import logging

_logger = logging.getLogger("scenekit3d")


def log(message: str) -> None:
    """Write a message to the debug log."""
    _logger.debug(message)


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes to text, replacing invalid sequences."""
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


def encode_utf8(text: str) -> bytes:
    """Encode text as UTF-8, replacing characters that cannot be encoded."""
    if not text:
        return b""
    return text.encode("utf-8", errors="replace")


def ordering_name(order: int) -> str:
    """Name a three-way comparison result: 'equal', 'greater' or 'less'."""
    if order == 0:
        return "equal"
    if order > 0:
        return "greater"
    return "less"