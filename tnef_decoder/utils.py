"""Utility helpers shared across modules."""

from __future__ import annotations

import re
from hashlib import sha256

_UNSAFE_FILENAME_CHARS = re.compile(r'[\x00-\x1f<>:"/\\|?*]')


def checksum16(payload: bytes | memoryview) -> int:
    """Byte-wise sum wrapped to 16 bits, as stored after every attribute."""
    return sum(payload) & 0xFFFF


def sha256_hex(payload: bytes | memoryview) -> str:
    """Convenience wrapper for hex digests."""
    return sha256(payload).hexdigest()


def safe_filename(name: str, fallback: str = "attachment.bin") -> str:
    """Strip path components and characters Windows or POSIX refuse in file names."""
    base = re.split(r"[\\/]", name)[-1]
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", base).strip(" .")
    return cleaned or fallback
