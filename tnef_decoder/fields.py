"""Decoders for the fixed-layout and string attachment attributes."""

from __future__ import annotations

import struct
from datetime import datetime

from .codepage import TextEncoding
from .errors import InvalidDateTime, InvalidRendData, InvalidString
from .models import AttachDataFlags, AttachType, RendData

DATETIME_SIZE = 14
REND_DATA_SIZE = 14

# year, month, day, hour, minute, second, day of week
_DATETIME = struct.Struct("<7H")
# type, position, width, height, flags
_REND_DATA = struct.Struct("<HIHHI")


def parse_datetime(payload: bytes | memoryview) -> datetime:
    """Decode a 14-byte TNEF date; the day-of-week word is ignored.

    Year 0 is not a valid ``datetime`` and raises :class:`InvalidDateTime`
    like any other out-of-range field.
    """
    if len(payload) != DATETIME_SIZE:
        raise InvalidDateTime(f"expected {DATETIME_SIZE} bytes, got {len(payload)}")
    year, month, day, hour, minute, second, _day_of_week = _DATETIME.unpack(payload)
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise InvalidDateTime(
            f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
        ) from exc


def parse_rend_data(payload: bytes | memoryview) -> RendData:
    if len(payload) != REND_DATA_SIZE:
        raise InvalidRendData(f"expected {REND_DATA_SIZE} bytes, got {len(payload)}")
    raw_type, position, width, height, raw_flags = _REND_DATA.unpack(payload)
    try:
        attach_type = AttachType(raw_type)
    except ValueError as exc:
        raise InvalidRendData(f"unknown attachment type 0x{raw_type:04X}") from exc
    try:
        flags = AttachDataFlags(raw_flags)
    except ValueError as exc:
        raise InvalidRendData(f"unknown data flags 0x{raw_flags:08X}") from exc
    return RendData(
        attach_type=attach_type,
        attach_position=position,
        render_width=width,
        render_height=height,
        flags=flags,
    )


def parse_string(payload: bytes | memoryview, encoding: TextEncoding) -> str:
    """Decode a zero-terminated string in the stream's OEM code page."""
    if len(payload) == 0 or payload[-1] != 0x00:
        raise InvalidString("missing zero terminator")
    try:
        return encoding.decode(payload[:-1])
    except UnicodeDecodeError as exc:
        raise InvalidString(f"malformed {encoding.codec} sequence") from exc
