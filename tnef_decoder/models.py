"""Typed containers produced by the attachment decoder."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Optional


class AttachType(Enum):
    FILE = 0x0001
    OLE = 0x0002


class AttachDataFlags(Enum):
    DEFAULT = 0x0000_0000
    MAC_BINARY = 0x0000_0001


@dataclass(frozen=True)
class RendData:
    """How the attachment should be rendered inside the message body."""

    attach_type: AttachType
    attach_position: int
    render_width: int
    render_height: int
    flags: AttachDataFlags


@dataclass
class RawAttachment:
    """Fields collected so far for the attachment group being read.

    Byte fields are ``memoryview`` slices of the source buffer.
    """

    data: Optional[memoryview] = None
    title: Optional[str] = None
    meta: Optional[memoryview] = None
    create_date: Optional[datetime] = None
    modify_date: Optional[datetime] = None
    transport_filename: Optional[str] = None
    rend_data: Optional[RendData] = None
    props: Optional[memoryview] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def missing_fields(self) -> list[str]:
        return [name for name in Attachment.REQUIRED if getattr(self, name) is None]


@dataclass(frozen=True)
class Attachment:
    """A complete attachment decoded from a TNEF stream."""

    title: str
    data: memoryview
    create_date: datetime
    modify_date: datetime
    rend_data: RendData
    props: memoryview
    meta: Optional[memoryview] = None
    transport_filename: Optional[str] = None

    REQUIRED = ("title", "data", "create_date", "modify_date", "rend_data", "props")

    @classmethod
    def from_raw(cls, raw: RawAttachment) -> Optional["Attachment"]:
        """Promote an accumulator, or return ``None`` if a required field is missing."""
        if any(getattr(raw, name) is None for name in cls.REQUIRED):
            return None
        return cls(
            title=raw.title,
            data=raw.data,
            create_date=raw.create_date,
            modify_date=raw.modify_date,
            rend_data=raw.rend_data,
            props=raw.props,
            meta=raw.meta,
            transport_filename=raw.transport_filename,
        )
