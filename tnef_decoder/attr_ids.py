"""Attribute identifier tables for the two TNEF sections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, unique
from typing import Union

from .errors import InvalidAttachAttr, InvalidMessageId


class Section(Enum):
    """Which part of the stream an attribute came from (level 1 or level 2)."""

    MESSAGE = 0x01
    ATTACHMENT = 0x02


@unique
class MessageAttrId(IntEnum):
    MESSAGE_CLASS = 0x0007_8008
    FROM = 0x0000_8000
    SUBJECT = 0x0001_8004
    DATE_SENT = 0x0003_8005
    DATE_RECD = 0x0003_8006
    MESSAGE_STATUS = 0x0006_8007
    MESSAGE_ID = 0x0001_8009
    CONVERSATION_ID = 0x0001_800B
    BODY = 0x0004_8020
    PRIORITY = 0x0004_800D
    DATE_MODIFIED = 0x0003_8020
    MSG_PROPS = 0x0006_9003
    RECIP_TABLE = 0x0006_9004
    ORIGINAL_MESSAGE_CLASS = 0x0007_0600
    OWNER = 0x0006_0000
    SENT_FOR = 0x0006_0001
    DELEGATE = 0x0006_0200
    DATE_START = 0x0003_0006
    DATE_END = 0x0003_0007
    AID_OWNER = 0x0005_0008
    REQUEST_RES = 0x0004_0090


@unique
class AttachAttrId(IntEnum):
    DATA = 0x0006_800F
    TITLE = 0x0001_8010
    META_FILE = 0x0006_8011
    CREATE_DATE = 0x0003_8012
    MODIFY_DATE = 0x0003_8013
    TRANSPORT_FILENAME = 0x0006_9001
    ATTACH_REND_DATA = 0x0006_9002
    # Attachment properties; always the last attribute of a group.
    ATTACHMENT = 0x0006_9005


@dataclass(frozen=True)
class AttributeId:
    """Section-qualified attribute identifier.

    ``code`` is a :class:`MessageAttrId` when ``section`` is MESSAGE and an
    :class:`AttachAttrId` when it is ATTACHMENT. Build instances through
    :meth:`resolve`; a mismatched pairing is rejected on construction.
    """

    section: Section
    code: Union[MessageAttrId, AttachAttrId]

    def __post_init__(self) -> None:
        if self.section is Section.MESSAGE:
            if not isinstance(self.code, MessageAttrId):
                raise InvalidMessageId(int(self.code))
        elif not isinstance(self.code, AttachAttrId):
            raise InvalidAttachAttr(int(self.code))

    @classmethod
    def resolve(cls, section: Section, raw_code: int) -> "AttributeId":
        if section is Section.MESSAGE:
            try:
                return cls(section, MessageAttrId(raw_code))
            except ValueError as exc:
                raise InvalidMessageId(raw_code) from exc
        try:
            return cls(section, AttachAttrId(raw_code))
        except ValueError as exc:
            raise InvalidAttachAttr(raw_code) from exc

    @property
    def is_message(self) -> bool:
        return self.section is Section.MESSAGE

    @property
    def is_attachment(self) -> bool:
        return self.section is Section.ATTACHMENT

    def __str__(self) -> str:
        return f"{self.section.name.lower()}:{self.code.name}"
