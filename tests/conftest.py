"""Builders for synthetic TNEF buffers."""

from __future__ import annotations

import struct
from datetime import datetime
from types import SimpleNamespace

import pytest

from tnef_decoder.attr_ids import AttachAttrId, MessageAttrId

FIXED_DATE = datetime(2021, 3, 14, 15, 9, 26)


def checksum(payload: bytes) -> int:
    return sum(payload) & 0xFFFF


def attribute(level: int, attr_id: int, payload: bytes, stored_checksum: int | None = None) -> bytes:
    if stored_checksum is None:
        stored_checksum = checksum(payload)
    return (
        struct.pack("<BII", level, attr_id, len(payload))
        + payload
        + struct.pack("<H", stored_checksum)
    )


def message_attr(attr_id: int, payload: bytes) -> bytes:
    return attribute(0x01, attr_id, payload)


def attach_attr(attr_id: int, payload: bytes) -> bytes:
    return attribute(0x02, attr_id, payload)


def header(legacy_key: int = 0x0123) -> bytes:
    return struct.pack("<IH", 0x223E9F78, legacy_key)


def version_record(payload: bytes = b"\x00\x00\x01\x00") -> bytes:
    return attribute(0x01, 0x00089006, payload)


def code_page_record(code_page: int = 1252, secondary: int = 0) -> bytes:
    return attribute(0x01, 0x00069007, struct.pack("<II", code_page, secondary))


def preamble(code_page: int = 1252) -> bytes:
    return header() + version_record() + code_page_record(code_page)


def date_payload(moment: datetime = FIXED_DATE) -> bytes:
    return struct.pack(
        "<7H",
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.isoweekday() % 7,
    )


def rend_payload(attach_type: int = 1, position: int = 0xFFFFFFFF, width: int = 0, height: int = 0, flags: int = 0) -> bytes:
    return struct.pack("<HIHHI", attach_type, position, width, height, flags)


def attachment_group(
    title: bytes = b"a.txt\x00",
    data: bytes = b"hi",
    props: bytes = b"p",
    meta: bytes | None = None,
    transport_filename: bytes | None = None,
) -> bytes:
    parts = [
        attach_attr(AttachAttrId.ATTACH_REND_DATA, rend_payload()),
        attach_attr(AttachAttrId.DATA, data),
        attach_attr(AttachAttrId.TITLE, title),
    ]
    if meta is not None:
        parts.append(attach_attr(AttachAttrId.META_FILE, meta))
    parts.append(attach_attr(AttachAttrId.CREATE_DATE, date_payload()))
    parts.append(attach_attr(AttachAttrId.MODIFY_DATE, date_payload()))
    if transport_filename is not None:
        parts.append(attach_attr(AttachAttrId.TRANSPORT_FILENAME, transport_filename))
    parts.append(attach_attr(AttachAttrId.ATTACHMENT, props))
    return b"".join(parts)


def message_section() -> bytes:
    return (
        message_attr(MessageAttrId.MESSAGE_CLASS, b"IPM.Microsoft Mail.Note\x00")
        + message_attr(MessageAttrId.SUBJECT, b"Quarterly report\x00")
        + message_attr(MessageAttrId.DATE_SENT, date_payload())
    )


@pytest.fixture
def tnef() -> SimpleNamespace:
    return SimpleNamespace(
        checksum=checksum,
        attribute=attribute,
        message_attr=message_attr,
        attach_attr=attach_attr,
        header=header,
        version_record=version_record,
        code_page_record=code_page_record,
        preamble=preamble,
        date_payload=date_payload,
        rend_payload=rend_payload,
        attachment_group=attachment_group,
        message_section=message_section,
        fixed_date=FIXED_DATE,
    )


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    for name in ("LOG_LEVEL", "TNEF_OUTPUT_DIR", "TNEF_OVERWRITE", "TNEF_PREFER_TRANSPORT_FILENAME"):
        monkeypatch.delenv(name, raising=False)
