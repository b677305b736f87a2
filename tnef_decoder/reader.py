"""Streaming reader for TNEF (winmail.dat) attribute records."""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

from .attr_ids import AttributeId, Section
from .codepage import TextEncoding, resolve_code_page
from .cursor import ByteCursor
from .errors import (
    ChecksumMismatch,
    InvalidAttributeLevel,
    InvalidHeader,
    InvalidOemCodePage,
    InvalidVersion,
    TnefError,
    UnexpectedMessageAttribute,
)
from .utils import checksum16

logger = logging.getLogger(__name__)

TNEF_SIGNATURE = 0x223E_9F78
VERSION_ID = 0x0008_9006
VERSION_PAYLOAD = b"\x00\x00\x01\x00"
OEM_CODE_PAGE_ID = 0x0006_9007

Attribute = Tuple[AttributeId, memoryview]


class TnefReader:
    """Iterate over the attributes stored in a TNEF buffer.

    The constructor validates the preamble (signature, version and OEM code
    page records) and raises a :class:`~tnef_decoder.errors.TnefError` if any
    of it is wrong. Iterating then yields ``(AttributeId, payload)`` pairs
    where ``payload`` is a checksum-verified ``memoryview`` into ``buffer``.

    The first error is raised from ``__next__``; the reader is finished after
    that and every later pull stops iteration. The reader cannot be rewound.
    """

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        self._cursor = ByteCursor(buffer)
        self._section = Section.MESSAGE
        self._done = False
        self.legacy_key = self._read_header()
        self._read_version()
        self.code_page, self.encoding = self._read_oem_code_page()
        logger.debug(
            "TNEF preamble ok: legacy_key=0x%04X code_page=%s (%s)",
            self.legacy_key,
            self.code_page,
            self.encoding.codec,
        )

    @property
    def section(self) -> Section:
        return self._section

    @property
    def done(self) -> bool:
        return self._done

    def __iter__(self) -> Iterator[Attribute]:
        return self

    def __next__(self) -> Attribute:
        if self._done:
            raise StopIteration
        try:
            attribute = self._read_attribute()
        except TnefError:
            self._done = True
            raise
        if attribute is None:
            self._done = True
            raise StopIteration
        return attribute

    def _read_attribute(self) -> Attribute | None:
        if self._cursor.at_end:
            return None
        offset = self._cursor.position
        level = self._cursor.take_u8()
        self._enter_level(level)
        attr_id = AttributeId.resolve(self._section, self._cursor.take_u32())
        length = self._cursor.take_u32()
        payload = self._cursor.take(length)
        self._verify_checksum(payload)
        logger.debug("Attribute %s at offset %d (%d bytes)", attr_id, offset, length)
        return attr_id, payload

    def _enter_level(self, level: int) -> None:
        if level == Section.MESSAGE.value:
            if self._section is Section.ATTACHMENT:
                raise UnexpectedMessageAttribute()
        elif level == Section.ATTACHMENT.value:
            if self._section is Section.MESSAGE:
                logger.debug("Entering attachment section at offset %d", self._cursor.position - 1)
                self._section = Section.ATTACHMENT
        else:
            raise InvalidAttributeLevel(level)

    def _verify_checksum(self, payload: memoryview) -> None:
        stored = self._cursor.take_u16()
        computed = checksum16(payload)
        if stored != computed:
            raise ChecksumMismatch(stored, computed)

    def _read_header(self) -> int:
        signature = self._cursor.take_u32()
        if signature != TNEF_SIGNATURE:
            raise InvalidHeader(signature)
        return self._cursor.take_u16()

    def _read_version(self) -> None:
        level = self._cursor.take_u8()
        attr_id = self._cursor.take_u32()
        length = self._cursor.take_u32()
        if level != Section.MESSAGE.value or attr_id != VERSION_ID or length != 4:
            raise InvalidVersion(
                f"level=0x{level:02X} id=0x{attr_id:08X} length={length}"
            )
        payload = self._cursor.take(4)
        if payload != VERSION_PAYLOAD:
            raise InvalidVersion(f"unsupported version {bytes(payload).hex()}")
        self._verify_checksum(payload)

    def _read_oem_code_page(self) -> Tuple[int, TextEncoding]:
        level = self._cursor.take_u8()
        attr_id = self._cursor.take_u32()
        length = self._cursor.take_u32()
        if level != Section.MESSAGE.value or attr_id != OEM_CODE_PAGE_ID or length != 8:
            raise InvalidOemCodePage(
                f"level=0x{level:02X} id=0x{attr_id:08X} length={length}"
            )
        payload = self._cursor.take(8)
        self._verify_checksum(payload)
        code_page = int.from_bytes(payload[:4], "little")
        secondary = int.from_bytes(payload[4:], "little")
        if secondary != 0:
            raise InvalidOemCodePage(f"secondary code page {secondary} is not zero")
        encoding = resolve_code_page(code_page)
        if encoding is None:
            raise InvalidOemCodePage(f"unsupported code page {code_page}")
        return code_page, encoding
