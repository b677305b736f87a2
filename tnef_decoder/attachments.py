"""Fold the attachment section of a TNEF stream into Attachment records."""

from __future__ import annotations

import logging
from typing import Callable, List

from .attr_ids import AttachAttrId, AttributeId
from .codepage import TextEncoding
from .errors import AttachmentOrderingError, DuplicateAttachmentField
from .fields import parse_datetime, parse_rend_data, parse_string
from .models import Attachment, RawAttachment
from .reader import TnefReader

logger = logging.getLogger(__name__)


class AttachmentAssembler:
    """Group attachment attributes into :class:`Attachment` objects.

    Every group starts with ``AttachRendData`` and ends with the
    ``Attachment`` (properties) attribute. Groups missing a required field
    when they end are dropped without raising, as are unterminated groups at
    the end of the stream.
    """

    def __init__(self, encoding: TextEncoding) -> None:
        self.encoding = encoding
        self.attachments: List[Attachment] = []
        self._current = RawAttachment()
        self._decoders: dict[AttachAttrId, tuple[str, Callable]] = {
            AttachAttrId.ATTACH_REND_DATA: ("rend_data", parse_rend_data),
            AttachAttrId.DATA: ("data", _keep),
            AttachAttrId.TITLE: ("title", self._parse_string),
            AttachAttrId.META_FILE: ("meta", _keep),
            AttachAttrId.CREATE_DATE: ("create_date", parse_datetime),
            AttachAttrId.MODIFY_DATE: ("modify_date", parse_datetime),
            AttachAttrId.TRANSPORT_FILENAME: ("transport_filename", self._parse_string),
            AttachAttrId.ATTACHMENT: ("props", _keep),
        }

    def feed(self, attr_id: AttributeId, payload: memoryview) -> None:
        if attr_id.is_message:
            return
        code = attr_id.code
        if self._current.is_empty() and code is not AttachAttrId.ATTACH_REND_DATA:
            raise AttachmentOrderingError(code.name)

        field_name, decode = self._decoders[code]
        if getattr(self._current, field_name) is not None:
            raise DuplicateAttachmentField(field_name)
        setattr(self._current, field_name, decode(payload))

        if code is AttachAttrId.ATTACHMENT:
            self._finalize()

    def finish(self) -> List[Attachment]:
        if not self._current.is_empty():
            logger.debug(
                "Dropping unterminated attachment group (missing %s)",
                ", ".join(self._current.missing_fields()),
            )
            self._current = RawAttachment()
        return self.attachments

    def _finalize(self) -> None:
        attachment = Attachment.from_raw(self._current)
        if attachment is None:
            logger.debug(
                "Discarding incomplete attachment group (missing %s)",
                ", ".join(self._current.missing_fields()),
            )
        else:
            logger.debug("Decoded attachment '%s' (%d bytes)", attachment.title, len(attachment.data))
            self.attachments.append(attachment)
        self._current = RawAttachment()

    def _parse_string(self, payload: memoryview) -> str:
        return parse_string(payload, self.encoding)


def _keep(payload: memoryview) -> memoryview:
    return payload


def assemble(reader: TnefReader) -> List[Attachment]:
    """Drain ``reader`` and return its attachments."""
    assembler = AttachmentAssembler(reader.encoding)
    for attr_id, payload in reader:
        assembler.feed(attr_id, payload)
    return assembler.finish()


def read_attachments(buffer: bytes | bytearray | memoryview) -> List[Attachment]:
    """Decode every complete attachment stored in a TNEF buffer.

    An attachment is kept only when it carries a title, data, create and
    modify dates, rendering data and properties; groups missing one of those
    are ignored. Any decode error aborts the whole call.
    """
    attachments = assemble(TnefReader(buffer))
    logger.info("Decoded %d attachment(s) from TNEF buffer", len(attachments))
    return attachments
