"""Exceptions raised while decoding TNEF buffers."""

from __future__ import annotations


class TnefError(Exception):
    """Base class for every decode failure. Always terminal for the call."""

    kind = "tnef"


class TnefFormatError(TnefError):
    kind = "format"


class TnefStructureError(TnefError):
    kind = "structural"


class TnefIntegrityError(TnefError):
    kind = "integrity"


class TnefFieldError(TnefError):
    kind = "field"


class TnefAssemblyError(TnefError):
    kind = "assembly"


class InvalidHeader(TnefFormatError):
    def __init__(self, magic: int) -> None:
        super().__init__(f"Invalid TNEF signature 0x{magic:08X}")
        self.magic = magic


class InvalidVersion(TnefFormatError):
    def __init__(self, detail: str = "malformed version record") -> None:
        super().__init__(f"Invalid TNEF version: {detail}")


class InvalidOemCodePage(TnefFormatError):
    def __init__(self, detail: str = "malformed code page record") -> None:
        super().__init__(f"Invalid OEM code page: {detail}")


class InvalidAttributeLevel(TnefStructureError):
    def __init__(self, level: int) -> None:
        super().__init__(f"Invalid attribute level 0x{level:02X}")
        self.level = level


class UnexpectedMessageAttribute(TnefStructureError):
    def __init__(self) -> None:
        super().__init__("Message attribute found after the attachment section started")


class InvalidMessageId(TnefStructureError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown message attribute id 0x{code:08X}")
        self.code = code


class InvalidAttachAttr(TnefStructureError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown attachment attribute id 0x{code:08X}")
        self.code = code


class ChecksumMismatch(TnefIntegrityError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Attribute checksum mismatch: stored 0x{expected:04X}, computed 0x{actual:04X}"
        )
        self.expected = expected
        self.actual = actual


class UnexpectedEof(TnefIntegrityError):
    def __init__(self, wanted: int, remaining: int) -> None:
        super().__init__(f"Unexpected end of data: wanted {wanted} bytes, {remaining} left")
        self.wanted = wanted
        self.remaining = remaining


class InvalidDateTime(TnefFieldError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid date/time attribute: {detail}")


class InvalidRendData(TnefFieldError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid attachment rendering data: {detail}")


class InvalidString(TnefFieldError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid string attribute: {detail}")


class AttachmentOrderingError(TnefAssemblyError):
    """An attachment group did not start with AttachRendData."""

    def __init__(self, attr_name: str) -> None:
        super().__init__(f"Attachment group must start with AttachRendData, got {attr_name}")
        self.attr_name = attr_name


class DuplicateAttachmentField(TnefAssemblyError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"Attachment field '{field_name}' set twice in one group")
        self.field_name = field_name
