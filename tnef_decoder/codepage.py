"""Map Windows code page numbers to Python text codecs."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional

# Code pages Outlook writes into the OEM code page record, keyed to the
# closest Python codec.
CODE_PAGE_CODECS: dict[int, str] = {
    866: "cp866",
    874: "cp874",
    932: "cp932",
    936: "gb18030",
    949: "cp949",
    950: "cp950",
    1200: "utf-16-le",
    1201: "utf-16-be",
    1250: "cp1250",
    1251: "cp1251",
    1252: "cp1252",
    1253: "cp1253",
    1254: "cp1254",
    1255: "cp1255",
    1256: "cp1256",
    1257: "cp1257",
    1258: "cp1258",
    10000: "mac-roman",
    10017: "mac-cyrillic",
    20866: "koi8-r",
    20932: "euc-jp",
    21866: "koi8-u",
    28591: "iso8859-1",
    28592: "iso8859-2",
    28593: "iso8859-3",
    28594: "iso8859-4",
    28595: "iso8859-5",
    28596: "iso8859-6",
    28597: "iso8859-7",
    28598: "iso8859-8",
    28599: "iso8859-9",
    28600: "iso8859-10",
    28603: "iso8859-13",
    28604: "iso8859-14",
    28605: "iso8859-15",
    28606: "iso8859-16",
    38598: "iso8859-8",
    50220: "iso2022-jp",
    51932: "euc-jp",
    51936: "gb18030",
    51949: "cp949",
    54936: "gb18030",
    65001: "utf-8",
}

# Windows single-byte pages whose unassigned 0x80-0x9F slots decode to the
# matching C1 control instead of failing.
C1_FALLBACK_CODE_PAGES = frozenset({874, *range(1250, 1259)})
C1_ERRORS = "tnef-c1-controls"

_BOMS: dict[str, bytes] = {
    "utf-8": codecs.BOM_UTF8,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
}


def _c1_controls(exc: UnicodeError) -> tuple[str, int]:
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    byte = exc.object[exc.start]
    if not 0x80 <= byte <= 0x9F:
        raise exc
    return chr(byte), exc.start + 1


codecs.register_error(C1_ERRORS, _c1_controls)


@dataclass(frozen=True)
class TextEncoding:
    """Decoder for one code page."""

    code_page: int
    codec: str
    errors: str = "strict"

    def decode(self, data: bytes | memoryview) -> str:
        """Decode ``data``, dropping a leading byte-order mark of this encoding.

        Malformed input raises :class:`UnicodeDecodeError`.
        """
        raw = bytes(data)
        bom = _BOMS.get(self.codec)
        if bom and raw.startswith(bom):
            raw = raw[len(bom) :]
        return raw.decode(self.codec, errors=self.errors)


def resolve_code_page(code_page: int) -> Optional[TextEncoding]:
    """Return the encoding for ``code_page`` or ``None`` when it is unsupported.

    Values above 0xFFFF are rejected rather than truncated to 16 bits, so a
    corrupted high word cannot alias a real code page.
    """
    if not 0 <= code_page <= 0xFFFF:
        return None
    codec = CODE_PAGE_CODECS.get(code_page)
    if codec is None:
        return None
    errors = C1_ERRORS if code_page in C1_FALLBACK_CODE_PAGES else "strict"
    return TextEncoding(code_page=code_page, codec=codecs.lookup(codec).name, errors=errors)
