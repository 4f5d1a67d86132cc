"""Catalog of the encodings charsetkit can detect, decode and encode."""

import codecs
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .handlers import ErrorPolicy, LEGACY_POLICY, UNICODE_POLICY, c1_policy, euro_policy


DEFAULT_ENCODING = "UTF-8"


class EncodingCategory(Enum):
    """Encoding groups, declared in display order."""
    UNICODE = "Unicode"
    CHINESE = "Chinese"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    WESTERN = "Western"
    CENTRAL_EUROPEAN = "Central European"
    CYRILLIC = "Cyrillic"
    GREEK = "Greek"
    TURKISH = "Turkish"
    HEBREW = "Hebrew"
    ARABIC = "Arabic"
    THAI = "Thai"
    VIETNAMESE = "Vietnamese"
    BALTIC = "Baltic"


class CodecKind(Enum):
    """How bytes of an encoding are framed."""
    UNICODE_BOM = "unicode-bom"
    UNICODE = "unicode"
    SINGLE_BYTE = "single-byte"
    MULTI_BYTE = "multi-byte"


@dataclass(frozen=True)
class EncodingDescriptor:
    """Public description of one supported encoding."""
    name: str
    label: str
    category: EncodingCategory

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "label": self.label, "category": self.category.value}


@dataclass(frozen=True)
class CodecSpec:
    """The Python codec backing a canonical encoding and its BOM policy."""
    kind: CodecKind
    codec: str
    bom: bytes = b""
    errors: ErrorPolicy = LEGACY_POLICY


def _unicode(codec: str, bom: bytes = b"") -> CodecSpec:
    kind = CodecKind.UNICODE_BOM if bom else CodecKind.UNICODE
    return CodecSpec(kind, codec, bom, UNICODE_POLICY)


def _multi_byte(codec: str) -> CodecSpec:
    return CodecSpec(CodecKind.MULTI_BYTE, codec)


def _gbk(codec: str) -> CodecSpec:
    return CodecSpec(CodecKind.MULTI_BYTE, codec, errors=euro_policy(codec))


def _single_byte(codec: str) -> CodecSpec:
    return CodecSpec(CodecKind.SINGLE_BYTE, codec)


def _code_page(codec: str) -> CodecSpec:
    return CodecSpec(CodecKind.SINGLE_BYTE, codec, errors=c1_policy(codec))


# (canonical name, display label, category, codec), grouped by category.
_CATALOG = (
    ("UTF-8", "UTF-8", EncodingCategory.UNICODE, _unicode("utf-8")),
    ("UTF-8-BOM", "UTF-8 with BOM", EncodingCategory.UNICODE, _unicode("utf-8", codecs.BOM_UTF8)),
    ("UTF-16LE", "UTF-16 LE", EncodingCategory.UNICODE, _unicode("utf-16-le", codecs.BOM_UTF16_LE)),
    ("UTF-16BE", "UTF-16 BE", EncodingCategory.UNICODE, _unicode("utf-16-be", codecs.BOM_UTF16_BE)),
    ("UTF-32LE", "UTF-32 LE", EncodingCategory.UNICODE, _unicode("utf-32-le", codecs.BOM_UTF32_LE)),
    ("UTF-32BE", "UTF-32 BE", EncodingCategory.UNICODE, _unicode("utf-32-be", codecs.BOM_UTF32_BE)),

    ("GBK", "GBK (Simplified Chinese)", EncodingCategory.CHINESE, _gbk("gbk")),
    ("GB18030", "GB18030 (Simplified Chinese)", EncodingCategory.CHINESE, _multi_byte("gb18030")),
    # GBK is a superset of GB2312
    ("GB2312", "GB2312 (Simplified Chinese)", EncodingCategory.CHINESE, _gbk("gbk")),
    ("BIG5", "Big5 (Traditional Chinese)", EncodingCategory.CHINESE, _multi_byte("big5")),
    ("BIG5-HKSCS", "Big5-HKSCS (Hong Kong)", EncodingCategory.CHINESE, _multi_byte("big5hkscs")),

    ("SHIFT_JIS", "Shift_JIS (Japanese)", EncodingCategory.JAPANESE, _multi_byte("cp932")),
    ("EUC-JP", "EUC-JP (Japanese)", EncodingCategory.JAPANESE, _multi_byte("euc_jp")),
    ("ISO-2022-JP", "ISO-2022-JP (Japanese)", EncodingCategory.JAPANESE, _multi_byte("iso2022_jp")),

    ("EUC-KR", "EUC-KR (Korean)", EncodingCategory.KOREAN, _multi_byte("cp949")),
    ("ISO-2022-KR", "ISO-2022-KR (Korean)", EncodingCategory.KOREAN, _multi_byte("iso2022_kr")),

    # Latin-1 is read through its Windows-1252 superset
    ("ISO-8859-1", "ISO-8859-1 (Latin-1)", EncodingCategory.WESTERN, _code_page("cp1252")),
    ("ISO-8859-15", "ISO-8859-15 (Latin-9)", EncodingCategory.WESTERN, _single_byte("iso8859_15")),
    ("WINDOWS-1252", "Windows-1252", EncodingCategory.WESTERN, _code_page("cp1252")),
    ("MACINTOSH", "Mac Roman", EncodingCategory.WESTERN, _single_byte("mac_roman")),

    ("ISO-8859-2", "ISO-8859-2 (Latin-2)", EncodingCategory.CENTRAL_EUROPEAN, _single_byte("iso8859_2")),
    ("WINDOWS-1250", "Windows-1250", EncodingCategory.CENTRAL_EUROPEAN, _code_page("cp1250")),

    ("ISO-8859-5", "ISO-8859-5 (Cyrillic)", EncodingCategory.CYRILLIC, _single_byte("iso8859_5")),
    ("WINDOWS-1251", "Windows-1251 (Cyrillic)", EncodingCategory.CYRILLIC, _code_page("cp1251")),
    ("KOI8-R", "KOI8-R (Russian)", EncodingCategory.CYRILLIC, _single_byte("koi8_r")),
    ("KOI8-U", "KOI8-U (Ukrainian)", EncodingCategory.CYRILLIC, _single_byte("koi8_u")),
    ("X-MAC-CYRILLIC", "Mac Cyrillic", EncodingCategory.CYRILLIC, _single_byte("mac_cyrillic")),

    ("ISO-8859-7", "ISO-8859-7 (Greek)", EncodingCategory.GREEK, _single_byte("iso8859_7")),
    ("WINDOWS-1253", "Windows-1253 (Greek)", EncodingCategory.GREEK, _code_page("cp1253")),

    ("ISO-8859-9", "ISO-8859-9 (Turkish)", EncodingCategory.TURKISH, _code_page("cp1254")),
    ("WINDOWS-1254", "Windows-1254 (Turkish)", EncodingCategory.TURKISH, _code_page("cp1254")),

    ("ISO-8859-8", "ISO-8859-8 (Hebrew)", EncodingCategory.HEBREW, _single_byte("iso8859_8")),
    ("WINDOWS-1255", "Windows-1255 (Hebrew)", EncodingCategory.HEBREW, _code_page("cp1255")),

    ("ISO-8859-6", "ISO-8859-6 (Arabic)", EncodingCategory.ARABIC, _single_byte("iso8859_6")),
    ("WINDOWS-1256", "Windows-1256 (Arabic)", EncodingCategory.ARABIC, _code_page("cp1256")),

    ("TIS-620", "TIS-620 (Thai)", EncodingCategory.THAI, _code_page("cp874")),
    ("WINDOWS-874", "Windows-874 (Thai)", EncodingCategory.THAI, _code_page("cp874")),

    ("WINDOWS-1258", "Windows-1258 (Vietnamese)", EncodingCategory.VIETNAMESE, _code_page("cp1258")),

    ("ISO-8859-4", "ISO-8859-4 (Baltic)", EncodingCategory.BALTIC, _single_byte("iso8859_4")),
    ("ISO-8859-13", "ISO-8859-13 (Baltic)", EncodingCategory.BALTIC, _single_byte("iso8859_13")),
    ("WINDOWS-1257", "Windows-1257 (Baltic)", EncodingCategory.BALTIC, _code_page("cp1257")),
)

# Alternate spellings, keyed by their normalized (uppercase) form.
_ALIASES = {
    "UTF8": "UTF-8",
    "UTF-8-SIG": "UTF-8-BOM",
    "UTF8-BOM": "UTF-8-BOM",
    "UTF-16": "UTF-16LE",
    "UTF16LE": "UTF-16LE",
    "UTF16BE": "UTF-16BE",
    "UTF-32": "UTF-32LE",
    "UTF32LE": "UTF-32LE",
    "UTF32BE": "UTF-32BE",
    "CP936": "GBK",
    "GB-18030": "GB18030",
    "BIG-5": "BIG5",
    "CP950": "BIG5",
    "BIG5HKSCS": "BIG5-HKSCS",
    "SHIFT-JIS": "SHIFT_JIS",
    "SJIS": "SHIFT_JIS",
    "CP932": "SHIFT_JIS",
    "WINDOWS-31J": "SHIFT_JIS",
    "EUCJP": "EUC-JP",
    "EUC_JP": "EUC-JP",
    "EUCKR": "EUC-KR",
    "EUC_KR": "EUC-KR",
    "CP949": "EUC-KR",
    "LATIN1": "WINDOWS-1252",
    "LATIN-1": "WINDOWS-1252",
    "LATIN9": "ISO-8859-15",
    "LATIN2": "ISO-8859-2",
    "LATIN5": "ISO-8859-9",
    "CP1250": "WINDOWS-1250",
    "CP1251": "WINDOWS-1251",
    "CP1252": "WINDOWS-1252",
    "CP1253": "WINDOWS-1253",
    "CP1254": "WINDOWS-1254",
    "CP1255": "WINDOWS-1255",
    "CP1256": "WINDOWS-1256",
    "CP1257": "WINDOWS-1257",
    "CP1258": "WINDOWS-1258",
    "CP874": "WINDOWS-874",
    "TIS620": "TIS-620",
    "KOI8R": "KOI8-R",
    "KOI8U": "KOI8-U",
    "MAC-ROMAN": "MACINTOSH",
    "MACROMAN": "MACINTOSH",
    "MAC-CYRILLIC": "X-MAC-CYRILLIC",
}


def _normalize(name: Optional[str]) -> str:
    return (name or "").strip().upper()


class EncodingRegistry:
    """Read-only table of supported encodings.

    Build it once and hand the same instance to every caller; nothing on
    it changes after construction. Lookups never fail: names that do not
    resolve fall back to ``DEFAULT_ENCODING``.
    """

    def __init__(self, catalog: Iterable[Tuple[str, str, EncodingCategory, CodecSpec]] = _CATALOG,
                 aliases: Optional[Dict[str, str]] = None):
        descriptors = []
        codecs_by_name = {}
        for name, label, category, spec in catalog:
            if name in codecs_by_name:
                raise ValueError(f"Duplicate canonical encoding name: {name}")
            descriptors.append(EncodingDescriptor(name, label, category))
            codecs_by_name[name] = spec

        order = list(EncodingCategory)
        descriptors.sort(key=lambda d: order.index(d.category))

        self._descriptors = tuple(descriptors)
        self._by_name = {d.name: d for d in self._descriptors}
        self._codecs = codecs_by_name
        self._aliases = {
            _normalize(alias): target
            for alias, target in (_ALIASES if aliases is None else aliases).items()
            if target in self._by_name
        }

        if DEFAULT_ENCODING not in self._by_name:
            raise ValueError(f"Registry must include {DEFAULT_ENCODING}")

    def list_supported_encodings(self) -> Tuple[EncodingDescriptor, ...]:
        """All encodings, grouped by category in display order."""
        return self._descriptors

    def categories(self) -> Tuple[EncodingCategory, ...]:
        present = {d.category for d in self._descriptors}
        return tuple(c for c in EncodingCategory if c in present)

    def is_supported(self, name: Optional[str]) -> bool:
        key = _normalize(name)
        return key in self._by_name or key in self._aliases

    def resolve(self, name: Optional[str]) -> str:
        """Map any spelling of an encoding name to its canonical label.

        Case-insensitive. Unknown names resolve to UTF-8 instead of raising.
        """
        key = _normalize(name)
        if key in self._by_name:
            return key
        return self._aliases.get(key, DEFAULT_ENCODING)

    def descriptor(self, name: Optional[str]) -> EncodingDescriptor:
        return self._by_name[self.resolve(name)]

    def codec_for(self, name: Optional[str]) -> CodecSpec:
        return self._codecs[self.resolve(name)]

    def __contains__(self, name) -> bool:
        return self.is_supported(name)


DEFAULT_REGISTRY = EncodingRegistry()


def list_supported_encodings(registry: Optional[EncodingRegistry] = None) -> Tuple[EncodingDescriptor, ...]:
    return (registry or DEFAULT_REGISTRY).list_supported_encodings()


def resolve(name: Optional[str], registry: Optional[EncodingRegistry] = None) -> str:
    return (registry or DEFAULT_REGISTRY).resolve(name)
