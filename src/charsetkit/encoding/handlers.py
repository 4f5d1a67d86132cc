"""Codec error handlers used by the charsetkit codecs.

Some stock Python codecs leave bytes undefined that editors (and browsers)
do map:

* Windows code pages leave a handful of bytes in 0x80-0x9F undefined.
  Those decode to the C1 control with the same value, which makes the
  code page a total superset of ISO-8859-1 for decoding.
* GBK leaves 0x80 undefined; CP936 uses it for the euro sign.

The handlers below add those mappings on top of the stock codecs and
register themselves with ``codecs``. Charmap codecs report ``"charmap"``
as the failing encoding, so handlers are registered once per codec rather
than shared.
"""

import codecs
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict


FFFD_REPLACE = "charsetkit-fffd"

REPLACEMENT_CHARACTER = "\ufffd"

EURO_SIGN = "\u20ac"


@dataclass(frozen=True)
class ErrorPolicy:
    """Names of the error handlers a codec uses for each operation."""
    strict: str = "strict"
    replace: str = "replace"
    encode: str = "xmlcharrefreplace"


UNICODE_POLICY = ErrorPolicy(encode=FFFD_REPLACE)
LEGACY_POLICY = ErrorPolicy()


def undefined_c1_bytes(codec: str) -> frozenset:
    """Return the bytes in 0x80-0x9F that ``codec`` cannot decode."""
    undefined = set()
    for value in range(0x80, 0xA0):
        try:
            bytes([value]).decode(codec)
        except UnicodeDecodeError:
            undefined.add(value)
    return frozenset(undefined)


def _make_handler(extra_bytes: Dict[int, str], decode_fallback, encode_fallback):
    extra_chars = {char: bytes([byte]) for byte, char in extra_bytes.items()}

    def handler(error):
        if isinstance(error, UnicodeDecodeError):
            byte = error.object[error.start]
            if byte in extra_bytes:
                return extra_bytes[byte], error.start + 1
            if decode_fallback is None:
                raise error
            return decode_fallback, error.start + 1
        if isinstance(error, UnicodeEncodeError):
            char = error.object[error.start]
            if char in extra_chars:
                return extra_chars[char], error.start + 1
            if encode_fallback is None:
                raise error
            return encode_fallback(ord(char)), error.start + 1
        raise error
    return handler


def _xmlcharref(code_point: int) -> str:
    return "&#%d;" % code_point


def _register_policy(prefix: str, codec: str, extra_bytes: Dict[int, str]) -> ErrorPolicy:
    names = ErrorPolicy(
        strict="charsetkit-%s-strict-%s" % (prefix, codec),
        replace="charsetkit-%s-replace-%s" % (prefix, codec),
        encode="charsetkit-%s-xmlcharref-%s" % (prefix, codec),
    )
    codecs.register_error(names.strict, _make_handler(extra_bytes, None, None))
    codecs.register_error(names.replace, _make_handler(extra_bytes, REPLACEMENT_CHARACTER, None))
    codecs.register_error(names.encode, _make_handler(extra_bytes, None, _xmlcharref))
    return names


@lru_cache(maxsize=None)
def c1_policy(codec: str) -> ErrorPolicy:
    """Register the C1 passthrough handlers for ``codec`` and name them.

    Undefined bytes in 0x80-0x9F decode to U+0080-U+009F and those code
    points encode back to the same byte. Anything else falls through to
    strict failure, U+FFFD substitution or a character reference.
    """
    extra = {byte: chr(byte) for byte in undefined_c1_bytes(codec)}
    return _register_policy("c1", codec, extra)


@lru_cache(maxsize=None)
def euro_policy(codec: str) -> ErrorPolicy:
    """Register handlers mapping byte 0x80 to the euro sign for ``codec``."""
    return _register_policy("euro", codec, {0x80: EURO_SIGN})


def fffd_replace(error):
    """Encode unencodable code points (lone surrogates) as U+FFFD.

    The UTF encoders only accept ASCII text replacements, so the
    replacement is handed back already encoded.
    """
    if isinstance(error, UnicodeEncodeError):
        replacement = REPLACEMENT_CHARACTER * (error.end - error.start)
        return replacement.encode(error.encoding), error.end
    raise error


codecs.register_error(FFFD_REPLACE, fffd_replace)
