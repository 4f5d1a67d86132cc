"""Encoding of editor text back into bytes."""

from dataclasses import dataclass
from typing import Optional

from .registry import CodecKind, DEFAULT_REGISTRY, EncodingRegistry


@dataclass(frozen=True)
class EncodeResult:
    data: bytes
    had_substitutions: bool = False


def encode_with_report(text: str, label: str, registry: Optional[EncodingRegistry] = None) -> EncodeResult:
    """Encode ``text`` as ``label`` and report whether anything was lost.

    BOM-bearing labels always get their exact BOM prepended. Characters the
    target cannot represent are written as ``&#NNNN;`` references (legacy
    encodings) or U+FFFD (lone surrogates in Unicode encodings).
    """
    spec = (registry or DEFAULT_REGISTRY).codec_for(label)
    prefix = spec.bom if spec.kind is CodecKind.UNICODE_BOM else b""

    try:
        body = text.encode(spec.codec, spec.errors.strict)
        lossy = False
    except UnicodeEncodeError:
        body = text.encode(spec.codec, spec.errors.encode)
        lossy = True

    return EncodeResult(prefix + body, lossy)


def encode(text: str, label: str, registry: Optional[EncodingRegistry] = None) -> bytes:
    return encode_with_report(text, label, registry).data
