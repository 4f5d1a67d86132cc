"""Decoding of byte buffers into editor text."""

from dataclasses import dataclass
from typing import Optional

from .registry import CodecKind, CodecSpec, DEFAULT_REGISTRY, EncodingRegistry


@dataclass(frozen=True)
class DecodeResult:
    text: str
    had_substitutions: bool = False


def strip_bom(data: bytes, spec: CodecSpec) -> bytes:
    """Drop the BOM belonging to ``spec`` if the buffer starts with it."""
    if spec.kind is CodecKind.UNICODE_BOM and data.startswith(spec.bom):
        return data[len(spec.bom):]
    return data


def decode(data: bytes, label: str, registry: Optional[EncodingRegistry] = None) -> DecodeResult:
    """Decode ``data`` as ``label``; never raises.

    BOM-bearing labels lose their BOM first. Byte sequences that cannot be
    mapped become U+FFFD and ``had_substitutions`` is set.
    """
    spec = (registry or DEFAULT_REGISTRY).codec_for(label)
    payload = strip_bom(bytes(data), spec)

    try:
        return DecodeResult(payload.decode(spec.codec, spec.errors.strict), False)
    except UnicodeDecodeError:
        return DecodeResult(payload.decode(spec.codec, spec.errors.replace), True)
