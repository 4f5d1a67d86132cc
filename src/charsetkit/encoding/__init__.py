"""Encoding detection, decoding, encoding and conversion.

Every function here is pure and safe to call from any thread.
"""

from .registry import (
    DEFAULT_ENCODING,
    DEFAULT_REGISTRY,
    CodecKind,
    CodecSpec,
    EncodingCategory,
    EncodingDescriptor,
    EncodingRegistry,
    list_supported_encodings,
    resolve,
)
from .detector import BOM_SIGNATURES, TRIAL_CANDIDATES, detect, detect_bom
from .decoder import DecodeResult, decode
from .encoder import EncodeResult, encode, encode_with_report
from .conversion import ConversionPreview, convert, preview

# Names used by the editor-facing API
detect_encoding = detect
convert_encoding = convert

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_REGISTRY",
    "CodecKind",
    "CodecSpec",
    "EncodingCategory",
    "EncodingDescriptor",
    "EncodingRegistry",
    "list_supported_encodings",
    "resolve",
    "BOM_SIGNATURES",
    "TRIAL_CANDIDATES",
    "detect",
    "detect_bom",
    "detect_encoding",
    "DecodeResult",
    "decode",
    "EncodeResult",
    "encode",
    "encode_with_report",
    "ConversionPreview",
    "convert",
    "convert_encoding",
    "preview",
]
