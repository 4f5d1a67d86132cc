"""
charsetkit - encoding detection and transcoding for text editors

Guesses the encoding of raw bytes, decodes them for editing and encodes
edited text back, keeping byte order marks intact.
"""

__version__ = "0.1.0"
__author__ = "charsetkit"
__email__ = "charsetkit@example.com"

from .encoding import (
    EncodingDescriptor,
    EncodingRegistry,
    DEFAULT_REGISTRY,
    DecodeResult,
    convert_encoding,
    decode,
    detect_encoding,
    encode,
    list_supported_encodings,
    resolve,
)
from .service import Document, EncodingService, create_encoding_service

__all__ = [
    "EncodingDescriptor",
    "EncodingRegistry",
    "DEFAULT_REGISTRY",
    "DecodeResult",
    "convert_encoding",
    "decode",
    "detect_encoding",
    "encode",
    "list_supported_encodings",
    "resolve",
    "Document",
    "EncodingService",
    "create_encoding_service",
]
