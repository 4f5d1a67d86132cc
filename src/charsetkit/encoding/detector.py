"""Encoding detection for byte buffers with no declared charset."""

from typing import Optional, Sequence

from .registry import DEFAULT_ENCODING, DEFAULT_REGISTRY, EncodingRegistry


# Longest signature first so UTF-32LE is not mistaken for UTF-16LE.
BOM_SIGNATURES = (
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    (b"\xef\xbb\xbf", "UTF-8-BOM"),
    (b"\xff\xfe", "UTF-16LE"),
    (b"\xfe\xff", "UTF-16BE"),
)

# Order decides the winner for ambiguous input; keep it as is.
TRIAL_CANDIDATES = (
    "GBK",
    "GB18030",
    "BIG5",
    "SHIFT_JIS",
    "EUC-JP",
    "EUC-KR",
    "WINDOWS-1251",
    "WINDOWS-1252",
)


def detect_bom(data: bytes) -> Optional[str]:
    """Return the label announced by a leading byte order mark, if any."""
    for signature, label in BOM_SIGNATURES:
        if data.startswith(signature):
            return label
    return None


def is_valid_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def decodes_cleanly(data: bytes, label: str, registry: Optional[EncodingRegistry] = None) -> bool:
    """True when ``data`` decodes under ``label`` without a single error."""
    spec = (registry or DEFAULT_REGISTRY).codec_for(label)
    try:
        data.decode(spec.codec, spec.errors.strict)
    except UnicodeDecodeError:
        return False
    return True


def detect(data: bytes, registry: Optional[EncodingRegistry] = None,
           candidates: Sequence[str] = TRIAL_CANDIDATES) -> str:
    """Guess the canonical encoding label of ``data``.

    Checks for a BOM, then for strictly valid UTF-8, then trial-decodes the
    candidates in order and returns the first that decodes with no errors.
    Falls back to UTF-8 when nothing qualifies, in which case decoding will
    report substitutions.
    """
    data = bytes(data)

    label = detect_bom(data)
    if label is not None:
        return label

    if is_valid_utf8(data):
        return DEFAULT_ENCODING

    for candidate in candidates:
        if decodes_cleanly(data, candidate, registry):
            return candidate

    return DEFAULT_ENCODING
