"""Preview what text looks like after a save-and-reopen in another encoding."""

from dataclasses import dataclass
from typing import Optional

from .decoder import decode
from .encoder import encode_with_report
from .registry import DEFAULT_REGISTRY, EncodingRegistry


@dataclass(frozen=True)
class ConversionPreview:
    text: str
    encoding: str
    byte_length: int
    lossy: bool


def preview(text: str, from_label: Optional[str], to_label: str,
            registry: Optional[EncodingRegistry] = None) -> ConversionPreview:
    registry = registry or DEFAULT_REGISTRY
    target = registry.resolve(to_label)
    encoded = encode_with_report(text, target, registry)
    decoded = decode(encoded.data, target, registry)
    return ConversionPreview(
        text=decoded.text,
        encoding=target,
        byte_length=len(encoded.data),
        lossy=encoded.had_substitutions or decoded.had_substitutions,
    )


def convert(text: str, from_label: Optional[str], to_label: str,
            registry: Optional[EncodingRegistry] = None) -> str:
    """Encode ``text`` as ``to_label`` and decode it back.

    ``from_label`` is accepted for symmetry only; ``text`` is already decoded.
    """
    return preview(text, from_label, to_label, registry).text
