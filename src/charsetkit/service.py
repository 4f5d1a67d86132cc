"""Editor-facing encoding API.

Wraps the pure encoding engine with file access and logging. Reads and
writes go through ``aiofiles``; transforming a large buffer is moved to a
worker thread so several documents can be handled from one event loop.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from aiologger import Logger

from .encoding import (
    ConversionPreview,
    DecodeResult,
    EncodeResult,
    EncodingDescriptor,
    EncodingRegistry,
    DEFAULT_REGISTRY,
    convert,
    decode,
    detect,
    encode_with_report,
    preview,
)
from .logger import get_logger
from .utils.config import ServiceConfig, get_config
from .utils.file_io import read_all_bytes, write_all_bytes


PathLike = Union[str, Path]


@dataclass(frozen=True)
class Document:
    """A file decoded for editing, with the encoding it was read as."""
    path: str
    text: str
    encoding: str
    had_substitutions: bool
    size: int


class EncodingService:
    """Detects, reads, writes and converts text files in any supported encoding."""

    def __init__(self, logger: Optional[Logger] = None,
                 registry: Optional[EncodingRegistry] = None,
                 config: Optional[ServiceConfig] = None,
                 reader: Callable = read_all_bytes,
                 writer: Callable = write_all_bytes):
        self.logger = logger or get_logger()
        self.registry = registry or DEFAULT_REGISTRY
        self.config = config or get_config().service
        self._read = reader
        self._write = writer

    # Pure operations

    def list_supported_encodings(self) -> List[EncodingDescriptor]:
        return list(self.registry.list_supported_encodings())

    def resolve(self, name: Optional[str]) -> str:
        return self.registry.resolve(name)

    def detect_encoding(self, data: bytes) -> str:
        return detect(data, self.registry)

    def convert_encoding(self, text: str, from_label: Optional[str], to_label: str) -> str:
        return convert(text, from_label, to_label, self.registry)

    def preview_conversion(self, text: str, from_label: Optional[str], to_label: str) -> ConversionPreview:
        return preview(text, from_label, to_label, self.registry)

    # File operations

    async def detect_file_encoding(self, path: PathLike) -> str:
        data = await self._read_bytes(path)
        label = await self._run(detect, data, self.registry, size=len(data))
        await self.logger.debug(f"Detected {label} for {path} ({len(data)} bytes)")
        return label

    async def read_with_encoding(self, path: PathLike, label: str) -> str:
        document = await self.open_document(path, label)
        return document.text

    async def open_document(self, path: PathLike, label: Optional[str] = None) -> Document:
        """Read ``path`` and decode it, detecting the encoding unless ``label`` is given."""
        data = await self._read_bytes(path)

        if label is None:
            encoding = await self._run(detect, data, self.registry, size=len(data))
            await self.logger.debug(f"Detected {encoding} for {path}")
        else:
            encoding = await self._resolve_requested(label)

        result: DecodeResult = await self._run(decode, data, encoding, self.registry, size=len(data))
        if result.had_substitutions:
            await self.logger.info(
                f"Decoding {path} as {encoding} replaced undecodable bytes"
            )

        return Document(
            path=str(path),
            text=result.text,
            encoding=encoding,
            had_substitutions=result.had_substitutions,
            size=len(data),
        )

    async def write_with_encoding(self, path: PathLike, text: str, label: str) -> None:
        await self.save_document(path, text, label)

    async def save_document(self, target: Union[Document, PathLike], text: str,
                            label: Optional[str] = None) -> int:
        """Encode ``text`` and replace the file contents; returns bytes written.

        With a ``Document`` target and no ``label``, the document's own
        encoding is kept. Without either, the configured default is used.
        """
        if isinstance(target, Document):
            path = target.path
            requested = label or target.encoding
        else:
            path = target
            requested = label or self.config.default_save_encoding

        encoding = await self._resolve_requested(requested)
        result: EncodeResult = await self._run(
            encode_with_report, text, encoding, self.registry, size=len(text)
        )
        if result.had_substitutions:
            await self.logger.info(
                f"Characters not representable in {encoding} were substituted while saving {path}"
            )

        try:
            written = await self._write(path, result.data)
        except OSError as e:
            await self.logger.error(f"Failed to write {path}: {e}")
            raise

        await self.logger.debug(f"Wrote {written} bytes to {path} as {encoding}")
        return written

    # Helpers

    async def _read_bytes(self, path: PathLike) -> bytes:
        try:
            return await self._read(path)
        except OSError as e:
            await self.logger.error(f"Failed to read {path}: {e}")
            raise

    async def _resolve_requested(self, label: str) -> str:
        encoding = self.registry.resolve(label)
        if not self.registry.is_supported(label):
            await self.logger.warning(
                f"Unknown encoding {label!r}, falling back to {encoding}"
            )
        return encoding

    async def _run(self, func, *args, size: int = 0):
        if size >= self.config.offload_threshold_bytes:
            return await asyncio.to_thread(func, *args)
        return func(*args)


def create_encoding_service(logger: Optional[Logger] = None,
                            registry: Optional[EncodingRegistry] = None) -> EncodingService:
    """Factory function to create an encoding service."""
    return EncodingService(logger=logger, registry=registry)
