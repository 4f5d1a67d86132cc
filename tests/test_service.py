#!/usr/bin/env python3
"""
Tests for EncodingService: file-backed detect/read/write, label fallback
logging and verbatim propagation of I/O errors.
"""

import asyncio
import pytest
from unittest.mock import AsyncMock

from charsetkit.service import Document, EncodingService
from charsetkit.utils.config import ServiceConfig


class TestPureOperations:

    def test_list_supported_encodings(self, service):
        names = [d.name for d in service.list_supported_encodings()]
        assert names[0] == "UTF-8"
        assert "WINDOWS-1257" in names

    def test_detect_encoding(self, service, gbk_text):
        assert service.detect_encoding(gbk_text.encode("gbk")) == "GBK"
        assert service.detect_encoding(b"Hello") == "UTF-8"

    def test_convert_encoding(self, service):
        assert service.convert_encoding("héllo", "UTF-8", "WINDOWS-1252") == "héllo"

    def test_preview_conversion(self, service):
        result = service.preview_conversion("€", "UTF-8", "ISO-8859-15")
        assert result.text == "€"
        assert result.byte_length == 1
        assert not result.lossy


class TestFileOperations:
    """Test cases for the file-backed API"""

    @pytest.mark.asyncio
    async def test_detect_file_encoding(self, service, gbk_file):
        assert await service.detect_file_encoding(gbk_file) == "GBK"

    @pytest.mark.asyncio
    async def test_detect_file_encoding_with_bom(self, service, tmp_path):
        path = tmp_path / "bom.txt"
        path.write_bytes(b"\xef\xbb\xbfhello")
        assert await service.detect_file_encoding(str(path)) == "UTF-8-BOM"

    @pytest.mark.asyncio
    async def test_read_with_encoding(self, service, gbk_file, gbk_text):
        assert await service.read_with_encoding(gbk_file, "gbk") == gbk_text

    @pytest.mark.asyncio
    async def test_open_document_detects(self, service, gbk_file, gbk_text):
        document = await service.open_document(gbk_file)
        assert document.encoding == "GBK"
        assert document.text == gbk_text
        assert not document.had_substitutions
        assert document.size == len(gbk_text.encode("gbk"))

    @pytest.mark.asyncio
    async def test_open_document_reports_substitutions(self, service, logger, gbk_file):
        document = await service.open_document(gbk_file, "UTF-8")
        assert document.had_substitutions
        assert "\ufffd" in document.text
        logger.info.assert_awaited()

    @pytest.mark.asyncio
    async def test_unknown_label_falls_back_with_warning(self, service, logger, tmp_path):
        path = tmp_path / "plain.txt"
        path.write_bytes("naïve".encode("utf-8"))
        text = await service.read_with_encoding(path, "not-a-real-encoding")
        assert text == "naïve"
        logger.warning.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_write_with_encoding_utf16le(self, service, tmp_path):
        path = tmp_path / "out.txt"
        result = await service.write_with_encoding(path, "A", "UTF-16LE")
        assert result is None
        assert path.read_bytes() == b"\xff\xfeA\x00"

    @pytest.mark.asyncio
    async def test_save_document_keeps_encoding(self, service, gbk_file):
        document = await service.open_document(gbk_file)
        written = await service.save_document(document, document.text + "！")
        data = gbk_file.read_bytes()
        assert written == len(data)
        assert data.decode("gbk") == document.text + "！"

    @pytest.mark.asyncio
    async def test_save_document_uses_default_encoding(self, logger, registry, tmp_path):
        service = EncodingService(
            logger=logger, registry=registry,
            config=ServiceConfig(default_save_encoding="UTF-8-BOM")
        )
        path = tmp_path / "default.txt"
        await service.save_document(path, "x")
        assert path.read_bytes() == b"\xef\xbb\xbfx"

    @pytest.mark.asyncio
    async def test_round_trip_preserves_bom_bytes(self, service, tmp_path):
        original = b"\xfe\xff\x00h\x00i"
        path = tmp_path / "be.txt"
        path.write_bytes(original)
        document = await service.open_document(path)
        assert document.encoding == "UTF-16BE"
        await service.save_document(document, document.text)
        assert path.read_bytes() == original

    @pytest.mark.asyncio
    async def test_lossy_save_is_logged(self, service, logger, tmp_path):
        path = tmp_path / "lossy.txt"
        await service.write_with_encoding(path, "日本", "WINDOWS-1252")
        assert path.read_bytes() == b"&#26085;&#26412;"
        logger.info.assert_awaited()


class TestErrorPropagation:

    @pytest.mark.asyncio
    async def test_missing_file_raises_verbatim(self, service, logger, tmp_path):
        with pytest.raises(FileNotFoundError):
            await service.detect_file_encoding(tmp_path / "missing.txt")
        logger.error.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_read_error_from_collaborator(self, logger, registry):
        reader = AsyncMock(side_effect=PermissionError("denied"))
        service = EncodingService(logger=logger, registry=registry,
                                  config=ServiceConfig(), reader=reader)
        with pytest.raises(PermissionError):
            await service.read_with_encoding("/locked.txt", "UTF-8")

    @pytest.mark.asyncio
    async def test_write_error_from_collaborator(self, logger, registry):
        writer = AsyncMock(side_effect=OSError("disk full"))
        service = EncodingService(logger=logger, registry=registry,
                                  config=ServiceConfig(), writer=writer)
        with pytest.raises(OSError, match="disk full"):
            await service.write_with_encoding("/full.txt", "data", "UTF-8")
        logger.error.assert_awaited_once()


class TestConcurrency:

    @pytest.mark.asyncio
    async def test_offloaded_transforms(self, logger, registry, gbk_file, gbk_text):
        service = EncodingService(logger=logger, registry=registry,
                                  config=ServiceConfig(offload_threshold_bytes=0))
        document = await service.open_document(gbk_file)
        assert document.encoding == "GBK"
        assert document.text == gbk_text

    @pytest.mark.asyncio
    async def test_many_documents_at_once(self, service, tmp_path):
        samples = {
            "a.txt": ("plain ascii", "UTF-8"),
            "b.txt": ("中文内容", "GBK"),
            "c.txt": ("with bom", "UTF-8-BOM"),
            "d.txt": ("wide", "UTF-16BE"),
        }
        for name, (text, label) in samples.items():
            await service.write_with_encoding(tmp_path / name, text, label)

        documents = await asyncio.gather(
            *(service.open_document(tmp_path / name) for name in samples)
        )
        for document, (text, label) in zip(documents, samples.values()):
            assert isinstance(document, Document)
            assert document.text == text
            assert document.encoding == label
