"""
Pytest configuration and fixtures for charsetkit tests
"""

import pytest
from unittest.mock import AsyncMock

from charsetkit.encoding import DEFAULT_REGISTRY
from charsetkit.service import EncodingService
from charsetkit.utils.config import ServiceConfig


@pytest.fixture
def logger():
    """Create a mock logger for testing."""
    return AsyncMock()


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def service_config():
    return ServiceConfig()


@pytest.fixture
def service(logger, registry, service_config):
    """Encoding service wired to the mock logger."""
    return EncodingService(logger=logger, registry=registry, config=service_config)


@pytest.fixture
def gbk_text():
    return "中文测试：编码检测"


@pytest.fixture
def gbk_file(tmp_path, gbk_text):
    """A GBK-encoded file that is not valid UTF-8."""
    file_path = tmp_path / "chinese.txt"
    file_path.write_bytes(gbk_text.encode("gbk"))
    return file_path
