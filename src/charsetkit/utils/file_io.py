"""Byte-level file access used by the encoding service.

Errors (``FileNotFoundError``, ``PermissionError``, other ``OSError``) are
not caught here.
"""

from pathlib import Path
from typing import Union

import aiofiles


PathLike = Union[str, Path]


async def read_all_bytes(path: PathLike) -> bytes:
    async with aiofiles.open(path, 'rb') as f:
        return await f.read()


async def write_all_bytes(path: PathLike, data: bytes) -> int:
    """Replace the contents of ``path`` with ``data``; returns bytes written."""
    async with aiofiles.open(path, 'wb') as f:
        await f.write(data)
    return len(data)
