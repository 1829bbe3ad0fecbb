# 📄 File: my_garden/shared/infrastructure/storage/file_storage.py

# 🧭 Purpose (Layman Explanation):
# Keeps each storage slot as a small file in a folder, like the phone keeping
# app preferences on disk, so the garden survives a restart.

# 🧪 Purpose (Technical Summary):
# File-per-key KeyValueStorage. Writes go to a temporary file in the same directory
# and are moved into place with os.replace, so a failed write never truncates the
# previously stored blob.

# 🔗 Dependencies:
# - pathlib / os / tempfile for atomic file replacement
# - asyncio.to_thread to keep disk I/O off the event loop

# 🔄 Connected Modules / Calls From:
# Storage factory (STORAGE_BACKEND=file)

import asyncio
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from my_garden.shared.core.exceptions import StorageError
from my_garden.shared.utils.logging import get_logger

from .base import KeyValueStorage

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r'[^A-Za-z0-9_.-]')


class FileStorage(KeyValueStorage):
    """
    Directory-backed storage with one ``<key>.bin`` file per slot.
    """

    backend_name = "file"

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        safe_key = _SAFE_KEY.sub('_', key)
        return self.directory / f"{safe_key}.bin"

    async def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        try:
            return await asyncio.to_thread(self._read, path)
        except OSError as e:
            logger.error(f"Failed to read storage slot {key}: {e}")
            raise StorageError(
                f"Failed to read slot {key}",
                backend=self.backend_name,
                key=key,
                operation="get",
            ) from e

    async def set(self, key: str, value: bytes) -> None:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(self._write_atomic, path, value)
        except OSError as e:
            logger.error(f"Failed to write storage slot {key}: {e}")
            raise StorageError(
                f"Failed to write slot {key}",
                backend=self.backend_name,
                key=key,
                operation="set",
            ) from e
        logger.debug(f"Wrote {len(value)} bytes to slot {key}", path=str(path))

    async def delete(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(
                f"Failed to delete slot {key}",
                backend=self.backend_name,
                key=key,
                operation="delete",
            ) from e

    async def health_check(self) -> bool:
        return self.directory.exists() or self.directory.parent.exists()

    @staticmethod
    def _read(path: Path) -> Optional[bytes]:
        if not path.exists():
            return None
        return path.read_bytes()

    def _write_atomic(self, path: Path, value: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=path.stem, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
