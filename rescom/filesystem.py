# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
Filesystem access for the resource compiler.

All reads are whole-file and binary. Implementations raise FileReadError
carrying the offending path when a file cannot be opened.
"""
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import FileReadError

logger = logging.getLogger("rescom.filesystem")

PathLike = Union[str, os.PathLike]


class FileSystem(ABC):
    """Read-only view over files addressed by path."""

    @abstractmethod
    def read_bytes(self, path: PathLike) -> bytes:
        ...

    @abstractmethod
    def file_size(self, path: PathLike) -> int:
        ...

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        ...


class LocalFileSystem(FileSystem):
    """The real disk."""

    def read_bytes(self, path: PathLike) -> bytes:
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise FileReadError(path) from e

    def file_size(self, path: PathLike) -> int:
        try:
            return os.stat(path).st_size
        except OSError as e:
            raise FileReadError(path) from e

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()


class MemoryFileSystem(FileSystem):
    """
    Files held in a dict, keyed by POSIX path string.
    Lookups normalise the path the same way, so Path and str work alike.
    """

    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self._files: Dict[str, bytes] = {}
        for path, data in (files or {}).items():
            self.add(path, data)

    @staticmethod
    def _normalize(path: PathLike) -> str:
        return Path(path).as_posix()

    def add(self, path: PathLike, data: bytes):
        self._files[self._normalize(path)] = bytes(data)

    def read_bytes(self, path: PathLike) -> bytes:
        try:
            return self._files[self._normalize(path)]
        except KeyError:
            raise FileReadError(path) from None

    def file_size(self, path: PathLike) -> int:
        return len(self.read_bytes(path))

    def is_file(self, path: PathLike) -> bool:
        return self._normalize(path) in self._files


def load_file(filesystem: FileSystem, path: PathLike, buffer: bytearray) -> bytearray:
    """
    Load the whole file at `path` into `buffer`, replacing its previous content.

    The buffer is owned by the caller and reused across loads; nothing may keep
    a view into it past the step that consumes the current content.
    """
    buffer[:] = filesystem.read_bytes(path)
    logger.debug(f"Loaded {len(buffer)} bytes from {Path(path).as_posix()}")
    return buffer
