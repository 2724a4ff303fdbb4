# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TextIO

from ..configuration import Configuration
from ..filesystem import FileSystem, LocalFileSystem


class GeneratorKind(str, Enum):
    """Every concrete generator shipped with Rescom."""
    LEGACY = "legacy"


class CodeGenerator(ABC):
    """
    A generator bound to one configuration.

    `generate` writes the whole document to `output`, which only needs a
    `write(str)` method. Callers decide whether that is a memory buffer or a
    real stream.
    """

    kind: GeneratorKind

    def __init__(self, configuration: Configuration, filesystem: Optional[FileSystem] = None):
        self.configuration = configuration
        self.filesystem = filesystem or LocalFileSystem()

    @abstractmethod
    def generate(self, output: TextIO) -> None:
        ...
