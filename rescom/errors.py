# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
rescom/errors.py

Exception hierarchy for the Rescom resource compiler.
"""
from pathlib import Path
from typing import Union


class RescomError(Exception):
    """Base class for all Rescom exceptions."""
    pass


class FileReadError(RescomError):
    """Raised when an input or configuration file cannot be opened."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"unable to read '{self.path.as_posix()}'")


class ConfigurationError(RescomError):
    """Raised when a configuration file is malformed."""
    pass


class GeneratorError(RescomError):
    """Base class for generator registry errors."""
    pass


class GeneratorNotFoundError(GeneratorError):
    """Raised when selecting a generator name nobody registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"generator not found: '{name}'")


class NoDefaultGeneratorError(GeneratorError):
    def __init__(self):
        super().__init__("no default generator registered")


class OutputError(RescomError):
    """Raised when the output file cannot be written."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"unable to open '{self.path.as_posix()}' for writing")
