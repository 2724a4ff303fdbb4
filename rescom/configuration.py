# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
Data model handed from the configuration parser to the code generators.
"""
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import settings


class Input(BaseModel):
    """One resource to embed: its lookup key, where to read it, and its recorded size."""

    model_config = ConfigDict(frozen=True)

    key: str
    file_path: Path
    size: int = Field(ge=0)


class Configuration(BaseModel):
    """
    A parsed configuration file.

    `inputs` is expected to be sorted ascending by the UTF-8 bytes of each key.
    The parser establishes that order; generators rely on it without checking.
    """

    model_config = ConfigDict(frozen=True)

    configuration_file_path: Path
    inputs: Tuple[Input, ...] = ()
    tabulation_size: int = Field(default_factory=lambda: settings.TABULATION_SIZE, ge=0)

    @property
    def stem(self) -> str:
        return self.configuration_file_path.stem
