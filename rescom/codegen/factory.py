# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
Generator registry.

Maps a generator name to a factory producing a CodeGenerator bound to a
configuration. The registry is built once by the caller (see build_registry)
and handed to whatever selects a generator.
"""
import logging
from typing import Callable, Dict, List, Optional

from ..configuration import Configuration
from ..errors import GeneratorError, GeneratorNotFoundError, NoDefaultGeneratorError
from ..filesystem import FileSystem
from .base import CodeGenerator, GeneratorKind
from .legacy import LegacyCppCodeGenerator

logger = logging.getLogger("rescom.codegen.factory")

GeneratorFactory = Callable[[Configuration], CodeGenerator]


class GeneratorRegistry:
    """Registry of code generators, at most one of them flagged as default."""

    def __init__(self):
        self._factories: Dict[str, GeneratorFactory] = {}
        self._default: Optional[str] = None

    def register(self, name: str, factory: GeneratorFactory, is_default: bool = False):
        """Register a generator factory under `name`."""
        if name in self._factories:
            raise GeneratorError(f"generator already registered: '{name}'")
        if is_default and self._default is not None:
            raise GeneratorError(f"default generator already registered: '{self._default}'")

        self._factories[name] = factory
        if is_default:
            self._default = name
        logger.info(f"Registered generator: {name}{' (default)' if is_default else ''}")

    def names(self) -> List[str]:
        return sorted(self._factories)

    @property
    def default_name(self) -> Optional[str]:
        return self._default

    def resolve(self, name: Optional[str] = None) -> str:
        """
        Return the registered name that `name` selects, the default one when
        `name` is None. Touches no file, so it can run before any I/O.

        Raises:
            GeneratorNotFoundError: `name` is not registered.
            NoDefaultGeneratorError: `name` is None and no default was flagged.
        """
        if name is None:
            if self._default is None:
                raise NoDefaultGeneratorError()
            return self._default
        if name not in self._factories:
            raise GeneratorNotFoundError(name)
        return name

    def create(self, name: str, configuration: Configuration) -> CodeGenerator:
        resolved = self.resolve(name)
        logger.debug(f"Instantiating generator '{resolved}' for {configuration.configuration_file_path.as_posix()}")
        return self._factories[resolved](configuration)

    def create_default(self, configuration: Configuration) -> CodeGenerator:
        return self.create(self.resolve(None), configuration)

    def select(self, name: Optional[str], configuration: Configuration) -> CodeGenerator:
        """Create the generator named `name`, or the default one when `name` is None."""
        if name is None:
            return self.create_default(configuration)
        return self.create(name, configuration)


def build_registry(filesystem: Optional[FileSystem] = None) -> GeneratorRegistry:
    """Build the registry holding every generator Rescom ships."""
    registry = GeneratorRegistry()
    registry.register(
        GeneratorKind.LEGACY.value,
        lambda configuration: LegacyCppCodeGenerator(configuration, filesystem),
        is_default=True,
    )
    return registry
