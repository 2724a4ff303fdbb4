"""
Rescom, the resources compiler.

Turns a list of files into a C++ header that embeds their bytes and looks
them up by key at compile time.
"""

__version__ = "1.2.0"

from .configuration import Configuration, Input
from .config_parser import ConfigurationParser
from .codegen import CodeGenerator, GeneratorKind, GeneratorRegistry, LegacyCppCodeGenerator, build_registry
from .errors import (
    RescomError,
    FileReadError,
    ConfigurationError,
    GeneratorError,
    GeneratorNotFoundError,
    NoDefaultGeneratorError,
    OutputError,
)
from .filesystem import FileSystem, LocalFileSystem, MemoryFileSystem, load_file

__all__ = [
    "CodeGenerator",
    "Configuration",
    "ConfigurationError",
    "ConfigurationParser",
    "FileReadError",
    "FileSystem",
    "GeneratorError",
    "GeneratorKind",
    "GeneratorNotFoundError",
    "GeneratorRegistry",
    "Input",
    "LegacyCppCodeGenerator",
    "LocalFileSystem",
    "MemoryFileSystem",
    "NoDefaultGeneratorError",
    "OutputError",
    "RescomError",
    "build_registry",
    "load_file",
]
