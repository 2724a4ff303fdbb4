from .base import CodeGenerator, GeneratorKind
from .factory import GeneratorRegistry, build_registry
from .legacy import LegacyCppCodeGenerator

__all__ = [
    "CodeGenerator",
    "GeneratorKind",
    "GeneratorRegistry",
    "LegacyCppCodeGenerator",
    "build_registry",
]
