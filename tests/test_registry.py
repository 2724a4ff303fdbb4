import unittest
from pathlib import Path
from unittest.mock import MagicMock

from rescom.codegen.base import CodeGenerator, GeneratorKind
from rescom.codegen.factory import GeneratorRegistry, build_registry
from rescom.codegen.legacy import LegacyCppCodeGenerator
from rescom.configuration import Configuration
from rescom.errors import GeneratorError, GeneratorNotFoundError, NoDefaultGeneratorError, RescomError
from rescom.filesystem import MemoryFileSystem


class _RecordingGenerator(CodeGenerator):
    kind = GeneratorKind.LEGACY

    def generate(self, output):
        output.write("recorded\n")


class TestGeneratorRegistry(unittest.TestCase):
    """Registration and selection rules."""

    def setUp(self):
        self.configuration = Configuration(configuration_file_path=Path("Res.rescom"))
        self.registry = GeneratorRegistry()

    def test_unknown_name(self):
        self.registry.register("legacy", MagicMock(), is_default=True)
        with self.assertRaises(GeneratorNotFoundError) as ctx:
            self.registry.create("modern", self.configuration)
        self.assertEqual(str(ctx.exception), "generator not found: 'modern'")
        self.assertIsInstance(ctx.exception, RescomError)

    def test_no_default(self):
        self.registry.register("legacy", MagicMock())
        with self.assertRaises(NoDefaultGeneratorError) as ctx:
            self.registry.create_default(self.configuration)
        self.assertEqual(str(ctx.exception), "no default generator registered")

        with self.assertRaises(NoDefaultGeneratorError):
            self.registry.select(None, self.configuration)

    def test_empty_registry(self):
        with self.assertRaises(NoDefaultGeneratorError):
            self.registry.resolve()
        with self.assertRaises(GeneratorNotFoundError):
            self.registry.resolve("legacy")

    def test_select_by_name_and_by_default(self):
        primary, secondary = MagicMock(), MagicMock()
        self.registry.register("primary", primary, is_default=True)
        self.registry.register("secondary", secondary)

        self.registry.select("secondary", self.configuration)
        secondary.assert_called_once_with(self.configuration)
        primary.assert_not_called()

        self.registry.select(None, self.configuration)
        primary.assert_called_once_with(self.configuration)

        self.assertEqual(self.registry.names(), ["primary", "secondary"])
        self.assertEqual(self.registry.default_name, "primary")

    def test_resolve_does_not_instantiate(self):
        factory = MagicMock()
        self.registry.register("legacy", factory, is_default=True)
        self.assertEqual(self.registry.resolve(), "legacy")
        self.assertEqual(self.registry.resolve("legacy"), "legacy")
        factory.assert_not_called()

    def test_duplicate_name_rejected(self):
        self.registry.register("legacy", MagicMock())
        with self.assertRaises(GeneratorError):
            self.registry.register("legacy", MagicMock())

    def test_second_default_rejected(self):
        self.registry.register("one", MagicMock(), is_default=True)
        with self.assertRaises(GeneratorError) as ctx:
            self.registry.register("two", MagicMock(), is_default=True)
        self.assertIn("'one'", str(ctx.exception))
        self.assertEqual(self.registry.default_name, "one")
        self.assertEqual(self.registry.names(), ["one"])

    def test_factory_result_is_returned(self):
        self.registry.register("rec", _RecordingGenerator, is_default=True)
        generator = self.registry.create_default(self.configuration)
        self.assertIsInstance(generator, _RecordingGenerator)
        self.assertIs(generator.configuration, self.configuration)


class TestBuildRegistry(unittest.TestCase):

    def test_legacy_is_the_default(self):
        registry = build_registry()
        self.assertEqual(registry.names(), [GeneratorKind.LEGACY.value])
        self.assertEqual(registry.default_name, "legacy")

    def test_filesystem_is_passed_to_generators(self):
        fs = MemoryFileSystem()
        registry = build_registry(fs)
        generator = registry.create_default(Configuration(configuration_file_path=Path("Res.rescom")))
        self.assertIsInstance(generator, LegacyCppCodeGenerator)
        self.assertIs(generator.filesystem, fs)

    def test_registries_are_independent(self):
        first, second = build_registry(), build_registry()
        first.register("extra", MagicMock())
        self.assertNotIn("extra", second.names())


if __name__ == "__main__":
    unittest.main()
