# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
C++17 header generator.

The generated header embeds every input as a char array, declares a table
of Resource records sorted by key, and exposes constexpr lookup functions
that binary-search that table.
"""
import logging
from typing import Optional, Sequence, TextIO

from ..configuration import Configuration, Input
from ..filesystem import FileSystem, load_file
from ..strings import make_identifier, to_lower, to_upper
from .base import CodeGenerator, GeneratorKind

logger = logging.getLogger("rescom.codegen.legacy")

NAMESPACE_FOR_RESOURCE_DATA = "rescom"
HEADER_PROTECTION_MACRO_PREFIX = "RESCOM_GENERATED_FILE_"

INCLUDES = (
    "<iterator>",  # std::begin, std::distance, std::advance
    "<string_view>",
)


def make_resource_name(position: int) -> str:
    return f"Resource{position}"


def byte_literal(value: int) -> str:
    """One char literal per byte; a lone hex escape cannot swallow its neighbours."""
    return f"'\\x{value:x}'"


class LegacyCppCodeGenerator(CodeGenerator):
    kind = GeneratorKind.LEGACY

    def __init__(self, configuration: Configuration, filesystem: Optional[FileSystem] = None):
        super().__init__(configuration, filesystem)
        self._tabulation = " " * configuration.tabulation_size
        stem = make_identifier(configuration.stem)
        self.header_protection_macro_name = HEADER_PROTECTION_MACRO_PREFIX + to_upper(stem)
        self.namespace_name = f"{NAMESPACE_FOR_RESOURCE_DATA}::{to_lower(stem)}"

    @property
    def inputs(self) -> Sequence[Input]:
        return self.configuration.inputs

    def tab(self, count: int = 1) -> str:
        return self._tabulation * count

    def generate(self, output: TextIO) -> None:
        logger.info(f"Generating {self.namespace_name} with {len(self.inputs)} resource(s)")
        self.write_file_header(output)
        self.write_resources(output)
        self.write_access_functions(output)
        self.write_file_footer(output)

    # ─── Prologue / Epilogue ──────────────────────────────────────────────

    def write_file_header(self, output: TextIO):
        guard = self.header_protection_macro_name

        output.write("// Generated by Rescom\n")
        output.write(f"#ifndef {guard}\n#define {guard}\n")
        for include in INCLUDES:
            output.write(f"#include {include}\n")
        output.write("\n")

        output.write(f"{self.tab(0)}namespace {self.namespace_name}\n{{\n")
        output.write(
            f"{self.tab(1)}struct Resource\n"
            f"{self.tab(1)}{{\n"
            f"{self.tab(2)}char const* const key;\n"
            f"{self.tab(2)}char const* const bytes;\n"
            f"{self.tab(2)}unsigned int const size;\n"
            "\n"
            f"{self.tab(2)}constexpr Resource(char const* key, unsigned int size, char const* bytes)\n"
            f"{self.tab(2)}: key(key), bytes(bytes), size(size) {{}}\n"
            f"{self.tab(1)}}};\n\n"
        )

    def write_file_footer(self, output: TextIO):
        output.write(f"{self.tab(0)}}} // namespace {self.namespace_name}\n")
        output.write(f"#endif // {self.header_protection_macro_name}\n")

    # ─── Resource data and index ──────────────────────────────────────────

    def write_resource(self, position: int, data: bytes, output: TextIO):
        """Write the array holding one resource; an empty input gives an empty array."""
        elements = ", ".join(byte_literal(b) for b in data)
        output.write(f"{self.tab(2)}static constexpr char const {make_resource_name(position)}[] = {{{elements}}};\n")

    def write_resources(self, output: TextIO):
        if not self.inputs:
            return

        buffer = bytearray()

        output.write(f"{self.tab(1)}namespace details {{\n")
        output.write(f"{self.tab(2)}static constexpr unsigned int const ResourcesCount = {len(self.inputs)};\n")

        for position, input_ in enumerate(self.inputs):
            load_file(self.filesystem, input_.file_path, buffer)
            if len(buffer) != input_.size:
                logger.warning(
                    f"Resource '{input_.key}': declared size {input_.size} differs from "
                    f"{len(buffer)} bytes read from {input_.file_path.as_posix()}"
                )
            logger.debug(f"Emitting {make_resource_name(position)} for '{input_.key}' (declared {input_.size}, loaded {len(buffer)} bytes)")
            self.write_resource(position, buffer, output)

        self.write_index(output)
        output.write(f"{self.tab(1)}}} // namespace details\n\n")

    def write_index(self, output: TextIO):
        # Sizes come from the configuration, not from the bytes just read.
        output.write(f"{self.tab(2)}static constexpr Resource const ResourcesIndex[ResourcesCount] = \n")
        output.write(f"{self.tab(2)}{{\n")
        for position, input_ in enumerate(self.inputs):
            output.write(f"{self.tab(3)}{{\"{input_.key}\", {input_.size}, {make_resource_name(position)}}},\n")
        output.write(f"{self.tab(2)}}};\n")

    # ─── Lookup API ───────────────────────────────────────────────────────

    def write_access_functions(self, output: TextIO):
        """
        Write the lookup functions. With no inputs there is no table to
        search, so every function gets a constant body built on NullResource.
        """
        empty = not self.inputs

        output.write(f"{self.tab(1)}namespace details {{\n")
        if not empty:
            self.write_search_functions(output)
        output.write(f"{self.tab(2)}static constexpr Resource const NullResource{{nullptr, 0u, nullptr}};\n")
        output.write(f"{self.tab(1)}}} // namespace details\n\n")

        output.write(f"{self.tab(1)}using ResourceIterator = Resource const*;\n\n")

        self.write_get_resource(output, empty)
        output.write("\n")
        self.write_contains(output, empty)
        output.write("\n")
        self.write_get_text(output, empty)
        output.write("\n")
        self.write_range(output, empty)

    def write_search_functions(self, output: TextIO):
        # std::lower_bound is not constexpr before C++20.
        output.write(
            f"{self.tab(2)}constexpr bool compareSlot(Resource const& slot, char const* key) "
            "{ return std::string_view(slot.key) < key; }\n\n"
        )
        output.write(
            f"{self.tab(2)}template<class ForwardIt, class Compare>\n"
            f"{self.tab(2)}constexpr ForwardIt lowerBound(ForwardIt first, ForwardIt last, char const* value, Compare compare)\n"
            f"{self.tab(2)}{{\n"
            f"{self.tab(3)}if (value == nullptr) return last;\n"
            f"{self.tab(3)}auto count = std::distance(first, last);\n"
            f"{self.tab(3)}while (count > 0) {{\n"
            f"{self.tab(4)}auto it = first; auto const step = count / 2; std::advance(it, step);\n"
            f"{self.tab(4)}if (compare(*it, value)) {{ first = ++it; count -= step + 1; }} else {{ count = step; }}\n"
            f"{self.tab(3)}}}\n"
            f"{self.tab(3)}return first;\n"
            f"{self.tab(2)}}}\n\n"
        )

    def write_get_resource(self, output: TextIO, empty: bool):
        if empty:
            output.write(
                f"{self.tab()}inline constexpr Resource const& getResource(char const*)\n"
                f"{self.tab()}{{\n"
                f"{self.tab(2)}return details::NullResource;\n"
                f"{self.tab()}}}\n"
            )
            return

        # lowerBound only finds the insertion point; the key must still match exactly.
        output.write(
            f"{self.tab()}inline constexpr Resource const& getResource(char const* key)\n"
            f"{self.tab()}{{\n"
            f"{self.tab(2)}auto it = details::lowerBound(std::begin(details::ResourcesIndex), "
            "std::end(details::ResourcesIndex), key, details::compareSlot);\n"
            "\n"
            f"{self.tab(2)}if (it == std::end(details::ResourcesIndex) || it->key == nullptr || std::string_view(it->key) != key)\n"
            f"{self.tab(3)}return details::NullResource;\n"
            "\n"
            f"{self.tab(2)}return *it;\n"
            f"{self.tab()}}}\n"
        )

    def write_contains(self, output: TextIO, empty: bool):
        if empty:
            signature, body = "contains(char const*)", "return false;"
        else:
            signature, body = "contains(char const* key)", "return &getResource(key) != &details::NullResource;"
        output.write(
            f"{self.tab()}inline constexpr bool {signature}\n"
            f"{self.tab()}{{\n"
            f"{self.tab(2)}{body}\n"
            f"{self.tab()}}}\n"
        )

    def write_get_text(self, output: TextIO, empty: bool):
        if empty:
            output.write(
                f"{self.tab()}inline constexpr std::string_view getText(char const*)\n"
                f"{self.tab()}{{\n"
                f"{self.tab(2)}return std::string_view{{details::NullResource.bytes, details::NullResource.size}};\n"
                f"{self.tab()}}}\n"
            )
            return

        output.write(
            f"{self.tab()}inline constexpr std::string_view getText(char const* key)\n"
            f"{self.tab()}{{\n"
            f"{self.tab(2)}auto const& resource = getResource(key);\n"
            "\n"
            f"{self.tab(2)}return std::string_view{{resource.bytes, resource.size}};\n"
            f"{self.tab()}}}\n"
        )

    def write_range(self, output: TextIO, empty: bool):
        if empty:
            first, last = "&details::NullResource", "&details::NullResource"
        else:
            first, last = "std::begin(details::ResourcesIndex)", "std::end(details::ResourcesIndex)"

        self._write_iterator_function("begin", first, output)
        output.write("\n")
        self._write_iterator_function("end", last, output)

    def _write_iterator_function(self, name: str, value: str, output: TextIO):
        output.write(
            f"{self.tab()}inline constexpr ResourceIterator {name}()\n"
            f"{self.tab()}{{\n"
            f"{self.tab(2)}return {value};\n"
            f"{self.tab()}}}\n"
        )
