# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from lark import Lark, Transformer, v_args, Token
from lark.exceptions import UnexpectedInput
from pydantic import ValidationError

from .config import settings
from .configuration import Configuration, Input
from .errors import ConfigurationError
from .filesystem import FileSystem, LocalFileSystem, PathLike

logger = logging.getLogger("rescom.config_parser")

DEFAULT_GRAMMAR_PATH = Path(__file__).resolve().parent / "rescom.lark"

# Option name -> Configuration field
OPTIONS = {
    "tabulation": "tabulation_size",
}


def _unquote(token: Token) -> str:
    text = str(token)
    if token.type != "STRING":
        return text
    return text[1:-1].replace('\\"', '"').replace("\\\\", "\\")


class ConfigurationTransformer(Transformer):
    def __init__(self, source_file="<unknown>"):
        super().__init__()
        self.source_file = source_file
        self.node_count = 0

    def _add_meta(self, node, meta):
        self.node_count += 1
        try:
            node["line"] = meta.line
            node["column"] = meta.column
        except AttributeError:
            pass
        return node

    def start(self, args):
        return {
            "options": [a for a in args if a["type"] == "option"],
            "resources": [a for a in args if a["type"] == "resource"],
            "file": self.source_file,
        }

    @v_args(meta=True)
    def option(self, meta, args):
        return self._add_meta({"type": "option", "name": str(args[0]), "value": int(args[1])}, meta)

    @v_args(meta=True)
    def resource(self, meta, args):
        path = _unquote(args[0])
        key = _unquote(args[1]) if len(args) > 1 else path
        return self._add_meta({"type": "resource", "path": path, "key": key}, meta)


class ConfigurationParser:
    """
    Turns a configuration file into a Configuration whose inputs are sorted
    by key, each carrying the size the filesystem reports for it.
    """

    _parsers: Dict[str, Lark] = {}

    def __init__(self, filesystem: Optional[FileSystem] = None, grammar_path: PathLike = DEFAULT_GRAMMAR_PATH):
        self.filesystem = filesystem or LocalFileSystem()
        self.grammar_path = str(grammar_path)
        if self.grammar_path not in self._parsers:
            with open(self.grammar_path, "r", encoding="utf-8") as f:
                grammar = f.read()
            self._parsers[self.grammar_path] = Lark(
                grammar,
                start="start",
                parser="lalr",
                propagate_positions=True,
            )
        self.parser = self._parsers[self.grammar_path]

    def parse_file(self, path: PathLike) -> Configuration:
        path = Path(path)
        raw = self.filesystem.read_bytes(path)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"{path.as_posix()}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
        return self.parse(text, path)

    def parse(self, text: str, configuration_file_path: PathLike) -> Configuration:
        """
        Parse configuration text. Relative resource paths are resolved against
        the directory of `configuration_file_path`.
        """
        configuration_file_path = Path(configuration_file_path)
        source = configuration_file_path.as_posix()
        start_time = time.time()

        if not text.endswith("\n"):
            text += "\n"

        try:
            tree = self.parser.parse(text)
        except UnexpectedInput as e:
            raise ConfigurationError(f"{source}:{e.line}:{e.column}: syntax error") from e

        transformer = ConfigurationTransformer(source)
        document = transformer.transform(tree)

        if settings.PARSE_DEBUG:
            dur = (time.time() - start_time) * 1000
            logger.debug(f"Parsed {source}: {len(text)} bytes in {dur:.2f}ms. Nodes: {transformer.node_count}")

        fields: Dict[str, Any] = {"configuration_file_path": configuration_file_path}
        for option in document["options"]:
            if option["name"] not in OPTIONS:
                raise ConfigurationError(f"{source}:{option['line']}: unknown option '{option['name']}'")
            fields[OPTIONS[option["name"]]] = option["value"]

        base_dir = configuration_file_path.parent
        inputs = [self._make_input(resource, base_dir, source) for resource in document["resources"]]
        inputs.sort(key=lambda i: i.key.encode("utf-8"))
        self._warn_duplicates(inputs, source)
        fields["inputs"] = tuple(inputs)

        try:
            configuration = Configuration(**fields)
        except ValidationError as e:
            raise ConfigurationError(f"{source}: invalid configuration: {e}") from e

        logger.info(f"Configuration {source}: {len(configuration.inputs)} resource(s)")
        return configuration

    def _make_input(self, resource: Dict[str, Any], base_dir: Path, source: str) -> Input:
        file_path = Path(resource["path"])
        if not file_path.is_absolute():
            file_path = base_dir / file_path

        if not self.filesystem.is_file(file_path):
            raise ConfigurationError(f"{source}:{resource['line']}: resource file not found '{resource['path']}'")

        return Input(
            key=resource["key"],
            file_path=file_path,
            size=self.filesystem.file_size(file_path),
        )

    @staticmethod
    def _warn_duplicates(inputs: List[Input], source: str):
        for previous, current in zip(inputs, inputs[1:]):
            if previous.key == current.key:
                logger.warning(f"{source}: duplicate resource key '{current.key}', lookup result is unspecified")
