# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
Rescom command line.

    rescom -i resources.rescom -o Resources.hpp [-G legacy]
"""
import argparse
import io
import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from . import __version__
from .codegen.factory import GeneratorRegistry, build_registry
from .config import settings
from .config_parser import ConfigurationParser
from .errors import OutputError, RescomError
from .filesystem import FileSystem

logger = logging.getLogger("rescom.cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rescom", description="Resources compiler")
    parser.add_argument("-i", "--input", help="Input file")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("-G", "--generator", help="Generator (default: the registered default)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information on stderr")
    parser.add_argument("--version", action="store_true", help="Print version")
    return parser


def configure_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else settings.LOG_LEVEL
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _apply_output_mode(tmp_path: str, destination: Path):
    """mkstemp creates 0600 files; give the header the mode a plain open() would."""
    if destination.exists():
        shutil.copymode(destination, tmp_path)
        return
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(tmp_path, 0o666 & ~umask)


def release_results(output_path: Optional[str], text: str):
    """
    Write the generated document to `output_path`, or stdout when None.

    The file is written next to its destination then renamed over it, so a
    reader never sees a partial header.
    """
    if output_path is None:
        sys.stdout.write(text)
        return

    destination = Path(output_path)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        _apply_output_mode(tmp_path, destination)
        os.replace(tmp_path, destination)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise OutputError(destination) from e

    logger.info(f"Wrote {len(text)} characters to {destination.as_posix()}")


def main(argv: Optional[List[str]] = None,
         registry: Optional[GeneratorRegistry] = None,
         filesystem: Optional[FileSystem] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"rescom version {__version__}")
        return 0

    if args.input is None:
        parser.error("the following arguments are required: -i/--input")

    configure_logging(args.verbose)

    if registry is None:
        registry = build_registry(filesystem)

    try:
        # Selection fails before anything is read.
        generator_name = registry.resolve(args.generator)
        configuration = ConfigurationParser(filesystem).parse_file(args.input)
        generator = registry.create(generator_name, configuration)

        output = io.StringIO()
        generator.generate(output)

        release_results(args.output, output.getvalue())
    except RescomError as e:
        print(f"Rescom error: {e}", file=sys.stderr)
        return 1

    return 0
