# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""String helpers used to derive names for generated code."""
import re

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def to_upper(text: str) -> str:
    """ASCII-only upper case, locale independent."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in text)


def to_lower(text: str) -> str:
    """ASCII-only lower case, locale independent."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def make_identifier(text: str) -> str:
    """
    Replace every character that cannot appear in a C++ identifier by '_'.
    A leading digit gets a '_' prefix.
    """
    result = _NON_IDENTIFIER.sub("_", text)
    if not result or result[0].isdigit():
        result = "_" + result
    return result
