"""Parser for ``.version`` resources.

The files use Java properties syntax as written by build-time resource
filtering::

    artifact=swissknife
    version=1.0
    # optional
    build=3a77
"""

from __future__ import annotations

from typing import Dict, Iterator, Tuple

from ..versioning.models import VersionRecord

_COMMENT_PREFIXES = ("#", "!")
_SEPARATORS = "=:"


def _logical_lines(text: str) -> Iterator[str]:
    """Join ``\\``-continued lines and drop blank and comment lines.

    A line ending in an odd number of backslashes continues on the next line,
    whose leading whitespace is dropped.
    """
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None:
            if not line or line.startswith(_COMMENT_PREFIXES):
                continue
        else:
            line = pending + line
            pending = None
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue
        yield line
    if pending is not None:
        yield pending


def _split_pair(line: str) -> Tuple[str, str]:
    """Split a logical line at the first ``=``, ``:`` or whitespace.

    Whitespace around the separator is ignored, so ``version 1.0``,
    ``version=1.0`` and ``version : 1.0`` are the same pair.
    """
    for i, ch in enumerate(line):
        if ch in _SEPARATORS:
            return line[:i], line[i + 1:].strip()
        if ch.isspace():
            rest = line[i:].lstrip()
            if rest[:1] and rest[0] in _SEPARATORS:
                rest = rest[1:]
            return line[:i], rest.strip()
    return line, ""


def parse_properties(text: str) -> Dict[str, str]:
    """Parse Java-properties text into a dict.

    Supports ``=``, ``:`` and whitespace separators, ``#``/``!`` comment
    lines and backslash line continuation. Other backslash escapes
    (``\\n``, ``\\uXXXX``) are kept as written. Values are stripped, a key
    without a value maps to ``""`` and later keys override earlier ones.
    """
    props: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_pair(line)
        if key:
            props[key] = value
    return props


def record_from_properties(text: str) -> VersionRecord:
    return VersionRecord.from_mapping(parse_properties(text))
