"""Namespace path helpers.

A namespace path is a dotted sequence of identifier segments, the same shape
as a Python package or module name (``org.example.widget``).
"""

from __future__ import annotations

from typing import Iterator, Optional

SEPARATOR = "."


def is_valid_namespace(s) -> bool:
    """Return True when ``s`` is a syntactically valid namespace path.

    Each segment must be a Python identifier, which rules out empty strings,
    leading, trailing or consecutive dots and characters such as ``#``.
    Keywords are allowed since they are valid as resource directory names.
    """
    if not isinstance(s, str) or not s:
        return False
    return all(segment.isidentifier() for segment in s.split(SEPARATOR))


def is_top_level(namespace: str) -> bool:
    return SEPARATOR not in namespace


def parent_namespace(namespace: str) -> Optional[str]:
    """Strip the last segment, or return None for a top-level namespace."""
    pos = namespace.rfind(SEPARATOR)
    if pos < 0:
        return None
    return namespace[:pos]


def lookup_chain(namespace: str) -> Iterator[str]:
    """Yield ``namespace`` then each ancestor that is not top-level.

    ``a.b.c.d`` yields ``a.b.c.d``, ``a.b.c``, ``a.b``.
    """
    current: Optional[str] = namespace
    while current is not None and not is_top_level(current):
        yield current
        current = parent_namespace(current)


def namespace_of_type(cls) -> Optional[str]:
    """Return the enclosing namespace of a class.

    That is the part of the fully qualified name before the class name, which
    for a Python class is its module. Returns None when the class does not
    record a module.
    """
    module = getattr(cls, "__module__", None)
    if not isinstance(module, str) or not module:
        return None
    return module
