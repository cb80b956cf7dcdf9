"""Exceptions raised by version resolution."""


class PkgVersionError(Exception):
    """Base class for errors raised by this package."""


class InvalidNamespaceError(PkgVersionError, ValueError):
    """A namespace path or type reference is malformed."""

    def __init__(self, namespace):
        super().__init__(f"namespace is not valid: {namespace!r}")
        self.namespace = namespace


class MissingReferenceError(PkgVersionError, TypeError):
    """A required reference was None."""
