"""Abstract base for version resource loaders."""

from abc import ABC, abstractmethod
from typing import Optional

from ..versioning.models import VersionRecord


class ResourceLoader(ABC):
    """Loads the version record attached to exactly one namespace.

    Implementations never look at ancestor namespaces; walking up the
    hierarchy is the resolver's job.
    """

    @abstractmethod
    def load(self, namespace: str) -> Optional[VersionRecord]:
        """Load the record for ``namespace``.

        Returns:
            The record, or None when no resource exists for this exact
            namespace. A resource that exists but defines no fields yields an
            empty ``VersionRecord``, not None.
        """
