"""Loader that reads ``.version`` files from a directory tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..constants import Constants
from ..versioning.models import VersionRecord
from ..versioning.namespace import SEPARATOR
from .base import ResourceLoader
from .properties import record_from_properties

logger = logging.getLogger(__name__)


class DirectoryResourceLoader(ResourceLoader):
    """Map ``a.b.c`` to ``<root>/a/b/c/.version``.

    Useful for resource trees laid out like a classpath, outside any
    importable package.
    """

    def __init__(self, root: Union[str, Path], file_name: Optional[str] = None):
        self.root = Path(root)
        self.file_name = file_name or Constants.VERSION_FILE

    def path_for(self, namespace: str) -> Path:
        return self.root.joinpath(*namespace.split(SEPARATOR), self.file_name)

    def load(self, namespace: str) -> Optional[VersionRecord]:
        path = self.path_for(namespace)
        if not path.is_file():
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            return None
        return record_from_properties(text)
