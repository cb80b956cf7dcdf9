"""Loader that reads ``.version`` files shipped inside installed packages."""

from __future__ import annotations

import importlib.util
import logging
from importlib import resources
from typing import Optional

from ..common.logging_utils import extra_context, is_debug_enabled
from ..constants import Constants
from ..versioning.models import VersionRecord
from .base import ResourceLoader
from .properties import record_from_properties

logger = logging.getLogger(__name__)


class PackageResourceLoader(ResourceLoader):
    """Read ``<package dir>/.version`` through ``importlib.resources``.

    The namespace must name an importable package (regular or namespace
    package). Plain modules, unimportable names and packages without the file
    are all reported as not found. Finding the package imports its parents,
    the same as importing it would.
    """

    def __init__(self, file_name: Optional[str] = None):
        self.file_name = file_name or Constants.VERSION_FILE

    def load(self, namespace: str) -> Optional[VersionRecord]:
        # find_spec and files() run parent package __init__ code, which may raise anything.
        try:
            spec = importlib.util.find_spec(namespace)
            if spec is None or not spec.submodule_search_locations:
                return None
            resource = resources.files(namespace).joinpath(self.file_name)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.debug("Cannot locate package %s: %s", namespace, e, extra=extra_context(
                event="lookup", component="package_loader", namespace=namespace, outcome="not_importable"
            ))
            return None

        if not resource.is_file():
            return None
        try:
            text = resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s for %s: %s", self.file_name, namespace, e)
            return None
        if is_debug_enabled(logger):
            logger.debug("Loaded %s for %s", self.file_name, namespace, extra=extra_context(
                event="lookup", component="package_loader", namespace=namespace, outcome="found"
            ))
        return record_from_properties(text)
