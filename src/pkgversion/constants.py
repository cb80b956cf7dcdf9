"""Constants used in the project."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION_FILE = ".version"
    UNKNOWN_STR = "unknown"

    # Resource field names
    FIELD_ARTIFACT = "artifact"
    FIELD_VERSION = "version"
    FIELD_BUILD = "build"

    # Tag format
    SNAPSHOT_SUFFIX = "-SNAPSHOT"
    PRE_RELEASE_MARKER = "v"
    RELEASE_MARKER = "r"
    PLACEHOLDER_MARKER = "${"

    CACHE_STRIPES = 16

    LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
    LOG_LEVEL = "WARNING"

    ENV_CONFIG = "PKGVERSION_CONFIG"
    ENV_LOG_LEVEL = "PKGVERSION_LOG_LEVEL"
    CONFIG_FILE_NAMES = ["pkgversion.yml", "pkgversion.yaml"]


def _candidate_config_paths() -> List[str]:
    """Return config file locations in priority order."""
    paths: List[str] = []
    explicit = os.environ.get(Constants.ENV_CONFIG)
    if explicit and explicit.strip():
        paths.append(explicit.strip())
    for name in Constants.CONFIG_FILE_NAMES:
        paths.append(os.path.join(os.getcwd(), name))
    xdg = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    for name in Constants.CONFIG_FILE_NAMES:
        paths.append(os.path.join(xdg, "pkgversion", name))
    return paths


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the first available YAML config file.

    Args:
        path: Explicit config path. When omitted the default locations are
            searched (``$PKGVERSION_CONFIG``, the working directory, then the
            XDG config dir).

    Returns:
        Parsed config dict, or an empty dict when no usable file exists.
    """
    import yaml

    candidates = [path] if path else _candidate_config_paths()
    for candidate in candidates:
        if not os.path.isfile(candidate):
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config %s: %s", candidate, e)
            return {}
        if isinstance(data, dict):
            logger.debug("Loaded config from %s", candidate)
            return data
        logger.warning("Ignoring config %s: top level is not a mapping", candidate)
        return {}
    return {}


def apply_config(cfg: Dict[str, Any]) -> None:
    """Copy recognized config keys onto ``Constants``.

    Unrecognized keys are ignored; values of the wrong shape are skipped with a
    warning so a bad config file never prevents version lookup.
    """
    if not cfg:
        return

    version_file = cfg.get("version_file")
    if version_file is not None:
        if isinstance(version_file, str) and version_file.strip():
            Constants.VERSION_FILE = version_file.strip()
        else:
            logger.warning("Invalid version_file in config: %r", version_file)

    cache_cfg = cfg.get("cache")
    if isinstance(cache_cfg, dict) and "stripes" in cache_cfg:
        try:
            stripes = int(cache_cfg["stripes"])
        except (TypeError, ValueError):
            stripes = 0
        if stripes > 0:
            Constants.CACHE_STRIPES = stripes
        else:
            logger.warning("Invalid cache.stripes in config: %r", cache_cfg["stripes"])

    log_cfg = cfg.get("logging")
    if isinstance(log_cfg, dict) and log_cfg.get("level"):
        Constants.LOG_LEVEL = str(log_cfg["level"]).upper()


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML config and apply it to ``Constants``."""
    cfg = _load_yaml_config(path)
    apply_config(cfg)
    return cfg
