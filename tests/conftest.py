"""Shared fixtures: a classpath-like tree of ``.version`` files."""

from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock

import pytest

from pkgversion.loaders import DirectoryResourceLoader
from pkgversion.versioning import VersionResolver

VERSION_FILES: Dict[str, str] = {
    "org/mrcool/swissknife": "artifact=swissknife\nversion=1.0\nbuild=3a77\n",
    "org/mrcool/swissknife/db": "artifact=swissknife-db\nversion=0.8-SNAPSHOT\n",
    "org/demo": "artifact=demo\nversion=2.0\nbuild=ffff\n",
    "org/demo/badversion/noart": "# no artifact\nversion=1.0\n",
    "org/demo/badversion/noversion": "artifact=noversion\n",
    "net/tab": "artifact=${project.artifactId}\nversion=${project.version}\nbuild=${buildNumber}\n",
    "net": "artifact=net\nversion=9.9\n",
}


def write_version_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write ``<root>/<dir>/.version`` for every entry in ``files``."""
    for directory, content in files.items():
        target = root.joinpath(*directory.split("/"))
        target.mkdir(parents=True, exist_ok=True)
        (target / ".version").write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def version_root(tmp_path):
    return write_version_tree(tmp_path / "resources", VERSION_FILES)


@pytest.fixture
def loader(version_root):
    """Directory loader wrapped so calls can be asserted."""
    real = DirectoryResourceLoader(version_root)
    return MagicMock(wraps=real)


@pytest.fixture
def diagnostics():
    return MagicMock()


@pytest.fixture
def resolver(loader, diagnostics):
    return VersionResolver(loader=loader, diagnostics=diagnostics)
