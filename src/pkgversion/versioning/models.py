"""Data models for resolved version metadata."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..constants import Constants


def _is_blank(s: Optional[str]) -> bool:
    return s is None or s.strip() == ""


def decorate_project_version(project_version: str) -> str:
    """Prefix a project version with its release marker.

    ``1.0.0-SNAPSHOT`` becomes ``v1.0.0-SNAPSHOT``; anything else gets the
    release marker, e.g. ``r1.0.0``.
    """
    if project_version.endswith(Constants.SNAPSHOT_SUFFIX):
        return Constants.PRE_RELEASE_MARKER + project_version
    return Constants.RELEASE_MARKER + project_version


@dataclass(frozen=True)
class VersionRecord:
    """Raw fields read from a version resource.

    Every field is optional; a record with all fields ``None`` means the
    resource exists but is empty.
    """
    artifact: Optional[str] = None
    version: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "VersionRecord":
        """Build a record from a dict keyed by resource field names."""
        def _get(key: str) -> Optional[str]:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            artifact=_get(Constants.FIELD_ARTIFACT),
            version=_get(Constants.FIELD_VERSION),
            build=_get(Constants.FIELD_BUILD),
        )

    def items(self):
        """Yield ``(field_name, value)`` pairs in resource order."""
        yield Constants.FIELD_ARTIFACT, self.artifact
        yield Constants.FIELD_VERSION, self.version
        yield Constants.FIELD_BUILD, self.build


@dataclass(frozen=True)
class Version:
    """Version of the library or application that owns a namespace.

    Holds the artifact id, the project (release) version and the optional SCM
    build number. ``version_tag`` is derived once from the project version and
    build number. Two versions are equal when their artifact id and version tag
    are equal, however the tag was assembled.
    """
    artifact_id: str
    project_version: str = field(compare=False)
    build_number: str = field(default="", compare=False)
    version_tag: str = field(init=False)

    def __post_init__(self):
        if _is_blank(self.artifact_id):
            raise ValueError("artifact id is empty")
        if _is_blank(self.project_version):
            raise ValueError("project version is empty")
        project_version = self.project_version.strip()
        build_number = "" if _is_blank(self.build_number) else self.build_number.strip()
        tag = decorate_project_version(project_version)
        if build_number:
            tag = f"{tag}-{build_number}"
        object.__setattr__(self, "artifact_id", self.artifact_id.strip())
        object.__setattr__(self, "project_version", project_version)
        object.__setattr__(self, "build_number", build_number)
        object.__setattr__(self, "version_tag", tag)

    def __str__(self) -> str:
        return f"{self.artifact_id}-{self.version_tag}"

    def __reduce__(self):
        if self is UNKNOWN:
            return "UNKNOWN"
        return (Version, (self.artifact_id, self.project_version, self.build_number))

    def is_unknown(self) -> bool:
        """Return True if this is the ``UNKNOWN`` sentinel."""
        return self is UNKNOWN

    def is_snapshot(self) -> bool:
        return self.project_version.endswith(Constants.SNAPSHOT_SUFFIX)

    def to_dict(self) -> Dict[str, str]:
        """Serialize using the resource field names."""
        return {
            Constants.FIELD_ARTIFACT: self.artifact_id,
            Constants.FIELD_VERSION: self.project_version,
            Constants.FIELD_BUILD: self.build_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Version":
        """Inverse of ``to_dict``.

        A dict equal to ``UNKNOWN.to_dict()`` returns the sentinel itself.

        Raises:
            ValueError: if the artifact or version field is missing or blank.
        """
        record = VersionRecord.from_mapping(data)
        version = cls(record.artifact or "", record.version or "", record.build or "")
        if version == UNKNOWN:
            return UNKNOWN
        return version

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_json(cls, text: str) -> "Version":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("version JSON must be an object")
        return cls.from_dict(data)


UNKNOWN = Version(Constants.UNKNOWN_STR, Constants.UNKNOWN_STR)
