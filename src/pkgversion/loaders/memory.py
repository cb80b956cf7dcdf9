"""In-memory and composite loaders."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ..versioning.models import VersionRecord
from .base import ResourceLoader

RecordLike = Union[VersionRecord, Mapping[str, Any]]


class MappingResourceLoader(ResourceLoader):
    """Serve records from a dict of namespace -> record or field mapping."""

    def __init__(self, records: Optional[Mapping[str, RecordLike]] = None):
        self._records: Dict[str, VersionRecord] = {}
        for namespace, record in (records or {}).items():
            self.add(namespace, record)

    def add(self, namespace: str, record: RecordLike) -> None:
        if not isinstance(record, VersionRecord):
            record = VersionRecord.from_mapping(dict(record))
        self._records[namespace] = record

    def load(self, namespace: str) -> Optional[VersionRecord]:
        return self._records.get(namespace)


class ChainedResourceLoader(ResourceLoader):
    """Ask each loader in turn; the first one that finds a record wins."""

    def __init__(self, *loaders: ResourceLoader):
        if not loaders:
            raise ValueError("at least one loader is required")
        self.loaders = loaders

    def load(self, namespace: str) -> Optional[VersionRecord]:
        for loader in self.loaders:
            record = loader.load(namespace)
            if record is not None:
                return record
        return None
