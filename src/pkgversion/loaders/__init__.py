"""Resource loaders for version metadata."""

from .base import ResourceLoader
from .filesystem import DirectoryResourceLoader
from .memory import ChainedResourceLoader, MappingResourceLoader
from .package import PackageResourceLoader
from .properties import parse_properties, record_from_properties

__all__ = [
    "ResourceLoader",
    "DirectoryResourceLoader",
    "ChainedResourceLoader",
    "MappingResourceLoader",
    "PackageResourceLoader",
    "parse_properties",
    "record_from_properties",
]
