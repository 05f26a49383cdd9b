"""Schema and object-type resolution with in-memory and disk caching."""

from .cache import ResolverCache, name_key
from .disk import DiskCache
from .fingerprint import cache_file_name, workspace_fingerprint
from .locks import ReadWriteLock
from .service import Resolver

__all__ = [
    "DiskCache",
    "ReadWriteLock",
    "Resolver",
    "ResolverCache",
    "cache_file_name",
    "name_key",
    "workspace_fingerprint",
]
