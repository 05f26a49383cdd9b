"""Shared type aliases for Assetwise."""

from .cache import EntityPayload, PersistentCachePayload
from .common import Confidence, EntityCategory, JsonObject, JsonScalar, JsonValue, LoggerLike, Priority
from .sources import CatalogSource, MetadataSource, PropertyResolution

__all__ = [
    "CatalogSource",
    "Confidence",
    "EntityCategory",
    "EntityPayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LoggerLike",
    "MetadataSource",
    "PersistentCachePayload",
    "Priority",
    "PropertyResolution",
]
