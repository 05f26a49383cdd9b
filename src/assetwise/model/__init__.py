"""Core data models for Assetwise."""

from .entities import (
    ENTITY_CATEGORIES,
    OBJECT_TYPE,
    SCHEMA,
    AttributeMetadata,
    CacheInfo,
    CompletionResult,
    CompletionSuggestion,
    DefaultApplication,
    EntityInfo,
    PersistentCacheEntry,
    PropertyError,
    PropertyValue,
    ResolverSnapshot,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "ENTITY_CATEGORIES",
    "OBJECT_TYPE",
    "SCHEMA",
    "AttributeMetadata",
    "CacheInfo",
    "CompletionResult",
    "CompletionSuggestion",
    "DefaultApplication",
    "EntityInfo",
    "PersistentCacheEntry",
    "PropertyError",
    "PropertyValue",
    "ResolverSnapshot",
    "ValidationIssue",
    "ValidationResult",
    "ValidationWarning",
]
