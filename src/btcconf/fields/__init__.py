"""
Field registry, catalog, and rules for the configuration wizard.
"""

from btcconf.fields.catalog import DEFAULT_CATALOG_PATH, build_registry, load_field_registry
from btcconf.fields.exceptions import (
    CatalogError,
    DuplicateKeyError,
    EmptyChoiceSetError,
    FieldError,
    RegistryError,
    SessionSealedError,
    UnknownFieldError,
    ValidationError,
)
from btcconf.fields.models import Choice, FieldKind, FieldSpec, Group, always_visible
from btcconf.fields.registry import FieldRegistry

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "build_registry",
    "load_field_registry",
    "CatalogError",
    "DuplicateKeyError",
    "EmptyChoiceSetError",
    "FieldError",
    "RegistryError",
    "SessionSealedError",
    "UnknownFieldError",
    "ValidationError",
    "Choice",
    "FieldKind",
    "FieldSpec",
    "Group",
    "always_visible",
    "FieldRegistry",
]
