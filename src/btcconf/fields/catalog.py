"""
Field catalog loading.

The wizard's groups and fields are declared in a YAML catalog shipped with
the package. This module validates the catalog with pydantic and builds a
FieldRegistry from it, resolving rule names against btcconf.fields.rules.
"""

import logging
from pathlib import Path
from typing import Any, Literal

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field

from btcconf.fields.exceptions import CatalogError
from btcconf.fields.models import Choice, FieldKind
from btcconf.fields.registry import FieldRegistry
from btcconf.fields.rules import get_normalizer, get_predicate, get_validator

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "defaults" / "fields.yaml"


# =============================================================================
# Catalog Schema
# =============================================================================


class ChoiceDefinition(BaseModel):
    """One option of a choice field."""

    model_config = ConfigDict(extra="forbid")

    label: str
    value: str


class FieldDefinition(BaseModel):
    """A field entry in the catalog."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(min_length=1)
    kind: Literal["text", "boolean", "choice"]
    default: str | bool
    title: str
    description: str = ""
    choices: list[ChoiceDefinition] = Field(default_factory=list)
    validator: str | None = None
    normalize: str | None = None


class GroupDefinition(BaseModel):
    """A group entry in the catalog."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(min_length=1)
    title: str
    note: str = ""
    visible_when: str | None = None
    fields: list[FieldDefinition] = Field(default_factory=list)


class CatalogDefinition(BaseModel):
    """Top level of the catalog file."""

    model_config = ConfigDict(extra="forbid")

    groups: list[GroupDefinition]


# =============================================================================
# Loading
# =============================================================================


def load_catalog_file(path: Path) -> CatalogDefinition:
    """
    Read and validate a catalog file.

    Args:
        path: Path to the YAML catalog.

    Returns:
        Validated catalog definition.

    Raises:
        CatalogError: If the file cannot be read, parsed, or validated.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e}") from e

    return parse_catalog(content or {}, source=str(path))


def parse_catalog(content: dict[str, Any], source: str = "<catalog>") -> CatalogDefinition:
    """Validate an already parsed catalog mapping."""
    try:
        return CatalogDefinition.model_validate(content)
    except pydantic.ValidationError as e:
        raise CatalogError(f"Invalid field catalog {source}: {e}") from e


def build_registry(catalog: CatalogDefinition) -> FieldRegistry:
    """
    Build a field registry from a catalog definition.

    Registry construction errors (duplicate keys, empty choice sets) are
    propagated unchanged; unknown rule names raise CatalogError.
    """
    registry = FieldRegistry()

    for group_def in catalog.groups:
        for field_def in group_def.fields:
            registry.define_field(
                field_def.key,
                FieldKind(field_def.kind),
                field_def.default,
                title=field_def.title,
                description=field_def.description,
                choices=[Choice(label=c.label, value=c.value) for c in field_def.choices],
                validator=get_validator(field_def.validator),
                normalizer=get_normalizer(field_def.normalize),
            )

        registry.define_group(
            group_def.key,
            group_def.title,
            [field_def.key for field_def in group_def.fields],
            note=group_def.note,
            visible=get_predicate(group_def.visible_when),
        )

    logger.debug(f"Built registry: {len(registry)} fields in {len(catalog.groups)} groups")
    return registry


def load_field_registry(path: Path | None = None) -> FieldRegistry:
    """Load the field registry from a catalog file (the packaged one by default)."""
    return build_registry(load_catalog_file(path or DEFAULT_CATALOG_PATH))
