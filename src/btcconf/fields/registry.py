"""Field registry for the configuration wizard."""

import logging
from collections.abc import Iterable
from typing import Any

from btcconf.fields.exceptions import (
    DuplicateKeyError,
    EmptyChoiceSetError,
    RegistryError,
    UnknownFieldError,
)
from btcconf.fields.models import (
    Choice,
    FieldKind,
    FieldSpec,
    FieldValue,
    Group,
    Normalizer,
    Predicate,
    Validator,
    always_visible,
)

logger = logging.getLogger(__name__)


class FieldRegistry:
    """Registry of the fields and groups the wizard asks about.

    Fields are registered first and then placed into groups. Group order is
    the order the wizard presents them in, and every field belongs to exactly
    one group.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._fields: dict[str, FieldSpec] = {}
        self._groups: dict[str, Group] = {}
        self._placed: dict[str, str] = {}

    def define_field(
        self,
        key: str,
        kind: FieldKind,
        default: FieldValue,
        *,
        title: str,
        description: str = "",
        choices: Iterable[Choice] = (),
        validator: Validator | None = None,
        normalizer: Normalizer | None = None,
    ) -> FieldSpec:
        """Define a field.

        Args:
            key: Unique field key, also used as the template variable name
            kind: Prompt kind
            default: Value used when the user leaves the field untouched
            title: Prompt title
            description: Help text shown with the prompt
            choices: Ordered choices for single-choice fields
            validator: Optional callable run when a value is committed
            normalizer: Optional callable that rewrites text before it is validated

        Returns:
            The registered FieldSpec

        Raises:
            DuplicateKeyError: If the key is already registered
            EmptyChoiceSetError: If a choice field declares no choices
            RegistryError: If the default does not fit the field kind
        """
        if key in self._fields:
            raise DuplicateKeyError(f"Field '{key}' is already registered", field=key)

        choices = tuple(choices)
        if kind == FieldKind.CHOICE:
            if not choices:
                raise EmptyChoiceSetError(
                    f"Choice field '{key}' must declare at least one choice", field=key
                )
            if default not in {choice.value for choice in choices}:
                raise RegistryError(
                    f"Default '{default}' of field '{key}' is not one of its choices",
                    field=key,
                )
        elif choices:
            raise RegistryError(f"Only choice fields may declare choices ('{key}')", field=key)
        elif kind == FieldKind.BOOLEAN and not isinstance(default, bool):
            raise RegistryError(f"Boolean field '{key}' needs a boolean default", field=key)
        elif kind == FieldKind.TEXT and not isinstance(default, str):
            raise RegistryError(f"Text field '{key}' needs a string default", field=key)
        if normalizer is not None and kind != FieldKind.TEXT:
            raise RegistryError(f"Only text fields may declare a normalizer ('{key}')", field=key)

        spec = FieldSpec(
            key=key,
            kind=kind,
            default=default,
            title=title,
            description=description,
            choices=choices,
            validator=validator,
            normalizer=normalizer,
        )
        self._fields[key] = spec
        logger.debug(f"Defined field: {key} ({kind.value})")
        return spec

    def define_group(
        self,
        key: str,
        title: str,
        field_keys: Iterable[str],
        *,
        note: str = "",
        visible: Predicate = always_visible,
    ) -> Group:
        """Define a group of already registered fields.

        Raises:
            DuplicateKeyError: If the group key is already registered
            UnknownFieldError: If a field key has not been defined
            RegistryError: If a field already belongs to another group
        """
        if key in self._groups:
            raise DuplicateKeyError(f"Group '{key}' is already registered")

        specs = []
        for field_key in field_keys:
            spec = self.get_field(field_key)
            owner = self._placed.get(field_key)
            if owner is not None:
                raise RegistryError(
                    f"Field '{field_key}' already belongs to group '{owner}'", field=field_key
                )
            specs.append(spec)

        group = Group(key=key, title=title, fields=tuple(specs), note=note, visible=visible)
        for spec in specs:
            self._placed[spec.key] = key
        self._groups[key] = group
        logger.debug(f"Defined group: {key} with {len(specs)} field(s)")
        return group

    def get_field(self, key: str) -> FieldSpec:
        """Get a field by key.

        Raises:
            UnknownFieldError: If the key is not registered
        """
        try:
            return self._fields[key]
        except KeyError:
            raise UnknownFieldError(f"Unknown field '{key}'", field=key) from None

    def get_group(self, key: str) -> Group:
        """Get a group by key."""
        try:
            return self._groups[key]
        except KeyError:
            raise RegistryError(f"Unknown group '{key}'") from None

    def fields(self) -> list[FieldSpec]:
        """All fields, in definition order."""
        return list(self._fields.values())

    def groups(self) -> list[Group]:
        """All groups, in presentation order."""
        return list(self._groups.values())

    def defaults(self) -> dict[str, Any]:
        """Map of every field key to its default value."""
        return {key: spec.default for key, spec in self._fields.items()}

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: str) -> bool:
        return key in self._fields

    def __repr__(self) -> str:
        return f"<FieldRegistry fields={len(self._fields)} groups={len(self._groups)}>"
