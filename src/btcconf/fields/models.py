"""Data models for wizard fields and groups."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

FieldValue = str | bool
State = Mapping[str, Any]
Validator = Callable[[Any, State], None]
Normalizer = Callable[[str], str]
Predicate = Callable[[State], bool]


class FieldKind(str, Enum):
    """Kinds of prompt a field is collected with."""

    TEXT = "text"
    BOOLEAN = "boolean"
    CHOICE = "choice"


def always_visible(state: State) -> bool:
    """Visibility predicate for groups that are always shown."""
    return True


@dataclass(frozen=True)
class Choice:
    """One option of a single-choice field."""

    label: str
    value: str


@dataclass(frozen=True)
class FieldSpec:
    """A single configurable option."""

    key: str
    kind: FieldKind
    default: FieldValue
    title: str
    description: str = ""
    choices: tuple[Choice, ...] = ()
    validator: Validator | None = field(default=None, compare=False)
    normalizer: Normalizer | None = field(default=None, compare=False)

    @property
    def choice_values(self) -> tuple[str, ...]:
        """Declared choice values, in order."""
        return tuple(choice.value for choice in self.choices)

    def label_for(self, value: Any) -> str:
        """Human readable label for a value of this field."""
        if self.kind == FieldKind.BOOLEAN:
            return "Yes" if value else "No"
        for choice in self.choices:
            if choice.value == value:
                return choice.label
        return str(value)


@dataclass(frozen=True)
class Group:
    """An ordered set of fields presented together as one wizard step."""

    key: str
    title: str
    fields: tuple[FieldSpec, ...]
    note: str = ""
    visible: Predicate = field(default=always_visible, compare=False)

    def is_visible(self, state: State) -> bool:
        """Evaluate the visibility predicate against a state mapping."""
        return bool(self.visible(state))

    @property
    def field_keys(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self.fields)
