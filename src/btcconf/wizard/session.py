"""Session state for a wizard run."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from btcconf.fields.exceptions import SessionSealedError, ValidationError
from btcconf.fields.models import FieldKind, FieldSpec
from btcconf.fields.registry import FieldRegistry

logger = logging.getLogger(__name__)


class SessionState:
    """Current value of every field during a wizard run.

    The state is seeded with the registry defaults. ``set`` is the only
    mutator: a value is committed only if it fits the field kind and the
    field's validator accepts it against the current state. Text fields with
    a normalizer are rewritten before validation. Once sealed the
    session rejects further writes.
    """

    def __init__(self, registry: FieldRegistry):
        self._registry = registry
        self._values: dict[str, Any] = registry.defaults()
        self._sealed = False

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, key: str) -> Any:
        """Current value of a field (its default if never set)."""
        spec = self._registry.get_field(key)
        return self._values.get(key, spec.default)

    def set(self, key: str, value: Any) -> None:
        """Validate and commit a value.

        Raises:
            UnknownFieldError: If the field is not registered
            ValidationError: If the value is rejected; the prior value is kept
            SessionSealedError: If the session reached a terminal state
        """
        if self._sealed:
            raise SessionSealedError("Session is closed; no further changes allowed", field=key)

        spec = self._registry.get_field(key)
        _check_kind(spec, value)
        if spec.normalizer is not None:
            value = spec.normalizer(value)

        if spec.validator is not None:
            try:
                spec.validator(value, self.snapshot())
            except ValidationError as e:
                if e.field is None:
                    e.field = key
                logger.debug(f"Rejected value for {key}: {e.message}")
                raise

        self._values[key] = value
        logger.debug(f"Committed {key}={value!r}")

    def snapshot(self) -> Mapping[str, Any]:
        """Immutable copy of the current values."""
        return MappingProxyType(dict(self._values))

    def seal(self) -> None:
        """Make the session read-only."""
        self._sealed = True

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<SessionState fields={len(self._values)} {state}>"


def _check_kind(spec: FieldSpec, value: Any) -> None:
    """Reject values that do not fit the field kind."""
    if spec.kind == FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise ValidationError(f"{spec.title} must be yes or no", field=spec.key)
    elif spec.kind == FieldKind.CHOICE:
        if value not in spec.choice_values:
            options = ", ".join(spec.choice_values)
            raise ValidationError(
                f"'{value}' is not a valid {spec.title.lower()} (choose one of: {options})",
                field=spec.key,
            )
    elif not isinstance(value, str):
        raise ValidationError(f"{spec.title} must be text", field=spec.key)
