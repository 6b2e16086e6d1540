"""
Field exceptions for btcconf.

Defines the errors raised while building the field registry and while
committing values to the wizard session.
"""


class FieldError(Exception):
    """Base exception for field errors."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class RegistryError(FieldError):
    """Field registry was constructed incorrectly."""

    pass


class DuplicateKeyError(RegistryError):
    """A field or group key is already registered."""

    pass


class EmptyChoiceSetError(RegistryError):
    """A single-choice field was declared without any choices."""

    pass


class UnknownFieldError(RegistryError, KeyError):
    """A field key is not part of the registry."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class CatalogError(FieldError):
    """The field catalog file could not be read or is malformed."""

    pass


class ValidationError(FieldError):
    """A candidate value was rejected for a field."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, field)
        self.message = message


class SessionSealedError(FieldError):
    """The session is in a terminal state and no longer accepts values."""

    pass
