"""
Render exceptions for btcconf.

Defines the errors raised while producing and writing the config file.
"""


class RenderError(Exception):
    """Base exception for rendering errors."""

    pass


class TemplateRenderError(RenderError):
    """The config template could not be loaded or rendered."""

    def __init__(self, message: str, template: str | None = None):
        super().__init__(message)
        self.template = template


class UnmappedChoiceError(RenderError):
    """A choice value has no entry in a directive mapping table."""

    def __init__(self, message: str, field: str, value: str):
        super().__init__(message)
        self.field = field
        self.value = value


class ConfigWriteError(RenderError):
    """The rendered config could not be written to disk."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
