"""
Config file rendering and output.
"""

from btcconf.render.exceptions import (
    ConfigWriteError,
    RenderError,
    TemplateRenderError,
    UnmappedChoiceError,
)
from btcconf.render.renderer import (
    NETWORK_DIRECTIVES,
    ConfigRenderer,
    format_value,
    network_directives,
    write_config,
)

__all__ = [
    "ConfigWriteError",
    "RenderError",
    "TemplateRenderError",
    "UnmappedChoiceError",
    "NETWORK_DIRECTIVES",
    "ConfigRenderer",
    "format_value",
    "network_directives",
    "write_config",
]
