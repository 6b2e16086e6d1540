"""
Config file rendering for btcconf.

Turns a completed session snapshot into bitcoin.conf text with a Jinja2
template, and writes the result to disk.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from btcconf.fields.models import FieldKind
from btcconf.fields.registry import FieldRegistry
from btcconf.render.exceptions import (
    ConfigWriteError,
    TemplateRenderError,
    UnmappedChoiceError,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "bitcoin.conf.j2"
NETWORK_FIELD = "chain"

# Chain selector for each network choice, followed by the section header of a
# non-main chain. Options written after the header apply to that network.
NETWORK_DIRECTIVES: dict[str, tuple[str, ...]] = {
    "main": ("chain=main",),
    "test": ("chain=test", "[test]"),
    "testnet4": ("chain=testnet4", "[testnet4]"),
    "regtest": ("chain=regtest", "[regtest]"),
    "signet": ("chain=signet", "[signet]"),
}


def create_environment() -> jinja2.Environment:
    """Jinja2 environment for the packaged templates."""
    return jinja2.Environment(
        loader=jinja2.PackageLoader("btcconf.render", "templates"),
        undefined=jinja2.StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def format_value(kind: FieldKind, value: Any) -> str:
    """Serialize a field value the way bitcoin.conf expects it."""
    if kind == FieldKind.BOOLEAN:
        return "1" if value else "0"
    return "" if value is None else str(value)


def network_directives(chain: str) -> list[str]:
    """
    Directive lines for a network choice.

    Raises:
        UnmappedChoiceError: If the choice has no mapping entry.
    """
    try:
        return list(NETWORK_DIRECTIVES[chain])
    except KeyError:
        raise UnmappedChoiceError(
            f"No directives mapped for network '{chain}'", field=NETWORK_FIELD, value=chain
        ) from None


class ConfigRenderer:
    """Renders session snapshots with the bitcoin.conf template."""

    def __init__(
        self,
        registry: FieldRegistry,
        template_name: str = DEFAULT_TEMPLATE,
        environment: jinja2.Environment | None = None,
    ):
        """Initialize the renderer.

        Raises:
            UnmappedChoiceError: If the network table does not cover exactly
                the declared network choices
        """
        self.registry = registry
        self.template_name = template_name
        self.environment = environment or create_environment()
        self._check_network_table()

    def _check_network_table(self) -> None:
        if NETWORK_FIELD not in self.registry:
            return
        declared = set(self.registry.get_field(NETWORK_FIELD).choice_values)
        mapped = set(NETWORK_DIRECTIVES)
        missing = sorted(declared - mapped)
        if missing:
            raise UnmappedChoiceError(
                f"Network choices without directives: {', '.join(missing)}",
                field=NETWORK_FIELD,
                value=missing[0],
            )
        extra = sorted(mapped - declared)
        if extra:
            raise UnmappedChoiceError(
                f"Network directives for undeclared choices: {', '.join(extra)}",
                field=NETWORK_FIELD,
                value=extra[0],
            )

    def build_context(self, snapshot: Mapping[str, Any]) -> dict[str, Any]:
        """Flat template context for a snapshot.

        Every registered field is present; fields missing from the snapshot
        take their default value.
        """
        context: dict[str, Any] = {}
        for spec in self.registry.fields():
            value = snapshot.get(spec.key, spec.default)
            context[spec.key] = format_value(spec.kind, value)

        if NETWORK_FIELD in self.registry:
            context["network_directives"] = network_directives(context[NETWORK_FIELD])
        return context

    def render(self, snapshot: Mapping[str, Any]) -> str:
        """
        Render a snapshot to config file text.

        Raises:
            UnmappedChoiceError: If the network choice is not mapped.
            TemplateRenderError: If the template cannot be loaded or rendered.
        """
        context = self.build_context(snapshot)
        try:
            template = self.environment.get_template(self.template_name)
            return template.render(**context)
        except jinja2.TemplateError as e:
            raise TemplateRenderError(
                f"Cannot render template {self.template_name}: {e}",
                template=self.template_name,
            ) from e


def write_config(text: str, path: Path) -> Path:
    """
    Write rendered config text, replacing any existing file.

    Raises:
        ConfigWriteError: If the file cannot be written.
    """
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"Cannot write {path}: {e}", path=str(path)) from e

    logger.info(f"Wrote {len(text)} bytes to {path}")
    return path
