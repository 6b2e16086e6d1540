"""
Pytest configuration and fixtures for btcconf tests.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from btcconf.fields import FieldRegistry, load_field_registry
from btcconf.fields.models import FieldSpec, Group
from btcconf.wizard.core import Prompter
from btcconf.wizard.session import SessionState


class ScriptedPrompter(Prompter):
    """Prompter that answers from a script instead of the terminal.

    ``answers`` maps a field key to the values given on each successive ask
    of that field. Fields without a scripted answer keep their current
    value. The ``CANCEL`` marker cancels the wizard at that prompt.
    """

    CANCEL = object()

    def __init__(self, answers: dict[str, list[Any]] | None = None):
        self.answers = {key: list(values) for key, values in (answers or {}).items()}
        self.groups: list[str] = []
        self.asked: list[str] = []
        self.errors: list[tuple[str, str]] = []

    def begin_group(self, group: Group, index: int, total: int) -> None:
        self.groups.append(group.key)

    def ask(self, field: FieldSpec, current: Any) -> Any | None:
        self.asked.append(field.key)
        queue = self.answers.get(field.key)
        if not queue:
            return current
        answer = queue.pop(0)
        if answer is self.CANCEL:
            return None
        return answer

    def show_error(self, field: FieldSpec, message: str) -> None:
        self.errors.append((field.key, message))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> FieldRegistry:
    """Provide the packaged Bitcoin Core field registry."""
    return load_field_registry()


@pytest.fixture
def session(registry: FieldRegistry) -> SessionState:
    """Provide a fresh session seeded with defaults."""
    return SessionState(registry)


@pytest.fixture
def sample_catalog() -> dict:
    """Provide a small catalog dictionary."""
    return {
        "groups": [
            {
                "key": "basics",
                "title": "Basics",
                "fields": [
                    {"key": "datadir", "kind": "text", "default": "~/.node", "title": "Data"},
                    {
                        "key": "mode",
                        "kind": "choice",
                        "default": "fast",
                        "title": "Mode",
                        "choices": [
                            {"label": "Fast", "value": "fast"},
                            {"label": "Safe", "value": "safe"},
                        ],
                    },
                ],
            },
            {
                "key": "rpc",
                "title": "RPC",
                "visible_when": "rpc_enabled",
                "note": "Optional settings",
                "fields": [
                    {"key": "server", "kind": "boolean", "default": False, "title": "Server"},
                ],
            },
        ]
    }


@pytest.fixture
def scripted_prompter() -> type[ScriptedPrompter]:
    """Provide the scripted prompter class for driving the wizard."""
    return ScriptedPrompter
