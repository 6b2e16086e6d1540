"""
Core logic for the configuration wizard.

This module defines the wizard status, the prompter contract, and the loop
that walks the visible groups and commits answers to the session state.
It is UI-agnostic.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from btcconf.fields.exceptions import ValidationError
from btcconf.fields.models import FieldKind, FieldSpec, Group
from btcconf.fields.registry import FieldRegistry
from btcconf.wizard.session import SessionState

logger = logging.getLogger(__name__)


class WizardStatus(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()
    ABORTED = auto()


class Prompter(ABC):
    """Contract for the UI that asks the user for field values."""

    @abstractmethod
    def begin_group(self, group: Group, index: int, total: int) -> None:
        """Announce a group before its fields are asked.

        Args:
            group: The group being entered
            index: 1-based position among the groups shown so far
            total: Number of groups in the registry
        """

    @abstractmethod
    def ask(self, field: FieldSpec, current: Any) -> Any | None:
        """Ask for a field value.

        Returns:
            The entered value, or None if the user cancelled
        """

    @abstractmethod
    def show_error(self, field: FieldSpec, message: str) -> None:
        """Display a rejected value's error before the field is asked again."""


@dataclass
class WizardResult:
    """Result of running the wizard."""

    status: WizardStatus
    snapshot: Mapping[str, Any] | None = None

    @property
    def completed(self) -> bool:
        return self.status == WizardStatus.COMPLETED


class Wizard:
    """Drives one wizard session from start to a terminal state."""

    def __init__(
        self,
        registry: FieldRegistry,
        prompter: Prompter,
        session: SessionState | None = None,
    ):
        self.registry = registry
        self.prompter = prompter
        self.session = session or SessionState(registry)
        self.status = WizardStatus.NOT_STARTED

    def run(self) -> WizardResult:
        """Run the wizard. Can be called once."""
        if self.status != WizardStatus.NOT_STARTED:
            raise RuntimeError(f"Wizard already ran (status: {self.status.name})")

        self.status = WizardStatus.IN_PROGRESS
        groups = self.registry.groups()
        shown = 0

        try:
            for group in groups:
                # Visibility is decided from the state as updated by earlier groups
                if not group.is_visible(self.session.snapshot()):
                    logger.debug(f"Skipping hidden group: {group.key}")
                    continue

                shown += 1
                self.prompter.begin_group(group, shown, len(groups))
                for spec in group.fields:
                    if not self._collect(spec):
                        return self._abort()
        except KeyboardInterrupt:
            return self._abort()

        self.status = WizardStatus.COMPLETED
        self.session.seal()
        logger.info(f"Wizard completed after {shown} group(s)")
        return WizardResult(status=self.status, snapshot=self.session.snapshot())

    def _collect(self, spec: FieldSpec) -> bool:
        """Prompt for one field until a value commits. False if cancelled."""
        while True:
            value = self.prompter.ask(spec, self.session.get(spec.key))
            if value is None:
                return False
            try:
                self.session.set(spec.key, value)
                return True
            except ValidationError as e:
                self.prompter.show_error(spec, e.message)

    def _abort(self) -> WizardResult:
        self.status = WizardStatus.ABORTED
        self.session.seal()
        logger.info("Wizard cancelled by user")
        return WizardResult(status=self.status)


def visible_groups(registry: FieldRegistry, state: Mapping[str, Any]) -> list[Group]:
    """Groups whose visibility predicate holds for ``state``."""
    return [group for group in registry.groups() if group.is_visible(state)]


def summarize_snapshot(
    registry: FieldRegistry, snapshot: Mapping[str, Any]
) -> list[tuple[str, str]]:
    """Rows of (title, value) for the fields worth showing in a summary.

    Empty text fields and disabled booleans are left out, so the summary
    lists what the user actually configured.
    """
    rows = []
    for spec in registry.fields():
        value = snapshot.get(spec.key, spec.default)
        if spec.kind == FieldKind.TEXT and not value:
            continue
        if spec.kind == FieldKind.BOOLEAN and not value:
            continue
        rows.append((spec.title, spec.label_for(value)))
    return rows
