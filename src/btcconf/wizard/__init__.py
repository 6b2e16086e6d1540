"""
btcconf configuration wizard.

This package provides both the core logic (session state, the wizard loop)
and the terminal UI implementation of the prompter.
"""

from btcconf.wizard.core import (
    Prompter,
    Wizard,
    WizardResult,
    WizardStatus,
    summarize_snapshot,
    visible_groups,
)
from btcconf.wizard.session import SessionState

__all__ = [
    "Prompter",
    "Wizard",
    "WizardResult",
    "WizardStatus",
    "summarize_snapshot",
    "visible_groups",
    "SessionState",
]
