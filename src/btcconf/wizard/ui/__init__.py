"""Terminal UI implementations of the wizard prompter."""

from btcconf.wizard.ui.rich_wizard import RichWizardPrompter

__all__ = ["RichWizardPrompter"]
