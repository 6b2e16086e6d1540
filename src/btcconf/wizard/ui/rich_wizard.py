"""
Rich/questionary UI implementation for the configuration wizard.

This module implements the Prompter contract with questionary prompts and
rich panels, so the wizard core never touches the terminal directly.
Esc cancels any prompt, and q cancels a yes/no or list prompt; both end
the wizard the same way Ctrl-C does.
"""

from typing import Any

import questionary
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from questionary import Choice, Question, Style
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from btcconf.fields.models import FieldKind, FieldSpec, Group
from btcconf.wizard.core import Prompter

# Custom style for questionary prompts
custom_style = Style(
    [
        ("qmark", "fg:#7571f9 bold"),  # Question mark
        ("question", "bold"),  # Question text
        ("answer", "fg:#02bf87 bold"),  # User's answer
        ("pointer", "fg:#7571f9 bold"),  # Selection pointer
        ("highlighted", "fg:#7571f9 bold"),  # Highlighted choice
        ("selected", "fg:#02bf87"),  # Selected choice
        ("instruction", "fg:#6c6c6c"),  # Instructions
        ("text", ""),  # Plain text
    ]
)


def cancel_bindings(quit_key: bool = False) -> KeyBindings:
    """Key bindings that abort a prompt the way Ctrl-C does."""
    kb = KeyBindings()

    def cancel(event):
        event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

    kb.add("escape", eager=True)(cancel)
    if quit_key:
        kb.add("q", eager=True)(cancel)
    return kb


class RichWizardPrompter(Prompter):
    """Terminal prompter built on questionary and rich.

    Extra keyword arguments (such as ``input`` and ``output``) are passed to
    every questionary prompt.
    """

    def __init__(self, console: Console | None = None, **prompt_kwargs: Any):
        self.console = console or Console()
        self.prompt_kwargs = prompt_kwargs

    def begin_group(self, group: Group, index: int, total: int) -> None:
        self.console.print()
        body = f"[bold]{escape(group.title)}[/bold]"
        if group.note:
            body += f"\n\n[dim]{escape(group.note)}[/dim]"
        self.console.print(
            Panel.fit(body, title=f"Step {index}", title_align="left", border_style="#7571f9")
        )

    def ask(self, field: FieldSpec, current: Any) -> Any | None:
        if field.description:
            self.console.print(f"[dim]{escape(field.description)}[/dim]")

        if field.kind == FieldKind.BOOLEAN:
            question = questionary.confirm(
                field.title,
                default=bool(current),
                style=custom_style,
                **self.prompt_kwargs,
            )
            return self._ask(question, quit_key=True)

        if field.kind == FieldKind.CHOICE:
            question = questionary.select(
                field.title,
                choices=[Choice(title=c.label, value=c.value) for c in field.choices],
                default=current if current in field.choice_values else None,
                style=custom_style,
                use_indicator=True,
                **self.prompt_kwargs,
            )
            return self._ask(question, quit_key=True)

        question = questionary.text(
            field.title,
            default=str(current or ""),
            style=custom_style,
            **self.prompt_kwargs,
        )
        return self._ask(question)

    def show_error(self, field: FieldSpec, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @staticmethod
    def _ask(question: Question, quit_key: bool = False) -> Any | None:
        # questionary turns the KeyboardInterrupt into a None answer
        app = question.application
        app.key_bindings = merge_key_bindings(
            [app.key_bindings or KeyBindings(), cancel_bindings(quit_key)]
        )
        return question.ask()
