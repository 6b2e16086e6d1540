"""
Main Typer application for the btcconf CLI.

Running ``btcconf`` starts the interactive wizard and writes bitcoin.conf
to the current directory once every step is answered.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from btcconf import __version__
from btcconf.cli.output import (
    console,
    highlight,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_summary,
    print_warning,
)
from btcconf.fields.catalog import load_field_registry
from btcconf.fields.exceptions import FieldError
from btcconf.render.exceptions import RenderError
from btcconf.render.renderer import ConfigRenderer, write_config
from btcconf.settings import WizardSettings
from btcconf.wizard.core import Prompter, Wizard, summarize_snapshot
from btcconf.wizard.ui.rich_wizard import RichWizardPrompter

logger = logging.getLogger(__name__)

# Shown when the data directory was left blank
DEFAULT_DATADIR = "~/.bitcoin (the bitcoind default)"

app = typer.Typer(
    name="btcconf",
    help="Generate a Bitcoin Core bitcoin.conf with an interactive wizard.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"btcconf version {__version__}")
        raise typer.Exit()


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# noinspection PyUnusedLocal
@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold blue]btcconf[/bold blue] - Bitcoin Core configuration wizard

    Walks through the daemon options step by step and writes
    [bold]bitcoin.conf[/bold] to the current directory.
    Press Esc or Ctrl-C at any prompt to quit without writing anything.
    """
    settings = WizardSettings()
    setup_logging(settings.log_level)

    exit_code = run_wizard(settings)
    if exit_code:
        raise typer.Exit(exit_code)


def run_wizard(settings: WizardSettings, prompter: Prompter | None = None) -> int:
    """
    Run the wizard and write the config file.

    Returns:
        Process exit code: 0 on success or cancellation, 1 on failure.
    """
    try:
        registry = load_field_registry(settings.catalog_path)
        renderer = ConfigRenderer(registry, settings.template_name)
    except (FieldError, RenderError) as e:
        logger.error(f"Cannot start wizard: {e}")
        print_error(f"Cannot start wizard: {e}")
        return 1

    _print_welcome()

    wizard = Wizard(registry, prompter or RichWizardPrompter(console))
    result = wizard.run()

    if not result.completed:
        console.print()
        print_warning("Setup cancelled. No configuration was written.")
        return 0

    snapshot = result.snapshot
    console.print()
    print_summary(summarize_snapshot(registry, snapshot), title="Current Config")

    try:
        text = renderer.render(snapshot)
        path = write_config(text, settings.output_path)
    except RenderError as e:
        logger.error(f"Failed to write configuration: {e}")
        print_error(f"Failed to write configuration: {e}")
        return 1

    print_success(f"Configuration saved to {path}")
    _print_completed(registry.get_field("chain").label_for(snapshot["chain"]), snapshot["datadir"])
    return 0


def _print_welcome() -> None:
    console.print()
    print_panel(
        "[bold]Bitcoin Core Configuration[/bold]\n\n"
        "This wizard will walk you through the most common bitcoind options\n"
        "and write a bitcoin.conf file to the current directory.",
    )


def _print_completed(network: str, datadir: str) -> None:
    print_panel(
        f"You've successfully generated a {highlight('bitcoin.conf')} configuration "
        f"file for Bitcoin Core on the {highlight(network)} network.\n\n"
        f"You should copy this file to the data directory: "
        f"{highlight(datadir or DEFAULT_DATADIR)}\n\n"
        "The configuration file lists every option the wizard covers, with comments "
        "to help you make sense of them. Read them carefully before making changes.\n\n"
        "If you want to start over, you can always generate an example configuration "
        f"with the {highlight('contrib/devtools/gen-bitcoin-conf.sh')} script in the "
        "bitcoin repository.",
        title="Done",
    )
