"""
CLI module for btcconf.

Contains the Typer application (btcconf.cli.app) and output helpers.
"""
