"""Allow running the wizard with ``python -m btcconf``."""

from btcconf.cli.app import app

if __name__ == "__main__":
    app()
