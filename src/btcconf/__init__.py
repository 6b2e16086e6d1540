"""
btcconf - Bitcoin Core configuration wizard

An interactive terminal wizard that walks through grouped prompts and
renders the answers into a bitcoin.conf file.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("btcconf")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]
