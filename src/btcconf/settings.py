"""
Runtime settings for btcconf.

The wizard takes no environment variables or command line options; these
are the fixed defaults it runs with, kept in one validated model so tests
can override them.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from btcconf.fields.catalog import DEFAULT_CATALOG_PATH
from btcconf.render.renderer import DEFAULT_TEMPLATE

OUTPUT_FILENAME = "bitcoin.conf"


class WizardSettings(BaseModel):
    """Settings for one wizard run."""

    model_config = ConfigDict(extra="forbid")

    output_path: Path = Field(default=Path(OUTPUT_FILENAME))
    template_name: str = DEFAULT_TEMPLATE
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
