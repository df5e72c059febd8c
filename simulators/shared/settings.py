"""
Runtime Settings
================

Diagnostics configuration for the console simulators.

Values come from environment variables, optionally seeded from a ``.env``
file in the working directory. They only affect logging; prompts, results
and the fixed unit/recipe tables are never configurable.

Variables
---------
SIMULATORS_LOG_LEVEL
    Logging level name (default ``WARNING``)
SIMULATORS_LOG_FORMAT
    ``logging`` format string
"""

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    """Settings shared by both simulators."""
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_environment(cls, dotenv: bool = True) -> "Settings":
        """
        Load settings from environment variables.

        Args:
            dotenv: Also read a ``.env`` file (existing variables win)
        """
        if dotenv:
            load_dotenv()

        level = os.environ.get("SIMULATORS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL

        return cls(
            log_level=level,
            log_format=os.environ.get("SIMULATORS_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


def configure_logging(settings: Settings) -> None:
    """Route log records to stderr so stdout only carries the dialogue."""
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        stream=sys.stderr,
    )
