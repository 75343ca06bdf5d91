"""Runner settings read from the environment.

A ``.env`` file in the working directory is loaded first, so settings
can live next to the learner's checkout:

    DATEKOANS_LOG_LEVEL=DEBUG
    DATEKOANS_KEEP_GOING=true
    DATEKOANS_SUITES=AboutLocalDate

Values already set in the environment win over the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def parse_log_level(raw: str) -> str:
    """Return the upper-cased level name.

    Raises:
        ValueError: If raw is not a standard logging level name.
    """
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"log level must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}"
        )
    return level


@dataclass(frozen=True)
class Settings:
    """Settings for a koan run.

    Attributes:
        log_level: Root logging level name.
        keep_going: Run every koan instead of stopping at the first
            one that does not pass.
        suites: Suite names to run; empty means all registered suites.
    """

    log_level: str = "WARNING"
    keep_going: bool = False
    suites: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Raises:
            ValueError: If a variable holds an invalid value.

        Examples:
            >>> Settings.from_env({"DATEKOANS_KEEP_GOING": "yes"}).keep_going
            True
        """
        env = os.environ if environ is None else environ

        suites_raw = env.get("DATEKOANS_SUITES", "")
        return cls(
            log_level=parse_log_level(env.get("DATEKOANS_LOG_LEVEL", "WARNING")),
            keep_going=_parse_bool(
                "DATEKOANS_KEEP_GOING", env.get("DATEKOANS_KEEP_GOING", "")
            ),
            suites=tuple(s.strip() for s in suites_raw.split(",") if s.strip()),
        )


def load_settings(dotenv_path: str | os.PathLike[str] | None = None) -> Settings:
    """Load a ``.env`` file (if any) into the environment, then read Settings.

    Args:
        dotenv_path: File to load; defaults to the nearest ``.env`` found
            from the working directory upwards.
    """
    path = dotenv_path or find_dotenv(usecwd=True)
    if path and load_dotenv(dotenv_path=path):
        logger.debug("Loaded environment from %s", path)
    return Settings.from_env()


__all__ = ["Settings", "load_settings", "parse_log_level"]
