"""
Runtime configuration for the agenda.

Values come from the environment (and a .env file, loaded by the entry point).

File: config.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .interface.messages import DEFAULT_LANGUAGE


@dataclass
class AgendaConfig:
    """Settings for the console agenda."""

    # Interface
    language: str = DEFAULT_LANGUAGE  # es or en

    # Logging
    log_level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("logs"))

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; names logging does not know map to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


def load_config() -> AgendaConfig:
    """Build an AgendaConfig from AGENDA_* environment variables."""
    defaults = AgendaConfig()
    return AgendaConfig(
        language=os.getenv("AGENDA_LANGUAGE", defaults.language),
        log_level=os.getenv("AGENDA_LOG_LEVEL", defaults.log_level).upper(),
        log_dir=Path(os.getenv("AGENDA_LOG_DIR", str(defaults.log_dir))),
    )
