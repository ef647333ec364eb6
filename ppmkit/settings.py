from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV_VAR = "PPMKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass
class PipelineSettings:
    log_level: str = DEFAULT_LOG_LEVEL
    show: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineSettings":
        if environ is None:
            environ = os.environ
        level = environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
        return cls(log_level=level or DEFAULT_LOG_LEVEL)

    @property
    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if isinstance(level, int):
            return level
        return logging.WARNING


def setup_logging(settings: PipelineSettings) -> None:
    logging.basicConfig(level=settings.numeric_log_level, format=LOG_FORMAT)
