"""
Runtime configuration for the CropAI advisory service.
Values come from environment variables and are exposed through a FastAPI dependency.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_SIMULATED_DELAY_SECONDS = 1.0
DEFAULT_LOG_LEVEL = "INFO"


def _parse_delay(raw: str) -> float:
    try:
        delay = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid CROPAI_SIMULATED_DELAY_SECONDS={raw!r}, using {DEFAULT_SIMULATED_DELAY_SECONDS}")
        return DEFAULT_SIMULATED_DELAY_SECONDS
    if delay < 0 or delay != delay or delay == float("inf"):
        logger.warning(f"Invalid CROPAI_SIMULATED_DELAY_SECONDS={raw!r}, using {DEFAULT_SIMULATED_DELAY_SECONDS}")
        return DEFAULT_SIMULATED_DELAY_SECONDS
    return delay


def _parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Service settings."""
    simulated_delay_seconds: float = DEFAULT_SIMULATED_DELAY_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        simulated_delay_seconds=_parse_delay(
            os.environ.get("CROPAI_SIMULATED_DELAY_SECONDS", str(DEFAULT_SIMULATED_DELAY_SECONDS))
        ),
        log_level=os.environ.get("CROPAI_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        cors_origins=_parse_origins(os.environ.get("CROPAI_CORS_ORIGINS", "*")),
    )
