"""twilio_lite.common.config

Configuration is read from the environment only; nothing remote happens at
import time. A `.env` file (if present) is loaded first so local scripts
can keep credentials out of the shell history.

Account credentials are *not* part of `Settings`: every `Client` resolves
them on construction (explicit arguments first, then the environment), so
several clients with different accounts can live in one process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

SDK_VERSION = "0.1.0"


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    """
    Library-wide defaults read from environment variables.

    Grouped by concern: transport, routing (region/edge), logging.
    """

    # transport
    http_timeout_s: float = float(os.getenv("TWILIO_HTTP_TIMEOUT_S", "30"))
    user_agent_extensions: list[str] | None = None

    # routing; empty means "whatever the URL already says"
    region: str = os.getenv("TWILIO_REGION", "")
    edge: str = os.getenv("TWILIO_EDGE", "")

    # logging
    log_level: str = os.getenv("TWILIO_LOG_LEVEL", "INFO")
    service_name: str = os.getenv("TWILIO_SERVICE_NAME", "twilio-lite")

    def __post_init__(self) -> None:
        if self.user_agent_extensions is None:
            self.user_agent_extensions = _env_list("TWILIO_USER_AGENT_EXTENSIONS")


# Global settings instance shared by the whole library.
settings = Settings()
