"""Application settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from a .env file, if any


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    currency: str = "USD"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            log_level=os.getenv("STOCKROOM_LOG_LEVEL", "WARNING"),
            currency=os.getenv("STOCKROOM_CURRENCY", "USD"),
        )


settings = Settings.from_env()
