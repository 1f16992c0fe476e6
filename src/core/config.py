"""Runtime configuration, read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Self

ENV_PREFIX = "GAME_TESTING_"


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./game_testing.db"
    echo_sql: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/game_testing"

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from GAME_TESTING_* variables, falling back to the defaults above."""
        defaults = cls()
        return cls(
            database_url=os.environ.get(
                f"{ENV_PREFIX}DATABASE_URL", defaults.database_url
            ),
            echo_sql=_env_flag(
                os.environ.get(f"{ENV_PREFIX}ECHO_SQL", str(defaults.echo_sql))
            ),
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
            api_prefix=os.environ.get(f"{ENV_PREFIX}API_PREFIX", defaults.api_prefix),
        )


def configure_logging(settings: Settings) -> None:
    """Root logger setup. basicConfig is a no-op if handlers are already installed."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
