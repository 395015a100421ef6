"""Application settings, read from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Self

ENV_PREFIX = "TICTACTOE_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean.")


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./tictactoe.db"
    db_echo: bool = False
    log_level: str = "INFO"
    # How many games the history shows when the caller does not ask for a specific amount
    history_page_size: int = 10

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Self:
        """Any setting not present in the environment keeps its default."""
        env = os.environ if environ is None else environ
        defaults = cls()
        page_size = int(
            env.get(f"{ENV_PREFIX}HISTORY_PAGE_SIZE", defaults.history_page_size)
        )
        if page_size < 1:
            raise ValueError(f"History page size must be positive, got {page_size}.")
        return cls(
            database_url=env.get(f"{ENV_PREFIX}DATABASE_URL", defaults.database_url),
            db_echo=_env_bool(env.get(f"{ENV_PREFIX}DB_ECHO", str(defaults.db_echo))),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            history_page_size=page_size,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
