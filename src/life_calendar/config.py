"""Runtime settings read from the environment (and an optional ``.env`` file)."""

import os
from dataclasses import dataclass, field
from typing import Mapping

from .constants import DEFAULT_LIFE_EXPECTANCY
from .themes import DEFAULT_THEME_NAME


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    port: int = 3000
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"
    cors_origins: tuple[str, ...] = field(default=("*",))
    cache_max_age: int = 3600  # seconds, for Cache-Control on rendered images
    default_life_expectancy: int = DEFAULT_LIFE_EXPECTANCY
    default_theme: str = DEFAULT_THEME_NAME
    layout_tolerance: float = 0.0  # pixels a grid may overflow its drawing area

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Call ``dotenv.load_dotenv()`` first to pick up a ``.env`` file.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if env is None else env
        origins = env.get("CORS_ORIGINS", "*")
        return cls(
            port=_env_int(env, "PORT", 3000),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_format=env.get("LOG_FORMAT", "text").lower(),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            cache_max_age=_env_int(env, "CACHE_MAX_AGE", 3600),
            default_life_expectancy=_env_int(
                env, "DEFAULT_LIFE_EXPECTANCY", DEFAULT_LIFE_EXPECTANCY
            ),
            default_theme=env.get("DEFAULT_THEME", DEFAULT_THEME_NAME),
            layout_tolerance=_env_float(env, "LAYOUT_TOLERANCE", 0.0),
        )
