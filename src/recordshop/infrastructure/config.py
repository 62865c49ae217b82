"""Runtime settings read from the environment.

Settings are resolved once by the composition root and passed down
explicitly; nothing else in the code base reads the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from recordshop.infrastructure.external.musicbrainz_client import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    cache_ttl_seconds: int = 60
    musicbrainz_base_url: str = DEFAULT_BASE_URL
    musicbrainz_user_agent: str = DEFAULT_USER_AGENT
    musicbrainz_timeout_seconds: float = 10.0

    @property
    def cache_ttl_ms(self) -> int:
        return self.cache_ttl_seconds * 1000

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = Settings()
        return Settings(
            data_dir=Path(env.get("RECORDSHOP_DATA_DIR", defaults.data_dir)),
            cache_ttl_seconds=_non_negative(
                env, "RECORDSHOP_CACHE_TTL_SECONDS", defaults.cache_ttl_seconds, int
            ),
            musicbrainz_base_url=env.get("MUSICBRAINZ_BASE_URL", defaults.musicbrainz_base_url),
            musicbrainz_user_agent=env.get(
                "MUSICBRAINZ_USER_AGENT", defaults.musicbrainz_user_agent
            ),
            musicbrainz_timeout_seconds=_positive(
                env, "MUSICBRAINZ_TIMEOUT_SECONDS", defaults.musicbrainz_timeout_seconds, float
            ),
        )


def _non_negative(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {raw!r}")
    return value


def _positive(env: Mapping[str, str], name: str, default, cast):
    value = _non_negative(env, name, default, cast)
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {env.get(name)!r}")
    return value
