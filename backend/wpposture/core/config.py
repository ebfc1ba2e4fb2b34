import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseModel):
    """Transport configuration. Nothing else is read from the environment."""
    model_config = ConfigDict(frozen=True)

    timeout: float = 8.0
    probe_timeout: float = 5.0
    max_redirects: int = 3
    user_agent: str = DEFAULT_UA

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        values = {}
        for field, env, cast in (
            ("timeout", "WPPOSTURE_TIMEOUT", float),
            ("probe_timeout", "WPPOSTURE_PROBE_TIMEOUT", float),
            ("max_redirects", "WPPOSTURE_MAX_REDIRECTS", int),
            ("user_agent", "WPPOSTURE_USER_AGENT", str),
        ):
            raw = os.getenv(env)
            if not raw:
                continue
            try:
                values[field] = cast(raw)
            except ValueError:
                log.warning("ignoring %s=%r (not a valid %s)", env, raw, cast.__name__)
        return cls(**values)


class ScanOptions(BaseModel):
    """Scan tuning that is not transport configuration."""
    model_config = ConfigDict(frozen=True)

    max_plugin_candidates: int = 30
    plugin_batch_size: int = 10
