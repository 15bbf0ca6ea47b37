"""Runtime settings loaded from the environment or a local .env file."""
import logging
import os
from pathlib import Path
from threading import Lock

logger = logging.getLogger(__name__)

DEFAULT_MAX_CAPACITY = 100

_ENV_LOADED = False
_ENV_LOCK = Lock()
_KNOWN_KEYS = {"ATTENDEE_MAX_CAPACITY"}


def _load_env(env_path: Path = Path(".env")) -> None:
    """Load known settings from .env file if present."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        if env_path.exists():
            for raw_line in env_path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                if key in _KNOWN_KEYS and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


def _reset_env_cache() -> None:
    """Force the next lookup to re-read the .env file."""
    global _ENV_LOADED
    _ENV_LOADED = False


def get_int_setting(key: str, default: int) -> int:
    """
    Read a positive integer setting.

    Args:
        key: Environment variable name
        default: Value used when unset or invalid

    Returns:
        The configured integer, or default
    """
    _load_env()

    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={raw!r}, using {default}")
        return default

    if value <= 0:
        logger.warning(f"Ignoring non-positive {key}={value}, using {default}")
        return default

    return value


def get_max_capacity() -> int:
    """Attendee registry capacity (ATTENDEE_MAX_CAPACITY, default 100)."""
    return get_int_setting("ATTENDEE_MAX_CAPACITY", DEFAULT_MAX_CAPACITY)
