# config.py
import os
from dotenv import load_dotenv

load_dotenv(".env.dev")


def _get_deep_link_scheme() -> str:
    """Custom URI scheme registered by the mobile app."""
    scheme = os.getenv("DEEP_LINK_SCHEME", "com.namecard.app").strip()
    if not scheme:
        raise EnvironmentError("DEEP_LINK_SCHEME must not be empty")
    return scheme


def _get_fallback_delay_ms() -> int:
    """
    Milliseconds before the fallback button is shown.
    Must be a non-negative integer.
    """
    raw = os.getenv("FALLBACK_DELAY_MS", "2000")
    try:
        value = int(raw)
    except ValueError:
        raise EnvironmentError(f"FALLBACK_DELAY_MS must be an integer, got {raw!r}")

    if value < 0:
        raise EnvironmentError(f"FALLBACK_DELAY_MS must not be negative, got {value}")
    return value


DEEP_LINK_SCHEME = _get_deep_link_scheme()
APP_NAME = os.getenv("APP_NAME", "Mapae")
FALLBACK_DELAY_MS = _get_fallback_delay_ms()
