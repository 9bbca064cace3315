# ajax_utils/settings.py - environment-driven defaults for the ajax client
import os
from typing import Optional

# ---------------- CONFIG ----------------
DEFAULT_BASE_URL = ""
DEFAULT_LOG_LEVEL = "INFO"


def base_url() -> str:
    return os.environ.get("AJAX_BASE_URL", DEFAULT_BASE_URL)


def timeout_ms() -> Optional[int]:
    """
    Timeout in milliseconds from AJAX_TIMEOUT_MS.
    Blank or unset means no timeout (the transport default applies).
    """
    raw = os.environ.get("AJAX_TIMEOUT_MS", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"AJAX_TIMEOUT_MS must be an integer, got {raw!r}") from None


def log_level() -> str:
    return os.environ.get("AJAX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
