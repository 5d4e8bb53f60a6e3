# passcraft/config.py
"""
Default settings for PassCraft.
Settings are not persisted: every fresh start uses DEFAULTS (length 12, all classes on).
"""

from typing import Any, Dict, Optional

from .errors import ConfigError

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "min_length": 1,
    "max_length": 25,
    "include_uppercase": True,
    "include_lowercase": True,
    "include_numbers": True,
    "include_symbols": True,
    "strength_policy": "composition",
    "notification_timeout_ms": 1000,
}

MIN_LENGTH = DEFAULTS["min_length"]
MAX_LENGTH = DEFAULTS["max_length"]


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    out = DEFAULTS.copy()
    out.update(overrides or {})
    return out


def validate_length(length: Any) -> int:
    """
    Reject lengths the generator does not accept (non-integers, or outside MIN_LENGTH..MAX_LENGTH).
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise ConfigError(f"length must be an integer, got {length!r}")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise ConfigError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}")
    return length


def clamp_length(length: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(length)))
