from __future__ import annotations
import os


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def get_strict_unbound(default: bool = False) -> bool:
    """Whether reading an unbound variable is an error (EZSCHEME_STRICT_UNBOUND)."""
    return flag_from_env('EZSCHEME_STRICT_UNBOUND', default)


def get_trace_enabled(default: bool = False) -> bool:
    return flag_from_env('EZSCHEME_TRACE', default)
