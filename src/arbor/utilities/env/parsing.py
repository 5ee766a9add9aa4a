import os
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

TRUE_FLAG_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_FLAG_VALUES = frozenset({"false", "0", "no", "off"})


def _env_value(env_var: str) -> str | None:
    """Return the stripped value of ``env_var``; blank counts as unset."""

    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return None
    return value.strip()


def _convert(env_var: str, value: str, parse: Callable[[str], T], kind: str) -> T:
    try:
        return parse(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}, got {value!r}") from exc


def _env_flag(env_var: str, *, default: bool) -> bool:
    value = _env_value(env_var)
    if value is None:
        return default
    token = value.lower()
    if token in TRUE_FLAG_VALUES:
        return True
    if token in FALSE_FLAG_VALUES:
        return False
    raise ValueError(f"{env_var} must be a boolean flag, got {value!r}")


def _env_optional_int(env_var: str) -> int | None:
    value = _env_value(env_var)
    if value is None:
        return None
    return _convert(env_var, value, int, "an integer")


def _env_int(env_var: str, *, default: int, minimum: int) -> int:
    """Return ``env_var`` as an integer no smaller than ``minimum``."""

    parsed = _env_optional_int(env_var)
    if parsed is None:
        return default
    if parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}, got {parsed}")
    return parsed


def _env_float(env_var: str, *, default: float) -> float:
    value = _env_value(env_var)
    if value is None:
        return default
    return _convert(env_var, value, float, "a number")
