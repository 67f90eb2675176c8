"""
Value coercer: turns a raw driver value into a JSON value without knowing
the column's declared type. Probes run in a fixed order and the first hit
wins: str, 32-bit int, 64-bit int, bool, naive timestamp. Anything else is null.
"""
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class RawJson:
    """Undecoded json/jsonb text. No probe accepts it, so it coerces to null."""
    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __repr__(self):
        return f"RawJson({self.text!r})"


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_int(value: Any, lo: int, hi: int) -> Optional[int]:
    # bool is an int subclass; it must reach the bool probe
    if isinstance(value, int) and not isinstance(value, bool) and lo <= value <= hi:
        return value
    return None


def _as_int32(value: Any) -> Optional[int]:
    return _as_int(value, INT32_MIN, INT32_MAX)


def _as_int64(value: Any) -> Optional[int]:
    return _as_int(value, INT64_MIN, INT64_MAX)


def _as_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _as_naive_timestamp(value: Any) -> Optional[str]:
    if not isinstance(value, datetime) or value.tzinfo is not None:
        return None
    # fraction trimmed to 0, 3 or 6 digits
    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return value.isoformat(sep=" ", timespec=timespec)


PROBES: tuple[Callable[[Any], Any], ...] = (
    _as_str,
    _as_int32,
    _as_int64,
    _as_bool,
    _as_naive_timestamp,
)


def coerce(value: Any) -> Any:
    """Return the first successful probe result, or None."""
    for probe in PROBES:
        result = probe(value)
        if result is not None:
            return result
    return None


def coerce_row(keys: Sequence[str], values: Sequence[Any]) -> dict[str, Any]:
    return {key: coerce(value) for key, value in zip(keys, values)}
