from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from lingopress.utils.coerce import to_flat_array

_SCALARS = (str, int, float, bool)


def json_sanitize(x: Any) -> Any:
    """
    Make a value safe for json.dumps.

    - entities (anything with as_dict()) -> their dict
    - datetime/date -> ISO-8601 string
    - mappings, CaseInsensitiveDict included -> plain dict with str keys
    - list/tuple -> list, set -> sorted list
    - anything else -> str(x)
    """
    if x is None or isinstance(x, _SCALARS):
        return x

    as_dict = getattr(x, "as_dict", None)
    if callable(as_dict):
        return as_dict()

    if isinstance(x, (datetime, date)):
        return x.isoformat()

    if isinstance(x, Mapping):
        return {str(k): json_sanitize(v) for k, v in x.items()}

    if isinstance(x, (list, tuple)):
        return [json_sanitize(v) for v in x]

    if isinstance(x, (set, frozenset)):
        return [json_sanitize(v) for v in sorted(x, key=str)]

    return str(x)


def is_present(value: Any) -> bool:
    """False for None, blank strings and empty collections."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple, set)):
        return len(value) > 0
    return True


def serialize_fields(
    target: Any,
    keys: list[str],
    *,
    exclude: Any = None,
    exclude_empty: bool = False,
) -> dict[str, Any]:
    """
    Build a JSON-safe dict out of the given attributes of target, skipping
    the excluded keys and, if exclude_empty, the blank values.
    """
    skipped = set(to_flat_array(exclude))
    out: dict[str, Any] = {}
    for key in keys:
        if key in skipped:
            continue
        value = getattr(target, key)
        if exclude_empty and not is_present(value):
            continue
        out[key] = json_sanitize(value)
    return out
