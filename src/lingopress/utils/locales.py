from __future__ import annotations

import re
from typing import Any

from lingopress.utils.coerce import to_flat_array, to_string_or_empty

_COMPOUND_KEY_RE = re.compile(r"\s*,\s*")


def split_compound_key(key: Any) -> list[str]:
    """
    Split a compound locale key like "it, es" into its tokens.
    """
    parts = _COMPOUND_KEY_RE.split(to_string_or_empty(key).strip())
    return [p.strip() for p in parts if p.strip()]


def normalize_locales(value: Any) -> list[str]:
    """
    Normalize scalars, nested sequences or comma-joined strings into a flat,
    trimmed, deduplicated list of locale tokens (first-seen order).
    """
    return to_flat_array(value, dedup=True, compact=True, splitter=split_compound_key)
