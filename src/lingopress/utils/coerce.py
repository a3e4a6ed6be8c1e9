from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Callable, Optional

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


class CaseInsensitiveDict(MutableMapping):
    """
    A mapping with string keys matched without regard to case.

    The key used on first insertion is the one reported by iteration, so
    compound locale keys like "it,es" survive a round trip unchanged.
    """

    def __init__(self, data: Optional[Mapping[Any, Any] | Iterable[tuple[Any, Any]]] = None, **kwargs: Any) -> None:
        self._store: dict[str, tuple[str, Any]] = {}
        self.update(data or {}, **kwargs)

    @staticmethod
    def _fold(key: Any) -> str:
        return str(key).lower()

    def __setitem__(self, key: Any, value: Any) -> None:
        folded = self._fold(key)
        original = self._store[folded][0] if folded in self._store else str(key)
        self._store[folded] = (original, value)

    def __getitem__(self, key: Any) -> Any:
        return self._store[self._fold(key)][1]

    def __delitem__(self, key: Any) -> None:
        del self._store[self._fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def copy(self) -> "CaseInsensitiveDict":
        return CaseInsensitiveDict(self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


def to_string_or_empty(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _flatten(value: Any) -> Iterator[Any]:
    if isinstance(value, _SEQUENCE_TYPES):
        for item in value:
            yield from _flatten(item)
    else:
        yield value


def to_flat_array(
    value: Any,
    *,
    dedup: bool = True,
    compact: bool = True,
    splitter: Optional[Callable[[str], list[str]]] = None,
) -> list[str]:
    """
    Flatten any scalar or nested sequence into a list of trimmed strings.

    - None entries are dropped when compact, otherwise they become ""
    - splitter (e.g. a comma split) is applied to every string after flattening
    - compact also drops empty strings
    - dedup keeps the first occurrence
    """
    out: list[str] = []
    seen: set[str] = set()

    for item in _flatten(value):
        if item is None and compact:
            continue

        text = to_string_or_empty(item).strip()
        parts = splitter(text) if splitter else [text]

        for part in parts:
            part = part.strip()
            if compact and not part:
                continue
            if dedup:
                if part in seen:
                    continue
                seen.add(part)
            out.append(part)

    return out


def to_case_insensitive_map(value: Any, sanitizer: Optional[Callable[[Any], Any]] = None) -> CaseInsensitiveDict:
    """
    Deep-convert a mapping into CaseInsensitiveDict instances.

    Nested mappings (also inside lists) are converted as well. When a sanitizer
    is given it receives every non-mapping value as a whole.
    Non-mapping input gives an empty map.
    """
    if not isinstance(value, Mapping):
        return CaseInsensitiveDict()

    def convert(v: Any) -> Any:
        if isinstance(v, Mapping):
            return CaseInsensitiveDict((str(k), convert(x)) for k, x in v.items())
        if sanitizer is not None:
            return sanitizer(v)
        if isinstance(v, (list, tuple)):
            return [convert(x) for x in v]
        return v

    return convert(value)
