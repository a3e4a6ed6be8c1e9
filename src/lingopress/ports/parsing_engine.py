from __future__ import annotations

from typing import Any, Mapping, Protocol, Tuple

from lingopress.domain.models import Content


class ParsingEngine(Protocol):
    """
    Turns raw documents into Content and resolves locale sections of a body.
    """

    def separate_components(self, raw: str, options: Any = None) -> Tuple[str, str]:
        ...

    def parse_metadata(self, text: str, options: Any = None) -> Mapping[str, Any]:
        ...

    def filter_content(self, content: Content | str, locales: Any = None, options: Any = None) -> str:
        ...

    def parse(self, raw: str, options: Any = None) -> Content:
        ...
