from __future__ import annotations

from typing import Any, Mapping, Protocol

from lingopress.domain.models import Content


class RenderingEngine(Protocol):
    """
    Renders a Content (or a plain string) into an output format.
    """

    def render(
        self,
        content: Content | str,
        options: Any = None,
        context: Mapping[str, Any] | None = None,
    ) -> str:
        ...
