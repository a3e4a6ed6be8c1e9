from __future__ import annotations

from typing import Any, Mapping

from lingopress.domain.errors import UnimplementedError
from lingopress.domain.models import Content


class BaseRenderingEngine:
    name = "base"

    def render(
        self,
        content: Content | str,
        options: Any = None,
        context: Mapping[str, Any] | None = None,
    ) -> str:
        raise UnimplementedError(f"{type(self).__name__}.render")
