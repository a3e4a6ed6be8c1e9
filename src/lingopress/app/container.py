from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from lingopress.adapters.parsing.plain_text import PlainTextEngine
from lingopress.adapters.rendering.html_pipeline import HtmlPipelineEngine
from lingopress.domain.errors import UnknownEngineError
from lingopress.ports import ParsingEngine, RenderingEngine

logger = logging.getLogger(__name__)

EngineKind = Literal["parsing", "rendering"]
EngineFactory = Callable[[], Any]


def _normalize_name(name: Any) -> str:
    # "PlainText", "plain-text" and "plain_text" name the same engine.
    text = str(name).strip()
    out = []
    for i, ch in enumerate(text):
        if ch.isupper() and i and text[i - 1].islower():
            out.append("_")
        out.append(ch.lower())
    return "".join(out).replace("-", "_")


@dataclass(slots=True)
class EngineRegistry:
    """
    Maps engine names to factories, per kind ("parsing" or "rendering").
    """
    parsing: dict[str, EngineFactory] = field(default_factory=dict)
    rendering: dict[str, EngineFactory] = field(default_factory=dict)

    def _table(self, kind: str) -> dict[str, EngineFactory]:
        if kind == "parsing":
            return self.parsing
        if kind == "rendering":
            return self.rendering
        raise UnknownEngineError(f"Unknown engine kind: {kind}")

    def register(self, name: str, factory: EngineFactory, kind: EngineKind = "parsing") -> None:
        self._table(kind)[_normalize_name(name)] = factory

    def names(self, kind: EngineKind = "parsing") -> list[str]:
        return sorted(self._table(kind))

    def create(self, name: Any, kind: EngineKind = "parsing") -> ParsingEngine | RenderingEngine:
        """
        Instantiate the engine registered under name. Objects that already
        look like an engine of that kind are returned unchanged.
        """
        table = self._table(kind)

        if not isinstance(name, str):
            method = "parse" if kind == "parsing" else "render"
            if callable(getattr(name, method, None)):
                return name
            raise UnknownEngineError(f"Unknown {kind} engine: {name!r}")

        try:
            factory = table[_normalize_name(name)]
        except KeyError:
            raise UnknownEngineError(f"Unknown {kind} engine: {name}") from None

        logger.debug("Creating %s engine %s", kind, name)
        return factory()


def build_registry() -> EngineRegistry:
    registry = EngineRegistry()
    registry.register("plain_text", PlainTextEngine, "parsing")
    registry.register("html_pipeline", HtmlPipelineEngine, "rendering")
    return registry
