from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional

from lingopress.app.container import EngineKind, EngineRegistry, build_registry
from lingopress.app.options import ParsingOptions, RenderingOptions
from lingopress.domain.models import Content
from lingopress.settings import get_settings


class Parser:
    """
    Entry point: picks engines by name and forwards parse/render to them.

    Engines default to the configured parsing_engine/rendering_engine.
    """

    _instance: ClassVar[Optional["Parser"]] = None

    def __init__(self, registry: Optional[EngineRegistry] = None) -> None:
        self.registry = registry or build_registry()

    @classmethod
    def instance(cls, force: bool = False) -> "Parser":
        if force or cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_engine(self, name: Any, kind: EngineKind = "parsing") -> Any:
        return self.registry.create(name, kind)

    def parse(self, raw: str, options: Any = None) -> Content:
        options = ParsingOptions.coerce(options)
        engine = self.create_engine(options.engine or get_settings().parsing_engine, "parsing")
        return engine.parse(raw, options)

    def render(self, content: Content | str, options: Any = None, context: Mapping[str, Any] | None = None) -> str:
        options = RenderingOptions.coerce(options)
        engine = self.create_engine(options.engine or get_settings().rendering_engine, "rendering")
        return engine.render(content, options, context or {})


def parse(raw: str, options: Any = None) -> Content:
    return Parser.instance().parse(raw, options)


def render(content: Content | str, options: Any = None, context: Mapping[str, Any] | None = None) -> str:
    return Parser.instance().render(content, options, context)


def create_engine(name: Any, kind: EngineKind = "parsing") -> Any:
    return Parser.instance().create_engine(name, kind)
