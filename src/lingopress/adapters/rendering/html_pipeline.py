from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from lingopress.adapters.rendering.base import BaseRenderingEngine
from lingopress.adapters.rendering.filters.autolink import autolink_filter
from lingopress.adapters.rendering.filters.emoji import emoji_filter
from lingopress.adapters.rendering.filters.image_max_width import image_max_width_filter
from lingopress.adapters.rendering.filters.markdown_filter import markdown_filter
from lingopress.adapters.rendering.filters.table_of_contents import table_of_contents_filter
from lingopress.app.options import RenderingOptions
from lingopress.domain.errors import RenderingError, UnavailableLocalizationError
from lingopress.domain.models import Content
from lingopress.ports import HtmlFilter
from lingopress.settings import get_settings
from lingopress.utils.coerce import to_flat_array

logger = logging.getLogger(__name__)

FILTERS: dict[str, HtmlFilter] = {
    "markdown": markdown_filter,
    "kramdown": markdown_filter,
    "table_of_contents": table_of_contents_filter,
    "autolink": autolink_filter,
    "emoji": emoji_filter,
    "image_max_width": image_max_width_filter,
}

DEFAULT_PIPELINE: list[list[str]] = [
    ["markdown"],
    ["table_of_contents", "toc"],
    ["autolink", "links"],
    ["emoji"],
    ["image_max_width"],
]

DEFAULT_OPTIONS: dict[str, Any] = {"gfm": True, "asset_root": "/"}


def find_filter(name: Any) -> HtmlFilter:
    if callable(name):
        return name
    try:
        return FILTERS[str(name)]
    except KeyError:
        raise ValueError(f"Unknown pipeline filter: {name}") from None


class Pipeline:
    """
    Runs a document through filters in order.

    Each filter gets the output of the previous one plus the shared context
    and result; the final document is result["output"].
    """

    def __init__(self, filters: list[HtmlFilter], context: Optional[Mapping[str, Any]] = None) -> None:
        self.filters = filters
        self.context = dict(context or {})

    def call(self, text: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        doc = text
        for f in self.filters:
            doc = f(doc, self.context, result)
        result["output"] = doc
        return result


class HtmlPipelineEngine(BaseRenderingEngine):
    """
    Renders the locale-filtered body of a content to HTML through a pipeline
    of filters.

    default_pipeline is a list of entries [filter_name, shortcut]: an option
    named after the shortcut (or after the filter when the entry has a single
    name) set to false drops that filter, e.g. render(c, {"toc": False}).
    """

    name = "html_pipeline"

    def __init__(self) -> None:
        self._default_pipeline: Optional[list[list[str]]] = None
        self._default_options: Optional[dict[str, Any]] = None

    @property
    def default_pipeline(self) -> list[list[str]]:
        if self._default_pipeline is None:
            return [list(entry) for entry in DEFAULT_PIPELINE]
        return self._default_pipeline

    @default_pipeline.setter
    def default_pipeline(self, value: Any) -> None:
        if value is None:
            self._default_pipeline = []
            return
        entries = value if isinstance(value, (list, tuple)) else [value]
        self._default_pipeline = [to_flat_array(entry, dedup=False) for entry in entries]

    @property
    def default_options(self) -> dict[str, Any]:
        if self._default_options is None:
            return dict(DEFAULT_OPTIONS)
        return self._default_options

    @default_options.setter
    def default_options(self, value: Any) -> None:
        self._default_options = dict(value) if isinstance(value, Mapping) else {}

    def render(
        self,
        content: Content | str,
        options: Any = None,
        context: Mapping[str, Any] | None = None,
    ) -> str:
        options = RenderingOptions.coerce(options)

        try:
            pipeline = self.create_pipeline(options, context)
            return str(pipeline.call(self._get_body(content, options))["output"])
        except UnavailableLocalizationError:
            raise
        except Exception as e:
            raise RenderingError(str(e)) from e

    def _get_body(self, content: Content | str, options: RenderingOptions) -> str:
        if not isinstance(content, Content):
            content = Content.create(None, content)

        locales = options.requested_locales()
        if locales is None:
            locales = get_settings().locale
        return content.get_body(locales)

    def get_pipeline(self, options: RenderingOptions) -> list[str]:
        if options.pipeline is not None:
            names = [str(n) if not callable(n) else n for n in options.pipeline]
        else:
            names = [entry[0] for entry in self.default_pipeline if entry]

        for entry in self.default_pipeline:
            if entry and not options.is_enabled(entry[-1]):
                names = [n for n in names if n != entry[0]]

        return names

    def create_pipeline(self, options: RenderingOptions, context: Mapping[str, Any] | None = None) -> Pipeline:
        names = self.get_pipeline(options)
        filter_context = {**self.default_options, **options.pipeline_options, **dict(context or {})}

        logger.debug("Rendering pipeline: %s", names)
        return Pipeline([find_filter(n) for n in names], filter_context)
