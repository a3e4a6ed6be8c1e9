from __future__ import annotations

import logging
from typing import Any, Mapping, Tuple

from lingopress.app.options import ParsingOptions
from lingopress.domain.errors import UnimplementedError
from lingopress.domain.models import Content

logger = logging.getLogger(__name__)


class BaseParsingEngine:
    """
    Skeleton of a parsing engine.

    Subclasses implement separate_components, parse_metadata and
    filter_content; parse chains them into a Content.
    """

    name = "base"

    def separate_components(self, raw: str, options: Any = None) -> Tuple[str, str]:
        raise UnimplementedError(f"{type(self).__name__}.separate_components")

    def parse_metadata(self, text: str, options: Any = None) -> Mapping[str, Any]:
        raise UnimplementedError(f"{type(self).__name__}.parse_metadata")

    def filter_content(self, content: Content | str, locales: Any = None, options: Any = None) -> str:
        raise UnimplementedError(f"{type(self).__name__}.filter_content")

    def parse(self, raw: str, options: Any = None) -> Content:
        options = ParsingOptions.coerce(options)

        metadata_text, body = self.separate_components(raw, options)
        metadata = self.parse_metadata(metadata_text, options) if options.metadata else {}
        if not options.content:
            body = ""

        keys = len(metadata) if isinstance(metadata, Mapping) else 0
        logger.debug("%s parsed %d metadata keys, %d body chars", self.name, keys, len(body))
        return Content.create(metadata, body)
