from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from lingopress.adapters.parsing.base import BaseParsingEngine
from lingopress.adapters.parsing.scanner import SectionScanner, flatten
from lingopress.adapters.parsing.yaml_decoder import YamlMetadataDecoder
from lingopress.app.options import ParsingOptions
from lingopress.domain.errors import InvalidMetadataError
from lingopress.domain.models import Content
from lingopress.domain.schema import DEFAULT_CONTENT_TAGS
from lingopress.ports import MetadataDecoder
from lingopress.utils.coerce import to_string_or_empty
from lingopress.utils.parsing import sanitize_tags, split_components

logger = logging.getLogger(__name__)


class PlainTextEngine(BaseParsingEngine):
    """
    Documents made of a metadata block between marker tags followed by a body,
    e.g.

        {{metadata}}
        title: Hello
        {{/metadata}}
        Body, with {{content: it}}italian only{{/content}} sections.
    """

    name = "plain_text"

    def __init__(self, decoder: Optional[MetadataDecoder] = None) -> None:
        self.decoder = decoder or YamlMetadataDecoder()

    def separate_components(self, raw: str, options: Any = None) -> Tuple[str, str]:
        options = ParsingOptions.coerce(options)
        return split_components(raw, options.meta_tags)

    def parse_metadata(self, text: str, options: Any = None) -> Any:
        """
        Decode the metadata text into a mapping. Blank text gives {}.

        On a decode failure (or a result that is not a mapping) options.default
        is returned when given, otherwise InvalidMetadataError is raised.
        """
        options = ParsingOptions.coerce(options)
        text = to_string_or_empty(text)
        if not text.strip():
            return {}

        try:
            rv = self.decoder.decode(text)
        except Exception as e:
            return self._fallback(options, str(e), e)

        if rv is None:
            return {}
        if not isinstance(rv, Mapping):
            return self._fallback(options, f"Metadata must be a mapping, got {type(rv).__name__}")
        return rv

    def _fallback(self, options: ParsingOptions, message: str, cause: Optional[Exception] = None) -> Any:
        if options.default is not None:
            logger.warning("Invalid metadata, using default: %s", message)
            return options.default
        raise InvalidMetadataError(message) from cause

    def filter_content(self, content: Content | str, locales: Any = None, options: Any = None) -> str:
        """
        Return the body keeping only the sections visible in locales
        (default: the configured locale; "*" keeps everything).

        Raises UnavailableLocalizationError if the content itself is not
        available in any of the locales.
        """
        options = ParsingOptions.coerce(options)
        if not isinstance(content, Content):
            content = Content.create(None, content)

        locales = Content.validate_locales(locales, content)
        start_tag, end_tag = sanitize_tags(options.content_tags, DEFAULT_CONTENT_TAGS)

        segments = SectionScanner(start_tag, end_tag).scan(content.body.strip())
        return flatten(segments, locales)
