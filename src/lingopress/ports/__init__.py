from .html_filter import HtmlFilter
from .metadata_decoder import MetadataDecoder
from .parsing_engine import ParsingEngine
from .rendering_engine import RenderingEngine

__all__ = [
    "HtmlFilter",
    "MetadataDecoder",
    "ParsingEngine",
    "RenderingEngine",
]
