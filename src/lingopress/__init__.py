from lingopress.app.parser import Parser, create_engine, parse, render
from lingopress.domain.errors import (
    InvalidDateError,
    InvalidMetadataError,
    LingopressError,
    RenderingError,
    UnavailableLocalizationError,
    UnimplementedError,
    UnknownEngineError,
)
from lingopress.domain.models import Author, Content
from lingopress.settings import configure, get_settings, reset_settings

__version__ = "0.1.0"

__all__ = [
    "Author",
    "Content",
    "InvalidDateError",
    "InvalidMetadataError",
    "LingopressError",
    "Parser",
    "RenderingError",
    "UnavailableLocalizationError",
    "UnimplementedError",
    "UnknownEngineError",
    "configure",
    "create_engine",
    "get_settings",
    "parse",
    "render",
    "reset_settings",
]
