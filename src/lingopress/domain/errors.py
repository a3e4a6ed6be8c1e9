class LingopressError(Exception):
    """Base error for lingopress."""


class InvalidMetadataError(LingopressError):
    """The metadata block is present but cannot be decoded into a mapping."""


class InvalidDateError(LingopressError):
    pass


class UnavailableLocalizationError(LingopressError):
    """The content is not available in any of the requested locales."""


class UnknownEngineError(LingopressError):
    pass


class UnimplementedError(LingopressError):
    """An abstract engine method was called without being overridden."""


class RenderingError(LingopressError):
    pass
