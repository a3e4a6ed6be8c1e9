from __future__ import annotations

from typing import Annotated, Any, Mapping, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

_TRUTHY = {"1", "true", "yes", "y", "on"}


def loose_bool(value: Any) -> bool:
    """True, 1, "1", "true", "yes", "on" are true. Anything else is false."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    return str(value).strip().lower() in _TRUTHY


LooseBool = Annotated[bool, BeforeValidator(loose_bool)]
LooseMapping = Annotated[
    dict[str, Any],
    BeforeValidator(lambda v: {str(k): x for k, x in v.items()} if isinstance(v, Mapping) else {}),
]


class _Options(BaseModel):
    # Unknown keys are kept: engines may read their own extras.
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    engine: Any = None

    @classmethod
    def coerce(cls, value: Any = None):
        """Accept None, a mapping or an instance and return an instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate({str(k): v for k, v in value.items()})
        raise TypeError(f"{cls.__name__} expects a mapping, got {type(value).__name__}")

    def extra(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)


class ParsingOptions(_Options):
    """
    Options for parsing engines.

    meta_tags / content_tags: (start, end) templates or a "start,end" string
    metadata: decode the metadata block (false gives empty metadata)
    content: keep the body (false gives an empty body)
    default: returned by parse_metadata when the block cannot be decoded
    """
    meta_tags: Any = None
    content_tags: Any = None
    metadata: LooseBool = True
    content: LooseBool = True
    default: Any = None


class RenderingOptions(_Options):
    """
    Options for rendering engines.

    Any extra key named after a pipeline shortcut ("toc", "links", "emoji",
    ...) set to a false value removes that filter from the pipeline.
    """
    locale: Any = None
    locales: Any = None
    pipeline: Optional[list[Any]] = None
    pipeline_options: LooseMapping = Field(default_factory=dict)

    def is_enabled(self, shortcut: str) -> bool:
        value = self.extra(shortcut)
        return True if value is None else loose_bool(value)

    def requested_locales(self) -> Any:
        return self.locale if self.locale is not None else self.locales
