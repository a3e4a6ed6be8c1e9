from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from lingopress.domain.errors import UnavailableLocalizationError
from lingopress.domain.schema import (
    ALL_LOCALES,
    AUTHOR_EMAIL,
    AUTHOR_IMAGE,
    AUTHOR_METADATA,
    AUTHOR_NAME,
    AUTHOR_UID,
    AUTHOR_WEBSITE,
    META_AUTHOR,
    META_CREATED_AT,
    META_LOCALES,
    META_MORE,
    META_SUMMARY,
    META_TAGS,
    META_TITLE,
    META_UID,
    META_UPDATED_AT,
)
from lingopress.settings import get_settings
from lingopress.utils.coerce import (
    CaseInsensitiveDict,
    to_case_insensitive_map,
    to_flat_array,
    to_string_or_empty,
)
from lingopress.utils.dates import parse_datetime
from lingopress.utils.json_sanitize import serialize_fields
from lingopress.utils.locales import normalize_locales, split_compound_key
from lingopress.utils.validation import is_email, is_url

LocalizedText = str | CaseInsensitiveDict
LocalizedTags = list[str] | CaseInsensitiveDict


# -------------------------
# Author
# -------------------------

@dataclass(slots=True)
class Author:
    """
    The author of a content.

    Invalid email/website/image values are dropped (set to None), never raised.
    """
    name: Any = ""
    email: Optional[str] = None
    website: Optional[str] = None
    image: Optional[str] = None
    metadata: Any = None
    uid: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = to_string_or_empty(self.name)
        self.email = self.email if is_email(self.email) else None
        self.website = self.website if is_url(self.website) else None
        self.image = self.image if is_url(self.image) else None
        self.metadata = to_case_insensitive_map(self.metadata)

    @classmethod
    def create(cls, data: Any) -> "Author":
        """
        Build an author out of a mapping (uid, name, email, website, image and
        metadata; any other key is folded into metadata) or out of a bare name.
        """
        if not isinstance(data, Mapping):
            return cls(name=data)

        data = CaseInsensitiveDict(data)
        uid = data.pop(AUTHOR_UID, None)
        name = data.pop(AUTHOR_NAME, None)
        email = data.pop(AUTHOR_EMAIL, None)
        website = data.pop(AUTHOR_WEBSITE, None)
        image = data.pop(AUTHOR_IMAGE, None)
        metadata = data.pop(AUTHOR_METADATA, None)

        merged = dict(metadata) if isinstance(metadata, Mapping) else {}
        merged.update(data)

        return cls(name=name, email=email, website=website, image=image, metadata=merged, uid=uid)

    def as_dict(self, *, exclude: Any = None, exclude_empty: bool = False) -> dict[str, Any]:
        keys = ["uid", "name", "email", "website", "image", "metadata"]
        return serialize_fields(self, keys, exclude=exclude, exclude_empty=exclude_empty)


# -------------------------
# Content
# -------------------------

def _localized_text(value: Any) -> LocalizedText:
    if isinstance(value, Mapping):
        return to_case_insensitive_map(value, sanitizer=to_string_or_empty)
    return to_string_or_empty(value)


def _parse_tags(value: Any) -> list[str]:
    return to_flat_array(value, dedup=True, compact=True, splitter=split_compound_key)


class Content:
    """
    A parsed content: metadata attributes plus a body.

    title, summary and more are either a string or a mapping from locale key
    to string; tags are either a list or a mapping from locale key to list.
    Locale keys may list more than one locale ("it,es"); they are kept as
    given and split on read by the get_* accessors.

    The body is never locale-mapped: locale variation lives inside it as
    content tags and is resolved by get_body through a parsing engine.
    """

    __slots__ = (
        "uid",
        "_locales",
        "_title",
        "_summary",
        "_body",
        "_tags",
        "_more",
        "_author",
        "_created_at",
        "_updated_at",
        "_metadata",
    )

    def __init__(self, uid: Optional[str] = None) -> None:
        self.uid = uid
        self._locales: list[str] = []
        self._title: LocalizedText = ""
        self._summary: LocalizedText = ""
        self._body = ""
        self._tags: LocalizedTags = []
        self._more: LocalizedText = ""
        self._author: Optional[Author] = None
        self._created_at: Optional[datetime] = None
        self._updated_at: Optional[datetime] = None
        self._metadata = CaseInsensitiveDict()

    def __repr__(self) -> str:
        return f"Content(uid={self.uid!r}, title={self._title!r}, locales={self._locales!r})"

    # ---- attributes ----

    @property
    def locales(self) -> list[str]:
        return self._locales

    @locales.setter
    def locales(self, value: Any) -> None:
        self._locales = normalize_locales(value)

    @property
    def title(self) -> LocalizedText:
        return self._title

    @title.setter
    def title(self, value: Any) -> None:
        self._title = _localized_text(value)

    @property
    def summary(self) -> LocalizedText:
        return self._summary

    @summary.setter
    def summary(self, value: Any) -> None:
        self._summary = _localized_text(value)

    @property
    def more(self) -> LocalizedText:
        return self._more

    @more.setter
    def more(self, value: Any) -> None:
        self._more = _localized_text(value)

    @property
    def body(self) -> str:
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        self._body = to_string_or_empty(value)

    @property
    def tags(self) -> LocalizedTags:
        return self._tags

    @tags.setter
    def tags(self, value: Any) -> None:
        if isinstance(value, Mapping):
            self._tags = to_case_insensitive_map(value, sanitizer=_parse_tags)
        else:
            self._tags = _parse_tags(value)

    @property
    def author(self) -> Optional[Author]:
        return self._author

    @author.setter
    def author(self, value: Any) -> None:
        if isinstance(value, Author):
            self._author = value
        elif isinstance(value, Mapping):
            self._author = Author.create(value)
        elif value is None:
            self._author = None
        else:
            self._author = Author(name=value)

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @created_at.setter
    def created_at(self, value: Any) -> None:
        self._created_at = parse_datetime(value)

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @updated_at.setter
    def updated_at(self, value: Any) -> None:
        self._updated_at = parse_datetime(value) or self._created_at

    @property
    def metadata(self) -> CaseInsensitiveDict:
        return self._metadata

    @metadata.setter
    def metadata(self, value: Any) -> None:
        if isinstance(value, Mapping):
            self._metadata = to_case_insensitive_map(value)
        else:
            self._metadata = CaseInsensitiveDict({"raw": value})

    # ---- locale-aware accessors ----

    def enabled_for_locales(self, *locales: Any) -> bool:
        """
        True if the content is unrestricted, no locale is asked for, or at least
        one requested locale is among the content locales. "*" in the request is
        ignored here.
        """
        requested = [l for l in normalize_locales(list(locales)) if l != ALL_LOCALES]
        if not self._locales or not requested:
            return True
        return any(l in self._locales for l in requested)

    def get_title(self, locales: Any = None) -> Any:
        return self._filter_attribute(self._title, locales)

    def get_summary(self, locales: Any = None) -> Any:
        return self._filter_attribute(self._summary, locales)

    def get_tags(self, locales: Any = None) -> Any:
        return self._filter_attribute(self._tags, locales)

    def get_more(self, locales: Any = None) -> Any:
        return self._filter_attribute(self._more, locales)

    def get_body(self, locales: Any = None, engine: Any = None) -> str:
        """
        Return the body keeping only the sections enabled for the locales.
        Filtering is delegated to a parsing engine (plain_text by default).
        """
        from lingopress.app.parser import create_engine

        return create_engine(engine or get_settings().parsing_engine).filter_content(self, locales)

    def _filter_attribute(self, attribute: Any, locales: Any) -> Any:
        locales = Content.validate_locales(locales, self)

        if not isinstance(attribute, Mapping):
            return attribute

        everything = ALL_LOCALES in locales
        rv = CaseInsensitiveDict()
        for key, value in attribute.items():
            for locale in split_compound_key(key):
                if everything or locale in locales:
                    rv[locale] = value

        if len(rv) == 1:
            return next(iter(rv.values()))
        return rv

    # ---- serialization ----

    def as_dict(self, *, exclude: Any = None, exclude_empty: bool = False) -> dict[str, Any]:
        keys = [
            "uid", "locales", "title", "summary", "body", "tags", "more",
            "author", "created_at", "updated_at", "metadata",
        ]
        return serialize_fields(self, keys, exclude=exclude, exclude_empty=exclude_empty)

    # ---- factories ----

    @staticmethod
    def validate_locales(locales: Any, content: Optional["Content"] = None) -> list[str]:
        """
        Normalize the requested locales, falling back to the default locale.

        Raises UnavailableLocalizationError if content is given and is not
        enabled for any of them.
        """
        locales = normalize_locales(locales)
        if not locales:
            locales = [get_settings().locale]

        if content is not None and not content.enabled_for_locales(locales):
            raise UnavailableLocalizationError(
                f"Content not available for locales: {', '.join(locales)}"
            )
        return locales

    @classmethod
    def create(cls, metadata: Any, body: Any) -> "Content":
        """
        Build a content from decoded metadata and a body.

        Known keys populate the typed attributes, everything else lands in
        metadata. An Author is always built, even from a missing author key.
        """
        rv = cls()
        rv.body = to_string_or_empty(body).strip()

        data = CaseInsensitiveDict(metadata if isinstance(metadata, Mapping) else {})
        rv.uid = data.pop(META_UID, None)
        rv.title = data.pop(META_TITLE, None)
        rv.summary = data.pop(META_SUMMARY, None)
        rv.author = Author.create(data.pop(META_AUTHOR, None))
        rv.tags = data.pop(META_TAGS, None)
        rv.more = data.pop(META_MORE, None)
        rv.created_at = data.pop(META_CREATED_AT, None)
        rv.updated_at = data.pop(META_UPDATED_AT, None)
        rv.locales = data.pop(META_LOCALES, None)
        rv.metadata = data

        return rv
