from __future__ import annotations

from typing import Final

# Canonical metadata keys consumed by Content.create
META_UID: Final[str] = "uid"
META_TITLE: Final[str] = "title"
META_SUMMARY: Final[str] = "summary"
META_TAGS: Final[str] = "tags"
META_MORE: Final[str] = "more"
META_AUTHOR: Final[str] = "author"
META_CREATED_AT: Final[str] = "created_at"
META_UPDATED_AT: Final[str] = "updated_at"
META_LOCALES: Final[str] = "locales"

# Author keys
AUTHOR_UID: Final[str] = "uid"
AUTHOR_NAME: Final[str] = "name"
AUTHOR_EMAIL: Final[str] = "email"
AUTHOR_WEBSITE: Final[str] = "website"
AUTHOR_IMAGE: Final[str] = "image"
AUTHOR_METADATA: Final[str] = "metadata"

# Locale wildcard
ALL_LOCALES: Final[str] = "*"

# Default markers
ARGS_PLACEHOLDER: Final[str] = "%ARGS%"
DEFAULT_META_TAGS: Final[tuple[str, str]] = ("{{metadata}}", "{{/metadata}}")
DEFAULT_CONTENT_TAGS: Final[tuple[str, str]] = ("{{content: %ARGS%}}", "{{/content}}")
