from __future__ import annotations

import re
from typing import Any, Optional, Sequence, Tuple

from lingopress.domain.schema import ARGS_PLACEHOLDER, DEFAULT_META_TAGS
from lingopress.utils.coerce import to_string_or_empty

TagPair = Tuple[re.Pattern, re.Pattern]

# Captures the locale rule of a start tag, e.g. "it, !en" in "{{content: it, !en}}"
ARGS_PATTERN = r"\s*(?P<args>[^\n}]*)"

_TAG_SPLIT_RE = re.compile(r"\s*,\s*")


def compile_tag(template: str) -> re.Pattern:
    """
    Turn a literal tag template into a regex. The %ARGS% placeholder, if any,
    becomes the named group "args".
    """
    return re.compile(re.escape(template).replace(re.escape(ARGS_PLACEHOLDER), ARGS_PATTERN))


def sanitize_tags(tags: Any, default: Sequence[str]) -> TagPair:
    """
    Compile a (start, end) tag pair.

    Args:
        tags: a pair of templates, or a comma separated "start,end" string.
            Blank values fall back to default.
        default: the templates to use when tags is blank.

    Returns:
        (tuple[re.Pattern, re.Pattern]): the start and end patterns. A single
        template is used both to open and to close.
    """
    if tags is not None and not isinstance(tags, (list, tuple)):
        tags = [t.strip() for t in _TAG_SPLIT_RE.split(to_string_or_empty(tags).strip())]

    templates = [to_string_or_empty(t) for t in (tags or []) if to_string_or_empty(t).strip()]
    if not templates:
        templates = list(default)

    start = templates[0]
    end = templates[1] if len(templates) > 1 else start
    return compile_tag(start), compile_tag(end)


def split_components(raw: Any, meta_tags: Optional[Any] = None) -> Tuple[str, str]:
    """
    Split a raw document into its metadata block and its body.

    Args:
        raw (str): the whole document.
        meta_tags: the metadata markers, as accepted by sanitize_tags.
            Defaults to "{{metadata}}" / "{{/metadata}}".

    Returns:
        (tuple[str, str]): the stripped metadata text and the stripped body.
        Text before the start marker is dropped. If either marker is missing
        the metadata is empty and the body is the whole stripped document.
    """
    text = to_string_or_empty(raw).strip()
    start_tag, end_tag = sanitize_tags(meta_tags, DEFAULT_META_TAGS)

    start = start_tag.search(text)
    if start is None:
        return "", text

    end = end_tag.search(text, start.end())
    if end is None:
        return "", text

    return text[start.end():end.start()].strip(), text[end.end():].strip()
