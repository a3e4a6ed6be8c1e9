from __future__ import annotations

from typing import Any, MutableMapping

import markdown

from lingopress.app.options import loose_bool

BASE_EXTENSIONS = ["abbr", "attr_list", "def_list", "footnotes", "sane_lists"]
GFM_EXTENSIONS = ["fenced_code", "tables", "nl2br"]


def markdown_filter(doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
    """
    Markdown -> HTML. Carriage returns are dropped first.

    context:
      gfm: GitHub flavour (fenced code, tables, hard line breaks), default on
      markdown_extensions: additional Python-Markdown extensions
    """
    extensions = list(BASE_EXTENSIONS)
    if loose_bool(context.get("gfm", True)):
        extensions += GFM_EXTENSIONS
    extensions += [e for e in context.get("markdown_extensions") or [] if e not in extensions]

    return markdown.markdown(doc.replace("\r", ""), extensions=extensions)
