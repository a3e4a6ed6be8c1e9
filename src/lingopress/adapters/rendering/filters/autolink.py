from __future__ import annotations

import re
from typing import Any, MutableMapping

from lingopress.adapters.rendering.filters._html import parse_fragment, text_nodes

SKIP_TAGS = ("a", "pre", "code", "script", "style")

URL_RE = re.compile(r"""(?<![\w/@])((?:https?://|www\.)[^\s<>"']*[^\s<>"'.,;:!?)\]])""", re.IGNORECASE)


def autolink_filter(doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
    """
    Turn bare URLs (http://, https://, www.) into links, except inside
    a, pre and code elements.
    """
    soup = parse_fragment(doc)

    for node in text_nodes(soup, SKIP_TAGS):
        text = str(node)
        if not URL_RE.search(text):
            continue

        pieces: list[Any] = []
        pos = 0
        for m in URL_RE.finditer(text):
            if m.start() > pos:
                pieces.append(text[pos:m.start()])

            url = m.group(1)
            link = soup.new_tag("a", href=url if "://" in url else f"http://{url}")
            link.string = url
            pieces.append(link)
            pos = m.end()

        if pos < len(text):
            pieces.append(text[pos:])
        node.replace_with(*pieces)

    return str(soup)
