from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, MutableMapping

import emoji

from lingopress.adapters.rendering.filters._html import parse_fragment, text_nodes

SKIP_TAGS = ("pre", "code", "tt", "script", "style")

EMOJI_RE = re.compile(r":([a-z][a-z0-9_+\-]*|[+\-]1):")


@lru_cache(maxsize=1)
def known_emoji_names() -> frozenset[str]:
    """Short names (":smile:" -> "smile") of every emoji, aliases included."""
    names: set[str] = set()
    for data in emoji.EMOJI_DATA.values():
        for alias in [data.get("en", ""), *data.get("alias", [])]:
            names.add(alias.strip(":"))
    names.discard("")
    return frozenset(names)


def emoji_url(asset_root: str, name: str) -> str:
    return f"{asset_root.rstrip('/')}/emoji/{name}.png"


def emoji_filter(doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
    """
    Replace :name: with an emoji image under context["asset_root"].

    Only known emoji names are replaced. context["emoji_names"], when given,
    replaces the known list.
    """
    asset_root = context.get("asset_root")
    if not asset_root:
        raise ValueError("Missing context keys for emoji filter: asset_root")

    allowed = context.get("emoji_names")
    allowed = set(allowed) if allowed else known_emoji_names()

    soup = parse_fragment(doc)

    for node in text_nodes(soup, SKIP_TAGS):
        text = str(node)

        pieces: list[Any] = []
        pos = 0
        for m in EMOJI_RE.finditer(text):
            name = m.group(1)
            if name not in allowed:
                continue

            if m.start() > pos:
                pieces.append(text[pos:m.start()])
            pieces.append(soup.new_tag(
                "img",
                attrs={
                    "class": "emoji",
                    "title": f":{name}:",
                    "alt": f":{name}:",
                    "src": emoji_url(str(asset_root), name),
                    "height": "20",
                    "width": "20",
                    "align": "absmiddle",
                },
            ))
            pos = m.end()

        if not pieces:
            continue
        if pos < len(text):
            pieces.append(text[pos:])
        node.replace_with(*pieces)

    return str(soup)
