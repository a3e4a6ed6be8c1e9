from __future__ import annotations

from typing import Any, MutableMapping

from lingopress.adapters.rendering.filters._html import parse_fragment


def image_max_width_filter(doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
    """
    Cap images to their container width and link unlinked images to their
    source. Emoji images are left alone.
    """
    soup = parse_fragment(doc)

    for img in soup.find_all("img"):
        src = img.get("src")
        if not src or "emoji" in (img.get("class") or []):
            continue

        style = img.get("style", "")
        if "max-width" not in style:
            img["style"] = f"max-width:100%;{style}"

        if img.find_parent("a") is None:
            img.wrap(soup.new_tag("a", href=src, target="_blank"))

    return str(soup)
