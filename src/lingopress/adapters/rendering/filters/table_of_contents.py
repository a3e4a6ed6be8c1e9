from __future__ import annotations

from typing import Any, MutableMapping

from markdown.extensions.toc import slugify, unique

from lingopress.adapters.rendering.filters._html import parse_fragment

HEADINGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def table_of_contents_filter(doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
    """
    Give every heading an anchor and store a list of links in result["toc"].

    Slugs come from Python-Markdown's toc extension, so duplicates get a
    numeric suffix ("intro", "intro_1", ...).
    """
    soup = parse_fragment(doc)
    separator = str(context.get("toc_separator", "-"))
    seen: set[str] = set()
    items: list[str] = []

    for heading in soup.find_all(HEADINGS):
        text = heading.get_text()
        slug = unique(slugify(text, separator), seen)

        anchor = soup.new_tag("a", id=slug, href=f"#{slug}", attrs={"class": "anchor", "aria-hidden": "true"})
        anchor.append(soup.new_tag("span", attrs={"class": "octicon octicon-link"}))
        heading.insert(0, anchor)

        link = soup.new_tag("a", href=f"#{slug}")
        link.string = text
        items.append(f"<li>{link}</li>")

    result["toc"] = f'<ul class="section-nav">\n{"".join(items)}\n</ul>' if items else ""
    return str(soup)
