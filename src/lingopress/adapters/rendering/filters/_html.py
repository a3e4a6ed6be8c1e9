from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, Tag


def parse_fragment(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def text_nodes(soup: BeautifulSoup, skip: tuple[str, ...]) -> Iterator[NavigableString]:
    """
    Yield the text nodes not nested in any of the skip tags. Comments,
    doctypes and the like are not yielded.
    """
    for node in list(soup.find_all(string=True)):
        if type(node) is not NavigableString:
            continue
        if any(isinstance(p, Tag) and p.name in skip for p in node.parents):
            continue
        yield node
