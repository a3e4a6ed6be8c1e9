from __future__ import annotations

from typing import Any, MutableMapping, Protocol


class HtmlFilter(Protocol):
    """
    One step of a rendering pipeline.

    Receives the current document (markdown or HTML), the filter context and
    the shared result, where it may store extra keys (e.g. "toc").
    Returns the new document.
    """

    def __call__(self, doc: str, context: MutableMapping[str, Any], result: MutableMapping[str, Any]) -> str:
        ...
