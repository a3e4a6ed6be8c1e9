from __future__ import annotations

from typing import Any, Protocol


class MetadataDecoder(Protocol):
    """
    Decodes the text of a metadata block. Raises on malformed input.
    """

    def decode(self, text: str) -> Any:
        ...
