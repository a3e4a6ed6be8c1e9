from __future__ import annotations

from typing import Any

import yaml


class YamlMetadataDecoder:
    """
    Decodes metadata blocks with PyYAML's safe loader.
    """

    def decode(self, text: str) -> Any:
        return yaml.safe_load(text)
