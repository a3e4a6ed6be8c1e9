from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

DEFAULT_LOCALE = "en"
DEFAULT_PARSING_ENGINE = "plain_text"
DEFAULT_RENDERING_ENGINE = "html_pipeline"

ENV_PREFIX = "LINGOPRESS_"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide defaults.

    locale: used whenever a locale-scoped read is given no locales
    parsing_engine / rendering_engine: registry names used when options omit one
    """
    locale: str = DEFAULT_LOCALE
    parsing_engine: str = DEFAULT_PARSING_ENGINE
    rendering_engine: str = DEFAULT_RENDERING_ENGINE


_current: Optional[Settings] = None


def _sanitize(overrides: dict[str, Any]) -> dict[str, str]:
    # Blank values fall back to the defaults; everything is stored as a string.
    defaults = Settings()
    known = {f.name for f in fields(Settings)}
    out: dict[str, str] = {}
    for k, v in overrides.items():
        if k not in known:
            raise KeyError(f"Unknown setting: {k}")
        text = "" if v is None else str(v).strip()
        out[k] = text or getattr(defaults, k)
    return out


def get_settings() -> Settings:
    global _current
    if _current is None:
        _current = Settings()
    return _current


def configure(**overrides: Any) -> Settings:
    """
    Override one or more process-wide settings, e.g. configure(locale="it").
    """
    global _current
    _current = replace(get_settings(), **_sanitize(overrides))
    return _current


def reset_settings() -> Settings:
    global _current
    _current = Settings()
    return _current


def load_settings(path: str | Path = "lingopress.toml") -> Settings:
    """
    Read the [lingopress] table of a TOML file and make it the current settings.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")

    with path.open("rb") as f:
        raw = tomllib.load(f)

    table = raw.get("lingopress", {})
    if not isinstance(table, dict):
        raise ValueError(f"[lingopress] must be a table in {path}")

    return configure(**table)


def settings_from_env() -> Settings:
    """
    Apply LINGOPRESS_LOCALE, LINGOPRESS_PARSING_ENGINE and
    LINGOPRESS_RENDERING_ENGINE (a .env file is honoured).
    """
    load_dotenv()

    overrides: dict[str, Any] = {}
    for f in fields(Settings):
        value = os.getenv(f"{ENV_PREFIX}{f.name.upper()}")
        if value is not None:
            overrides[f.name] = value

    return configure(**overrides)
