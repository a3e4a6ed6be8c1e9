from __future__ import annotations

import re
from typing import Any

_EMAIL_RE = re.compile(r"([a-z0-9_.\-+]+)@([\da-z.\-]+)\.([a-z.]{2,6})", re.IGNORECASE)

_URL_RE = re.compile(
    r"""
    ([a-z0-9\-]+://)    # scheme
    (([\w-]+\.)?)       # subdomain
    ([\w-]+)            # domain
    (\.[a-z]+)          # top level domain
    ((:\d+)?)           # port
    ([\S|?]*)           # path, query string and fragment
    """,
    re.IGNORECASE | re.VERBOSE,
)


def is_email(text: Any) -> bool:
    if not isinstance(text, str):
        return False
    return _EMAIL_RE.fullmatch(text.strip()) is not None


def is_url(text: Any) -> bool:
    if not isinstance(text, str):
        return False
    return _URL_RE.fullmatch(text.strip()) is not None
