import pytest

from lingopress.app.parser import Parser
from lingopress.settings import reset_settings

from helpers import NESTED_BODY, SAMPLE_BODY, SAMPLE_METADATA


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch):
    """Every test starts from default settings and a fresh parser."""
    for name in ("LINGOPRESS_LOCALE", "LINGOPRESS_PARSING_ENGINE", "LINGOPRESS_RENDERING_ENGINE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    Parser._instance = None
    yield
    reset_settings()
    Parser._instance = None


@pytest.fixture
def nested_body() -> str:
    return NESTED_BODY


@pytest.fixture
def sample_document() -> str:
    return f"\n\n{{{{metadata}}}}\n{SAMPLE_METADATA}\n{{{{/metadata}}}}\n\n{SAMPLE_BODY}\n"

