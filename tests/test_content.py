"""Content entity: setters, locale-aware getters and serialization."""
from datetime import datetime, timezone

import pytest

from lingopress.domain.errors import InvalidDateError, UnavailableLocalizationError
from lingopress.domain.models import Author, Content
from lingopress.settings import configure
from lingopress.utils.coerce import CaseInsensitiveDict


@pytest.fixture
def content() -> Content:
    return Content()


# ---- setters ----

def test_locales_setter(content):
    content.locales = "it"
    assert content.locales == ["it"]
    content.locales = ["it", ["en", "it"], "es, en"]
    assert content.locales == ["it", "en", "es"]


@pytest.mark.parametrize("attribute", ["title", "summary", "more"])
def test_localized_setter_with_scalars(content, attribute):
    setattr(content, attribute, "ABC")
    assert getattr(content, attribute) == "ABC"
    setattr(content, attribute, 1)
    assert getattr(content, attribute) == "1"
    setattr(content, attribute, None)
    assert getattr(content, attribute) == ""


@pytest.mark.parametrize("attribute", ["title", "summary", "more"])
def test_localized_setter_with_mapping(content, attribute):
    setattr(content, attribute, {"en": None, "es": "ABC", "it": 1})
    value = getattr(content, attribute)
    assert isinstance(value, CaseInsensitiveDict)
    assert value["EN"] == ""
    assert value["es"] == "ABC"
    assert value["it"] == "1"


def test_body_setter(content):
    content.body = 1
    assert content.body == "1"
    content.body = None
    assert content.body == ""


def test_tags_setter(content):
    content.tags = "ABC"
    assert content.tags == ["ABC"]
    content.tags = ["ABC", [1, None]]
    assert content.tags == ["ABC", "1"]
    content.tags = ["1", ["2", "3"], "3, 4,5"]
    assert content.tags == ["1", "2", "3", "4", "5"]
    content.tags = "1,2,3,4,5"
    assert content.tags == ["1", "2", "3", "4", "5"]


def test_tags_setter_with_mapping(content):
    content.tags = {"en": None, "es": "ABC", "it": [1, [2, 3]]}
    assert isinstance(content.tags, CaseInsensitiveDict)
    assert content.tags["en"] == []
    assert content.tags["ES"] == ["ABC"]
    assert content.tags["it"] == ["1", "2", "3"]


def test_author_setter(content):
    author = Author(name="NAME")
    content.author = author
    assert content.author is author

    content.author = "NAME"
    assert isinstance(content.author, Author)
    assert content.author.name == "NAME"

    content.author = {"name": "NAME", "uid": "UID", "metadata": {"a": "b"}}
    assert content.author.uid == "UID"
    assert content.author.metadata["A"] == "b"

    content.author = None
    assert content.author is None


def test_date_setters(content):
    content.created_at = 1344421800
    assert content.created_at == datetime(2012, 8, 8, 10, 30, tzinfo=timezone.utc)

    content.updated_at = None
    assert content.updated_at == content.created_at

    content.updated_at = "2013-01-01"
    assert content.updated_at == datetime(2013, 1, 1, tzinfo=timezone.utc)

    with pytest.raises(InvalidDateError):
        content.created_at = "ABC"


def test_metadata_setter(content):
    content.metadata = "RAW"
    assert content.metadata["raw"] == "RAW"
    content.metadata = {"es": "ABC"}
    assert content.metadata["ES"] == "ABC"


# ---- locales ----

def test_enabled_for_locales(content):
    assert content.enabled_for_locales("xx")

    content.locales = ["en", "it"]
    assert content.enabled_for_locales()
    assert content.enabled_for_locales("en")
    assert content.enabled_for_locales("it", "es")
    assert content.enabled_for_locales(["es", "it"])
    assert not content.enabled_for_locales("es", "de")


def test_enabled_for_locales_ignores_wildcard(content):
    content.locales = ["en"]
    assert content.enabled_for_locales("*")
    assert not content.enabled_for_locales("*", "de")


def test_validate_locales_defaults_to_configured_locale(content):
    assert Content.validate_locales(None) == ["en"]
    configure(locale="it")
    assert Content.validate_locales([]) == ["it"]
    assert Content.validate_locales("es, fr") == ["es", "fr"]

    content.locales = ["en"]
    with pytest.raises(UnavailableLocalizationError):
        Content.validate_locales(None, content)


@pytest.mark.parametrize(
    ("attribute", "plain", "other"),
    [
        ("title", "ABC", "123"),
        ("summary", "ABC", "123"),
        ("more", "ABC", "123"),
        ("tags", ["ABC", "123"], ["1", "2", "3", "4"]),
    ],
)
def test_localized_getters(content, attribute, plain, other):
    getter = getattr(content, f"get_{attribute}")

    content.locales = ["en", "it", "es"]
    setattr(content, attribute, plain)
    assert getter(["de", "it"]) == plain
    with pytest.raises(UnavailableLocalizationError):
        getter(["de"])

    content.locales = []
    configure(locale="it")
    setattr(content, attribute, {"en": plain, "it": other})
    assert getter() == other

    setattr(content, attribute, {"en": plain, "it": other, "de": plain, "es": other})
    assert list(getter(["de", "es"])) == ["de", "es"]
    assert sorted(getter(["it", "de", "pt", "fr"])) == ["de", "it"]

    content.locales = ["en", "it", "es"]
    assert sorted(getter("*")) == ["de", "en", "es", "it"]

    setattr(content, attribute, {"en": plain, "it,es": other, " de,    fr ": plain})
    assert sorted(getter(["it", "fr"])) == ["fr", "it"]


def test_get_body_uses_parsing_engine(content):
    content.body = "A{{content: it}}B{{/content}}C"
    assert content.get_body("en") == "AC"
    assert content.get_body(["it"]) == "ABC"


def test_get_body_with_engine_instance(content):
    class Recorder:
        def __init__(self):
            self.calls = []

        def parse(self, raw, options=None):
            raise AssertionError("not used")

        def filter_content(self, content, locales=None, options=None):
            self.calls.append((content, locales))
            return "FILTERED"

    engine = Recorder()
    assert content.get_body(["it", "en"], engine) == "FILTERED"
    assert engine.calls == [(content, ["it", "en"])]


# ---- create / as_dict ----

CREATED_AT = datetime(1984, 7, 7, 11, 30, tzinfo=timezone.utc)


@pytest.fixture
def created() -> Content:
    metadata = {
        "uid": "UID",
        "title": {"it": "IT", "en": "EN"},
        "summary": "SUMMARY",
        "author": "AUTHOR",
        "tags": {"it": "IT", "en": "EN"},
        "more": "MORE",
        "created_at": CREATED_AT,
        "locales": ["it", ["en"]],
        "other": ["OTHER"],
    }
    return Content.create(metadata, "  BODY  ")


def test_create_assigns_known_keys(created):
    assert created.uid == "UID"
    assert created.title == {"it": "IT", "en": "EN"}
    assert created.summary == "SUMMARY"
    assert created.author.name == "AUTHOR"
    assert created.body == "BODY"
    assert created.tags == {"it": ["IT"], "en": ["EN"]}
    assert created.more == "MORE"
    assert created.created_at == CREATED_AT
    assert created.updated_at == CREATED_AT
    assert created.locales == ["it", "en"]
    assert created.metadata == {"other": ["OTHER"]}


def test_create_keys_are_case_insensitive():
    c = Content.create({"Title": "T", "UID": "U", "Other": 1}, "")
    assert c.title == "T"
    assert c.uid == "U"
    assert c.metadata == {"Other": 1}


def test_create_without_metadata():
    c = Content.create(None, "BODY")
    assert c.body == "BODY"
    assert c.metadata == {}
    assert isinstance(c.author, Author)
    assert c.author.name == ""


def test_create_with_non_mapping_metadata():
    c = Content.create(["a"], "BODY")
    assert c.metadata == {}
    assert isinstance(c.author, Author)
    assert c.author.name == ""


def test_as_dict(created):
    stamp = CREATED_AT.isoformat()
    assert created.as_dict() == {
        "uid": "UID",
        "locales": ["it", "en"],
        "title": {"it": "IT", "en": "EN"},
        "summary": "SUMMARY",
        "body": "BODY",
        "tags": {"it": ["IT"], "en": ["EN"]},
        "more": "MORE",
        "author": {"uid": None, "name": "AUTHOR", "email": None, "website": None, "image": None, "metadata": {}},
        "created_at": stamp,
        "updated_at": stamp,
        "metadata": {"other": ["OTHER"]},
    }


def test_as_dict_exclusions(created):
    assert set(created.as_dict(exclude=["author", "uid"])) == {
        "locales", "title", "summary", "body", "tags", "more", "created_at", "updated_at", "metadata",
    }

    created.author = None
    created.uid = None
    created.more = ""
    data = created.as_dict(exclude_empty=True)
    assert "author" not in data
    assert "uid" not in data
    assert "more" not in data
    assert data["body"] == "BODY"
