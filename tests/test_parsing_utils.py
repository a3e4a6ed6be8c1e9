"""Metadata/body separation and tag compilation."""
import pytest

from lingopress.utils.parsing import compile_tag, sanitize_tags, split_components

from helpers import SAMPLE_BODY, SAMPLE_METADATA


def test_split_components(sample_document):
    assert split_components(sample_document) == (SAMPLE_METADATA.strip(), SAMPLE_BODY.strip())


@pytest.mark.parametrize(
    ("metadata", "body"),
    [("a: 1", "BODY"), ("  x: y\n  ", "\n\nline 1\nline 2\n"), ("", "only body")],
)
def test_split_components_round_trip(metadata, body):
    raw = "{{metadata}}" + metadata + "{{/metadata}}" + body
    assert split_components(raw) == (metadata.strip(), body.strip())


def test_split_components_missing_markers():
    unclosed = "{{metadata}}\n" + SAMPLE_BODY
    assert split_components(unclosed) == ("", unclosed.strip())
    assert split_components(SAMPLE_BODY) == ("", SAMPLE_BODY.strip())
    assert split_components(None) == ("", "")


def test_split_components_drops_text_before_start_marker():
    assert split_components("PRE {{metadata}}a: 1{{/metadata}} REST") == ("a: 1", "REST")


def test_split_components_custom_tags():
    raw = "[meta]{{metadata}}OK\n[/meta] REST"
    assert split_components(raw, ["[meta]", "[/meta]"]) == ("{{metadata}}OK", "REST")
    assert split_components(raw, "[meta], [/meta]") == ("{{metadata}}OK", "REST")


def test_compile_tag_escapes_and_captures_args():
    start = compile_tag("{{content: %ARGS%}}")
    m = start.search("x {{content: it, !en}} y")
    assert m.group("args") == "it, !en"
    assert compile_tag("[a.b]").fullmatch("[a.b]")
    assert not compile_tag("[a.b]").fullmatch("[axb]")


def test_sanitize_tags_defaults_and_single_tag():
    start, end = sanitize_tags(None, ["{{a}}", "{{/a}}"])
    assert start.pattern == compile_tag("{{a}}").pattern
    assert end.pattern == compile_tag("{{/a}}").pattern

    start, end = sanitize_tags("", ["---"])
    assert start.pattern == end.pattern == compile_tag("---").pattern

    start, end = sanitize_tags(["+++"], ["---"])
    assert start.pattern == end.pattern == compile_tag("+++").pattern
