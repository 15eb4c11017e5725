from __future__ import annotations

import re

import pytest

from filekit.errors import UnknownCaseStyleError
from filekit.naming import CaseStyle, capitalize, render, slugify, to_camel, to_pascal, tokenize


@pytest.mark.parametrize(
    "value, expected",
    [
        ("HTMLParser", ["HTML", "Parser"]),
        ("v2Config", ["v", "2", "Config"]),
        ("ID", ["ID"]),
        ("userName", ["user", "Name"]),
        ("user_name", ["user", "name"]),
        ("  Foo Bar  ", ["Foo", "Bar"]),
        ("kebab-case-value", ["kebab", "case", "value"]),
        ("getHTTPResponseCode", ["get", "HTTP", "Response", "Code"]),
        ("version10beta", ["version", "10", "beta"]),
        ("Café au lait", ["Caf", "au", "lait"]),
        ("a.b/c", ["a", "b", "c"]),
        ("x", ["x"]),
    ],
)
def test_tokenize(value, expected):
    assert tokenize(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "--__!!", "\t\n"])
def test_tokenize_without_words(value):
    assert tokenize(value) == []


@pytest.mark.parametrize("value", ["hello", "HELLO", "12345", "Hello"])
def test_tokenize_single_word(value):
    assert tokenize(f"  {value} ") == [value]


@pytest.mark.parametrize(
    "style, value, expected",
    [
        (CaseStyle.KEBAB, "Foo Bar", "foo-bar"),
        (CaseStyle.SNAKE, "Foo Bar", "foo_bar"),
        (CaseStyle.SCREAM, "Foo Bar", "FOO_BAR"),
        (CaseStyle.CAMEL, "foo bar", "fooBar"),
        (CaseStyle.PASCAL, "foo bar", "FooBar"),
        (CaseStyle.CAPITALIZE, "hello", "Hello"),
        (CaseStyle.SLUG, "Foo Bar!!", "foo-bar"),
        (CaseStyle.KEBAB, "HTMLParser", "html-parser"),
        (CaseStyle.SNAKE, "v2Config", "v_2_config"),
        (CaseStyle.CAMEL, "user_name", "userName"),
        (CaseStyle.CAMEL, "Some HTTPServer", "someHTTPServer"),
        (CaseStyle.CAMEL, "HTMLParser", "htmlParser"),
        (CaseStyle.PASCAL, "HTMLParser", "HTMLParser"),
        (CaseStyle.PASCAL, "user-ID", "UserID"),
    ],
)
def test_render_styles(style, value, expected):
    assert render(style, value) == expected


@pytest.mark.parametrize("style", list(CaseStyle))
@pytest.mark.parametrize("value", ["", "   "])
def test_render_blank_input_is_empty(style, value):
    assert render(style, value) == ""


@pytest.mark.parametrize("style", list(CaseStyle))
def test_render_passes_none_through(style):
    assert render(style, None) is None


def test_render_accepts_style_names():
    assert render("scream", "fooBar") == "FOO_BAR"


@pytest.mark.parametrize("style", ["train", "KEBAB", " kebab", "Snake"])
def test_render_rejects_unknown_style(style):
    with pytest.raises(UnknownCaseStyleError):
        render(style, "foo bar")


# holds only while the first word has no capitals after its first letter
@pytest.mark.parametrize("value", ["foo bar", "Foo bar", "x", "user_id 42", "parseHTMLDocument"])
def test_camel_and_pascal_differ_only_in_first_character(value):
    camel = to_camel(value)
    pascal = to_pascal(value)
    assert camel[1:] == pascal[1:]
    assert camel[0].lower() == pascal[0].lower()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello world", "Hello world"),
        ("  spaced ", "Spaced"),
        ("Already", "Already"),
        ("1st place", "1st place"),
        ("", ""),
    ],
)
def test_capitalize(value, expected):
    assert capitalize(value) == expected


@pytest.mark.parametrize(
    "value",
    ["Foo Bar!!", "  --  ", "Ünïcödé tëxt", "snake_case_Value", "v2.0 release", "!!!", "A"],
)
def test_slug_shape(value):
    assert re.fullmatch(r"([a-z0-9]+(-[a-z0-9]+)*)?", slugify(value))
