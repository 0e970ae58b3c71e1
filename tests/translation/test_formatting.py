"""Tests for printf-style template formatting."""

import pytest

from analytics_core.translation import TranslationFormatError, format_template


@pytest.mark.parametrize(
    "template,args,expected",
    [
        ("Hello %s", ["World"], "Hello World"),
        ("%d visits", [42], "42 visits"),
        ("%u visits", [7], "7 visits"),
        ("%.2f%%", [12.346], "12.35%"),
        ("%05d", [42], "00042"),
        ("%-4s|", ["ab"], "ab  |"),
        ("%x", [255], "ff"),
        ("%b", [5], "101"),
        ("%2$s, %1$s", ["World", "Hello"], "Hello, World"),
        ("%1$s and %1$s", ["again"], "again and again"),
        ("no placeholders", [], "no placeholders"),
    ],
)
def test_format_template(template, args, expected):
    assert format_template(template, args) == expected


def test_too_few_arguments():
    with pytest.raises(TranslationFormatError, match="no argument"):
        format_template("%s and %s", ["one"])


def test_too_many_arguments():
    with pytest.raises(TranslationFormatError, match="not used"):
        format_template("%s", ["one", "two"])


def test_positional_out_of_range():
    with pytest.raises(TranslationFormatError):
        format_template("%3$s", ["a", "b", "c"][:2])


def test_unconvertible_value():
    with pytest.raises(TranslationFormatError):
        format_template("%d", ["many"])


def test_error_keeps_template_and_args():
    with pytest.raises(TranslationFormatError) as exc_info:
        format_template("%s %s", ["x"])
    assert exc_info.value.template == "%s %s"
    assert exc_info.value.args_supplied == ("x",)
