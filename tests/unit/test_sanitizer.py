import pytest

from identcase.sanitizer import sanitize
from identcase.styles import Style


class TestSanitizeSnake:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("  hello world  ", "hello world"),
            ("Keep_This-As!Is", "Keep_This-As!Is"),
            ("\tinner  space\n", "inner  space"),
        ],
    )
    def test_only_trims_whitespace(self, text, expected):
        assert sanitize(text, Style.SNAKE) == expected


class TestSanitizeCamelAndDot:
    @pytest.mark.parametrize("style", [Style.CAMEL, Style.DOT])
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello world! test", "hello world test"),
            ("a_b-c d", "a_b-c d"),
            ("café (menu)", "caf menu"),
            ("$100 & up", "100  up"),
        ],
    )
    def test_removes_punctuation(self, style, text, expected):
        assert sanitize(text, style) == expected

    def test_dot_keeps_dots(self):
        assert sanitize("v1.2, final", Style.DOT) == "v1.2 final"

    def test_camel_drops_dots(self):
        assert sanitize("v1.2, final", Style.CAMEL) == "v12 final"


class TestSanitizeKebab:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("helloWorld", "hello-World"),
            ("HTTPSConnection", "HTTPS-Connection"),
            ("user_full name!", "user-full-name"),
            ("  --lead and trail--  ", "lead-and-trail"),
            ("html5 rocks", "html-5-rocks"),
            ("a - - b", "a-b"),
            ("!!!", ""),
        ],
    )
    def test_marks_boundaries_and_strips(self, text, expected):
        assert sanitize(text, Style.KEBAB) == expected

    def test_accepts_style_name(self):
        assert sanitize("fooBar", "kebab-case") == "foo-Bar"
