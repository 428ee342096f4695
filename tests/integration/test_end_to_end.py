"""CLI and end-to-end integration tests for identcase."""

import json
import subprocess
import sys

import pytest

import identcase
from identcase import (
    CaseConversionError,
    Style,
    convert_to_camel,
    convert_to_dot,
    convert_to_kebab,
    convert_to_snake,
)


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "identcase.cli", *args],
        input=stdin,
        capture_output=True,
        text=True,
        timeout=10,
    )


@pytest.mark.integration
class TestPackageSurface:
    def test_public_entry_points(self):
        assert convert_to_snake("this is an example") == "this_is_an_example"
        assert convert_to_camel("hello world") == "helloWorld"
        assert convert_to_dot("HelloWorld") == "hello.world"
        assert convert_to_kebab("HTTPSConnection") == "https-connection"

    def test_exports(self):
        for name in identcase.__all__:
            assert hasattr(identcase, name)

    def test_version(self):
        assert identcase.__version__ == "1.0.0"


@pytest.mark.integration
class TestEndToEndScenarios:
    def test_pipe_lines_through_each_style(self):
        stdin = "hello world\nhello_world\nhello-world\nhello world! test\n"
        expected = {
            "snake": ["hello_world", "hello_world", "hello-world", "hello_world!_test"],
            "camel": ["helloWorld", "helloWorld", "helloWorld", "helloWorldTest"],
            "dot": ["hello.world", "hello.world", "hello.world", "hello.world.test"],
            "kebab": ["hello-world", "hello-world", "hello-world", "hello-world-test"],
        }

        for style, lines in expected.items():
            result = run_cli("--style", style, stdin=stdin)
            assert result.returncode == 0, result.stderr
            assert result.stdout.splitlines() == lines

    def test_json_comparison_of_all_styles(self):
        result = run_cli("--all", "--json", stdin="user_full name!\n!!!\n")

        assert result.returncode == 1
        data = json.loads(result.stdout)
        assert [entry["input"] for entry in data] == ["user_full name!", "!!!"]
        assert data[0]["kebab"] == "user-full-name"
        assert data[1]["snake"] == "!!!"
        for name in ("camel", "dot", "kebab"):
            assert data[1][name]["error"] == "NoValidCharacters"

    def test_table_output(self):
        result = run_cli("-a", "HTTPSConnection")

        assert result.returncode == 0
        assert "+" in result.stdout.splitlines()[0]
        assert "httpsConnection" in result.stdout
        assert "httpsconnection" in result.stdout

    def test_debug_goes_to_stderr(self):
        result = run_cli("--debug", "-s", "dot", "HelloWorld")

        assert result.stdout == "hello.world\n"
        assert "[DEBUG]" in result.stderr

    def test_output_round_trips_through_same_style(self):
        for style in ("camel", "dot", "kebab"):
            first = run_cli("-s", style, "Some  MIXED_input-here 42").stdout.strip()
            second = run_cli("-s", style, first).stdout.strip()
            assert first == second


@pytest.mark.integration
class TestErrorTaxonomy:
    @pytest.mark.parametrize("style", list(Style))
    @pytest.mark.parametrize(
        "value,code",
        [(None, "NullInput"), (1, "TypeMismatch"), ("  ", "EmptyInput")],
    )
    def test_codes(self, style, value, code):
        with pytest.raises(CaseConversionError) as exc_info:
            identcase.convert(value, style)
        assert exc_info.value.code == code
