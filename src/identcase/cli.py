"""Command-line interface for identcase."""

import argparse
import sys

import argcomplete

from .case_utils import try_convert
from .formatters import format_json_output, format_result, format_table_output
from .styles import STYLE_ALIASES, Style
from .utils import debug_print, set_debug_enabled


def style_completer(prefix, parsed_args, **kwargs):
    """Autocomplete style names and their accepted spellings"""
    candidates = Style.names() + sorted(STYLE_ALIASES)
    return [name for name in candidates if name.startswith(prefix)]


def parse_style(name):
    """argparse type for --style"""
    try:
        return Style.from_name(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def read_inputs(text_args, stream=None):
    """Collect inputs: positional words form one input, otherwise one per stdin line"""
    if text_args:
        return [" ".join(text_args)]

    stream = stream if stream is not None else sys.stdin
    inputs = [line.rstrip("\r\n") for line in stream]
    debug_print(f"Read {len(inputs)} line(s) from stdin")  # pragma: no mutate
    return [line for line in inputs if line.strip()]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="identcase",
        description="Convert free text to snake_case, camelCase, dot.case or kebab-case",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  identcase hello world                    (hello_world)
  identcase -s camel "hello world! test"   (helloWorldTest)
  identcase -s kebab HTTPSConnection       (https-connection)
  identcase --all user_full name           (every style as a table)
  identcase --all --json helloWorld        (every style as JSON)
  cat names.txt | identcase -s dot         (one conversion per line)

Autocomplete Setup:
  Bash:
    eval "$(register-python-argcomplete identcase)"
  Zsh:
    autoload -U bashcompinit && bashcompinit
    eval "$(register-python-argcomplete identcase)"
  Fish:
    register-python-argcomplete --shell fish identcase | source

  Add the line for your shell to its config file (~/.bashrc, ~/.zshrc,
  ~/.config/fish/config.fish) to enable completion permanently.
        """,
    )

    style_arg = parser.add_argument(
        "-s",
        "--style",
        type=parse_style,
        default=Style.SNAKE,
        help="Target style: snake, camel, dot or kebab (default: snake)",
    )
    style_arg.completer = style_completer  # type: ignore[attr-defined]

    parser.add_argument(
        "-a", "--all", action="store_true", help="Convert to every style and show a table"
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="Output results in JSON format"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "text", nargs="*", help="Text to convert (read from stdin, one per line, if omitted)"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)
    set_debug_enabled(args.debug)

    if not args.text and sys.stdin.isatty():
        print("Available styles:", ", ".join(Style.names()))
        sys.exit(0)

    styles = list(Style) if args.all else [args.style]
    debug_print(f"Selected styles: {[str(s) for s in styles]}")  # pragma: no mutate

    try:
        inputs = read_inputs(args.text)
        rows = [(value, {style: try_convert(value, style) for style in styles}) for value in inputs]
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)

    failed = [
        result for _, results in rows for result in results.values() if not result.ok
    ]

    if args.json:
        print(format_json_output(rows, styles))
    elif args.all:
        print(format_table_output(rows, styles))
    else:
        for _, results in rows:
            result = results[args.style]
            if result.ok:
                print(result.text)
            else:
                print(format_result(result), file=sys.stderr)

    if failed:
        debug_print(f"{len(failed)} conversion(s) failed")  # pragma: no mutate
        sys.exit(1)


if __name__ == "__main__":
    main()
