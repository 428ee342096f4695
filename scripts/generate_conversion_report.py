#!/usr/bin/env python3
"""
Conversion consistency report.

Converts a set of sample inputs to every style and records:
1. The converted output (or the error code) per style
2. Whether re-applying a style to its own output changes it
3. Which inputs contain whitespace in any output

This helps spot regressions in the boundary detection rules.
"""

import argparse
import json
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List

import yaml

from identcase.case_utils import convert_all, try_convert
from identcase.styles import Style

DEFAULT_SAMPLES = [
    "hello world",
    "hello_world",
    "hello-world",
    "hello__world",
    "hello world! test",
    "HelloWorld",
    "helloWorld",
    "HTTPSConnection",
    "user_full name!",
    "this is an example",
    "version 2 update",
    "html5 parser",
    "XMLHttpRequest",
    "  padded   input  ",
    "!!!",
    "   ",
]


def load_inputs(path: str) -> List[str]:
    """Read one input per line, keeping blank lines out."""
    with open(path, "r") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


def check_idempotence(output: str, style: Style) -> bool:
    """True when converting ``output`` again to ``style`` returns it unchanged."""
    again = try_convert(output, style)
    return again.ok and again.text == output


def analyze_input(value: str) -> Dict[str, Any]:
    """Convert a single input to every style and collect per-style findings."""
    entry: Dict[str, Any] = {"input": value, "styles": {}}
    for style, result in convert_all(value).items():
        if not result.ok:
            entry["styles"][str(style)] = {"error": result.error_code}
            continue

        entry["styles"][str(style)] = {
            "output": result.text,
            "idempotent": check_idempotence(result.text, style),
            "contains_whitespace": any(char.isspace() for char in result.text),
        }
    return entry


def generate_report(inputs: List[str]) -> Dict[str, Any]:
    """Build the full report with per-input entries and statistics."""
    entries = [analyze_input(value) for value in inputs]

    errors: Counter = Counter()
    non_idempotent = []
    whitespace = []
    for entry in entries:
        for style_name, data in entry["styles"].items():
            if "error" in data:
                errors[data["error"]] += 1
                continue
            if not data["idempotent"]:
                non_idempotent.append({"input": entry["input"], "style": style_name})
            if data["contains_whitespace"]:
                whitespace.append({"input": entry["input"], "style": style_name})

    total = len(entries) * len(Style)
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "statistics": {
            "total_inputs": len(entries),
            "total_conversions": total,
            "failed_conversions": sum(errors.values()),
            "errors_by_code": dict(sorted(errors.items())),
            "non_idempotent": len(non_idempotent),
            "outputs_with_whitespace": len(whitespace),
        },
        "issues": {
            "non_idempotent": non_idempotent,
            "outputs_with_whitespace": whitespace,
        },
        "entries": entries,
    }


def markdown_code(value) -> str:
    """Render text as an inline code span that stays inside one table cell."""
    text = str(value).replace("|", "\\|")
    if "`" in text:
        return f"`` {text} ``"
    return f"`{text}`"


def generate_markdown_report(report: Dict[str, Any], include_entries: bool = False) -> str:
    """Render the report as markdown; by default only statistics and issues."""
    stats = report["statistics"]
    lines = [
        "# Conversion Report",
        "",
        f"Generated: {report['generated_at']}",
        "",
        "## Statistics",
        "",
        f"- Inputs: {stats['total_inputs']}",
        f"- Conversions: {stats['total_conversions']}",
        f"- Failed: {stats['failed_conversions']}",
        f"- Non-idempotent: {stats['non_idempotent']}",
        f"- Outputs with whitespace: {stats['outputs_with_whitespace']}",
        "",
    ]

    if stats["errors_by_code"]:
        lines.append("| Error | Count |")
        lines.append("|-------|-------|")
        for code, count in stats["errors_by_code"].items():
            lines.append(f"| `{code}` | {count} |")
        lines.append("")

    for title, key in [
        ("Non-idempotent conversions", "non_idempotent"),
        ("Outputs containing whitespace", "outputs_with_whitespace"),
    ]:
        issues = report["issues"][key]
        if not issues:
            continue
        lines.append(f"## {title}")
        lines.append("")
        lines.append("| Input | Style |")
        lines.append("|-------|-------|")
        for item in issues:
            lines.append(f"| {markdown_code(item['input'])} | {item['style']} |")
        lines.append("")

    if include_entries:
        lines.append("## Conversions")
        lines.append("")
        header = "| Input | " + " | ".join(Style.names()) + " |"
        lines.append(header)
        lines.append("|" + "-------|" * (len(Style) + 1))
        for entry in report["entries"]:
            cells = []
            for name in Style.names():
                data = entry["styles"][name]
                cells.append(markdown_code(data["output"]) if "output" in data else data["error"])
            lines.append(f"| {markdown_code(entry['input'])} | " + " | ".join(cells) + " |")
        lines.append("")

    return "\n".join(lines)


def main(argv=None):
    """Main execution function."""
    parser = argparse.ArgumentParser(
        description="Convert sample inputs to every style and report inconsistencies"
    )
    parser.add_argument(
        "--input-file",
        help="File with one input per line (default: built-in samples)",
    )
    parser.add_argument(
        "--output-format",
        choices=["json", "yaml", "markdown", "all"],
        default="all",
        help="Output format for the report (default: all)",
    )
    parser.add_argument(
        "--output-prefix",
        default="conversion-report",
        help="Path prefix for report files (default: conversion-report)",
    )
    parser.add_argument(
        "--full-report",
        action="store_true",
        help="[Markdown only] Include every conversion, not just issues",
    )

    args = parser.parse_args(argv)

    inputs = load_inputs(args.input_file) if args.input_file else list(DEFAULT_SAMPLES)
    print(f"Converting {len(inputs)} inputs to {len(Style)} styles...")

    report = generate_report(inputs)

    if args.output_format in ["json", "all"]:
        output_file = f"{args.output_prefix}.json"
        with open(output_file, "w") as f:
            json.dump(report, f, indent=2)
        print(f"JSON report saved to: {output_file}")

    if args.output_format in ["yaml", "all"]:
        output_file_yaml = f"{args.output_prefix}.yaml"
        with open(output_file_yaml, "w") as f:
            yaml.dump(report, f, default_flow_style=False, sort_keys=False)
        print(f"YAML report saved to: {output_file_yaml}")

    if args.output_format in ["markdown", "all"]:
        output_file_md = f"{args.output_prefix}.md"
        with open(output_file_md, "w") as f:
            f.write(generate_markdown_report(report, include_entries=args.full_report))
        print(f"Markdown report saved to: {output_file_md}")

    stats = report["statistics"]
    print()
    print("Summary:")
    print(f"  Inputs: {stats['total_inputs']}")
    print(f"  Conversions: {stats['total_conversions']}")
    print(f"  Failed: {stats['failed_conversions']}")
    for code, count in stats["errors_by_code"].items():
        print(f"    {code:20} {count}")
    print(f"  Non-idempotent: {stats['non_idempotent']}")
    print(f"  Outputs with whitespace: {stats['outputs_with_whitespace']}")


if __name__ == "__main__":
    main()
