"""Output formatting for conversion results."""

import json
from typing import Dict, List, Sequence, Tuple

from tabulate import tabulate

from .case_utils import ConversionResult
from .styles import Style
from .utils import debug_print

Row = Tuple[object, Dict[Style, ConversionResult]]


def format_result(result: ConversionResult) -> str:
    """Format a single result as the converted text or an error line"""
    if result.ok:
        return result.text
    return f"ERROR: {result.error.message}"


def _table_cell(result: ConversionResult) -> str:
    if result.ok:
        return result.text
    return f"ERROR: {result.error_code}"


def format_table_output(rows: Sequence[Row], styles: Sequence[Style] = tuple(Style)) -> str:
    """Format rows as a grid with one column per style using tabulate"""
    if not rows:
        return "No results found."

    headers = ["Input"] + [str(style) for style in styles]
    table_data: List[List[str]] = []
    for value, results in rows:
        display_value = value if isinstance(value, str) else repr(value)
        if len(display_value) > 80:
            display_value = display_value[:77] + "..."
        table_data.append([display_value] + [_table_cell(results[style]) for style in styles])

    debug_print(f"Formatting {len(table_data)} rows x {len(headers)} columns")  # pragma: no mutate
    return tabulate(table_data, headers=headers, tablefmt="grid")


def _json_value(result: ConversionResult):
    if result.ok:
        return result.text
    return {"error": result.error_code, "message": result.error.message}


def format_json_output(rows: Sequence[Row], styles: Sequence[Style] = tuple(Style)) -> str:
    """Format rows as a JSON list of objects keyed by style name"""
    output = []
    for value, results in rows:
        entry = {"input": value if isinstance(value, str) else repr(value)}
        for style in styles:
            entry[str(style)] = _json_value(results[style])
        output.append(entry)
    return json.dumps(output, indent=2)
