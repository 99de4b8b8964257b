# transcript/markdown/preprocessors/tables.py
"""
Preprocessor that turns pipe-delimited lines into table markup.

A line is a table row when, ignoring surrounding spaces and tabs, it starts
and ends with "|":

    | Name | Qty |
    |------|:---:|
    | Tea  | 2   |

    → <table><tr><td>Name</td><td>Qty</td></tr>
      <tr><th>------</th><th>:---:</th></tr>
      <tr><td>Tea</td><td>2</td></tr></table>

Header vs data is decided per cell: a cell made of dashes (optionally with
alignment colons) renders as <th>, everything else as <td>. Rows with only
whitespace between them share one <table>, blank lines between them are
dropped; any other line between rows starts a new table.
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

TABLE_ROW_PATTERN = re.compile(r"^[ \t]*\|.*\|[ \t]*$")

SEPARATOR_CELL_PATTERN = re.compile(r"^:?-+:?$")


def is_table_row(line: str) -> bool:
    return bool(TABLE_ROW_PATTERN.match(line))


def split_cells(line: str) -> List[str]:
    """Split a row on "|", dropping the empty cells outside the boundary pipes."""
    cells = line.strip(" \t").split("|")[1:-1]
    return [cell.strip() for cell in cells]


def render_row(line: str) -> str:
    cell_tags = []
    for cell in split_cells(line):
        tag = "th" if SEPARATOR_CELL_PATTERN.match(cell) else "td"
        cell_tags.append(f"<{tag}>{cell}</{tag}>")
    return f"<tr>{''.join(cell_tags)}</tr>"


def tables(text: str, context: dict) -> str:
    """
    Convert table rows and wrap each run of adjacent rows in <table>.

    Args:
        text: Escaped message text
        context: Render context (not used currently)

    Returns:
        Text with table markup in place of pipe rows
    """
    output = []
    rows = []
    pending_blank = []
    table_count = 0

    def flush_rows():
        nonlocal table_count
        if rows:
            output.append("<table>" + "\n".join(rows) + "</table>")
            rows.clear()
            table_count += 1
        # Whitespace after the last row stays outside the table
        output.extend(pending_blank)
        pending_blank.clear()

    for line in text.split("\n"):
        if is_table_row(line):
            # Only whitespace since the previous row: same table
            pending_blank.clear()
            rows.append(render_row(line))
            continue
        if rows and not line.strip():
            pending_blank.append(line)
            continue
        flush_rows()
        output.append(line)

    flush_rows()

    if table_count:
        logger.debug(f"Built {table_count} table(s)")

    return "\n".join(output)
