#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Table Detection Patterns - pipe-delimited table rows embedded in prose.

Only the single Markdown construct is recognized:

    | Topic | Hours |
    |-------|-------|
    | Intro | 2     |

The rule line is checked loosely: any '-' confirms it.
"""

import re
from typing import List, Sequence

from config.constants import TABLE_CELL_DELIMITER, TABLE_RULE_CHAR


# Bare "\n" and "\r\n" line endings
LINE_SPLIT_PATTERN = re.compile(r'\r?\n')


def split_lines(text: str) -> List[str]:
    """Split text on any newline convention and strip every line."""
    if not text:
        return []
    return [line.strip() for line in LINE_SPLIT_PATTERN.split(text)]


def is_table_row(line: str) -> bool:
    """Check if a stripped line is delimited like a table row."""
    return line.startswith(TABLE_CELL_DELIMITER)


def is_rule_line(line: str) -> bool:
    """Check if a line can serve as the separator under a header row."""
    return bool(line) and TABLE_RULE_CHAR in line


def parse_table_row(line: str) -> List[str]:
    """
    Parse a pipe-delimited row into cells.

    Args:
        line: Table row like "| cell1 | cell2 | cell3 |"

    Returns:
        List of cell contents; the empty cells produced by a leading and a
        trailing delimiter are dropped, inner empty cells are kept.
    """
    line = line.strip()
    cells = line.split(TABLE_CELL_DELIMITER)

    if line.startswith(TABLE_CELL_DELIMITER):
        cells = cells[1:]
    if line.endswith(TABLE_CELL_DELIMITER) and cells:
        cells = cells[:-1]

    return [cell.strip() for cell in cells]


def max_column_count(rows: Sequence[Sequence[str]]) -> int:
    """Widest row in cells (0 for no rows)."""
    return max((len(row) for row in rows), default=0)


def pad_row(row: Sequence[str], column_count: int) -> List[str]:
    """Pad a row with empty cells up to `column_count`."""
    return list(row) + [''] * (column_count - len(row))
