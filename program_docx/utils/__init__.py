"""
Text helpers for the content parser.
"""

from .table_patterns import (
    is_rule_line,
    is_table_row,
    max_column_count,
    pad_row,
    parse_table_row,
    split_lines,
)

__all__ = [
    'is_rule_line',
    'is_table_row',
    'max_column_count',
    'pad_row',
    'parse_table_row',
    'split_lines',
]
