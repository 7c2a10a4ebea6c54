#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Content Parser - turn one section's raw text into content nodes.

The text is freeform prose (typed by the user or generated by an LLM)
that may embed pipe-delimited tables. A single line-oriented pass with
one line of lookahead splits it into paragraphs and tables:

- a line starting with '|' whose next line contains '-' opens a table
- an empty line or a line without the leading '|' closes it
- anything that fails table parsing is kept as plain paragraphs

Parsing never raises: ambiguous input degrades to paragraphs so no text
is ever lost.
"""

from typing import List, Optional

from config.constants import PARAGRAPH_SPACE_AFTER
from config.logging_config import get_logger

from .models import FormattingProfile
from .nodes import ContentNode, ParagraphNode, TableNode
from .units import line_spacing_to_units, pt_to_half_points
from .utils.table_patterns import (
    is_rule_line,
    is_table_row,
    max_column_count,
    pad_row,
    parse_table_row,
    split_lines,
)

logger = get_logger(__name__)


class ContentParser:
    """
    Parse section text into ParagraphNode / TableNode sequences.

    Usage:
        parser = ContentParser(formatting)
        nodes = parser.parse("Intro\\n| A | B |\\n|---|---|\\n| 1 | 2 |")
    """

    def __init__(self, formatting: FormattingProfile):
        """
        Initialize parser.

        Args:
            formatting: Profile whose font, size, alignment and line
                spacing are stamped onto every emitted paragraph
        """
        self.formatting = formatting
        self.font_name = formatting.font_family
        self.font_size = pt_to_half_points(formatting.font_size)
        self.line_spacing = line_spacing_to_units(formatting.line_spacing)

    def parse(self, text: Optional[str]) -> List[ContentNode]:
        """
        Parse text into content nodes.

        Args:
            text: Raw section text (may be empty)

        Returns:
            Ordered list of ParagraphNode and TableNode
        """
        lines = split_lines(text or '')
        nodes: List[ContentNode] = []
        text_buffer: List[str] = []
        table_buffer: List[str] = []
        in_table = False

        for i, line in enumerate(lines):
            next_line = lines[i + 1] if i + 1 < len(lines) else ''

            if not in_table and is_table_row(line) and is_rule_line(next_line):
                self._flush_text(text_buffer, nodes)
                in_table = True
                table_buffer.append(line)
                continue

            if in_table:
                if line and is_table_row(line):
                    table_buffer.append(line)
                    continue

                # Table ended
                self._flush_table(table_buffer, nodes)
                in_table = False
                if line:
                    text_buffer.append(line)
            else:
                text_buffer.append(line)

        if in_table:
            self._flush_table(table_buffer, nodes)
        else:
            self._flush_text(text_buffer, nodes)

        logger.debug(
            f"Parsed {len(lines)} lines into {len(nodes)} nodes "
            f"({sum(isinstance(n, TableNode) for n in nodes)} tables)"
        )
        return nodes

    def _flush_text(self, buffer: List[str], nodes: List[ContentNode]) -> None:
        """Emit one paragraph per non-blank buffered line."""
        for line in buffer:
            if line.strip():
                nodes.append(self._paragraph(line.strip()))
        buffer.clear()

    def _flush_table(self, buffer: List[str], nodes: List[ContentNode]) -> None:
        """Emit a table, or the buffered lines as paragraphs if they are not one."""
        if not buffer:
            return

        table = self._build_table(buffer)
        if table is not None:
            nodes.append(table)
        else:
            logger.debug(f"Table fallback: {len(buffer)} lines kept as paragraphs")
            for line in buffer:
                nodes.append(ParagraphNode(
                    text=line,
                    font_name=self.font_name,
                    font_size=self.font_size,
                ))
        buffer.clear()

    def _build_table(self, lines: List[str]) -> Optional[TableNode]:
        """
        Build a table from buffered lines.

        Line 0 is the header, line 1 the rule line (only its presence
        matters), the rest are body rows.

        Returns:
            TableNode, or None when the lines do not form a table
        """
        if len(lines) < 2 or not is_rule_line(lines[1]):
            return None

        header = parse_table_row(lines[0])
        body = [parse_table_row(line) for line in lines[2:]]

        column_count = max_column_count([header] + body)
        if column_count == 0:
            return None

        return TableNode(
            header_cells=tuple(pad_row(header, column_count)),
            body_rows=tuple(tuple(pad_row(row, column_count)) for row in body),
            font_name=self.font_name,
            font_size=self.font_size,
        )

    def _paragraph(self, text: str) -> ParagraphNode:
        return ParagraphNode(
            text=text,
            font_name=self.font_name,
            font_size=self.font_size,
            alignment=self.formatting.alignment,
            line_spacing=self.line_spacing,
            space_after=PARAGRAPH_SPACE_AFTER,
        )


def parse_content(text: Optional[str], formatting: FormattingProfile) -> List[ContentNode]:
    """
    Convenience function: parse one section's text.

    Args:
        text: Raw section text
        formatting: Active formatting profile

    Returns:
        Ordered list of content nodes
    """
    return ContentParser(formatting).parse(text)
