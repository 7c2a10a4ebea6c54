#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Nodes - the intermediate tree between parsed text and DOCX.

All sizes are already in the office format's native units:
- font sizes in half-points
- spacing and margins in twips
- line spacing in 240ths of a line
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


# =============================================================================
# CONTENT NODES (produced by the content parser)
# =============================================================================

@dataclass(frozen=True)
class ParagraphNode:
    """
    One body paragraph.

    Fallback paragraphs (table-like text that failed table detection) keep
    the layout fields as None and render with the document defaults.
    """
    text: str
    font_name: str
    font_size: int
    alignment: Optional[str] = None
    line_spacing: Optional[int] = None
    space_after: Optional[int] = None

    @property
    def is_fallback(self) -> bool:
        return self.alignment is None


@dataclass(frozen=True)
class TableNode:
    """Flat table: one header row plus body rows, all padded to the same width."""
    header_cells: Tuple[str, ...]
    body_rows: Tuple[Tuple[str, ...], ...]
    font_name: str
    font_size: int

    @property
    def column_count(self) -> int:
        return len(self.header_cells)

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        """Header row followed by body rows."""
        return (self.header_cells,) + self.body_rows


ContentNode = Union[ParagraphNode, TableNode]


# =============================================================================
# LAYOUT NODES (produced by the assembler)
# =============================================================================

@dataclass(frozen=True)
class HeadingNode:
    """Centered section heading."""
    text: str
    font_name: str
    font_size: int
    bold: bool
    space_before: int
    space_after: int


@dataclass(frozen=True)
class SpacerNode:
    """Empty paragraph closing a section."""
    space_after: int


@dataclass(frozen=True)
class CoverNode:
    """Title page text; always followed by a page break."""
    text: str
    font_name: str
    font_size: int
    space_before: int


@dataclass(frozen=True)
class PageNumberHeader:
    """Running header: prefix followed by the current page number."""
    prefix: str
    font_name: str
    font_size: int


@dataclass(frozen=True)
class PageMargins:
    """Page margins in twips."""
    top: int
    bottom: int
    left: int
    right: int


DocumentNode = Union[HeadingNode, ParagraphNode, TableNode, SpacerNode]


@dataclass(frozen=True)
class DocumentEntry:
    """A body node tagged with the section it belongs to."""
    section_key: Optional[str]
    node: DocumentNode


@dataclass(frozen=True)
class AssembledDocument:
    """Complete, immutable document ready for serialization."""
    title: str
    cover: CoverNode
    margins: PageMargins
    entries: Tuple[DocumentEntry, ...] = field(default_factory=tuple)
    page_header: Optional[PageNumberHeader] = None

    def headings(self) -> Tuple[HeadingNode, ...]:
        return tuple(e.node for e in self.entries if isinstance(e.node, HeadingNode))

    def section_nodes(self, section_key: str) -> Tuple[DocumentNode, ...]:
        """Body nodes of one section, excluding its heading and spacer."""
        return tuple(
            e.node for e in self.entries
            if e.section_key == section_key
            and not isinstance(e.node, (HeadingNode, SpacerNode))
        )
