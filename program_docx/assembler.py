#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Assembler - combine title, sections and formatting into one
AssembledDocument.

Layout:
- cover: title centered and bold, pushed down the page, then a page break
- for each section in canonical order: heading, parsed body, spacer
- optional running header with the page number
"""

from typing import List, Mapping, Optional, Union

from config.constants import (
    COVER_SPACE_BEFORE,
    HEADING_SPACE_AFTER,
    HEADING_SPACE_BEFORE,
    PAGE_NUMBER_FONT_SIZE,
    PAGE_NUMBER_PREFIX,
    SECTION_LABELS,
    SECTION_ORDER,
    SECTION_SPACER_AFTER,
)
from config.logging_config import get_logger

from .content_parser import ContentParser
from .models import FormattingProfile, ProgramSections
from .nodes import (
    AssembledDocument,
    CoverNode,
    DocumentEntry,
    HeadingNode,
    PageMargins,
    PageNumberHeader,
    SpacerNode,
)
from .units import cm_to_twips, pt_to_half_points

logger = get_logger(__name__)


class DocumentAssembler:
    """
    Build an AssembledDocument from program sections.

    Usage:
        assembler = DocumentAssembler(formatting)
        document = assembler.assemble(title, sections)
    """

    def __init__(
        self,
        formatting: FormattingProfile,
        labels: Optional[Mapping[str, str]] = None,
        page_number_prefix: str = PAGE_NUMBER_PREFIX,
    ):
        """
        Initialize assembler.

        Args:
            formatting: Formatting profile for the whole export
            labels: Human-readable section labels (defaults to SECTION_LABELS)
            page_number_prefix: Text shown before the page number
        """
        self.formatting = formatting
        self.labels = dict(labels) if labels is not None else dict(SECTION_LABELS)
        self.page_number_prefix = page_number_prefix
        self.parser = ContentParser(formatting)

    def assemble(
        self,
        title: str,
        sections: Union[ProgramSections, Mapping[str, str]],
    ) -> AssembledDocument:
        """
        Assemble the document.

        Args:
            title: Title page text
            sections: Section texts; mapping order is irrelevant

        Returns:
            AssembledDocument
        """
        if not isinstance(sections, ProgramSections):
            sections = ProgramSections.from_mapping(sections)

        entries: List[DocumentEntry] = []
        for key in SECTION_ORDER:
            entries.append(DocumentEntry(key, self._heading(key)))
            for node in self.parser.parse(sections.get(key)):
                entries.append(DocumentEntry(key, node))
            entries.append(DocumentEntry(key, SpacerNode(space_after=SECTION_SPACER_AFTER)))

        document = AssembledDocument(
            title=title,
            cover=self._cover(title),
            margins=self.page_margins(),
            entries=tuple(entries),
            page_header=self._page_header(),
        )

        logger.debug(f"Assembled {len(entries)} entries across {len(SECTION_ORDER)} sections")
        return document

    def page_margins(self) -> PageMargins:
        """Profile margins converted from centimeters to twips."""
        f = self.formatting
        return PageMargins(
            top=cm_to_twips(f.margin_top),
            bottom=cm_to_twips(f.margin_bottom),
            left=cm_to_twips(f.margin_left),
            right=cm_to_twips(f.margin_right),
        )

    def _cover(self, title: str) -> CoverNode:
        return CoverNode(
            text=title or '',
            font_name=self.formatting.font_family,
            font_size=pt_to_half_points(self.formatting.font_size),
            space_before=COVER_SPACE_BEFORE,
        )

    def _heading(self, key: str) -> HeadingNode:
        label = self.labels.get(key, key)
        return HeadingNode(
            text=label.upper(),
            font_name=self.formatting.font_family,
            font_size=pt_to_half_points(self.formatting.heading_font_size),
            bold=self.formatting.heading_bold,
            space_before=HEADING_SPACE_BEFORE,
            space_after=HEADING_SPACE_AFTER,
        )

    def _page_header(self) -> Optional[PageNumberHeader]:
        if not self.formatting.show_page_numbers:
            return None
        return PageNumberHeader(
            prefix=self.page_number_prefix,
            font_name=self.formatting.font_family,
            font_size=pt_to_half_points(PAGE_NUMBER_FONT_SIZE),
        )


def assemble_document(
    title: str,
    sections: Union[ProgramSections, Mapping[str, str]],
    formatting: FormattingProfile,
    labels: Optional[Mapping[str, str]] = None,
) -> AssembledDocument:
    """
    Convenience function: assemble a program document.

    Args:
        title: Title page text
        sections: Section texts
        formatting: Formatting profile
        labels: Human-readable section labels

    Returns:
        AssembledDocument
    """
    return DocumentAssembler(formatting, labels=labels).assemble(title, sections)
