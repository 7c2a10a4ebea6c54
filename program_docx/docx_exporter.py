#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DOCX Program Exporter - serialize an AssembledDocument to Word format.

Uses python-docx library for DOCX generation.
Supports:
- Page margins and A4 page size
- Running header with an auto-updating PAGE field
- Cover paragraph followed by a page break
- Section headings (built-in Heading 1 for outline compatibility)
- Body paragraphs with alignment, line spacing and spacing after
- Bordered full-width tables with shaded header row

Output is deterministic: the same AssembledDocument always produces the
same bytes (pinned core properties, fixed zip timestamps).
"""

import io
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor, Twips

from config.constants import (
    DOCUMENT_AUTHOR,
    LINE_SPACING_UNIT,
    PERCENT_WIDTH_FULL,
    TABLE_BORDER_COLOR,
    TABLE_BORDER_SIZE,
    TABLE_HEADER_FILL,
)
from config.logging_config import get_logger

from .nodes import (
    AssembledDocument,
    CoverNode,
    HeadingNode,
    PageNumberHeader,
    ParagraphNode,
    SpacerNode,
    TableNode,
)
from .units import column_width_pct

logger = get_logger(__name__)

# A4 in twips
PAGE_WIDTH = Twips(11906)
PAGE_HEIGHT = Twips(16838)

FIXED_TIMESTAMP = datetime(2000, 1, 1)
FIXED_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

ALIGNMENT_MAP = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "justified": WD_ALIGN_PARAGRAPH.JUSTIFY,
}


class DocxProgramExporter:
    """
    Export AssembledDocument to DOCX format.

    Usage:
        exporter = DocxProgramExporter()
        payload = exporter.render(document)          # bytes
        path = exporter.export(document, "out.docx") # file
    """

    def __init__(self):
        """Initialize exporter."""
        self.doc = None

    def render(self, document: AssembledDocument) -> bytes:
        """
        Serialize the document to a .docx byte payload.

        Errors raised by python-docx propagate unchanged.
        """
        self.doc = Document()

        self._setup_page_layout(document)
        self._setup_header(document.page_header)
        self._set_metadata(document)

        self._add_cover(document.cover)
        for entry in document.entries:
            self._add_node(entry.node)

        buffer = io.BytesIO()
        self.doc.save(buffer)
        payload = _normalize_package(buffer.getvalue())

        logger.debug(f"Rendered {len(document.entries)} entries into {len(payload)} bytes")
        return payload

    def export(self, document: AssembledDocument, output_path: str) -> str:
        """
        Render and save to a file.

        Returns:
            Absolute path to saved file
        """
        payload = self.render(document)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)

        return str(output_path.absolute())

    # ------------------------------------------------------------------
    # Page setup
    # ------------------------------------------------------------------

    def _setup_page_layout(self, document: AssembledDocument) -> None:
        """Configure page size and margins."""
        section = self.doc.sections[0]
        section.page_width = PAGE_WIDTH
        section.page_height = PAGE_HEIGHT
        section.top_margin = Twips(document.margins.top)
        section.bottom_margin = Twips(document.margins.bottom)
        section.left_margin = Twips(document.margins.left)
        section.right_margin = Twips(document.margins.right)

    def _setup_header(self, page_header: Optional[PageNumberHeader]) -> None:
        """Right-aligned "<prefix><page>" header, or no header at all."""
        if page_header is None:
            return

        header = self.doc.sections[0].header
        para = header.paragraphs[0] if header.paragraphs else header.add_paragraph()
        para.alignment = WD_ALIGN_PARAGRAPH.RIGHT

        prefix = para.add_run(page_header.prefix)
        _apply_font(prefix, page_header.font_name, page_header.font_size)
        self._add_page_number_field(para, page_header)

    def _add_page_number_field(self, paragraph, page_header: PageNumberHeader) -> None:
        """Add auto-updating page number field to paragraph."""
        def styled_run(text=None):
            run = paragraph.add_run(text)
            _apply_font(run, page_header.font_name, page_header.font_size)
            return run

        # Begin field
        fld_begin = OxmlElement('w:fldChar')
        fld_begin.set(qn('w:fldCharType'), 'begin')
        styled_run()._r.append(fld_begin)

        # Field instruction
        instr_text = OxmlElement('w:instrText')
        instr_text.set(qn('xml:space'), 'preserve')
        instr_text.text = "PAGE"
        styled_run()._r.append(instr_text)

        # Separate
        fld_separate = OxmlElement('w:fldChar')
        fld_separate.set(qn('w:fldCharType'), 'separate')
        styled_run()._r.append(fld_separate)

        # Placeholder text
        styled_run("1")

        # End field
        fld_end = OxmlElement('w:fldChar')
        fld_end.set(qn('w:fldCharType'), 'end')
        styled_run()._r.append(fld_end)

    def _set_metadata(self, document: AssembledDocument) -> None:
        """Pin core properties so repeated exports are byte-identical."""
        core_props = self.doc.core_properties
        core_props.title = document.title or ''
        core_props.author = DOCUMENT_AUTHOR
        core_props.last_modified_by = DOCUMENT_AUTHOR
        core_props.created = FIXED_TIMESTAMP
        core_props.modified = FIXED_TIMESTAMP
        core_props.last_printed = FIXED_TIMESTAMP
        core_props.revision = 1

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _add_cover(self, cover: CoverNode) -> None:
        """Add the title paragraph and break to the first content page."""
        para = self.doc.add_paragraph()
        para.alignment = WD_ALIGN_PARAGRAPH.CENTER
        para.paragraph_format.space_before = Twips(cover.space_before)

        run = para.add_run(cover.text)
        _apply_font(run, cover.font_name, cover.font_size, bold=True)

        self.doc.add_page_break()

    def _add_node(self, node) -> None:
        """Add a single node to the document."""
        if isinstance(node, HeadingNode):
            self._add_heading(node)
        elif isinstance(node, ParagraphNode):
            self._add_paragraph(node)
        elif isinstance(node, TableNode):
            self._add_table(node)
        elif isinstance(node, SpacerNode):
            self._add_spacer(node)
        else:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")

    def _add_heading(self, node: HeadingNode) -> None:
        """Add centered section heading in the Heading 1 style."""
        para = self.doc.add_paragraph(style='Heading 1')
        para.alignment = WD_ALIGN_PARAGRAPH.CENTER
        pf = para.paragraph_format
        pf.space_before = Twips(node.space_before)
        pf.space_after = Twips(node.space_after)

        run = para.add_run(node.text)
        _apply_font(run, node.font_name, node.font_size, bold=node.bold)
        run.font.color.rgb = RGBColor(0, 0, 0)

    def _add_paragraph(self, node: ParagraphNode) -> None:
        """Add body paragraph; fallback paragraphs keep document defaults."""
        para = self.doc.add_paragraph()
        run = para.add_run(node.text)
        _apply_font(run, node.font_name, node.font_size)

        if node.alignment is not None:
            para.alignment = ALIGNMENT_MAP.get(node.alignment, WD_ALIGN_PARAGRAPH.LEFT)
        pf = para.paragraph_format
        if node.line_spacing is not None:
            pf.line_spacing = node.line_spacing / LINE_SPACING_UNIT
        if node.space_after is not None:
            pf.space_after = Twips(node.space_after)

    def _add_spacer(self, node: SpacerNode) -> None:
        para = self.doc.add_paragraph()
        para.paragraph_format.space_after = Twips(node.space_after)

    def _add_table(self, node: TableNode) -> None:
        """Add bordered full-width table; header row bold and shaded."""
        rows = node.rows
        table = self.doc.add_table(rows=len(rows), cols=node.column_count)
        table.style = 'Table Grid'
        _set_table_width_pct(table, PERCENT_WIDTH_FULL)

        cell_width = column_width_pct(node.column_count)
        for row_idx, row_data in enumerate(rows):
            is_header = row_idx == 0
            row = table.rows[row_idx]
            for col_idx, cell_text in enumerate(row_data):
                self._format_table_cell(
                    row.cells[col_idx], cell_text, node, cell_width, is_header
                )

        # Space after table
        self.doc.add_paragraph()

    def _format_table_cell(self, doc_cell, text: str, node: TableNode,
                           width_pct: int, is_header: bool) -> None:
        """Apply width, borders, shading and centered text to a cell."""
        tc_pr = doc_cell._tc.get_or_add_tcPr()

        tc_w = tc_pr.get_or_add_tcW()
        tc_w.set(qn('w:type'), 'pct')
        tc_w.set(qn('w:w'), str(width_pct))

        borders = OxmlElement('w:tcBorders')
        for edge in ('top', 'left', 'bottom', 'right'):
            tag = OxmlElement(f'w:{edge}')
            tag.set(qn('w:val'), 'single')
            tag.set(qn('w:sz'), str(TABLE_BORDER_SIZE))
            tag.set(qn('w:space'), '0')
            tag.set(qn('w:color'), TABLE_BORDER_COLOR)
            borders.append(tag)
        tc_pr.append(borders)

        if is_header:
            shading = OxmlElement('w:shd')
            shading.set(qn('w:val'), 'clear')
            shading.set(qn('w:color'), 'auto')
            shading.set(qn('w:fill'), TABLE_HEADER_FILL)
            tc_pr.append(shading)

        para = doc_cell.paragraphs[0]
        para.alignment = WD_ALIGN_PARAGRAPH.CENTER
        if text:
            run = para.add_run(text)
            _apply_font(run, node.font_name, node.font_size, bold=is_header)


def _apply_font(run, font_name: str, half_points: int, bold: Optional[bool] = None) -> None:
    """Set font family (all scripts), size and weight on a run."""
    run.font.name = font_name
    r_fonts = run._element.rPr.rFonts
    r_fonts.set(qn('w:eastAsia'), font_name)
    r_fonts.set(qn('w:cs'), font_name)
    run.font.size = Pt(half_points / 2)
    if bold is not None:
        run.font.bold = bold


def _set_table_width_pct(table, width_pct: int) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn('w:tblW'))
    if tbl_w is None:
        tbl_w = OxmlElement('w:tblW')
        tbl_pr.append(tbl_w)
    tbl_w.set(qn('w:type'), 'pct')
    tbl_w.set(qn('w:w'), str(width_pct))


def _normalize_package(payload: bytes) -> bytes:
    """Rewrite the zip container with fixed entry timestamps."""
    output = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(payload)) as source, \
            zipfile.ZipFile(output, 'w', zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            entry = zipfile.ZipInfo(info.filename, date_time=FIXED_ZIP_DATE_TIME)
            entry.compress_type = zipfile.ZIP_DEFLATED
            entry.external_attr = info.external_attr
            target.writestr(entry, source.read(info.filename))
    return output.getvalue()
