"""
Program DOCX Compiler
=====================

Compiles an educational-program document (title page plus seven sections
of prose with embedded pipe tables) into a styled .docx package.

Module structure:
- models: FormattingProfile, ProgramSections, Program
- nodes: content and layout nodes, AssembledDocument
- units: cm/pt/line-spacing conversions to office units
- content_parser: section text -> paragraphs and tables
- assembler: sections -> AssembledDocument
- docx_exporter: AssembledDocument -> .docx bytes
- export: one-call build/export helpers
"""

from .models import FormattingProfile, Program, ProgramSections
from .nodes import (
    AssembledDocument,
    ContentNode,
    CoverNode,
    DocumentEntry,
    HeadingNode,
    PageMargins,
    PageNumberHeader,
    ParagraphNode,
    SpacerNode,
    TableNode,
)
from .units import cm_to_twips, column_width_pct, line_spacing_to_units, pt_to_half_points
from .content_parser import ContentParser, parse_content
from .assembler import DocumentAssembler, assemble_document
from .docx_exporter import DocxProgramExporter
from .export import build_program_docx, export_program_docx, suggest_filename

__all__ = [
    # Models
    'FormattingProfile',
    'Program',
    'ProgramSections',

    # Nodes
    'AssembledDocument',
    'ContentNode',
    'CoverNode',
    'DocumentEntry',
    'HeadingNode',
    'PageMargins',
    'PageNumberHeader',
    'ParagraphNode',
    'SpacerNode',
    'TableNode',

    # Units
    'cm_to_twips',
    'column_width_pct',
    'line_spacing_to_units',
    'pt_to_half_points',

    # Parser / assembler / exporter
    'ContentParser',
    'parse_content',
    'DocumentAssembler',
    'assemble_document',
    'DocxProgramExporter',

    # Export helpers
    'build_program_docx',
    'export_program_docx',
    'suggest_filename',
]
