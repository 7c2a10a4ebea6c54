#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Program export entry points: assemble, serialize once, hand the bytes on.
"""

import re
from pathlib import Path
from typing import Mapping, Optional, Union

from config.constants import FILENAME_SUFFIX, PAGE_NUMBER_PREFIX
from config.logging_config import get_logger

from .assembler import DocumentAssembler
from .docx_exporter import DocxProgramExporter
from .models import FormattingProfile, Program, ProgramSections

logger = get_logger(__name__)

WHITESPACE_PATTERN = re.compile(r'\s+')


def suggest_filename(name: str, suffix: str = FILENAME_SUFFIX) -> str:
    """
    Download file name for a program.

    >>> suggest_filename("Robotics  for kids")
    'Robotics_for_kids_Program.docx'
    """
    return f"{WHITESPACE_PATTERN.sub('_', name)}{suffix}"


def build_program_docx(
    title: str,
    sections: Union[ProgramSections, Mapping[str, str]],
    formatting: FormattingProfile,
    labels: Optional[Mapping[str, str]] = None,
    page_number_prefix: str = PAGE_NUMBER_PREFIX,
) -> bytes:
    """
    Compile a program document to .docx bytes.

    Args:
        title: Title page text
        sections: Section texts
        formatting: Formatting profile
        labels: Human-readable section labels
        page_number_prefix: Text shown before the page number

    Returns:
        DOCX byte payload
    """
    assembler = DocumentAssembler(
        formatting, labels=labels, page_number_prefix=page_number_prefix
    )
    document = assembler.assemble(title, sections)
    return DocxProgramExporter().render(document)


def export_program_docx(
    program: Program,
    formatting: FormattingProfile,
    output_dir: Union[str, Path],
    labels: Optional[Mapping[str, str]] = None,
    suffix: str = FILENAME_SUFFIX,
    page_number_prefix: str = PAGE_NUMBER_PREFIX,
) -> Path:
    """
    Compile a program and write it to `output_dir`.

    The title page text is the cover; an empty title page falls back to the
    program name.

    Returns:
        Path of the written file
    """
    title = program.sections.title_page or program.name
    payload = build_program_docx(
        title,
        program.sections,
        formatting,
        labels=labels,
        page_number_prefix=page_number_prefix,
    )

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / suggest_filename(program.name, suffix)
    output_path.write_bytes(payload)

    logger.info(f"Exported '{program.name}' to {output_path} ({len(payload)} bytes)")
    return output_path
