#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Program Export CLI - compile program records to Word documents

Usage:
    program-docx export program.json --output-dir out/
    program-docx export program.json --font Arial --font-size 12 --no-page-numbers
    program-docx normalize response.txt --program program.json --output program.json
"""

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ai_providers.section_adapter import SectionPayloadError, normalize_sections
from config.constants import FONT_OPTIONS
from config.logging_config import get_logger
from config.settings import settings
from program_docx.export import export_program_docx
from program_docx.models import FormattingProfile, Program

logger = get_logger(__name__)


def load_program(path: Path) -> Program:
    """Read a program record saved by the editor."""
    with open(path, 'r', encoding='utf-8') as f:
        return Program.model_validate(json.load(f))


def formatting_overrides(args) -> Dict[str, Any]:
    """Formatting options given on the command line"""
    overrides = {}
    if args.font:
        overrides['font_family'] = args.font
    if args.font_size is not None:
        overrides['font_size'] = args.font_size
    if args.heading_size is not None:
        overrides['heading_font_size'] = args.heading_size
    if args.line_spacing is not None:
        overrides['line_spacing'] = args.line_spacing
    if args.alignment:
        overrides['alignment'] = args.alignment
    if args.no_page_numbers:
        overrides['show_page_numbers'] = False
    return overrides


def cmd_export(args) -> int:
    """Compile a program JSON file to .docx"""
    try:
        program = load_program(Path(args.program))
        # Command-line options are applied after the stored formatting
        overrides = {**program.formatting, **formatting_overrides(args)}
        formatting = FormattingProfile.with_defaults(overrides, settings.formatting_defaults())
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Cannot load program {args.program}: {e}")
        return 1

    output_dir = Path(args.output_dir) if args.output_dir else settings.output_dir
    output_path = export_program_docx(
        program,
        formatting,
        output_dir,
        suffix=settings.filename_suffix,
        page_number_prefix=settings.page_number_prefix,
    )
    print(output_path)
    return 0


def cmd_normalize(args) -> int:
    """Normalize a raw LLM response into program sections"""
    try:
        raw = Path(args.response).read_text(encoding='utf-8')
        sections = normalize_sections(raw)
    except (OSError, SectionPayloadError) as e:
        logger.error(f"Cannot normalize {args.response}: {e}")
        return 1

    if args.program:
        try:
            with open(args.program, 'r', encoding='utf-8') as f:
                record = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot load program {args.program}: {e}")
            return 1
        record['sections'] = sections.model_dump(by_alias=True)
        result = record
    else:
        result = sections.model_dump(by_alias=True)

    text = json.dumps(result, ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(text + '\n', encoding='utf-8')
        logger.info(f"Sections written to {args.output}")
    else:
        print(text)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='program-docx',
        description="Compile educational program documents to Word",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export a program JSON file to .docx')
    export_parser.add_argument('program', help='Program JSON file')
    export_parser.add_argument('--output-dir', '-o', help='Output directory (default: settings.output_dir)')
    export_parser.add_argument('--font', help=f"Font family (e.g. {', '.join(FONT_OPTIONS)})")
    export_parser.add_argument('--font-size', type=float, help='Body font size in points')
    export_parser.add_argument('--heading-size', type=float, help='Heading font size in points')
    export_parser.add_argument('--line-spacing', type=float, help='Line spacing multiplier')
    export_parser.add_argument('--alignment', choices=['left', 'center', 'justified'], help='Body alignment')
    export_parser.add_argument('--no-page-numbers', action='store_true', help='Omit the page number header')

    # Normalize command
    normalize_parser = subparsers.add_parser('normalize', help='Normalize a raw LLM response into sections')
    normalize_parser.add_argument('response', help='File with the raw model response')
    normalize_parser.add_argument('--program', '-p', help='Program JSON whose sections are replaced')
    normalize_parser.add_argument('--output', '-o', help='Output file (default: stdout)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command handlers
    commands = {
        'export': cmd_export,
        'normalize': cmd_normalize,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
