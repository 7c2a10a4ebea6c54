#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for Program DOCX Compiler.

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

API Documentation:
    - OpenAPI docs: http://localhost:8000/docs

Key Endpoints:
    POST /api/export/docx - Compile a program and download the .docx
    POST /api/sections/normalize - Normalize a raw LLM response into sections
    GET /api/health - Liveness check
"""

import re
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field, ValidationError

from ai_providers.section_adapter import SectionPayloadError, normalize_sections
from config.constants import DOCX_MIME_TYPE, SECTION_LABELS
from config.logging_config import get_logger
from config.settings import settings
from program_docx.export import build_program_docx, suggest_filename
from program_docx.models import FormattingProfile, ProgramSections

logger = get_logger(__name__)

# Characters that cannot appear inside the quoted filename parameter
UNSAFE_HEADER_CHARS = re.compile(r'["\\?\x00-\x1f\x7f]')


# =============================================================================
# Pydantic Models for API
# =============================================================================

class ExportRequest(BaseModel):
    """Request model for exporting a program"""
    name: str = Field(..., min_length=1, description="Program name, used for the file name")
    sections: ProgramSections = Field(default_factory=ProgramSections, description="Section texts")
    formatting: Dict[str, Any] = Field(
        default_factory=dict,
        description="Formatting overrides (camelCase or snake_case); unset fields use server defaults",
    )
    labels: Optional[Dict[str, str]] = Field(default=None, description="Section label overrides")


class NormalizeRequest(BaseModel):
    """Request model for normalizing an LLM response"""
    payload: Union[str, Dict[str, Any]] = Field(..., description="Raw response text or decoded JSON object")


# =============================================================================
# App
# =============================================================================

app = FastAPI(
    title="Program DOCX Compiler",
    description="Compile educational program documents to Word",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _content_disposition(filename: str) -> str:
    ascii_name = filename.encode('ascii', 'replace').decode('ascii')
    ascii_name = UNSAFE_HEADER_CHARS.sub('_', ascii_name)
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


@app.get("/api/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


@app.post("/api/export/docx")
async def export_docx(request: ExportRequest):
    """Compile the program and return it as a .docx attachment."""
    try:
        formatting = FormattingProfile.with_defaults(
            request.formatting, settings.formatting_defaults()
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    labels = None
    if request.labels:
        labels = {**SECTION_LABELS, **request.labels}

    title = request.sections.title_page or request.name
    payload = build_program_docx(
        title,
        request.sections,
        formatting,
        labels=labels,
        page_number_prefix=settings.page_number_prefix,
    )

    filename = suggest_filename(request.name, settings.filename_suffix)
    logger.info(f"Exported '{request.name}' ({len(payload)} bytes)")

    return Response(
        content=payload,
        media_type=DOCX_MIME_TYPE,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@app.post("/api/sections/normalize")
async def normalize(request: NormalizeRequest):
    """Normalize a raw LLM response into the section mapping."""
    try:
        sections = normalize_sections(request.payload)
    except SectionPayloadError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"sections": sections.model_dump(by_alias=True)}
