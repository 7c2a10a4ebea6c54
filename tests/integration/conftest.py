#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest fixtures for integration tests.

Provides:
- temp_output_dir: Temporary directory for exported documents
- program_file: Program record saved the way the editor saves it
- llm_response_file: Raw fenced LLM response
"""

import json
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def temp_output_dir():
    """Temporary directory for test outputs."""
    temp_dir = Path(tempfile.mkdtemp(prefix="program_docx_test_"))
    yield temp_dir
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def program_file(temp_output_dir, program_record):
    """Program JSON file on disk."""
    path = temp_output_dir / "program.json"
    path.write_text(json.dumps(program_record, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def llm_response_file(temp_output_dir):
    """Fenced JSON response as returned by the model."""
    payload = {
        "titlePage": "Программа «Шахматы»",
        "goal": "Цель программы: развитие логического мышления",
        "tasks": "Обучающие: правила. Развивающие: память. Воспитательные: усидчивость.",
        "literature": ["Книга 1", "Книга 2"],
    }
    path = temp_output_dir / "response.txt"
    path.write_text("```json\n" + json.dumps(payload, ensure_ascii=False) + "\n```", encoding="utf-8")
    return path
