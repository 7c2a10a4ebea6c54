"""
Pytest configuration and shared fixtures for Program DOCX Compiler tests.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.constants import DEFAULT_FORMATTING
from program_docx.models import FormattingProfile, ProgramSections


# ============================================================================
# Fixtures: Formatting
# ============================================================================

@pytest.fixture
def formatting_values():
    """Complete formatting values (snake_case)."""
    return dict(DEFAULT_FORMATTING)


@pytest.fixture
def formatting(formatting_values):
    """Default formatting profile: Times New Roman 14pt, justified, page numbers."""
    return FormattingProfile.model_validate(formatting_values)


@pytest.fixture
def make_formatting(formatting_values):
    """Factory for profiles that differ from the defaults in a few fields."""
    def _make(**overrides):
        return FormattingProfile.model_validate({**formatting_values, **overrides})
    return _make


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

CURRICULUM_TABLE = (
    "Учебный план на 72 часа.\n"
    "| № п/п | Тема | Всего | Теория | Практика | Форма контроля |\n"
    "|---|---|---|---|---|---|\n"
    "| 1 | Введение | 2 | 1 | 1 | Опрос |\n"
    "| 2 | Основы робототехники | 10 | 4 | 6 | Практическая работа |\n"
    "\n"
    "Итого: 12 часов."
)


@pytest.fixture
def sample_sections():
    """A complete set of program sections, curriculum with a table."""
    return ProgramSections(
        title_page="Дополнительная общеобразовательная программа «Робототехника»",
        explanatory_note="Программа знакомит учащихся с основами робототехники.\nАктуальность обусловлена...",
        goal="Развитие инженерного мышления.",
        tasks="Обучающие: изучить основы.\nРазвивающие: развивать логику.\nВоспитательные: воспитывать ответственность.",
        results="Личностные: ...\nПредметные: ...",
        curriculum=CURRICULUM_TABLE,
        assessment="Опрос, практические работы, защита проекта.",
        literature="1. Филиппов С. А. Робототехника для детей и родителей. — СПб.: Наука, 2013.",
    )


@pytest.fixture
def program_record(sample_sections, formatting_values):
    """Program record as the editor stores it (camelCase JSON)."""
    return {
        "id": "prog-1",
        "name": "Robotics for kids",
        "hours": 72,
        "level": "Базовый",
        "institutionCode": "SCH-42",
        "author": "user-1",
        "modelId": "GigaChat-2",
        "sections": sample_sections.model_dump(by_alias=True),
        "formatting": {
            "fontFamily": "Arial",
            "fontSize": 12,
            "lineSpacing": 1.5,
            "alignment": "left",
            "marginTop": 2,
            "marginBottom": 2,
            "marginLeft": 3,
            "marginRight": 1.5,
            "showPageNumbers": True,
            "titlePageColor": "#FFFFFF",
            "headingBold": True,
            "headingSize": 16,
        },
    }
