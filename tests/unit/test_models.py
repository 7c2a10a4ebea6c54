"""
Unit tests for program models (program_docx/models.py)
"""

import pytest
from pydantic import ValidationError

from config.constants import DEFAULT_FORMATTING
from program_docx.models import FormattingProfile, Program, ProgramSections


class TestFormattingProfile:

    def test_camel_case_keys(self):
        profile = FormattingProfile.model_validate({
            "fontFamily": "Arial",
            "fontSize": 12,
            "headingFontSize": 15,
            "headingBold": False,
            "lineSpacing": 1.5,
            "alignment": "center",
            "marginTop": 1,
            "marginBottom": 1,
            "marginLeft": 2,
            "marginRight": 1,
            "showPageNumbers": False,
        })
        assert profile.font_family == "Arial"
        assert profile.heading_font_size == 15
        assert profile.show_page_numbers is False

    def test_heading_size_alias(self, formatting_values):
        data = {k: v for k, v in formatting_values.items() if k != "heading_font_size"}
        data["headingSize"] = 18

        assert FormattingProfile.model_validate(data).heading_font_size == 18

    def test_frozen(self, formatting):
        with pytest.raises(ValidationError):
            formatting.font_size = 20

    @pytest.mark.parametrize("field, value", [
        ("font_size", 0),
        ("font_size", -1),
        ("margin_left", 0),
        ("line_spacing", 0),
        ("font_family", ""),
        ("alignment", "right"),
    ])
    def test_invalid_values(self, formatting_values, field, value):
        with pytest.raises(ValidationError):
            FormattingProfile.model_validate({**formatting_values, field: value})

    def test_missing_field(self, formatting_values):
        del formatting_values["font_family"]
        with pytest.raises(ValidationError):
            FormattingProfile.model_validate(formatting_values)

    def test_unknown_keys_ignored(self, formatting_values):
        profile = FormattingProfile.model_validate({**formatting_values, "titlePageColor": "#FFF"})
        assert profile.font_family == "Times New Roman"


class TestWithDefaults:

    def test_no_overrides(self):
        profile = FormattingProfile.with_defaults(None, DEFAULT_FORMATTING)
        assert profile.model_dump() == DEFAULT_FORMATTING

    def test_mixed_key_styles(self):
        profile = FormattingProfile.with_defaults(
            {"fontFamily": "Calibri", "line_spacing": 2, "headingSize": 20},
            DEFAULT_FORMATTING,
        )
        assert profile.font_family == "Calibri"
        assert profile.line_spacing == 2
        assert profile.heading_font_size == 20
        assert profile.font_size == 14

    def test_unknown_override_ignored(self):
        profile = FormattingProfile.with_defaults({"titlePageColor": "#FFF"}, DEFAULT_FORMATTING)
        assert profile == FormattingProfile.model_validate(DEFAULT_FORMATTING)

    def test_invalid_override(self):
        with pytest.raises(ValidationError):
            FormattingProfile.with_defaults({"fontSize": 0}, DEFAULT_FORMATTING)


class TestProgramSections:

    def test_defaults_empty(self):
        sections = ProgramSections()
        assert sections.to_dict() == {key: "" for key in sections.to_dict()}
        assert len(sections.to_dict()) == 8

    def test_from_mapping_camel_case(self):
        sections = ProgramSections.from_mapping({"titlePage": "T", "explanatoryNote": "N"})
        assert sections.title_page == "T"
        assert sections.explanatory_note == "N"

    def test_none_becomes_empty(self):
        assert ProgramSections.from_mapping({"goal": None}).goal == ""

    def test_get(self, sample_sections):
        assert sample_sections.get("goal") == "Развитие инженерного мышления."
        assert sample_sections.get("title_page").startswith("Дополнительная")

    def test_get_unknown_key(self, sample_sections):
        with pytest.raises(KeyError):
            sample_sections.get("appendix")

    def test_dump_by_alias(self, sample_sections):
        dumped = sample_sections.model_dump(by_alias=True)
        assert "explanatoryNote" in dumped
        assert "titlePage" in dumped


class TestProgram:

    def test_editor_record(self, program_record):
        program = Program.model_validate(program_record)

        assert program.name == "Robotics for kids"
        assert program.institution_code == "SCH-42"
        assert program.model_id == "GigaChat-2"
        assert program.sections.goal == "Развитие инженерного мышления."
        assert program.formatting["fontFamily"] == "Arial"

    def test_minimal_record(self):
        program = Program.model_validate({"name": "Chess"})
        assert program.sections == ProgramSections()
        assert program.formatting == {}

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Program.model_validate({"name": ""})
