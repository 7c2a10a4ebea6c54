"""
Integration tests for the command line (export_program.py)
"""

import json

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from export_program import main


class TestExportCommand:

    def test_export_program(self, program_file, temp_output_dir, capsys):
        out_dir = temp_output_dir / "out"

        assert main(["export", str(program_file), "--output-dir", str(out_dir)]) == 0

        output_path = out_dir / "Robotics_for_kids_Program.docx"
        assert output_path.exists()
        assert str(output_path) in capsys.readouterr().out

        doc = Document(str(output_path))
        assert doc.paragraphs[0].text.startswith("Дополнительная")
        # stored formatting is applied
        assert doc.paragraphs[0].runs[0].font.name == "Arial"
        assert len(doc.tables) == 1

    def test_command_line_overrides_stored_formatting(self, program_file, temp_output_dir):
        out_dir = temp_output_dir / "out"
        code = main([
            "export", str(program_file), "-o", str(out_dir),
            "--font", "Calibri", "--alignment", "center", "--no-page-numbers",
        ])
        assert code == 0

        doc = Document(str(out_dir / "Robotics_for_kids_Program.docx"))
        assert doc.paragraphs[0].runs[0].font.name == "Calibri"
        assert doc.sections[0].header.is_linked_to_previous

        body = next(p for p in doc.paragraphs if p.text == "Развитие инженерного мышления.")
        assert body.alignment == WD_ALIGN_PARAGRAPH.CENTER

    def test_missing_file(self, temp_output_dir):
        assert main(["export", str(temp_output_dir / "missing.json")]) == 1

    def test_invalid_record(self, temp_output_dir):
        path = temp_output_dir / "bad.json"
        path.write_text(json.dumps({"name": ""}), encoding="utf-8")

        assert main(["export", str(path), "-o", str(temp_output_dir)]) == 1

    def test_invalid_override(self, program_file, temp_output_dir):
        assert main(["export", str(program_file), "-o", str(temp_output_dir), "--font-size", "0"]) == 1


class TestNormalizeCommand:

    def test_normalize_to_stdout(self, llm_response_file, capsys):
        assert main(["normalize", str(llm_response_file)]) == 0

        sections = json.loads(capsys.readouterr().out)
        assert sections["titlePage"] == "Программа «Шахматы»"
        assert sections["goal"] == "развитие логического мышления"
        assert sections["tasks"].count("\n") == 2

    def test_normalize_into_program(self, llm_response_file, program_file, temp_output_dir):
        output = temp_output_dir / "updated.json"
        code = main([
            "normalize", str(llm_response_file),
            "--program", str(program_file),
            "--output", str(output),
        ])
        assert code == 0

        record = json.loads(output.read_text(encoding="utf-8"))
        assert record["name"] == "Robotics for kids"
        assert record["sections"]["goal"] == "развитие логического мышления"
        assert record["sections"]["curriculum"] == ""

    def test_unreadable_response(self, temp_output_dir):
        path = temp_output_dir / "response.txt"
        path.write_text("I cannot do that", encoding="utf-8")

        assert main(["normalize", str(path)]) == 1


class TestUsage:

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "export" in capsys.readouterr().out
