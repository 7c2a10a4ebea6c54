"""
Unit tests for the Document Assembler (program_docx/assembler.py)
"""

from config.constants import SECTION_LABELS, SECTION_ORDER
from program_docx.assembler import DocumentAssembler, assemble_document
from program_docx.nodes import (
    HeadingNode,
    PageMargins,
    ParagraphNode,
    SpacerNode,
    TableNode,
)


class TestSectionOrder:

    def test_headings_follow_canonical_order(self, formatting, sample_sections):
        document = assemble_document("Title", sample_sections, formatting)

        assert [h.text for h in document.headings()] == [
            SECTION_LABELS[key].upper() for key in SECTION_ORDER
        ]

    def test_mapping_insertion_order_ignored(self, formatting, sample_sections):
        data = sample_sections.to_dict()
        reversed_sections = dict(reversed(list(data.items())))

        forward = assemble_document("Title", data, formatting)
        backward = assemble_document("Title", reversed_sections, formatting)

        assert forward == backward
        assert [e.section_key for e in forward.entries][0] == "explanatory_note"

    def test_camel_case_mapping(self, formatting):
        document = assemble_document("Title", {"explanatoryNote": "Note text"}, formatting)

        nodes = document.section_nodes("explanatory_note")
        assert [n.text for n in nodes] == ["Note text"]

    def test_title_page_not_a_section(self, formatting, sample_sections):
        document = assemble_document("Title", sample_sections, formatting)

        assert all(e.section_key != "title_page" for e in document.entries)
        assert len(document.headings()) == 7


class TestSectionLayout:

    def test_heading_body_spacer(self, formatting):
        document = assemble_document("Title", {"goal": "Goal text"}, formatting)

        goal_entries = [e.node for e in document.entries if e.section_key == "goal"]
        assert isinstance(goal_entries[0], HeadingNode)
        assert isinstance(goal_entries[1], ParagraphNode)
        assert goal_entries[1].text == "Goal text"
        assert goal_entries[-1] == SpacerNode(space_after=240)

    def test_empty_section_keeps_heading(self, formatting):
        document = assemble_document("Title", {}, formatting)

        for key in SECTION_ORDER:
            assert document.section_nodes(key) == ()
        assert len(document.headings()) == 7
        # heading + spacer per section
        assert len(document.entries) == 14

    def test_heading_styling(self, formatting):
        heading = assemble_document("Title", {}, formatting).headings()[0]

        assert heading.text == "ПОЯСНИТЕЛЬНАЯ ЗАПИСКА"
        assert heading.font_name == "Times New Roman"
        assert heading.font_size == 32
        assert heading.bold is True
        assert heading.space_before == 240
        assert heading.space_after == 120

    def test_heading_not_bold(self, make_formatting):
        formatting = make_formatting(heading_bold=False)
        heading = assemble_document("Title", {}, formatting).headings()[0]
        assert heading.bold is False

    def test_custom_labels(self, formatting):
        labels = {**SECTION_LABELS, "goal": "Aim"}
        document = assemble_document("Title", {}, formatting, labels=labels)

        assert "AIM" in [h.text for h in document.headings()]

    def test_missing_label_falls_back_to_key(self, formatting):
        document = assemble_document("Title", {}, formatting, labels={})
        assert document.headings()[0].text == "EXPLANATORY_NOTE"

    def test_table_section(self, formatting, sample_sections):
        document = assemble_document("Title", sample_sections, formatting)

        curriculum = document.section_nodes("curriculum")
        assert any(isinstance(n, TableNode) for n in curriculum)


class TestCoverAndPage:

    def test_cover(self, formatting):
        cover = assemble_document("Программа «Робототехника»", {}, formatting).cover

        assert cover.text == "Программа «Робототехника»"
        assert cover.font_size == 28
        assert cover.space_before == 2000

    def test_margins_in_twips(self, formatting):
        document = assemble_document("Title", {}, formatting)
        assert document.margins == PageMargins(top=1134, bottom=1134, left=1701, right=851)

    def test_page_header(self, formatting):
        header = assemble_document("Title", {}, formatting).page_header

        assert header.prefix == "Стр. "
        assert header.font_size == 20
        assert header.font_name == "Times New Roman"

    def test_page_header_prefix(self, formatting):
        assembler = DocumentAssembler(formatting, page_number_prefix="Page ")
        assert assembler.assemble("Title", {}).page_header.prefix == "Page "

    def test_no_page_numbers(self, make_formatting):
        formatting = make_formatting(show_page_numbers=False)
        assert assemble_document("Title", {}, formatting).page_header is None


class TestDeterminism:

    def test_repeated_assembly_equal(self, formatting, sample_sections):
        first = assemble_document("Title", sample_sections, formatting)
        second = assemble_document("Title", sample_sections, formatting)
        assert first == second
