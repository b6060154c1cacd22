# tests/test_render_md.py
from brsr.core.types import DocumentSection, Heading, KeyValue, Paragraph, Table
from brsr.document.render_md import render_markdown, render_node


def test_render_nodes():
    assert render_node(Heading(1, "SECTION A")) == "# SECTION A"
    assert render_node(Heading(3, "Activities")) == "### Activities"
    assert render_node(KeyValue("Has policy", "Yes")) == "**Has policy:** Yes"
    assert render_node(Paragraph("No data provided.")) == "*No data provided.*"


def test_render_table_escapes_cells():
    table = Table(headers=["Name", "Note"], rows=[["A | B", "line1\nline2"]])

    assert render_node(table).splitlines() == [
        "| Name | Note |",
        "|---|---|",
        "| A \\| B | line1 line2 |",
    ]


def test_page_breaks_between_sections():
    sections = [
        DocumentSection("general", "General", [Heading(1, "A")]),
        DocumentSection("summary", "Summary", [Heading(1, "B")], page_break_before=True),
    ]
    text = render_markdown(sections)

    assert text == "# A\n\n---\n\n# B\n"
