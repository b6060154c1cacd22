"""Markdown rendering of a compiled document.

Turns the section/node tree into a plain Markdown string for the CLI.
No content decisions live here, only presentation.
"""

from __future__ import annotations

from typing import List, Sequence

from brsr.core.types import DocumentNode, DocumentSection, Heading, KeyValue, Paragraph, Table


# ---------------------------------------------------------------------
# Markdown helpers
# ---------------------------------------------------------------------

def _md_escape(value: object) -> str:
    if value is None:
        return ""
    text = str(value)
    return text.replace("\r", " ").replace("\n", " ").replace("|", "\\|").replace("`", "\\`")


def _render_table(table: Table) -> str:
    lines = [
        "| " + " | ".join(_md_escape(h) for h in table.headers) + " |",
        "|" + "|".join("---" for _ in table.headers) + "|",
    ]
    for row in table.rows:
        lines.append("| " + " | ".join(_md_escape(c) for c in row) + " |")
    return "\n".join(lines)


def render_node(node: DocumentNode) -> str:
    if isinstance(node, Heading):
        return f"{'#' * max(1, node.level)} {node.text}"
    if isinstance(node, KeyValue):
        return f"**{_md_escape(node.label)}:** {_md_escape(node.value)}"
    if isinstance(node, Table):
        return _render_table(node)
    if isinstance(node, Paragraph):
        return f"*{node.text}*"
    raise TypeError(f"unknown document node: {type(node).__name__}")


def render_section(section: DocumentSection) -> str:
    return "\n\n".join(render_node(n) for n in section.nodes)


def render_markdown(sections: Sequence[DocumentSection]) -> str:
    """Render all sections; page breaks become horizontal rules."""
    parts: List[str] = []
    for section in sections:
        if section.page_break_before and parts:
            parts.append("---")
        parts.append(render_section(section))
    return "\n\n".join(parts) + "\n"
