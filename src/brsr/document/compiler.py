# src/brsr/document/compiler.py
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence

from brsr.config import BRSRConfig, load_config
from brsr.core.types import (
    ComplianceScore,
    DocumentNode,
    DocumentSection,
    Heading,
    KeyValue,
    Paragraph,
    Table,
    TopicScore,
)
from brsr.document.formatters import display_number, format_value, humanize
from brsr.document.layout import (
    CATEGORY,
    GENERAL_LAYOUT,
    MANAGEMENT_ALIASES,
    MANAGEMENT_LAYOUT,
    ROW_INDEX,
    TOPIC_LAYOUTS,
    Column,
    Composite,
    Field,
    ListTable,
    MappingTable,
    QuestionSpec,
    Subheading,
)
from brsr.scoring.engine import resolve_topic
from brsr.utils.numeric_parser import NOT_AVAILABLE, parse_number
from brsr.utils.paths import get_path, is_present, resolve, resolve_block

logger = logging.getLogger(__name__)


# ----------------------------------------------------------
# Single question specs
# ----------------------------------------------------------

def _field_value(spec: Field, scope: Mapping[str, Any], metrics: Mapping[str, Any]) -> Any:
    # A computed metric wins unless it is undefined and a raw value exists.
    if spec.metric:
        value = get_path(metrics, spec.metric)
        if is_present(value) and (value != NOT_AVAILABLE or spec.path is None):
            return value
    if spec.path is None:
        return None
    return resolve(scope, spec.path)


def _compile_field(spec: Field, scope: Mapping[str, Any], metrics: Mapping[str, Any]) -> KeyValue:
    value = _field_value(spec, scope, metrics)
    return KeyValue(spec.label, format_value(value, spec.fmt, spec.fallback))


def _compile_composite(spec: Composite, scope: Mapping[str, Any], metrics: Mapping[str, Any]) -> KeyValue:
    if spec.presence is not None and not is_present(resolve(scope, spec.presence)):
        return KeyValue(spec.label, spec.fallback)

    parts = []
    for part in spec.parts:
        if part.metric:
            value = get_path(metrics, part.metric)
        else:
            value = resolve(scope, part.path) if part.path else None
        fallback = "0" if part.fmt == "number" else NOT_AVAILABLE
        parts.append(f"{part.label}: {format_value(value, part.fmt, fallback)}")
    return KeyValue(spec.label, " | ".join(parts))


def _principle_label(value: Any, index: int, config: BRSRConfig) -> str:
    number = parse_number(value)
    if number is None:
        number = index
    for topic in config.topics.values():
        if topic["number"] == number:
            return f"P{display_number(number)}: {topic['short_name']}"
    return f"Principle {display_number(number)}"


def _cell(column: Column, item: Mapping[str, Any], index: int, config: BRSRConfig) -> str:
    if column.key == ROW_INDEX:
        return str(index)
    value = get_path(item, column.key)
    if column.fmt == "principle":
        return _principle_label(value, index, config)
    return format_value(value, column.fmt, column.fallback)


def _table_or_fallback(label: str, headers: List[str], rows: List[List[str]], fallback: str) -> List[DocumentNode]:
    # An empty table is never emitted.
    if not rows:
        return [Heading(3, label), Paragraph(fallback)]
    return [Heading(3, label), Table(headers=headers, rows=rows)]


def _compile_list_table(spec: ListTable, scope: Mapping[str, Any], config: BRSRConfig) -> List[DocumentNode]:
    items = resolve(scope, spec.path)
    rows: List[List[str]] = []

    if isinstance(items, (list, tuple)):
        for index, item in enumerate(items, start=1):
            if not isinstance(item, Mapping):
                logger.debug("list table %r: skipping %s item", spec.label, type(item).__name__)
                continue
            rows.append([_cell(c, item, index, config) for c in spec.columns])
    elif is_present(items):
        logger.debug("list table %r: expected a list, got %s", spec.label, type(items).__name__)

    return _table_or_fallback(spec.label, [c.header for c in spec.columns], rows, spec.fallback)


def _compile_mapping_table(spec: MappingTable, scope: Mapping[str, Any], config: BRSRConfig) -> List[DocumentNode]:
    block = resolve(scope, spec.path)
    rows: List[List[str]] = []

    if isinstance(block, Mapping):
        if spec.categories is not None:
            entries = list(spec.categories)
        else:
            entries = [(key, humanize(str(key))) for key in block]

        for index, (key, label) in enumerate(entries, start=1):
            record = block.get(key)
            if not isinstance(record, Mapping) or not record:
                continue
            rows.append([
                label if c.key == CATEGORY else _cell(c, record, index, config)
                for c in spec.columns
            ])

    return _table_or_fallback(spec.label, [c.header for c in spec.columns], rows, spec.fallback)


def compile_nodes(
    layout: Sequence[QuestionSpec],
    scope: Mapping[str, Any],
    derived_metrics: Mapping[str, Any],
    config: Optional[BRSRConfig] = None,
) -> List[DocumentNode]:
    """Walk a question layout in order and emit its document nodes."""
    cfg = config or load_config()
    nodes: List[DocumentNode] = []

    for spec in layout:
        if isinstance(spec, Subheading):
            nodes.append(Heading(spec.level, spec.text))
        elif isinstance(spec, Field):
            nodes.append(_compile_field(spec, scope, derived_metrics))
        elif isinstance(spec, Composite):
            nodes.append(_compile_composite(spec, scope, derived_metrics))
        elif isinstance(spec, ListTable):
            nodes.extend(_compile_list_table(spec, scope, cfg))
        elif isinstance(spec, MappingTable):
            nodes.extend(_compile_mapping_table(spec, scope, cfg))
        else:
            raise TypeError(f"unknown question spec: {type(spec).__name__}")

    return nodes


# ----------------------------------------------------------
# Sections
# ----------------------------------------------------------

def compile_general(
    record: Mapping[str, Any],
    derived_metrics: Mapping[str, Any],
    config: Optional[BRSRConfig] = None,
) -> DocumentSection:
    nodes: List[DocumentNode] = [Heading(1, "SECTION A: GENERAL DISCLOSURES")]
    nodes.extend(compile_nodes(GENERAL_LAYOUT, record, derived_metrics, config))
    return DocumentSection(key="general", title="General Disclosures", nodes=nodes)


def compile_management(
    record: Mapping[str, Any],
    derived_metrics: Mapping[str, Any],
    config: Optional[BRSRConfig] = None,
) -> DocumentSection:
    block = resolve_block(record, MANAGEMENT_ALIASES, label="management")
    nodes: List[DocumentNode] = [Heading(1, "SECTION B: MANAGEMENT AND PROCESS DISCLOSURES")]
    nodes.extend(compile_nodes(MANAGEMENT_LAYOUT, block, derived_metrics, config))
    return DocumentSection(key="management", title="Management and Process Disclosures", nodes=nodes)


def compile_section(
    topic_key: str,
    topic_block: Any,
    derived_metrics: Mapping[str, Any],
    topic_score: Optional[TopicScore],
    config: Optional[BRSRConfig] = None,
) -> DocumentSection:
    """
    Compile one principle into its document section.

    The node sequence is fixed by the principle's layout: an empty block and
    a fully disclosed one produce the same KeyValue labels in the same order.
    """
    cfg = config or load_config()
    if topic_key not in TOPIC_LAYOUTS:
        raise ValueError(f"unknown topic: {topic_key!r}")

    topic = cfg.topics[topic_key]
    block = topic_block if isinstance(topic_block, Mapping) else {}

    nodes: List[DocumentNode] = [Heading(1, f"PRINCIPLE {topic['number']}: {topic['title']}")]
    nodes.extend(compile_nodes(TOPIC_LAYOUTS[topic_key], block, derived_metrics, cfg))

    total = topic_score.total if topic_score is not None else 0
    maximum = cfg.rubric[topic_key]["max"]
    nodes.append(KeyValue("Principle score", f"{display_number(total)} / {display_number(maximum)}"))

    return DocumentSection(
        key=topic_key,
        title=f"Principle {topic['number']}: {topic['short_name']}",
        nodes=nodes,
    )


def compile_summary(scores: ComplianceScore, config: Optional[BRSRConfig] = None) -> DocumentSection:
    """Scoring dashboard: overall score, pillar scores and per-principle totals."""
    cfg = config or load_config()
    pillars = scores.pillar_scores

    nodes: List[DocumentNode] = [
        Heading(1, "ESG SCORING SUMMARY"),
        KeyValue("Total ESG score", f"{display_number(scores.total_score)} / {display_number(scores.max_score)}"),
        KeyValue("Overall percentage", f"{scores.percentage:.2f}%"),
        Heading(2, "Pillar-wise Performance"),
    ]
    for name, total, pct in (
        ("environment", pillars.environment, pillars.environment_percentage),
        ("social", pillars.social, pillars.social_percentage),
        ("governance", pillars.governance, pillars.governance_percentage),
    ):
        nodes.append(KeyValue(
            name.capitalize(),
            f"{display_number(total)} / {display_number(cfg.pillar_max[name])} ({pct:.2f}%)",
        ))

    rows = []
    for key in cfg.topic_keys():
        topic = cfg.topics[key]
        score = scores.topic_scores.get(key)
        rows.append([
            f"Principle {topic['number']}: {topic['short_name']}",
            cfg.pillar_of(key).capitalize(),
            display_number(score.total if score is not None else 0),
            display_number(cfg.rubric[key]["max"]),
        ])

    nodes.append(Heading(2, "Detailed Principle Scores"))
    nodes.append(Table(headers=["Principle", "Pillar", "Score", "Maximum"], rows=rows))
    return DocumentSection(key="summary", title="ESG Scoring Summary", nodes=nodes)


def compile_document(
    record: Mapping[str, Any],
    derived_metrics: Mapping[str, Any],
    scores: ComplianceScore,
    config: Optional[BRSRConfig] = None,
) -> List[DocumentSection]:
    """
    Compile the whole report in its fixed order: general disclosures,
    management disclosures, principles 1 to 9, scoring summary.
    """
    cfg = config or load_config()

    sections = [
        compile_general(record, derived_metrics, cfg),
        compile_management(record, derived_metrics, cfg),
    ]
    for key in cfg.topic_keys():
        sections.append(compile_section(
            key,
            resolve_topic(record, key, cfg),
            derived_metrics,
            scores.topic_scores.get(key),
            cfg,
        ))
    sections.append(compile_summary(scores, cfg))

    for index, section in enumerate(sections):
        section.page_break_before = index > 0
    return sections
