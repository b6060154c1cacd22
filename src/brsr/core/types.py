# src/brsr/core/types.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict, Union


# ---------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class IndicatorScore:
    """Points earned by one scored question within a topic."""
    key: str
    points: float


@dataclass(frozen=True)
class TopicScore:
    """
    Per-topic scoring result.

    `total` is the plain sum of indicator points and may be negative.
    """
    topic: str
    indicator_scores: List[IndicatorScore]
    total: float

    def points(self) -> Dict[str, float]:
        return {s.key: s.points for s in self.indicator_scores}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "indicatorScores": [
                {"key": s.key, "points": s.points} for s in self.indicator_scores
            ],
            "total": self.total,
        }


@dataclass(frozen=True)
class PillarScores:
    environment: float
    social: float
    governance: float
    environment_percentage: float
    social_percentage: float
    governance_percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environment": self.environment,
            "social": self.social,
            "governance": self.governance,
            "environmentPercentage": self.environment_percentage,
            "socialPercentage": self.social_percentage,
            "governancePercentage": self.governance_percentage,
        }


@dataclass(frozen=True)
class ComplianceScore:
    topic_scores: Dict[str, TopicScore]
    pillar_scores: PillarScores
    total_score: float
    max_score: float
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the external score contract (camelCase keys)."""
        return {
            "topicScores": {k: v.to_dict() for k, v in self.topic_scores.items()},
            "pillarScores": self.pillar_scores.to_dict(),
            "totalScore": self.total_score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
        }


# ---------------------------------------------------------------------
# Document nodes
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    kind: str = field(default="heading", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "level": self.level, "text": self.text}


@dataclass(frozen=True)
class KeyValue:
    label: str
    value: str
    kind: str = field(default="key_value", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "label": self.label, "value": self.value}


@dataclass(frozen=True)
class Table:
    headers: List[str]
    rows: List[List[str]]
    kind: str = field(default="table", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "headers": list(self.headers),
            "rows": [list(r) for r in self.rows],
        }


@dataclass(frozen=True)
class Paragraph:
    text: str
    kind: str = field(default="paragraph", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


DocumentNode = Union[Heading, KeyValue, Table, Paragraph]


@dataclass
class DocumentSection:
    """
    Ordered run of document nodes for one report section.

    Node order comes from the section's fixed question ordering only.
    """
    key: str
    title: str
    nodes: List[DocumentNode] = field(default_factory=list)
    page_break_before: bool = False

    def nodes_of(self, kind: str) -> List[DocumentNode]:
        return [n for n in self.nodes if n.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "page_break_before": self.page_break_before,
            "nodes": [n.to_dict() for n in self.nodes],
        }


# ---------------------------------------------------------------------
# Pipeline output
# ---------------------------------------------------------------------

class ReportArtifactsDict(TypedDict):
    """JSON shape written by the CLI."""
    financial_year: Optional[str]
    derived_metrics: Dict[str, Any]
    scores: Dict[str, Any]
    document: List[Dict[str, Any]]


@dataclass
class ReportArtifacts:
    """Everything one pipeline run derives from a single disclosure record."""
    derived_metrics: Dict[str, Any]
    scores: ComplianceScore
    document: List[DocumentSection]
    financial_year: Optional[str] = None

    def to_dict(self) -> ReportArtifactsDict:
        return {
            "financial_year": self.financial_year,
            "derived_metrics": self.derived_metrics,
            "scores": self.scores.to_dict(),
            "document": [s.to_dict() for s in self.document],
        }

