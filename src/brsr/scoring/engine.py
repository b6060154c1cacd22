# src/brsr/scoring/engine.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from brsr.config import BRSRConfig, load_config
from brsr.core.types import ComplianceScore, IndicatorScore, PillarScores, TopicScore
from brsr.scoring.rules import apply_rule, tested_value
from brsr.utils.paths import resolve_block

logger = logging.getLogger(__name__)


def _pct(total: float, maximum: float) -> float:
    if not maximum:
        return 0.0
    return round(total / maximum * 100, 2)


# ----------------------------------------------------------
# Topic scoring
# ----------------------------------------------------------

def resolve_topic(
    record: Mapping[str, Any],
    topic_key: str,
    config: Optional[BRSRConfig] = None,
) -> Mapping[str, Any]:
    """
    Return the topic block stored under the first present alias, or {}.

    The canonical key wins over legacy keys even when both are present.
    """
    cfg = config or load_config()
    topic = cfg.topics.get(topic_key)
    if topic is None:
        raise ValueError(f"unknown topic: {topic_key!r}")
    return resolve_block(record, topic["aliases"], label=topic_key)


def score_topic(
    topic_key: str,
    topic_block: Any,
    config: Optional[BRSRConfig] = None,
) -> TopicScore:
    """
    Score one topic block against its indicator table.

    Always returns one IndicatorScore per configured indicator, in rubric
    order. The total is the plain sum and is not clamped.
    """
    cfg = config or load_config()
    if topic_key not in cfg.rubric:
        raise ValueError(f"unknown topic: {topic_key!r}")

    block = topic_block if isinstance(topic_block, Mapping) else {}
    if not block:
        logger.debug("score_topic: %s has no data; scoring against an empty block", topic_key)

    scores = []
    for indicator in cfg.rubric[topic_key]["indicators"]:
        value = tested_value(block, indicator)
        scores.append(IndicatorScore(key=indicator["key"], points=apply_rule(value, indicator["rule"])))

    return TopicScore(
        topic=topic_key,
        indicator_scores=scores,
        total=sum(s.points for s in scores),
    )


# ----------------------------------------------------------
# Aggregation
# ----------------------------------------------------------

def aggregate(
    topic_scores: Sequence[TopicScore],
    config: Optional[BRSRConfig] = None,
) -> ComplianceScore:
    """
    Fold topic totals into pillar totals and the overall score.

    Maxima come from the rubric and are never recomputed from the rules.
    Topics missing from `topic_scores` contribute nothing.
    """
    cfg = config or load_config()
    by_topic: Dict[str, TopicScore] = {t.topic: t for t in topic_scores}

    totals: Dict[str, float] = {}
    for pillar, members in cfg.pillars.items():
        totals[pillar] = sum(by_topic[t].total for t in members if t in by_topic)

    pillars = PillarScores(
        environment=totals["environment"],
        social=totals["social"],
        governance=totals["governance"],
        environment_percentage=_pct(totals["environment"], cfg.pillar_max["environment"]),
        social_percentage=_pct(totals["social"], cfg.pillar_max["social"]),
        governance_percentage=_pct(totals["governance"], cfg.pillar_max["governance"]),
    )

    total = totals["environment"] + totals["social"] + totals["governance"]
    ordered = {k: by_topic[k] for k in cfg.topic_keys() if k in by_topic}

    return ComplianceScore(
        topic_scores=ordered,
        pillar_scores=pillars,
        total_score=total,
        max_score=cfg.max_score,
        percentage=_pct(total, cfg.max_score),
    )


def score_record(
    record: Mapping[str, Any],
    config: Optional[BRSRConfig] = None,
) -> ComplianceScore:
    """Resolve and score all nine topics of a disclosure record."""
    cfg = config or load_config()
    topic_scores = [
        score_topic(key, resolve_topic(record, key, cfg), cfg)
        for key in cfg.topic_keys()
    ]
    return aggregate(topic_scores, cfg)
