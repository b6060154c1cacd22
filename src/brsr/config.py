# src/brsr/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping
from dotenv import load_dotenv
import json
import yaml
import logging
import os

from brsr.core.errors import RubricError

# Load .env as early as possible
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent
SCHEMA_DIR = BASE_DIR / "schemas"

RULE_TYPES = {"boolean", "disclosure", "percentage", "constant"}
VALUE_TESTS = {"positive", "zero", "non_empty", "present", "equals", "any_item"}
PILLARS = ("environment", "social", "governance")


def load_json(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_yaml(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


# ---------------------------------------------------------------------
# Rubric validation
# ---------------------------------------------------------------------

def _check_rule(topic: str, key: str, rule: Any) -> Dict[str, Any]:
    if not isinstance(rule, Mapping):
        raise RubricError("rule must be a mapping", {"topic": topic, "indicator": key})

    rule_type = rule.get("type")
    if rule_type not in RULE_TYPES:
        raise RubricError(
            "unknown rule type",
            {"topic": topic, "indicator": key, "type": rule_type},
        )

    if rule_type == "boolean":
        if "yes" not in rule or "no" not in rule:
            raise RubricError(
                "boolean rule needs 'yes' and 'no'",
                {"topic": topic, "indicator": key},
            )
        return dict(rule)

    if rule_type in ("disclosure", "constant"):
        if "points" not in rule:
            raise RubricError(
                f"{rule_type} rule needs 'points'",
                {"topic": topic, "indicator": key},
            )
        return dict(rule)

    thresholds = rule.get("thresholds") or []
    for t in thresholds:
        if not isinstance(t, Mapping) or "min" not in t or "points" not in t:
            raise RubricError(
                "percentage threshold needs 'min' and 'points'",
                {"topic": topic, "indicator": key},
            )
    # Most demanding threshold first
    ordered = sorted(thresholds, key=lambda t: t["min"], reverse=True)
    return {**rule, "thresholds": [dict(t) for t in ordered]}


def _check_indicator(topic: str, raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, Mapping) or "key" not in raw:
        raise RubricError("indicator needs a 'key'", {"topic": topic})

    key = raw["key"]
    indicator = dict(raw)
    indicator["rule"] = _check_rule(topic, key, raw.get("rule"))

    test = raw.get("test")
    if test is not None and test not in VALUE_TESTS:
        raise RubricError(
            "unknown value test",
            {"topic": topic, "indicator": key, "test": test},
        )
    if test == "equals" and "equals" not in raw:
        raise RubricError(
            "equals test needs an 'equals' literal",
            {"topic": topic, "indicator": key},
        )
    if test == "any_item" and not raw.get("item_field"):
        raise RubricError(
            "any_item test needs an 'item_field'",
            {"topic": topic, "indicator": key},
        )

    has_path = "path" in raw or "any_of" in raw
    if not has_path and indicator["rule"]["type"] != "constant":
        raise RubricError(
            "indicator needs a 'path' or 'any_of'",
            {"topic": topic, "indicator": key},
        )
    return indicator


class BRSRConfig:
    """
    Read-only scoring configuration.

    Attributes:
      topics      topic key -> {number, aliases, short_name, title}
      rubric      topic key -> {max, indicators}
      pillar_max  pillar -> fixed maximum
      pillars     pillar -> ordered topic keys
      max_score   fixed global maximum
    """

    def __init__(self, topics: Mapping[str, Any], rubric: Mapping[str, Any]):
        self.topics: Dict[str, Dict[str, Any]] = {k: dict(v) for k, v in topics.items()}

        rubric_topics = rubric.get("topics") or {}
        unknown = sorted(set(rubric_topics) - set(self.topics))
        if unknown:
            raise RubricError("rubric lists unknown topics", {"topics": unknown})

        self.rubric: Dict[str, Dict[str, Any]] = {}
        for topic, spec in rubric_topics.items():
            indicators = [_check_indicator(topic, i) for i in spec.get("indicators") or []]
            self.rubric[topic] = {"max": spec.get("max", 0), "indicators": indicators}

        pillars = rubric.get("pillars") or {}
        missing = [p for p in PILLARS if p not in pillars]
        if missing:
            raise RubricError("rubric is missing pillars", {"pillars": missing})

        self.pillar_max: Dict[str, float] = {p: pillars[p]["max"] for p in PILLARS}
        self.pillars: Dict[str, List[str]] = {p: list(pillars[p]["topics"]) for p in PILLARS}
        self.max_score = rubric.get("max_score", 0)

        unscored = sorted(set(self.topics) - set(self.rubric))
        if unscored:
            raise RubricError("topics without a rubric", {"topics": unscored})

        # Each topic belongs to exactly one pillar.
        placed = [t for p in PILLARS for t in self.pillars[p]]
        if sorted(placed) != sorted(self.topics):
            raise RubricError(
                "pillars must partition the topics",
                {"pillars": {p: self.pillars[p] for p in PILLARS}},
            )

    def topic_keys(self) -> List[str]:
        return sorted(self.topics, key=lambda k: self.topics[k]["number"])

    def pillar_of(self, topic: str) -> str:
        for pillar, members in self.pillars.items():
            if topic in members:
                return pillar
        raise RubricError("topic has no pillar", {"topic": topic})


@lru_cache(maxsize=1)
def load_config() -> BRSRConfig:
    return BRSRConfig(
        topics=load_json(SCHEMA_DIR / "topics.json"),
        rubric=load_yaml(SCHEMA_DIR / "scoring_rubric.yaml"),
    )


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logger. Safe to call multiple times.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


# Run once automatically
setup_logging(os.getenv("BRSR_LOG_LEVEL", "INFO"))
