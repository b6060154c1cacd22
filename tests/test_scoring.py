# tests/test_scoring.py
import json
from pathlib import Path

import pytest

from brsr.config import load_config
from brsr.scoring.engine import aggregate, resolve_topic, score_record, score_topic

SAMPLE_PATH = Path(__file__).resolve().parents[1] / "data" / "samples" / "sample_report.json"


def load_sample():
    with open(SAMPLE_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def test_rubric_maxima():
    cfg = load_config()

    assert cfg.max_score == 6900
    assert cfg.pillar_max == {"environment": 2600, "social": 2800, "governance": 1500}
    assert sum(cfg.pillar_max.values()) == cfg.max_score
    assert sum(cfg.rubric[k]["max"] for k in cfg.topic_keys()) == cfg.max_score
    assert cfg.pillar_of("topic6") == "environment"
    assert cfg.pillar_of("topic9") == "social"
    assert cfg.pillar_of("topic8") == "governance"


def test_sample_topic_totals():
    scores = score_record(load_sample())

    assert scores.topic_scores["topic1"].total == 630
    assert scores.topic_scores["topic2"].total == 400
    assert scores.topic_scores["topic6"].total == 840

    assert scores.pillar_scores.environment == 1240
    assert scores.pillar_scores.environment_percentage == 47.69


def test_negative_indicator_propagates_to_pillar():
    block = {"essential_indicators": {"anti_corruption_policy": {"has_policy": False}}}
    topic = score_topic("topic1", block)

    assert topic.points()["q4"] == -10
    # q5 scores its "no" branch (20) when no director count is disclosed
    assert topic.total == 10

    scores = score_record({"sc_p1_ethical_conduct": block})
    assert scores.pillar_scores.governance == 10


def test_topic_total_may_be_negative():
    block = {
        "essential_indicators": {
            "anti_corruption_policy": {"has_policy": False},
            "disciplinary_actions_by_le_agencies": {"current_fy": {"directors": 2}},
            "complaints_conflict_of_interest": {"directors_number": 3},
        }
    }
    topic = score_topic("topic1", block)

    assert topic.points()["q6"] == -50
    assert topic.total == -40


def test_every_indicator_scored_for_empty_record():
    cfg = load_config()
    scores = score_record({})

    assert list(scores.topic_scores) == cfg.topic_keys()
    for key, topic in scores.topic_scores.items():
        assert len(topic.indicator_scores) == len(cfg.rubric[key]["indicators"])
        assert topic.total == sum(s.points for s in topic.indicator_scores)

    pillars = scores.pillar_scores
    assert scores.total_score == pillars.environment + pillars.social + pillars.governance
    assert pillars.environment == -80
    assert pillars.environment_percentage == -3.08


def test_fixed_placeholder_indicators():
    topic = score_topic("topic9", {})
    points = topic.points()

    assert points["q2"] == 100
    assert points["q4"] == 100
    assert points["q5"] == 100


def test_canonical_alias_precedence():
    record = {
        "sc_p1_ethical_conduct": {"essential_indicators": {"anti_corruption_policy": {"has_policy": True}}},
        "sc_principle1_data": {"essential_indicators": {"anti_corruption_policy": {"has_policy": False}}},
    }
    assert resolve_topic(record, "topic1")["essential_indicators"]["anti_corruption_policy"]["has_policy"] is True
    assert score_record(record).topic_scores["topic1"].points()["q4"] == 100

    legacy_only = {"sc_principle1_data": record["sc_principle1_data"]}
    assert score_record(legacy_only).topic_scores["topic1"].points()["q4"] == -10


def test_any_item_indicator():
    published = {"essential_indicators": {"social_impact_assessments": [{"results_communicated_in_public_domain": True}]}}
    hidden = {"essential_indicators": {"social_impact_assessments": [{"results_communicated_in_public_domain": False}]}}

    assert score_topic("topic8", published).points()["q1"] == 100
    assert score_topic("topic8", hidden).points()["q1"] == -40
    assert score_topic("topic8", {}).points()["q1"] == 0


def test_malformed_blocks_score_as_empty():
    assert score_topic("topic4", "garbage").total == 0
    assert score_record({"sc_p4_stakeholder_responsiveness": [1, 2]}).topic_scores["topic4"].total == 0


def test_unknown_topic_is_an_error():
    with pytest.raises(ValueError):
        score_topic("topic10", {})
    with pytest.raises(ValueError):
        resolve_topic({}, "topic10")


def test_aggregate_partial_topics_and_to_dict():
    scores = aggregate([score_topic("topic9", {})])

    assert list(scores.topic_scores) == ["topic9"]
    assert scores.pillar_scores.environment == 0
    assert scores.pillar_scores.social == scores.total_score

    data = scores.to_dict()
    assert set(data) == {"topicScores", "pillarScores", "totalScore", "maxScore", "percentage"}
    assert data["topicScores"]["topic9"]["indicatorScores"][0] == {"key": "q1", "points": 0}
