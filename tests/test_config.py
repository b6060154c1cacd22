# tests/test_config.py
import copy

import pytest

from brsr.config import SCHEMA_DIR, BRSRConfig, load_json, load_yaml
from brsr.core.errors import RubricError


def load_parts():
    topics = load_json(SCHEMA_DIR / "topics.json")
    rubric = load_yaml(SCHEMA_DIR / "scoring_rubric.yaml")
    return topics, rubric


def test_packaged_rubric_loads():
    topics, rubric = load_parts()
    cfg = BRSRConfig(topics, rubric)

    assert cfg.topic_keys() == [f"topic{n}" for n in range(1, 10)]
    assert cfg.topics["topic1"]["aliases"][0] == "sc_p1_ethical_conduct"

    # thresholds are kept most demanding first
    q1 = cfg.rubric["topic9"]["indicators"][0]
    mins = [t["min"] for t in q1["rule"]["thresholds"]]
    assert mins == sorted(mins, reverse=True)


def test_boolean_rule_keys_load_as_strings():
    topics, rubric = load_parts()
    cfg = BRSRConfig(topics, rubric)

    q4 = cfg.rubric["topic1"]["indicators"][3]["rule"]
    assert q4 == {"type": "boolean", "yes": 100, "no": -10}

    q1 = cfg.rubric["topic8"]["indicators"][0]["rule"]
    assert q1["absent"] == 0
    assert q1["no"] == -40

    for key in cfg.topic_keys():
        for indicator in cfg.rubric[key]["indicators"]:
            assert all(isinstance(k, str) for k in indicator["rule"])


def test_percentage_thresholds_sorted_on_load():
    topics, rubric = load_parts()
    rubric = copy.deepcopy(rubric)
    rubric["topics"]["topic3"]["indicators"][9]["rule"]["thresholds"] = [
        {"min": 80, "points": 80},
        {"min": 100, "points": 100},
    ]

    cfg = BRSRConfig(topics, rubric)
    rule = cfg.rubric["topic3"]["indicators"][9]["rule"]
    assert [t["min"] for t in rule["thresholds"]] == [100, 80]


@pytest.mark.parametrize(
    "mutate",
    [
        lambda r: r["topics"]["topic1"]["indicators"][0]["rule"].update(type="bonus"),
        lambda r: r["topics"]["topic1"]["indicators"][3]["rule"].pop("no"),
        lambda r: r["topics"]["topic1"]["indicators"][0]["rule"].pop("points"),
        lambda r: r["topics"]["topic1"]["indicators"][0].update(test="odd"),
        lambda r: r["topics"]["topic1"]["indicators"][0].pop("path"),
        lambda r: r["topics"]["topic9"]["indicators"][5].pop("equals"),
        lambda r: r["topics"]["topic8"]["indicators"][0].pop("item_field"),
        lambda r: r["topics"].update(topic10={"max": 1, "indicators": []}),
        lambda r: r["topics"].pop("topic4"),
        lambda r: r["pillars"].pop("social"),
        lambda r: r["pillars"]["social"]["topics"].remove("topic9"),
    ],
)
def test_inconsistent_rubric_rejected(mutate):
    topics, rubric = load_parts()
    rubric = copy.deepcopy(rubric)
    mutate(rubric)

    with pytest.raises(RubricError):
        BRSRConfig(topics, rubric)


def test_rubric_error_message():
    err = RubricError("unknown rule type", {"topic": "topic1", "indicator": "q1"})

    assert isinstance(err, ValueError)
    assert err.details["topic"] == "topic1"
    assert str(err) == "unknown rule type (indicator='q1', topic='topic1')"
