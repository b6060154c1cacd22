# tests/test_metrics.py
import copy
import json
from pathlib import Path

from brsr.metrics.derived import compute_derived_metrics, demographic_totals

SAMPLE_PATH = Path(__file__).resolve().parents[1] / "data" / "samples" / "sample_report.json"


def load_sample():
    with open(SAMPLE_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def test_employee_totals_from_sample():
    metrics = compute_derived_metrics(load_sample())
    employees = metrics["general"]["employees"]

    assert employees["permanent_total"] == 1588
    assert employees["other_total"] == 224
    assert employees["total_male"] == 1712
    assert employees["total_female"] == 100
    assert employees["grand_total"] == 1812
    assert employees["permanent_female_percentage"] == "5.42%"
    assert employees["total_female_percentage"] == "5.52%"

    workers = metrics["general"]["workers"]
    assert workers["grand_total"] == 3940


def test_demographic_totals_are_consistent():
    for leaves in [(1502, 86, 0, 0), ("12", None, "3", "abc"), (0, 0, 0, 0), (7.5, 2.5, 1, 1)]:
        t = demographic_totals(*leaves)
        assert t["grand_total"] == t["permanent_total"] + t["other_total"]
        assert t["grand_total"] == t["total_male"] + t["total_female"]


def test_percentages_na_when_no_headcount():
    t = demographic_totals(None, None, None, None)
    assert t["grand_total"] == 0
    assert t["permanent_female_percentage"] == "N/A"
    assert t["total_female_percentage"] == "N/A"


def test_differently_abled_and_women_representation():
    general = compute_derived_metrics(load_sample())["general"]

    assert general["differently_abled_employees"]["grand_total"] == 8
    assert general["differently_abled_workers"]["grand_total"] == 12
    assert general["differently_abled"]["grand_total"] == 20
    assert general["differently_abled"]["total_female"] == 3

    assert general["women_representation"]["board_percentage"] == "30.00%"
    assert general["women_representation"]["kmp_percentage"] == "25.00%"

    assert general["locations"]["total_plants"] == 5
    assert general["locations"]["total_offices"] == 8
    assert general["locations"]["grand_total"] == 13


def test_differently_abled_flat_keys():
    record = {"sa_differently_abled_details": {"employees_male": 3, "employees_female": 1}}
    general = compute_derived_metrics(record)["general"]

    assert general["differently_abled_employees"]["permanent_total"] == 4
    assert general["differently_abled_workers"]["grand_total"] == 0


def test_environment_trends_and_intensity():
    metrics = compute_derived_metrics(load_sample())
    env = metrics["topic6"]

    assert env["energy"]["total_current_fy"] == 1080000
    assert env["energy"]["total_previous_fy"] == 1100000
    assert env["energy"]["yoy_change"] == "-1.82%"

    assert env["water"]["total_current_fy"] == 278000
    assert env["water"]["yoy_change"] == "-1.24%"

    assert env["ghg"]["total_current_fy"] == 145650
    assert env["ghg"]["yoy_change"] == "-4.76%"

    assert env["waste"]["total_generated_current_fy"] == 2592
    assert env["waste"]["total_recovered_current_fy"] == 1260
    assert env["waste"]["total_disposed_current_fy"] == 1070

    assert env["intensity"]["renewable_energy_share"] == "5.0000 %"
    assert env["intensity"]["energy_intensity"].endswith(" GJ per INR")

    assert metrics["topic3"]["grievances_resolution_percentage"] == "92.50%"


def test_empty_record_never_raises():
    for record in ({}, None, [], "not a record"):
        metrics = compute_derived_metrics(record)

        assert metrics["general"]["employees"]["grand_total"] == 0
        assert metrics["general"]["turnover"] is None
        assert metrics["topic6"]["energy"]["yoy_change"] == "N/A"
        assert metrics["topic6"]["intensity"]["energy_intensity"] == "N/A"
        assert metrics["topic6"]["intensity"]["renewable_energy_share"] == "N/A"
        assert metrics["topic3"]["grievances_resolution_percentage"] == "N/A"


def test_new_series_and_zero_turnover():
    record = {
        "sa_csr_turnover": 0,
        "sc_principle6_data": {
            "essential_indicators": {
                "ghg_emissions_scope1_2": {"current_fy": {"scope1": 10, "scope2": 5}},
            }
        },
    }
    env = compute_derived_metrics(record)["topic6"]

    assert env["ghg"]["total_current_fy"] == 15
    assert env["ghg"]["yoy_change"] == "New"
    assert env["intensity"]["ghg_intensity"] == "N/A"


def test_renewable_share_needs_positive_turnover():
    energy = {
        "current_fy": {"electricity_consumption_a": 100, "renewable_sources_consumption": 40},
    }
    for turnover in (0, -5, None):
        record = {
            "sa_csr_turnover": turnover,
            "sc_p6_environment_protection": {"essential_indicators": {"energy_consumption_intensity": energy}},
        }
        intensity = compute_derived_metrics(record)["topic6"]["intensity"]
        assert intensity["renewable_energy_share"] == "N/A"
        assert intensity["energy_intensity"] == "N/A"

    record["sa_csr_turnover"] = 1000
    intensity = compute_derived_metrics(record)["topic6"]["intensity"]
    assert intensity["renewable_energy_share"] == "40.0000 %"


def test_canonical_topic_key_wins():
    record = {
        "sc_p3_employee_wellbeing": {"essential_indicators": {"employee_grievances": {"filed": 4, "resolved": 4}}},
        "sc_principle3_data": {"essential_indicators": {"employee_grievances": {"filed": 4, "resolved": 1}}},
    }
    assert compute_derived_metrics(record)["topic3"]["grievances_resolution_percentage"] == "100.00%"


def test_record_is_not_modified():
    record = load_sample()
    before = copy.deepcopy(record)
    compute_derived_metrics(record)
    assert record == before
