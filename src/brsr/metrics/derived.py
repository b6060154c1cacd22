# src/brsr/metrics/derived.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from brsr.utils.numeric_parser import (
    NOT_AVAILABLE,
    Number,
    parse_number,
    percentage,
    ratio,
    to_number,
    yoy_change,
)
from brsr.utils.paths import get_path, is_present, resolve, resolve_block

logger = logging.getLogger(__name__)

# Leaf names of one demographic category
PERMANENT_MALE = "permanent_male"
PERMANENT_FEMALE = "permanent_female"
OTHER_MALE = "other_than_permanent_male"
OTHER_FEMALE = "other_than_permanent_female"

ENERGY_LEAVES = (
    "electricity_consumption_a",
    "fuel_consumption_b",
    "other_sources_consumption_c",
)
WATER_LEAVES = (
    "withdrawal_surface",
    "withdrawal_groundwater",
    "withdrawal_third_party",
    "withdrawal_seawater_desalinated",
    "withdrawal_others",
)
GHG_LEAVES = ("scope1", "scope2")

TURNOVER_ALIASES = ("sa_csr_turnover", "sa_turnover")
P3_ALIASES = ("sc_p3_employee_wellbeing", "sc_principle3_data")
P6_ALIASES = ("sc_p6_environment_protection", "sc_principle6_data")


# ---------------------------------------------------------------------
# Demographics
# ---------------------------------------------------------------------

def demographic_totals(
    permanent_male: Any,
    permanent_female: Any,
    other_male: Any,
    other_female: Any,
) -> Dict[str, Any]:
    """
    Sub-totals and female shares for one employee/worker category.

    All four leaves are coerced with `to_number`; the percentages use the
    totals computed here as denominators.
    """
    pm, pf = to_number(permanent_male), to_number(permanent_female)
    om, of = to_number(other_male), to_number(other_female)

    permanent_total = pm + pf
    other_total = om + of
    total_female = pf + of
    grand_total = pm + pf + om + of

    return {
        "permanent_total": permanent_total,
        "other_total": other_total,
        "total_male": pm + om,
        "total_female": total_female,
        "grand_total": grand_total,
        "permanent_female_percentage": percentage(pf, permanent_total),
        "other_female_percentage": percentage(of, other_total),
        "total_female_percentage": percentage(total_female, grand_total),
    }


def _category(block: Any) -> Dict[str, Any]:
    return demographic_totals(
        get_path(block, PERMANENT_MALE),
        get_path(block, PERMANENT_FEMALE),
        get_path(block, OTHER_MALE),
        get_path(block, OTHER_FEMALE),
    )


def _differently_abled(details: Any, group: str) -> Dict[str, Any]:
    # Older records store only "employees_male"-style flat keys, which map
    # to the permanent leaves.
    nested = get_path(details, group)
    return demographic_totals(
        resolve(details, [f"{group}.{PERMANENT_MALE}", f"{group}_male"]),
        resolve(details, [f"{group}.{PERMANENT_FEMALE}", f"{group}_female"]),
        get_path(nested, OTHER_MALE),
        get_path(nested, OTHER_FEMALE),
    )


def _differently_abled_summary(employees: Mapping[str, Any], workers: Mapping[str, Any]) -> Dict[str, Number]:
    return {
        "employees_total": employees["grand_total"],
        "workers_total": workers["grand_total"],
        "total_male": employees["total_male"] + workers["total_male"],
        "total_female": employees["total_female"] + workers["total_female"],
        "grand_total": employees["grand_total"] + workers["grand_total"],
    }


def _locations(loc: Any) -> Dict[str, Number]:
    np_ = to_number(get_path(loc, "national_plants"))
    ip = to_number(get_path(loc, "international_plants"))
    no = to_number(get_path(loc, "national_offices"))
    io = to_number(get_path(loc, "international_offices"))
    return {
        "total_plants": np_ + ip,
        "total_offices": no + io,
        "national_total": np_ + no,
        "international_total": ip + io,
        "grand_total": np_ + ip + no + io,
    }


def compute_general_metrics(record: Mapping[str, Any]) -> Dict[str, Any]:
    employees = _category(record.get("sa_employee_details"))
    workers = _category(record.get("sa_workers_details"))

    da_details = record.get("sa_differently_abled_details")
    da_employees = _differently_abled(da_details, "employees")
    da_workers = _differently_abled(da_details, "workers")

    women = record.get("sa_women_representation_details")
    turnover = parse_number(resolve(record, TURNOVER_ALIASES))

    return {
        "employees": employees,
        "workers": workers,
        "differently_abled_employees": da_employees,
        "differently_abled_workers": da_workers,
        "differently_abled": _differently_abled_summary(da_employees, da_workers),
        "women_representation": {
            "board_percentage": percentage(
                to_number(get_path(women, "board_number_of_women")),
                to_number(get_path(women, "board_total_members")),
            ),
            "kmp_percentage": percentage(
                to_number(get_path(women, "kmp_number_of_women")),
                to_number(get_path(women, "kmp_total_personnel")),
            ),
        },
        "locations": _locations(record.get("sa_locations_plants_offices")),
        "turnover": turnover,
    }


# ---------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------

def _sum_leaves(block: Any, leaves: Sequence[str]) -> Optional[Number]:
    """Sum of the given leaves, or None when none of them is present."""
    values = [get_path(block, leaf) for leaf in leaves]
    if not any(is_present(v) for v in values):
        return None
    return sum(to_number(v) for v in values)


def _sum_map(block: Any) -> Number:
    if not isinstance(block, Mapping):
        return 0
    return sum(to_number(v) for v in block.values())


def _trend(block: Any, leaves: Sequence[str]) -> Tuple[Dict[str, Any], Optional[Number]]:
    current = _sum_leaves(get_path(block, "current_fy"), leaves)
    previous = _sum_leaves(get_path(block, "previous_fy"), leaves)
    return {
        "total_current_fy": current or 0,
        "total_previous_fy": previous or 0,
        "yoy_change": yoy_change(current, previous),
    }, current


def compute_environment_metrics(ei: Mapping[str, Any], turnover: Optional[Number]) -> Dict[str, Any]:
    energy, energy_current = _trend(ei.get("energy_consumption_intensity"), ENERGY_LEAVES)
    water, water_current = _trend(ei.get("water_disclosures"), WATER_LEAVES)
    ghg, ghg_current = _trend(ei.get("ghg_emissions_scope1_2"), GHG_LEAVES)

    renewable = get_path(ei, "energy_consumption_intensity.current_fy.renewable_sources_consumption")
    waste = get_path(ei, "waste_management.current_fy")

    # Undefined without a positive turnover, like the intensities.
    if turnover is None or turnover <= 0:
        renewable_share = NOT_AVAILABLE
    else:
        renewable_share = ratio(parse_number(renewable), energy_current, "%", scale=100)

    return {
        "energy": energy,
        "water": water,
        "ghg": ghg,
        "waste": {
            "total_generated_current_fy": _sum_map(get_path(waste, "generated")),
            "total_recovered_current_fy": _sum_map(get_path(waste, "recovered")),
            "total_disposed_current_fy": _sum_map(get_path(waste, "disposed")),
        },
        "intensity": {
            "renewable_energy_share": renewable_share,
            "energy_intensity": ratio(energy_current, turnover, "GJ per INR"),
            "water_intensity": ratio(water_current, turnover, "kL per INR"),
            "ghg_intensity": ratio(ghg_current, turnover, "tCO2e per INR"),
        },
    }


# ---------------------------------------------------------------------
# Public entry
# ---------------------------------------------------------------------

def compute_derived_metrics(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Compute all derived metrics for one disclosure record.

    Never raises on record content: absent or non-numeric leaves count as
    zero, undefined ratios are "N/A". The record is read, never modified.
    """
    if not isinstance(record, Mapping):
        logger.debug("compute_derived_metrics: record is %s, not a mapping", type(record).__name__)
        record = {}

    general = compute_general_metrics(record)

    p3 = resolve_block(record, P3_ALIASES, label="topic3")
    grievances = get_path(p3, "essential_indicators.employee_grievances")

    p6 = resolve_block(record, P6_ALIASES, label="topic6")
    p6_ei = get_path(p6, "essential_indicators")
    if not isinstance(p6_ei, Mapping):
        p6_ei = {}

    return {
        "general": general,
        "topic3": {
            "grievances_resolution_percentage": percentage(
                to_number(get_path(grievances, "resolved")),
                to_number(get_path(grievances, "filed")),
            ),
        },
        "topic6": compute_environment_metrics(p6_ei, general["turnover"]),
    }
