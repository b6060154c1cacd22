# src/brsr/document/layout.py
"""
Declarative question layouts for every report section.

Each section is a fixed, ordered tuple of question specs. The compiler
walks the tuple once and emits nodes in exactly this order, so layout
never depends on how much a company has disclosed:

  Subheading    -> Heading
  Field         -> KeyValue (fallback text when the value is absent)
  Composite     -> KeyValue built from several parts ("Male: 1 | Female: 2")
  ListTable     -> Heading + Table, or Heading + Paragraph when the list is empty
  MappingTable  -> Heading + Table with one row per category, or Heading + Paragraph

Paths are dotted and relative to the section's data block. A path may be
an ordered alias list; the first present alias wins. `metric` paths point
into the derived-metrics tree and take precedence over raw values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from brsr.utils.numeric_parser import NOT_AVAILABLE
from brsr.utils.paths import PathSpec

# Special column keys
ROW_INDEX = "#"
CATEGORY = "@"


@dataclass(frozen=True)
class Subheading:
    text: str
    level: int = 2


@dataclass(frozen=True)
class Field:
    label: str
    path: Optional[PathSpec] = None
    fmt: str = "text"
    fallback: str = NOT_AVAILABLE
    metric: Optional[str] = None


@dataclass(frozen=True)
class Part:
    label: str
    path: Optional[PathSpec] = None
    metric: Optional[str] = None
    fmt: str = "number"


@dataclass(frozen=True)
class Composite:
    """One KeyValue joining several parts. Falls back when `presence` is absent."""
    label: str
    parts: Tuple[Part, ...]
    presence: Optional[PathSpec] = None
    fallback: str = NOT_AVAILABLE


@dataclass(frozen=True)
class Column:
    header: str
    key: str
    fmt: str = "text"
    fallback: str = NOT_AVAILABLE


@dataclass(frozen=True)
class ListTable:
    label: str
    path: PathSpec
    columns: Tuple[Column, ...]
    fallback: str


@dataclass(frozen=True)
class MappingTable:
    """
    Table over a mapping of category -> record.

    With `categories`, rows follow that fixed order and use its labels;
    otherwise rows follow the mapping's own order.
    """
    label: str
    path: PathSpec
    columns: Tuple[Column, ...]
    fallback: str
    categories: Optional[Tuple[Tuple[str, str], ...]] = None


QuestionSpec = Union[Subheading, Field, Composite, ListTable, MappingTable]


def ei(path: str) -> str:
    return f"essential_indicators.{path}"


def li(path: str) -> str:
    return f"leadership_indicators.{path}"


ESSENTIAL = Subheading("Essential Indicators")
LEADERSHIP = Subheading("Leadership Indicators")


# ---------------------------------------------------------------------
# Section A: general disclosures (scope: the whole record)
# ---------------------------------------------------------------------

def _company(key: str) -> Tuple[str, str]:
    return (f"company.{key}", key)


def _split(label: str, block: str, presence: Optional[str] = None) -> Composite:
    return Composite(
        label=label,
        parts=(
            Part("Male", metric=f"general.{block}.total_male"),
            Part("Female", metric=f"general.{block}.total_female"),
            Part("Total", metric=f"general.{block}.grand_total"),
        ),
        presence=presence,
    )


def _category(label: str, raw: str, block: str, tier: str) -> Composite:
    prefix = "permanent" if tier == "permanent" else "other_than_permanent"
    total = "permanent_total" if tier == "permanent" else "other_total"
    return Composite(
        label=label,
        parts=(
            Part("Male", path=f"{raw}.{prefix}_male"),
            Part("Female", path=f"{raw}.{prefix}_female"),
            Part("Total", metric=f"general.{block}.{total}"),
        ),
        presence=raw,
    )


GENERAL_LAYOUT: Tuple[QuestionSpec, ...] = (
    Subheading("I. Details of the listed entity"),
    Field("1. Corporate Identity Number (CIN)", _company("cin")),
    Field("2. Name of the Listed Entity", _company("company_name")),
    Field("3. Year of Incorporation", _company("year_of_incorporation"), fmt="number"),
    Field("4. Registered Office Address", _company("registered_office_address")),
    Field("5. Corporate Office Address", _company("corporate_address")),
    Field("6. Email", _company("email")),
    Field("7. Telephone", _company("telephone")),
    Field("8. Website", _company("website")),
    Field("9. Financial Year for reporting", "financial_year"),
    Field("10. Name of Stock Exchange(s)", _company("stock_exchange_listed"), fmt="join"),
    Field("11. Paid-up Capital (INR)", _company("paid_up_capital"), fmt="number"),
    Composite(
        "12. Contact for BRSR queries",
        parts=(
            Part("Name", path=_company("brsr_contact_name"), fmt="text"),
            Part("Email", path=_company("brsr_contact_mail"), fmt="text"),
        ),
        presence=_company("brsr_contact_name"),
    ),
    Field("13. Reporting boundary", "reporting_boundary"),

    Subheading("II. Products / Services"),
    ListTable(
        "14. Details of business activities (accounting for 90% of the turnover)",
        "sa_business_activities_turnover",
        columns=(
            Column("Description of Main Activity", "description_main"),
            Column("Description of Business Activity", "description_business"),
            Column("% of Turnover", "turnover_percentage", fmt="percent"),
        ),
        fallback="No business activities data provided.",
    ),
    ListTable(
        "15. Products/Services sold by the entity (accounting for 90% of the turnover)",
        "sa_product_services_turnover",
        columns=(
            Column("Product/Service", "product_service"),
            Column("NIC Code", "nic_code"),
            Column("% of Turnover", "turnover_contributed", fmt="percent"),
        ),
        fallback="No products/services data provided.",
    ),

    Subheading("III. Operations"),
    Composite(
        "16. Number of plants",
        parts=(
            Part("National", path="sa_locations_plants_offices.national_plants"),
            Part("International", path="sa_locations_plants_offices.international_plants"),
            Part("Total", metric="general.locations.total_plants"),
        ),
        presence="sa_locations_plants_offices",
    ),
    Composite(
        "Number of offices",
        parts=(
            Part("National", path="sa_locations_plants_offices.national_offices"),
            Part("International", path="sa_locations_plants_offices.international_offices"),
            Part("Total", metric="general.locations.total_offices"),
        ),
        presence="sa_locations_plants_offices",
    ),
    Field("Total locations", metric="general.locations.grand_total", fmt="number"),
    Composite(
        "17. Markets served",
        parts=(
            Part("National (No. of States)", path="sa_markets_served.locations.national_states"),
            Part("International (No. of Countries)", path="sa_markets_served.locations.international_countries"),
        ),
        presence="sa_markets_served.locations",
    ),
    Field(
        "Contribution of exports as a percentage of total turnover",
        ("sa_markets_served.exports_percentage", "sa_markets_served_exports_percentage"),
        fmt="percent",
    ),
    Field(
        "A brief on types of customers",
        ("sa_markets_served.customer_types", "sa_markets_served_customer_types"),
    ),

    Subheading("IV. Employees"),
    _category("18. Permanent employees", "sa_employee_details", "employees", "permanent"),
    _category("Other than permanent employees", "sa_employee_details", "employees", "other"),
    _split("Total employees", "employees", presence="sa_employee_details"),
    Field("Female share of employees", metric="general.employees.total_female_percentage"),
    _category("Permanent workers", "sa_workers_details", "workers", "permanent"),
    _category("Other than permanent workers", "sa_workers_details", "workers", "other"),
    _split("Total workers", "workers", presence="sa_workers_details"),
    Field("Female share of workers", metric="general.workers.total_female_percentage"),
    _split("Differently abled employees", "differently_abled_employees", presence="sa_differently_abled_details"),
    _split("Differently abled workers", "differently_abled_workers", presence="sa_differently_abled_details"),
    Field("19. Women on the Board of Directors", metric="general.women_representation.board_percentage"),
    Field("Women in Key Management Personnel", metric="general.women_representation.kmp_percentage"),
    Field(
        "20. Turnover rate for permanent employees",
        "sa_turnover_rate.permanent_employees_turnover_rate",
        fmt="percent",
    ),
    Field(
        "Turnover rate for permanent workers",
        "sa_turnover_rate.permanent_workers_turnover_rate",
        fmt="percent",
    ),

    Subheading("V. Holding, Subsidiary and Associate Companies"),
    ListTable(
        "21. Names of holding / subsidiary / associate companies / joint ventures",
        "sa_holding_subsidiary_associate_companies",
        columns=(
            Column("Name", "name"),
            Column("CIN / Country", "cin_or_country"),
            Column("Type", "type"),
            Column("% of shares held", "percentage_holding", fmt="percent"),
        ),
        fallback="No holding, subsidiary or associate companies reported.",
    ),

    Subheading("VI. CSR Details"),
    Field("22. Whether CSR is applicable", "sa_csr_applicable", fmt="yes_no"),
    Field("Turnover (INR)", ("sa_csr_turnover", "sa_turnover"), fmt="number"),
    Field("Net worth (INR)", "sa_csr_net_worth", fmt="number"),

    Subheading("VII. Transparency and Disclosures Compliances"),
    Field("23. Complaints received", "sa_transparency_complaints.received", fmt="number"),
    Field("Complaints pending resolution", "sa_transparency_complaints.pending", fmt="number"),
    Field("Remarks", "sa_transparency_complaints.remarks"),
)


# ---------------------------------------------------------------------
# Section B: management and process disclosures (scope: the section B block)
# ---------------------------------------------------------------------

MANAGEMENT_ALIASES = ("sb_policy_management", "section_b_data")

MANAGEMENT_LAYOUT: Tuple[QuestionSpec, ...] = (
    Subheading("1. Statement by director responsible for the business responsibility report"),
    Field("Director's statement", "sb_director_statement"),

    Subheading("2. Highest authority responsible for implementation and oversight of the Business Responsibility policies"),
    Field("Name", "sb_esg_responsible_individual.name"),
    Field("Designation", "sb_esg_responsible_individual.designation"),
    Field("DIN (if Director)", "sb_esg_responsible_individual.din_if_director"),
    Field("Email", "sb_esg_responsible_individual.email"),
    Field("Phone", "sb_esg_responsible_individual.phone"),

    ListTable(
        "3. Policy and management processes for NGRBC Principles",
        "sb_principle_policies",
        columns=(
            Column("Principle", "principle", fmt="principle"),
            Column("Has Policy", "has_policy", fmt="yes_no", fallback="No"),
            Column("Board Approved", "is_board_approved", fmt="yes_no", fallback="No"),
            Column("Policy Text/URL", "policy_text_or_url"),
            Column("Extends to Value Chain", "extends_to_value_chain", fmt="yes_no", fallback="No"),
            Column("Performance Against Targets", "performance_against_targets"),
        ),
        fallback="No principle policy data available.",
    ),

    Subheading("4. Sustainability Committee"),
    Field("Has committee", "sb_sustainability_committee.has_committee", fmt="yes_no", fallback="No"),
    Field("Committee details", "sb_sustainability_committee.details"),

    Subheading("5. Details of Review of NGRBCs by the Company"),
    Field("Performance review", "sb_ngrbc_company_review.performance_review_yn", fmt="yes_no", fallback="No"),
    Field("Compliance review", "sb_ngrbc_company_review.compliance_review_yn", fmt="yes_no", fallback="No"),
    Field("Review undertaken by", "sb_ngrbc_company_review.review_undertaken_by"),
    Field("Frequency", "sb_ngrbc_company_review.frequency"),

    Subheading("6. Independent Assessment/Evaluation by External Agency"),
    Field("Conducted", "sb_external_policy_assessment.conducted", fmt="yes_no", fallback="No"),
    Field("Agency name", "sb_external_policy_assessment.agency_name"),
)


# ---------------------------------------------------------------------
# Section C: the nine principles (scope: the resolved topic block)
# ---------------------------------------------------------------------

def _p2(path: str, leadership: bool = False) -> Tuple[str, str]:
    # Principle 2 blocks were stored flat before the indicator split.
    return (path, li(path) if leadership else ei(path))


_COMPLAINT_COLUMNS = (
    Column("Category", CATEGORY),
    Column("Filed during the year", "filed_current_fy", fmt="number", fallback="0"),
    Column("Pending resolution", "pending_current_fy", fmt="number", fallback="0"),
    Column("Remarks", "remarks_current_fy"),
)

TOPIC1_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field("1. Anti-corruption or anti-bribery policy", ei("anti_corruption_policy.has_policy"), fmt="yes_no"),
    Field("Policy details", ei("anti_corruption_policy.details")),
    Field("Policy weblink", ei("anti_corruption_policy.weblink")),
    Field(
        "2. Process for reporting concerns on unethical behaviour",
        ei("concerns_reporting_process.has_process"),
        fmt="yes_no",
    ),
    Field("3. Number of instances of ethical concerns", ei("ethical_concerns_instances.count"), fmt="number", fallback="0"),
    Field(
        "4. Awareness programmes held for the Board of Directors",
        ei("p1_training_coverage.board_of_directors.programs_held"),
        fmt="number",
    ),
    Field("5. Monetary fines, penalties and settlements", ei("p1_fines_penalties_paid.monetary_details")),
    Field("6. Non-monetary punishments and imprisonment", ei("p1_fines_penalties_paid.non_monetary_details")),
    Field(
        "7. Directors against whom disciplinary action was taken by law enforcement agencies",
        (
            ei("disciplinary_actions_by_le_agencies.current_fy.directors"),
            ei("disciplinary_actions_by_le_agencies.fy_2022_23.directors"),
        ),
        fmt="number",
    ),
    Field(
        "8. Complaints on conflict of interest of directors",
        ei("complaints_conflict_of_interest.directors_number"),
        fmt="number",
    ),
    Field(
        "9. Corrective action on corruption and conflicts of interest",
        ei("corrective_actions_on_corruption_coi.details"),
    ),
    LEADERSHIP,
    Field(
        "1. Awareness programmes conducted for value chain partners",
        li("anti_corruption_training.fy_training_details"),
    ),
    Field("2. Board awareness on ESG risks and opportunities", li("board_awareness_esg.aware"), fmt="yes_no"),
    Field(
        "3. Processes to avoid conflicts of interest involving Board members",
        li("conflict_avoidance_processes.has_processes"),
        fmt="yes_no",
    ),
)

TOPIC2_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field(
        "1. R&D investment in sustainability technologies (% of total R&D)",
        _p2("p2_essential_rd_capex_percentages.rd_percentage_current_fy"),
        fmt="percent",
    ),
    Field(
        "Capital expenditure on sustainability technologies (% of total capex)",
        _p2("p2_essential_rd_capex_percentages.capex_percentage_current_fy"),
        fmt="percent",
    ),
    Field(
        "Improvements in environmental and social impacts",
        _p2("p2_essential_rd_capex_percentages.rd_improvements_details"),
    ),
    Field(
        "2. Procedures in place for sustainable sourcing",
        _p2("p2_essential_sustainable_sourcing.has_procedures"),
        fmt="yes_no",
    ),
    Field(
        "Inputs sourced sustainably",
        _p2("p2_essential_sustainable_sourcing.percentage_inputs_sourced_sustainably"),
        fmt="percent",
    ),
    Field("3. Processes to reclaim e-waste", _p2("p2_essential_reclaim_processes_description.e_waste")),
    Field("Processes to reclaim hazardous waste", _p2("p2_essential_reclaim_processes_description.hazardous_waste")),
    Field("Processes to reclaim other waste", _p2("p2_essential_reclaim_processes_description.other_waste")),
    Field(
        "4. Waste collection plan in line with EPR",
        _p2("p2_essential_epr_status.is_collection_plan_in_line_with_epr"),
        fmt="yes_no",
    ),
    LEADERSHIP,
    Field("1. Life cycle assessments conducted", _p2("p2_leadership_lca_details.conducted", True), fmt="yes_no"),
    ListTable(
        "Life cycle assessments",
        _p2("p2_leadership_lca_details.assessments", True),
        columns=(
            Column("Product/Service", "product_service_name"),
            Column("NIC Code", "nic_code"),
            Column("% of Turnover", "turnover_percentage", fmt="percent"),
            Column("Boundary", "lca_boundary"),
            Column("External Agency", "conducted_by_external_agency", fmt="yes_no", fallback="No"),
            Column("Results Public", "results_communicated_publicly", fmt="yes_no", fallback="No"),
        ),
        fallback="No life cycle assessments reported.",
    ),
    ListTable(
        "2. Significant social or environmental concerns from products",
        _p2("p2_leadership_product_risks", True),
        columns=(
            Column("Product/Service", "product_service_name"),
            Column("Description of the risk", "risk_description"),
            Column("Action taken", "action_taken"),
        ),
        fallback="No significant product risks reported.",
    ),
    ListTable(
        "3. Recycled or reused input material (% by value)",
        _p2("p2_leadership_recycled_input_value_percentage", True),
        columns=(
            Column("Input material", "input_material_category"),
            Column("Current FY", "percentage_by_value_current_fy", fmt="percent"),
        ),
        fallback="No recycled input data reported.",
    ),
    MappingTable(
        "4. Products and packaging reclaimed at end of life (MT)",
        _p2("p2_leadership_reclaimed_waste_quantities", True),
        columns=(
            Column("Category", CATEGORY),
            Column("Re-used", "current_fy_reused_mt", fmt="number", fallback="0"),
            Column("Recycled", "current_fy_recycled_mt", fmt="number", fallback="0"),
            Column("Safely disposed", "current_fy_safely_disposed_mt", fmt="number", fallback="0"),
        ),
        fallback="No reclaimed product data reported.",
        categories=(
            ("plastics", "Plastics (including packaging)"),
            ("e_waste", "E-waste"),
            ("hazardous_waste", "Hazardous waste"),
            ("other_waste", "Other waste"),
        ),
    ),
    ListTable(
        "5. Reclaimed products and their packaging (% of products sold)",
        _p2("p2_leadership_reclaimed_products_as_percentage_sold", True),
        columns=(
            Column("Product category", "product_category"),
            Column("Reclaimed as % of sold", "reclaimed_as_percentage_of_sold", fmt="percent"),
        ),
        fallback="No reclaimed product percentages reported.",
    ),
)

TOPIC3_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field("1. Well-being measures for employees", ei("employee_well_being_measures.employees_current_fy")),
    Field("Well-being measures for workers", ei("employee_well_being_measures.workers_current_fy")),
    Field("2. Retirement benefits: permanent employees", ei("retirement_benefits_permanent_employees")),
    Field("Retirement benefits: other than permanent employees", ei("retirement_benefits_other_employees")),
    Field(
        "3. Workplace accessible to differently abled employees and workers",
        ei("workplace_accessibility_differently_abled.is_accessible_current_fy"),
        fmt="yes_no",
    ),
    Field("Accessibility facilities", ei("workplace_accessibility_differently_abled.facilities_details_current_fy")),
    Field("4. Equal opportunity policy", ei("equal_remuneration_policy.has_policy"), fmt="yes_no"),
    Field(
        "5. Grievance redressal mechanism for employees",
        ei("grievance_redressal_employees.has_mechanism_current_fy"),
        fmt="yes_no",
    ),
    Field(
        "Grievance redressal mechanism for workers",
        ei("grievance_redressal_workers.has_mechanism_current_fy"),
        fmt="yes_no",
    ),
    Field("6. Employee grievances resolved", metric="topic3.grievances_resolution_percentage"),
    Field(
        "7. Employees trained on health and safety measures",
        ei("training_details_employees.safety_persons_trained_current_fy"),
        fmt="number",
    ),
    Field(
        "Employees trained on skill upgradation",
        ei("training_details_employees.skill_upgradation_persons_trained_current_fy"),
        fmt="number",
    ),
    Field(
        "8. Employees receiving performance and career development reviews",
        ei("performance_career_development_reviews_employees.covered_percentage_current_fy"),
        fmt="percent",
    ),
    Field(
        "9. Occupational health and safety management system certified externally",
        ei("health_safety_management_system.is_certified_externally_current_fy"),
        fmt="yes_no",
    ),
    Field(
        "10. Permanent employees covered by life insurance",
        ei("life_health_insurance_permanent_employees.life_insurance_percentage_current_fy"),
        fmt="percent",
    ),
    MappingTable(
        "11. Complaints on working conditions and health and safety",
        ei("complaints_working_conditions"),
        columns=_COMPLAINT_COLUMNS,
        fallback="No complaints on working conditions reported.",
        categories=(
            ("working_conditions", "Working Conditions"),
            ("health_safety", "Health & Safety"),
            ("child_labour", "Child Labour"),
            ("forced_labour", "Forced Labour"),
            ("involuntary_labour", "Involuntary Labour"),
            ("sexual_harassment", "Sexual Harassment"),
            ("discrimination", "Discrimination"),
        ),
    ),
    LEADERSHIP,
    Field(
        "1. Transition assistance programmes for continued employability",
        li("transition_assistance_programs.is_provided_current_fy"),
        fmt="yes_no",
    ),
    Field("2. Measures for a safe and healthy workplace", li("safe_healthy_workplace_measures_current_fy")),
    Field(
        "3. Well-being measures beyond legal requirements",
        li("wellbeing_measures_beyond_legal.has_measures"),
        fmt="yes_no",
    ),
)

TOPIC4_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field(
        "1. Processes for identifying key stakeholder groups",
        ei("processes_for_identifying_stakeholder_groups"),
    ),
    ListTable(
        "2. Stakeholder groups and frequency of engagement",
        ei("stakeholder_identification_engagement"),
        columns=(
            Column("Stakeholder Group", "stakeholder_group"),
            Column("Vulnerable or Marginalised", "identified_as_vulnerable", fmt="yes_no", fallback="No"),
            Column("Channels of Communication", "channels_of_communication"),
            Column("Frequency of Engagement", "frequency_of_engagement"),
        ),
        fallback="No stakeholder identification data available.",
    ),
    Field(
        "3. Feedback mechanism for vulnerable stakeholders",
        ei("vulnerable_stakeholder_feedback.has_mechanism"),
        fmt="yes_no",
    ),
    LEADERSHIP,
    Field(
        "1. Consultation with stakeholders on economic, environmental and social topics",
        li("consultation_esg_details"),
    ),
    Field("2. Stakeholder consultation on ESG risks", li("stakeholder_consultation_esg.conducted"), fmt="yes_no"),
)

TOPIC5_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field(
        "1. Permanent employees trained on human rights",
        ei("human_rights_training.employees.permanent.covered_b"),
        fmt="number",
    ),
    MappingTable(
        "Human rights training by category",
        ei("human_rights_training.employees"),
        columns=(
            Column("Category", CATEGORY),
            Column("Total (A)", "total_a", fmt="number"),
            Column("Covered (B)", "covered_b", fmt="number"),
            Column("% (B / A)", "percentage_c", fmt="percent"),
        ),
        fallback="No human rights training data available.",
    ),
    MappingTable(
        "2. Minimum wages paid to employees",
        ei("minimum_wages.employees"),
        columns=(
            Column("Category", CATEGORY),
            Column("Equal to Minimum Wage", "equal_to_minimum_wage_count", fmt="number", fallback="0"),
            Column("More than Minimum Wage", "more_than_minimum_wage_count", fmt="number", fallback="0"),
        ),
        fallback="No minimum wage data available.",
    ),
    MappingTable(
        "3. Remuneration, salary and wages",
        ei("remuneration"),
        columns=(
            Column("Category", CATEGORY),
            Column("Male Median", "male_median", fmt="number"),
            Column("Female Median", "female_median", fmt="number"),
            Column("Median Ratio (M:F)", "median_ratio"),
        ),
        fallback="No remuneration data available.",
        categories=(
            ("bod", "Board of Directors"),
            ("kmp", "Key Managerial Personnel"),
            ("employees_other_than_bod_kmp", "Employees other than BoD and KMP"),
            ("workers", "Workers"),
        ),
    ),
    Field("4. Focal point for human rights issues", ei("focal_point_for_human_rights"), fmt="yes_no"),
    Field("5. Grievance redressal mechanisms", ei("grievance_redressal_mechanisms")),
    MappingTable(
        "6. Complaints received during the year",
        ei("complaints_current_fy"),
        columns=(
            Column("Category", CATEGORY),
            Column("Filed", "filed_current_fy", fmt="number", fallback="0"),
            Column("Pending", "pending_current_fy", fmt="number", fallback="0"),
            Column("Resolved", "resolved_current_fy", fmt="number", fallback="0"),
            Column("Remarks", "remarks_current_fy"),
        ),
        fallback="No human rights complaints reported.",
        categories=(
            ("sexual_harassment", "Sexual Harassment"),
            ("discrimination_workplace", "Discrimination at workplace"),
            ("child_labour", "Child Labour"),
            ("forced_labour", "Forced Labour/Involuntary Labour"),
            ("wages", "Wages"),
            ("other_hr_issues", "Other human rights related issues"),
        ),
    ),
    Field("7. Mechanisms to prevent adverse consequences to the complainant", ei("anti_retaliation_mechanisms")),
    Field("8. Human rights requirements in business agreements", ei("hr_in_business_agreements"), fmt="yes_no"),
    Field("9. Corrective actions from assessments", ei("corrective_actions_risks_q9")),
    LEADERSHIP,
    Field("1. Business processes modified due to human rights grievances", li("process_modification_grievances")),
    Field("2. Scope of human rights due-diligence", li("hr_due_diligence_scope")),
    Field("3. Premises accessible to differently abled visitors", li("accessibility_for_disabled"), fmt="tri"),
    Field(
        "4. Value chain partners assessed for child labour",
        li("assessment_value_chain_partners.child_labour_percent"),
        fmt="percent",
    ),
    Field("5. Corrective actions from value chain assessments", li("corrective_actions_risks_q4_li")),
)

TOPIC6_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field(
        "1. Total electricity consumption (A)",
        ei("energy_consumption_intensity.current_fy.electricity_consumption_a"),
        fmt="number",
    ),
    Field("Total fuel consumption (B)", ei("energy_consumption_intensity.current_fy.fuel_consumption_b"), fmt="number"),
    Field(
        "Energy consumption through other sources (C)",
        ei("energy_consumption_intensity.current_fy.other_sources_consumption_c"),
        fmt="number",
    ),
    Field("Total energy consumption (A+B+C)", metric="topic6.energy.total_current_fy", fmt="number"),
    Field("Change in energy consumption from previous year", metric="topic6.energy.yoy_change"),
    Field("Share of energy from renewable sources", metric="topic6.intensity.renewable_energy_share"),
    Field(
        "Energy intensity per rupee of turnover",
        ei("energy_consumption_intensity.current_fy.energy_intensity_turnover"),
        metric="topic6.intensity.energy_intensity",
    ),
    Field("2. Designated consumer under the PAT scheme", ei("designated_consumers_pat.is_dc"), fmt="yes_no"),
    Field("3. Total water withdrawal (kL)", metric="topic6.water.total_current_fy", fmt="number"),
    Field("Change in water withdrawal from previous year", metric="topic6.water.yoy_change"),
    Field("Water intensity per rupee of turnover", metric="topic6.intensity.water_intensity"),
    Field("4. Zero liquid discharge implemented", ei("zero_liquid_discharge.implemented"), fmt="yes_no"),
    Field("5. Air emissions other than GHG", ei("air_emissions_other_ghg.current_fy")),
    Field("6. Scope 1 emissions (tCO2e)", ei("ghg_emissions_scope1_2.current_fy.scope1"), fmt="number"),
    Field("Scope 2 emissions (tCO2e)", ei("ghg_emissions_scope1_2.current_fy.scope2"), fmt="number"),
    Field("Change in Scope 1 and 2 emissions from previous year", metric="topic6.ghg.yoy_change"),
    Field("GHG emission intensity per rupee of turnover", metric="topic6.intensity.ghg_intensity"),
    Field("7. Projects for reducing GHG emissions", ei("ghg_reduction_projects.has_projects"), fmt="yes_no"),
    Field("8. Total waste generated (MT)", metric="topic6.waste.total_generated_current_fy", fmt="number"),
    Field("Total waste recovered (MT)", metric="topic6.waste.total_recovered_current_fy", fmt="number"),
    Field("Total waste disposed (MT)", metric="topic6.waste.total_disposed_current_fy", fmt="number"),
    Field("9. Waste management practices", ei("waste_management_practices_desc")),
    ListTable(
        "10. Operations in or near ecologically sensitive areas",
        ei("ecologically_sensitive_operations.list"),
        columns=(
            Column("Location", "location"),
            Column("Type of Operations", "type_of_operations"),
            Column("Compliance Status", "compliance_status"),
            Column("Reason / Corrective Action", "non_compliance_reason_corrective"),
        ),
        fallback="No operations reported in or near ecologically sensitive areas.",
    ),
    ListTable(
        "11. Environmental impact assessments of projects",
        ei("eia_current_fy.list"),
        columns=(
            Column("Project", "name_brief_details"),
            Column("EIA Notification No.", "eia_notification_no"),
            Column("Date", "date"),
            Column("External Agency", "conducted_by_external_agency", fmt="yes_no", fallback="No"),
            Column("Results Public", "results_communicated_public_domain", fmt="yes_no", fallback="No"),
            Column("Web Link", "relevant_web_link"),
        ),
        fallback="No environmental impact assessments undertaken.",
    ),
    Field("12. Compliant with environmental law", ei("env_law_compliance.is_compliant"), fmt="yes_no"),
    Field(
        "13. Biodiversity impact assessed and reported",
        ei("biodiversity_impact_assessment.assessed_reported"),
        fmt="yes_no",
    ),
    Field("14. Plantation initiatives undertaken", ei("plantation_initiatives.undertaken"), fmt="yes_no"),
    Field("15. Deforestation impact tracked and reported", ei("deforestation_impact.tracked_reported"), fmt="yes_no"),
    Field(
        "16. Afforestation or reforestation undertaken",
        ei("afforestation_reforestation_sustainability.undertaken"),
        fmt="yes_no",
    ),
    Field("17. Soil quality monitored and managed", ei("soil_quality_management.monitored_managed"), fmt="yes_no"),
    Field(
        "18. Green-certified buildings",
        ei("green_building_certification.has_certified_buildings"),
        fmt="yes_no",
    ),
    Field(
        "19. Noise pollution monitoring and mitigation plan",
        ei("noise_pollution_monitoring_mitigation.has_monitoring_mitigation_plan"),
        fmt="yes_no",
    ),
    Field("20. Significant environmental incidents", ei("significant_environmental_incidents_details")),
    LEADERSHIP,
    Field(
        "1. Value chain partners assessed for environmental impacts",
        li("value_chain_partners_env_assessment_percent"),
        fmt="percent",
    ),
)

TOPIC7_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    ListTable(
        "1. Affiliations with trade and industry chambers/associations",
        ei("trade_and_industry_chambers_associations"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("Name of the chamber/association", "name"),
            Column("Reach (State/National)", "reach"),
        ),
        fallback="No memberships in trade and industry chambers/associations reported.",
    ),
    ListTable(
        "2. Corrective action on issues related to anti-competitive conduct",
        ei("anti_competitive_conduct_corrective_actions"),
        columns=(
            Column("Name of Authority", "name_of_authority"),
            Column("Brief of the Case", "brief_of_case"),
            Column("Corrective Action Taken", "corrective_action_taken"),
        ),
        fallback="No corrective actions on anti-competitive conduct reported.",
    ),
    LEADERSHIP,
    ListTable(
        "1. Public policy positions advocated",
        li("public_policy_positions_advocated"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("Policy Advocated", "policy_advocated"),
            Column("Method of Advocacy", "method_of_advocacy"),
            Column("Board Review Frequency", "board_review_frequency"),
            Column("Web Link", "web_link"),
        ),
        fallback="No public policy positions advocated reported.",
    ),
)

TOPIC8_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    ListTable(
        "1. Social impact assessments of projects",
        ei("social_impact_assessments"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("Project Details", "project_details"),
            Column("SIA Notification No.", "sia_notification_no"),
            Column("Date", "date_of_notification"),
            Column("Conducted by", "conducted_by"),
            Column("Results in Public Domain", "results_communicated_in_public_domain", fmt="yes_no", fallback="No"),
            Column("Web Link", "relevant_web_link"),
        ),
        fallback="No Social Impact Assessments conducted.",
    ),
    ListTable(
        "2. Rehabilitation and resettlement projects",
        ei("rehab_resettlement_projects"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("Name of Project", "name_of_project_ongoing_rr"),
            Column("State", "state"),
            Column("District", "district"),
            Column("No. of PAFs", "no_of_paf", fmt="number"),
            Column("Amount Paid (INR)", "amounts_paid_to_pafs_fy_inr", fmt="number"),
        ),
        fallback="No Rehabilitation and Resettlement projects.",
    ),
    Field("3. Community grievance mechanisms", ei("community_grievance_mechanisms")),
    Field(
        "4. Inputs sourced directly from MSMEs and small producers",
        ei("input_material_sourcing.current_fy.directly_from_msme_small_producers_percent"),
        fmt="percent",
    ),
    Field(
        "Inputs sourced directly from within the district and neighbouring districts",
        ei("input_material_sourcing.current_fy.directly_from_district_neighbouring_percent"),
        fmt="percent",
    ),
    LEADERSHIP,
    ListTable(
        "1. Actions to mitigate negative social impacts",
        li("social_impact_mitigation_actions"),
        columns=(
            Column("Negative Social Impact Identified", "negative_social_impact_identified"),
            Column("Corrective Action Taken", "corrective_action_taken"),
        ),
        fallback="No social impact mitigation actions reported.",
    ),
    ListTable(
        "2. CSR projects in aspirational districts",
        li("csr_aspirational_districts_projects"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("State", "state"),
            Column("Aspirational District", "aspirational_district"),
            Column("Amount Spent (INR)", "amount_spent_inr", fmt="number"),
        ),
        fallback="No CSR projects in aspirational districts.",
    ),
    Field("3. Preferential procurement policy", li("preferential_procurement.has_policy"), fmt="yes_no"),
    Field(
        "Marginalised or vulnerable groups procured from",
        li("preferential_procurement.marginalized_vulnerable_groups_procured_from"),
        fmt="join",
    ),
    Field(
        "Share of total procurement by value",
        li("preferential_procurement.percentage_total_procurement_by_value"),
        fmt="percent",
    ),
    ListTable(
        "4. Benefits from intellectual property based on traditional knowledge",
        li("ip_traditional_knowledge_benefits"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("Intellectual Property", "ip_based_on_traditional_knowledge"),
            Column("Owned/Acquired", "owned_acquired"),
            Column("Benefit Shared", "benefit_shared_yes_no", fmt="yes_no", fallback="No"),
            Column("Basis of Benefit Share", "basis_of_calculating_benefit_share"),
        ),
        fallback="No IP and traditional knowledge benefits reported.",
    ),
    ListTable(
        "5. Beneficiaries of CSR projects",
        li("csr_project_beneficiaries_details"),
        columns=(
            Column("S.No.", ROW_INDEX),
            Column("CSR Project", "csr_project"),
            Column("Persons Benefitted", "persons_benefitted_from_csr", fmt="number"),
            Column("% from Vulnerable Groups", "percent_beneficiaries_vulnerable_marginalized", fmt="percent"),
        ),
        fallback="No CSR project beneficiaries details reported.",
    ),
)

TOPIC9_LAYOUT: Tuple[QuestionSpec, ...] = (
    ESSENTIAL,
    Field(
        "1. Turnover of products carrying environmental and social parameters",
        ei("turnover_product_services_info.environmental_social_parameters_turnover_percent"),
        fmt="percent",
    ),
    MappingTable(
        "2. Consumer complaints",
        ei("consumer_complaints"),
        columns=(
            Column("Category", CATEGORY),
            Column("Received during the year", "received_current_fy", fmt="number", fallback="0"),
            Column("Pending resolution", "pending_resolution_current_fy", fmt="number", fallback="0"),
            Column("Remarks", "remarks_current_fy"),
        ),
        fallback="No consumer complaints data available.",
        categories=(
            ("data_privacy", "Data privacy"),
            ("advertising", "Advertising"),
            ("cyber_security", "Cyber-security"),
            ("delivery_of_essential_services", "Delivery of essential services"),
            ("restrictive_trade_practices", "Restrictive trade practices"),
            ("unfair_trade_practices", "Unfair trade practices"),
            ("other_consumer_issues", "Other consumer issues"),
        ),
    ),
    MappingTable(
        "3. Product recalls on account of safety issues",
        ei("product_recalls"),
        columns=(
            Column("Category", CATEGORY),
            Column("Instances during the year", "instances_current_fy", fmt="number", fallback="0"),
            Column("Reasons for Recall", "reasons_for_recall"),
        ),
        fallback="No product recalls reported.",
    ),
    MappingTable(
        "4. Information on product or service labelling",
        ei("product_service_information"),
        columns=(
            Column("Information Type", CATEGORY),
            Column("Covered", "covered", fmt="tri"),
            Column("Details", "details"),
        ),
        fallback="No product/service information data available.",
        categories=(
            ("source_of_raw_materials", "Source of raw materials"),
            ("country_of_origin", "Country of origin"),
            ("recyclability", "Recyclability"),
            ("environmental_toxicity", "Environmental toxicity"),
            ("safety_warnings", "Safety warnings"),
            ("end_of_life_disposal", "End of life disposal"),
        ),
    ),
    Field("5. Consumer satisfaction score", ei("consumer_survey_satisfaction_score.score"), fmt="percent"),
    Field(
        "6. Policy on cyber security and risks related to data privacy",
        (
            ei("cyber_security_data_privacy_policy.has_policy"),
            ei("data_security_privacy_policy.has_policy"),
        ),
        fmt="yes_no",
    ),
    Field(
        "Policy weblink",
        (
            ei("cyber_security_data_privacy_policy.policy_weblink"),
            ei("data_security_privacy_policy.policy_weblink"),
        ),
    ),
    Field("7. Corrective actions on consumer complaints", ei("corrective_actions_details")),
    LEADERSHIP,
    Field("1. Channels where product and service information can be accessed", li("product_service_info_channels_platforms")),
    Field("2. Steps to inform and educate consumers on safe usage", li("steps_inform_educate_safe_responsible_usage")),
    Field(
        "3. Mechanisms to inform consumers of risk of disruption of essential services",
        li("mechanisms_inform_risk_disruption_essential_services"),
    ),
    Field(
        "4. Product information displayed over and above local law",
        li("product_info_display_above_mandate.displays_yes_no_na"),
        fmt="tri",
    ),
    Field(
        "5. Consumer satisfaction survey carried out",
        (
            li("consumer_satisfaction_survey_details.survey_carried_out_yes_no"),
            li("consumer_survey_action_plan.survey_undertaken"),
        ),
        fmt="yes_no",
    ),
)

TOPIC_LAYOUTS: Dict[str, Tuple[QuestionSpec, ...]] = {
    "topic1": TOPIC1_LAYOUT,
    "topic2": TOPIC2_LAYOUT,
    "topic3": TOPIC3_LAYOUT,
    "topic4": TOPIC4_LAYOUT,
    "topic5": TOPIC5_LAYOUT,
    "topic6": TOPIC6_LAYOUT,
    "topic7": TOPIC7_LAYOUT,
    "topic8": TOPIC8_LAYOUT,
    "topic9": TOPIC9_LAYOUT,
}
