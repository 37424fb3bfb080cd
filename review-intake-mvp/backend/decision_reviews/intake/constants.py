"""
静态常量：benefit type、每个 benefit type 允许的 nonrating issue category、payee code。

模块加载时构建一次，之后只读。
"""

from types import MappingProxyType

CONTESTS_DECISION_ISSUE = "on_file_decision_issue"
CONTESTS_RATING_ISSUE = "on_file_rating_issue"
CONTESTS_LEGACY_ISSUE = "on_file_legacy_issue"
CONTESTS_OTHER = "other"

REQUEST_ISSUE_TYPE = "RequestIssue"

BENEFIT_TYPES = MappingProxyType({
    "compensation": "Compensation",
    "pension": "Pension",
    "fiduciary": "Fiduciary",
    "insurance": "Insurance",
    "education": "Education",
    "voc_rehab": "Veteran Readiness and Employment",
    "loan_guaranty": "Loan Guaranty",
    "vha": "Veterans Health Administration",
    "nca": "National Cemetery Administration",
})

# ── benefit type → 允许的 category（有序） ─────────────────────────────────

CATEGORIES_BY_BENEFIT_TYPE = MappingProxyType({
    "compensation": (
        "Unknown issue category",
        "Apportionment",
        "Incarceration Adjustments",
        "Audit Error Worksheet (DFAS)",
        "Active Duty Adjustments",
        "Drill Pay Adjustments",
        "Character of discharge determinations",
        "Income/net worth (pension)",
        "Dependent child - Adopted",
        "Dependent child - Stepchild",
        "Dependent child - Biological",
        "Dependency Spouse - Common law marriage",
        "Dependency Spouse - Inference of marriage",
        "Dependency Spouse - Deemed valid marriage",
        "Military Retired Pay",
        "Contested Claims (other than apportionment)",
        "Lack of Qualifying Service",
        "Other non-rated",
    ),
    "pension": (
        "Unknown issue category",
        "Eligibility | Wartime service",
        "Eligibility | Veteran Status",
        "Income/Net Worth | Countable Income",
        "Income/Net Worth | Residential Lot Size",
        "Income/Net Worth | Medical Expense Deductions",
        "Effective date | Liberalizing Law",
        "Effective date | 3.400(b)",
        "Dependent Child - Biological",
        "Dependent Child - Adopted",
        "Dependent Child - Stepchild",
        "Dependency Spouse - Common law marriage",
        "Dependency Spouse - Inference of marriage",
        "Dependency Spouse - Deemed valid marriage",
        "Penalty Period",
        "Apportionment",
        "Survivors pension eligibility",
        "Burial Benefits - NSC Burial",
        "Burial Benefits - Plot or Interment Allowance",
        "Burial Benefits - Transportation Allowance",
        "Accrued within 1 year of death",
        "Accrued outside 1 year of death",
        "Other non-rated",
    ),
    "fiduciary": (
        "Appointment of a Fiduciary (38 CFR 13.100)",
        "Removal of a Fiduciary (38 CFR 13.500)",
        "Misuse Determination (38 CFR 13.400)",
        "RO Misuse Determination (38 CFR 13.400)",
    ),
    "insurance": (
        "Waiver of premiums (injury/disability)",
        "Reinstatement",
        "RH (Service-Disabled Veterans Insurance)",
        "Disability Insurance",
        "Beneficiary designation",
        "Other",
    ),
    "education": (
        "Accrued",
        "Eligibility | 33 - Post-9/11 GI Bill",
        "Eligibility | 30 - Montgomery GI Bill",
        "Eligibility | 35 - Dependents Education",
        "Effective Date",
        "Overpayment | Validity of debt",
        "Other",
    ),
    "voc_rehab": (
        "Basic Eligibility",
        "Entitlement to Services",
        "Plan/Goal Selection",
        "Equipment Purchases",
        "Additional Training",
        "Other",
    ),
    "loan_guaranty": (
        "Basic eligibility - Insufficient service",
        "Restoration of entitlement",
        "Specially Adapted Housing",
        "Waiver of indebtedness",
        "Other",
    ),
    "vha": (
        "Beneficiary Travel",
        "Caregiver | Eligibility",
        "Eligibility for Treatment | Dental",
        "Foreign Medical Program",
        "Prosthetics | Other",
        "Other",
    ),
    "nca": (
        "Burial in National Cemeteries",
        "Burial in Private Cemeteries",
        "Pre-need determinations",
        "Headstone or marker",
        "Other",
    ),
})

# ── payee code：00-29、41-49、50、60、70-78、80-89、99 ─────────────────────

PAYEE_CODES = frozenset(
    [f"{n:02d}" for n in range(0, 30)]
    + [f"{n:02d}" for n in range(41, 50)]
    + ["50", "60"]
    + [f"{n:02d}" for n in range(70, 79)]
    + [f"{n:02d}" for n in range(80, 90)]
    + ["99"]
)


def categories_for_benefit_type(benefit_type) -> tuple[str, ...]:
    """未知（或不可 hash）的 benefit type 返回空 allow-list。"""
    if not isinstance(benefit_type, str):
        return ()
    return CATEGORIES_BY_BENEFIT_TYPE.get(benefit_type, ())
