"""Scoring criteria: dimension weight profiles, overrides, and vulnerability bands."""

from dataclasses import dataclass

from agency_valuation.models.enums import RiskLevel

# ── Weight profiles ──────────────────────────────────────────────────────────

AGENCY_WEIGHTS: dict[str, float] = {
    "operational": 0.2,
    "financial": 0.3,
    "ai": 0.4,
    "strategic": 0.1,
}

INHOUSE_WEIGHTS: dict[str, float] = {
    "people_skills": 0.35,
    "process_infrastructure": 0.35,
    "strategy_leadership": 0.30,
}

# Per-dimension replacements; dimensions not listed keep the default weight.
AGENCY_TYPE_WEIGHT_OVERRIDES: dict[str, dict[str, float]] = {
    "creative": {"ai": 0.35, "strategic": 0.15},
    "media": {"ai": 0.45, "operational": 0.15},
    "pr": {"ai": 0.3, "strategic": 0.2},
    "specialized": {"ai": 0.3, "strategic": 0.2},
}

INDUSTRY_WEIGHT_OVERRIDES: dict[str, dict[str, float]] = {
    "b2b_saas": {"people_skills": 0.30, "process_infrastructure": 0.40, "strategy_leadership": 0.30},
    "healthcare": {"people_skills": 0.30, "process_infrastructure": 0.40, "strategy_leadership": 0.30},
    "financial_services": {"people_skills": 0.30, "process_infrastructure": 0.40, "strategy_leadership": 0.30},
    "manufacturing": {"people_skills": 0.40, "process_infrastructure": 0.30, "strategy_leadership": 0.30},
    "ecommerce_retail": {"people_skills": 0.35, "process_infrastructure": 0.35, "strategy_leadership": 0.30},
}


@dataclass(frozen=True)
class WeightProfile:
    """Default weights for an assessment variant plus its keyed overrides."""

    id: str
    weights: dict[str, float]
    overrides: dict[str, dict[str, float]]
    # A dimension with no questions at all is synthesised from the others.
    derived: dict[str, dict[str, float]]


AGENCY_PROFILE = WeightProfile(
    id="agency",
    weights=AGENCY_WEIGHTS,
    overrides=AGENCY_TYPE_WEIGHT_OVERRIDES,
    derived={"strategic": {"operational": 0.3, "financial": 0.3, "ai": 0.4}},
)

INHOUSE_PROFILE = WeightProfile(
    id="inhouse",
    weights=INHOUSE_WEIGHTS,
    overrides=INDUSTRY_WEIGHT_OVERRIDES,
    derived={},
)

WEIGHT_PROFILES: dict[str, WeightProfile] = {
    AGENCY_PROFILE.id: AGENCY_PROFILE,
    INHOUSE_PROFILE.id: INHOUSE_PROFILE,
}


# ── Vulnerability bands ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class VulnerabilityBand:
    """Readiness score floor mapped to a fixed risk figure and multiple impact."""

    min_score: int
    risk_level: RiskLevel
    vulnerability: int
    valuation_impact: float
    description: str


# Ordered from the highest floor down; the last band must start at 0.
VULNERABILITY_BANDS: tuple[VulnerabilityBand, ...] = (
    VulnerabilityBand(80, RiskLevel.LOW, 30, 0.5, "AI-resistant service"),
    VulnerabilityBand(60, RiskLevel.MEDIUM, 80, -0.2, "Needs AI enhancement"),
    VulnerabilityBand(40, RiskLevel.HIGH, 90, -0.8, "AI replacing basic functions"),
    VulnerabilityBand(0, RiskLevel.CRITICAL, 100, -1.0, "Manual process is obsolete"),
)

RISK_ORDER: dict[RiskLevel, int] = {
    RiskLevel.CRITICAL: 4,
    RiskLevel.HIGH: 3,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 1,
}


# ── Vulnerability levels & action plans ──────────────────────────────────────

HIGH_VULNERABILITY = "High Vulnerability"
MODERATE_VULNERABILITY = "Moderate Vulnerability"
LOW_VULNERABILITY = "Low Vulnerability"

ACTION_PLANS: dict[str, tuple[tuple[str, str, str], ...]] = {
    HIGH_VULNERABILITY: (
        (
            "Conduct AI Vulnerability Assessment",
            "Perform detailed analysis of service offerings to identify high-risk areas for AI disruption.",
            "Critical strategic planning foundation",
        ),
        (
            "Transition to Retainer Model",
            "Develop and implement retainer offerings to improve revenue predictability.",
            "Potential valuation increase: 1.0-2.0x EBITDA",
        ),
        (
            "Implement Basic AI Tools",
            "Begin using fundamental AI tools in day-to-day operations with structured training.",
            "Efficiency improvement and competitive positioning",
        ),
    ),
    MODERATE_VULNERABILITY: (
        (
            "Standardize AI Workflows",
            "Create standardized processes for AI implementation across all client work and internal operations.",
            "Potential efficiency improvement: 20-30%",
        ),
        (
            "Reduce Client Concentration",
            "Diversify your client base to ensure no single client represents more than 20% of revenue.",
            "Risk reduction and valuation stability",
        ),
        (
            "Develop Knowledge Management System",
            "Implement a comprehensive documentation system to reduce key person dependencies.",
            "Enhanced operational resilience and smoother due diligence",
        ),
    ),
    LOW_VULNERABILITY: (
        (
            "Develop AI-Enhanced Service Portfolio",
            "Package and formalize your AI-enhanced services with clear value propositions and case studies.",
            "Potential valuation increase: 0.5-1.0x EBITDA",
        ),
        (
            "Implement Value-Based Pricing",
            "Transition remaining time-based services to value-based pricing models to capitalize on AI efficiencies.",
            "Potential margin improvement: 10-15%",
        ),
        (
            "Document AI ROI Metrics",
            "Create formal documentation of efficiency gains and value creation from AI implementation.",
            "Enhanced acquirer due diligence positioning",
        ),
    ),
}
