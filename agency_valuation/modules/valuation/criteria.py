"""Valuation heuristics: multiple bands, driver impacts, roadmap and readiness tables."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MultipleBand:
    """Both financial and operational scores must reach ``threshold``."""

    threshold: int
    low: float
    high: float


# ── EBITDA multiple bands ────────────────────────────────────────────────────

MULTIPLE_BANDS: tuple[MultipleBand, ...] = (
    MultipleBand(80, 6.0, 8.0),
    MultipleBand(70, 5.0, 6.5),
    MultipleBand(60, 4.4, 4.9),
    MultipleBand(50, 3.5, 4.0),
    MultipleBand(40, 3.0, 3.5),
    MultipleBand(30, 2.0, 2.5),
    MultipleBand(20, 1.5, 2.0),
)
FLOOR_BAND = MultipleBand(0, 1.0, 1.5)

MULTIPLE_LOW_FLOOR = 1.0
MULTIPLE_HIGH_FLOOR = 1.5

# (overall below, low cap, high cap), applied in order
MULTIPLE_CAPS: tuple[tuple[int, float, float], ...] = (
    (25, 2.0, 2.5),
    (20, 1.0, 1.5),
)

# ── Classification ───────────────────────────────────────────────────────────

CLASSIFICATIONS: tuple[tuple[int, str], ...] = (
    (70, "Premium Acquisition Candidate"),
    (60, "Strong Acquisition Candidate"),
    (50, "Average Acquisition Candidate"),
)
DEFAULT_CLASSIFICATION = "Weak Acquisition Candidate"

# ── Driver impacts (multiple points at >=70 / >=50 / below) ──────────────────

DRIVER_IMPACTS: dict[str, tuple[float, float, float]] = {
    "operational": (0.8, 0.4, 0.0),
    "financial": (1.2, 0.6, 0.0),
    "ai": (2.4, 1.2, 0.5),
}

KEY_RISK_NAME = "Service Concentration"
KEY_RISK_IMPACT = -0.5

# ── Valuation roadmap ────────────────────────────────────────────────────────

STANDARD_IMMEDIATE_ACTIONS: tuple[tuple[str, str], ...] = (
    ("Deploy AI content tools", "Increases efficiency by 30-40%"),
    ("Shift to retainer pricing", "Improves revenue predictability"),
)

STANDARD_SHORT_TERM_ACTIONS: tuple[tuple[str, str], ...] = (
    ("Reduce client concentration <20%", "Critical for reducing valuation risk"),
    ("Document all processes", "Addresses key person risk"),
    ("Launch AI service offerings", "Creates new revenue streams"),
)

STRATEGIC_ACTIONS: tuple[tuple[str, str], ...] = (
    ("Build proprietary AI tools", "Creates unique IP value"),
    ("Achieve 60%+ recurring revenue", "Significantly increases valuation multiple"),
    ("Complete service transformation", "Positions for premium acquisition"),
)

# ── Acquisition readiness ────────────────────────────────────────────────────

READINESS_STATUSES: tuple[tuple[int, str, str], ...] = (
    (
        80,
        "Premium Ready",
        "Your agency is positioned for a premium acquisition with few improvements needed.",
    ),
    (
        65,
        "Acquisition Ready",
        "Your agency is well-positioned for acquisition but has some areas to improve for maximum value.",
    ),
    (
        50,
        "Getting Ready",
        "Your agency has made good progress but still has several key areas to address.",
    ),
)
EARLY_STAGE = (
    "Early Stage",
    "Your agency needs significant improvements before it will be attractive to buyers.",
)


@dataclass(frozen=True)
class ChecklistCriterion:
    """Complete when every listed dimension reaches its threshold."""

    title: str
    description: str
    thresholds: tuple[tuple[str, int], ...]


ACQUISITION_CHECKLIST: tuple[ChecklistCriterion, ...] = (
    ChecklistCriterion(
        "Financial Documentation",
        "Clean financial records with 3+ years of history",
        (("financial", 70),),
    ),
    ChecklistCriterion(
        "Client Contracts",
        "Multi-year agreements with clear terms",
        (("financial", 65),),
    ),
    ChecklistCriterion(
        "Service Line Profitability",
        "Documented margins for each service offering",
        (("operational", 60),),
    ),
    ChecklistCriterion(
        "Team Structure",
        "Organizational chart with clear roles",
        (("operational", 75),),
    ),
    ChecklistCriterion(
        "Key Person Risk Mitigation",
        "Documented processes reducing reliance on founders",
        (("operational", 70),),
    ),
    ChecklistCriterion(
        "AI Implementation Plan",
        "Strategic roadmap for AI integration",
        (("ai", 65),),
    ),
    ChecklistCriterion(
        "Intellectual Property",
        "Proprietary methodologies or technologies",
        (("ai", 70),),
    ),
    ChecklistCriterion(
        "Growth Strategy",
        "Documented plan for scaling revenue",
        (("operational", 65), ("financial", 60)),
    ),
)
