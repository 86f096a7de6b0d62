"""Universal, placeholder and fallback recommendation tables plus ranking keywords."""

from __future__ import annotations

from dataclasses import dataclass

from agency_valuation.models.enums import Complexity, Importance, RecommendationCategory, RiskLevel


@dataclass(frozen=True)
class UniversalRecommendation:
    """Agency-wide recommendation, independent of the selected services."""

    category: RecommendationCategory
    title: str
    description: str
    complexity: Complexity
    importance: Importance
    details: tuple[str, ...] = ()


@dataclass(frozen=True)
class TemplateRecommendation:
    """Text with an optional ``{name}`` placeholder for the service display name."""

    title: str
    description: str
    impact: str
    complexity: Complexity
    timeframe: str
    service: str = "all"


IMPORTANCE_ORDER: dict[Importance, int] = {
    Importance.CRITICAL: 3,
    Importance.HIGH: 2,
    Importance.MEDIUM: 1,
    Importance.LOW: 0,
}

# ── Universal ────────────────────────────────────────────────────────────────

UNIVERSAL_RECOMMENDATIONS: tuple[UniversalRecommendation, ...] = (
    UniversalRecommendation(
        category=RecommendationCategory.OPERATIONAL,
        title="Create AI Governance Framework",
        description="Establish clear policies for AI use, quality control, and ethics",
        complexity=Complexity.MEDIUM,
        importance=Importance.CRITICAL,
        details=(
            "AI usage guidelines",
            "Quality assurance processes",
            "Client disclosure policies",
            "Data privacy protocols",
            "Intellectual property rules",
        ),
    ),
    UniversalRecommendation(
        category=RecommendationCategory.OPERATIONAL,
        title="Implement AI Training Program",
        description="Systematic upskilling across all teams",
        complexity=Complexity.MEDIUM,
        importance=Importance.HIGH,
        details=(
            "Phase 1: AI literacy for all staff",
            "Phase 2: Tool-specific training by role",
            "Phase 3: Advanced AI skills development",
            "Phase 4: Continuous learning program",
        ),
    ),
    UniversalRecommendation(
        category=RecommendationCategory.OPERATIONAL,
        title="Establish Innovation Time",
        description="Dedicated time for AI experimentation",
        complexity=Complexity.LOW,
        importance=Importance.MEDIUM,
        details=("20% time for AI exploration, shared learnings, innovation rewards",),
    ),
    UniversalRecommendation(
        category=RecommendationCategory.FINANCIAL,
        title="Redesign Pricing Models",
        description="Move away from time-based billing",
        complexity=Complexity.HIGH,
        importance=Importance.CRITICAL,
        details=(
            "Value-based pricing",
            "Outcome-based fees",
            "Subscription models",
            "Performance bonuses",
            "Hybrid approaches",
        ),
    ),
    UniversalRecommendation(
        category=RecommendationCategory.FINANCIAL,
        title="Measure AI ROI",
        description="Track and optimize AI investments",
        complexity=Complexity.MEDIUM,
        importance=Importance.HIGH,
        details=(
            "Productivity improvements",
            "Quality enhancements",
            "Client satisfaction",
            "Revenue per employee",
            "Margin expansion",
        ),
    ),
    UniversalRecommendation(
        category=RecommendationCategory.FINANCIAL,
        title="Budget for AI Transformation",
        description="Allocate sufficient resources",
        complexity=Complexity.MEDIUM,
        importance=Importance.HIGH,
        details=(
            "5-10% of revenue for AI tools",
            "10-15% of time for training",
            "Innovation budget for experiments",
        ),
    ),
)

SMALL_REVENUE_LIMIT = 1_000_000
LARGE_REVENUE_LIMIT = 10_000_000
SMALL_REVENUE_NOTE = "Consider scaled-down implementation appropriate for your revenue level"
LARGE_REVENUE_NOTE = "With your revenue level, consider a more comprehensive implementation"

# ── Per-service placeholders (used when a service has no table rows) ─────────

SERVICE_PLACEHOLDERS: dict[RiskLevel, TemplateRecommendation] = {
    RiskLevel.CRITICAL: TemplateRecommendation(
        title="Replace manual {name} processes",
        description=(
            "Current {name} processes are at critical risk due to AI disruption. Implement "
            "automated workflows and AI-assisted tools to maintain competitiveness."
        ),
        impact="+0.6x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="60-90 days",
    ),
    RiskLevel.HIGH: TemplateRecommendation(
        title="Enhance {name} with AI integration",
        description=(
            "This service line shows high vulnerability to AI disruption. Integrate AI tools to "
            "improve efficiency while maintaining quality and reducing delivery costs."
        ),
        impact="+0.4x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="30-60 days",
    ),
    RiskLevel.MEDIUM: TemplateRecommendation(
        title="Build an AI-assisted {name} workflow",
        description=(
            "Develop a hybrid human+AI delivery process for {name} that uses AI for research and "
            "first drafts while keeping human oversight for quality."
        ),
        impact="+0.3x EBITDA",
        complexity=Complexity.LOW,
        timeframe="30-45 days",
    ),
    RiskLevel.LOW: TemplateRecommendation(
        title="Productize your {name} expertise",
        description=(
            "Package {name} into standardized offerings with clear deliverables and pricing "
            "tiers to capture the value of an AI-resistant service."
        ),
        impact="+0.3x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="45-60 days",
    ),
}

# ── Fully generic fallbacks ──────────────────────────────────────────────────

GENERIC_FALLBACKS: tuple[TemplateRecommendation, ...] = (
    TemplateRecommendation(
        title="Create service productization framework",
        description=(
            "Transform your custom service offerings into standardized, scalable products with "
            "clear deliverables, timelines, and pricing tiers to improve operational efficiency."
        ),
        impact="+0.3x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="30-60 days",
    ),
    TemplateRecommendation(
        title="Implement value-based pricing model",
        description=(
            "Shift from hourly or project-based billing to value-based pricing for all services "
            "to better capture the true ROI you deliver to clients."
        ),
        impact="+0.5x EBITDA",
        complexity=Complexity.HIGH,
        timeframe="60-90 days",
    ),
    TemplateRecommendation(
        title="Document all processes",
        description="Capture delivery and account processes so the agency runs without its founders.",
        impact="Addresses key person risk",
        complexity=Complexity.LOW,
        timeframe="30-60 days",
    ),
    TemplateRecommendation(
        title="Achieve 60%+ recurring revenue",
        description="Move project clients onto retainers to make revenue predictable for acquirers.",
        impact="Significantly increases valuation multiple",
        complexity=Complexity.HIGH,
        timeframe="6-12 months",
    ),
)

# ── Quick wins (simple path) ─────────────────────────────────────────────────

STANDARD_QUICK_WINS: tuple[TemplateRecommendation, ...] = (
    TemplateRecommendation(
        service="content",
        title="Implement AI content creation workflow",
        description=(
            "Develop a hybrid human+AI content creation process that leverages AI for initial "
            "drafts and research while maintaining human oversight for quality and brand voice."
        ),
        impact="+0.5x EBITDA",
        complexity=Complexity.LOW,
        timeframe="14-30 days",
    ),
    TemplateRecommendation(
        service="digital",
        title="Launch AI-powered SEO service tier",
        description=(
            "Create a premium SEO service tier that uses AI for competitive analysis, keyword "
            "research, and content optimization to deliver faster results."
        ),
        impact="+0.3x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="30-45 days",
    ),
    TemplateRecommendation(
        service="creative",
        title="Develop AI design-assist workflow",
        description=(
            "Implement an AI-assisted design workflow that generates initial concepts and "
            "variations while maintaining your agency's creative direction and quality standards."
        ),
        impact="+0.4x EBITDA",
        complexity=Complexity.MEDIUM,
        timeframe="45-60 days",
    ),
    TemplateRecommendation(
        service="media",
        title="Create predictive marketing analytics service",
        description=(
            "Build a new service offering that uses AI to predict campaign performance and "
            "optimize budget allocation in real-time for clients."
        ),
        impact="+0.7x EBITDA",
        complexity=Complexity.HIGH,
        timeframe="60-90 days",
    ),
)

# ── Priority ranking ─────────────────────────────────────────────────────────

# Checked in order; the first matching group decides the rank, 4 otherwise.
RANK_KEYWORDS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (1, ("financial", "revenue", "pricing", "price", "margin", "margins", "profit", "roi",
         "budget", "ebitda", "commission")),
    (2, ("operational", "process", "processes", "workflow", "workflows", "governance",
         "training", "documentation", "document", "operations", "team")),
    (3, ("technology", "tech", "ai", "tool", "tools", "platform", "automation", "automated",
         "programmatic", "model", "models", "analytics")),
)
DEFAULT_RANK = 4

CATEGORY_RANKS: dict[RecommendationCategory, int] = {
    RecommendationCategory.FINANCIAL: 1,
    RecommendationCategory.OPERATIONAL: 2,
}
