"""Agency service lines and their bracketed recommendation tables."""

from __future__ import annotations

from dataclasses import dataclass

from agency_valuation.models.enums import Complexity, RiskLevel, ScoreBracket, Timeframe


@dataclass(frozen=True)
class ServiceRecommendation:
    """A single row of a service's recommendation table."""

    title: str
    description: str
    complexity: Complexity
    expected_roi: str
    agency_type_variations: tuple[tuple[str, str], ...] = ()

    def variation_for(self, agency_type: str | None) -> str | None:
        if agency_type is None:
            return None
        return dict(self.agency_type_variations).get(agency_type)


@dataclass(frozen=True)
class BracketPlan:
    """Recommendations for one score bracket, grouped by timeframe."""

    immediate: tuple[ServiceRecommendation, ...] = ()
    short_term: tuple[ServiceRecommendation, ...] = ()
    strategic: tuple[ServiceRecommendation, ...] = ()

    def for_timeframe(self, timeframe: Timeframe) -> tuple[ServiceRecommendation, ...]:
        if timeframe is Timeframe.IMMEDIATE:
            return self.immediate
        if timeframe is Timeframe.SHORT_TERM:
            return self.short_term
        return self.strategic


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    risk_level: RiskLevel
    risk_label: str  # descriptive label shown in reports, e.g. "Moderate-High"
    disruption_timeline: str
    low: BracketPlan
    mid: BracketPlan
    high: BracketPlan

    def plan_for(self, bracket: ScoreBracket) -> BracketPlan:
        if bracket is ScoreBracket.HIGH:
            return self.high
        if bracket is ScoreBracket.MID:
            return self.mid
        return self.low


def _rec(
    title: str,
    description: str,
    complexity: str,
    expected_roi: str,
    **variations: str,
) -> ServiceRecommendation:
    return ServiceRecommendation(
        title=title,
        description=description,
        complexity=Complexity(complexity),
        expected_roi=expected_roi,
        agency_type_variations=tuple(variations.items()),
    )


# ── Creative Services ────────────────────────────────────────────────────────

CREATIVE = Service(
    id="creative",
    name="Creative Services",
    risk_level=RiskLevel.HIGH,
    risk_label="High",
    disruption_timeline="2025-2028",
    low=BracketPlan(
        immediate=(
            _rec(
                "Start with Free AI Image Generation",
                "Begin experimenting with Midjourney, DALL-E, or Bing Image Creator for mood boards and concepts",
                "low",
                "20-30% reduction in mood board creation time",
                creative="Focus on maintaining brand consistency while exploring",
                digital="Test for social media content creation first",
                specialized="Start with industry-specific visual styles",
            ),
            _rec(
                "Create AI Usage Guidelines",
                "Develop clear policies on when and how to use AI in creative work",
                "low",
                "Reduced risk and clearer client communication",
            ),
            _rec(
                "Weekly AI Tool Demos",
                "Run 30-minute weekly sessions where team members share AI discoveries",
                "low",
                "Accelerated team adoption and knowledge sharing",
            ),
        ),
        short_term=(
            _rec(
                "Implement Adobe Firefly Integration",
                "Leverage AI within existing Creative Cloud workflows",
                "medium",
                "40-50% faster asset variations and iterations",
            ),
            _rec(
                "Build Prompt Libraries",
                "Create and organize effective prompts for common creative tasks",
                "medium",
                "Consistent quality and 30% faster AI asset generation",
            ),
            _rec(
                "Pilot Value-Based Pricing",
                "Test outcome-based pricing with 2-3 trusted clients",
                "medium",
                "15-25% margin improvement on pilot projects",
                creative="Focus on campaign performance metrics",
                digital="Tie to engagement and conversion metrics",
            ),
        ),
        strategic=(
            _rec(
                "Reposition from Production to Strategy",
                "Shift focus from creating assets to creative strategy and art direction",
                "high",
                "Protect revenue as production commoditizes",
            ),
            _rec(
                "Develop AI-Enhanced Creative Process",
                "Create a proprietary methodology that combines AI efficiency with human creativity",
                "high",
                "2-3x project capacity with same team size",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Expand to Advanced AI Tools",
                "Move beyond basic tools to professional-grade AI platforms",
                "medium",
                "60-70% reduction in production time",
            ),
            _rec(
                "AI-Human Collaboration Workflows",
                "Formalize processes for AI generation + human refinement",
                "medium",
                "Consistent quality at 3x speed",
            ),
        ),
        short_term=(
            _rec(
                "Custom Model Training",
                "Train LoRAs or fine-tune models on client brand assets",
                "high",
                "Unique capability commanding premium pricing",
            ),
            _rec(
                "Launch AI Creative Services",
                "Package AI-enhanced services as premium offerings",
                "medium",
                "20-30% revenue growth from new services",
            ),
        ),
        strategic=(
            _rec(
                "Build IP Around AI Creative",
                "Develop proprietary methodologies and tools",
                "high",
                "Defensible market position and M&A value",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize Profit Margins",
                "Use AI efficiency gains to improve margins, not just capacity",
                "low",
                "30-40% EBITDA improvement",
            ),
        ),
        short_term=(
            _rec(
                "White-Label AI Solutions",
                "License your AI creative capabilities to other agencies",
                "high",
                "New B2B revenue stream",
            ),
        ),
        strategic=(
            _rec(
                "Acquire AI-Weak Competitors",
                "Consolidate market share by acquiring agencies struggling with AI",
                "high",
                "2-3x revenue growth through consolidation",
            ),
        ),
    ),
)

# ── Content Development ──────────────────────────────────────────────────────

CONTENT = Service(
    id="content",
    name="Content Development",
    risk_level=RiskLevel.HIGH,
    risk_label="Very High",
    disruption_timeline="2024-2026",
    low=BracketPlan(
        immediate=(
            _rec(
                "Emergency AI Adoption",
                "This service line faces immediate existential threat - act now",
                "low",
                "Survival - competitors already 5-10x more efficient",
            ),
            _rec(
                "Implement AI-First Workflow Today",
                "Every piece of content should start with AI draft",
                "low",
                "3-5x content output immediately",
            ),
            _rec(
                "Emergency Pricing Model Shift",
                "Stop charging per word immediately - shift to value pricing",
                "medium",
                "Maintain revenue as efficiency increases",
                content="Package as content programs, not pieces",
                pr="Focus on strategic narrative value",
                digital="Tie to performance metrics",
            ),
        ),
        short_term=(
            _rec(
                "Build AI Content Factory",
                "Systematic process for producing content at scale",
                "medium",
                "50-100 pieces/week with small team",
            ),
            _rec(
                "Develop Content Intelligence Services",
                "Move up-value from creation to strategy",
                "medium",
                "Higher margins on strategic work",
            ),
        ),
        strategic=(
            _rec(
                "Complete Business Model Transformation",
                "Content creation is commoditizing - must reinvent",
                "high",
                "Business survival and growth",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Scale AI Content Operations",
                "Move from testing to full production",
                "medium",
                "5-10x content volume at same cost",
            ),
            _rec(
                "Implement Multi-Stage AI Workflow",
                "Use different AI tools for different stages",
                "medium",
                "Premium quality at scale",
            ),
        ),
        short_term=(
            _rec(
                "Launch AI Content-as-a-Service",
                "Productize your AI content capabilities",
                "medium",
                "Predictable recurring revenue",
            ),
            _rec(
                "Build Vertical Expertise",
                "Specialize in AI content for specific industries",
                "medium",
                "Premium pricing for specialized knowledge",
            ),
        ),
        strategic=(
            _rec(
                "Develop Proprietary AI Tools",
                "Build competitive advantage through custom tools",
                "high",
                "Unique market position",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Maximize Efficiency Gains",
                "Push AI utilization to limits while maintaining quality",
                "low",
                "50%+ margin improvement",
            ),
        ),
        short_term=(
            _rec(
                "License Your AI Content System",
                "Package your expertise for other agencies or enterprises",
                "high",
                "New SaaS revenue stream",
            ),
        ),
        strategic=(
            _rec(
                "Acquire Content Agencies",
                "Consolidate agencies struggling with AI transition",
                "high",
                "3-5x growth through acquisition",
            ),
        ),
    ),
)

# ── Digital Marketing ────────────────────────────────────────────────────────

DIGITAL = Service(
    id="digital",
    name="Digital Marketing",
    risk_level=RiskLevel.HIGH,
    risk_label="High",
    disruption_timeline="2024-2026",
    low=BracketPlan(
        immediate=(
            _rec(
                "Activate Platform AI Features",
                "Start using native AI tools in Google, Meta, etc.",
                "low",
                "20-30% performance improvement",
            ),
            _rec(
                "AI-Powered Reporting",
                "Automate report generation and insights",
                "low",
                "Save 10-15 hours/week on reporting",
            ),
            _rec(
                "Test AI Ad Creative",
                "Use AI for ad copy and image generation",
                "low",
                "2-3x more creative variations tested",
            ),
        ),
        short_term=(
            _rec(
                "Build AI-Driven Campaign Architecture",
                "Restructure campaigns around AI optimization",
                "medium",
                "30-50% performance improvement",
            ),
            _rec(
                "Implement Cross-Channel AI",
                "Use AI to orchestrate across platforms",
                "medium",
                "Unified optimization across channels",
            ),
            _rec(
                "Shift to Strategic Services",
                "Move from execution to strategy as AI handles operations",
                "medium",
                "Higher value services and margins",
            ),
        ),
        strategic=(
            _rec(
                "Develop Platform Independence",
                "Build capabilities beyond platform-dependent tools",
                "high",
                "Sustainable competitive advantage",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Advanced AI Campaign Management",
                "Move beyond basic platform AI to advanced tools",
                "medium",
                "50-70% efficiency improvement",
            ),
        ),
        short_term=(
            _rec(
                "Build Predictive Analytics Capability",
                "Use AI to predict campaign performance",
                "high",
                "Proactive optimization and budget allocation",
            ),
            _rec(
                "Launch AI-as-a-Service",
                "Package your AI expertise for clients",
                "medium",
                "New revenue streams",
            ),
        ),
        strategic=(
            _rec(
                "Create Proprietary AI Platform",
                "Build your own optimization technology",
                "high",
                "Unique market position and IP value",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize for Maximum Margin",
                "Use AI efficiency to improve profitability",
                "low",
                "40-50% margin improvement",
            ),
        ),
        short_term=(
            _rec(
                "White-Label Your AI Platform",
                "License your tools to other agencies",
                "high",
                "Scalable SaaS revenue",
            ),
        ),
        strategic=(
            _rec(
                "Strategic Acquisitions",
                "Acquire agencies or AI technology",
                "high",
                "Market consolidation opportunity",
            ),
        ),
    ),
)

# ── Media Services ───────────────────────────────────────────────────────────

MEDIA = Service(
    id="media",
    name="Media Services",
    risk_level=RiskLevel.CRITICAL,
    risk_label="Critical",
    disruption_timeline="Already happening",
    low=BracketPlan(
        immediate=(
            _rec(
                "EMERGENCY: Implement Programmatic Now",
                "Manual media buying is already obsolete - immediate action required",
                "high",
                "Survival - manual buying is ending",
            ),
            _rec(
                "Partner or Perish",
                "If you can't build programmatic capability fast, partner immediately",
                "medium",
                "Maintain client relationships",
            ),
            _rec(
                "Radical Pricing Model Change",
                "Commission model is dead - shift immediately",
                "medium",
                "Protect revenue as margins compress",
                media="Focus on strategic value, not buying",
                digital="Bundle with other services",
            ),
        ),
        short_term=(
            _rec(
                "Pivot to Strategy and Analytics",
                "Reposition from buyer to strategist",
                "high",
                "New value proposition as buying commoditizes",
            ),
            _rec(
                "Build Data and Attribution Expertise",
                "Become the intelligence layer above AI buying",
                "high",
                "Premium fees for strategic insights",
            ),
        ),
        strategic=(
            _rec(
                "Complete Business Model Reinvention",
                "Media buying as we know it is ending",
                "high",
                "Business survival",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Maximize Programmatic Efficiency",
                "Push programmatic percentage to 80%+",
                "medium",
                "30-40% efficiency gain",
            ),
            _rec(
                "Advanced Attribution Modeling",
                "Prove value beyond last-click",
                "medium",
                "Justify higher fees with proven ROI",
            ),
        ),
        short_term=(
            _rec(
                "Build Proprietary Technology",
                "Create unique capabilities beyond platforms",
                "high",
                "Competitive differentiation",
            ),
            _rec(
                "Develop Consultative Services",
                "High-value strategy beyond execution",
                "medium",
                "Higher margins on strategic work",
            ),
        ),
        strategic=(
            _rec(
                "Acquire or Build Tech Platform",
                "Own the technology layer",
                "high",
                "Platform economics and valuation",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize Platform Economics",
                "Maximize margin on automated operations",
                "low",
                "50%+ EBITDA margins possible",
            ),
        ),
        short_term=(
            _rec(
                "License Your Technology",
                "Monetize your platform capabilities",
                "high",
                "SaaS multiples on valuation",
            ),
        ),
        strategic=(
            _rec(
                "Roll-Up Strategy",
                "Acquire struggling media agencies",
                "high",
                "3-5x growth through consolidation",
            ),
        ),
    ),
)

# ── PR & Communications ──────────────────────────────────────────────────────

PR = Service(
    id="pr",
    name="PR & Communications",
    risk_level=RiskLevel.MEDIUM,
    risk_label="Moderate",
    disruption_timeline="2026-2028",
    low=BracketPlan(
        immediate=(
            _rec(
                "Implement AI Media Monitoring",
                "Upgrade from manual Google alerts immediately",
                "low",
                "2-3x faster issue identification",
            ),
            _rec(
                "AI-Assisted Writing",
                "Use AI for first drafts of releases and pitches",
                "low",
                "50% reduction in writing time",
            ),
            _rec(
                "Automate Media List Building",
                "Stop manual journalist research",
                "low",
                "10x faster media list creation",
            ),
        ),
        short_term=(
            _rec(
                "Build 24/7 Monitoring Capability",
                "AI alerts for crisis prevention",
                "medium",
                "Prevent one crisis = massive value",
            ),
            _rec(
                "Develop Data-Driven PR",
                "Move beyond impressions to business impact",
                "medium",
                "Justify higher fees with proven ROI",
            ),
            _rec(
                "AI-Enhanced Crisis Simulation",
                "Use AI to predict and prepare for crises",
                "medium",
                "Premium crisis prevention services",
                pr="Core differentiator service",
                digital="Add to reputation management",
            ),
        ),
        strategic=(
            _rec(
                "Position as AI-Enhanced Relationship Experts",
                "Emphasize human+AI advantage",
                "medium",
                "Defend against pure AI competitors",
            ),
            _rec(
                "Develop Predictive PR Services",
                "Anticipate issues before they happen",
                "high",
                "Command premium fees",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Advanced Sentiment Analysis",
                "Real-time emotional intelligence at scale",
                "medium",
                "Nuanced insights commanding higher fees",
            ),
        ),
        short_term=(
            _rec(
                "Launch Predictive Analytics Services",
                "Forecast PR outcomes and risks",
                "high",
                "New high-margin service line",
            ),
            _rec(
                "Build AI PR Command Center",
                "Impressive client-facing capability",
                "medium",
                "Win larger clients and retainers",
            ),
        ),
        strategic=(
            _rec(
                "Develop Industry-Specific AI Models",
                "Deep expertise + AI for your verticals",
                "high",
                "Premium positioning in specialty",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize Human-AI Balance",
                "Perfect the augmentation model",
                "low",
                "Best of both worlds positioning",
            ),
        ),
        short_term=(
            _rec(
                "License PR Tech Stack",
                "Package your tools for others",
                "high",
                "SaaS revenue stream",
            ),
        ),
        strategic=(
            _rec(
                "Acquire Traditional PR Firms",
                "Consolidate as others struggle with AI",
                "high",
                "3x growth opportunity",
            ),
        ),
    ),
)

# ── Strategy & Consulting ────────────────────────────────────────────────────

STRATEGY = Service(
    id="strategy",
    name="Strategy & Consulting",
    risk_level=RiskLevel.LOW,
    risk_label="Low-Moderate",
    disruption_timeline="2027-2030",
    low=BracketPlan(
        immediate=(
            _rec(
                "AI-Powered Research",
                "Dramatically accelerate insight gathering",
                "low",
                "10x faster research phase",
            ),
            _rec(
                "Automated Data Analysis",
                "Let AI find patterns in complex data",
                "low",
                "Find insights humans miss",
            ),
            _rec(
                "AI Workshop Facilitation",
                "Use AI to enhance strategy sessions",
                "low",
                "More productive client workshops",
            ),
        ),
        short_term=(
            _rec(
                "Build AI Strategy Expertise",
                "Become the go-to for AI transformation",
                "medium",
                "Premium fees for hot topic",
                strategy="Natural service extension",
                specialized="Industry-specific AI strategy",
            ),
            _rec(
                "Develop Simulation Capabilities",
                "Use AI to model business scenarios",
                "high",
                "Unique capability for complex strategy",
            ),
        ),
        strategic=(
            _rec(
                "Position as AI-Human Synthesis",
                "Emphasize irreplaceable human judgment",
                "medium",
                "Defend premium positioning",
            ),
            _rec(
                "Build IP Around AI Strategy",
                "Develop proprietary frameworks",
                "high",
                "Defensible market position",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Advanced Predictive Analytics",
                "Forecast business outcomes with AI",
                "medium",
                "Higher confidence in recommendations",
            ),
        ),
        short_term=(
            _rec(
                "Launch AI Strategy Practice",
                "Dedicated team and services",
                "medium",
                "30-50% of new business",
            ),
            _rec(
                "Develop Digital Twins",
                "Model entire businesses in AI",
                "high",
                "Revolutionary strategy testing",
            ),
        ),
        strategic=(
            _rec(
                "Partner with AI Technology Firms",
                "Combine strategy + implementation",
                "medium",
                "End-to-end transformation capability",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize Knowledge Management",
                "AI-powered insight repository",
                "medium",
                "Compound value of all projects",
            ),
        ),
        short_term=(
            _rec(
                "White-Label Strategy AI",
                "License your tools and methods",
                "high",
                "Scalable IP monetization",
            ),
        ),
        strategic=(
            _rec(
                "Acquire Boutique Consultancies",
                "Add specialized expertise",
                "high",
                "Expanded capabilities and clients",
            ),
        ),
    ),
)

# ── Data & Analytics ─────────────────────────────────────────────────────────

DATA = Service(
    id="data",
    name="Data & Analytics",
    risk_level=RiskLevel.MEDIUM,
    risk_label="Moderate-High",
    disruption_timeline="2024-2025",
    low=BracketPlan(
        immediate=(
            _rec(
                "Implement AutoML Immediately",
                "Democratize machine learning across team",
                "medium",
                "5-10x faster model development",
            ),
            _rec(
                "Natural Language Analytics",
                "Let clients talk to their data",
                "low",
                "Dramatic improvement in client self-service",
            ),
            _rec(
                "Automated Data Quality",
                "AI-powered data cleaning and validation",
                "medium",
                "50% reduction in data prep time",
            ),
        ),
        short_term=(
            _rec(
                "Build Real-Time Analytics",
                "Move from batch to streaming",
                "high",
                "Premium service offering",
            ),
            _rec(
                "Develop Predictive Products",
                "Package predictions as products",
                "medium",
                "Recurring revenue streams",
            ),
        ),
        strategic=(
            _rec(
                "Transition to AI-First Analytics",
                "Fundamental business model shift",
                "high",
                "Stay relevant as analytics commoditizes",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Enhance Predictive Accuracy",
                "Push ML models to next level",
                "medium",
                "Justify premium pricing with accuracy",
            ),
        ),
        short_term=(
            _rec(
                "Launch Analytics-as-a-Service",
                "Productize your capabilities",
                "medium",
                "Scalable recurring revenue",
            ),
            _rec(
                "Build Vertical Solutions",
                "Industry-specific analytics products",
                "high",
                "Premium pricing for specialization",
            ),
        ),
        strategic=(
            _rec(
                "Develop Proprietary Algorithms",
                "Create defensible IP",
                "high",
                "Unique market position",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Maximize Automation ROI",
                "Push efficiency to limits",
                "low",
                "60%+ margins achievable",
            ),
        ),
        short_term=(
            _rec(
                "License Analytics Platform",
                "White-label your capabilities",
                "high",
                "Platform valuation multiples",
            ),
        ),
        strategic=(
            _rec(
                "Strategic Acquisitions",
                "Buy complementary capabilities or clients",
                "high",
                "Accelerated growth",
            ),
        ),
    ),
)

# ── Technical Development ────────────────────────────────────────────────────

TECH = Service(
    id="tech",
    name="Technical Development",
    risk_level=RiskLevel.MEDIUM,
    risk_label="Moderate",
    disruption_timeline="2025-2027",
    low=BracketPlan(
        immediate=(
            _rec(
                "Deploy AI Coding Assistants",
                "Every developer needs AI augmentation now",
                "low",
                "30-50% productivity improvement",
            ),
            _rec(
                "Implement AI Code Review",
                "Catch bugs before humans do",
                "low",
                "50% reduction in bugs reaching production",
            ),
            _rec(
                "AI-Powered Testing",
                "Automate test generation and execution",
                "medium",
                "80% reduction in manual testing",
            ),
        ),
        short_term=(
            _rec(
                "Adopt Low-Code for Appropriate Projects",
                "Use AI-powered platforms where they fit",
                "medium",
                "5-10x faster for suitable projects",
                tech="Expand service range",
                digital="Rapid prototyping capability",
            ),
            _rec(
                "Build AI Implementation Services",
                "Help clients integrate AI into their products",
                "medium",
                "High-margin consulting revenue",
            ),
            _rec(
                "Shift to Architecture and Strategy",
                "Move up-stack as coding commoditizes",
                "high",
                "Maintain relevance and margins",
            ),
        ),
        strategic=(
            _rec(
                "Develop AI-First Development Process",
                "Reimagine how software is built",
                "high",
                "3-5x productivity improvement",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Advanced AI Development Stack",
                "Go beyond basic assistants",
                "medium",
                "2x developer velocity",
            ),
        ),
        short_term=(
            _rec(
                "Launch AI Product Development",
                "Build AI-powered products for clients",
                "high",
                "Premium project fees",
            ),
            _rec(
                "Create Development Accelerators",
                "AI-powered templates and frameworks",
                "medium",
                "Win more projects with speed advantage",
            ),
        ),
        strategic=(
            _rec(
                "Build AI Development Platform",
                "Proprietary tools for competitive advantage",
                "high",
                "Unique market position",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Optimize Development Economics",
                "Maximum efficiency from AI",
                "low",
                "70%+ gross margins",
            ),
        ),
        short_term=(
            _rec(
                "License Development Tools",
                "Monetize your AI dev platform",
                "high",
                "SaaS revenue stream",
            ),
        ),
        strategic=(
            _rec(
                "Acquire Development Shops",
                "Consolidate as others struggle",
                "high",
                "Scale advantages",
            ),
        ),
    ),
)

# ── Commerce / eCommerce ─────────────────────────────────────────────────────

COMMERCE = Service(
    id="commerce",
    name="Commerce/eCommerce",
    risk_level=RiskLevel.MEDIUM,
    risk_label="Moderate-High",
    disruption_timeline="2025-2027",
    low=BracketPlan(
        immediate=(
            _rec(
                "Implement AI Personalization",
                "Table stakes for modern commerce",
                "medium",
                "15-30% conversion improvement",
            ),
            _rec(
                "AI-Powered Search",
                "Help customers find products naturally",
                "low",
                "20-40% improvement in search conversions",
            ),
            _rec(
                "Automated Pricing Optimization",
                "Dynamic pricing based on demand",
                "medium",
                "5-15% margin improvement",
            ),
        ),
        short_term=(
            _rec(
                "Build Predictive Commerce",
                "Anticipate customer needs",
                "high",
                "30-50% increase in customer lifetime value",
            ),
            _rec(
                "Implement Conversational Commerce",
                "AI-powered shopping assistants",
                "medium",
                "24/7 sales capability",
            ),
            _rec(
                "Launch AI Commerce Consulting",
                "Help others transform their commerce",
                "medium",
                "New high-margin revenue stream",
            ),
        ),
        strategic=(
            _rec(
                "Develop Commerce Intelligence Platform",
                "Unified AI across entire commerce stack",
                "high",
                "Category-defining position",
            ),
        ),
    ),
    mid=BracketPlan(
        immediate=(
            _rec(
                "Advanced Personalization",
                "1:1 experiences at scale",
                "medium",
                "2-3x conversion rates",
            ),
        ),
        short_term=(
            _rec(
                "Omnichannel AI Orchestration",
                "Unified experience across touchpoints",
                "high",
                "40-60% increase in customer value",
            ),
            _rec(
                "Build Vertical Commerce Solutions",
                "Industry-specific AI commerce",
                "high",
                "Premium positioning",
            ),
        ),
        strategic=(
            _rec(
                "Create Commerce AI Suite",
                "Full-stack AI commerce platform",
                "high",
                "Platform valuation potential",
            ),
        ),
    ),
    high=BracketPlan(
        immediate=(
            _rec(
                "Maximize AI ROI",
                "Extract full value from AI investments",
                "low",
                "Industry-leading metrics",
            ),
        ),
        short_term=(
            _rec(
                "License Commerce Tech",
                "White-label your AI capabilities",
                "high",
                "Scalable SaaS revenue",
            ),
        ),
        strategic=(
            _rec(
                "Commerce Roll-Up",
                "Acquire struggling commerce agencies",
                "high",
                "Market consolidation play",
            ),
        ),
    ),
)

SERVICES: tuple[Service, ...] = (
    CREATIVE,
    CONTENT,
    DIGITAL,
    MEDIA,
    PR,
    STRATEGY,
    DATA,
    TECH,
    COMMERCE,
)

SERVICES_BY_ID: dict[str, Service] = {s.id: s for s in SERVICES}


# ── Multi-service synergies & warnings ───────────────────────────────────────


@dataclass(frozen=True)
class ServiceSynergy:
    services: tuple[str, str]
    title: str
    description: str
    expected_roi: str


@dataclass(frozen=True)
class PortfolioWarning:
    id: str
    condition: str
    severity: str
    message: str


SYNERGIES: tuple[ServiceSynergy, ...] = (
    ServiceSynergy(
        services=("creative", "content"),
        title="Build integrated AI content factory",
        description="Combine visual and written AI for complete content solutions",
        expected_roi="40-50% higher project values",
    ),
    ServiceSynergy(
        services=("digital", "media"),
        title="Unified AI campaign optimization",
        description="Single AI brain optimizing across paid and owned channels",
        expected_roi="30-40% better overall performance",
    ),
    ServiceSynergy(
        services=("strategy", "data"),
        title="AI-powered strategic insights",
        description="Combine strategic thinking with deep data analysis",
        expected_roi="Premium positioning as data-driven strategists",
    ),
    ServiceSynergy(
        services=("tech", "commerce"),
        title="End-to-end AI commerce solutions",
        description="Build and optimize complete commerce ecosystems",
        expected_roi="Full-stack value capture",
    ),
)

HIGH_RISK_WITHOUT_AI = PortfolioWarning(
    id="high_risk_without_ai",
    condition="Multiple high-risk services without AI adoption",
    severity="critical",
    message=(
        "Your service mix faces severe disruption. Prioritize AI adoption in "
        "highest-risk areas immediately."
    ),
)

MIXED_AI_MATURITY = PortfolioWarning(
    id="mixed_ai_maturity",
    condition="Mixing AI-advanced and AI-naive services",
    severity="high",
    message="Inconsistent AI maturity across services will confuse clients and limit growth.",
)
