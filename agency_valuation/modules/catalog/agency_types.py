"""Agency types: default service mix and positioning guidance per type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AgencyType:
    id: str
    name: str
    description: str
    default_services: tuple[str, ...]
    current_vulnerability: str
    key_message: str
    top_priorities: tuple[str, ...]


AGENCY_TYPES: tuple[AgencyType, ...] = (
    AgencyType(
        id="creative",
        name="Creative Agency",
        description="Focuses on design, branding, and content creation",
        default_services=("creative", "content", "strategy"),
        current_vulnerability="High",
        key_message="Your core product is changing fast - embrace AI as a creative partner",
        top_priorities=(
            "Implement AI image generation tools immediately",
            "Train team on prompt engineering",
            "Shift to value-based pricing",
            "Position as AI-enhanced creative strategists",
        ),
    ),
    AgencyType(
        id="media",
        name="Media Agency",
        description="Focuses on media planning and buying",
        default_services=("media", "digital", "data"),
        current_vulnerability="Very High",
        key_message="Manual media buying is ending - pivot to strategy and technology now",
        top_priorities=(
            "Implement programmatic platforms urgently",
            "Retrain buyers as strategists",
            "Shift from commission to performance pricing",
            "Build data and attribution capabilities",
        ),
    ),
    AgencyType(
        id="pr",
        name="PR & Communications Agency",
        description="Focuses on public relations",
        default_services=("pr", "content", "strategy"),
        current_vulnerability="Moderate",
        key_message="AI enhances but doesn't replace human relationships - find the balance",
        top_priorities=(
            "Adopt AI monitoring and writing tools",
            "Maintain focus on strategic counsel",
            "Develop 24/7 AI-assisted capabilities",
            "Create transparent AI usage policies",
        ),
    ),
    AgencyType(
        id="digital",
        name="Digital Full-Service Agency",
        description="Offers comprehensive digital services",
        default_services=("digital", "content", "creative", "tech", "data", "commerce"),
        current_vulnerability="High",
        key_message="Every service line needs AI integration - comprehensive transformation required",
        top_priorities=(
            "Assess AI impact across all services",
            "Implement AI tools systematically",
            "Launch AI consulting services",
            "Create innovation culture",
        ),
    ),
    AgencyType(
        id="specialized",
        name="Industry-Specialist Agency",
        description="Focuses on a specific industry sector",
        default_services=("strategy", "creative", "pr"),
        current_vulnerability="Moderate to High",
        key_message="Leverage domain expertise with AI to maintain specialized advantage",
        top_priorities=(
            "Develop industry-specific AI applications",
            "Position as safe AI innovators for your sector",
            "Build custom AI models for your vertical",
            "Lead AI education in your industry",
        ),
    ),
)

AGENCY_TYPES_BY_ID: dict[str, AgencyType] = {t.id: t for t in AGENCY_TYPES}


def default_services_for(agency_type: str | None) -> tuple[str, ...]:
    """Services pre-selected for an agency type; empty for unknown types."""
    profile = AGENCY_TYPES_BY_ID.get(agency_type or "")
    return profile.default_services if profile else ()
