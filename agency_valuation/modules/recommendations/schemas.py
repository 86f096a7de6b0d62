"""Recommendation schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agency_valuation.models.enums import Complexity, Importance, RecommendationCategory


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    service: str                      # service id, or "all" for agency-wide items
    title: str
    description: str
    impact_label: str
    complexity: Complexity
    timeframe_label: str
    priority_rank: int = Field(ge=1, le=4)
    category: RecommendationCategory
    service_name: str | None = None
    risk_level: str | None = None     # the service's descriptive disruption label
    disruption_timeline: str | None = None
    importance: Importance | None = None
    relevance_score: int | None = None
    note: str | None = None
    details: tuple[str, ...] = ()


class ServiceSynergyInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    services: tuple[str, ...]
    title: str
    description: str
    expected_roi: str


class PortfolioWarningInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    severity: str
    condition: str
    message: str
