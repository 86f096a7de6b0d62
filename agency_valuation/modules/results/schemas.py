"""Results schemas — assessment inputs and the immutable results record."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agency_valuation.core.errors import ErrorResponse
from agency_valuation.modules.recommendations.schemas import (
    PortfolioWarningInsight,
    Recommendation,
    ServiceSynergyInsight,
)
from agency_valuation.modules.scoring.schemas import ActionItem, ScoreBundle
from agency_valuation.modules.valuation.engine import coerce_revenue
from agency_valuation.modules.valuation.schemas import (
    FinancialImpact,
    ValuationInsights,
    ValuationResult,
)


# ── Input ────────────────────────────────────────────────────────────────────


class Selections(BaseModel):
    """Business metadata captured alongside the answers."""

    model_config = ConfigDict(frozen=True)

    selected_services: list[str] = Field(default_factory=list)
    service_revenue_percent: dict[str, float] = Field(default_factory=dict)
    revenue: float = 0.0
    agency_type: str | None = None

    @field_validator("revenue", mode="before")
    @classmethod
    def revenue_as_number(cls, v: Any) -> float:
        return coerce_revenue(v)

    @field_validator("selected_services", mode="after")
    @classmethod
    def dedupe_services(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


# ── Output ───────────────────────────────────────────────────────────────────


class AgencyProfileInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    default_services: tuple[str, ...]
    current_vulnerability: str
    key_message: str
    top_priorities: tuple[str, ...]


class ResultsRecord(BaseModel):
    """Root aggregate returned by ``ResultsAssembler.assemble``; safe to serialize as JSON."""

    model_config = ConfigDict(frozen=True)

    scores: ScoreBundle
    valuation: ValuationResult
    recommendations: tuple[Recommendation, ...] = ()
    financial_impact: FinancialImpact
    generated_at: datetime

    vulnerability_level: str
    insights: tuple[str, ...] = ()
    action_plan: tuple[ActionItem, ...] = ()
    valuation_insights: ValuationInsights | None = None
    quick_wins: tuple[Recommendation, ...] = ()
    synergies: tuple[ServiceSynergyInsight, ...] = ()
    warnings: tuple[PortfolioWarningInsight, ...] = ()
    agency_type: str | None = None
    agency_profile: AgencyProfileInsight | None = None

    error: ErrorResponse | None = None
