"""Valuation module schemas — multiples, dollar impact, and acquisition insights."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agency_valuation.models.enums import RiskLevel


# ── Core valuation ───────────────────────────────────────────────────────────


class ValuationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    multiple_low: float = Field(ge=1.0)
    multiple_high: float = Field(ge=1.0)
    classification: str
    ebit_impact_percent: float
    dollar_valuation_delta: float
    potential_uplift: float = 0.0

    @model_validator(mode="after")
    def low_not_above_high(self) -> ValuationResult:
        if self.multiple_low > self.multiple_high:
            raise ValueError("multiple_low must not exceed multiple_high")
        return self


class FinancialImpact(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_ebit: float = 0.0
    ebit_impact: float = 0.0          # EBIT gained by closing the score gap
    valuation_impact: float = 0.0     # ebit_impact at the improved (high) multiple


# ── Insights ─────────────────────────────────────────────────────────────────


class DriverImpacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    operational: float
    financial: float
    ai: float


class KeyRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    impact: float


class ServiceRiskRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_id: str
    name: str
    score: int
    risk_level: RiskLevel
    risk_percentage: int
    valuation_impact: float
    description: str


class RoadmapAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    note: str
    critical: bool = False


class ValuationRoadmap(BaseModel):
    model_config = ConfigDict(frozen=True)

    immediate: tuple[RoadmapAction, ...] = ()
    short_term: tuple[RoadmapAction, ...] = ()
    strategic: tuple[RoadmapAction, ...] = ()


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    complete: bool


class AcquisitionReadiness(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage: int
    status: str
    description: str
    checklist: tuple[ChecklistItem, ...] = ()
    completed_count: int = 0


class ValuationInsights(BaseModel):
    model_config = ConfigDict(frozen=True)

    driver_impacts: DriverImpacts
    key_risk: KeyRisk
    service_analysis: tuple[ServiceRiskRow, ...] = ()
    roadmap: ValuationRoadmap
    readiness: AcquisitionReadiness


# ── Financial calculator ─────────────────────────────────────────────────────


class FinancialCalculation(BaseModel):
    model_config = ConfigDict(frozen=True)

    revenue: float
    ebitda_margin_percent: float
    ebitda: float
    current_multiple: float
    improved_multiple: float
    current_valuation: float
    improved_valuation: float
    valuation_increase: float
    percentage_increase: int
