"""
ValuationEngine — maps scores onto an EBITDA multiple range and dollar impact.

These are heuristic business rules, not a financial model. Every step is
deterministic; multiples are rounded to one decimal and dollar figures to
cents.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import structlog

from agency_valuation.core.config import settings
from agency_valuation.models.enums import RiskLevel
from agency_valuation.modules.catalog.services import SERVICES_BY_ID, Service
from agency_valuation.modules.scoring.criteria import RISK_ORDER, VULNERABILITY_BANDS
from agency_valuation.modules.scoring.engine import round_half_up
from agency_valuation.modules.scoring.schemas import ScoreBundle
from agency_valuation.modules.valuation.criteria import (
    ACQUISITION_CHECKLIST,
    CLASSIFICATIONS,
    DEFAULT_CLASSIFICATION,
    DRIVER_IMPACTS,
    EARLY_STAGE,
    FLOOR_BAND,
    KEY_RISK_IMPACT,
    KEY_RISK_NAME,
    MULTIPLE_BANDS,
    MULTIPLE_CAPS,
    MULTIPLE_HIGH_FLOOR,
    MULTIPLE_LOW_FLOOR,
    READINESS_STATUSES,
    STANDARD_IMMEDIATE_ACTIONS,
    STANDARD_SHORT_TERM_ACTIONS,
    STRATEGIC_ACTIONS,
)
from agency_valuation.modules.valuation.schemas import (
    AcquisitionReadiness,
    ChecklistItem,
    DriverImpacts,
    FinancialCalculation,
    FinancialImpact,
    KeyRisk,
    RoadmapAction,
    ServiceRiskRow,
    ValuationInsights,
    ValuationResult,
    ValuationRoadmap,
)

logger = structlog.get_logger()


def coerce_revenue(value: Any) -> float:
    """Revenue as a float; non-numeric, non-finite or non-positive values become 0."""
    if isinstance(value, bool):
        return 0.0
    try:
        revenue = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(revenue) or revenue <= 0:
        return 0.0
    return revenue


def classify(overall: float) -> str:
    for threshold, label in CLASSIFICATIONS:
        if overall >= threshold:
            return label
    return DEFAULT_CLASSIFICATION


class ValuationEngine:
    """Pure-Python deterministic valuation heuristics."""

    def __init__(
        self,
        ebit_margin: float = settings.ASSUMED_EBIT_MARGIN,
        max_improvement_percent: float = settings.MAX_EBIT_IMPROVEMENT_PERCENT,
        potential_uplift: float = settings.POTENTIAL_UPLIFT,
        services: Mapping[str, Service] = SERVICES_BY_ID,
    ):
        self.ebit_margin = ebit_margin
        self.max_improvement_percent = max_improvement_percent
        self.potential_uplift = potential_uplift
        self.services = services

    # ── Multiples ────────────────────────────────────────────────────────────

    @staticmethod
    def base_multiples(financial: float, operational: float) -> tuple[float, float]:
        for band in MULTIPLE_BANDS:
            if financial >= band.threshold and operational >= band.threshold:
                return band.low, band.high
        return FLOOR_BAND.low, FLOOR_BAND.high

    def multiple_range(
        self,
        financial: float,
        operational: float,
        overall: float,
    ) -> tuple[float, float]:
        """
        Base band scaled by weighted influence and an overall-score step.

        influence = (financial * 0.6 + operational * 0.4) / 100
        step      = 1.0 below 30, 1.2 below 50, else 1.5
        Poor performers are capped, then both bounds are rounded to one
        decimal and floored at 1.0 / 1.5.
        """
        low, high = self.base_multiples(financial, operational)
        influence = (financial * 0.6 + operational * 0.4) / 100
        step = 1.0 if overall < 30 else (1.2 if overall < 50 else 1.5)
        low *= influence * step
        high *= influence * step

        for below, low_cap, high_cap in MULTIPLE_CAPS:
            if overall < below:
                low = min(low, low_cap)
                high = min(high, high_cap)

        low = max(MULTIPLE_LOW_FLOOR, round_half_up(low, 1))
        high = max(MULTIPLE_HIGH_FLOOR, round_half_up(high, 1))
        if low > high:
            low = high
        return low, high

    # ── EBIT impact ──────────────────────────────────────────────────────────

    def ebit_impact_percent(self, overall: float) -> float:
        potential = max(0.0, 100 - overall)
        return min(self.max_improvement_percent, potential * self.max_improvement_percent / 100)

    def financial_impact(self, overall: float, revenue: Any, multiple_high: float) -> FinancialImpact:
        revenue = coerce_revenue(revenue)
        if revenue == 0:
            return FinancialImpact()
        current_ebit = revenue * self.ebit_margin
        ebit_delta = current_ebit * self.ebit_impact_percent(overall) / 100
        return FinancialImpact(
            current_ebit=round(current_ebit, 2),
            ebit_impact=round(ebit_delta, 2),
            valuation_impact=round(ebit_delta * multiple_high, 2),
        )

    # ── Result ───────────────────────────────────────────────────────────────

    def calculate(self, scores: ScoreBundle, revenue: Any) -> ValuationResult:
        financial = scores.dimension("financial")
        operational = scores.dimension("operational")
        low, high = self.multiple_range(financial, operational, scores.overall)
        impact = self.financial_impact(scores.overall, revenue, high)

        result = ValuationResult(
            multiple_low=low,
            multiple_high=high,
            classification=classify(scores.overall),
            ebit_impact_percent=round(self.ebit_impact_percent(scores.overall), 2),
            dollar_valuation_delta=impact.valuation_impact,
            potential_uplift=self.potential_uplift,
        )
        logger.info(
            "valuation_calculated",
            overall=scores.overall,
            multiple_low=low,
            multiple_high=high,
            classification=result.classification,
            valuation_delta=result.dollar_valuation_delta,
        )
        return result

    # ── Insights ─────────────────────────────────────────────────────────────

    @staticmethod
    def driver_impacts(scores: ScoreBundle) -> DriverImpacts:
        impacts: dict[str, float] = {}
        for dimension, (strong, fair, weak) in DRIVER_IMPACTS.items():
            value = scores.dimension(dimension)
            impacts[dimension] = strong if value >= 70 else (fair if value >= 50 else weak)
        return DriverImpacts(**impacts)

    def service_name(self, service_id: str) -> str:
        service = self.services.get(service_id)
        return service.name if service else service_id.replace("_", " ").title()

    def service_analysis(self, scores: ScoreBundle) -> list[ServiceRiskRow]:
        """One row per scored service, highest risk first (ties keep selection order)."""
        descriptions = {band.risk_level: band.description for band in VULNERABILITY_BANDS}
        rows = [
            ServiceRiskRow(
                service_id=service_id,
                name=self.service_name(service_id),
                score=service.score,
                risk_level=service.risk_level,
                risk_percentage=service.vulnerability,
                valuation_impact=service.valuation_impact,
                description=descriptions.get(service.risk_level, ""),
            )
            for service_id, service in scores.services.items()
        ]
        rows.sort(key=lambda row: RISK_ORDER[row.risk_level], reverse=True)
        return rows

    @staticmethod
    def roadmap(analysis: list[ServiceRiskRow]) -> ValuationRoadmap:
        immediate: list[RoadmapAction] = []
        short_term: list[RoadmapAction] = []
        for row in analysis:
            if row.risk_level is RiskLevel.CRITICAL:
                immediate.append(RoadmapAction(
                    title=f"Implement {row.name} transformation",
                    note="Critical for maintaining valuation",
                    critical=True,
                ))
            elif row.risk_level is RiskLevel.HIGH:
                short_term.append(RoadmapAction(
                    title=f"Enhance {row.name} with AI tools",
                    note="Important for competitive positioning",
                ))

        if len(immediate) < 3:
            immediate.extend(RoadmapAction(title=t, note=n) for t, n in STANDARD_IMMEDIATE_ACTIONS)
        if len(short_term) < 3:
            short_term.extend(RoadmapAction(title=t, note=n) for t, n in STANDARD_SHORT_TERM_ACTIONS)
        strategic = [RoadmapAction(title=t, note=n) for t, n in STRATEGIC_ACTIONS]
        return ValuationRoadmap(immediate=immediate, short_term=short_term, strategic=strategic)

    @staticmethod
    def acquisition_readiness(scores: ScoreBundle) -> AcquisitionReadiness:
        percentage = scores.overall
        status, description = EARLY_STAGE
        for threshold, label, text in READINESS_STATUSES:
            if percentage >= threshold:
                status, description = label, text
                break

        checklist = [
            ChecklistItem(
                title=criterion.title,
                description=criterion.description,
                complete=all(scores.dimension(d) >= t for d, t in criterion.thresholds),
            )
            for criterion in ACQUISITION_CHECKLIST
        ]
        return AcquisitionReadiness(
            percentage=percentage,
            status=status,
            description=description,
            checklist=checklist,
            completed_count=sum(1 for item in checklist if item.complete),
        )

    def insights(self, scores: ScoreBundle) -> ValuationInsights:
        analysis = self.service_analysis(scores)
        return ValuationInsights(
            driver_impacts=self.driver_impacts(scores),
            key_risk=KeyRisk(name=KEY_RISK_NAME, impact=KEY_RISK_IMPACT),
            service_analysis=analysis,
            roadmap=self.roadmap(analysis),
            readiness=self.acquisition_readiness(scores),
        )

    # ── Calculator ───────────────────────────────────────────────────────────

    def financial_calculator(
        self,
        valuation: ValuationResult,
        revenue: Any,
        ebitda_margin_percent: float = settings.DEFAULT_EBITDA_MARGIN_PERCENT,
        current_multiple: float | None = None,
    ) -> FinancialCalculation:
        """
        Current vs improved enterprise value.

        The improved multiple is the larger of the high multiple and the
        current multiple plus the potential uplift.
        """
        revenue = coerce_revenue(revenue)
        if current_multiple is None:
            current_multiple = valuation.multiple_low
        ebitda = revenue * ebitda_margin_percent / 100
        improved_multiple = max(valuation.multiple_high, current_multiple + valuation.potential_uplift)
        current_value = ebitda * current_multiple
        improved_value = ebitda * improved_multiple
        increase = improved_value - current_value
        percentage = int(round_half_up(increase / current_value * 100)) if current_value > 0 else 0

        return FinancialCalculation(
            revenue=round(revenue, 2),
            ebitda_margin_percent=ebitda_margin_percent,
            ebitda=round(ebitda, 2),
            current_multiple=current_multiple,
            improved_multiple=round(improved_multiple, 2),
            current_valuation=round(current_value, 2),
            improved_valuation=round(improved_value, 2),
            valuation_increase=round(increase, 2),
            percentage_increase=percentage,
        )
