"""Results service — runs scoring, valuation and recommendations into one record."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog

from agency_valuation.core.config import settings
from agency_valuation.core.errors import fallback_error
from agency_valuation.modules.catalog.agency_types import AGENCY_TYPES_BY_ID, AgencyType
from agency_valuation.modules.catalog.questions import QuestionCatalog
from agency_valuation.modules.recommendations.engine import RecommendationEngine
from agency_valuation.modules.results.schemas import (
    AgencyProfileInsight,
    ResultsRecord,
    Selections,
)
from agency_valuation.modules.scoring.criteria import WEIGHT_PROFILES
from agency_valuation.modules.scoring.engine import ScoringEngine
from agency_valuation.modules.scoring.schemas import ScoreBundle
from agency_valuation.modules.valuation.criteria import FLOOR_BAND
from agency_valuation.modules.valuation.engine import ValuationEngine, classify
from agency_valuation.modules.valuation.schemas import FinancialImpact, ValuationResult

logger = structlog.get_logger()

FALLBACK_VULNERABILITY_LEVEL = "Assessment Error - Please Retry"
FALLBACK_INSIGHT = "Assessment calculation error - please try again"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Helpers ───────────────────────────────────────────────────────────────────


def _profile_insight(profile: AgencyType) -> AgencyProfileInsight:
    return AgencyProfileInsight(
        id=profile.id,
        name=profile.name,
        description=profile.description,
        default_services=profile.default_services,
        current_vulnerability=profile.current_vulnerability,
        key_message=profile.key_message,
        top_priorities=profile.top_priorities,
    )


def export_results(record: ResultsRecord) -> str:
    """JSON document for a results record; numbers stay numbers."""
    return record.model_dump_json()


def load_results(payload: str | bytes) -> ResultsRecord:
    return ResultsRecord.model_validate_json(payload)


# ── Assembler ─────────────────────────────────────────────────────────────────


class ResultsAssembler:
    """
    Stateless orchestration over the scoring, valuation and recommendation
    engines. ``assemble`` always returns a complete record: any failure is
    logged and replaced by the neutral fallback record.
    """

    def __init__(
        self,
        scoring: ScoringEngine | None = None,
        valuation: ValuationEngine | None = None,
        recommendations: RecommendationEngine | None = None,
        agency_types: Mapping[str, AgencyType] = AGENCY_TYPES_BY_ID,
        clock: Callable[[], datetime] = _utcnow,
        fallback_score: int = settings.FALLBACK_SCORE,
    ):
        self.scoring = scoring or ScoringEngine(WEIGHT_PROFILES[settings.ASSESSMENT_VARIANT])
        self.valuation = valuation or ValuationEngine()
        self.recommendations = recommendations or RecommendationEngine()
        self.agency_types = agency_types
        self.clock = clock
        self.fallback_score = fallback_score

    def assemble(
        self,
        answers: Mapping[str, int],
        catalog: QuestionCatalog,
        selections: Selections | Mapping[str, Any],
    ) -> ResultsRecord:
        generated_at: datetime | None = None
        try:
            generated_at = self.clock()
            return self._assemble(answers, catalog, selections, generated_at)
        except Exception as exc:
            logger.error(
                "results_fallback_used",
                error=str(exc),
                error_type=type(exc).__name__,
                app_env=settings.APP_ENV,
            )
            return self.fallback(exc, generated_at)

    def _assemble(
        self,
        answers: Mapping[str, int],
        catalog: QuestionCatalog,
        selections: Selections | Mapping[str, Any],
        generated_at: datetime,
    ) -> ResultsRecord:
        chosen = Selections.model_validate(selections)
        answers = dict(answers)
        catalog.validate_answers(answers)
        active = catalog.for_services(chosen.selected_services)

        scores = self.scoring.score(
            answers,
            active,
            selected_services=chosen.selected_services,
            allocations=chosen.service_revenue_percent,
            override_key=chosen.agency_type,
        )
        valuation = self.valuation.calculate(scores, chosen.revenue)
        impact = self.valuation.financial_impact(scores.overall, chosen.revenue, valuation.multiple_high)
        level = self.scoring.vulnerability_level(scores.overall)

        recommendations = self.recommendations.generate(
            scores,
            chosen.selected_services,
            chosen.revenue,
            agency_type=chosen.agency_type,
        )

        profile = self.agency_types.get(chosen.agency_type or "")
        return ResultsRecord(
            scores=scores,
            valuation=valuation,
            recommendations=recommendations,
            financial_impact=impact,
            generated_at=generated_at,
            vulnerability_level=level,
            insights=self.scoring.key_insights(scores),
            action_plan=self.scoring.action_plan(level),
            valuation_insights=self.valuation.insights(scores),
            quick_wins=self.recommendations.quick_wins(scores),
            synergies=self.recommendations.synergies(chosen.selected_services),
            warnings=self.recommendations.warnings(scores),
            agency_type=chosen.agency_type,
            agency_profile=_profile_insight(profile) if profile else None,
        )

    def fallback(self, exc: Exception, generated_at: datetime | None = None) -> ResultsRecord:
        """
        Neutral record: every score at the fallback value, floor multiples, no dollars.

        ``generated_at`` is the timestamp already taken for the failed run; the
        wall clock is used when the injected clock itself failed.
        """
        neutral = self.fallback_score
        dimensions = dict.fromkeys(
            list(self.scoring.profile.weights) + list(self.scoring.profile.derived), neutral
        )
        scores = ScoreBundle(
            overall=neutral,
            dimensions=dimensions,
            service_vulnerability=neutral,
            service_adaptability=neutral,
            adjusted_ai=neutral,
        )
        return ResultsRecord(
            scores=scores,
            valuation=ValuationResult(
                multiple_low=FLOOR_BAND.low,
                multiple_high=FLOOR_BAND.high,
                classification=classify(neutral),
                ebit_impact_percent=0.0,
                dollar_valuation_delta=0.0,
            ),
            recommendations=(),
            financial_impact=FinancialImpact(),
            generated_at=generated_at or _utcnow(),
            vulnerability_level=FALLBACK_VULNERABILITY_LEVEL,
            insights=(FALLBACK_INSIGHT,),
            error=fallback_error(exc),
        )
