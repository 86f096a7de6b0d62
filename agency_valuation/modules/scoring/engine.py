"""
ScoringEngine — turns raw answers into dimension, overall and per-service scores.

All math is deterministic; intermediate values are floats and every score is
clamped to 0-100 and rounded half-up only when it is finalized.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence

import structlog

from agency_valuation.core.errors import CatalogError
from agency_valuation.modules.catalog.questions import MAX_OPTION_SCORE, Question, QuestionCatalog
from agency_valuation.modules.scoring.criteria import (
    ACTION_PLANS,
    AGENCY_PROFILE,
    HIGH_VULNERABILITY,
    LOW_VULNERABILITY,
    MODERATE_VULNERABILITY,
    VULNERABILITY_BANDS,
    VulnerabilityBand,
    WeightProfile,
)
from agency_valuation.modules.scoring.schemas import ActionItem, ScoreBundle, ServiceScore

logger = structlog.get_logger()

NEUTRAL_SCORE = 50


def round_half_up(value: float, digits: int = 0) -> float:
    """Round .5 away from zero for positive values instead of to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp_score(value: float) -> int:
    return int(round_half_up(max(0.0, min(100.0, value))))


def normalize_allocations(
    allocations: Mapping[str, float],
    services: Sequence[str] | None = None,
) -> dict[str, float]:
    """
    Rescale revenue percentages proportionally so they sum to 100.

    When ``services`` is given the result covers exactly those services
    (missing allocations count as 0). A zero total splits evenly.
    """
    keys = list(services) if services is not None else list(allocations)
    if not keys:
        return {}
    raw = {k: max(0.0, float(allocations.get(k, 0) or 0)) for k in keys}
    total = sum(raw.values())
    if total <= 0:
        return {k: round(100 / len(keys), 2) for k in keys}
    return {k: round(v / total * 100, 2) for k, v in raw.items()}


class ScoringEngine:
    """Pure-Python deterministic scoring; holds only its static weight profile."""

    def __init__(
        self,
        profile: WeightProfile = AGENCY_PROFILE,
        bands: tuple[VulnerabilityBand, ...] = VULNERABILITY_BANDS,
    ):
        if not bands or bands[-1].min_score != 0:
            raise ValueError("Vulnerability bands must end with a band starting at 0")
        self.profile = profile
        self.bands = bands

    # ── Dimensions ───────────────────────────────────────────────────────────

    def dimension_score(
        self,
        dimension: str,
        answers: Mapping[str, int],
        questions: Iterable[Question],
    ) -> int:
        """
        Weighted average of the answered questions, rescaled from 0-5 to 0-100.

        Unanswered questions are left out of both the numerator and the
        denominator. No questions, or nothing answered, scores 0.
        """
        weighted_sum = 0.0
        total_weight = 0.0
        for question in questions:
            if question.dimension != dimension:
                raise ValueError(
                    f"Question '{question.id}' belongs to '{question.dimension}', not '{dimension}'"
                )
            if question.id not in answers:
                continue
            weighted_sum += answers[question.id] * question.weight
            total_weight += question.weight

        if total_weight == 0:
            return 0
        return clamp_score(weighted_sum / total_weight * (100 / MAX_OPTION_SCORE))

    def dimension_scores(
        self,
        answers: Mapping[str, int],
        catalog: QuestionCatalog,
    ) -> dict[str, int]:
        scores: dict[str, int] = {}
        for dimension in catalog.dimension_ids():
            questions = catalog.by_dimension(dimension)
            if not questions and dimension in self.profile.derived:
                continue
            scores[dimension] = self.dimension_score(dimension, answers, questions)

        for dimension, mix in self.profile.derived.items():
            if dimension in scores:
                continue
            scores[dimension] = clamp_score(sum(scores.get(d, 0) * w for d, w in mix.items()))
        return scores

    # ── Overall ──────────────────────────────────────────────────────────────

    def resolve_weights(self, override_key: str | None = None) -> dict[str, float]:
        """Default weights with the override for ``override_key`` replacing named dimensions."""
        weights = dict(self.profile.weights)
        if override_key:
            weights.update(self.profile.overrides.get(override_key, {}))
        if sum(weights.values()) <= 0:
            raise ValueError("Dimension weights must sum to a positive total")
        return weights

    def overall_score(
        self,
        dimension_scores: Mapping[str, float],
        weights: Mapping[str, float],
    ) -> int:
        """Weighted average over the dimensions that are both scored and weighted."""
        total = 0.0
        total_weight = 0.0
        for dimension, weight in weights.items():
            if dimension not in dimension_scores:
                continue
            total += dimension_scores[dimension] * weight
            total_weight += weight
        if total_weight <= 0:
            return 0
        return clamp_score(total / total_weight)

    # ── Services ─────────────────────────────────────────────────────────────

    def vulnerability_band(self, score: float) -> VulnerabilityBand:
        for band in self.bands:
            if score >= band.min_score:
                return band
        return self.bands[-1]

    def service_score(
        self,
        service_id: str,
        answers: Mapping[str, int],
        catalog: QuestionCatalog,
        weights: Mapping[str, float],
    ) -> ServiceScore:
        """
        Score a service line on core questions plus its own questions.

        When the service has answered AI questions of its own, the AI
        dimension becomes (shared + service_specific * 2) / 3.
        """
        specific = catalog.service_questions(service_id)
        pool = catalog.core_questions() + specific

        dimensions: dict[str, float] = {}
        for dimension in catalog.dimension_ids():
            questions = [q for q in pool if q.dimension == dimension]
            if questions:
                dimensions[dimension] = self.dimension_score(dimension, answers, questions)

        specific_ai = [q for q in specific if q.dimension == "ai"]
        if specific_ai and any(q.id in answers for q in specific_ai):
            service_ai = self.dimension_score("ai", answers, specific_ai)
            dimensions["ai"] = (dimensions.get("ai", 0) + service_ai * 2) / 3

        score = self.overall_score(dimensions, weights)
        band = self.vulnerability_band(score)
        adaptability = 100 - (band.vulnerability * 0.7 + (100 - score) * 0.3)

        return ServiceScore(
            service_id=service_id,
            score=score,
            vulnerability=band.vulnerability,
            risk_level=band.risk_level,
            valuation_impact=band.valuation_impact,
            adaptability=clamp_score(adaptability),
            dimensions={d: clamp_score(v) for d, v in dimensions.items()},
        )

    def portfolio_vulnerability(
        self,
        services: Mapping[str, ServiceScore],
        shares: Mapping[str, float],
    ) -> int:
        """Revenue-weighted vulnerability with extra weight on high-risk lines."""
        if not services:
            return NEUTRAL_SCORE
        total = 0.0
        total_weight = 0.0
        high_risk_share = 0.0
        for service_id, service in services.items():
            share = shares.get(service_id, 0.0)
            emphasis = 1.2 if service.vulnerability > 70 else 1.0
            total += service.vulnerability * share * emphasis
            total_weight += share * emphasis
            if service.vulnerability > 70 and share > 0.1:
                high_risk_share += share

        value = total / total_weight if total_weight > 0 else NEUTRAL_SCORE
        if high_risk_share > 0.4:
            # concentration penalty
            value += (high_risk_share - 0.4) * 20
        return clamp_score(value)

    def portfolio_adaptability(
        self,
        services: Mapping[str, ServiceScore],
        shares: Mapping[str, float],
    ) -> int:
        if not services:
            return NEUTRAL_SCORE
        total = 0.0
        total_weight = 0.0
        adaptable_share = 0.0
        for service_id, service in services.items():
            share = shares.get(service_id, 0.0)
            emphasis = 1.3 if service.adaptability > 70 else 1.0
            total += service.adaptability * share * emphasis
            total_weight += share * emphasis
            if service.adaptability > 70 and share > 0.15:
                adaptable_share += share

        value = total / total_weight if total_weight > 0 else NEUTRAL_SCORE
        if adaptable_share > 0.3:
            # diversification bonus, at most 10 points
            value += min(10.0, (adaptable_share - 0.3) * 25)
        return clamp_score(value)

    @staticmethod
    def adjusted_ai_score(ai: float, vulnerability: float, adaptability: float) -> int:
        base = ai * 0.6
        adapt = adaptability * 0.25
        resilience = (100 - vulnerability) * 0.15
        if vulnerability > 75:
            return clamp_score(base * 0.5 + adapt * 0.2 + resilience * 0.3)
        return clamp_score(base + adapt + resilience)

    # ── Bundle ───────────────────────────────────────────────────────────────

    def score(
        self,
        answers: Mapping[str, int],
        catalog: QuestionCatalog,
        selected_services: Sequence[str] = (),
        allocations: Mapping[str, float] | None = None,
        override_key: str | None = None,
    ) -> ScoreBundle:
        """Full score bundle for one assessment; ``catalog`` should already be filtered."""
        weights = self.resolve_weights(override_key)
        dimensions = self.dimension_scores(answers, catalog)
        if not weights.keys() & dimensions.keys():
            raise CatalogError(
                f"None of the catalog dimensions {sorted(dimensions)} "
                f"is weighted by the '{self.profile.id}' profile"
            )
        overall = self.overall_score(dimensions, weights)

        services: dict[str, ServiceScore] = {}
        for service_id in dict.fromkeys(selected_services):
            services[service_id] = self.service_score(service_id, answers, catalog, weights)

        percentages = normalize_allocations(allocations or {}, list(services))
        shares = {k: v / 100 for k, v in percentages.items()}
        vulnerability = self.portfolio_vulnerability(services, shares)
        adaptability = self.portfolio_adaptability(services, shares)

        bundle = ScoreBundle(
            overall=overall,
            dimensions=dimensions,
            services=services,
            service_vulnerability=vulnerability,
            service_adaptability=adaptability,
            adjusted_ai=self.adjusted_ai_score(dimensions.get("ai", 0), vulnerability, adaptability),
        )
        logger.info(
            "scores_calculated",
            overall=overall,
            dimensions=dimensions,
            services={k: v.score for k, v in services.items()},
            override_key=override_key,
        )
        return bundle

    # ── Insights ─────────────────────────────────────────────────────────────

    @staticmethod
    def vulnerability_level(overall: float) -> str:
        if overall < 40:
            return HIGH_VULNERABILITY
        if overall < 70:
            return MODERATE_VULNERABILITY
        return LOW_VULNERABILITY

    @staticmethod
    def key_insights(scores: ScoreBundle) -> list[str]:
        insights: list[str] = []
        ai = scores.dimension("ai")
        if ai >= 80:
            insights.append("Strong AI adoption positions you as an industry leader")
        elif ai < 40:
            insights.append("Critical AI skills gap requires immediate attention")

        if scores.service_vulnerability > 75:
            insights.append("High service vulnerability to AI disruption - diversification recommended")
        elif scores.service_vulnerability < 40:
            insights.append("Strong service resilience provides competitive advantage")

        financial = scores.dimension("financial")
        if financial >= 75:
            insights.append("Strong financial foundation supports AI investment")
        elif financial < 45:
            insights.append("Financial constraints may limit AI transformation capacity")

        operational = scores.dimension("operational")
        if operational >= 75:
            insights.append("Operational excellence enables smooth AI integration")
        elif operational < 45:
            insights.append("Operational improvements needed before AI transformation")
        return insights

    @staticmethod
    def action_plan(vulnerability_level: str) -> list[ActionItem]:
        rows = ACTION_PLANS.get(vulnerability_level, ())
        return [ActionItem(title=t, description=d, impact=i) for t, d, i in rows]
