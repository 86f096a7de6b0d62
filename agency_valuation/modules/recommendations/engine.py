"""
RecommendationEngine — selects, ranks and backfills recommendation rows.

Service rows come from the bracketed service tables, generic rows from the
universal table. The returned list is always sorted by ``priority_rank``
with a stable sort, so rows of equal rank keep their generation order.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from agency_valuation.core.config import settings
from agency_valuation.models.enums import (
    Complexity,
    RecommendationCategory,
    RiskLevel,
    ScoreBracket,
    Timeframe,
)
from agency_valuation.modules.catalog.services import (
    HIGH_RISK_WITHOUT_AI,
    MIXED_AI_MATURITY,
    SERVICES_BY_ID,
    SYNERGIES,
    Service,
    ServiceSynergy,
)
from agency_valuation.modules.recommendations.criteria import (
    CATEGORY_RANKS,
    DEFAULT_RANK,
    GENERIC_FALLBACKS,
    IMPORTANCE_ORDER,
    LARGE_REVENUE_LIMIT,
    LARGE_REVENUE_NOTE,
    RANK_KEYWORDS,
    SERVICE_PLACEHOLDERS,
    SMALL_REVENUE_LIMIT,
    SMALL_REVENUE_NOTE,
    STANDARD_QUICK_WINS,
    UNIVERSAL_RECOMMENDATIONS,
    TemplateRecommendation,
    UniversalRecommendation,
)
from agency_valuation.modules.recommendations.schemas import (
    PortfolioWarningInsight,
    Recommendation,
    ServiceSynergyInsight,
)
from agency_valuation.modules.scoring.criteria import RISK_ORDER
from agency_valuation.modules.scoring.schemas import ScoreBundle
from agency_valuation.modules.valuation.engine import coerce_revenue

logger = structlog.get_logger()

TIMEFRAME_LABELS: dict[Timeframe, str] = {
    Timeframe.IMMEDIATE: "Immediate",
    Timeframe.SHORT_TERM: "Short-term",
    Timeframe.STRATEGIC: "Strategic",
}
GENERIC_TIMEFRAME = "Ongoing"

_WORD = re.compile(r"[a-z0-9]+")


class RecommendationEngine:
    """Builds ordered recommendation lists from injected static tables."""

    def __init__(
        self,
        services: Mapping[str, Service] = SERVICES_BY_ID,
        universal: Sequence[UniversalRecommendation] = UNIVERSAL_RECOMMENDATIONS,
        placeholders: Mapping[RiskLevel, TemplateRecommendation] = SERVICE_PLACEHOLDERS,
        fallbacks: Sequence[TemplateRecommendation] = GENERIC_FALLBACKS,
        quick_win_templates: Sequence[TemplateRecommendation] = STANDARD_QUICK_WINS,
        synergies: Sequence[ServiceSynergy] = SYNERGIES,
        minimum: int = settings.DASHBOARD_MIN_RECOMMENDATIONS,
        quick_win_minimum: int = settings.SIMPLE_MIN_RECOMMENDATIONS,
    ):
        if not fallbacks:
            raise ValueError("At least one generic fallback recommendation is required")
        self.services = services
        self.universal = tuple(universal)
        self.placeholders = placeholders
        self.fallbacks = tuple(fallbacks)
        self.quick_win_templates = tuple(quick_win_templates)
        self.synergy_table = tuple(synergies)
        self.minimum = minimum
        self.quick_win_minimum = quick_win_minimum

    # ── Helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def bracket(overall: float) -> ScoreBracket:
        if overall > 70:
            return ScoreBracket.HIGH
        if overall >= 40:
            return ScoreBracket.MID
        return ScoreBracket.LOW

    @staticmethod
    def priority_rank(category: RecommendationCategory, title: str) -> int:
        """1 financial/revenue, 2 operational/process, 3 technology/AI, 4 anything else."""
        if category in CATEGORY_RANKS:
            return CATEGORY_RANKS[category]
        words = set(_WORD.findall(title.lower()))
        for rank, keywords in RANK_KEYWORDS:
            if words.intersection(keywords):
                return rank
        return DEFAULT_RANK

    @staticmethod
    def relevance_score(complexity: Complexity, dimension_score: float) -> int:
        if dimension_score > 70 and complexity is Complexity.LOW:
            return 60
        if dimension_score < 40 and complexity is Complexity.HIGH:
            return 70
        return 100

    def service_name(self, service_id: str) -> str:
        service = self.services.get(service_id)
        return service.name if service else service_id.replace("_", " ").title()

    @staticmethod
    def _rank_sorted(rows: Iterable[Recommendation]) -> list[Recommendation]:
        return sorted(rows, key=lambda r: r.priority_rank)

    # ── Service rows ─────────────────────────────────────────────────────────

    def service_recommendations(
        self,
        scores: ScoreBundle,
        selected_services: Sequence[str],
        agency_type: str | None = None,
    ) -> list[Recommendation]:
        """
        Table rows for each selected service in selection order, immediate
        before short-term before strategic. A service with no table gets a
        single placeholder row instead of being dropped.
        """
        bracket = self.bracket(scores.overall)
        rows: list[Recommendation] = []
        for service_id in dict.fromkeys(selected_services):
            service = self.services.get(service_id)
            if service is None:
                logger.warning("service_recommendations_missing", service=service_id)
                rows.append(self.placeholder(service_id, scores))
                continue

            plan = service.plan_for(bracket)
            for timeframe in Timeframe:
                for item in plan.for_timeframe(timeframe):
                    description = item.description
                    variation = item.variation_for(agency_type)
                    if variation:
                        description = f"{description} ({variation})"
                    rows.append(Recommendation(
                        service=service.id,
                        service_name=service.name,
                        title=item.title,
                        description=description,
                        impact_label=item.expected_roi,
                        complexity=item.complexity,
                        timeframe_label=TIMEFRAME_LABELS[timeframe],
                        priority_rank=self.priority_rank(RecommendationCategory.SERVICE, item.title),
                        category=RecommendationCategory.SERVICE,
                        risk_level=service.risk_label,
                        disruption_timeline=service.disruption_timeline,
                    ))
        return rows

    def placeholder(self, service_id: str, scores: ScoreBundle) -> Recommendation:
        scored = scores.services.get(service_id)
        if scored is not None:
            risk = scored.risk_level
        elif service_id in self.services:
            risk = self.services[service_id].risk_level
        else:
            risk = RiskLevel.MEDIUM
        template = self.placeholders[risk]
        name = self.service_name(service_id)
        return self._from_template(template, RecommendationCategory.PLACEHOLDER, service_id, name)

    def _from_template(
        self,
        template: TemplateRecommendation,
        category: RecommendationCategory,
        service: str | None = None,
        name: str | None = None,
    ) -> Recommendation:
        display = name or template.service
        title = template.title.format(name=display)
        return Recommendation(
            service=service or template.service,
            service_name=name,
            title=title,
            description=template.description.format(name=display),
            impact_label=template.impact,
            complexity=template.complexity,
            timeframe_label=template.timeframe,
            priority_rank=self.priority_rank(category, title),
            category=category,
        )

    # ── Generic rows ─────────────────────────────────────────────────────────

    def generic_recommendations(self, scores: ScoreBundle, revenue: Any) -> list[Recommendation]:
        """Operational and financial rows, by importance then relevance (both descending)."""
        revenue = coerce_revenue(revenue)
        note = None
        if revenue < SMALL_REVENUE_LIMIT:
            note = SMALL_REVENUE_NOTE
        elif revenue > LARGE_REVENUE_LIMIT:
            note = LARGE_REVENUE_NOTE

        rows: list[Recommendation] = []
        for item in self.universal:
            dimension_score = scores.dimension(item.category.value)
            rows.append(Recommendation(
                service="all",
                title=item.title,
                description=item.description,
                impact_label=f"{item.importance.value.capitalize()} importance",
                complexity=item.complexity,
                timeframe_label=GENERIC_TIMEFRAME,
                priority_rank=self.priority_rank(item.category, item.title),
                category=item.category,
                importance=item.importance,
                relevance_score=self.relevance_score(item.complexity, dimension_score),
                note=note if item.category is RecommendationCategory.FINANCIAL else None,
                details=item.details,
            ))
        rows.sort(key=lambda r: (-IMPORTANCE_ORDER[r.importance], -(r.relevance_score or 0)))
        return rows

    # ── Dashboard path ───────────────────────────────────────────────────────

    def generate(
        self,
        scores: ScoreBundle,
        selected_services: Sequence[str],
        revenue: Any = 0,
        agency_type: str | None = None,
        minimum: int | None = None,
    ) -> list[Recommendation]:
        minimum = self.minimum if minimum is None else minimum
        selected = list(dict.fromkeys(selected_services))

        rows = self.service_recommendations(scores, selected, agency_type)
        rows.extend(self.generic_recommendations(scores, revenue))

        filled = 0
        if selected and len(rows) < minimum:
            covered = {r.service for r in rows if r.category is RecommendationCategory.PLACEHOLDER}
            per_service = [self.placeholder(s, scores) for s in selected if s not in covered]
            generic = [self._from_template(t, RecommendationCategory.GENERIC) for t in self.fallbacks]
            backfill = itertools.chain(per_service, itertools.cycle(generic))
            while len(rows) < minimum:
                rows.append(next(backfill))
                filled += 1

        ranked = self._rank_sorted(rows)
        logger.info(
            "recommendations_generated",
            count=len(ranked),
            filled=filled,
            bracket=self.bracket(scores.overall).value,
            services=selected,
        )
        return ranked

    # ── Simple path ──────────────────────────────────────────────────────────

    def quick_wins(self, scores: ScoreBundle, minimum: int | None = None) -> list[Recommendation]:
        """
        Short list led by the riskiest services: Critical lines are replaced,
        High lines enhanced, then standard and agency-wide items fill the gap.
        """
        minimum = self.quick_win_minimum if minimum is None else minimum
        rows: list[Recommendation] = []
        ordered = sorted(
            scores.services.items(), key=lambda kv: RISK_ORDER[kv[1].risk_level], reverse=True
        )
        for service_id, service in ordered:
            if service.risk_level in (RiskLevel.CRITICAL, RiskLevel.HIGH):
                rows.append(self._from_template(
                    self.placeholders[service.risk_level],
                    RecommendationCategory.PLACEHOLDER,
                    service_id,
                    self.service_name(service_id),
                ))

        for template in self.quick_win_templates:
            if len(rows) >= minimum:
                break
            if not any(r.service == template.service for r in rows):
                rows.append(self._from_template(
                    template,
                    RecommendationCategory.SERVICE,
                    template.service,
                    self.service_name(template.service) if template.service in self.services else None,
                ))

        generic = itertools.cycle(self.fallbacks[:2])
        while len(rows) < minimum:
            rows.append(self._from_template(next(generic), RecommendationCategory.GENERIC))

        return self._rank_sorted(rows[:minimum])

    # ── Portfolio insights ───────────────────────────────────────────────────

    def synergies(self, selected_services: Sequence[str]) -> list[ServiceSynergyInsight]:
        selected = set(selected_services)
        return [
            ServiceSynergyInsight(
                services=list(s.services),
                title=s.title,
                description=s.description,
                expected_roi=s.expected_roi,
            )
            for s in self.synergy_table
            if selected.issuperset(s.services)
        ]

    @staticmethod
    def warnings(scores: ScoreBundle) -> list[PortfolioWarningInsight]:
        found = []
        high_risk = [
            s for s in scores.services.values()
            if s.risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL)
        ]
        if len(high_risk) >= 2 and scores.dimension("ai") < 40:
            found.append(HIGH_RISK_WITHOUT_AI)

        ai_levels = [s.dimensions.get("ai", 0) for s in scores.services.values()]
        if ai_levels and max(ai_levels) >= 70 and min(ai_levels) < 40:
            found.append(MIXED_AI_MATURITY)

        return [
            PortfolioWarningInsight(
                id=w.id, severity=w.severity, condition=w.condition, message=w.message
            )
            for w in found
        ]
