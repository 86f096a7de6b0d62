"""Shared test fixtures for the agency valuation test suite."""

from datetime import datetime, timezone

import pytest

from agency_valuation.modules.catalog.questions import QuestionCatalog, default_catalog
from agency_valuation.modules.recommendations.engine import RecommendationEngine
from agency_valuation.modules.results.service import ResultsAssembler
from agency_valuation.modules.scoring.engine import ScoringEngine
from agency_valuation.modules.scoring.schemas import ScoreBundle, ServiceScore
from agency_valuation.modules.valuation.engine import ValuationEngine

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


# ── Engines ───────────────────────────────────────────────────────────────────


@pytest.fixture
def catalog() -> QuestionCatalog:
    return default_catalog()


@pytest.fixture
def scoring_engine() -> ScoringEngine:
    return ScoringEngine()


@pytest.fixture
def valuation_engine() -> ValuationEngine:
    return ValuationEngine()


@pytest.fixture
def recommendation_engine() -> RecommendationEngine:
    return RecommendationEngine()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def assembler(fixed_clock) -> ResultsAssembler:
    return ResultsAssembler(clock=fixed_clock)


# ── Sample data fixtures ──────────────────────────────────────────────────


@pytest.fixture
def answers_for(catalog):
    """Build an answer map giving every core question (plus the named services') one score."""

    def _build(score: int, services: tuple[str, ...] = ()) -> dict[str, int]:
        active = catalog.for_services(services)
        return {q.id: score for q in active.questions}

    return _build


@pytest.fixture
def strong_scores() -> ScoreBundle:
    """Financial 82, operational 81, AI 75, overall 80."""
    return ScoreBundle(
        overall=80,
        dimensions={"operational": 81, "financial": 82, "ai": 75, "strategic": 80},
    )


@pytest.fixture
def make_service_score():
    def _build(service_id: str, score: int, risk_level, vulnerability: int, ai: int = 50) -> ServiceScore:
        return ServiceScore(
            service_id=service_id,
            score=score,
            vulnerability=vulnerability,
            risk_level=risk_level,
            valuation_impact=0.0,
            adaptability=50,
            dimensions={"ai": ai},
        )

    return _build
