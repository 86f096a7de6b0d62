"""Tests for dimension, overall and per-service scoring."""

import pytest

from agency_valuation.core.errors import CatalogError
from agency_valuation.models.enums import RiskLevel
from agency_valuation.modules.catalog.questions import CORE_QUESTIONS, Option, Question, QuestionCatalog
from agency_valuation.modules.scoring.criteria import (
    AGENCY_WEIGHTS,
    INHOUSE_PROFILE,
    VulnerabilityBand,
)
from agency_valuation.modules.scoring.engine import (
    ScoringEngine,
    clamp_score,
    normalize_allocations,
    round_half_up,
)
from agency_valuation.modules.scoring.schemas import ScoreBundle

OPTIONS = (Option("None", 0), Option("Some", 2), Option("Full", 5))


def _q(qid: str, dimension: str, weight: float = 1, service_id: str | None = None) -> Question:
    return Question(
        id=qid, dimension=dimension, weight=weight, text=qid, options=OPTIONS, service_id=service_id
    )


# ── Helpers ──────────────────────────────────────────────────────────────────


class TestRounding:
    """Half-up rounding and clamping."""

    @pytest.mark.parametrize("value,expected", [(0.5, 1.0), (1.5, 2.0), (2.5, 3.0), (2.49, 2.0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_half_up_one_decimal(self):
        assert round_half_up(9.792, 1) == pytest.approx(9.8)
        assert round_half_up(7.344, 1) == pytest.approx(7.3)

    @pytest.mark.parametrize("value,expected", [(-5, 0), (150, 100), (49.5, 50), (66.67, 67)])
    def test_clamp_score(self, value, expected):
        assert clamp_score(value) == expected


class TestNormalizeAllocations:
    """Revenue allocation rescaling."""

    def test_proportional(self):
        assert normalize_allocations({"creative": 30, "content": 10}) == {
            "creative": 75.0,
            "content": 25.0,
        }

    def test_zero_total_splits_evenly(self):
        assert normalize_allocations({"creative": 0, "content": 0, "media": 0}) == {
            "creative": 33.33,
            "content": 33.33,
            "media": 33.33,
        }

    def test_restricted_to_services(self):
        result = normalize_allocations({"creative": 50, "pr": 50}, ["creative", "media"])
        assert result == {"creative": 100.0, "media": 0.0}

    def test_no_services(self):
        assert normalize_allocations({}) == {}


# ── Dimensions ───────────────────────────────────────────────────────────────


class TestDimensionScore:
    """Weighted dimension averages."""

    def test_weighted_average(self, scoring_engine):
        questions = [_q("a", "operational", 2), _q("b", "operational", 1)]
        # (5*2 + 2*1) / 3 = 4.0 -> 80
        assert scoring_engine.dimension_score("operational", {"a": 5, "b": 2}, questions) == 80

    def test_nothing_answered_scores_zero(self, scoring_engine):
        questions = [_q("a", "financial"), _q("b", "financial")]
        assert scoring_engine.dimension_score("financial", {}, questions) == 0

    def test_no_questions_scores_zero(self, scoring_engine):
        assert scoring_engine.dimension_score("financial", {"a": 5}, []) == 0

    def test_unanswered_question_is_neutral(self, scoring_engine):
        answers = {"a": 5, "b": 2}
        base = [_q("a", "ai", 3), _q("b", "ai", 2)]
        extended = base + [_q("c", "ai", 4)]
        assert (
            scoring_engine.dimension_score("ai", answers, base)
            == scoring_engine.dimension_score("ai", answers, extended)
        )

    def test_rejects_question_from_other_dimension(self, scoring_engine):
        with pytest.raises(ValueError, match="belongs to"):
            scoring_engine.dimension_score("ai", {}, [_q("a", "operational")])

    def test_monotonic_in_single_answer(self, scoring_engine, catalog, answers_for):
        previous = -1
        for value in range(6):
            answers = answers_for(2)
            answers["21"] = value
            bundle = scoring_engine.score(answers, catalog.for_services([]))
            assert bundle.dimension("ai") >= previous
            previous = bundle.dimension("ai")


class TestDimensionScores:
    """Full dimension maps, including the derived strategic dimension."""

    def test_all_full_marks(self, scoring_engine, catalog, answers_for):
        scores = scoring_engine.dimension_scores(answers_for(5), catalog.for_services([]))
        assert scores == {"operational": 100, "financial": 100, "ai": 100, "strategic": 100}

    def test_empty_dimension_is_exactly_zero(self, scoring_engine, catalog):
        scores = scoring_engine.dimension_scores({"1": 5, "2": 5}, catalog.for_services([]))
        assert scores["financial"] == 0
        assert scores["ai"] == 0
        assert scores["strategic"] == 0

    def test_strategic_derived_without_strategic_questions(self, scoring_engine):
        catalog = QuestionCatalog([
            _q("op", "operational"),
            _q("fin", "financial"),
            _q("ai_a", "ai"),
            _q("ai_b", "ai"),
        ])
        answers = {"op": 5, "fin": 0, "ai_a": 5, "ai_b": 0}
        scores = scoring_engine.dimension_scores(answers, catalog)
        # 100*0.3 + 0*0.3 + 50*0.4
        assert scores["strategic"] == 50

    def test_strategic_not_derived_when_questions_exist(self, scoring_engine):
        catalog = QuestionCatalog(CORE_QUESTIONS)
        answers = {q.id: 5 for q in CORE_QUESTIONS if q.dimension != "strategic"}
        assert scoring_engine.dimension_scores(answers, catalog)["strategic"] == 0


# ── Overall ──────────────────────────────────────────────────────────────────


class TestOverallScore:
    """Weighted overall score and weight overrides."""

    def test_default_weights(self, scoring_engine):
        dims = {"operational": 100, "financial": 0, "ai": 50, "strategic": 50}
        # 20 + 0 + 20 + 5
        assert scoring_engine.overall_score(dims, AGENCY_WEIGHTS) == 45

    def test_unscored_dimensions_are_skipped(self, scoring_engine):
        assert scoring_engine.overall_score({"ai": 80}, AGENCY_WEIGHTS) == 80

    def test_nothing_scored(self, scoring_engine):
        assert scoring_engine.overall_score({}, AGENCY_WEIGHTS) == 0

    def test_override_replaces_named_dimensions(self, scoring_engine):
        weights = scoring_engine.resolve_weights("media")
        assert weights == {"operational": 0.15, "financial": 0.3, "ai": 0.45, "strategic": 0.1}

    @pytest.mark.parametrize("key", [None, "digital", "unknown"])
    def test_no_override(self, scoring_engine, key):
        assert scoring_engine.resolve_weights(key) == AGENCY_WEIGHTS

    def test_inhouse_industry_override(self):
        engine = ScoringEngine(INHOUSE_PROFILE)
        assert engine.resolve_weights("manufacturing")["people_skills"] == 0.40

    def test_override_changes_overall(self, scoring_engine, catalog, answers_for):
        answers = answers_for(5)
        for q in catalog.by_dimension("ai"):
            answers[q.id] = 0
        active = catalog.for_services([])
        default = scoring_engine.score(answers, active).overall
        media = scoring_engine.score(answers, active, override_key="media").overall
        assert media < default


# ── Services ─────────────────────────────────────────────────────────────────


class TestServiceScore:
    """Per-service scores and vulnerability bands."""

    @pytest.mark.parametrize(
        "score,risk,vulnerability",
        [
            (100, RiskLevel.LOW, 30),
            (80, RiskLevel.LOW, 30),
            (79, RiskLevel.MEDIUM, 80),
            (60, RiskLevel.MEDIUM, 80),
            (59, RiskLevel.HIGH, 90),
            (40, RiskLevel.HIGH, 90),
            (39, RiskLevel.CRITICAL, 100),
            (0, RiskLevel.CRITICAL, 100),
        ],
    )
    def test_vulnerability_bands(self, scoring_engine, score, risk, vulnerability):
        band = scoring_engine.vulnerability_band(score)
        assert band.risk_level is risk
        assert band.vulnerability == vulnerability

    def test_bands_must_cover_zero(self):
        with pytest.raises(ValueError):
            ScoringEngine(bands=(VulnerabilityBand(50, RiskLevel.LOW, 10, 0.5, "Partial"),))

    def test_service_ai_blend(self, scoring_engine, catalog, answers_for):
        answers = answers_for(5, ("creative",))
        for q in catalog.core_questions():
            if q.dimension == "ai":
                answers[q.id] = 0
        active = catalog.for_services(["creative"])
        weights = scoring_engine.resolve_weights()
        result = scoring_engine.service_score("creative", answers, active, weights)
        # shared AI covers core plus creative_1: 12.5 / 11.5 * 20 = 21.74
        # blended: (21.74 + 100 * 2) / 3 = 73.9
        assert result.dimensions["ai"] == 74

    def test_no_blend_without_service_ai_answers(self, scoring_engine, catalog, answers_for):
        answers = answers_for(5)
        for q in catalog.core_questions():
            if q.dimension == "ai":
                answers[q.id] = 0
        active = catalog.for_services(["creative"])
        result = scoring_engine.service_score(
            "creative", answers, active, scoring_engine.resolve_weights()
        )
        assert result.dimensions["ai"] == 0

    def test_other_services_questions_ignored(self, scoring_engine, catalog, answers_for):
        answers = answers_for(5)
        answers["media_1"] = 0
        active = catalog.for_services(["content", "media"])
        result = scoring_engine.service_score(
            "content", answers, active, scoring_engine.resolve_weights()
        )
        assert result.score == 100
        assert result.risk_level is RiskLevel.LOW
        # 100 - (30*0.7 + 0*0.3)
        assert result.adaptability == 79

    def test_portfolio_vulnerability_concentration_penalty(self, scoring_engine, make_service_score):
        services = {
            "media": make_service_score("media", 30, RiskLevel.CRITICAL, 100),
            "strategy": make_service_score("strategy", 90, RiskLevel.LOW, 30),
        }
        shares = {"media": 0.5, "strategy": 0.5}
        # (60 + 15) / 1.1 + (0.5 - 0.4) * 20
        assert scoring_engine.portfolio_vulnerability(services, shares) == 70

    def test_portfolio_defaults_without_services(self, scoring_engine):
        assert scoring_engine.portfolio_vulnerability({}, {}) == 50
        assert scoring_engine.portfolio_adaptability({}, {}) == 50

    def test_adjusted_ai_score(self):
        assert ScoringEngine.adjusted_ai_score(80, 30, 70) == 76
        assert ScoringEngine.adjusted_ai_score(80, 80, 70) == 28


# ── Bundle ───────────────────────────────────────────────────────────────────


class TestScoreBundle:
    """End-to-end score bundles."""

    @pytest.mark.parametrize("value", range(6))
    def test_bounds(self, scoring_engine, catalog, answers_for, value):
        services = ("creative", "media", "pr")
        bundle = scoring_engine.score(
            answers_for(value, services),
            catalog.for_services(services),
            selected_services=services,
            allocations={"creative": 50, "media": 30, "pr": 20},
        )
        figures = [bundle.overall, bundle.service_vulnerability, bundle.service_adaptability, bundle.adjusted_ai]
        figures += list(bundle.dimensions.values())
        for service in bundle.services.values():
            figures += [service.score, service.vulnerability, service.adaptability]
        assert all(0 <= f <= 100 for f in figures)

    def test_overall_monotonic(self, scoring_engine, catalog, answers_for):
        active = catalog.for_services([])
        previous = -1
        for value in range(6):
            answers = answers_for(3)
            answers["11"] = value
            overall = scoring_engine.score(answers, active).overall
            assert overall >= previous
            previous = overall

    def test_does_not_mutate_answers(self, scoring_engine, catalog, answers_for):
        answers = answers_for(4, ("digital",))
        snapshot = dict(answers)
        scoring_engine.score(answers, catalog.for_services(["digital"]), ["digital"])
        assert answers == snapshot

    def test_services_in_selection_order(self, scoring_engine, catalog, answers_for):
        selected = ["pr", "creative", "pr"]
        bundle = scoring_engine.score(answers_for(3), catalog.for_services(selected), selected)
        assert list(bundle.services) == ["pr", "creative"]

    def test_missing_dimension_defaults_to_zero(self):
        assert ScoreBundle().dimension("ai") == 0

    def test_unweighted_catalog_rejected(self, catalog, answers_for):
        engine = ScoringEngine(INHOUSE_PROFILE)
        with pytest.raises(CatalogError):
            engine.score(answers_for(5, ("creative",)), catalog.for_services(["creative"]), ["creative"])

    def test_inhouse_catalog_scores(self):
        catalog = QuestionCatalog([
            _q("people", "people_skills"),
            _q("process", "process_infrastructure"),
            _q("lead", "strategy_leadership"),
        ])
        bundle = ScoringEngine(INHOUSE_PROFILE).score({"people": 5, "process": 5, "lead": 5}, catalog)
        assert bundle.overall == 100
        assert bundle.dimension("people_skills") == 100


class TestInsights:
    """Vulnerability level, insights and action plans."""

    @pytest.mark.parametrize(
        "overall,level",
        [
            (0, "High Vulnerability"),
            (39, "High Vulnerability"),
            (40, "Moderate Vulnerability"),
            (69, "Moderate Vulnerability"),
            (70, "Low Vulnerability"),
        ],
    )
    def test_vulnerability_level(self, overall, level):
        assert ScoringEngine.vulnerability_level(overall) == level

    def test_key_insights(self):
        scores = ScoreBundle(
            overall=60,
            dimensions={"ai": 85, "financial": 30, "operational": 80},
            service_vulnerability=80,
        )
        assert ScoringEngine.key_insights(scores) == [
            "Strong AI adoption positions you as an industry leader",
            "High service vulnerability to AI disruption - diversification recommended",
            "Financial constraints may limit AI transformation capacity",
            "Operational excellence enables smooth AI integration",
        ]

    @pytest.mark.parametrize(
        "level", ["High Vulnerability", "Moderate Vulnerability", "Low Vulnerability"]
    )
    def test_action_plan_has_three_items(self, level):
        assert len(ScoringEngine.action_plan(level)) == 3

    def test_action_plan_unknown_level(self):
        assert ScoringEngine.action_plan("Unknown") == []
