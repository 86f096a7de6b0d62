"""Tests for results assembly, fallback records and JSON export."""

import json
import math

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from agency_valuation.core.config import settings
from agency_valuation.modules.results.schemas import ResultsRecord, Selections
from agency_valuation.modules.results.service import (
    FALLBACK_INSIGHT,
    FALLBACK_VULNERABILITY_LEVEL,
    ResultsAssembler,
    export_results,
    load_results,
)
from agency_valuation.modules.scoring.criteria import INHOUSE_PROFILE
from agency_valuation.modules.scoring.engine import ScoringEngine
from agency_valuation.modules.valuation.engine import ValuationEngine

SERVICES = ["creative", "content"]


class ExplodingValuation(ValuationEngine):
    def calculate(self, scores, revenue):
        raise RuntimeError("valuation exploded")


@pytest.fixture
def selections():
    return {
        "selected_services": list(SERVICES),
        "service_revenue_percent": {"creative": 60, "content": 40},
        "revenue": 2_000_000,
        "agency_type": "creative",
    }


# ── Selections ───────────────────────────────────────────────────────────────


class TestSelections:
    """Input schema coercion."""

    @pytest.mark.parametrize("revenue", ["abc", None, math.nan, -100, math.inf])
    def test_revenue_coerced_to_zero(self, revenue):
        assert Selections(revenue=revenue).revenue == 0.0

    def test_numeric_string_revenue(self):
        assert Selections(revenue="1500000").revenue == 1_500_000.0

    def test_services_deduplicated_in_order(self):
        chosen = Selections(selected_services=["pr", "creative", "pr"])
        assert chosen.selected_services == ["pr", "creative"]


# ── Assembly ─────────────────────────────────────────────────────────────────


class TestAssemble:
    """Happy-path orchestration."""

    def test_complete_record(self, assembler, catalog, answers_for, selections, fixed_clock):
        record = assembler.assemble(answers_for(4, tuple(SERVICES)), catalog, selections)
        assert record.error is None
        assert record.generated_at == fixed_clock()
        assert list(record.scores.services) == SERVICES
        assert len(record.recommendations) >= 8
        assert len(record.quick_wins) == 4
        assert record.valuation_insights is not None
        assert record.agency_profile is not None
        assert record.agency_profile.name == "Creative Agency"
        assert [s.title for s in record.synergies] == ["Build integrated AI content factory"]
        assert len(record.action_plan) == 3

    def test_bounds(self, assembler, catalog, answers_for, selections):
        for value in range(6):
            record = assembler.assemble(answers_for(value, tuple(SERVICES)), catalog, selections)
            assert 0 <= record.scores.overall <= 100
            assert 1.0 <= record.valuation.multiple_low <= record.valuation.multiple_high

    def test_accepts_selections_model(self, assembler, catalog, answers_for, selections):
        as_dict = assembler.assemble(answers_for(3), catalog, selections)
        as_model = assembler.assemble(answers_for(3), catalog, Selections(**selections))
        assert as_dict == as_model

    def test_does_not_mutate_inputs(self, assembler, catalog, answers_for, selections):
        answers = answers_for(3, tuple(SERVICES))
        answers_before = dict(answers)
        selections_before = json.dumps(selections, sort_keys=True)
        assembler.assemble(answers, catalog, selections)
        assert answers == answers_before
        assert json.dumps(selections, sort_keys=True) == selections_before

    def test_no_answers(self, assembler, catalog):
        record = assembler.assemble({}, catalog, {})
        assert record.error is None
        assert record.scores.overall == 0
        assert record.valuation.classification == "Weak Acquisition Candidate"
        assert record.valuation.dollar_valuation_delta == 0
        assert len(record.recommendations) == 6

    def test_invalid_revenue_keeps_multiples(self, assembler, catalog, answers_for, selections):
        selections["revenue"] = "not a number"
        record = assembler.assemble(answers_for(5, tuple(SERVICES)), catalog, selections)
        assert record.error is None
        assert record.financial_impact.valuation_impact == 0
        assert record.valuation.multiple_high > 1.5

    def test_unknown_agency_type(self, assembler, catalog, answers_for, selections):
        selections["agency_type"] = "boutique"
        record = assembler.assemble(answers_for(3), catalog, selections)
        assert record.error is None
        assert record.agency_profile is None

    def test_idempotent(self, assembler, catalog, answers_for, selections):
        answers = answers_for(3, tuple(SERVICES))
        first = export_results(assembler.assemble(answers, catalog, selections))
        second = export_results(assembler.assemble(answers, catalog, selections))
        assert first == second

    def test_record_sequences_immutable(self, assembler, catalog, answers_for, selections):
        record = assembler.assemble(answers_for(4, tuple(SERVICES)), catalog, selections)
        assert isinstance(record.recommendations, tuple)
        assert isinstance(record.valuation_insights.roadmap.immediate, tuple)
        with pytest.raises(AttributeError):
            record.recommendations.append(record.recommendations[0])
        with pytest.raises(ValidationError):
            record.insights = ()


# ── Fallback ─────────────────────────────────────────────────────────────────


class TestFallback:
    """Failures anywhere in the pipeline produce the neutral record."""

    def _assert_neutral(self, record: ResultsRecord):
        assert record.scores.overall == 50
        assert set(record.scores.dimensions.values()) == {50}
        assert record.valuation.multiple_low == 1.0
        assert record.valuation.multiple_high == 1.5
        assert record.valuation.classification == "Average Acquisition Candidate"
        assert record.valuation.dollar_valuation_delta == 0
        assert record.financial_impact.valuation_impact == 0
        assert record.recommendations == ()
        assert record.vulnerability_level == FALLBACK_VULNERABILITY_LEVEL
        assert record.insights == (FALLBACK_INSIGHT,)
        assert record.error is not None
        assert record.error.error == "computation_failure"

    def test_out_of_range_answer(self, assembler, catalog, selections):
        record = assembler.assemble({"1": 9}, catalog, selections)
        self._assert_neutral(record)
        assert record.error.detail == "invalid_answer"

    def test_unknown_question(self, assembler, catalog, selections):
        record = assembler.assemble({"999": 3}, catalog, selections)
        self._assert_neutral(record)
        assert record.error.detail == "unknown_question"

    def test_engine_failure(self, catalog, answers_for, selections, fixed_clock):
        assembler = ResultsAssembler(valuation=ExplodingValuation(), clock=fixed_clock)
        record = assembler.assemble(answers_for(3), catalog, selections)
        self._assert_neutral(record)
        assert record.error.message == "valuation exploded"
        assert record.error.detail == "RuntimeError"
        assert record.generated_at == fixed_clock()

    def test_malformed_selections(self, assembler, catalog, answers_for):
        record = assembler.assemble(answers_for(3), catalog, {"selected_services": 42})
        self._assert_neutral(record)
        assert record.error.detail == "ValidationError"

    def test_custom_fallback_score(self, catalog, fixed_clock):
        assembler = ResultsAssembler(clock=fixed_clock, fallback_score=30)
        record = assembler.assemble({"1": -1}, catalog, {})
        assert record.scores.overall == 30
        assert record.valuation.classification == "Weak Acquisition Candidate"

    def test_catalog_without_weighted_dimensions(self, catalog, answers_for, selections, fixed_clock):
        assembler = ResultsAssembler(scoring=ScoringEngine(INHOUSE_PROFILE), clock=fixed_clock)
        record = assembler.assemble(answers_for(5, tuple(SERVICES)), catalog, selections)
        self._assert_neutral(record)
        assert record.error.detail == "invalid_catalog"
        assert set(record.scores.dimensions) == set(INHOUSE_PROFILE.weights)

    def test_failing_clock(self, catalog, answers_for, selections):
        def broken_clock():
            raise RuntimeError("clock unavailable")

        record = ResultsAssembler(clock=broken_clock).assemble(answers_for(3), catalog, selections)
        self._assert_neutral(record)
        assert record.error.message == "clock unavailable"
        assert record.generated_at.tzinfo is not None

    def test_fallback_logged_with_environment(self, assembler, catalog, selections):
        with capture_logs() as logs:
            assembler.assemble({"1": 9}, catalog, selections)
        event = next(e for e in logs if e["event"] == "results_fallback_used")
        assert event["log_level"] == "error"
        assert event["error_type"] == "InvalidAnswerError"
        assert event["app_env"] == settings.APP_ENV


# ── Export ───────────────────────────────────────────────────────────────────


class TestExport:
    """JSON export keeps numbers as numbers and round-trips losslessly."""

    def test_round_trip(self, assembler, catalog, answers_for, selections):
        record = assembler.assemble(answers_for(4, tuple(SERVICES)), catalog, selections)
        assert load_results(export_results(record)) == record

    def test_fallback_round_trip(self, assembler, catalog, selections):
        record = assembler.assemble({"1": 7}, catalog, selections)
        assert load_results(export_results(record)) == record

    def test_numbers_stay_numbers(self, assembler, catalog, answers_for, selections):
        record = assembler.assemble(answers_for(4, tuple(SERVICES)), catalog, selections)
        payload = json.loads(export_results(record))
        assert isinstance(payload["scores"]["overall"], int)
        assert isinstance(payload["valuation"]["multiple_low"], float)
        assert isinstance(payload["financial_impact"]["valuation_impact"], float)
        assert isinstance(payload["scores"]["services"]["creative"]["score"], int)
