"""Tests for the question, service and agency-type catalogs."""

import pytest

from agency_valuation.core.errors import CatalogError, InvalidAnswerError, UnknownQuestionError
from agency_valuation.models.enums import ScoreBracket, Timeframe
from agency_valuation.modules.catalog.agency_types import AGENCY_TYPES, default_services_for
from agency_valuation.modules.catalog.questions import (
    CORE_QUESTIONS,
    DIMENSIONS,
    SERVICE_QUESTIONS,
    Option,
    Question,
    QuestionCatalog,
)
from agency_valuation.modules.catalog.services import SERVICES, SERVICES_BY_ID, SYNERGIES


def _question(qid: str, dimension: str = "operational", **kwargs) -> Question:
    defaults = dict(
        weight=1,
        text=f"Question {qid}",
        options=(Option("No", 0), Option("Yes", 5)),
    )
    defaults.update(kwargs)
    return Question(id=qid, dimension=dimension, **defaults)


class TestQuestionBank:
    """Static question tables."""

    def test_fourteen_core_questions(self):
        assert len(CORE_QUESTIONS) == 14
        assert all(q.service_id is None for q in CORE_QUESTIONS)

    def test_eight_service_questions(self):
        assert len(SERVICE_QUESTIONS) == 8
        assert {q.service_id for q in SERVICE_QUESTIONS} == {"creative", "content", "digital", "media"}

    def test_dimension_names(self):
        assert [d.name for d in DIMENSIONS] == [
            "Operational Maturity",
            "Financial Resilience",
            "AI Readiness",
            "Strategic Position",
        ]

    def test_every_question_reaches_full_marks(self):
        for question in CORE_QUESTIONS + SERVICE_QUESTIONS:
            assert max(o.score for o in question.options) == 5, question.id

    def test_default_catalog_holds_everything(self, catalog):
        assert len(catalog) == 22
        assert "21" in catalog
        assert "media_1" in catalog


class TestQuestionCatalog:
    """Catalog construction, filtering and answer validation."""

    def test_rejects_duplicate_ids(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            QuestionCatalog([_question("1"), _question("1")])

    def test_rejects_empty_options(self):
        with pytest.raises(CatalogError, match="no options"):
            QuestionCatalog([_question("1", options=())])

    def test_rejects_out_of_range_option(self):
        with pytest.raises(CatalogError, match="outside"):
            QuestionCatalog([_question("1", options=(Option("Too much", 6),))])

    def test_rejects_non_positive_weight(self):
        with pytest.raises(CatalogError, match="positive weight"):
            QuestionCatalog([_question("1", weight=0)])

    def test_for_services_keeps_core_and_selected(self, catalog):
        active = catalog.for_services(["creative"])
        assert "creative_1" in active
        assert "creative_2" in active
        assert "media_1" not in active
        assert len(active.core_questions()) == 14

    def test_for_services_empty_selection(self, catalog):
        active = catalog.for_services([])
        assert len(active) == 14

    def test_dimension_ids_include_extra_dimensions(self):
        catalog = QuestionCatalog([_question("x", dimension="culture")])
        assert catalog.dimension_ids()[-1] == "culture"

    def test_validate_answers_accepts_valid(self, catalog):
        catalog.validate_answers({"1": 0, "11": 5, "creative_1": 3})

    def test_validate_answers_unknown_question(self, catalog):
        with pytest.raises(UnknownQuestionError) as exc_info:
            catalog.validate_answers({"999": 3})
        assert exc_info.value.question_id == "999"
        assert exc_info.value.to_response().error == "unknown_question"

    @pytest.mark.parametrize("score", [6, -1, 2.5, "3", None, True])
    def test_validate_answers_bad_score(self, catalog, score):
        with pytest.raises(InvalidAnswerError):
            catalog.validate_answers({"1": score})


class TestServiceCatalog:
    """Service tables, synergies and agency types."""

    def test_nine_services(self):
        assert [s.id for s in SERVICES] == [
            "creative", "content", "digital", "media", "pr",
            "strategy", "data", "tech", "commerce",
        ]

    def test_every_bracket_has_immediate_rows(self):
        for service in SERVICES:
            for bracket in ScoreBracket:
                assert service.plan_for(bracket).for_timeframe(Timeframe.IMMEDIATE), (
                    f"{service.id} has no immediate rows for {bracket.value}"
                )

    def test_variation_lookup(self):
        first = SERVICES_BY_ID["creative"].low.immediate[0]
        assert first.variation_for("digital") == "Test for social media content creation first"
        assert first.variation_for("media") is None
        assert first.variation_for(None) is None

    def test_synergy_pairs_reference_known_services(self):
        for synergy in SYNERGIES:
            assert all(s in SERVICES_BY_ID for s in synergy.services)

    def test_five_agency_types(self):
        assert {t.id for t in AGENCY_TYPES} == {"creative", "media", "pr", "digital", "specialized"}

    def test_default_services_for_known_type(self):
        assert default_services_for("media") == ("media", "digital", "data")

    @pytest.mark.parametrize("agency_type", [None, "", "unknown"])
    def test_default_services_for_unknown_type(self, agency_type):
        assert default_services_for(agency_type) == ()
