"""Agency assessment question bank: 4 dimensions, core and service-specific questions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from agency_valuation.core.errors import CatalogError, InvalidAnswerError, UnknownQuestionError

MIN_OPTION_SCORE = 0
MAX_OPTION_SCORE = 5


@dataclass(frozen=True)
class Option:
    """One answer choice; the score, not the position, is what gets aggregated."""

    text: str
    score: int


@dataclass(frozen=True)
class Question:
    """A weighted survey question belonging to a single dimension."""

    id: str
    dimension: str
    weight: float
    text: str
    options: tuple[Option, ...]
    service_id: str | None = None  # None for core/shared questions


@dataclass(frozen=True)
class Dimension:
    id: str
    name: str


# ── Dimensions ───────────────────────────────────────────────────────────────

OPERATIONAL = Dimension(id="operational", name="Operational Maturity")
FINANCIAL = Dimension(id="financial", name="Financial Resilience")
AI = Dimension(id="ai", name="AI Readiness")
STRATEGIC = Dimension(id="strategic", name="Strategic Position")

DIMENSIONS: tuple[Dimension, ...] = (OPERATIONAL, FINANCIAL, AI, STRATEGIC)


def _options(*pairs: tuple[str, int]) -> tuple[Option, ...]:
    return tuple(Option(text=text, score=score) for text, score in pairs)


# ── Operational Maturity ─────────────────────────────────────────────────────

_OPERATIONAL_QUESTIONS = (
    Question(
        id="1",
        dimension="operational",
        weight=2,
        text="If a new team member joined tomorrow, how would they figure out how you do things?",
        options=_options(
            ("They'd shadow someone and pick it up as they go", 0),
            ("We've got some basic guides, but they're probably outdated", 1),
            ("We have documentation for the main stuff, and update it yearly", 3),
            ("Everything's documented in our wiki/knowledge base that we actually maintain", 5),
        ),
    ),
    Question(
        id="2",
        dimension="operational",
        weight=1,
        text="When was the last time you looked at your project management documentation?",
        options=_options(
            ("What documentation?", 0),
            ("During our last crisis", 1),
            ("We reference it occasionally", 3),
            ("Last week - we use it regularly", 5),
        ),
    ),
    Question(
        id="3",
        dimension="operational",
        weight=3,
        text=(
            "If you (or your most critical team member) disappeared for a month with "
            "no warning or contact, what would happen?"
        ),
        options=_options(
            ("Complete disaster - the business might not survive", 0),
            ("Major disruption but we'd survive", 1),
            ("Some knowledge gaps but we'd manage", 3),
            ("We have systems and documentation in place for this scenario", 5),
        ),
    ),
    Question(
        id="4",
        dimension="operational",
        weight=2,
        text="Who in your agency has critical knowledge that isn't documented or shared?",
        options=_options(
            ("Most of our team", 0),
            ("Several key people", 1),
            ("Maybe 2-3 critical people", 2),
            ("One person (usually me, the founder)", 3),
            ("No one - we've deliberately built resilience", 5),
        ),
    ),
)

# ── Financial Resilience ─────────────────────────────────────────────────────

_FINANCIAL_QUESTIONS = (
    Question(
        id="11",
        dimension="financial",
        weight=3,
        text=(
            "On the first day of each month, roughly what percentage of that month's "
            "revenue do you already have locked in?"
        ),
        options=_options(
            ("0-20% - We start most months from scratch", 0),
            ("20-50% - Some retainers but lots of project work", 1),
            ("50-80% - Mostly retainers with some project work", 3),
            ("80%+ - Almost entirely retainer-based", 5),
        ),
    ),
    Question(
        id="12",
        dimension="financial",
        weight=2,
        text="When was the last time a key client surprised you by leaving or significantly reducing spend?",
        options=_options(
            ("Within the last 3 months", 1),
            ("Maybe 6-12 months ago", 3),
            ("Can't remember the last time - years ago", 5),
        ),
    ),
    Question(
        id="13",
        dimension="financial",
        weight=3,
        text="How have your profit margins changed over the past 2 years?",
        options=_options(
            ("Decreased significantly", 0),
            ("Decreased slightly", 1),
            ("Stayed about the same", 2),
            ("Increased slightly", 4),
            ("Increased significantly", 5),
        ),
    ),
)

# ── AI Readiness ─────────────────────────────────────────────────────────────

_AI_QUESTIONS = (
    Question(
        id="21",
        dimension="ai",
        weight=3,
        text="How would you describe your agency's overall approach to AI adoption?",
        options=_options(
            ("We're avoiding it - it's not relevant to us", 0),
            ("We're watching from a distance", 1),
            ("Some team members experiment on their own", 2),
            ("We're actively testing and implementing AI tools", 4),
            ("We've integrated AI across most of our operations", 5),
        ),
    ),
    Question(
        id="22",
        dimension="ai",
        weight=2,
        text="What percentage of your team is proficient with AI tools in their role?",
        options=_options(
            ("0-10% - Almost no one", 0),
            ("10-25% - Just a few early adopters", 1),
            ("25-50% - Getting there but not majority", 2),
            ("50-75% - Most of the team", 4),
            ("75%+ - Nearly everyone", 5),
        ),
    ),
    Question(
        id="23",
        dimension="ai",
        weight=2,
        text="Does your agency have a formal AI policy or strategy?",
        options=_options(
            ("No - we haven't addressed it", 0),
            ("Not yet, but we're planning to create one", 2),
            ("We have basic guidelines but nothing formal", 3),
            ("Yes, we have a comprehensive AI strategy", 5),
        ),
    ),
    Question(
        id="24",
        dimension="ai",
        weight=2,
        text="How do you communicate your AI usage to clients?",
        options=_options(
            ("We don't use AI/don't tell clients", 0),
            ("We don't actively disclose it", 1),
            ("We disclose if specifically asked", 2),
            ("We're open about our AI usage", 4),
            ("We actively promote our AI capabilities", 5),
        ),
    ),
)

# ── Strategic Position ───────────────────────────────────────────────────────

_STRATEGIC_QUESTIONS = (
    Question(
        id="31",
        dimension="strategic",
        weight=3,
        text="How do you think AI will impact your agency's competitive position in the next 2 years?",
        options=_options(
            ("Significant negative impact", 0),
            ("Moderate negative impact", 1),
            ("No significant impact", 2),
            ("Moderate positive impact", 4),
            ("Significant positive impact", 5),
        ),
    ),
    Question(
        id="32",
        dimension="strategic",
        weight=3,
        text="What percentage of your revenue comes from services that could be partially automated by AI?",
        options=_options(
            ("75%+ - Most of what we do", 0),
            ("50-75% - A majority of services", 1),
            ("25-50% - Some key services", 2),
            ("10-25% - A small portion", 4),
            ("0-10% - Very little", 5),
        ),
    ),
    Question(
        id="33",
        dimension="strategic",
        weight=2,
        text="How are you adapting your pricing model in response to AI?",
        options=_options(
            ("We're not - still using same model", 0),
            ("Slightly lowering rates due to efficiency", 1),
            ("Moving toward project-based pricing", 3),
            ("Shifting to value-based pricing", 5),
        ),
    ),
)

CORE_QUESTIONS: tuple[Question, ...] = (
    _OPERATIONAL_QUESTIONS + _FINANCIAL_QUESTIONS + _AI_QUESTIONS + _STRATEGIC_QUESTIONS
)

# ── Service-specific questions ───────────────────────────────────────────────

SERVICE_QUESTIONS: tuple[Question, ...] = (
    Question(
        id="creative_1",
        dimension="ai",
        weight=2.5,
        service_id="creative",
        text="To what extent has your creative team integrated AI image generation tools?",
        options=_options(
            ("We haven't touched AI image tools", 0),
            ("A few designers experiment with Midjourney on personal time", 1),
            ("We use AI for mood boards and concepts", 2),
            ("AI generates 30-50% of our visual assets", 3),
            ("AI is integral to our creative process", 4),
            ("We've built custom models on client brand assets", 5),
        ),
    ),
    Question(
        id="creative_2",
        dimension="operational",
        weight=2,
        service_id="creative",
        text="How has AI integration affected your creative team structure?",
        options=_options(
            ("N/A - We're not using AI", 0),
            ("We've downsized our creative team", 1),
            ("Same structure, just more efficient", 2),
            ("Added AI specialists to the creative team", 4),
            ("Completely redesigned team around AI capabilities", 5),
        ),
    ),
    Question(
        id="content_1",
        dimension="ai",
        weight=2.5,
        service_id="content",
        text="How does your content team currently use AI writing tools?",
        options=_options(
            ("We don't use any AI writing tools", 0),
            ("Occasionally for headlines or basic edits", 1),
            ("For research and outlines", 2),
            ("First drafts with human editing", 3),
            ("End-to-end content creation with oversight", 4),
            ("Custom AI models for client voice/style", 5),
        ),
    ),
    Question(
        id="content_2",
        dimension="strategic",
        weight=2,
        service_id="content",
        text="How has AI affected your content pricing strategy?",
        options=_options(
            ("We've had to lower our rates", 0),
            ("No change - same hourly/word pricing", 2),
            ("Shifted to value-based or package pricing", 4),
            ("Premium pricing for AI-enhanced strategy", 5),
        ),
    ),
    Question(
        id="digital_1",
        dimension="ai",
        weight=2,
        service_id="digital",
        text="Which AI tools have you integrated into your digital marketing services?",
        options=_options(
            ("None yet", 0),
            ("Basic analytics and reporting automation", 1),
            ("AI-assisted campaign optimization", 3),
            ("Comprehensive AI tools across all digital services", 5),
        ),
    ),
    Question(
        id="digital_2",
        dimension="strategic",
        weight=2,
        service_id="digital",
        text="How are you positioning your digital services against AI-only alternatives?",
        options=_options(
            ("We're competing mainly on price", 0),
            ("We emphasize human oversight", 2),
            ("We offer hybrid AI-human solutions", 3),
            ("We've developed proprietary AI tech", 5),
        ),
    ),
    Question(
        id="media_1",
        dimension="ai",
        weight=3,
        service_id="media",
        text="How automated is your media buying process?",
        options=_options(
            ("Mostly manual with basic tools", 0),
            ("Using standard programmatic platforms", 2),
            ("Advanced programmatic with some AI optimization", 3),
            ("Fully automated with AI campaign management", 5),
        ),
    ),
    Question(
        id="media_2",
        dimension="financial",
        weight=3,
        service_id="media",
        text="How has your media commission/fee structure evolved with automation?",
        options=_options(
            ("Traditional % of media spend", 0),
            ("Lower % due to automation", 1),
            ("Hybrid fee + performance model", 3),
            ("Primarily performance-based compensation", 5),
        ),
    ),
)


# ── Catalog ──────────────────────────────────────────────────────────────────


class QuestionCatalog:
    """Immutable, validated view over a question bank."""

    def __init__(
        self,
        questions: Iterable[Question],
        dimensions: Iterable[Dimension] = DIMENSIONS,
    ):
        self._questions = tuple(questions)
        self._dimensions = tuple(dimensions)
        self._by_id: dict[str, Question] = {}
        for question in self._questions:
            self._check(question)
            self._by_id[question.id] = question

    def _check(self, question: Question) -> None:
        if question.id in self._by_id:
            raise CatalogError(f"Duplicate question id '{question.id}'")
        if not question.options:
            raise CatalogError(f"Question '{question.id}' has no options")
        if question.weight <= 0:
            raise CatalogError(f"Question '{question.id}' must have a positive weight")
        for option in question.options:
            if not MIN_OPTION_SCORE <= option.score <= MAX_OPTION_SCORE:
                raise CatalogError(
                    f"Question '{question.id}' option score {option.score} is outside "
                    f"{MIN_OPTION_SCORE}-{MAX_OPTION_SCORE}"
                )

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self._dimensions

    def dimension_ids(self) -> tuple[str, ...]:
        """Declared dimensions first, then any extra dimension the questions use."""
        ids = [d.id for d in self._dimensions]
        for question in self._questions:
            if question.dimension not in ids:
                ids.append(question.dimension)
        return tuple(ids)

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def get(self, question_id: str) -> Question | None:
        return self._by_id.get(question_id)

    def by_dimension(self, dimension: str) -> tuple[Question, ...]:
        return tuple(q for q in self._questions if q.dimension == dimension)

    def core_questions(self) -> tuple[Question, ...]:
        return tuple(q for q in self._questions if q.service_id is None)

    def service_questions(self, service_id: str) -> tuple[Question, ...]:
        return tuple(q for q in self._questions if q.service_id == service_id)

    def for_services(self, selected_services: Iterable[str]) -> QuestionCatalog:
        """Core questions plus the questions of the selected services only."""
        selected = set(selected_services)
        return QuestionCatalog(
            (q for q in self._questions if q.service_id is None or q.service_id in selected),
            self._dimensions,
        )

    def validate_answers(self, answers: Mapping[str, int]) -> None:
        """Raise if an answer targets an unknown question or carries an out-of-range score."""
        for question_id, score in answers.items():
            if question_id not in self._by_id:
                raise UnknownQuestionError(str(question_id))
            if (
                isinstance(score, bool)
                or not isinstance(score, int)
                or not MIN_OPTION_SCORE <= score <= MAX_OPTION_SCORE
            ):
                raise InvalidAnswerError(question_id, score)


def default_catalog() -> QuestionCatalog:
    """The full agency question bank (core plus every service-specific question)."""
    return QuestionCatalog(CORE_QUESTIONS + SERVICE_QUESTIONS, DIMENSIONS)
