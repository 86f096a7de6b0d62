"""Scoring schemas — dimension, overall, and per-service scores."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from agency_valuation.models.enums import RiskLevel

Score = Annotated[int, Field(ge=0, le=100)]


# ── Services ─────────────────────────────────────────────────────────────────


class ServiceScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_id: str
    score: Score
    vulnerability: Score
    risk_level: RiskLevel
    valuation_impact: float      # multiple points gained (+) or lost (-)
    adaptability: Score
    dimensions: dict[str, Score] = Field(default_factory=dict)


# ── Bundle ───────────────────────────────────────────────────────────────────


class ScoreBundle(BaseModel):
    """Finalized scores; every figure is an integer clamped to 0-100."""

    model_config = ConfigDict(frozen=True)

    overall: Score = 0
    dimensions: dict[str, Score] = Field(default_factory=dict)
    services: dict[str, ServiceScore] = Field(default_factory=dict)
    service_vulnerability: Score = 50
    service_adaptability: Score = 50
    adjusted_ai: Score = 0

    def dimension(self, dimension_id: str) -> int:
        """Score for a dimension, 0 when the dimension was never scored."""
        return self.dimensions.get(dimension_id, 0)


# ── Insights ─────────────────────────────────────────────────────────────────


class ActionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    impact: str
