"""Closed value sets shared across the scoring, valuation and recommendation modules."""

import enum


# ── Services ─────────────────────────────────────────────────────────────────


class RiskLevel(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


# ── Recommendations ──────────────────────────────────────────────────────────


class Complexity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Importance(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Timeframe(str, enum.Enum):
    IMMEDIATE = "immediate"
    SHORT_TERM = "short_term"
    STRATEGIC = "strategic"


class ScoreBracket(str, enum.Enum):
    LOW = "low"    # overall < 40
    MID = "mid"    # 40 <= overall <= 70
    HIGH = "high"  # overall > 70


class RecommendationCategory(str, enum.Enum):
    SERVICE = "service"
    OPERATIONAL = "operational"
    FINANCIAL = "financial"
    PLACEHOLDER = "placeholder"
    GENERIC = "generic"
