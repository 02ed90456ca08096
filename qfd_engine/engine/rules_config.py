"""
Rules Config — threshold tables behind every engine decision.

The defaults are the published QFD policy and the engine always runs with
them unless a caller passes its own table explicitly.  They are not read
from the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel


# ── Config models ────────────────────────────────────────

class ChallengeRules(BaseModel):
    """Implementation challenge: difficulty×20 + priority×0.3, banded."""
    difficulty_factor: float = 20.0
    priority_factor: float = 0.3
    critical_above: float = 80.0
    high_above: float = 60.0
    medium_above: float = 40.0

    model_config = {"frozen": True}


class ImportanceRules(BaseModel):
    """Strategic importance: priority bands, escalated for hard targets."""
    top_priority_above: float = 70.0
    upper_priority_above: float = 40.0
    lower_priority_above: float = 20.0
    hard_difficulty_from: int = 4

    model_config = {"frozen": True}


class CorrelationRules(BaseModel):
    """Net-impact cut-offs and per-type score-sum thresholds for pair advice."""
    synergistic_above: int = 1
    conflicted_below: int = -1
    strong_positive_total_above: int = 50
    positive_total_above: int = 40
    negative_total_above: int = 60
    strong_negative_total_above: int = 50

    model_config = {"frozen": True}


class UrgencyRules(BaseModel):
    """Urgency of a correlation insight from score sum and |correlation|."""
    critical_total_above: int = 50
    critical_min_strength: int = 2
    high_total_above: int = 30
    high_min_strength: int = 1
    medium_total_above: int = 15
    medium_min_strength: int = 1

    model_config = {"frozen": True}


class RecommendationRules(BaseModel):
    """Target recommendation: what counts as high priority / high difficulty."""
    high_priority_above: float = 50.0
    high_difficulty_from: int = 4

    model_config = {"frozen": True}


class EngineRules(BaseModel):
    challenge: ChallengeRules = ChallengeRules()
    importance: ImportanceRules = ImportanceRules()
    correlation: CorrelationRules = CorrelationRules()
    urgency: UrgencyRules = UrgencyRules()
    recommendation: RecommendationRules = RecommendationRules()

    model_config = {"frozen": True}


@lru_cache()
def get_rules() -> EngineRules:
    """Return the default rule tables (singleton)."""
    return EngineRules()
