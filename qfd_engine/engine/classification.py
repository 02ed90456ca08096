"""
Classifier — (normalized priority, difficulty) → ordinal bands.

Both tables are fixed policy; thresholds come from rules_config so the call
sites never carry literals.
"""

from __future__ import annotations

from qfd_engine.models.enums import LevelBand
from qfd_engine.engine.rules_config import ChallengeRules, ImportanceRules, get_rules


def challenge_score(
    difficulty: int,
    normalized_priority: float,
    rules: ChallengeRules | None = None,
) -> float:
    rules = rules or get_rules().challenge
    return difficulty * rules.difficulty_factor + normalized_priority * rules.priority_factor


def implementation_challenge(
    difficulty: int,
    normalized_priority: float,
    rules: ChallengeRules | None = None,
) -> LevelBand:
    """How hard the target will be to hit, weighted by how much it matters."""
    rules = rules or get_rules().challenge
    score = challenge_score(difficulty, normalized_priority, rules)

    if score > rules.critical_above:
        return LevelBand.CRITICAL
    if score > rules.high_above:
        return LevelBand.HIGH
    if score > rules.medium_above:
        return LevelBand.MEDIUM
    return LevelBand.LOW


def strategic_importance(
    normalized_priority: float,
    difficulty: int,
    rules: ImportanceRules | None = None,
) -> LevelBand:
    """
    High priority with reasonable difficulty is High; with hard difficulty it
    escalates to Critical.  Low priority stays Low regardless of difficulty.
    """
    rules = rules or get_rules().importance
    is_hard = difficulty >= rules.hard_difficulty_from

    if normalized_priority > rules.top_priority_above:
        return LevelBand.CRITICAL if is_hard else LevelBand.HIGH
    if normalized_priority > rules.upper_priority_above:
        return LevelBand.HIGH if is_hard else LevelBand.MEDIUM
    if normalized_priority > rules.lower_priority_above:
        return LevelBand.MEDIUM
    return LevelBand.LOW
