"""
Priority scoring — relationship matrix → raw score per technical requirement.

    score(t) = Σ_c importance(c) × strength(c, t)

A missing matrix cell counts as strength 0.  Weights are filled in by
normalize_weights(); normalized priority (share of the top score) is what the
classifier and the recommendations band on.
"""

from __future__ import annotations

import logging

from qfd_engine.models.project import QFDProject
from qfd_engine.models.schemas import TechnicalPriority
from qfd_engine.models.enums import RelationshipStrength

logger = logging.getLogger(__name__)


def calculate_technical_priorities(project: QFDProject) -> list[TechnicalPriority]:
    """One TechnicalPriority per technical requirement, input order, weight 0."""
    strengths = project.relationship_index()
    priorities: list[TechnicalPriority] = []

    for tech in project.technical_requirements:
        score = sum(
            cust.importance * int(strengths.get((cust.id, tech.id), RelationshipStrength.NONE))
            for cust in project.customer_requirements
        )
        priorities.append(
            TechnicalPriority(id=tech.id, description=tech.description, score=score)
        )

    logger.debug(
        f"Scored {len(priorities)} technical requirements "
        f"against {len(project.customer_requirements)} customer requirements"
    )
    return priorities


def total_score(priorities: list[TechnicalPriority]) -> int:
    return sum(p.score for p in priorities)


def max_score(priorities: list[TechnicalPriority]) -> int:
    """Largest raw score, floored at 1 so it is always a safe divisor."""
    return max([p.score for p in priorities] + [1])


def normalize_weights(priorities: list[TechnicalPriority]) -> list[TechnicalPriority]:
    """
    Fill relative_weight = score / total × 100.
    With a zero total (empty matrix) the records come back unchanged.
    """
    total = total_score(priorities)
    if total == 0:
        return list(priorities)

    return [
        p.model_copy(update={"relative_weight": p.score / total * 100})
        for p in priorities
    ]


def normalized_priority(score: int, top_score: int) -> float:
    """Score as a percentage of the top score (0–100)."""
    return score / max(top_score, 1) * 100


def rank_priorities(priorities: list[TechnicalPriority]) -> list[TechnicalPriority]:
    """Highest score first; ties keep their input order."""
    return sorted(priorities, key=lambda p: p.score, reverse=True)
