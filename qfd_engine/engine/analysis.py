"""
Target impact analysis and the full project report.

Everything here is a pure function of one QFDProject snapshot, so callers can
re-run it on every edit.  Correlations are indexed by requirement id once per
call instead of being scanned per requirement.
"""

from __future__ import annotations

import logging

from qfd_engine.models.project import QFDProject
from qfd_engine.models.schemas import TargetImpactAnalysis, QFDAnalysisReport
from qfd_engine.engine.scoring import (
    calculate_technical_priorities,
    normalize_weights,
    normalized_priority,
    max_score,
    total_score,
    rank_priorities,
)
from qfd_engine.engine.classification import implementation_challenge, strategic_importance
from qfd_engine.engine.correlation import (
    summarize_correlations,
    target_recommendation,
    calculate_correlation_impact,
    rank_insights,
)
from qfd_engine.utils.hashing import sha256_hash

logger = logging.getLogger(__name__)


def calculate_target_impact(project: QFDProject) -> list[TargetImpactAnalysis]:
    priorities = calculate_technical_priorities(project)
    scores = {p.id: p.score for p in priorities}
    top = max_score(priorities)
    correlations = project.correlations_by_requirement()

    impacts: list[TargetImpactAnalysis] = []
    for tech in project.technical_requirements:
        score = scores.get(tech.id, 0)
        priority = normalized_priority(score, top)
        summary = summarize_correlations(correlations.get(tech.id, []))

        impacts.append(
            TargetImpactAnalysis(
                id=tech.id,
                description=tech.description,
                target=tech.target,
                unit=tech.unit,
                difficulty=tech.difficulty,
                priority_score=score,
                normalized_priority=priority,
                implementation_challenge=implementation_challenge(tech.difficulty, priority),
                strategic_importance=strategic_importance(priority, tech.difficulty),
                correlation_impact=summary,
                recommendation=target_recommendation(priority, tech.difficulty, summary),
            )
        )
    return impacts


def rank_target_impacts(impacts: list[TargetImpactAnalysis]) -> list[TargetImpactAnalysis]:
    """Highest raw priority score first; ties keep their input order."""
    return sorted(impacts, key=lambda t: t.priority_score, reverse=True)


def snapshot_hash(project: QFDProject) -> str:
    return sha256_hash(project.model_dump_json(), length=16)


def analyze_project(project: QFDProject) -> QFDAnalysisReport:
    """Run every stage of the engine and bundle the results.

    ``target_impacts`` keeps requirement order and ``target_ranking`` holds the
    same records by priority score.  Correlation insights are ordered most
    urgent first.
    """
    correlation_analysis = calculate_correlation_impact(project)
    weighted = normalize_weights(correlation_analysis.priorities)
    impacts = calculate_target_impact(project)

    report = QFDAnalysisReport(
        snapshot_hash=snapshot_hash(project),
        is_complete=bool(project.customer_requirements and project.technical_requirements),
        total_score=total_score(weighted),
        max_score=max((p.score for p in weighted), default=0),
        priorities=weighted,
        ranking=rank_priorities(weighted),
        target_impacts=impacts,
        target_ranking=rank_target_impacts(impacts),
        correlation_insights=rank_insights(correlation_analysis.correlation_insights),
    )

    logger.debug(
        f"Analysed snapshot {report.snapshot_hash}: {len(report.target_impacts)} targets, "
        f"{len(report.correlation_insights)} insights, total score {report.total_score}"
    )
    return report
