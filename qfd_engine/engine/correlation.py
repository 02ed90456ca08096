"""
Correlation Analyzer — the "roof" of the House of Quality.

Turns correlation records into
  * a per-requirement summary (how many partners help / hurt, net impact),
  * a per-pair insight (fixed impact text, score-dependent advice, urgency),
  * the target recommendation that combines priority, difficulty and roof.

Pair advice thresholds compare the sum of the two RAW scores, while the
target recommendation uses normalized priority.  Both are kept as-is.
"""

from __future__ import annotations

import logging

from qfd_engine.models.enums import CorrelationType, ImpactCategory, InsightUrgency
from qfd_engine.models.project import QFDProject
from qfd_engine.models.schemas import (
    TechnicalCorrelation,
    CorrelationImpactSummary,
    CorrelationInsight,
    CorrelationAnalysis,
)
from qfd_engine.engine.rules_config import (
    CorrelationRules,
    UrgencyRules,
    RecommendationRules,
    get_rules,
)
from qfd_engine.engine.scoring import calculate_technical_priorities

logger = logging.getLogger(__name__)


IMPACT_DESCRIPTIONS: dict[CorrelationType, str] = {
    CorrelationType.STRONG_POSITIVE: (
        "Strong synergy: Working on one requirement significantly helps the other. "
        "Combined impact is amplified."
    ),
    CorrelationType.POSITIVE: (
        "Positive synergy: Improvements in one requirement help the other. "
        "Look for combined solutions."
    ),
    CorrelationType.NEGATIVE: (
        "Trade-off exists: Improving one may compromise the other. Balance is needed."
    ),
    CorrelationType.STRONG_NEGATIVE: (
        "Strong trade-off: Significant conflict between requirements. "
        "Careful optimization required."
    ),
}
NO_INTERACTION = "No significant interaction between these requirements."

# (text when the score sum clears the threshold, text otherwise)
PAIR_RECOMMENDATIONS: dict[CorrelationType, tuple[str, str]] = {
    CorrelationType.STRONG_POSITIVE: (
        "HIGH PRIORITY: Focus on solutions that address both requirements "
        "simultaneously for maximum impact.",
        "Consider bundling these requirements in your development approach.",
    ),
    CorrelationType.POSITIVE: (
        "Look for integrated solutions that can improve both requirements together.",
        "Moderate synergy - consider combined approaches when possible.",
    ),
    CorrelationType.NEGATIVE: (
        "CRITICAL: High-priority requirements in conflict. Develop compromise "
        "solutions or phased approach.",
        "Monitor trade-offs carefully during implementation.",
    ),
    CorrelationType.STRONG_NEGATIVE: (
        "URGENT: Strong conflict between important requirements. Consider "
        "alternative approaches or accept trade-offs.",
        "Strong conflict exists - may need to prioritize one over the other.",
    ),
}
INDEPENDENT = "Requirements can be addressed independently."

TARGET_CRITICAL = (
    "CRITICAL: High-priority, difficult target with conflicts. "
    "Consider phased approach or alternative solutions."
)
TARGET_OPPORTUNITY = (
    "OPPORTUNITY: High-priority target with synergies. "
    "Bundle with correlated requirements for efficiency."
)
TARGET_FOCUS = (
    "FOCUS: High-priority but challenging target. "
    "Allocate experienced resources and consider risk mitigation."
)
TARGET_PRIORITY = (
    "PRIORITY: Important target with manageable complexity. "
    "Good candidate for early implementation."
)
TARGET_SYNERGY = "SYNERGY: Consider implementing alongside correlated high-priority requirements."
TARGET_CAUTION = "CAUTION: Monitor trade-offs with other requirements during implementation."
TARGET_STANDARD = "STANDARD: Can be implemented independently with normal resource allocation."


# ── Per-requirement summary ──────────────────────────────

def summarize_correlations(
    correlations: list[TechnicalCorrelation],
    rules: CorrelationRules | None = None,
) -> CorrelationImpactSummary:
    """
    Aggregate the correlation records touching one technical requirement.
    Strong variants count double toward the net impact.
    """
    rules = rules or get_rules().correlation
    counts = {value: 0 for value in CorrelationType}
    for corr in correlations:
        counts[corr.correlation] += 1

    positive = counts[CorrelationType.POSITIVE]
    strong_positive = counts[CorrelationType.STRONG_POSITIVE]
    negative = counts[CorrelationType.NEGATIVE]
    strong_negative = counts[CorrelationType.STRONG_NEGATIVE]
    net = (strong_positive * 2 + positive) - (strong_negative * 2 + negative)

    if not correlations:
        impact = ImpactCategory.ISOLATED
    elif net > rules.synergistic_above:
        impact = ImpactCategory.SYNERGISTIC
    elif net < rules.conflicted_below:
        impact = ImpactCategory.CONFLICTED
    else:
        impact = ImpactCategory.COMPLEX

    return CorrelationImpactSummary(
        total_correlations=len(correlations),
        positive_count=positive + strong_positive,
        negative_count=negative + strong_negative,
        net_impact=net,
        impact=impact,
    )


# ── Per-pair insight ─────────────────────────────────────

def correlation_impact_description(correlation: CorrelationType) -> str:
    return IMPACT_DESCRIPTIONS.get(CorrelationType(correlation), NO_INTERACTION)


def _pair_threshold(correlation: CorrelationType, rules: CorrelationRules) -> int:
    return {
        CorrelationType.STRONG_POSITIVE: rules.strong_positive_total_above,
        CorrelationType.POSITIVE: rules.positive_total_above,
        CorrelationType.NEGATIVE: rules.negative_total_above,
        CorrelationType.STRONG_NEGATIVE: rules.strong_negative_total_above,
    }[correlation]


def correlation_recommendation(
    correlation: CorrelationType,
    score1: int,
    score2: int,
    rules: CorrelationRules | None = None,
) -> str:
    """Advice for a correlated pair; urgent wording once the raw score sum is high."""
    correlation = CorrelationType(correlation)
    if correlation not in PAIR_RECOMMENDATIONS:
        return INDEPENDENT

    rules = rules or get_rules().correlation
    urgent, routine = PAIR_RECOMMENDATIONS[correlation]
    return urgent if score1 + score2 > _pair_threshold(correlation, rules) else routine


def insight_urgency(
    correlation: CorrelationType,
    score1: int,
    score2: int,
    rules: UrgencyRules | None = None,
) -> InsightUrgency:
    """Rank an insight for display: big scores and strong roof cells first."""
    rules = rules or get_rules().urgency
    total = score1 + score2
    strength = abs(int(correlation))

    if total > rules.critical_total_above and strength >= rules.critical_min_strength:
        return InsightUrgency.CRITICAL
    if total > rules.high_total_above and strength >= rules.high_min_strength:
        return InsightUrgency.HIGH
    if total > rules.medium_total_above or strength >= rules.medium_min_strength:
        return InsightUrgency.MEDIUM
    return InsightUrgency.LOW


_URGENCY_ORDER = {
    InsightUrgency.CRITICAL: 0,
    InsightUrgency.HIGH: 1,
    InsightUrgency.MEDIUM: 2,
    InsightUrgency.LOW: 3,
}


def rank_insights(insights: list[CorrelationInsight]) -> list[CorrelationInsight]:
    """Most urgent first; ties keep their record order."""
    return sorted(insights, key=lambda i: _URGENCY_ORDER[i.urgency])


def calculate_correlation_impact(project: QFDProject) -> CorrelationAnalysis:
    """Raw priorities plus one insight per correlation record, in record order."""
    priorities = calculate_technical_priorities(project)
    by_id = {p.id: p for p in priorities}
    requirements = {req.id: req for req in project.technical_requirements}

    insights: list[CorrelationInsight] = []
    for corr in project.technical_correlations:
        req1 = requirements.get(corr.tech_req1_id)
        req2 = requirements.get(corr.tech_req2_id)
        if req1 is None or req2 is None:
            logger.debug(f"Skipping correlation {corr.pair_key}: requirement not in project")
            continue

        score1 = by_id[req1.id].score
        score2 = by_id[req2.id].score
        insights.append(
            CorrelationInsight(
                req1=req1.description,
                req2=req2.description,
                correlation=corr.correlation,
                priority1_score=score1,
                priority2_score=score2,
                impact=correlation_impact_description(corr.correlation),
                recommendation=correlation_recommendation(corr.correlation, score1, score2),
                urgency=insight_urgency(corr.correlation, score1, score2),
            )
        )

    logger.debug(
        f"Built {len(insights)} correlation insights "
        f"from {len(project.technical_correlations)} records"
    )
    return CorrelationAnalysis(priorities=priorities, correlation_insights=insights)


# ── Target recommendation ────────────────────────────────

def target_recommendation(
    normalized_priority: float,
    difficulty: int,
    summary: CorrelationImpactSummary,
    rules: RecommendationRules | None = None,
) -> str:
    """First matching rule wins; order matters."""
    rules = rules or get_rules().recommendation
    is_high_priority = normalized_priority > rules.high_priority_above
    is_high_difficulty = difficulty >= rules.high_difficulty_from
    has_positive = summary.positive_count > 0
    has_negative = summary.negative_count > 0

    if is_high_priority and is_high_difficulty and has_negative:
        return TARGET_CRITICAL
    if is_high_priority and has_positive:
        return TARGET_OPPORTUNITY
    if is_high_priority and is_high_difficulty:
        return TARGET_FOCUS
    if is_high_priority:
        return TARGET_PRIORITY
    if has_positive:
        return TARGET_SYNERGY
    if has_negative:
        return TARGET_CAUTION
    return TARGET_STANDARD
