"""
Value records for the House of Quality and the derived analysis outputs.

Input records (requirements, relationships, correlations) are validated and
frozen on construction; callers that build them successfully can hand them to
the engine without further checks.  Derived records are produced fresh by the
engine on every call and never stored.
"""

from __future__ import annotations

import uuid
from typing import Annotated, Any

from pydantic import BaseModel, Field, model_validator

from .enums import (
    RelationshipStrength,
    CorrelationType,
    LevelBand,
    ImpactCategory,
    InsightUrgency,
)

Rating = Annotated[int, Field(ge=1, le=5)]


def generate_id() -> str:
    """Short random identifier for new requirements."""
    return uuid.uuid4().hex[:9]


# ── House of Quality inputs ──────────────────────────────


class CustomerRequirement(BaseModel):
    """A customer-voiced need with its importance and competitor benchmark."""
    id: str = Field(default_factory=generate_id)
    description: str = ""
    importance: Rating = 3
    competitor_ratings: list[Rating] = []  # one per competitor, project order

    model_config = {"frozen": True}


class TechnicalRequirement(BaseModel):
    """A measurable engineering characteristic."""
    id: str = Field(default_factory=generate_id)
    description: str = ""
    unit: str = ""
    target: str = ""  # free text, e.g. "<200"
    difficulty: Rating = 3

    model_config = {"frozen": True}


class Relationship(BaseModel):
    """Strength with which a technical requirement serves a customer requirement."""
    customer_req_id: str
    technical_req_id: str
    strength: RelationshipStrength = RelationshipStrength.NONE

    model_config = {"frozen": True}

    @property
    def key(self) -> tuple[str, str]:
        return (self.customer_req_id, self.technical_req_id)


class TechnicalCorrelation(BaseModel):
    """
    Signed interaction between two technical requirements.

    The pair is unordered: ids are stored smaller-first so (a, b) and (b, a)
    build the same record.
    """
    tech_req1_id: str
    tech_req2_id: str
    correlation: CorrelationType = CorrelationType.NONE

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _canonical_order(cls, data: Any) -> Any:
        if isinstance(data, dict):
            first = data.get("tech_req1_id")
            second = data.get("tech_req2_id")
            if isinstance(first, str) and isinstance(second, str) and second < first:
                data = {**data, "tech_req1_id": second, "tech_req2_id": first}
        return data

    @model_validator(mode="after")
    def _no_self_correlation(self) -> "TechnicalCorrelation":
        if self.tech_req1_id == self.tech_req2_id:
            raise ValueError(
                f"Technical requirement '{self.tech_req1_id}' cannot correlate with itself"
            )
        return self

    @property
    def pair_key(self) -> tuple[str, str]:
        return (self.tech_req1_id, self.tech_req2_id)

    def involves(self, requirement_id: str) -> bool:
        return requirement_id in self.pair_key

    def partner_of(self, requirement_id: str) -> str:
        """The other end of the pair, seen from *requirement_id*."""
        if requirement_id == self.tech_req1_id:
            return self.tech_req2_id
        return self.tech_req1_id


# ── Scoring outputs ──────────────────────────────────────


class TechnicalPriority(BaseModel):
    """Raw importance-weighted score of one technical requirement."""
    id: str
    description: str = ""
    score: int = Field(default=0, ge=0)
    relative_weight: float = 0.0  # percent of the total score, 0 until normalized

    model_config = {"frozen": True}


# ── Correlation outputs ──────────────────────────────────


class CorrelationImpactSummary(BaseModel):
    total_correlations: int = 0
    positive_count: int = 0  # positive + strong positive partners
    negative_count: int = 0  # negative + strong negative partners
    net_impact: int = 0
    impact: ImpactCategory = ImpactCategory.ISOLATED


class CorrelationInsight(BaseModel):
    """Impact and advice for one correlated pair of technical requirements."""
    req1: str
    req2: str
    correlation: CorrelationType
    priority1_score: int = 0
    priority2_score: int = 0
    impact: str = ""
    recommendation: str = ""
    urgency: InsightUrgency = InsightUrgency.LOW


class CorrelationAnalysis(BaseModel):
    priorities: list[TechnicalPriority] = []
    correlation_insights: list[CorrelationInsight] = []


# ── Target impact ────────────────────────────────────────


class TargetImpactAnalysis(BaseModel):
    """Everything the engine says about one technical requirement's target."""
    id: str
    description: str = ""
    target: str = ""
    unit: str = ""
    difficulty: int = 3
    priority_score: int = 0
    normalized_priority: float = 0.0  # percent of the maximum score
    implementation_challenge: LevelBand = LevelBand.LOW
    strategic_importance: LevelBand = LevelBand.LOW
    correlation_impact: CorrelationImpactSummary = Field(
        default_factory=CorrelationImpactSummary
    )
    recommendation: str = ""


class QFDAnalysisReport(BaseModel):
    """Complete analysis of one project snapshot."""
    snapshot_hash: str = ""
    is_complete: bool = False  # False when either requirement list is empty
    total_score: int = 0
    max_score: int = 0
    priorities: list[TechnicalPriority] = []  # input order, weights normalized
    ranking: list[TechnicalPriority] = []  # descending score
    target_impacts: list[TargetImpactAnalysis] = []  # requirement order
    target_ranking: list[TargetImpactAnalysis] = []  # descending priority score
    correlation_insights: list[CorrelationInsight] = []  # most urgent first
