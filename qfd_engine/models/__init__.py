from .enums import (
    RelationshipStrength,
    CorrelationType,
    LevelBand,
    ImpactCategory,
    InsightUrgency,
)
from .schemas import (
    CustomerRequirement,
    TechnicalRequirement,
    Relationship,
    TechnicalCorrelation,
    TechnicalPriority,
    CorrelationImpactSummary,
    CorrelationInsight,
    CorrelationAnalysis,
    TargetImpactAnalysis,
    QFDAnalysisReport,
)
from .project import QFDProject, sample_project

__all__ = [
    "RelationshipStrength",
    "CorrelationType",
    "LevelBand",
    "ImpactCategory",
    "InsightUrgency",
    "CustomerRequirement",
    "TechnicalRequirement",
    "Relationship",
    "TechnicalCorrelation",
    "TechnicalPriority",
    "CorrelationImpactSummary",
    "CorrelationInsight",
    "CorrelationAnalysis",
    "TargetImpactAnalysis",
    "QFDAnalysisReport",
    "QFDProject",
    "sample_project",
]
