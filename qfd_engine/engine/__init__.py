"""
QFD scoring and classification engine.

Pure functions over a QFDProject snapshot:
  scoring        → raw scores, relative weights, normalized priority
  classification → implementation challenge / strategic importance bands
  correlation    → roof summaries, pair insights, target recommendations
  analysis       → target impact per requirement and the full report
  presentation   → display symbols and colors
"""

from qfd_engine.engine.scoring import calculate_technical_priorities, normalize_weights
from qfd_engine.engine.classification import implementation_challenge, strategic_importance
from qfd_engine.engine.correlation import calculate_correlation_impact, rank_insights
from qfd_engine.engine.analysis import calculate_target_impact, rank_target_impacts, analyze_project

__all__ = [
    "calculate_technical_priorities",
    "normalize_weights",
    "implementation_challenge",
    "strategic_importance",
    "calculate_correlation_impact",
    "rank_insights",
    "calculate_target_impact",
    "rank_target_impacts",
    "analyze_project",
]
