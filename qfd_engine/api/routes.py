"""
API routes — thin HTTP layer over the engine.

Every analysis route takes a full project snapshot in the body and returns
freshly computed results; nothing is stored between requests.

Routes:
  GET  /health                   → API health check
  GET  /api/qfd/sample           → Demo project snapshot
  GET  /api/qfd/legend           → Symbols and colors for cells and bands
  POST /api/qfd/priorities       → Raw scores with relative weights
  POST /api/qfd/target-impact    → Target impact analysis per technical requirement
  POST /api/qfd/correlations     → Raw priorities + pairwise correlation insights
  POST /api/qfd/analysis         → Full report
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter

from qfd_engine.config import get_settings
from qfd_engine.engine import (
    calculate_technical_priorities,
    normalize_weights,
    calculate_target_impact,
    calculate_correlation_impact,
    analyze_project,
)
from qfd_engine.engine.presentation import legend
from qfd_engine.models import (
    QFDProject,
    TechnicalPriority,
    TargetImpactAnalysis,
    CorrelationAnalysis,
    QFDAnalysisReport,
    sample_project,
)

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
qfd_router = APIRouter()


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check() -> dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Reference data ───────────────────────────────────────

@qfd_router.get("/sample", response_model=QFDProject)
async def get_sample_project() -> QFDProject:
    return sample_project()


@qfd_router.get("/legend")
async def get_legend() -> dict[str, Any]:
    return legend()


# ── Analysis ─────────────────────────────────────────────

@qfd_router.post("/priorities", response_model=list[TechnicalPriority])
async def priorities(project: QFDProject) -> list[TechnicalPriority]:
    return normalize_weights(calculate_technical_priorities(project))


@qfd_router.post("/target-impact", response_model=list[TargetImpactAnalysis])
async def target_impact(project: QFDProject) -> list[TargetImpactAnalysis]:
    return calculate_target_impact(project)


@qfd_router.post("/correlations", response_model=CorrelationAnalysis)
async def correlations(project: QFDProject) -> CorrelationAnalysis:
    return calculate_correlation_impact(project)


@qfd_router.post("/analysis", response_model=QFDAnalysisReport)
async def analysis(project: QFDProject) -> QFDAnalysisReport:
    report = analyze_project(project)
    logger.info(
        f"Analysis {report.snapshot_hash}: "
        f"{len(report.target_impacts)} targets, "
        f"{len(report.correlation_insights)} insights"
    )
    return report
