"""
QFD Analysis Engine — Main Entry Point

Analyse a project snapshot (CLI):
    python -m qfd_engine path/to/project.json
    python -m qfd_engine                # built-in sample project

Run as an API server:
    python -m qfd_engine --serve
    # or: uvicorn qfd_engine.api:app --reload --port 8000

Or import and run programmatically:
    from qfd_engine.main import run
    report = run("path/to/project.json")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from qfd_engine.config import get_settings
from qfd_engine.engine import analyze_project
from qfd_engine.engine.presentation import correlation_symbol
from qfd_engine.models import QFDProject, QFDAnalysisReport, sample_project
from qfd_engine.utils.logger import setup_logging


def load_project(file_path: str) -> QFDProject:
    """Read a JSON snapshot written by QFDProject.model_dump_json()."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Project snapshot not found: {file_path}")
    return QFDProject.model_validate_json(path.read_text(encoding="utf-8"))


def run(file_path: str = "") -> QFDAnalysisReport:
    """Analyse a snapshot file (or the sample project) and log a summary."""
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    if file_path:
        logger.info(f"Loading project snapshot: {file_path}")
        project = load_project(file_path)
    else:
        logger.info("No snapshot given, analysing the sample project")
        project = sample_project()

    report = analyze_project(project)
    _print_summary(report)
    return report


def _print_summary(report: QFDAnalysisReport) -> None:
    """Log a human-readable summary of the analysis."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    logger.info("  QFD ANALYSIS SUMMARY")
    logger.info("-" * 60)
    logger.info(f"  Snapshot:       {report.snapshot_hash}")

    if not report.is_complete:
        logger.info("  Add customer and technical requirements to see priorities.")
        logger.info("-" * 60)
        return

    logger.info(f"  Total Score:    {report.total_score}")
    logger.info("")
    logger.info("  Technical priorities (ranked):")
    for rank, priority in enumerate(report.ranking, start=1):
        logger.info(
            f"    {rank:>2}. {priority.description or priority.id:<30} "
            f"score {priority.score:>4}  weight {priority.relative_weight:5.1f}%"
        )

    logger.info("")
    logger.info("  Target impact (by priority):")
    for impact in report.target_ranking:
        logger.info(
            f"    {impact.description or impact.id} ({impact.target} {impact.unit}) | "
            f"challenge {impact.implementation_challenge.value} | "
            f"importance {impact.strategic_importance.value} | "
            f"roof {impact.correlation_impact.impact.value}"
        )
        logger.info(f"      {impact.recommendation}")

    if report.correlation_insights:
        logger.info("")
        logger.info("  Correlation insights (most urgent first):")
        for insight in report.correlation_insights:
            logger.info(
                f"    [{insight.urgency.value}] {insight.req1} "
                f"{correlation_symbol(insight.correlation)} {insight.req2}"
            )
            logger.info(f"      {insight.recommendation}")

    logger.info("-" * 60)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("qfd_engine.api:app", host=host, port=port, reload=settings.debug)


def cli() -> None:
    """Console entry: `--serve` starts the API, otherwise analyse argv[1] or the sample."""
    if "--serve" in sys.argv:
        serve()
    else:
        file_arg = sys.argv[1] if len(sys.argv) > 1 else ""
        run(file_arg)


if __name__ == "__main__":
    cli()
