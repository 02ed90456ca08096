"""
Tests: CLI entry points (snapshot loading and the run summary).

Run with:
    pytest qfd_engine/tests/test_main.py -v
"""

import logging

import pytest
from pydantic import ValidationError

from qfd_engine.main import load_project, run
from qfd_engine.models import QFDAnalysisReport, RelationshipStrength, sample_project


class TestLoadProject:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_project(str(tmp_path / "missing.json"))

    def test_round_trips_dumped_snapshot(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(sample_project().model_dump_json(), encoding="utf-8")
        assert load_project(str(path)) == sample_project()

    def test_invalid_snapshot_rejected(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"competitor_names": ["A"], "customer_requirements": [{"importance": 9}]}')
        with pytest.raises(ValidationError):
            load_project(str(path))


class TestRun:
    def test_sample_project(self):
        report = run()
        assert isinstance(report, QFDAnalysisReport)
        assert report.total_score == 141
        assert report.ranking[0].id == "tech1"

    def test_snapshot_file(self, tmp_path):
        project = sample_project().set_relationship("cust3", "tech1", RelationshipStrength.WEAK)
        path = tmp_path / "p.json"
        path.write_text(project.model_dump_json(), encoding="utf-8")
        report = run(str(path))
        assert report.total_score == 146

    def test_missing_snapshot_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run(str(tmp_path / "missing.json"))

    def test_summary_lists_critical_insight_first(self, caplog):
        with caplog.at_level(logging.INFO, logger="qfd_engine.main"):
            run()
        lines = [r.getMessage() for r in caplog.records if r.name == "qfd_engine.main"]
        tagged = [line for line in lines if line.strip().startswith("[")]
        assert tagged[0].strip().startswith("[critical]")
