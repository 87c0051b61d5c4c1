"""Tests for the ScoringEngine session and the command-line entry point."""

import json
import os
from unittest.mock import patch

import pytest

from venture_scoring import ScoringEngine, assess_risk, recommend, score_reliability
from venture_scoring.config import EngineSettings
from venture_scoring.lifecycle import RISK_TOPOLOGY, ModelLifecycle, parameter_count
from venture_scoring.main import EXIT_INVALID_INPUT, main
from venture_scoring.models import AnalysisMode, RiskLevel
from venture_scoring.tests.conftest import LONG_DESCRIPTION, StubEmbedder


OPPORTUNITY_PAYLOAD = {
    "id": "opp-cli",
    "title": "Cold-chain storage expansion",
    "category": "GOING_CONCERN",
    "industry": "Agriculture",
    "fundingGoal": 50000,
    "description": LONG_DESCRIPTION,
    "entrepreneurReliabilityScore": 85,
    "fundingStage": "GROWTH",
    "minInvestmentAmount": 5000,
    "roiProjectedPercentage": 20,
}

INVESTOR_PAYLOAD = {
    "preferredIndustries": ["Agriculture"],
    "minInvestment": 1000,
    "maxInvestment": 50000,
    "riskTolerance": "LOW",
    "investmentType": ["GOING_CONCERN"],
}


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload))
    return str(path)


class TestScoringEngine:
    def test_session_scores_and_releases_resources(self, perfect_metrics, make_opportunity):
        embedder = StubEmbedder()

        with ScoringEngine(lifecycle=ModelLifecycle(embedder=embedder)) as engine:
            reliability = engine.score_entrepreneur(perfect_metrics)
            risk = engine.assess_opportunity(make_opportunity())

        assert reliability.score == 100
        assert risk.risk_level is RiskLevel.LOW
        assert embedder.closed
        assert not engine.lifecycle.is_initialized

    def test_from_settings_loads_artefacts(self, weights_dir, tmp_path):
        weights_file = tmp_path / "weights.yaml"
        weights_file.write_text("text_risk_blend: 0.5\nstructural_risk_blend: 0.5\n")
        settings = EngineSettings(
            risk_weights_path=str(weights_dir / "risk-assessment" / "weights.bin"),
            scoring_weights_path=str(weights_file),
            parallel_threshold=3,
        )

        engine = ScoringEngine.from_settings(settings)

        assert engine.weights.text_risk_blend == 0.5
        assert engine.lifecycle.risk_network.topology == RISK_TOPOLOGY
        assert engine.lifecycle.has_embedder is False

    def test_recommend_through_engine(self, make_investor, make_opportunity):
        with ScoringEngine() as engine:
            report = engine.recommend_with_report(
                make_investor(), [make_opportunity(id="a"), {"id": "bad"}]
            )

        assert [match.opportunity_id for match in report.recommended_opportunities] == ["a"]
        assert report.skipped == ["bad"]


class TestConvenienceFunctions:
    def test_heuristic_entry_points(self, perfect_metrics, make_opportunity, make_investor):
        assert score_reliability(perfect_metrics).analysis_mode is AnalysisMode.HEURISTIC
        assert assess_risk(make_opportunity()).risk_score == 12
        assert recommend(make_investor(), [make_opportunity()])[0].match_score == 100


class TestCommandLine:
    def test_reliability(self, tmp_path, capsys, clean_env):
        path = _write(
            tmp_path,
            "metrics.json",
            {
                "milestoneUpdateFrequency": 7,
                "profileCompleteness": 100,
                "overdueMilestones": 0,
                "communicationFrequency": 3,
            },
        )

        assert main(["reliability", path]) == 0
        assert json.loads(capsys.readouterr().out)["score"] == 100

    def test_risk(self, tmp_path, capsys, clean_env):
        path = _write(tmp_path, "opportunity.json", OPPORTUNITY_PAYLOAD)

        assert main(["risk", path]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["risk_score"] == 12
        assert output["risk_level"] == "LOW"

    def test_recommend(self, tmp_path, capsys, clean_env):
        path = _write(
            tmp_path,
            "request.json",
            {"investor": INVESTOR_PAYLOAD, "opportunities": [OPPORTUNITY_PAYLOAD, {"id": "junk"}]},
        )

        assert main(["recommend", path]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["recommended_opportunities"][0]["opportunity_id"] == "opp-cli"
        assert output["skipped"] == ["junk"]

    def test_invalid_metrics(self, tmp_path, capsys, clean_env):
        path = _write(tmp_path, "metrics.json", {"profileCompleteness": 150})

        assert main(["reliability", path]) == EXIT_INVALID_INPUT
        assert "invalid input" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, clean_env):
        assert main(["risk", str(tmp_path / "absent.json")]) == EXIT_INVALID_INPUT

    def test_invalid_settings(self, tmp_path):
        path = _write(tmp_path, "opportunity.json", OPPORTUNITY_PAYLOAD)

        with patch.dict(os.environ, {"VENTURE_SCORING_PARALLEL_THRESHOLD": "lots"}, clear=True):
            assert main(["risk", path]) == EXIT_INVALID_INPUT

    def test_generate_weights(self, tmp_path):
        assert main(["generate-weights", str(tmp_path), "--seed", "7"]) == 0

        blob = tmp_path / "risk-assessment" / "weights.bin"
        assert blob.stat().st_size == parameter_count(RISK_TOPOLOGY) * 4
