"""Tests for engine settings and scoring weights."""

import json
import os
from unittest.mock import patch

import pytest

from venture_scoring.config import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    load_settings,
    load_weights,
    save_weights,
)


class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()

        assert settings.enable_embeddings is False
        assert settings.parallel_threshold == 25
        assert settings.reliability_weights_path is None

    def test_env_overrides(self):
        env = {
            "VENTURE_SCORING_ENABLE_EMBEDDINGS": "true",
            "VENTURE_SCORING_PARALLEL_THRESHOLD": "50",
            "VENTURE_SCORING_RISK_WEIGHTS_PATH": "/models/risk-assessment/weights.bin",
            "VENTURE_SCORING_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        assert settings.enable_embeddings is True
        assert settings.parallel_threshold == 50
        assert settings.risk_weights_path == "/models/risk-assessment/weights.bin"
        assert settings.log_level == "DEBUG"

    def test_invalid_value_names_variable(self):
        with patch.dict(os.environ, {"VENTURE_SCORING_MAX_WORKERS": "many"}, clear=True):
            with pytest.raises(ValueError) as exc_info:
                load_settings()

        assert "VENTURE_SCORING_MAX_WORKERS" in str(exc_info.value)


class TestScoringWeights:
    def test_defaults_match_documented_formulas(self):
        assert DEFAULT_WEIGHTS.update_frequency == 0.30
        assert DEFAULT_WEIGHTS.communication == 0.20
        assert DEFAULT_WEIGHTS.numeric_blend == 0.7
        assert DEFAULT_WEIGHTS.structural_risk_blend == 0.6

    def test_group_must_sum_to_one(self):
        with pytest.raises(ValueError):
            ScoringWeights(numeric_blend=0.8, text_blend=0.3)

    def test_weight_range(self):
        with pytest.raises(ValueError):
            ScoringWeights(text_risk_blend=1.4, structural_risk_blend=-0.4)

    def test_json_round_trip(self, tmp_path):
        custom = ScoringWeights(text_risk_blend=0.5, structural_risk_blend=0.5, version="even-risk")
        path = tmp_path / "weights.json"

        save_weights(custom, str(path))

        assert json.loads(path.read_text())["version"] == "even-risk"
        assert load_weights(str(path)) == custom

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "weights.yaml"
        path.write_text("numeric_blend: 0.6\ntext_blend: 0.4\nversion: notes-heavy\n")

        weights = load_weights(str(path))

        assert weights.text_blend == 0.4
        assert weights.update_frequency == 0.30

    def test_missing_and_unsupported_files(self, tmp_path):
        assert load_weights(None) is DEFAULT_WEIGHTS
        with pytest.raises(FileNotFoundError):
            load_weights(str(tmp_path / "nope.json"))

        bad = tmp_path / "weights.toml"
        bad.write_text("x = 1")
        with pytest.raises(ValueError):
            load_weights(str(bad))

    def test_empty_yaml_keeps_defaults(self, tmp_path):
        path = tmp_path / "weights.YML"
        path.write_text("")

        assert load_weights(str(path)) == DEFAULT_WEIGHTS

    def test_yaml_save_keeps_group_order(self, tmp_path):
        path = tmp_path / "weights.yaml"

        save_weights(DEFAULT_WEIGHTS, str(path))

        lines = path.read_text().splitlines()
        assert lines[0] == "update_frequency: 0.3"
        assert lines[-1] == "version: '1.0'"
        assert load_weights(str(path)) == DEFAULT_WEIGHTS
