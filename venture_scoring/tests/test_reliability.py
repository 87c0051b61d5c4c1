"""Tests for entrepreneur reliability scoring."""

from unittest.mock import Mock

import pytest

from venture_scoring.errors import ComputationFailure
from venture_scoring.lifecycle import ModelLifecycle
from venture_scoring.models import ActivityMetrics, AnalysisMode, TextSignal
from venture_scoring.reliability import ReliabilityScorer, normalize_metrics, numerical_score
from venture_scoring.reliability.scorer import FALLBACK_INSIGHT, FALLBACK_RECOMMENDATIONS


def _metrics(**overrides) -> ActivityMetrics:
    defaults = dict(
        milestone_update_frequency=3.5,
        profile_completeness=80,
        overdue_milestones=1,
        communication_frequency=1.5,
    )
    defaults.update(overrides)
    return ActivityMetrics(**defaults)


def _analyzer_returning(score: float, insights=None) -> Mock:
    analyzer = Mock()
    analyzer.analyze.return_value = TextSignal(score=score, insights=insights or [])
    return analyzer


class TestNumericalScore:
    def test_perfect_metrics_score_100(self, perfect_metrics):
        assert numerical_score(perfect_metrics) == pytest.approx(100.0)

    def test_overdue_boundaries(self):
        assert normalize_metrics(_metrics(overdue_milestones=5))[2] == 0.0
        assert normalize_metrics(_metrics(overdue_milestones=9))[2] == 0.0
        assert normalize_metrics(_metrics(overdue_milestones=0))[2] == 1.0

    def test_frequencies_saturate(self):
        frequency, _, _, communication = normalize_metrics(
            _metrics(milestone_update_frequency=21, communication_frequency=10)
        )
        assert frequency == 1.0
        assert communication == 1.0

    def test_weighted_sum(self):
        # 0.5*0.30 + 0.8*0.25 + 0.8*0.25 + 0.5*0.20 = 0.65
        assert numerical_score(_metrics()) == pytest.approx(65.0)


class TestReliabilityScorer:
    def test_scenario_perfect_profile_without_notes(self, perfect_metrics):
        result = ReliabilityScorer().score(perfect_metrics)

        assert result.score == 100
        assert "Excellent profile completeness demonstrates commitment" in result.insights
        assert result.recommendations == [
            "Excellent reliability! Consider mentoring other entrepreneurs"
        ]
        assert result.analysis_mode is AnalysisMode.HEURISTIC

    def test_without_notes_text_term_is_dropped(self):
        analyzer = _analyzer_returning(0)

        result = ReliabilityScorer(text_analyzer=analyzer).score(_metrics())

        assert result.score == 65
        analyzer.analyze.assert_not_called()

    def test_with_notes_blends_text_score(self):
        analyzer = _analyzer_returning(35, ["Progress notes indicate challenges"])
        metrics = _metrics(progress_notes=["Shipment delayed"])

        result = ReliabilityScorer(text_analyzer=analyzer).score(metrics)

        # 0.7*65 + 0.3*35 = 56
        assert result.score == 56
        assert result.insights[-1] == "Progress notes indicate challenges"
        analyzer.analyze.assert_called_once_with(("Shipment delayed",))

    def test_insight_rules(self):
        result = ReliabilityScorer().score(
            _metrics(profile_completeness=50, milestone_update_frequency=1, overdue_milestones=3)
        )

        assert result.insights == [
            "Profile completion needs attention for better credibility",
            "More frequent milestone updates would improve transparency",
            "Multiple overdue milestones may concern investors",
        ]

    def test_recommendation_rules_for_low_score(self):
        result = ReliabilityScorer().score(
            _metrics(
                profile_completeness=20,
                milestone_update_frequency=0,
                overdue_milestones=4,
                communication_frequency=0,
            )
        )

        assert result.score < 60
        assert result.recommendations == [
            "Focus on completing your profile to build trust",
            "Provide more frequent project updates",
            "Address overdue milestones immediately",
            "Set more realistic milestone timelines",
            "Increase communication with stakeholders",
        ]

    def test_score_always_in_range(self):
        scorer = ReliabilityScorer()
        for overdue in (0, 2, 5, 50):
            for completeness in (0, 55, 100):
                result = scorer.score(
                    _metrics(overdue_milestones=overdue, profile_completeness=completeness)
                )
                assert 0 <= result.score <= 100

    def test_idempotent(self):
        scorer = ReliabilityScorer()
        metrics = _metrics(progress_notes=["Completed tooling", "Supplier issue"])

        assert scorer.score(metrics) == scorer.score(metrics)

    def test_fallback_when_text_analysis_raises(self):
        analyzer = Mock()
        analyzer.analyze.side_effect = RuntimeError("tokenizer crashed")
        metrics = _metrics(progress_notes=["anything"])

        result = ReliabilityScorer(text_analyzer=analyzer).score(metrics)

        assert result.score == 65
        assert result.insights == [FALLBACK_INSIGHT]
        assert result.recommendations == FALLBACK_RECOMMENDATIONS
        assert result.is_fallback

    def test_network_estimate_is_advisory(self, weights_dir, perfect_metrics):
        lifecycle = ModelLifecycle(
            reliability_weights_path=str(weights_dir / "reliability" / "weights.bin")
        )

        result = ReliabilityScorer(lifecycle=lifecycle).score(perfect_metrics)

        assert result.score == 100
        assert result.model_estimate is not None
        assert 0 <= result.model_estimate <= 100
        assert result.analysis_mode is AnalysisMode.MODEL

    def test_failing_network_is_ignored(self, perfect_metrics):
        lifecycle = Mock()
        lifecycle.reliability_network.predict.side_effect = ComputationFailure("NaN output")

        result = ReliabilityScorer(text_analyzer=Mock(), lifecycle=lifecycle).score(perfect_metrics)

        assert result.score == 100
        assert result.model_estimate is None
        assert result.analysis_mode is AnalysisMode.HEURISTIC

    def test_accepts_unvalidated_mapping(self):
        result = ReliabilityScorer().score(
            {
                "milestoneUpdateFrequency": 7,
                "profileCompleteness": 100,
                "overdueMilestones": 0,
                "communicationFrequency": 3,
            }
        )

        assert result.score == 100

    @pytest.mark.parametrize("payload", [{"profileCompleteness": 80}, None])
    def test_invalid_input_gets_neutral_fallback(self, payload):
        result = ReliabilityScorer().score(payload)

        assert result.score == 50
        assert result.insights == [FALLBACK_INSIGHT]
        assert result.is_fallback


def test_camel_case_aliases_accepted():
    metrics = ActivityMetrics.model_validate(
        {
            "milestoneUpdateFrequency": 2,
            "profileCompleteness": 75,
            "overdueMilestones": 0,
            "communicationFrequency": 2,
            "progressNotes": ["Completed"],
        }
    )

    assert metrics.milestone_update_frequency == 2
    assert metrics.progress_notes == ("Completed",)


@pytest.mark.parametrize(
    "field,value",
    [("profile_completeness", 120), ("overdue_milestones", -1), ("communication_frequency", -0.5)],
)
def test_invalid_metrics_rejected_at_boundary(field, value):
    with pytest.raises(ValueError):
        _metrics(**{field: value})
