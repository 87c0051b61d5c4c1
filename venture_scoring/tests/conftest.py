"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from venture_scoring.lifecycle import (
    RELIABILITY_TOPOLOGY,
    RISK_TOPOLOGY,
    parameter_count,
)
from venture_scoring.models import ActivityMetrics, InvestorProfile, OpportunityFeatures

LONG_DESCRIPTION = (
    "We run an established cold-chain storage cooperative serving four hundred "
    "smallholder farms. The expansion adds two solar-powered units to a proven "
    "design already operating for three seasons, with signed offtake agreements "
    "from regional retailers and a maintenance contract in place."
)


class StubEmbedder:
    """Deterministic embedder returning a vector of ones."""

    def __init__(self, dim: int = 4, fail_on_load: bool = False, fail_on_encode: bool = False):
        self.dim = dim
        self.fail_on_load = fail_on_load
        self.fail_on_encode = fail_on_encode
        self.load_calls = 0
        self.encode_calls = 0
        self.closed = False

    def load(self):
        self.load_calls += 1
        if self.fail_on_load:
            raise RuntimeError("model download failed")

    def encode(self, texts):
        self.encode_calls += 1
        if self.fail_on_encode:
            raise RuntimeError("backend unavailable")
        return np.ones(self.dim, dtype=np.float32)

    def close(self):
        self.closed = True


@pytest.fixture
def stub_embedder():
    return StubEmbedder()


@pytest.fixture
def perfect_metrics():
    return ActivityMetrics(
        milestone_update_frequency=7,
        profile_completeness=100,
        overdue_milestones=0,
        communication_frequency=3,
    )


@pytest.fixture
def make_opportunity():
    """Factory for OpportunityFeatures with low-risk defaults (risk level LOW)."""

    def _make(**overrides) -> OpportunityFeatures:
        defaults = dict(
            id="opp-001",
            title="Cold-chain storage expansion",
            category="GOING_CONCERN",
            industry="Agriculture",
            funding_goal=50_000,
            description=LONG_DESCRIPTION,
            entrepreneur_reliability_score=85,
            funding_stage="GROWTH",
            min_investment_amount=5_000,
            roi_projected_percentage=20,
        )
        defaults.update(overrides)
        return OpportunityFeatures(**defaults)

    return _make


@pytest.fixture
def make_investor():
    def _make(**overrides) -> InvestorProfile:
        defaults = dict(
            preferred_industries=["Agriculture"],
            min_investment=1_000,
            max_investment=50_000,
            risk_tolerance="LOW",
            investment_type=["GOING_CONCERN"],
        )
        defaults.update(overrides)
        return InvestorProfile(**defaults)

    return _make


@pytest.fixture
def weights_dir(tmp_path):
    """Directory holding valid reliability and risk blobs."""
    rng = np.random.default_rng(42)
    for relative, topology in (
        ("reliability/weights.bin", RELIABILITY_TOPOLOGY),
        ("risk-assessment/weights.bin", RISK_TOPOLOGY),
    ):
        path = tmp_path / relative
        path.parent.mkdir(parents=True)
        params = (rng.random(parameter_count(topology)) - 0.5).astype("<f4")
        path.write_bytes(params.tobytes())
    return tmp_path
