"""Engine settings and scoring weights."""

from .config import EngineSettings, load_settings, validate_settings
from .weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights, save_weights

__all__ = [
    "DEFAULT_WEIGHTS",
    "EngineSettings",
    "ScoringWeights",
    "load_settings",
    "load_weights",
    "save_weights",
    "validate_settings",
]
