"""Model resources: embeddings, weight networks and their lifecycle."""

from .embeddings import Embedder, SentenceTransformerEmbedder
from .model_lifecycle import ModelLifecycle
from .networks import (
    RELIABILITY_TOPOLOGY,
    RISK_TOPOLOGY,
    FeedForwardNetwork,
    parameter_count,
    write_synthetic_weights,
)

__all__ = [
    "Embedder",
    "FeedForwardNetwork",
    "ModelLifecycle",
    "RELIABILITY_TOPOLOGY",
    "RISK_TOPOLOGY",
    "SentenceTransformerEmbedder",
    "parameter_count",
    "write_synthetic_weights",
]
