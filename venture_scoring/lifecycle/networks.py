"""Small dense networks loaded from header-free float32 weight blobs.

Blob layout: for each layer, the weight matrix (``inputs x outputs``,
row-major) followed by the bias vector, all little-endian float32.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from ..errors import ComputationFailure, InitializationFailure

logger = logging.getLogger(__name__)

RELIABILITY_TOPOLOGY = (4, 16, 8, 1)
RISK_TOPOLOGY = (6, 20, 12, 3)

RELIABILITY_BLOB = "reliability/weights.bin"
RISK_BLOB = "risk-assessment/weights.bin"


def parameter_count(topology: Sequence[int]) -> int:
    return sum(n_in * n_out + n_out for n_in, n_out in zip(topology[:-1], topology[1:]))


class FeedForwardNetwork:
    """ReLU hidden layers; the output head is sigmoid (1 unit) or softmax (>1 units)."""

    def __init__(self, topology: Sequence[int], layers: list[tuple[np.ndarray, np.ndarray]]):
        self.topology = tuple(topology)
        self._layers = layers

    @classmethod
    def from_blob(cls, blob: bytes, topology: Sequence[int]) -> "FeedForwardNetwork":
        expected = parameter_count(topology)
        params = np.frombuffer(blob, dtype="<f4")
        if params.size != expected or len(blob) % 4:
            raise InitializationFailure(
                f"Weight blob holds {len(blob)} bytes, topology {tuple(topology)} "
                f"needs {expected * 4}"
            )

        layers = []
        offset = 0
        for n_in, n_out in zip(topology[:-1], topology[1:]):
            weights = params[offset:offset + n_in * n_out].reshape(n_in, n_out)
            offset += n_in * n_out
            bias = params[offset:offset + n_out]
            offset += n_out
            layers.append((weights.astype(np.float64), bias.astype(np.float64)))
        return cls(topology, layers)

    @classmethod
    def load(cls, path: Path | str, topology: Sequence[int]) -> "FeedForwardNetwork":
        path = Path(path)
        if not path.exists():
            raise InitializationFailure(f"Weight blob not found: {path}")
        network = cls.from_blob(path.read_bytes(), topology)
        logger.info("Loaded network %s from %s", network.topology, path)
        return network

    def predict(self, features: Sequence[float]) -> np.ndarray:
        x = np.asarray(features, dtype=np.float64)
        if x.shape != (self.topology[0],):
            raise ComputationFailure(f"Expected {self.topology[0]} features, got shape {x.shape}")

        for weights, bias in self._layers[:-1]:
            x = np.maximum(x @ weights + bias, 0.0)

        weights, bias = self._layers[-1]
        logits = x @ weights + bias
        if not np.all(np.isfinite(logits)):
            raise ComputationFailure("Network produced non-finite outputs")
        if logits.size == 1:
            return 1.0 / (1.0 + np.exp(-logits))
        exp = np.exp(logits - logits.max())
        return exp / exp.sum()


def write_synthetic_weights(directory: Path | str, seed: int = 0) -> dict[str, Path]:
    """Write small random weights for both networks (demo artefacts, not trained)."""
    directory = Path(directory)
    rng = np.random.default_rng(seed)
    written = {}
    for name, relative, topology in (
        ("reliability", RELIABILITY_BLOB, RELIABILITY_TOPOLOGY),
        ("risk", RISK_BLOB, RISK_TOPOLOGY),
    ):
        path = directory / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        params = ((rng.random(parameter_count(topology)) - 0.5) * 0.2).astype("<f4")
        path.write_bytes(params.tobytes())
        written[name] = path
    return written
