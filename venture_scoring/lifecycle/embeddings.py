"""Text embedding backends.

The engine only needs "given a list of strings, return one fixed-length
vector representing their aggregate meaning". Anything with an ``encode``
method of that shape can be injected into ModelLifecycle.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "sentence-transformers/all-MiniLM-L6-v2"


@runtime_checkable
class Embedder(Protocol):
    def encode(self, texts: list[str]) -> np.ndarray:
        """Return a single 1-D vector for the given texts."""
        ...


class SentenceTransformerEmbedder:
    """Embeds text with a sentence-transformers model loaded on first use."""

    def __init__(self, model_name: str = DEFAULT_MODEL_NAME):
        self._model_name = model_name
        self._model = None

    @property
    def model_name(self) -> str:
        return self._model_name

    def load(self) -> None:
        if self._model is not None:
            return
        try:
            from sentence_transformers import SentenceTransformer
        except ImportError:
            logger.error(
                "sentence-transformers not installed. "
                "Install with: pip install 'venture-scoring[embeddings]'"
            )
            raise
        self._model = SentenceTransformer(self._model_name)
        logger.info("Loaded embedding model: %s", self._model_name)

    def encode(self, texts: list[str]) -> np.ndarray:
        """Encode texts and mean-pool them into one normalized vector."""
        self.load()
        vectors = self._model.encode(
            texts,
            batch_size=32,
            show_progress_bar=False,
            normalize_embeddings=True,
        )
        pooled = np.asarray(vectors, dtype=np.float32).mean(axis=0)
        norm = float(np.linalg.norm(pooled))
        return pooled / norm if norm > 0 else pooled

    def close(self) -> None:
        self._model = None
