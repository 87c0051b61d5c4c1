"""ModelLifecycle - owns the heavyweight resources used during scoring.

Lazy, idempotent, thread-safe initialization. Any failure is recorded and
leaves the lifecycle in heuristic mode; scoring never waits on a broken
resource and never sees the exception.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Optional, Sequence

import numpy as np

from ..errors import InitializationFailure
from .embeddings import Embedder
from .networks import RELIABILITY_TOPOLOGY, RISK_TOPOLOGY, FeedForwardNetwork

logger = logging.getLogger(__name__)


class ModelLifecycle:
    """Explicitly owned holder for the embedder and optional weight networks.

    Pass one instance to every component that needs embeddings; tests can
    inject a stub embedder instead of a real model.
    """

    def __init__(
        self,
        embedder: Optional[Embedder] = None,
        reliability_weights_path: Optional[str] = None,
        risk_weights_path: Optional[str] = None,
    ):
        self._embedder_source = embedder
        self._reliability_path = reliability_weights_path
        self._risk_path = risk_weights_path

        self._embedder: Optional[Embedder] = None
        self._reliability_network: Optional[FeedForwardNetwork] = None
        self._risk_network: Optional[FeedForwardNetwork] = None
        self._initialized = False
        self._lock = Lock()
        self.initialization_error: Optional[InitializationFailure] = None
        self.initialization_count = 0

    # ------------------------------------------------------------------
    # Lazy loading
    # ------------------------------------------------------------------

    def ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            self._initialize()
            self._initialized = True

    def _initialize(self) -> None:
        self.initialization_count += 1
        self.initialization_error = None

        if self._embedder_source is not None:
            try:
                load = getattr(self._embedder_source, "load", None)
                if callable(load):
                    load()
                self._embedder = self._embedder_source
            except Exception as exc:
                self._record_failure("embedder", exc)

        if self._reliability_path:
            self._reliability_network = self._load_network(
                "reliability", self._reliability_path, RELIABILITY_TOPOLOGY
            )
        if self._risk_path:
            self._risk_network = self._load_network("risk", self._risk_path, RISK_TOPOLOGY)

        logger.info(
            "lifecycle_initialized embedder=%s reliability_network=%s risk_network=%s",
            self._embedder is not None,
            self._reliability_network is not None,
            self._risk_network is not None,
        )

    def _load_network(
        self, name: str, path: str, topology: Sequence[int]
    ) -> Optional[FeedForwardNetwork]:
        try:
            return FeedForwardNetwork.load(path, topology)
        except Exception as exc:
            self._record_failure(f"{name} network", exc)
            return None

    def _record_failure(self, resource: str, exc: Exception) -> None:
        failure = exc if isinstance(exc, InitializationFailure) else InitializationFailure(
            f"{resource} failed to load: {exc}"
        )
        self.initialization_error = failure
        logger.warning("Falling back to heuristics, %s unavailable: %s", resource, exc)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def has_embedder(self) -> bool:
        self.ensure_initialized()
        return self._embedder is not None

    @property
    def reliability_network(self) -> Optional[FeedForwardNetwork]:
        self.ensure_initialized()
        return self._reliability_network

    @property
    def risk_network(self) -> Optional[FeedForwardNetwork]:
        self.ensure_initialized()
        return self._risk_network

    def embed(self, texts: list[str]) -> Optional[np.ndarray]:
        """Embed texts into one vector, or None when no embedder is usable."""
        self.ensure_initialized()
        if self._embedder is None:
            return None
        try:
            vector = np.asarray(self._embedder.encode(texts), dtype=np.float32).ravel()
        except Exception as exc:
            logger.warning("Embedding failed, continuing without it: %s", exc)
            return None
        return vector if vector.size else None

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        with self._lock:
            if self._embedder is not None:
                close = getattr(self._embedder, "close", None)
                if callable(close):
                    close()
            self._embedder = None
            self._reliability_network = None
            self._risk_network = None
            self._initialized = False
        logger.info("lifecycle_disposed")

    def __enter__(self) -> "ModelLifecycle":
        self.ensure_initialized()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
