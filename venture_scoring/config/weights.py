"""Scoring weight configuration system.

Externalizes the blend weights of the reliability and risk formulas so they
can be tuned without code changes.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

WEIGHT_FIELDS = (
    "update_frequency",
    "profile_completeness",
    "overdue_milestones",
    "communication",
    "numeric_blend",
    "text_blend",
    "text_risk_blend",
    "structural_risk_blend",
)


class ScoringWeights(BaseModel):
    """Configurable weights for the reliability and risk formulas.

    Three groups, each must sum to 1.0:
    - reliability components (update frequency, completeness, overdue, communication)
    - reliability blend (numerical vs. text score, used only when notes exist)
    - risk blend (text risk vs. structural risk)
    """

    update_frequency: float = 0.30
    profile_completeness: float = 0.25
    overdue_milestones: float = 0.25
    communication: float = 0.20

    numeric_blend: float = 0.7
    text_blend: float = 0.3

    text_risk_blend: float = 0.4
    structural_risk_blend: float = 0.6

    version: str = "1.0"

    @field_validator(*WEIGHT_FIELDS)
    @classmethod
    def weight_range(cls, v: float) -> float:
        """Ensure weights are between 0 and 1."""
        if not 0 <= v <= 1:
            raise ValueError(f"Weight must be between 0 and 1, got {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Validate that every weight group sums to 1.0."""
        groups = {
            "reliability components": (
                self.update_frequency,
                self.profile_completeness,
                self.overdue_milestones,
                self.communication,
            ),
            "reliability blend": (self.numeric_blend, self.text_blend),
            "risk blend": (self.text_risk_blend, self.structural_risk_blend),
        }
        for name, values in groups.items():
            total = sum(values)
            if abs(total - 1.0) > 0.001:
                raise ValueError(f"Weights in {name} must sum to 1.0, got {total:.3f} {values}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {name: getattr(self, name) for name in WEIGHT_FIELDS}
        data["version"] = self.version
        return data


# Weights of the documented reliability and risk formulas
DEFAULT_WEIGHTS = ScoringWeights()


def load_weights(filepath: Optional[str] = None) -> ScoringWeights:
    """Read a tuned ScoringWeights override, or the formula defaults when unset.

    The file may list only the groups it changes; omitted weights keep their
    defaults, and each group is re-checked to sum to 1.0.
    """
    if not filepath:
        return DEFAULT_WEIGHTS

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Scoring weights override missing: {path}")

    loader = _LOADERS.get(path.suffix.lower())
    if loader is None:
        raise ValueError(
            f"Cannot read scoring weights from {path.name}: expected one of {sorted(_LOADERS)}"
        )

    data = loader(path.read_text(encoding="utf-8")) or {}
    logger.info("Loaded scoring weights version=%s from %s", data.get("version", "1.0"), path)
    return ScoringWeights(**data)


def save_weights(weights: ScoringWeights, filepath: str) -> None:
    """Write all three weight groups and the version tag; the suffix picks JSON or YAML."""
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".json":
        text = json.dumps(weights.to_dict(), indent=2)
    elif suffix in (".yaml", ".yml"):
        text = yaml.safe_dump(weights.to_dict(), sort_keys=False)
    else:
        raise ValueError(f"Cannot write scoring weights to {path.name}: use .json, .yaml or .yml")
    path.write_text(text, encoding="utf-8")


_LOADERS = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}
