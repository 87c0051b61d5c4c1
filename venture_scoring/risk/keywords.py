"""Keyword tiers and industry lists for opportunity risk assessment."""

from typing import Dict, List

# Description keyword tiers: score delta and the reading attached to a hit
RISK_KEYWORDS: Dict[str, List[str]] = {
    "high": [
        "revolutionary",
        "disruptive",
        "first-of-its-kind",
        "untested",
        "experimental",
    ],
    "medium": [
        "competitive",
        "challenging",
        "complex",
        "ambitious",
    ],
    "low": [
        "proven",
        "established",
        "stable",
        "experienced",
        "track-record",
    ],
}

TIER_DELTAS: Dict[str, int] = {"high": 10, "medium": 5, "low": -10}

TIER_READINGS: Dict[str, str] = {
    "high": "High-risk indicator: \"{keyword}\" suggests unproven approach",
    "medium": "Medium-risk indicator: \"{keyword}\" suggests market challenges",
    "low": "Low-risk indicator: \"{keyword}\" suggests stability",
}

HIGH_VOLATILITY_INDUSTRIES: List[str] = ["technology", "biotech", "cryptocurrency", "gaming"]
LOW_VOLATILITY_INDUSTRIES: List[str] = ["agriculture", "retail", "services", "manufacturing"]
