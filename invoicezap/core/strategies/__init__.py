"""Scoring strategies."""
from .scoring import ScoringStrategy, WeightedProfileStrategy

__all__ = [
    "ScoringStrategy",
    "WeightedProfileStrategy",
]
