"""Recommender service - ranks templates for a business profile."""

import json
import logging
from pathlib import Path
from typing import Optional

from ..catalog.onboarding import (
    BUSINESS_TYPE_SUGGESTIONS,
    INDUSTRY_SUGGESTIONS,
    QUESTION_BANK,
    QUICK_START_PROFILES,
)
from ..catalog.scoring_tables import BUILT_IN_SCORING_TABLES
from ..models.profile import PartialProfile, UserProfile
from ..models.recommendation import OnboardingQuestion, TemplateRecommendation
from ..models.scoring import ScoringTable
from ..strategies.scoring import ScoringStrategy, WeightedProfileStrategy

logger = logging.getLogger(__name__)


class TemplateRecommender:
    """Rule-based scorer: profile -> ranked, explained template list.

    Stateless apart from the scoring tables loaded at construction.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        strategy: Optional[ScoringStrategy] = None,
        default_limit: int = 5,
    ):
        """Initialize recommender.

        Args:
            config_path: JSON file with scoring tables. Built-in tables are
                used when absent or unreadable.
            strategy: Scoring strategy, weighted profile scoring by default.
            default_limit: Number of results from get_recommendations.
        """
        self._strategy = strategy or WeightedProfileStrategy()
        self._default_limit = default_limit
        self._tables = self._load_tables(config_path)

    def _load_tables(self, path: Optional[str]) -> list[ScoringTable]:
        if path:
            config_file = Path(path)
            if not config_file.exists():
                logger.info(f"Scoring config {path} not found, using built-in tables")
            else:
                try:
                    with open(config_file, "r", encoding="utf-8") as f:
                        config = json.load(f)
                    tables = [
                        ScoringTable.from_dict(item["id"], item)
                        for item in config.get("templates", [])
                    ]
                    logger.info(f"Loaded {len(tables)} scoring tables from {path}")
                    return tables
                except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
                    logger.error(f"Failed to load scoring config {path}: {e}")

        return [
            ScoringTable.from_dict(template_id, data)
            for template_id, data in BUILT_IN_SCORING_TABLES.items()
        ]

    @property
    def template_ids(self) -> list[str]:
        """Ids of templates with a scoring table, in scoring order."""
        return [table.template_id for table in self._tables]

    def calculate_recommendation(self, profile: UserProfile) -> list[TemplateRecommendation]:
        """Score every known template against a complete profile.

        Args:
            profile: Fully populated profile.

        Returns:
            Recommendations sorted by score, highest first. Equal scores keep
            the template enumeration order.
        """
        recommendations = [self._strategy.score(table, profile) for table in self._tables]
        recommendations.sort(key=lambda r: r.score, reverse=True)

        if recommendations:
            top = recommendations[0]
            logger.info(
                f"Top recommendation: '{top.template_id}' "
                f"score={top.score:.2f} ({top.match_type.value})"
            )
        return recommendations

    def get_recommendations(
        self, profile: UserProfile, limit: Optional[int] = None
    ) -> list[TemplateRecommendation]:
        limit = self._default_limit if limit is None else limit
        return self.calculate_recommendation(profile)[: max(limit, 0)]

    def get_personalized_suggestions(self, profile: PartialProfile) -> list[str]:
        """Quick shortlist from business type and industry only."""
        suggestions: list[str] = []
        if profile.business_type is not None:
            suggestions.extend(BUSINESS_TYPE_SUGGESTIONS.get(profile.business_type, ()))
        if profile.industry is not None:
            suggestions.extend(INDUSTRY_SUGGESTIONS.get(profile.industry, ()))
        return list(dict.fromkeys(suggestions))

    def get_onboarding_questions(self, profile: PartialProfile) -> list[OnboardingQuestion]:
        """Questions whose attribute is still unanswered, in bank order."""
        return [q for q in QUESTION_BANK if not profile.is_answered(q.attribute)]

    def get_quick_start_profile(self, name: str) -> Optional[PartialProfile]:
        return QUICK_START_PROFILES.get(name)

    def list_quick_start_profiles(self) -> list[str]:
        return list(QUICK_START_PROFILES)
