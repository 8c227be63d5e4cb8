"""Onboarding service - coordinates profile completion, scoring and lookup."""

import logging
from dataclasses import fields
from typing import Optional

from ..catalog.onboarding import PROFILE_DEFAULTS
from ..models.profile import PartialProfile, UserProfile
from ..models.recommendation import ResolvedRecommendation
from .recommender import TemplateRecommender
from .template_registry import TemplateRegistry

logger = logging.getLogger(__name__)


class OnboardingService:
    """Turns a (partial) profile into recommended registry templates."""

    def __init__(
        self,
        recommender: TemplateRecommender,
        registry: TemplateRegistry,
        defaults: PartialProfile = PROFILE_DEFAULTS,
    ):
        """Initialize onboarding service.

        Args:
            recommender: Template recommender.
            registry: Template registry used to resolve ids.
            defaults: Values for attributes the user did not answer.
        """
        self._recommender = recommender
        self._registry = registry
        self._defaults = defaults

    def complete_profile(self, profile: PartialProfile) -> UserProfile:
        """Fill unanswered attributes from the defaults."""
        values = {}
        for f in fields(UserProfile):
            value = getattr(profile, f.name)
            values[f.name] = value if value else getattr(self._defaults, f.name)
        return UserProfile(**values)

    def recommend(
        self, profile: PartialProfile, limit: Optional[int] = None
    ) -> list[ResolvedRecommendation]:
        """Recommend registered templates for a possibly partial profile.

        Args:
            profile: Answers collected so far.
            limit: Maximum number of results.

        Returns:
            Recommendations joined with their templates, best first.
        """
        complete = self.complete_profile(profile)
        recommendations = self._recommender.get_recommendations(complete, limit)

        resolved = []
        for recommendation in recommendations:
            template = self._registry.get_by_id(recommendation.template_id)
            if template is None:
                logger.warning(
                    f"Recommended template '{recommendation.template_id}' "
                    "is not registered, skipping"
                )
                continue
            resolved.append(ResolvedRecommendation(recommendation, template))
        return resolved

    def quick_start(
        self, preset: str, limit: Optional[int] = None
    ) -> Optional[list[ResolvedRecommendation]]:
        """Recommend for a quick-start preset. None if the preset is unknown."""
        profile = self._recommender.get_quick_start_profile(preset)
        if profile is None:
            logger.warning(f"Unknown quick-start profile '{preset}'")
            return None
        return self.recommend(profile, limit)
