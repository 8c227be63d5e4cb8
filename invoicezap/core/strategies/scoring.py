
import logging
from abc import ABC, abstractmethod

from ..catalog.onboarding import GOAL_LABELS
from ..models.profile import SINGULAR_ATTRIBUTES, ProfileAttribute, UserProfile
from ..models.recommendation import MatchType, TemplateRecommendation
from ..models.scoring import ScoringTable

logger = logging.getLogger(__name__)


class ScoringStrategy(ABC):
    """Base class for template scoring strategies."""

    @abstractmethod
    def score(self, table: ScoringTable, profile: UserProfile) -> TemplateRecommendation:
        """Score one template against a profile."""
        ...


class WeightedProfileStrategy(ScoringStrategy):
    """Average of per-attribute weights with explained strong matches."""

    REASON_TEMPLATES = {
        ProfileAttribute.BUSINESS_TYPE: "Perfect for {} businesses",
        ProfileAttribute.INDUSTRY: "Ideal for {} industry",
        ProfileAttribute.COMPANY_SIZE: "Optimized for {} companies",
        ProfileAttribute.DESIGN_PREFERENCE: "Matches your {} design preference",
        ProfileAttribute.COLOR_PREFERENCE: "Aligns with your {} color choice",
        ProfileAttribute.TARGET_AUDIENCE: "Designed for {}",
        ProfileAttribute.INVOICE_FREQUENCY: "Optimized for {} invoicing",
        ProfileAttribute.BUDGET: "Fits your {} budget",
        ProfileAttribute.EXPERIENCE: "Perfect for {} users",
        ProfileAttribute.GOALS: "Helps achieve: {}",
    }

    def __init__(
        self,
        strong_match_threshold: float = 0.7,
        max_reasons: int = 3,
        confidence_saturation: int = 10,
    ):
        """Initialize strategy.

        Args:
            strong_match_threshold: Weights above this count as strong matches.
            max_reasons: Number of reasons kept per recommendation.
            confidence_saturation: Strong matches needed for confidence 1.0.
        """
        self._strong_match_threshold = strong_match_threshold
        self._max_reasons = max_reasons
        self._confidence_saturation = confidence_saturation

    def score(self, table: ScoringTable, profile: UserProfile) -> TemplateRecommendation:
        total_score = 0.0
        max_possible_score = 0
        reasons: list[str] = []
        match_count = 0

        for attribute, _ in SINGULAR_ATTRIBUTES.values():
            value = profile.value_of(attribute)
            weight = table.weight(attribute, value)
            if weight > self._strong_match_threshold:
                reasons.append(self.REASON_TEMPLATES[attribute].format(value.value))
                match_count += 1
            total_score += weight
            max_possible_score += 1

        for goal in profile.goals:
            weight = table.weight(ProfileAttribute.GOALS, goal)
            if weight > self._strong_match_threshold:
                label = GOAL_LABELS.get(goal, goal.value)
                reasons.append(self.REASON_TEMPLATES[ProfileAttribute.GOALS].format(label))
                match_count += 1
            total_score += weight
            max_possible_score += 1

        final_score = total_score / max_possible_score if max_possible_score else 0.0
        confidence = min(match_count / self._confidence_saturation, 1.0)

        logger.debug(
            f"Scored '{table.template_id}': {final_score:.3f} "
            f"({match_count} strong matches)"
        )

        return TemplateRecommendation(
            template_id=table.template_id,
            score=final_score,
            confidence=confidence,
            reasons=reasons[: self._max_reasons],
            category=table.category,
            match_type=MatchType.from_score(final_score),
        )
