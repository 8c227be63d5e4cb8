"""Core business services."""
from .template_registry import TemplateRegistry
from .recommender import TemplateRecommender
from .onboarding_service import OnboardingService

__all__ = [
    "TemplateRegistry",
    "TemplateRecommender",
    "OnboardingService",
]
