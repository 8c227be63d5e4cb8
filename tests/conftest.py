"""
Pytest fixtures for registry, recommender and onboarding tests.
"""

import itertools

import pytest

from invoicezap.core.models.profile import UserProfile
from invoicezap.core.services.onboarding_service import OnboardingService
from invoicezap.core.services.recommender import TemplateRecommender
from invoicezap.core.services.template_registry import TemplateRegistry


class SequentialIdGenerator:
    """Deterministic ids: custom-1, custom-2, ..."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._counter)}"


class RepeatingIdGenerator:
    """Returns the queued ids in order, then falls back to a counter."""

    def __init__(self, ids: list[str]):
        self._ids = list(ids)
        self._fallback = itertools.count(1)

    def new_id(self, prefix: str) -> str:
        if self._ids:
            return self._ids.pop(0)
        return f"{prefix}-fallback-{next(self._fallback)}"


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def registry(id_generator):
    return TemplateRegistry(id_generator=id_generator)


@pytest.fixture
def recommender():
    return TemplateRecommender()


@pytest.fixture
def onboarding(recommender, registry):
    return OnboardingService(recommender=recommender, registry=registry)


@pytest.fixture
def freelancer_designer():
    """Complete freelancer/design profile."""
    return UserProfile.from_dict(
        {
            "businessType": "freelancer",
            "industry": "design",
            "companySize": "solo",
            "designPreference": "creative",
            "colorPreference": "branded",
            "targetAudience": "clients",
            "invoiceFrequency": "project-based",
            "budget": "value-focused",
            "experience": "intermediate",
            "goals": ["stand-out", "look-professional"],
        }
    )
