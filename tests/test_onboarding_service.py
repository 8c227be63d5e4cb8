from invoicezap.core.models.profile import (
    BusinessType,
    ColorPreference,
    CompanySize,
    DesignPreference,
    Experience,
    Goal,
    Industry,
    PartialProfile,
    TargetAudience,
)
from invoicezap.core.services.onboarding_service import OnboardingService
from invoicezap.core.services.recommender import TemplateRecommender


def test_complete_profile_fills_only_missing_answers(onboarding):
    profile = onboarding.complete_profile(
        PartialProfile(business_type=BusinessType.AGENCY, goals=(Goal.STAND_OUT,))
    )

    assert profile.business_type is BusinessType.AGENCY
    assert profile.goals == (Goal.STAND_OUT,)
    assert profile.industry is Industry.TECHNOLOGY
    assert profile.company_size is CompanySize.SOLO
    assert profile.design_preference is DesignPreference.MODERN
    assert profile.color_preference is ColorPreference.BLUE
    assert profile.target_audience is TargetAudience.CLIENTS
    assert profile.experience is Experience.INTERMEDIATE


def test_complete_profile_defaults_empty_goals(onboarding):
    profile = onboarding.complete_profile(PartialProfile())
    assert profile.goals == (Goal.LOOK_PROFESSIONAL,)


def test_recommend_resolves_templates(onboarding):
    results = onboarding.recommend(PartialProfile())

    assert len(results) == 3
    for result in results:
        assert result.template.id == result.recommendation.template_id
    scores = [r.recommendation.score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_recommend_respects_limit(onboarding):
    assert len(onboarding.recommend(PartialProfile(), limit=2)) == 2


def test_recommend_skips_unregistered_templates(registry, tmp_path):
    path = tmp_path / "scoring.json"
    path.write_text(
        '{"templates": [{"id": "ghost", "weights": {"businessType": {"freelancer": 1}}},'
        ' {"id": "minimal-clean", "category": "minimal", "weights": {}}]}',
        encoding="utf-8",
    )
    service = OnboardingService(
        recommender=TemplateRecommender(config_path=str(path)), registry=registry
    )

    results = service.recommend(PartialProfile())

    assert [r.template.id for r in results] == ["minimal-clean"]


def test_recommend_ignores_registry_changes_to_other_templates(onboarding, registry):
    registry.create("Unscored")
    ids = {r.template.id for r in onboarding.recommend(PartialProfile())}
    assert ids == {"modern-professional", "minimal-clean", "creative-bold"}


def test_quick_start(onboarding):
    results = onboarding.quick_start("freelancer-designer")
    assert results[0].template.id == "creative-bold"

    results = onboarding.quick_start("tech-consultant", limit=1)
    assert [r.template.id for r in results] == ["modern-professional"]

    assert onboarding.quick_start("astronaut") is None
