import itertools
import json

import pytest

from invoicezap.core.models.profile import (
    Budget,
    BusinessType,
    ColorPreference,
    CompanySize,
    DesignPreference,
    Experience,
    Goal,
    Industry,
    InvoiceFrequency,
    PartialProfile,
    ProfileAttribute,
    TargetAudience,
    UserProfile,
)
from invoicezap.core.models.recommendation import MatchType, QuestionType
from invoicezap.core.models.template import TemplateCategory
from invoicezap.core.services.recommender import TemplateRecommender


def _profiles():
    """A spread of complete profiles across every attribute."""
    sizes = itertools.cycle(CompanySize)
    colors = itertools.cycle(ColorPreference)
    audiences = itertools.cycle(TargetAudience)
    frequencies = itertools.cycle(InvoiceFrequency)
    budgets = itertools.cycle(Budget)
    experiences = itertools.cycle(Experience)
    goal_sets = itertools.cycle([(), tuple(Goal)[:3], (Goal.STAND_OUT,), tuple(Goal)])
    for business_type in BusinessType:
        for industry in Industry:
            for design in DesignPreference:
                yield UserProfile(
                    business_type=business_type,
                    industry=industry,
                    company_size=next(sizes),
                    design_preference=design,
                    color_preference=next(colors),
                    target_audience=next(audiences),
                    invoice_frequency=next(frequencies),
                    budget=next(budgets),
                    experience=next(experiences),
                    goals=next(goal_sets),
                )


def test_scores_and_confidence_stay_in_unit_interval(recommender):
    for profile in _profiles():
        for rec in recommender.calculate_recommendation(profile):
            assert 0.0 <= rec.score <= 1.0
            assert 0.0 <= rec.confidence <= 1.0
            assert len(rec.reasons) <= 3
            assert rec.match_type is MatchType.from_score(rec.score)


def test_results_sorted_by_score_descending(recommender):
    for profile in _profiles():
        scores = [r.score for r in recommender.calculate_recommendation(profile)]
        assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize(
    "score,expected",
    [
        (0.69, MatchType.DECENT),
        (0.70, MatchType.GOOD),
        (0.79, MatchType.GOOD),
        (0.80, MatchType.EXCELLENT),
        (0.89, MatchType.EXCELLENT),
        (0.90, MatchType.PERFECT),
        (1.0, MatchType.PERFECT),
        (0.0, MatchType.DECENT),
    ],
)
def test_match_type_thresholds(score, expected):
    assert MatchType.from_score(score) is expected


def test_freelancer_designer_prefers_creative_bold(recommender, freelancer_designer):
    recommendations = recommender.calculate_recommendation(freelancer_designer)

    assert [r.template_id for r in recommendations][0] == "creative-bold"
    top = recommendations[0]
    assert top.score == pytest.approx(9.0 / 11)
    assert top.match_type is MatchType.EXCELLENT
    assert top.confidence == pytest.approx(0.8)
    assert top.category is TemplateCategory.CREATIVE
    assert top.reasons == [
        "Perfect for freelancer businesses",
        "Ideal for design industry",
        "Optimized for solo companies",
    ]

    others = {r.template_id: r for r in recommendations[1:]}
    assert set(others) == {"minimal-clean", "modern-professional"}
    assert others["minimal-clean"].score == pytest.approx(6.9 / 11)
    assert others["modern-professional"].score == pytest.approx(5.9 / 11)


def test_tech_consultant_prefers_modern_professional(recommender):
    profile = UserProfile(
        business_type=BusinessType.CONSULTANT,
        industry=Industry.TECHNOLOGY,
        company_size=CompanySize.SMALL,
        design_preference=DesignPreference.MODERN,
        color_preference=ColorPreference.BLUE,
        target_audience=TargetAudience.CLIENTS,
        invoice_frequency=InvoiceFrequency.MONTHLY,
        budget=Budget.VALUE_FOCUSED,
        experience=Experience.INTERMEDIATE,
        goals=(Goal.BUILD_TRUST, Goal.LOOK_PROFESSIONAL),
    )

    top = recommender.calculate_recommendation(profile)[0]

    assert top.template_id == "modern-professional"
    assert top.score == pytest.approx(9.7 / 11)
    # every one of the 11 signals is strong, confidence saturates at 10
    assert top.confidence == 1.0


def test_goal_reasons_follow_singular_reasons(recommender):
    profile = UserProfile(
        business_type=BusinessType.NONPROFIT,
        industry=Industry.OTHER,
        company_size=CompanySize.LARGE,
        design_preference=DesignPreference.CLASSIC,
        color_preference=ColorPreference.GREEN,
        target_audience=TargetAudience.GOVERNMENT,
        invoice_frequency=InvoiceFrequency.DAILY,
        budget=Budget.ENTERPRISE,
        experience=Experience.EXPERT,
        goals=(Goal.SAVE_TIME,),
    )

    by_id = {r.template_id: r for r in recommender.calculate_recommendation(profile)}

    assert by_id["minimal-clean"].reasons == ["Helps achieve: Save time on invoicing"]
    assert by_id["minimal-clean"].score == pytest.approx(0.9 / 10)
    assert by_id["modern-professional"].score == 0.0
    assert by_id["modern-professional"].reasons == []
    assert by_id["modern-professional"].match_type is MatchType.DECENT


def test_equal_scores_keep_enumeration_order(recommender):
    profile = UserProfile(
        business_type=BusinessType.NONPROFIT,
        industry=Industry.OTHER,
        company_size=CompanySize.LARGE,
        design_preference=DesignPreference.CLASSIC,
        color_preference=ColorPreference.GREEN,
        target_audience=TargetAudience.GOVERNMENT,
        invoice_frequency=InvoiceFrequency.DAILY,
        budget=Budget.ENTERPRISE,
        experience=Experience.EXPERT,
    )

    ids = [r.template_id for r in recommender.calculate_recommendation(profile)]

    assert ids == ["modern-professional", "minimal-clean", "creative-bold"]


def test_get_recommendations_applies_limit(recommender, freelancer_designer):
    assert len(recommender.get_recommendations(freelancer_designer)) == 3
    limited = recommender.get_recommendations(freelancer_designer, limit=1)
    assert [r.template_id for r in limited] == ["creative-bold"]
    assert recommender.get_recommendations(freelancer_designer, limit=0) == []


def test_personalized_suggestions_are_deduplicated(recommender):
    profile = PartialProfile(business_type=BusinessType.FREELANCER, industry=Industry.DESIGN)

    assert recommender.get_personalized_suggestions(profile) == [
        "minimal-clean",
        "modern-professional",
        "creative-bold",
    ]


def test_personalized_suggestions_without_matching_answers(recommender):
    assert recommender.get_personalized_suggestions(PartialProfile()) == []
    profile = PartialProfile(business_type=BusinessType.NONPROFIT, industry=Industry.LEGAL)
    assert recommender.get_personalized_suggestions(profile) == []


def test_onboarding_questions_skip_answered_fields(recommender):
    questions = recommender.get_onboarding_questions(
        PartialProfile(business_type=BusinessType.FREELANCER)
    )

    assert [q.attribute for q in questions] == [
        ProfileAttribute.INDUSTRY,
        ProfileAttribute.DESIGN_PREFERENCE,
        ProfileAttribute.GOALS,
    ]
    goals = questions[-1]
    assert goals.type is QuestionType.MULTI_CHOICE
    assert goals.max_selections == 3
    assert all(q.required for q in questions)


def test_onboarding_questions_for_empty_and_complete_profiles(recommender):
    assert [q.id for q in recommender.get_onboarding_questions(PartialProfile())] == [
        "businessType",
        "industry",
        "designPreference",
        "goals",
    ]
    answered = PartialProfile(
        business_type=BusinessType.AGENCY,
        industry=Industry.MARKETING,
        design_preference=DesignPreference.BOLD,
        goals=(Goal.STAND_OUT,),
    )
    assert recommender.get_onboarding_questions(answered) == []


def test_question_options_are_valid_profile_values(recommender):
    for question in recommender.get_onboarding_questions(PartialProfile()):
        for option in question.options:
            PartialProfile().answer(question.attribute, option.value)


def test_quick_start_profiles(recommender):
    assert recommender.list_quick_start_profiles() == [
        "freelancer-designer",
        "marketing-agency",
        "tech-consultant",
        "healthcare-provider",
    ]
    preset = recommender.get_quick_start_profile("marketing-agency")
    assert preset.business_type is BusinessType.AGENCY
    assert preset.goals == (Goal.INCREASE_CONVERSIONS, Goal.SCALE_BUSINESS)
    assert recommender.get_quick_start_profile("astronaut") is None


def test_scoring_tables_load_from_config(tmp_path, freelancer_designer):
    path = tmp_path / "scoring.json"
    path.write_text(
        json.dumps(
            {
                "templates": [
                    {
                        "id": "classic-ledger",
                        "category": "corporate",
                        "weights": {"industry": {"design": 1.0}},
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    recommender = TemplateRecommender(config_path=str(path))

    assert recommender.template_ids == ["classic-ledger"]
    [rec] = recommender.calculate_recommendation(freelancer_designer)
    assert rec.category is TemplateCategory.CORPORATE
    assert rec.score == pytest.approx(1.0 / 11)
    assert rec.reasons == ["Ideal for design industry"]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"templates": [{"id": "x", "weights": {"mood": {"happy": 1}}}]}),
        json.dumps({"templates": [{"id": "x", "weights": {"industry": {"design": 2}}}]}),
        json.dumps({"templates": [{"weights": {}}]}),
    ],
)
def test_broken_scoring_config_falls_back_to_built_ins(tmp_path, content):
    path = tmp_path / "scoring.json"
    path.write_text(content, encoding="utf-8")

    recommender = TemplateRecommender(config_path=str(path))

    assert recommender.template_ids == ["modern-professional", "minimal-clean", "creative-bold"]


def test_missing_scoring_config_uses_built_ins(tmp_path):
    recommender = TemplateRecommender(config_path=str(tmp_path / "absent.json"))
    assert recommender.template_ids == ["modern-professional", "minimal-clean", "creative-bold"]
