import pytest

from invoicezap.core.models.profile import (
    Budget,
    BusinessType,
    CompanySize,
    Goal,
    PartialProfile,
    ProfileAttribute,
    UserProfile,
)
from invoicezap.core.models.scoring import ScoringTable
from invoicezap.core.models.template import LayoutVariant, TemplateConfig


def test_partial_profile_from_dict_parses_known_keys():
    profile = PartialProfile.from_dict(
        {"businessType": "startup", "companySize": "50+", "goals": ["save-time"], "extra": 1}
    )

    assert profile.business_type is BusinessType.STARTUP
    assert profile.company_size is CompanySize.ENTERPRISE
    assert profile.goals == (Goal.SAVE_TIME,)
    assert profile.industry is None
    assert profile.to_dict() == {
        "businessType": "startup",
        "companySize": "50+",
        "goals": ["save-time"],
    }


@pytest.mark.parametrize(
    "data",
    [
        {"businessType": "pirate"},
        {"goals": ["world-domination"]},
        {"companySize": "huge"},
    ],
)
def test_partial_profile_rejects_unknown_values(data):
    with pytest.raises(ValueError):
        PartialProfile.from_dict(data)


def test_answer_returns_new_profile():
    empty = PartialProfile()
    answered = empty.answer(ProfileAttribute.BUSINESS_TYPE, "agency")

    assert empty.business_type is None
    assert answered.business_type is BusinessType.AGENCY
    assert answered.is_answered(ProfileAttribute.BUSINESS_TYPE)
    assert not answered.is_answered(ProfileAttribute.GOALS)
    assert answered.answer(ProfileAttribute.GOALS, ["stand-out"]).goals == (Goal.STAND_OUT,)


def test_user_profile_requires_every_singular_attribute():
    with pytest.raises(ValueError, match="industry"):
        UserProfile.from_dict({"businessType": "freelancer"})


def test_scoring_table_uses_structured_keys():
    table = ScoringTable.from_dict(
        "t", {"weights": {"businessType": {"enterprise": 0.6}, "budget": {"enterprise": 0.9}}}
    )

    assert table.weight(ProfileAttribute.BUSINESS_TYPE, BusinessType.ENTERPRISE) == 0.6
    assert table.weight(ProfileAttribute.BUDGET, Budget.ENTERPRISE) == 0.9
    assert table.weight(ProfileAttribute.BUSINESS_TYPE, BusinessType.AGENCY) == 0.0


def test_template_config_json_uses_camel_case_keys():
    data = {
        "layout": "classic",
        "sections": {"companyInfo": True, "lineItems": True},
        "branding": {"companyName": True},
    }

    config = TemplateConfig.from_dict(data)

    assert config.layout is LayoutVariant.CLASSIC
    assert config.sections.company_info and config.sections.line_items
    assert not config.sections.footer
    assert config.branding.company_name
    assert config.to_dict()["sections"]["companyInfo"] is True
    assert TemplateConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("goals", [5, {"save-time": True}, 1.5])
def test_partial_profile_rejects_non_list_goals(goals):
    with pytest.raises(ValueError):
        PartialProfile.from_dict({"goals": goals})


@pytest.mark.parametrize(
    "data",
    [
        {"sections": {"footer": "false"}},
        {"sections": {"terms": 1}},
        {"branding": {"logo": "yes"}},
    ],
)
def test_template_config_toggles_must_be_booleans(data):
    with pytest.raises(TypeError):
        TemplateConfig.from_dict(data)
