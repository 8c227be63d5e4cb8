"""Question bank, quick-start presets and suggestion rules."""
from ..models.profile import (
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
)
from ..models.recommendation import OnboardingQuestion, QuestionOption, QuestionType

MAX_GOAL_SELECTIONS = 3

GOAL_LABELS: dict[Goal, str] = {
    Goal.INCREASE_CONVERSIONS: "Increase conversions",
    Goal.BUILD_TRUST: "Build trust with clients",
    Goal.SAVE_TIME: "Save time on invoicing",
    Goal.LOOK_PROFESSIONAL: "Look more professional",
    Goal.STAND_OUT: "Stand out from competition",
    Goal.SCALE_BUSINESS: "Scale your business",
}

# Asked in this order, each only while its attribute is unanswered
QUESTION_BANK: tuple[OnboardingQuestion, ...] = (
    OnboardingQuestion(
        attribute=ProfileAttribute.BUSINESS_TYPE,
        type=QuestionType.CHOICE,
        question="What type of business are you?",
        options=(
            QuestionOption("freelancer", "Freelancer", "👨‍💻"),
            QuestionOption("consultant", "Consultant", "💼"),
            QuestionOption("agency", "Agency", "🏢"),
            QuestionOption("startup", "Startup", "🚀"),
            QuestionOption("enterprise", "Enterprise", "🏭"),
            QuestionOption("nonprofit", "Nonprofit", "🤝"),
        ),
    ),
    OnboardingQuestion(
        attribute=ProfileAttribute.INDUSTRY,
        type=QuestionType.CHOICE,
        question="What industry are you in?",
        options=(
            QuestionOption("technology", "Technology", "💻"),
            QuestionOption("marketing", "Marketing", "📢"),
            QuestionOption("design", "Design", "🎨"),
            QuestionOption("consulting", "Consulting", "📊"),
            QuestionOption("healthcare", "Healthcare", "🏥"),
            QuestionOption("legal", "Legal", "⚖️"),
            QuestionOption("finance", "Finance", "💰"),
            QuestionOption("education", "Education", "📚"),
            QuestionOption("real-estate", "Real Estate", "🏠"),
            QuestionOption("retail", "Retail", "🛍️"),
            QuestionOption("manufacturing", "Manufacturing", "🏭"),
            QuestionOption("other", "Other", "🔧"),
        ),
    ),
    OnboardingQuestion(
        attribute=ProfileAttribute.DESIGN_PREFERENCE,
        type=QuestionType.CHOICE,
        question="What design style do you prefer?",
        options=(
            QuestionOption("modern", "Modern & Clean", "✨"),
            QuestionOption("classic", "Classic & Traditional", "📜"),
            QuestionOption("minimal", "Minimal & Simple", "⚪"),
            QuestionOption("creative", "Creative & Bold", "🎭"),
            QuestionOption("professional", "Professional & Trustworthy", "🤝"),
            QuestionOption("bold", "Bold & Eye-catching", "🔥"),
        ),
    ),
    OnboardingQuestion(
        attribute=ProfileAttribute.GOALS,
        type=QuestionType.MULTI_CHOICE,
        question="What are your main goals with invoicing?",
        options=(
            QuestionOption("look-professional", GOAL_LABELS[Goal.LOOK_PROFESSIONAL], "👔"),
            QuestionOption("build-trust", GOAL_LABELS[Goal.BUILD_TRUST], "🤝"),
            QuestionOption("save-time", GOAL_LABELS[Goal.SAVE_TIME], "⏰"),
            QuestionOption("stand-out", GOAL_LABELS[Goal.STAND_OUT], "⭐"),
            QuestionOption(
                "increase-conversions", GOAL_LABELS[Goal.INCREASE_CONVERSIONS], "📈"
            ),
            QuestionOption("scale-business", GOAL_LABELS[Goal.SCALE_BUSINESS], "🚀"),
        ),
        max_selections=MAX_GOAL_SELECTIONS,
    ),
)

QUICK_START_PROFILES: dict[str, PartialProfile] = {
    "freelancer-designer": PartialProfile(
        business_type=BusinessType.FREELANCER,
        industry=Industry.DESIGN,
        company_size=CompanySize.SOLO,
        design_preference=DesignPreference.CREATIVE,
        color_preference=ColorPreference.BRANDED,
        goals=(Goal.STAND_OUT, Goal.LOOK_PROFESSIONAL),
    ),
    "marketing-agency": PartialProfile(
        business_type=BusinessType.AGENCY,
        industry=Industry.MARKETING,
        company_size=CompanySize.MEDIUM,
        design_preference=DesignPreference.BOLD,
        color_preference=ColorPreference.PURPLE,
        goals=(Goal.INCREASE_CONVERSIONS, Goal.SCALE_BUSINESS),
    ),
    "tech-consultant": PartialProfile(
        business_type=BusinessType.CONSULTANT,
        industry=Industry.TECHNOLOGY,
        company_size=CompanySize.SMALL,
        design_preference=DesignPreference.MODERN,
        color_preference=ColorPreference.BLUE,
        goals=(Goal.BUILD_TRUST, Goal.LOOK_PROFESSIONAL),
    ),
    "healthcare-provider": PartialProfile(
        business_type=BusinessType.ENTERPRISE,
        industry=Industry.HEALTHCARE,
        company_size=CompanySize.ENTERPRISE,
        design_preference=DesignPreference.PROFESSIONAL,
        color_preference=ColorPreference.NEUTRAL,
        goals=(Goal.BUILD_TRUST, Goal.LOOK_PROFESSIONAL),
    ),
}

# Values used by the onboarding flow for questions the user skipped
PROFILE_DEFAULTS = PartialProfile(
    business_type=BusinessType.FREELANCER,
    industry=Industry.TECHNOLOGY,
    company_size=CompanySize.SOLO,
    design_preference=DesignPreference.MODERN,
    color_preference=ColorPreference.BLUE,
    target_audience=TargetAudience.CLIENTS,
    invoice_frequency=InvoiceFrequency.MONTHLY,
    budget=Budget.VALUE_FOCUSED,
    experience=Experience.INTERMEDIATE,
    goals=(Goal.LOOK_PROFESSIONAL,),
)

# Quick shortlist used before a full profile exists
BUSINESS_TYPE_SUGGESTIONS: dict[BusinessType, tuple[str, ...]] = {
    BusinessType.FREELANCER: ("minimal-clean", "modern-professional"),
    BusinessType.AGENCY: ("creative-bold", "modern-professional"),
    BusinessType.CONSULTANT: ("modern-professional", "minimal-clean"),
}

INDUSTRY_SUGGESTIONS: dict[Industry, tuple[str, ...]] = {
    Industry.MARKETING: ("creative-bold", "modern-professional"),
    Industry.FINANCE: ("modern-professional", "minimal-clean"),
    Industry.DESIGN: ("creative-bold", "minimal-clean"),
}
