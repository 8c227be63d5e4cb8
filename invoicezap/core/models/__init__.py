"""Domain models."""
from .profile import (
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
from .recommendation import (
    MatchType,
    OnboardingQuestion,
    QuestionOption,
    QuestionType,
    ResolvedRecommendation,
    TemplateRecommendation,
)
from .scoring import ScoringTable
from .template import (
    ConfigValidation,
    InvoiceTemplate,
    LayoutVariant,
    TemplateBranding,
    TemplateCategory,
    TemplateColors,
    TemplateConfig,
    TemplateFonts,
    TemplateOrigin,
    TemplateSections,
)

__all__ = [
    "Budget",
    "BusinessType",
    "ColorPreference",
    "CompanySize",
    "DesignPreference",
    "Experience",
    "Goal",
    "Industry",
    "InvoiceFrequency",
    "PartialProfile",
    "ProfileAttribute",
    "TargetAudience",
    "UserProfile",
    "MatchType",
    "OnboardingQuestion",
    "QuestionOption",
    "QuestionType",
    "ResolvedRecommendation",
    "TemplateRecommendation",
    "ScoringTable",
    "ConfigValidation",
    "InvoiceTemplate",
    "LayoutVariant",
    "TemplateBranding",
    "TemplateCategory",
    "TemplateColors",
    "TemplateConfig",
    "TemplateFonts",
    "TemplateOrigin",
    "TemplateSections",
]
