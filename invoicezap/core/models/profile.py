"""User profile domain models."""
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Optional


class ProfileAttribute(Enum):
    """Profile attributes in scoring order. Values are the JSON keys."""
    BUSINESS_TYPE = "businessType"
    INDUSTRY = "industry"
    COMPANY_SIZE = "companySize"
    DESIGN_PREFERENCE = "designPreference"
    COLOR_PREFERENCE = "colorPreference"
    TARGET_AUDIENCE = "targetAudience"
    INVOICE_FREQUENCY = "invoiceFrequency"
    BUDGET = "budget"
    EXPERIENCE = "experience"
    GOALS = "goals"


class BusinessType(Enum):
    FREELANCER = "freelancer"
    CONSULTANT = "consultant"
    AGENCY = "agency"
    STARTUP = "startup"
    ENTERPRISE = "enterprise"
    NONPROFIT = "nonprofit"


class Industry(Enum):
    TECHNOLOGY = "technology"
    MARKETING = "marketing"
    DESIGN = "design"
    CONSULTING = "consulting"
    HEALTHCARE = "healthcare"
    LEGAL = "legal"
    FINANCE = "finance"
    EDUCATION = "education"
    REAL_ESTATE = "real-estate"
    RETAIL = "retail"
    MANUFACTURING = "manufacturing"
    OTHER = "other"


class CompanySize(Enum):
    SOLO = "solo"
    SMALL = "2-5"
    MEDIUM = "6-20"
    LARGE = "21-50"
    ENTERPRISE = "50+"


class DesignPreference(Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    CREATIVE = "creative"
    PROFESSIONAL = "professional"
    BOLD = "bold"


class ColorPreference(Enum):
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    ORANGE = "orange"
    NEUTRAL = "neutral"
    BRANDED = "branded"


class TargetAudience(Enum):
    CLIENTS = "clients"
    CUSTOMERS = "customers"
    PARTNERS = "partners"
    INVESTORS = "investors"
    EMPLOYEES = "employees"
    GOVERNMENT = "government"


class InvoiceFrequency(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    PROJECT_BASED = "project-based"


class Budget(Enum):
    BUDGET_CONSCIOUS = "budget-conscious"
    VALUE_FOCUSED = "value-focused"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class Experience(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class Goal(Enum):
    INCREASE_CONVERSIONS = "increase-conversions"
    BUILD_TRUST = "build-trust"
    SAVE_TIME = "save-time"
    LOOK_PROFESSIONAL = "look-professional"
    STAND_OUT = "stand-out"
    SCALE_BUSINESS = "scale-business"


# Singular attributes: dataclass field name -> (attribute, value enum)
SINGULAR_ATTRIBUTES: dict[str, tuple[ProfileAttribute, type[Enum]]] = {
    "business_type": (ProfileAttribute.BUSINESS_TYPE, BusinessType),
    "industry": (ProfileAttribute.INDUSTRY, Industry),
    "company_size": (ProfileAttribute.COMPANY_SIZE, CompanySize),
    "design_preference": (ProfileAttribute.DESIGN_PREFERENCE, DesignPreference),
    "color_preference": (ProfileAttribute.COLOR_PREFERENCE, ColorPreference),
    "target_audience": (ProfileAttribute.TARGET_AUDIENCE, TargetAudience),
    "invoice_frequency": (ProfileAttribute.INVOICE_FREQUENCY, InvoiceFrequency),
    "budget": (ProfileAttribute.BUDGET, Budget),
    "experience": (ProfileAttribute.EXPERIENCE, Experience),
}

ATTRIBUTE_VALUE_TYPES: dict[ProfileAttribute, type[Enum]] = {
    attribute: enum_type for attribute, enum_type in SINGULAR_ATTRIBUTES.values()
}
ATTRIBUTE_VALUE_TYPES[ProfileAttribute.GOALS] = Goal


def _parse_goals(raw: Any) -> tuple[Goal, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"goals must be a list, got {type(raw).__name__}")
    return tuple(g if isinstance(g, Goal) else Goal(g) for g in raw)


@dataclass(frozen=True)
class PartialProfile:
    """Profile being collected. Any field may still be unanswered."""
    business_type: Optional[BusinessType] = None
    industry: Optional[Industry] = None
    company_size: Optional[CompanySize] = None
    design_preference: Optional[DesignPreference] = None
    color_preference: Optional[ColorPreference] = None
    target_audience: Optional[TargetAudience] = None
    invoice_frequency: Optional[InvoiceFrequency] = None
    budget: Optional[Budget] = None
    experience: Optional[Experience] = None
    goals: tuple[Goal, ...] = ()

    def is_answered(self, attribute: ProfileAttribute) -> bool:
        if attribute is ProfileAttribute.GOALS:
            return bool(self.goals)
        return getattr(self, _field_for(attribute)) is not None

    def answer(self, attribute: ProfileAttribute, value: Any) -> "PartialProfile":
        """Copy of the profile with one attribute answered.

        Raises:
            ValueError: If the value is not valid for the attribute.
        """
        if attribute is ProfileAttribute.GOALS:
            return replace(self, goals=_parse_goals(value))
        enum_type = ATTRIBUTE_VALUE_TYPES[attribute]
        parsed = value if isinstance(value, enum_type) else enum_type(value)
        return replace(self, **{_field_for(attribute): parsed})

    @classmethod
    def from_dict(cls, data: dict) -> "PartialProfile":
        """Parse camelCase JSON keys. Unknown keys are ignored.

        Raises:
            ValueError: If a value is not a member of its enumeration.
        """
        values: dict[str, Any] = {}
        for name, (attribute, enum_type) in SINGULAR_ATTRIBUTES.items():
            raw = data.get(attribute.value)
            if raw is not None and raw != "":
                values[name] = raw if isinstance(raw, enum_type) else enum_type(raw)
        values["goals"] = _parse_goals(data.get(ProfileAttribute.GOALS.value))
        return cls(**values)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {}
        for name, (attribute, _) in SINGULAR_ATTRIBUTES.items():
            value = getattr(self, name)
            if value is not None:
                data[attribute.value] = value.value
        if self.goals:
            data[ProfileAttribute.GOALS.value] = [g.value for g in self.goals]
        return data


@dataclass(frozen=True)
class UserProfile:
    """Fully populated profile, the input of a full recommendation."""
    business_type: BusinessType
    industry: Industry
    company_size: CompanySize
    design_preference: DesignPreference
    color_preference: ColorPreference
    target_audience: TargetAudience
    invoice_frequency: InvoiceFrequency
    budget: Budget
    experience: Experience
    goals: tuple[Goal, ...] = ()

    def value_of(self, attribute: ProfileAttribute) -> Enum:
        """Value of a singular attribute."""
        return getattr(self, _field_for(attribute))

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Parse a complete profile.

        Raises:
            ValueError: If an attribute is missing or has an unknown value.
        """
        partial = PartialProfile.from_dict(data)
        missing = [
            attribute.value
            for attribute, _ in SINGULAR_ATTRIBUTES.values()
            if not partial.is_answered(attribute)
        ]
        if missing:
            raise ValueError(f"Profile is missing: {', '.join(missing)}")
        return cls(**{f.name: getattr(partial, f.name) for f in fields(cls)})

    def to_dict(self) -> dict:
        data = {
            attribute.value: getattr(self, name).value
            for name, (attribute, _) in SINGULAR_ATTRIBUTES.items()
        }
        data[ProfileAttribute.GOALS.value] = [g.value for g in self.goals]
        return data


def _field_for(attribute: ProfileAttribute) -> str:
    if attribute is ProfileAttribute.GOALS:
        return "goals"
    for name, (candidate, _) in SINGULAR_ATTRIBUTES.items():
        if candidate is attribute:
            return name
    raise KeyError(attribute)
