"""Recommendation domain models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .profile import ProfileAttribute
from .template import InvoiceTemplate, TemplateCategory


class MatchType(Enum):
    """Human-facing tier of a recommendation score."""
    PERFECT = "perfect"      # >= 0.9
    EXCELLENT = "excellent"  # >= 0.8
    GOOD = "good"            # >= 0.7
    DECENT = "decent"

    @classmethod
    def from_score(cls, score: float) -> "MatchType":
        if score >= 0.9:
            return cls.PERFECT
        elif score >= 0.8:
            return cls.EXCELLENT
        elif score >= 0.7:
            return cls.GOOD
        else:
            return cls.DECENT


@dataclass
class TemplateRecommendation:
    """Score of one template against one profile."""
    template_id: str
    score: float
    confidence: float
    reasons: list[str]
    category: TemplateCategory
    match_type: MatchType

    def to_dict(self) -> dict:
        return {
            "templateId": self.template_id,
            "score": self.score,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "category": self.category.value,
            "matchType": self.match_type.value,
        }


@dataclass
class ResolvedRecommendation:
    """Recommendation joined with the registered template."""
    recommendation: TemplateRecommendation
    template: InvoiceTemplate


class QuestionType(Enum):
    CHOICE = "choice"
    MULTI_CHOICE = "multiChoice"


@dataclass(frozen=True)
class QuestionOption:
    value: str
    label: str
    icon: str = ""


@dataclass(frozen=True)
class OnboardingQuestion:
    """Question asked while collecting a profile."""
    attribute: ProfileAttribute
    type: QuestionType
    question: str
    options: tuple[QuestionOption, ...] = field(default_factory=tuple)
    required: bool = True
    max_selections: Optional[int] = None

    @property
    def id(self) -> str:
        return self.attribute.value

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": self.type.value,
            "question": self.question,
            "options": [
                {"value": o.value, "label": o.label, "icon": o.icon}
                for o in self.options
            ],
            "required": self.required,
        }
        if self.max_selections is not None:
            data["maxSelections"] = self.max_selections
        return data
