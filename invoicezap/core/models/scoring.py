"""Scoring table domain model."""
from dataclasses import dataclass, field
from enum import Enum

from .profile import ATTRIBUTE_VALUE_TYPES, ProfileAttribute
from .template import TemplateCategory

WeightKey = tuple[ProfileAttribute, Enum]


@dataclass
class ScoringTable:
    """Sparse weights of one template, keyed by (attribute, value)."""
    template_id: str
    category: TemplateCategory
    weights: dict[WeightKey, float] = field(default_factory=dict)

    def weight(self, attribute: ProfileAttribute, value: Enum) -> float:
        """Weight for a profile value, 0.0 when the table has no entry."""
        return self.weights.get((attribute, value), 0.0)

    @classmethod
    def from_dict(cls, template_id: str, data: dict) -> "ScoringTable":
        """Build from nested JSON: {"category": ..., "weights": {attr: {value: w}}}.

        Raises:
            ValueError: On unknown attributes, values, categories or
                weights outside [0, 1].
        """
        weights: dict[WeightKey, float] = {}
        for attribute_key, values in data.get("weights", {}).items():
            attribute = ProfileAttribute(attribute_key)
            value_type = ATTRIBUTE_VALUE_TYPES[attribute]
            for value_key, raw_weight in values.items():
                weight = float(raw_weight)
                if not 0.0 <= weight <= 1.0:
                    raise ValueError(
                        f"Weight {attribute_key}.{value_key}={weight} "
                        f"for '{template_id}' is outside [0, 1]"
                    )
                weights[(attribute, value_type(value_key))] = weight

        return cls(
            template_id=template_id,
            category=TemplateCategory(data.get("category", "professional")),
            weights=weights,
        )
