"""Static catalog data: built-in templates, weights, questions."""
from .onboarding import (
    GOAL_LABELS,
    MAX_GOAL_SELECTIONS,
    PROFILE_DEFAULTS,
    QUESTION_BANK,
    QUICK_START_PROFILES,
)
from .scoring_tables import BUILT_IN_SCORING_TABLES
from .templates import (
    LAYOUT_PRESETS,
    TEMPLATE_CATEGORIES,
    built_in_templates,
    default_config,
)

__all__ = [
    "GOAL_LABELS",
    "MAX_GOAL_SELECTIONS",
    "PROFILE_DEFAULTS",
    "QUESTION_BANK",
    "QUICK_START_PROFILES",
    "BUILT_IN_SCORING_TABLES",
    "LAYOUT_PRESETS",
    "TEMPLATE_CATEGORIES",
    "built_in_templates",
    "default_config",
]
