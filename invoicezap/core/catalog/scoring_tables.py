"""Hand-authored template weights per profile attribute value.

Weights are in [0, 1]. Values absent from a table weigh 0.
"""

BUILT_IN_SCORING_TABLES: dict[str, dict] = {
    "modern-professional": {
        "category": "professional",
        "weights": {
            "businessType": {
                "freelancer": 0.8,
                "consultant": 0.9,
                "agency": 0.7,
                "startup": 0.8,
                "enterprise": 0.6,
            },
            "industry": {
                "technology": 0.9,
                "consulting": 0.9,
                "finance": 0.8,
                "legal": 0.7,
            },
            "companySize": {"solo": 0.8, "2-5": 0.9, "6-20": 0.8},
            "designPreference": {"modern": 1.0, "professional": 0.9},
            "colorPreference": {"blue": 0.9, "neutral": 0.8},
            "targetAudience": {"clients": 0.9, "partners": 0.8},
            "invoiceFrequency": {"monthly": 0.8, "project-based": 0.9},
            "budget": {"value-focused": 0.8, "premium": 0.7},
            "experience": {"intermediate": 0.8, "advanced": 0.9},
            "goals": {
                "look-professional": 0.9,
                "build-trust": 0.9,
                "scale-business": 0.8,
            },
        },
    },
    "minimal-clean": {
        "category": "minimal",
        "weights": {
            "businessType": {"freelancer": 0.9, "consultant": 0.7, "startup": 0.8},
            "industry": {"design": 0.9, "technology": 0.8, "education": 0.8},
            "companySize": {"solo": 0.9, "2-5": 0.8},
            "designPreference": {"minimal": 1.0, "modern": 0.8},
            "colorPreference": {"neutral": 0.9, "branded": 0.7},
            "targetAudience": {"clients": 0.8, "customers": 0.7},
            "invoiceFrequency": {"weekly": 0.8, "monthly": 0.7},
            "budget": {"budget-conscious": 0.8, "value-focused": 0.7},
            "experience": {"beginner": 0.8, "intermediate": 0.7},
            "goals": {"save-time": 0.9, "look-professional": 0.7, "stand-out": 0.6},
        },
    },
    "creative-bold": {
        "category": "creative",
        "weights": {
            "businessType": {
                "agency": 0.9,
                "startup": 0.8,
                "freelancer": 0.8,
                "consultant": 0.6,
            },
            "industry": {
                "marketing": 0.9,
                "design": 0.9,
                "retail": 0.8,
                "technology": 0.7,
            },
            "companySize": {"solo": 0.8, "2-5": 0.8, "6-20": 0.7},
            "designPreference": {"creative": 1.0, "bold": 1.0, "modern": 0.7},
            "colorPreference": {"purple": 0.9, "orange": 0.8, "branded": 0.8},
            "targetAudience": {"customers": 0.9, "clients": 0.7},
            "invoiceFrequency": {
                "weekly": 0.8,
                "monthly": 0.7,
                "project-based": 0.9,
            },
            "budget": {"premium": 0.8, "value-focused": 0.7},
            "experience": {"intermediate": 0.8, "advanced": 0.7},
            "goals": {
                "stand-out": 0.9,
                "increase-conversions": 0.8,
                "scale-business": 0.7,
                "look-professional": 0.7,
            },
        },
    },
}
