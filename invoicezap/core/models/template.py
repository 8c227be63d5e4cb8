"""Template domain models."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class TemplateOrigin(Enum):
    """Where a template came from. Controls whether it can be deleted."""
    BUILT_IN = "built-in"
    CUSTOM = "custom"
    IMPORTED = "imported"


class TemplateCategory(Enum):
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    MINIMAL = "minimal"
    CORPORATE = "corporate"


class LayoutVariant(Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    CREATIVE = "creative"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _flag(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be true or false, got {value!r}")
    return value


@dataclass
class TemplateColors:
    primary: str = ""
    secondary: str = ""
    accent: str = ""
    background: str = ""
    text: str = ""

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateColors":
        return cls(**{k: str(data.get(k) or "") for k in cls().to_dict()})


@dataclass
class TemplateFonts:
    heading: str = ""
    body: str = ""
    accent: str = ""

    def to_dict(self) -> dict:
        return {"heading": self.heading, "body": self.body, "accent": self.accent}

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateFonts":
        return cls(**{k: str(data.get(k) or "") for k in cls().to_dict()})


@dataclass
class TemplateSections:
    """Which invoice blocks are rendered."""
    header: bool = False
    company_info: bool = False
    client_info: bool = False
    line_items: bool = False
    totals: bool = False
    footer: bool = False
    terms: bool = False

    # attribute -> JSON key
    KEYS = {
        "header": "header",
        "company_info": "companyInfo",
        "client_info": "clientInfo",
        "line_items": "lineItems",
        "totals": "totals",
        "footer": "footer",
        "terms": "terms",
    }

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in self.KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateSections":
        return cls(**{attr: _flag(data, key) for attr, key in cls.KEYS.items()})


@dataclass
class TemplateBranding:
    logo: bool = False
    company_name: bool = False
    tagline: bool = False

    KEYS = {"logo": "logo", "company_name": "companyName", "tagline": "tagline"}

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in self.KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateBranding":
        return cls(**{attr: _flag(data, key) for attr, key in cls.KEYS.items()})


@dataclass
class TemplateConfig:
    """Visual and structural configuration of an invoice template."""
    layout: Optional[LayoutVariant] = None
    colors: TemplateColors = field(default_factory=TemplateColors)
    fonts: TemplateFonts = field(default_factory=TemplateFonts)
    sections: TemplateSections = field(default_factory=TemplateSections)
    branding: TemplateBranding = field(default_factory=TemplateBranding)

    def to_dict(self) -> dict:
        """Convert to the JSON shape used by export/import."""
        return {
            "layout": self.layout.value if self.layout else None,
            "colors": self.colors.to_dict(),
            "fonts": self.fonts.to_dict(),
            "sections": self.sections.to_dict(),
            "branding": self.branding.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateConfig":
        """Parse a JSON config. Missing fields stay empty.

        Raises:
            ValueError: If layout is not a known variant.
            TypeError: If data or one of its groups is not a mapping.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Config must be an object, got {type(data).__name__}")

        groups = {}
        for name in ("colors", "fonts", "sections", "branding"):
            value = data.get(name) or {}
            if not isinstance(value, dict):
                raise TypeError(f"Config '{name}' must be an object")
            groups[name] = value

        layout = data.get("layout")
        return cls(
            layout=LayoutVariant(layout) if layout else None,
            colors=TemplateColors.from_dict(groups["colors"]),
            fonts=TemplateFonts.from_dict(groups["fonts"]),
            sections=TemplateSections.from_dict(groups["sections"]),
            branding=TemplateBranding.from_dict(groups["branding"]),
        )


@dataclass
class ConfigValidation:
    """Result of a config check."""
    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class InvoiceTemplate:
    """Template registered in the catalog."""
    id: str
    name: str
    origin: TemplateOrigin
    category: TemplateCategory
    config: TemplateConfig
    thumbnail: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def is_built_in(self) -> bool:
        return self.origin is TemplateOrigin.BUILT_IN

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "origin": self.origin.value,
            "category": self.category.value,
            "thumbnail": self.thumbnail,
            "config": self.config.to_dict(),
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
