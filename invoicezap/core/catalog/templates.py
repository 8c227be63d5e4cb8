"""Built-in templates and config defaults."""
from ..models.template import (
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

TEMPLATE_CATEGORIES = {
    TemplateCategory.PROFESSIONAL: {
        "name": "Professional",
        "description": "Clean, business-focused designs suitable for corporate use",
    },
    TemplateCategory.CREATIVE: {
        "name": "Creative",
        "description": "Bold, artistic designs for creative businesses",
    },
    TemplateCategory.MINIMAL: {
        "name": "Minimal",
        "description": "Simple, clean designs focusing on content",
    },
    TemplateCategory.CORPORATE: {
        "name": "Corporate",
        "description": "Traditional business designs for established companies",
    },
}

# Partial configs, merged over the default config by TemplateRegistry.create
LAYOUT_PRESETS: dict[LayoutVariant, dict] = {
    LayoutVariant.MODERN: {
        "layout": "modern",
        "colors": {"primary": "#2563eb", "secondary": "#64748b", "accent": "#f59e0b"},
        "fonts": {"heading": "Inter", "body": "Inter", "accent": "Inter"},
    },
    LayoutVariant.CLASSIC: {
        "layout": "classic",
        "colors": {"primary": "#1f2937", "secondary": "#6b7280", "accent": "#dc2626"},
        "fonts": {"heading": "Georgia", "body": "Times New Roman", "accent": "Georgia"},
    },
    LayoutVariant.MINIMAL: {
        "layout": "minimal",
        "colors": {"primary": "#000000", "secondary": "#6b7280", "accent": "#000000"},
        "fonts": {"heading": "Inter", "body": "Inter", "accent": "Inter"},
    },
}

CUSTOM_THUMBNAIL = "/templates/custom-template.png"
IMPORTED_THUMBNAIL = "/templates/imported-template.png"


def default_config() -> TemplateConfig:
    """Config every custom template starts from."""
    return TemplateConfig(
        layout=LayoutVariant.MODERN,
        colors=TemplateColors(
            primary="#2563eb",
            secondary="#64748b",
            accent="#f59e0b",
            background="#ffffff",
            text="#1e293b",
        ),
        fonts=TemplateFonts(heading="Inter", body="Inter", accent="Inter"),
        sections=TemplateSections(
            header=True,
            company_info=True,
            client_info=True,
            line_items=True,
            totals=True,
            footer=True,
            terms=True,
        ),
        branding=TemplateBranding(logo=True, company_name=True, tagline=False),
    )


def built_in_templates() -> list[InvoiceTemplate]:
    """Fresh instances of the seed templates."""
    return [
        InvoiceTemplate(
            id="modern-professional",
            name="Modern Professional",
            origin=TemplateOrigin.BUILT_IN,
            category=TemplateCategory.PROFESSIONAL,
            thumbnail="/templates/modern-professional.png",
            config=default_config(),
        ),
        InvoiceTemplate(
            id="minimal-clean",
            name="Minimal Clean",
            origin=TemplateOrigin.BUILT_IN,
            category=TemplateCategory.MINIMAL,
            thumbnail="/templates/minimal-clean.png",
            config=TemplateConfig(
                layout=LayoutVariant.MINIMAL,
                colors=TemplateColors(
                    primary="#000000",
                    secondary="#6b7280",
                    accent="#000000",
                    background="#ffffff",
                    text="#111827",
                ),
                fonts=TemplateFonts(heading="Inter", body="Inter", accent="Inter"),
                sections=TemplateSections(
                    header=False,
                    company_info=True,
                    client_info=True,
                    line_items=True,
                    totals=True,
                    footer=False,
                    terms=False,
                ),
                branding=TemplateBranding(logo=False, company_name=True, tagline=False),
            ),
        ),
        InvoiceTemplate(
            id="creative-bold",
            name="Creative Bold",
            origin=TemplateOrigin.BUILT_IN,
            category=TemplateCategory.CREATIVE,
            thumbnail="/templates/creative-bold.png",
            config=TemplateConfig(
                layout=LayoutVariant.CREATIVE,
                colors=TemplateColors(
                    primary="#7c3aed",
                    secondary="#a855f7",
                    accent="#f59e0b",
                    background="#f8fafc",
                    text="#1e293b",
                ),
                fonts=TemplateFonts(heading="Poppins", body="Inter", accent="Poppins"),
                sections=TemplateSections(
                    header=True,
                    company_info=True,
                    client_info=True,
                    line_items=True,
                    totals=True,
                    footer=True,
                    terms=True,
                ),
                branding=TemplateBranding(logo=True, company_name=True, tagline=True),
            ),
        ),
    ]
