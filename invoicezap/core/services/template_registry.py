"""Template registry - owner of the invoice template catalog."""

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ..catalog.templates import (
    CUSTOM_THUMBNAIL,
    IMPORTED_THUMBNAIL,
    built_in_templates,
    default_config,
)
from ..models.template import (
    ConfigValidation,
    InvoiceTemplate,
    TemplateCategory,
    TemplateConfig,
    TemplateOrigin,
)
from ..protocols.id_generator import IdGeneratorProtocol

logger = logging.getLogger(__name__)

_ID_PREFIXES = {
    TemplateOrigin.CUSTOM: "custom",
    TemplateOrigin.IMPORTED: "imported",
}
_PROTECTED_FIELDS = {"id", "origin", "type", "created_at", "createdAt", "updated_at", "updatedAt"}


def _merge(base: dict, partial: dict) -> dict:
    merged = dict(base)
    for key, value in partial.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _merge_config(base: TemplateConfig, partial: Optional[dict]) -> TemplateConfig:
    if not partial:
        return copy.deepcopy(base)
    if not isinstance(partial, dict):
        raise TypeError(f"Config overrides must be an object, got {type(partial).__name__}")
    return TemplateConfig.from_dict(_merge(base.to_dict(), partial))


class TemplateRegistry:
    """In-memory catalog of built-in, custom and imported templates.

    Every read returns a deep copy, so callers mutate the catalog only
    through registry methods. Failures are reported as None/False.
    """

    def __init__(self, id_generator: IdGeneratorProtocol):
        self._id_generator = id_generator
        self._templates: dict[str, InvoiceTemplate] = {}

        for template in built_in_templates():
            self._templates[template.id] = template

        logger.info(f"Registry seeded with {len(self._templates)} built-in templates")

    def _new_id(self, origin: TemplateOrigin, label: str = "") -> str:
        prefix = label or _ID_PREFIXES.get(origin, "template")
        template_id = self._id_generator.new_id(prefix)
        while template_id in self._templates:
            logger.warning(f"Generated id '{template_id}' already taken, regenerating")
            template_id = self._id_generator.new_id(prefix)
        return template_id

    def _register(self, template: InvoiceTemplate) -> InvoiceTemplate:
        self._templates[template.id] = template
        validation = self.validate_config(template.config)
        if not validation.is_valid:
            logger.warning(
                f"Template '{template.id}' has config issues: {'; '.join(validation.errors)}"
            )
        return copy.deepcopy(template)

    def get_all(self) -> list[InvoiceTemplate]:
        return copy.deepcopy(list(self._templates.values()))

    def get_by_id(self, template_id: str) -> Optional[InvoiceTemplate]:
        template = self._templates.get(template_id)
        return copy.deepcopy(template) if template else None

    def find(
        self,
        category: Optional[TemplateCategory] = None,
        search: Optional[str] = None,
        origin: Optional[TemplateOrigin] = None,
        active_only: bool = False,
    ) -> list[InvoiceTemplate]:
        """Filter the catalog.

        Args:
            category: Keep only this category.
            search: Case-insensitive substring of the template name.
            origin: Keep only this origin.
            active_only: Drop inactive templates.

        Returns:
            Matching templates in insertion order.
        """
        needle = search.lower().strip() if search else ""
        results = []
        for template in self._templates.values():
            if category is not None and template.category is not category:
                continue
            if origin is not None and template.origin is not origin:
                continue
            if active_only and not template.is_active:
                continue
            if needle and needle not in template.name.lower():
                continue
            results.append(template)
        return copy.deepcopy(results)

    def create(
        self,
        name: str,
        partial_config: Optional[dict] = None,
        category: TemplateCategory = TemplateCategory.PROFESSIONAL,
    ) -> Optional[InvoiceTemplate]:
        """Create a custom template from the default config.

        Args:
            name: Display name.
            partial_config: JSON-shaped config overrides, deep-merged.
            category: Template category.

        Returns:
            Created template, or None if the overrides cannot be parsed.
        """
        try:
            config = _merge_config(default_config(), partial_config)
        except (TypeError, ValueError) as e:
            logger.warning(f"Cannot create template '{name}': {e}")
            return None

        now = datetime.now(timezone.utc)
        template = InvoiceTemplate(
            id=self._new_id(TemplateOrigin.CUSTOM),
            name=name,
            origin=TemplateOrigin.CUSTOM,
            category=category,
            thumbnail=CUSTOM_THUMBNAIL,
            config=config,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        logger.info(f"Created template '{template.id}' ({name})")
        return self._register(template)

    def update(self, template_id: str, fields: dict[str, Any]) -> Optional[InvoiceTemplate]:
        """Merge fields into a template. id and origin are never written.

        Returns:
            Updated template, or None if not found or a value is invalid.
        """
        template = self._templates.get(template_id)
        if template is None:
            logger.warning(f"Update failed: template '{template_id}' not found")
            return None

        updated = copy.deepcopy(template)
        try:
            for key, value in fields.items():
                if key == "name":
                    updated.name = str(value)
                elif key == "category":
                    updated.category = TemplateCategory(
                        value.value if isinstance(value, TemplateCategory) else value
                    )
                elif key == "thumbnail":
                    updated.thumbnail = str(value)
                elif key in ("is_active", "isActive"):
                    updated.is_active = bool(value)
                elif key == "config":
                    if isinstance(value, TemplateConfig):
                        updated.config = copy.deepcopy(value)
                    else:
                        updated.config = _merge_config(updated.config, value)
                elif key in _PROTECTED_FIELDS:
                    logger.warning(f"Ignoring write to protected field '{key}'")
                else:
                    logger.warning(f"Ignoring unknown template field '{key}'")
        except (TypeError, ValueError) as e:
            logger.warning(f"Update of '{template_id}' rejected: {e}")
            return None

        updated.updated_at = datetime.now(timezone.utc)
        self._templates[template_id] = updated
        logger.info(f"Updated template '{template_id}'")
        return copy.deepcopy(updated)

    def delete(self, template_id: str) -> bool:
        template = self._templates.get(template_id)
        if template is None or template.is_built_in:
            logger.warning(f"Template '{template_id}' not found or cannot be deleted")
            return False

        del self._templates[template_id]
        logger.info(f"Deleted template '{template_id}'")
        return True

    def duplicate(self, template_id: str, new_name: str) -> Optional[InvoiceTemplate]:
        source = self._templates.get(template_id)
        if source is None:
            logger.warning(f"Duplicate failed: template '{template_id}' not found")
            return None

        now = datetime.now(timezone.utc)
        template = copy.deepcopy(source)
        template.id = self._new_id(TemplateOrigin.CUSTOM, label="copy")
        template.name = new_name
        template.origin = TemplateOrigin.CUSTOM
        template.created_at = now
        template.updated_at = now

        logger.info(f"Duplicated '{template_id}' as '{template.id}'")
        return self._register(template)

    def export(self, template_id: str) -> Optional[dict]:
        """JSON-serializable payload accepted by import_template."""
        template = self._templates.get(template_id)
        if template is None:
            logger.warning(f"Export failed: template '{template_id}' not found")
            return None

        return {
            "name": template.name,
            "category": template.category.value,
            "thumbnail": template.thumbnail,
            "config": template.config.to_dict(),
        }

    def import_template(self, payload: Any) -> Optional[InvoiceTemplate]:
        """Register an exported payload as a new imported template.

        Returns:
            Imported template, or None when name/config are missing or
            invalid. The catalog is left untouched on failure.
        """
        if (
            not isinstance(payload, dict)
            or not payload.get("name")
            or payload.get("config") is None
        ):
            logger.error("Failed to import template: name and config are required")
            return None

        try:
            config = TemplateConfig.from_dict(payload["config"])
            category = TemplateCategory(payload.get("category") or "professional")
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to import template: {e}")
            return None

        now = datetime.now(timezone.utc)
        template = InvoiceTemplate(
            id=self._new_id(TemplateOrigin.IMPORTED),
            name=str(payload["name"]),
            origin=TemplateOrigin.IMPORTED,
            category=category,
            thumbnail=payload.get("thumbnail") or IMPORTED_THUMBNAIL,
            config=config,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        logger.info(f"Imported template '{template.id}' ({template.name})")
        return self._register(template)

    @staticmethod
    def validate_config(config: TemplateConfig) -> ConfigValidation:
        errors: list[str] = []

        if not config.layout:
            errors.append("Layout is required")
        if not config.colors.primary:
            errors.append("Primary color is required")
        if not config.fonts.heading:
            errors.append("Heading font is required")

        return ConfigValidation(is_valid=not errors, errors=errors)
