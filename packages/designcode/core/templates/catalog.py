"""Immutable design-code template catalog.

The catalog is built once from a fixed set of templates and only exposes
read operations. Lookup order is catalog order, which also decides
``find_by_design_type_option`` when option lists overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from designcode.core.templates.models import DesignCodeTemplate, FieldType

logger = logging.getLogger(__name__)

DESIGN_TYPE_FIELD = "designType"


class TemplateNotFoundError(KeyError):
    """Raised when a template id is not in the catalog."""

    pass


class TemplateCatalog:
    """Read-only registry of design-code templates.

    Example:
        >>> catalog = TemplateCatalog([box_template, decal_template])
        >>> catalog.get_by_id("decal-label")
        >>> catalog.find_by_design_type_option("D")
    """

    __slots__ = ("_templates", "_by_id")

    def __init__(self, templates: Iterable[DesignCodeTemplate]) -> None:
        """Build the catalog.

        Args:
            templates: Templates in catalog order.

        Raises:
            ValueError: If two templates share an id.
        """
        ordered = tuple(templates)
        by_id: dict[str, DesignCodeTemplate] = {}
        for t in ordered:
            if t.id in by_id:
                raise ValueError(f"Template already registered: {t.id}")
            by_id[t.id] = t

        self._templates = ordered
        self._by_id = MappingProxyType(by_id)
        logger.debug(f"Template catalog built with {len(ordered)} templates")

    def get_by_id(self, template_id: str) -> DesignCodeTemplate | None:
        return self._by_id.get(template_id)

    def get(self, template_id: str) -> DesignCodeTemplate:
        """Lookup a template by id.

        Raises:
            TemplateNotFoundError: If the id is unknown.
        """
        t = self._by_id.get(template_id)
        if t is None:
            raise TemplateNotFoundError(f"Unknown template: {template_id}")
        return t

    def find_by_design_type_option(self, code: str) -> DesignCodeTemplate | None:
        """First template, in catalog order, whose design-type select lists ``code``."""
        for t in self._templates:
            field = t.get_field(DESIGN_TYPE_FIELD)
            if field is not None and field.type == FieldType.SELECT and code in field.options:
                return t
        return None

    def template_for_design_type(self, code: str) -> DesignCodeTemplate:
        """Template matching ``code``, falling back to the first catalog template.

        Raises:
            TemplateNotFoundError: If the catalog is empty.
        """
        t = self.find_by_design_type_option(code)
        if t is not None:
            return t
        if not self._templates:
            raise TemplateNotFoundError("Template catalog is empty")
        logger.debug(f"No template lists design type {code!r}, using {self._templates[0].id}")
        return self._templates[0]

    def with_templates(self, extra: Iterable[DesignCodeTemplate]) -> TemplateCatalog:
        """Return a new catalog with ``extra`` appended after the current templates."""
        return TemplateCatalog((*self._templates, *extra))

    def list_all(self) -> tuple[DesignCodeTemplate, ...]:
        return self._templates

    def list_ids(self) -> list[str]:
        return [t.id for t in self._templates]

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._by_id

    def __iter__(self) -> Iterator[DesignCodeTemplate]:
        return iter(self._templates)
