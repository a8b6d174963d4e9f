from designcode.core.templates.builtins import BUILTIN_TEMPLATES, default_catalog
from designcode.core.templates.catalog import TemplateCatalog, TemplateNotFoundError
from designcode.core.templates.loader import load_templates
from designcode.core.templates.models import (
    DesignCodeField,
    DesignCodeTemplate,
    FieldType,
    GeneratedDesignCode,
)

__all__ = [
    "BUILTIN_TEMPLATES",
    "DesignCodeField",
    "DesignCodeTemplate",
    "FieldType",
    "GeneratedDesignCode",
    "TemplateCatalog",
    "TemplateNotFoundError",
    "default_catalog",
    "load_templates",
]
