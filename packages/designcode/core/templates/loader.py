"""Load extra design-code templates from JSON or YAML files.

Accepted layouts::

    templates:
      - id: sticker
        name: Sticker
        pattern: "{orderCode}-{designType}{sequence} {productName}"
        fields: [...]

or a bare list of template mappings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from designcode.core.config.loader import load_config
from designcode.core.templates.models import DesignCodeTemplate

logger = logging.getLogger(__name__)


def load_templates(path: str | Path) -> list[DesignCodeTemplate]:
    """Read and validate templates from ``path``.

    Args:
        path: Template file (.json, .yaml, or .yml)

    Returns:
        Templates in file order.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document layout is not recognised
        ValidationError: If a template is invalid
    """
    raw = load_config(path)
    if isinstance(raw, dict):
        raw = raw.get("templates", [])
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of templates in {path}, got {type(raw).__name__}")

    templates = [DesignCodeTemplate.model_validate(item) for item in raw]

    for t in templates:
        missing = sorted(set(t.placeholder_keys()) - set(t.field_keys))
        if missing:
            logger.warning(f"Template {t.id} pattern references undeclared fields: {missing}")

    logger.debug(f"Loaded {len(templates)} templates from {path}")
    return templates
