"""Design-code session - wires catalog, sequence store and generator from config.

The session is what callers (forms, API handlers, the CLI) hold on to:

    with DesignCodeSession("engine.yaml") as session:
        errors = session.validate("decal-label", values)
        if not errors:
            result = session.generate("decal-label", values)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from types import TracebackType

from designcode.core.codegen.generator import CodeGenerator
from designcode.core.codegen.pattern import PatternCompiler
from designcode.core.codegen.validation import FieldValidator
from designcode.core.config.loader import load_engine_config
from designcode.core.config.models import EngineConfig
from designcode.core.sequence.allocator import SequenceAllocator
from designcode.core.sequence.factory import create_sequence_store
from designcode.core.sequence.protocols import SequenceStore
from designcode.core.templates.builtins import default_catalog
from designcode.core.templates.catalog import TemplateCatalog
from designcode.core.templates.loader import load_templates
from designcode.core.templates.models import DesignCodeTemplate, GeneratedDesignCode

logger = logging.getLogger(__name__)


class DesignCodeSession:
    """Owns the engine components for one configuration.

    Args:
        config: EngineConfig instance, path to a config file, or None for defaults.
        catalog: Template catalog override (built from config when None).
        store: Sequence store override (built from config when None).
    """

    def __init__(
        self,
        config: EngineConfig | Path | str | None = None,
        *,
        catalog: TemplateCatalog | None = None,
        store: SequenceStore | None = None,
    ) -> None:
        self.config = self._resolve_config(config)
        self.catalog = catalog if catalog is not None else self._build_catalog(self.config)

        self.store = store if store is not None else create_sequence_store(self.config.sequence)
        self.store.initialize()

        tz = self.config.tzinfo()
        self.allocator = SequenceAllocator(self.store, width=self.config.sequence_width)
        self.compiler = PatternCompiler(
            date_format=self.config.date_format,
            clock=lambda: datetime.now(tz),
        )
        self.validator = FieldValidator()
        self.generator = CodeGenerator(
            self.allocator,
            self.compiler,
            self.validator,
            strict=self.config.strict,
        )

        logger.info(
            f"Design-code session ready: {len(self.catalog)} templates, "
            f"sequence backend={self.config.sequence.backend}"
        )

    @staticmethod
    def _resolve_config(value: EngineConfig | Path | str | None) -> EngineConfig:
        if value is None or isinstance(value, (Path, str)):
            return load_engine_config(value)
        if isinstance(value, EngineConfig):
            return value
        raise TypeError(f"Expected EngineConfig, Path, str, or None; got {type(value).__name__}")

    @staticmethod
    def _build_catalog(config: EngineConfig) -> TemplateCatalog:
        catalog = default_catalog()
        if config.templates_path is not None:
            catalog = catalog.with_templates(load_templates(config.templates_path))
        return catalog

    def templates(self) -> tuple[DesignCodeTemplate, ...]:
        return self.catalog.list_all()

    def validate(self, template_id: str, values: Mapping[str, str]) -> list[str]:
        """Messages for fields the caller must still fill.

        Dates and sequence numbers are filled by the engine, so they never block.
        """
        template = self.catalog.get(template_id)
        resolved = dict(values)
        self.compiler.autofill(template, resolved)
        return self.validator.validate(template, resolved, skip_auto=True)

    def generate(self, template_id: str, values: Mapping[str, str]) -> GeneratedDesignCode:
        return self.generator.generate_code(self.catalog.get(template_id), values)

    def preview(self, template_id: str, values: Mapping[str, str]) -> str:
        return self.generator.preview(self.catalog.get(template_id), values)

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> DesignCodeSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
