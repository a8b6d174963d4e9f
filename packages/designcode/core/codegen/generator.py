"""Design-code generation.

Orchestrates date auto-fill, required-field checks, sequence allocation
and pattern rendering into a ``GeneratedDesignCode``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime

from designcode.core.codegen.pattern import PatternCompiler
from designcode.core.codegen.validation import FieldValidator
from designcode.core.sequence.allocator import SequenceAllocator
from designcode.core.templates.models import DesignCodeTemplate, GeneratedDesignCode

logger = logging.getLogger(__name__)


class DesignCodeError(ValueError):
    """Base exception for design-code generation errors."""


class MissingRequiredFieldsError(DesignCodeError):
    """Raised by strict generation when required fields have no value.

    Attributes:
        template_id: Template being generated.
        errors: Validation messages, one per missing field.
    """

    def __init__(self, template_id: str, errors: list[str]) -> None:
        self.template_id = template_id
        self.errors = list(errors)
        super().__init__(f"Cannot generate {template_id}: " + "; ".join(self.errors))


class CodeGenerator:
    """Generates design codes from templates and field values.

    Args:
        allocator: Sequence allocator for templates with an ``auto`` field.
        compiler: Pattern compiler (default settings when None).
        validator: Field validator used in strict mode.
        strict: Raise ``MissingRequiredFieldsError`` instead of silently
            dropping segments of missing required fields.
        clock: Callable returning the generation timestamp.
    """

    def __init__(
        self,
        allocator: SequenceAllocator,
        compiler: PatternCompiler | None = None,
        validator: FieldValidator | None = None,
        *,
        strict: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.allocator = allocator
        self.compiler = compiler or PatternCompiler()
        self.validator = validator or FieldValidator()
        self.strict = strict
        self._clock = clock or (lambda: datetime.now(UTC))

    def generate_code(
        self, template: DesignCodeTemplate, values: Mapping[str, str]
    ) -> GeneratedDesignCode:
        """Render a design code, allocating a sequence number when needed.

        The caller's mapping is not modified; the returned ``values`` holds
        the resolved map including auto-filled date and sequence.

        Raises:
            MissingRequiredFieldsError: In strict mode, when required
                (non-auto) fields are empty. No sequence is consumed.
        """
        resolved = dict(values)
        self.compiler.autofill(template, resolved)

        missing = self.validator.validate(template, resolved, skip_auto=True)
        if missing:
            if self.strict:
                raise MissingRequiredFieldsError(template.id, missing)
            logger.warning(f"Generating {template.id} with missing required fields: {missing}")

        seq_field = template.sequence_field
        if seq_field is not None and not resolved.get(seq_field.key):
            key = self.allocator.composite_key(template, resolved)
            resolved[seq_field.key] = self.allocator.next(key)

        code = self.compiler.compile(template, resolved)
        logger.debug(f"Generated {template.id} code: {code}")

        return GeneratedDesignCode(
            code=code,
            template=template,
            values=resolved,
            generated_at=self._clock(),
        )

    def preview(self, template: DesignCodeTemplate, values: Mapping[str, str]) -> str:
        """Render what ``generate_code`` would produce without consuming a sequence number.

        Missing fields are not reported; their segments are simply dropped.
        """
        resolved = dict(values)
        seq_field = template.sequence_field
        if seq_field is not None and not resolved.get(seq_field.key):
            key = self.allocator.composite_key(template, resolved)
            resolved[seq_field.key] = self.allocator.peek_next(key)
        return self.compiler.compile(template, resolved)
