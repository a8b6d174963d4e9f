"""Template models for design-code generation.

This module defines the template-related models:
- FieldType: kinds of input slots
- DesignCodeField: one input slot of a template
- DesignCodeTemplate: pattern plus ordered field schema
- GeneratedDesignCode: output record of a generation call

Templates are static data; the engine never mutates them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


class FieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    DATE = "date"
    AUTO = "auto"


class DesignCodeField(BaseModel):
    """One input slot in a template.

    Attributes:
        key: Identifier within the template, also the placeholder name.
        label: Display name, used in validation messages.
        type: Field kind. ``select`` options are advisory only, ``date`` is
            auto-filled with today when empty, ``auto`` is engine-populated.
        required: Whether validation requires a non-empty value.
        options: Choices for ``select`` fields.
        placeholder: Input hint shown by form callers.
        default_value: Seed value applied by callers before first render.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(min_length=1)
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    options: tuple[str, ...] = ()
    placeholder: str | None = None
    default_value: str | None = None


class DesignCodeTemplate(BaseModel):
    """Named pattern plus ordered field schema.

    Attributes:
        id: Unique template identifier (e.g. ``decal-label``).
        name: Human-readable name.
        pattern: Text with ``{key}`` placeholders between literals and separators.
        description: Free-form description.
        example: Example of a rendered code.
        fields: Ordered field schema.
        sequence_scope: Field keys whose values, joined with ``-``, scope the
            sequence counter.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    pattern: str
    description: str = ""
    example: str = ""
    fields: tuple[DesignCodeField, ...] = ()
    sequence_scope: tuple[str, ...] = ("orderCode", "designType")

    @model_validator(mode="after")
    def _validate_unique_keys(self) -> DesignCodeTemplate:
        keys = [f.key for f in self.fields]
        dupes = sorted({k for k in keys if keys.count(k) > 1})
        if dupes:
            raise ValueError(f"Duplicate field keys in template {self.id!r}: {dupes}")
        return self

    @property
    def field_keys(self) -> tuple[str, ...]:
        return tuple(f.key for f in self.fields)

    @property
    def required_fields(self) -> tuple[DesignCodeField, ...]:
        return tuple(f for f in self.fields if f.required)

    @property
    def date_fields(self) -> tuple[DesignCodeField, ...]:
        return tuple(f for f in self.fields if f.type == FieldType.DATE)

    @property
    def sequence_field(self) -> DesignCodeField | None:
        """The engine-populated sequence field, if the template declares one."""
        for f in self.fields:
            if f.type == FieldType.AUTO:
                return f
        return None

    def get_field(self, key: str) -> DesignCodeField | None:
        for f in self.fields:
            if f.key == key:
                return f
        return None

    def placeholder_keys(self) -> tuple[str, ...]:
        """Keys of all ``{key}`` tokens in the pattern, in order of appearance."""
        return tuple(_PLACEHOLDER_RE.findall(self.pattern))

    def default_values(self) -> dict[str, str]:
        """Seed values for a fresh form.

        ``auto`` fields are skipped so that generation still allocates a
        sequence instead of reusing the seed.
        """
        return {
            f.key: f.default_value
            for f in self.fields
            if f.default_value and f.type != FieldType.AUTO
        }


class GeneratedDesignCode(BaseModel):
    """Result of one generation call.

    Attributes:
        code: Final rendered design code.
        template: Template used for rendering.
        values: Values actually used, including auto-filled date and sequence.
            Read-only.
        generated_at: Generation timestamp (timezone-aware).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str
    template: DesignCodeTemplate
    values: Mapping[str, str]
    generated_at: datetime

    @field_validator("values", mode="after")
    @classmethod
    def _freeze_values(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("values")
    def _dump_values(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)
