"""Required-field validation for design-code values."""

from __future__ import annotations

from collections.abc import Mapping

from designcode.core.templates.models import DesignCodeTemplate, FieldType

REQUIRED_MESSAGE = "{label} là bắt buộc"


class FieldValidator:
    """Checks a value map against a template's required fields.

    Only presence is checked: select options, numbers and date formats are
    left to callers. Errors are returned as messages, never raised.
    """

    def validate(
        self,
        template: DesignCodeTemplate,
        values: Mapping[str, str],
        *,
        skip_auto: bool = False,
    ) -> list[str]:
        """Return one message per missing required field, in template order.

        Args:
            template: Template whose schema is checked.
            values: Field values keyed by field key.
            skip_auto: Ignore ``auto`` fields (the generator fills them itself).

        Returns:
            Error messages; empty when every required field has a value.
        """
        errors: list[str] = []
        for field in template.required_fields:
            if skip_auto and field.type == FieldType.AUTO:
                continue
            value = values.get(field.key)
            if value is None or not str(value).strip():
                errors.append(REQUIRED_MESSAGE.format(label=field.label))
        return errors
