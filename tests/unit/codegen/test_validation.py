"""Tests for required-field validation."""

from __future__ import annotations

import pytest

from designcode.core.codegen.validation import FieldValidator
from designcode.core.templates.builtins import BUILTIN_TEMPLATES, DECAL_LABEL
from designcode.core.templates.models import DesignCodeTemplate


def _complete_values(template: DesignCodeTemplate) -> dict[str, str]:
    return {f.key: f"v-{f.key}" for f in template.fields if f.required}


@pytest.mark.parametrize("template", BUILTIN_TEMPLATES, ids=lambda t: t.id)
def test_all_required_present_yields_no_errors(template: DesignCodeTemplate) -> None:
    assert FieldValidator().validate(template, _complete_values(template)) == []


@pytest.mark.parametrize("template", BUILTIN_TEMPLATES, ids=lambda t: t.id)
def test_each_missing_required_field_reported_once(template: DesignCodeTemplate) -> None:
    validator = FieldValidator()
    for field in template.required_fields:
        values = _complete_values(template)
        del values[field.key]

        errors = validator.validate(template, values)

        assert len(errors) == 1, field.key
        assert field.label in errors[0]


def test_message_format() -> None:
    values = _complete_values(DECAL_LABEL)
    del values["productName"]
    assert FieldValidator().validate(DECAL_LABEL, values) == ["Tên sản phẩm là bắt buộc"]


def test_whitespace_counts_as_missing() -> None:
    values = _complete_values(DECAL_LABEL)
    values["dimensions"] = "   "
    assert FieldValidator().validate(DECAL_LABEL, values) == ["Kích thước (mm) là bắt buộc"]


def test_errors_follow_template_order() -> None:
    errors = FieldValidator().validate(DECAL_LABEL, {})
    assert errors == [
        "Mã đơn hàng là bắt buộc",
        "Loại thiết kế là bắt buộc",
        "Số thứ tự là bắt buộc",
        "Tên sản phẩm là bắt buộc",
        "Kích thước (mm) là bắt buộc",
        "Ngày gửi khách là bắt buộc",
    ]


def test_skip_auto_ignores_sequence() -> None:
    values = _complete_values(DECAL_LABEL)
    del values["sequence"]
    assert FieldValidator().validate(DECAL_LABEL, values, skip_auto=True) == []


def test_optional_fields_and_options_not_checked() -> None:
    values = _complete_values(DECAL_LABEL)
    values["designType"] = "not-an-option"
    assert FieldValidator().validate(DECAL_LABEL, values) == []
