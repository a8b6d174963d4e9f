"""Tests for loading templates from JSON/YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from designcode.core.templates.loader import load_templates
from designcode.core.templates.models import FieldType

STICKER_YAML = """\
templates:
  - id: sticker
    name: Sticker
    pattern: "{orderCode}-{designType}{sequence} {productName} - {finish}"
    fields:
      - {key: orderCode, label: Mã đơn hàng, type: text, required: true}
      - {key: designType, label: Loại thiết kế, type: select, required: true, options: [S]}
      - {key: sequence, label: Số thứ tự, type: auto, required: true}
      - {key: productName, label: Tên sản phẩm, type: text, required: true}
      - {key: finish, label: Hoàn thiện, type: select, options: [Cán màng, Ép kim]}
"""


def test_load_yaml_templates(tmp_path: Path) -> None:
    path = tmp_path / "templates.yaml"
    path.write_text(STICKER_YAML, encoding="utf-8")

    templates = load_templates(path)

    assert [t.id for t in templates] == ["sticker"]
    sticker = templates[0]
    assert sticker.sequence_field is not None
    assert sticker.get_field("finish").type == FieldType.SELECT
    assert sticker.get_field("finish").options == ("Cán màng", "Ép kim")


def test_load_json_bare_list(tmp_path: Path) -> None:
    path = tmp_path / "templates.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "note",
                    "name": "Note",
                    "pattern": "{title}",
                    "fields": [{"key": "title", "label": "Title", "required": True}],
                }
            ]
        ),
        encoding="utf-8",
    )

    templates = load_templates(path)
    assert templates[0].id == "note"
    assert templates[0].fields[0].type == FieldType.TEXT


def test_invalid_template_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("templates:\n  - id: broken\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_templates(path)


def test_non_list_document_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"templates": {"id": "x"}}), encoding="utf-8")

    with pytest.raises(ValueError, match="Expected a list"):
        load_templates(path)


def test_undeclared_placeholder_logs_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "t.yaml"
    path.write_text(
        'templates:\n  - id: t\n    name: T\n    pattern: "{a} {b}"\n'
        "    fields:\n      - {key: a, label: A}\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        load_templates(path)

    assert "undeclared fields: ['b']" in caplog.text


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_templates(tmp_path / "absent.yaml")
