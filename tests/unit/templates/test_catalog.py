"""Tests for the template catalog."""

from __future__ import annotations

import pytest

from designcode.core.templates.builtins import (
    BUILTIN_TEMPLATES,
    DECAL_LABEL,
    LABEL_PAPER,
    PACKAGE_BOX,
    PACKAGING_BAG,
    default_catalog,
)
from designcode.core.templates.catalog import TemplateCatalog, TemplateNotFoundError
from designcode.core.templates.models import DesignCodeField, DesignCodeTemplate, FieldType


def _template(template_id: str, options: tuple[str, ...]) -> DesignCodeTemplate:
    return DesignCodeTemplate(
        id=template_id,
        name=template_id.title(),
        pattern="{designType}",
        fields=(
            DesignCodeField(
                key="designType", label="Loại", type=FieldType.SELECT, options=options
            ),
        ),
    )


class TestLookup:
    def test_builtin_ids_in_order(self) -> None:
        assert default_catalog().list_ids() == [
            "package-box",
            "decal-label",
            "label-paper",
            "packaging-bag",
        ]

    def test_get_by_id(self, catalog: TemplateCatalog) -> None:
        assert catalog.get_by_id("decal-label") is DECAL_LABEL
        assert catalog.get_by_id("nope") is None

    def test_get_raises_for_unknown(self, catalog: TemplateCatalog) -> None:
        with pytest.raises(TemplateNotFoundError, match="nope"):
            catalog.get("nope")

    def test_container_protocol(self, catalog: TemplateCatalog) -> None:
        assert len(catalog) == 4
        assert "label-paper" in catalog
        assert "missing" not in catalog
        assert list(catalog) == list(BUILTIN_TEMPLATES)

    def test_default_catalog_built_once(self) -> None:
        assert default_catalog() is default_catalog()


class TestDesignTypeLookup:
    def test_unique_option_returns_owner(self, catalog: TemplateCatalog) -> None:
        assert catalog.find_by_design_type_option("H") is PACKAGE_BOX
        assert catalog.find_by_design_type_option("L") is LABEL_PAPER

    def test_shared_option_first_match_wins(self, catalog: TemplateCatalog) -> None:
        # "T" is listed by package-box, decal-label and packaging-bag
        results = {catalog.find_by_design_type_option("T") for _ in range(5)}
        assert results == {PACKAGE_BOX}

    def test_catalog_order_decides(self) -> None:
        a = _template("a", ("X", "Y"))
        b = _template("b", ("Y", "Z"))
        assert TemplateCatalog([a, b]).find_by_design_type_option("Y") is a
        assert TemplateCatalog([b, a]).find_by_design_type_option("Y") is b

    def test_unknown_option(self, catalog: TemplateCatalog) -> None:
        assert catalog.find_by_design_type_option("Q") is None

    def test_non_select_design_type_ignored(self) -> None:
        t = DesignCodeTemplate(
            id="text-type",
            name="Text",
            pattern="{designType}",
            fields=(DesignCodeField(key="designType", label="Loại", options=("X",)),),
        )
        assert TemplateCatalog([t]).find_by_design_type_option("X") is None

    def test_template_for_design_type_falls_back_to_first(self, catalog: TemplateCatalog) -> None:
        assert catalog.template_for_design_type("B") is PACKAGE_BOX
        assert catalog.template_for_design_type("C") is PACKAGE_BOX
        assert catalog.template_for_design_type("Q") is PACKAGE_BOX

    def test_template_for_design_type_empty_catalog(self) -> None:
        with pytest.raises(TemplateNotFoundError):
            TemplateCatalog([]).template_for_design_type("D")


class TestImmutability:
    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            TemplateCatalog([DECAL_LABEL, DECAL_LABEL])

    def test_list_all_is_tuple(self, catalog: TemplateCatalog) -> None:
        assert isinstance(catalog.list_all(), tuple)

    def test_no_attribute_assignment(self, catalog: TemplateCatalog) -> None:
        with pytest.raises(AttributeError):
            catalog.extra = 1  # type: ignore[attr-defined]

    def test_with_templates_returns_new_catalog(self, catalog: TemplateCatalog) -> None:
        extra = _template("sticker", ("S",))
        extended = catalog.with_templates([extra])

        assert extended is not catalog
        assert len(catalog) == 4
        assert extended.list_ids()[-1] == "sticker"
        assert extended.get("packaging-bag") is PACKAGING_BAG
