"""Built-in design-code templates and option vocabularies."""

from __future__ import annotations

from functools import cache

from designcode.core.templates.catalog import TemplateCatalog
from designcode.core.templates.models import DesignCodeField, DesignCodeTemplate, FieldType

DESIGN_TYPES: tuple[str, ...] = (
    "Hộp",
    "Túi",
    "Nhãn",
    "Tem",
    "Catalog",
    "Brochure",
    "Poster",
    "Banner",
    "Card",
    "Sticker",
)

PAPER_TYPES: tuple[str, ...] = (
    "D350",
    "D400",
    "D450",
    "Couche 250gsm",
    "Couche 300gsm",
    "Art Paper 230gsm",
    "Art Paper 300gsm",
    "Kraft Paper",
    "Duplex",
    "Ivory",
)

PRINT_TECHNIQUES: tuple[str, ...] = (
    "Offset 4 màu",
    "Offset 1 màu",
    "Digital Print",
    "UV Print",
    "Silk Screen",
    "Flexo Print",
)

FINISHING_OPTIONS: tuple[str, ...] = (
    "Cán màng",
    "Ép kim",
    "Ép nhiệt",
    "Đóng gói",
    "Cắt die",
    "Gấp",
    "Dán",
)


def _order_code(example: str) -> DesignCodeField:
    return DesignCodeField(
        key="orderCode",
        label="Mã đơn hàng",
        type=FieldType.TEXT,
        required=True,
        placeholder=f"VD: {example}",
    )


def _design_type(options: tuple[str, ...]) -> DesignCodeField:
    return DesignCodeField(
        key="designType",
        label="Loại thiết kế",
        type=FieldType.SELECT,
        required=True,
        options=options,
        default_value=options[0],
    )


# Shared slots: every built-in template numbers its designs and stamps the delivery date.
SEQUENCE_FIELD = DesignCodeField(
    key="sequence",
    label="Số thứ tự",
    type=FieldType.AUTO,
    required=True,
    default_value="001",
)

DATE_FIELD = DesignCodeField(
    key="date",
    label="Ngày gửi khách",
    type=FieldType.DATE,
    required=True,
)


def _dimensions(example: str) -> DesignCodeField:
    return DesignCodeField(
        key="dimensions",
        label="Kích thước (mm)",
        type=FieldType.TEXT,
        required=True,
        placeholder=f"VD: {example}",
    )


def _weight() -> DesignCodeField:
    return DesignCodeField(
        key="weight",
        label="Trọng lượng/Dung tích",
        type=FieldType.TEXT,
        required=True,
        placeholder="VD: 1 kg, 500ml",
    )


PACKAGE_BOX = DesignCodeTemplate(
    id="package-box",
    name="Hộp đóng gói",
    pattern=(
        "{orderCode}-{designType}{sequence}: {productType} - {material} - {volume}"
        " - KT: {dimensions} - Ngày: {date}"
    ),
    description="Template cho thiết kế hộp đóng gói sản phẩm",
    example=(
        "0210SG-H013: Hộp Cáp Đôi CÁP SỮA BO TRÍ 200ml - KT: 123x62x145mm - Ngày: 11/10/2025"
    ),
    fields=(
        _order_code("0210SG"),
        _design_type(("H", "T", "N", "C", "B", "P", "D")),
        SEQUENCE_FIELD,
        DesignCodeField(
            key="productType",
            label="Tên sản phẩm",
            required=True,
            placeholder="VD: Hộp Cáp Đôi CÁP SỮA BO TRÍ",
        ),
        DesignCodeField(
            key="material",
            label="Chất liệu",
            type=FieldType.SELECT,
            options=PAPER_TYPES,
        ),
        DesignCodeField(
            key="volume",
            label="Dung tích/Trọng lượng",
            placeholder="VD: 200ml, 1kg",
        ),
        _dimensions("123x62x145mm"),
        DATE_FIELD,
    ),
)

DECAL_LABEL = DesignCodeTemplate(
    id="decal-label",
    name="Decal/Nhãn dán",
    pattern=(
        "{orderCode}-{designType}{sequence} {productName} - {specifications}"
        " - KT: {dimensions} - Ngày: {date}"
    ),
    description="Template cho thiết kế decal và nhãn dán",
    example="0208DH-D039 Decal bé CREEK 2.1EC - KT: 60 x 97 mm - Ngày: 09/10/2025",
    fields=(
        _order_code("0208DH"),
        _design_type(("D", "N", "T")),
        SEQUENCE_FIELD,
        DesignCodeField(
            key="productName",
            label="Tên sản phẩm",
            required=True,
            placeholder="VD: Decal bé CREEK 2.1EC",
        ),
        DesignCodeField(
            key="specifications",
            label="Thông số kỹ thuật",
            placeholder="VD: 2.1EC, chống nước",
        ),
        _dimensions("60 x 97 mm"),
        DATE_FIELD,
    ),
)

LABEL_PAPER = DesignCodeTemplate(
    id="label-paper",
    name="Nhãn giấy",
    pattern=(
        "{orderCode}-{designType}{sequence} {productName} - {weight}"
        " - Kích thước: {dimensions} ({note}) - Ngày: {date}"
    ),
    description="Template cho thiết kế nhãn giấy sản phẩm",
    example=(
        "0208DH-C165 Nhãn giấy Dr.Stop - 1 kg - Kích thước: 280 x 153 mm"
        " (đã tính mép dán 10mm) - Ngày: 14/10/2025"
    ),
    fields=(
        _order_code("0208DH"),
        _design_type(("C", "N", "L")),
        SEQUENCE_FIELD,
        DesignCodeField(
            key="productName",
            label="Tên sản phẩm",
            required=True,
            placeholder="VD: Nhãn giấy Dr.Stop",
        ),
        _weight(),
        _dimensions("280 x 153 mm"),
        DesignCodeField(
            key="note",
            label="Ghi chú kỹ thuật",
            placeholder="VD: đã tính mép dán 10mm",
        ),
        DATE_FIELD,
    ),
)

PACKAGING_BAG = DesignCodeTemplate(
    id="packaging-bag",
    name="Túi đóng gói",
    pattern=(
        "{orderCode}-{designType}{sequence} {productName} - {weight}"
        " - Kích thước: {dimensions} - Ngày: {date}"
    ),
    description="Template cho thiết kế túi đóng gói",
    example="0208DH-T003 Túi Man Xanh - 1 kg - Kích thước: 230 x 350 mm - Ngày: 14/10/2025",
    fields=(
        _order_code("0208DH"),
        _design_type(("T", "B", "P")),
        SEQUENCE_FIELD,
        DesignCodeField(
            key="productName",
            label="Tên sản phẩm",
            required=True,
            placeholder="VD: Túi Man Xanh",
        ),
        _weight(),
        _dimensions("230 x 350 mm"),
        DATE_FIELD,
    ),
)

BUILTIN_TEMPLATES: tuple[DesignCodeTemplate, ...] = (
    PACKAGE_BOX,
    DECAL_LABEL,
    LABEL_PAPER,
    PACKAGING_BAG,
)


@cache
def default_catalog() -> TemplateCatalog:
    """Catalog of the built-in templates, built once per process."""
    return TemplateCatalog(BUILTIN_TEMPLATES)
