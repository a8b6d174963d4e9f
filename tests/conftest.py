"""Shared pytest fixtures for designcode tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from designcode.core.codegen.generator import CodeGenerator
from designcode.core.codegen.pattern import PatternCompiler
from designcode.core.sequence.allocator import SequenceAllocator
from designcode.core.sequence.backends.memory import InMemorySequenceStore
from designcode.core.templates.builtins import DECAL_LABEL, default_catalog
from designcode.core.templates.catalog import TemplateCatalog
from designcode.core.templates.models import DesignCodeTemplate

FIXED_NOW = datetime(2025, 10, 9, 8, 30, tzinfo=UTC)


# ============================================================================
# Template Fixtures
# ============================================================================


@pytest.fixture
def catalog() -> TemplateCatalog:
    return default_catalog()


@pytest.fixture
def decal_template() -> DesignCodeTemplate:
    return DECAL_LABEL


@pytest.fixture
def decal_values() -> dict[str, str]:
    """Decal values from the product team's reference example (no specifications)."""
    return {
        "orderCode": "0208DH",
        "designType": "D",
        "productName": "Decal bé CREEK 2.1EC",
        "dimensions": "60 x 97 mm",
        "date": "09/10/2025",
    }


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store() -> InMemorySequenceStore:
    return InMemorySequenceStore()


@pytest.fixture
def allocator(store: InMemorySequenceStore) -> SequenceAllocator:
    return SequenceAllocator(store)


@pytest.fixture
def compiler(fixed_clock) -> PatternCompiler:
    return PatternCompiler(clock=fixed_clock)


@pytest.fixture
def generator(
    allocator: SequenceAllocator, compiler: PatternCompiler, fixed_clock
) -> CodeGenerator:
    return CodeGenerator(allocator, compiler, clock=fixed_clock)
