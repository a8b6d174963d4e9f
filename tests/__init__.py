"""Test suite for designcode.

Unit tests mirror the package layout under ``tests/unit``; shared
fixtures live in ``tests/conftest.py``.
"""
