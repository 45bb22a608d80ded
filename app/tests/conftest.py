"""Shared fixtures for locale middleware tests."""

from pathlib import Path

import pytest

from locale_middleware.i18n import Language

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def primary_dir() -> Path:
    """Directory with en-US and zh-CN primary catalogs.

    en-US defines ``greeting = How are you?``; zh-CN has no ``greeting``.
    """
    return TESTDATA / "primary"


@pytest.fixture
def secondary_dir() -> Path:
    """Override directory with only an en-US catalog (``greeting = What's up?``)."""
    return TESTDATA / "secondary"


@pytest.fixture
def languages():
    """English and Simplified Chinese, English first."""
    return [
        Language(name="en-US", description="English"),
        Language(name="zh-CN", description="简体中文"),
    ]
