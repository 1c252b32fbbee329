"""
Pytest configuration and shared fixtures.
"""

import os

import pytest
from hypothesis import settings

from chuk_music_formula import FormulaCatalog, Note

settings.register_profile("fast", max_examples=50)
settings.register_profile("slow", max_examples=1000)
settings.load_profile("slow" if os.environ.get("HYPO_SLOW") == "1" else "fast")


@pytest.fixture
def catalog() -> FormulaCatalog:
    """Catalog over the built-in formula tables."""
    return FormulaCatalog()


@pytest.fixture
def middle_c() -> Note:
    """C4, note 60."""
    return Note(60)
