"""
Pydantic models for the formula system.

This module provides:
- EncodedFormula: Transport form of a chord or scale formula
- FormulaKind: Which encoding a payload carries
"""

from chuk_music_formula.models.formula import EncodedFormula, FormulaKind

__all__ = [
    "EncodedFormula",
    "FormulaKind",
]
