"""
CHUK Music Formula - bit-packed chord and scale formulas.

A chord formula is 15 two-bit degree slots in a 32-bit word; a scale
formula is 24 semitone flags in a 32-bit word. Either word is the whole
wire format for the formula.
"""

from chuk_music_formula.catalog import FormulaCatalog
from chuk_music_formula.core import (
    AlterationCode,
    ChordFormula,
    FormulaDegree,
    Note,
    PitchClass,
    ScaleFormula,
    Semitone,
)
from chuk_music_formula.models import EncodedFormula, FormulaKind

__version__ = "0.1.0"

__all__ = [
    "AlterationCode",
    "ChordFormula",
    "EncodedFormula",
    "FormulaCatalog",
    "FormulaDegree",
    "FormulaKind",
    "Note",
    "PitchClass",
    "ScaleFormula",
    "Semitone",
]
