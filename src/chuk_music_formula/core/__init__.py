"""
Core formula primitives - the encoding layer.

These are the bit-level invariants everything else composes on:
- AlterationCode: natural/flat/sharp with its 2-bit codec
- FormulaDegree: degree + alteration, reduced to an in-octave semitone offset
- ChordFormula: up to 15 degrees, 2 bits each, in one 32-bit word
- ScaleFormula: 24 semitone offsets, 1 bit each, in one 32-bit word
- PitchClass, Semitone, Note: the pitches a scale materializes into
"""

from chuk_music_formula.core.alteration import AlterationCode
from chuk_music_formula.core.chord_formula import (
    CHORD_FORMULA_DEGREES,
    CHORD_FORMULAS,
    ChordFormula,
)
from chuk_music_formula.core.degree import FormulaDegree
from chuk_music_formula.core.pitch import Note, PitchClass, Semitone
from chuk_music_formula.core.scale_formula import SCALE_FORMULA_BITS, SCALE_FORMULAS, ScaleFormula

__all__ = [
    # Alteration
    "AlterationCode",
    # Degrees
    "FormulaDegree",
    # Chords
    "ChordFormula",
    "CHORD_FORMULAS",
    "CHORD_FORMULA_DEGREES",
    # Scales
    "ScaleFormula",
    "SCALE_FORMULAS",
    "SCALE_FORMULA_BITS",
    # Pitch
    "PitchClass",
    "Semitone",
    "Note",
]
