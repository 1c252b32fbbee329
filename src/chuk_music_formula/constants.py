"""
Constants for the formula encodings.

No magic numbers - every shift, mask and range used by the bit-packed
formulas is named here.
"""

from typing import Literal

# Pitch space
SEMITONES_IN_OCTAVE = 12
SCALE_SPAN = 2 * SEMITONES_IN_OCTAVE  # Scale formulas cover two octaves
MAX_NOTE_VALUE = 255  # Notes and semitones are unsigned 8-bit

# Encoded word
WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

# Chord formula layout: 2-bit slot per degree, degree 1 at bit 0
BITS_PER_DEGREE = 2
DEGREE_SLOT_MASK = 0b11
MIN_CHORD_DEGREE = 1
MAX_CHORD_DEGREE = 15
ABSENT_CODE = 0  # Slot value for a degree that is not in the chord

# Scale formula layout: 1 bit per semitone offset
OCTAVE_MASK = (1 << SEMITONES_IN_OCTAVE) - 1
SCALE_MASK = (1 << SCALE_SPAN) - 1

# Wire schema
SchemaVersion = Literal["formula/v1"]
SCHEMA_VERSION: SchemaVersion = "formula/v1"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ALTERATION_CODE = "Invalid alteration code: {code!r}. Expected 1, 2 or 3."
    INVALID_WORD = "Formula bits must fit in an unsigned 32-bit word, got {bits!r}."
    NEGATIVE_DEGREE = "Degree must be non-negative, got {degree}."
    INVALID_SEMITONE = "Semitone must be 0-255, got {value}."
    INVALID_NOTE = "Note must be 0-255, got {value}."
    INVALID_OCTAVE_SHIFT = "Octave shift must be non-negative, got {octaves}."
    UNKNOWN_CHORD = "Unknown chord formula: '{name}'."
    UNKNOWN_SCALE = "Unknown scale formula: '{name}'."
    WRONG_KIND = "Encoded formula is a {actual}, not a {expected}."


def normalize_name(name: str) -> str:
    """Normalize a formula name: case-insensitive, spaces and hyphens to underscores."""
    return name.strip().lower().replace("-", "_").replace(" ", "_")
