"""
Pitch primitives - PitchClass, Semitone and Note.

These are the thin collaborators the formulas materialize into.
PitchClass represents the 12 chromatic pitches (octave-independent).
Semitone is an unsigned distance in half-steps.
Note is an absolute MIDI-style note number (C4 = 60).

Semitone and Note are unsigned 8-bit quantities; Note arithmetic saturates
at 0 and 255 instead of wrapping.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering

from chuk_music_formula.constants import MAX_NOTE_VALUE, SEMITONES_IN_OCTAVE, ErrorMessages

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_IN_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_semitones(cls, semitones: int) -> PitchClass:
        """Extract the pitch class of an absolute semitone count."""
        return cls(semitones % SEMITONES_IN_OCTAVE)


def _octave_of(value: int) -> int:
    # MIDI convention: note 0 is C-1
    return value // SEMITONES_IN_OCTAVE - 1


def _check_shift(octaves: int) -> None:
    if octaves < 0:
        raise ValueError(ErrorMessages.INVALID_OCTAVE_SHIFT.format(octaves=octaves))


@total_ordering
class Semitone:
    """
    An unsigned distance in semitones (0-255).

    Immutable and hashable.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create a semitone count."""
        if not 0 <= value <= MAX_NOTE_VALUE:
            raise ValueError(ErrorMessages.INVALID_SEMITONE.format(value=value))
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Semitone], tuple[int]]:
        return (type(self), (self._value,))

    @property
    def value(self) -> int:
        """Number of semitones."""
        return self._value

    @property
    def octave(self) -> int:
        """Octave of this count read as an absolute pitch (0 -> -1)."""
        return _octave_of(self._value)

    @property
    def pitch_class(self) -> PitchClass:
        """Pitch class of this count read as an absolute pitch."""
        return PitchClass.from_semitones(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Semitone):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Semitone) -> bool:
        if not isinstance(other, Semitone):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(("Semitone", self._value))

    def __repr__(self) -> str:
        return f"Semitone({self._value})"

    def __str__(self) -> str:
        return str(self._value)


@total_ordering
class Note:
    """
    An absolute note number (0-255, C4 = 60).

    Adding or subtracting a Semitone moves the note; shifting by n moves it
    n octaves (``>>`` up, ``<<`` down). Results saturate at 0 and 255.
    Octave shift counts must be non-negative.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create a note from its number."""
        if not 0 <= value <= MAX_NOTE_VALUE:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(value=value))
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Note], tuple[int]]:
        return (type(self), (self._value,))

    @classmethod
    def _saturating(cls, value: int) -> Note:
        return cls(min(max(value, 0), MAX_NOTE_VALUE))

    @property
    def semitone(self) -> int:
        """The note number."""
        return self._value

    def as_semitone(self) -> Semitone:
        """The note number as a Semitone count from note 0."""
        return Semitone(self._value)

    @property
    def octave(self) -> int:
        """MIDI octave number (C4 = 60 is octave 4)."""
        return _octave_of(self._value)

    @property
    def pitch_class(self) -> PitchClass:
        """The octave-independent pitch class."""
        return PitchClass.from_semitones(self._value)

    def __add__(self, other: Semitone) -> Note:
        if not isinstance(other, Semitone):
            return NotImplemented
        return Note._saturating(self._value + other.value)

    def __sub__(self, other: Semitone) -> Note:
        if not isinstance(other, Semitone):
            return NotImplemented
        return Note._saturating(self._value - other.value)

    def __rshift__(self, octaves: int) -> Note:
        if isinstance(octaves, bool) or not isinstance(octaves, int):
            return NotImplemented
        _check_shift(octaves)
        return Note._saturating(self._value + octaves * SEMITONES_IN_OCTAVE)

    def __lshift__(self, octaves: int) -> Note:
        if isinstance(octaves, bool) or not isinstance(octaves, int):
            return NotImplemented
        _check_shift(octaves)
        return Note._saturating(self._value - octaves * SEMITONES_IN_OCTAVE)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(("Note", self._value))

    def __repr__(self) -> str:
        return f"Note({self._value})"

    def __str__(self) -> str:
        return f"{self.pitch_class.spell()}{self.octave}"
