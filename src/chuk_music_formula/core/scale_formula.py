"""
Scale formulas - sets of semitone offsets packed one bit per semitone.

Bit i (0 <= i < 24) is set when the semitone i above the root is in the
scale. Two octaves are covered so 9ths, 11ths and 13ths can be expressed
directly. Bits 24-31 are reserved. As with chords, the word is the wire
format.

Two behaviours are intentionally narrower than the 24-bit domain:
- complement() only complements the first octave (bits 0-11).
- str() names intervals by bit % 12, so the second octave prints the same
  names as the first.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import ClassVar

from chuk_music_formula.constants import (
    OCTAVE_MASK,
    SCALE_MASK,
    SCALE_SPAN,
    SEMITONES_IN_OCTAVE,
    WORD_MASK,
    ErrorMessages,
    normalize_name,
)

from .pitch import Note, Semitone

_INTERVAL_NAMES: list[str] = [
    "1", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♭6", "6", "♭7", "7",
]  # fmt: skip


def _in_range(semitone: int) -> bool:
    return 0 <= semitone < SCALE_SPAN


class ScaleFormula:
    """
    A scale as the set of semitone offsets it contains.

    Offsets outside 0-23 are dropped on write and read as absent.

    Immutable and hashable.
    """

    __slots__ = ("_bits",)
    _bits: int

    # Named scales (assigned after the class from SCALE_FORMULA_BITS)
    CHROMATIC: ClassVar[ScaleFormula]
    CHROMATIC_EXTENDED: ClassVar[ScaleFormula]
    MAJOR: ClassVar[ScaleFormula]
    MAJOR_EXTENDED: ClassVar[ScaleFormula]
    MINOR: ClassVar[ScaleFormula]
    MINOR_EXTENDED: ClassVar[ScaleFormula]
    PENTATONIC_MAJOR: ClassVar[ScaleFormula]
    PENTATONIC_MAJOR_EXTENDED: ClassVar[ScaleFormula]
    PENTATONIC_MINOR: ClassVar[ScaleFormula]
    PENTATONIC_MINOR_EXTENDED: ClassVar[ScaleFormula]
    BLUES: ClassVar[ScaleFormula]
    BLUES_EXTENDED: ClassVar[ScaleFormula]
    HARMONIC_MINOR: ClassVar[ScaleFormula]
    MELODIC_MINOR: ClassVar[ScaleFormula]
    DORIAN: ClassVar[ScaleFormula]
    PHRYGIAN: ClassVar[ScaleFormula]
    LYDIAN: ClassVar[ScaleFormula]
    MIXOLYDIAN: ClassVar[ScaleFormula]
    LOCRIAN: ClassVar[ScaleFormula]

    def __init__(self, bits: int = 0) -> None:
        """Wrap a raw 32-bit word as-is."""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= WORD_MASK:
            raise ValueError(ErrorMessages.INVALID_WORD.format(bits=bits))
        object.__setattr__(self, "_bits", bits)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[ScaleFormula], tuple[int]]:
        return (type(self), (self._bits,))

    @classmethod
    def empty(cls) -> ScaleFormula:
        return cls(0)

    @classmethod
    def from_semitones(cls, semitones: Iterable[int]) -> ScaleFormula:
        """
        Build a scale from semitone offsets.

        Offsets outside 0-23 are silently dropped.
        """
        bits = 0
        for semitone in semitones:
            if _in_range(semitone):
                bits |= 1 << semitone
        return cls(bits)

    @classmethod
    def from_name(cls, name: str) -> ScaleFormula:
        """
        Look up a named scale like 'major' or 'pentatonic-minor'.

        Raises:
            ValueError: If the name is not a known scale formula
        """
        key = normalize_name(name)
        if key not in SCALE_FORMULAS:
            raise ValueError(ErrorMessages.UNKNOWN_SCALE.format(name=name))
        return SCALE_FORMULAS[key]

    @property
    def bits(self) -> int:
        """The raw 32-bit word."""
        return self._bits

    def is_empty(self) -> bool:
        return self._bits == 0

    def has_root(self) -> bool:
        return self.contains_semitone(0)

    def contains_semitone(self, semitone: int) -> bool:
        """True if the offset is in the scale; always False outside 0-23."""
        if not _in_range(semitone):
            return False
        return bool(self._bits & (1 << semitone))

    def note_count(self) -> int:
        """Number of set bits in the word."""
        return self._bits.bit_count()

    def semitones(self) -> list[int]:
        """Offsets in the scale, ascending, within 0-23."""
        return [s for s in range(SCALE_SPAN) if self._bits & (1 << s)]

    def notes_from_root(self, root: Note) -> Iterator[Note]:
        """
        Materialize the scale from a root note.

        Yields root + offset for each offset in ascending order. Each call
        returns a fresh iterator. Note arithmetic saturates at the top of
        the note range.
        """
        return (root + Semitone(offset) for offset in self.semitones())

    def union(self, other: ScaleFormula) -> ScaleFormula:
        """Offsets in either scale."""
        return ScaleFormula(self._bits | other._bits)

    def intersection(self, other: ScaleFormula) -> ScaleFormula:
        """Offsets in both scales."""
        return ScaleFormula(self._bits & other._bits)

    def complement(self) -> ScaleFormula:
        """
        Offsets of the first octave that are not in the scale.

        Only bits 0-11 are complemented; everything above is cleared, so
        complementing twice drops the second octave.
        """
        return ScaleFormula(~self._bits & OCTAVE_MASK)

    def __or__(self, other: ScaleFormula) -> ScaleFormula:
        if not isinstance(other, ScaleFormula):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: ScaleFormula) -> ScaleFormula:
        if not isinstance(other, ScaleFormula):
            return NotImplemented
        return self.intersection(other)

    def __invert__(self) -> ScaleFormula:
        return self.complement()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScaleFormula):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(("ScaleFormula", self._bits))

    def __repr__(self) -> str:
        name = _NAMES_BY_BITS.get(self._bits)
        if name is not None:
            return f"ScaleFormula.{name.upper()}"
        return f"ScaleFormula(0b{self._bits:b})"

    def __str__(self) -> str:
        """Interval names joined by ', ', e.g. '1, 2, ♭3'; 'Empty' when empty."""
        if self.is_empty():
            return "Empty"
        return ", ".join(_INTERVAL_NAMES[s % SEMITONES_IN_OCTAVE] for s in self.semitones())

    def __format__(self, format_spec: str) -> str:
        """'b' gives the binary word padded to one octave."""
        if format_spec == "b":
            return f"{self._bits:0{SEMITONES_IN_OCTAVE}b}"
        return format(str(self), format_spec)


def _extended(pattern: int) -> int:
    # Repeat a one-octave pattern in the second octave
    return pattern | (pattern << SEMITONES_IN_OCTAVE)


_MAJOR = 0b101010110101
_MINOR = 0b010110101101
_PENTATONIC_MAJOR = 0b001010010101
_PENTATONIC_MINOR = 0b010010101001
_BLUES = 0b010011101001

SCALE_FORMULA_BITS: dict[str, int] = {
    "chromatic": OCTAVE_MASK,
    "chromatic_extended": SCALE_MASK,
    "major": _MAJOR,
    "major_extended": _extended(_MAJOR),
    "minor": _MINOR,
    "minor_extended": _extended(_MINOR),
    "pentatonic_major": _PENTATONIC_MAJOR,
    "pentatonic_major_extended": _extended(_PENTATONIC_MAJOR),
    "pentatonic_minor": _PENTATONIC_MINOR,
    "pentatonic_minor_extended": _extended(_PENTATONIC_MINOR),
    "blues": _BLUES,
    "blues_extended": _extended(_BLUES),
    # Minor variants and modes
    "harmonic_minor": 0b100110101101,  # 0 2 3 5 7 8 11
    "melodic_minor": 0b101010101101,  # 0 2 3 5 7 9 11
    "dorian": 0b011010101101,  # 0 2 3 5 7 9 10
    "phrygian": 0b010110101011,  # 0 1 3 5 7 8 10
    "lydian": 0b101011010101,  # 0 2 4 6 7 9 11
    "mixolydian": 0b011010110101,  # 0 2 4 5 7 9 10
    "locrian": 0b010101101011,  # 0 1 3 5 6 8 10
}

SCALE_FORMULAS: dict[str, ScaleFormula] = {
    name: ScaleFormula(bits) for name, bits in SCALE_FORMULA_BITS.items()
}

# Words with more than one name map to None and repr as raw bits
_NAMES_BY_BITS: dict[int, str | None] = {}
for _name, _formula in SCALE_FORMULAS.items():
    setattr(ScaleFormula, _name.upper(), _formula)
    _NAMES_BY_BITS[_formula.bits] = None if _formula.bits in _NAMES_BY_BITS else _name
