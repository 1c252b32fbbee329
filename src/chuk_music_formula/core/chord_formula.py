"""
Chord formulas - sets of altered degrees packed into one 32-bit word.

Each degree 1-15 owns a 2-bit slot at bit offset (degree - 1) * 2:

    bits:   29-28 ... 5-4  3-2  1-0
    degree:   15  ...   3    2    1

A slot holds 0 when the degree is absent, otherwise the AlterationCode
(1 natural, 2 flat, 3 sharp). Bits 30-31 are reserved. The word itself is
the wire format: ChordFormula(formula.bits) reproduces the formula exactly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from chuk_music_formula.constants import (
    ABSENT_CODE,
    BITS_PER_DEGREE,
    DEGREE_SLOT_MASK,
    MAX_CHORD_DEGREE,
    MIN_CHORD_DEGREE,
    WORD_MASK,
    ErrorMessages,
    normalize_name,
)

from .alteration import AlterationCode
from .degree import FormulaDegree


def _shift(degree: int) -> int:
    return (degree - 1) * BITS_PER_DEGREE


def _in_range(degree: int) -> bool:
    return MIN_CHORD_DEGREE <= degree <= MAX_CHORD_DEGREE


class ChordFormula:
    """
    A chord as the set of (degree, alteration) pairs it contains.

    Out-of-range degree numbers (0 or above 15) are ignored on write and
    read as absent; they never raise.

    Immutable and hashable.
    """

    __slots__ = ("_bits",)
    _bits: int

    # Named formulas (assigned after the class from CHORD_FORMULA_DEGREES)
    MAJOR_TRIAD: ClassVar[ChordFormula]
    MINOR_TRIAD: ClassVar[ChordFormula]
    DIMINISHED_TRIAD: ClassVar[ChordFormula]
    AUGMENTED_TRIAD: ClassVar[ChordFormula]
    SUS2: ClassVar[ChordFormula]
    SUS4: ClassVar[ChordFormula]
    MAJOR_SEVENTH: ClassVar[ChordFormula]
    MINOR_SEVENTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH: ClassVar[ChordFormula]
    MINOR_MAJOR_SEVENTH: ClassVar[ChordFormula]
    HALF_DIMINISHED_SEVENTH: ClassVar[ChordFormula]
    FULLY_DIMINISHED_SEVENTH: ClassVar[ChordFormula]
    AUGMENTED_MAJOR_SEVENTH: ClassVar[ChordFormula]
    AUGMENTED_SEVENTH: ClassVar[ChordFormula]
    MAJOR_NINTH: ClassVar[ChordFormula]
    MINOR_NINTH: ClassVar[ChordFormula]
    DOMINANT_NINTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_FLAT_NINTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_NINTH: ClassVar[ChordFormula]
    MAJOR_ELEVENTH: ClassVar[ChordFormula]
    MINOR_ELEVENTH: ClassVar[ChordFormula]
    DOMINANT_ELEVENTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_ELEVENTH: ClassVar[ChordFormula]
    MAJOR_THIRTEENTH: ClassVar[ChordFormula]
    MINOR_THIRTEENTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH_FLAT_NINTH: ClassVar[ChordFormula]
    DOMINANT_THIRTEENTH_SHARP_ELEVENTH: ClassVar[ChordFormula]
    ADD_NINTH: ClassVar[ChordFormula]
    MINOR_ADD_NINTH: ClassVar[ChordFormula]
    SIXTH: ClassVar[ChordFormula]
    MINOR_SIXTH: ClassVar[ChordFormula]
    SIX_NINE: ClassVar[ChordFormula]
    MINOR_SIX_NINE: ClassVar[ChordFormula]
    ALTERED_DOMINANT: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_SHARP_FIFTH: ClassVar[ChordFormula]
    DOMINANT_SEVENTH_FLAT_FIFTH: ClassVar[ChordFormula]

    def __init__(self, bits: int = 0) -> None:
        """Wrap a raw 32-bit word as-is."""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= WORD_MASK:
            raise ValueError(ErrorMessages.INVALID_WORD.format(bits=bits))
        object.__setattr__(self, "_bits", bits)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[ChordFormula], tuple[int]]:
        return (type(self), (self._bits,))

    @classmethod
    def empty(cls) -> ChordFormula:
        """A formula with no degrees."""
        return cls(0)

    @classmethod
    def from_degrees(cls, degrees: Iterable[tuple[int, AlterationCode]]) -> ChordFormula:
        """Build a formula by writing each (degree, alteration) in order."""
        formula = cls.empty()
        for degree, code in degrees:
            formula = formula.with_degree(degree, code)
        return formula

    @classmethod
    def from_name(cls, name: str) -> ChordFormula:
        """
        Look up a named formula like 'minor_seventh' or 'Dominant Ninth'.

        Raises:
            ValueError: If the name is not a known chord formula
        """
        key = normalize_name(name)
        if key not in CHORD_FORMULAS:
            raise ValueError(ErrorMessages.UNKNOWN_CHORD.format(name=name))
        return CHORD_FORMULAS[key]

    @property
    def bits(self) -> int:
        """The raw 32-bit word."""
        return self._bits

    def is_empty(self) -> bool:
        return self._bits == 0

    def _slot(self, degree: int) -> int:
        if not _in_range(degree):
            return ABSENT_CODE
        return (self._bits >> _shift(degree)) & DEGREE_SLOT_MASK

    def with_degree(self, degree: int, code: AlterationCode) -> ChordFormula:
        """
        Return a copy with one degree slot set, replacing whatever was there.

        Degrees outside 1-15 return the formula unchanged.
        """
        if not _in_range(degree):
            return self

        shift = _shift(degree)
        mask = DEGREE_SLOT_MASK << shift
        return ChordFormula((self._bits & ~mask) | (code.encode() << shift))

    def with_formula_degree(self, degree: FormulaDegree) -> ChordFormula:
        """with_degree for a FormulaDegree."""
        return self.with_degree(degree.degree, degree.code)

    def has_degree(self, degree: int, code: AlterationCode) -> bool:
        """True if the degree is present with exactly this alteration."""
        return self._slot(degree) == code.encode()

    def has_any_degree(self, degree: int) -> bool:
        """True if the degree is present with any alteration."""
        return self._slot(degree) != ABSENT_CODE

    def get_degree_alteration(self, degree: int) -> AlterationCode | None:
        """The alteration stored for a degree, or None if absent."""
        slot = self._slot(degree)
        if slot == ABSENT_CODE:
            return None
        return AlterationCode.decode(slot)

    def degrees(self) -> list[tuple[int, AlterationCode]]:
        """All present degrees, ascending by degree number."""
        result = []
        for degree in range(MIN_CHORD_DEGREE, MAX_CHORD_DEGREE + 1):
            code = self.get_degree_alteration(degree)
            if code is not None:
                result.append((degree, code))
        return result

    def formula_degrees(self) -> list[FormulaDegree]:
        """All present degrees as FormulaDegree values, ascending."""
        return [FormulaDegree(degree, code) for degree, code in self.degrees()]

    def union(self, other: ChordFormula) -> ChordFormula:
        """
        Bitwise OR of the two words.

        This is not a slot-aware merge. When both formulas hold different
        alterations for the same degree the slot codes are OR'd: flat (10)
        with sharp (11) reads as sharp, natural (01) with flat (10) also
        reads as sharp. No conflict is reported.
        """
        return ChordFormula(self._bits | other._bits)

    def __or__(self, other: ChordFormula) -> ChordFormula:
        if not isinstance(other, ChordFormula):
            return NotImplemented
        return self.union(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChordFormula):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(("ChordFormula", self._bits))

    def __repr__(self) -> str:
        name = _NAMES_BY_BITS.get(self._bits)
        if name is not None:
            return f"ChordFormula.{name.upper()}"
        return f"ChordFormula(0x{self._bits:08X})"

    def __str__(self) -> str:
        """Degrees in ascending order, e.g. '1 ♭3 5 ♭7'; '∅' when empty."""
        if self.is_empty():
            return "∅"
        return " ".join(str(degree) for degree in self.formula_degrees())

    def __format__(self, format_spec: str) -> str:
        """'b' gives the 32-digit binary word, 'x'/'X' the 8-digit hex word."""
        if format_spec == "b":
            return f"{self._bits:032b}"
        if format_spec in ("x", "X"):
            return format(self._bits, f"08{format_spec}")
        return format(str(self), format_spec)


# Shorthand for the table below
_N = AlterationCode.NATURAL
_F = AlterationCode.FLAT
_S = AlterationCode.SHARP

CHORD_FORMULA_DEGREES: dict[str, tuple[tuple[int, AlterationCode], ...]] = {
    # Triads
    "major_triad": ((1, _N), (3, _N), (5, _N)),
    "minor_triad": ((1, _N), (3, _F), (5, _N)),
    "diminished_triad": ((1, _N), (3, _F), (5, _F)),
    "augmented_triad": ((1, _N), (3, _N), (5, _S)),
    "sus2": ((1, _N), (2, _N), (5, _N)),
    "sus4": ((1, _N), (4, _N), (5, _N)),
    # Sevenths
    "major_seventh": ((1, _N), (3, _N), (5, _N), (7, _N)),
    "minor_seventh": ((1, _N), (3, _F), (5, _N), (7, _F)),
    "dominant_seventh": ((1, _N), (3, _N), (5, _N), (7, _F)),
    "minor_major_seventh": ((1, _N), (3, _F), (5, _N), (7, _N)),
    "half_diminished_seventh": ((1, _N), (3, _F), (5, _F), (7, _F)),
    "fully_diminished_seventh": ((1, _N), (3, _F), (5, _F), (6, _N)),  # 6 spells ♭♭7
    "augmented_major_seventh": ((1, _N), (3, _N), (5, _S), (7, _N)),
    "augmented_seventh": ((1, _N), (3, _N), (5, _S), (7, _F)),
    # Ninths
    "major_ninth": ((1, _N), (3, _N), (5, _N), (7, _N), (9, _N)),
    "minor_ninth": ((1, _N), (3, _F), (5, _N), (7, _F), (9, _N)),
    "dominant_ninth": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _N)),
    "dominant_seventh_flat_ninth": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _F)),
    "dominant_seventh_sharp_ninth": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _S)),
    # Elevenths
    "major_eleventh": ((1, _N), (3, _N), (5, _N), (7, _N), (9, _N), (11, _N)),
    "minor_eleventh": ((1, _N), (3, _F), (5, _N), (7, _F), (9, _N), (11, _N)),
    "dominant_eleventh": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _N), (11, _N)),
    "dominant_seventh_sharp_eleventh": ((1, _N), (3, _N), (5, _N), (7, _F), (11, _S)),
    # Thirteenths
    "major_thirteenth": ((1, _N), (3, _N), (5, _N), (7, _N), (9, _N), (11, _N), (13, _N)),
    "minor_thirteenth": ((1, _N), (3, _F), (5, _N), (7, _F), (9, _N), (11, _N), (13, _N)),
    "dominant_thirteenth": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _N), (11, _N), (13, _N)),
    "dominant_thirteenth_flat_ninth": ((1, _N), (3, _N), (5, _N), (7, _F), (9, _F), (13, _N)),
    "dominant_thirteenth_sharp_eleventh": (
        (1, _N),
        (3, _N),
        (5, _N),
        (7, _F),
        (9, _N),
        (11, _S),
        (13, _N),
    ),
    # Added-tone chords
    "add_ninth": ((1, _N), (3, _N), (5, _N), (9, _N)),
    "minor_add_ninth": ((1, _N), (3, _F), (5, _N), (9, _N)),
    "sixth": ((1, _N), (3, _N), (5, _N), (6, _N)),
    "minor_sixth": ((1, _N), (3, _F), (5, _N), (6, _N)),
    "six_nine": ((1, _N), (3, _N), (5, _N), (6, _N), (9, _N)),
    "minor_six_nine": ((1, _N), (3, _F), (5, _N), (6, _N), (9, _N)),
    # Altered dominants. The second 9 overwrites the first, leaving ♯9.
    "altered_dominant": ((1, _N), (3, _N), (7, _F), (9, _F), (9, _S), (11, _S), (13, _F)),
    "dominant_seventh_sharp_fifth": ((1, _N), (3, _N), (5, _S), (7, _F)),
    "dominant_seventh_flat_fifth": ((1, _N), (3, _N), (5, _F), (7, _F)),
}

CHORD_FORMULAS: dict[str, ChordFormula] = {
    name: ChordFormula.from_degrees(degrees) for name, degrees in CHORD_FORMULA_DEGREES.items()
}

# Words with more than one name map to None and repr as raw bits
_NAMES_BY_BITS: dict[int, str | None] = {}
for _name, _formula in CHORD_FORMULAS.items():
    setattr(ChordFormula, _name.upper(), _formula)
    _NAMES_BY_BITS[_formula.bits] = None if _formula.bits in _NAMES_BY_BITS else _name
