"""
Formula degrees - degree numbers with alterations, including extended harmony.

A formula degree is a degree number (1 = root, 3 = third, 9 = ninth, ...)
plus an alteration. Degrees past the octave reduce to their in-octave
counterpart when converted to a semitone offset: ♭9 is ♭2, ♯11 is ♯4.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_music_formula.constants import SEMITONES_IN_OCTAVE, ErrorMessages

from .alteration import AlterationCode

# Degree number -> diatonic slot (1-7); 8 and 15 reduce to 1
_REDUCED_DEGREES: dict[int, int] = {
    1: 1,
    2: 2,
    3: 3,
    4: 4,
    5: 5,
    6: 6,
    7: 7,
    8: 1,
    9: 2,
    10: 3,
    11: 4,
    12: 5,
    13: 6,
    14: 7,
    15: 1,
}

# Diatonic slot -> semitones above the root in a major scale
_MAJOR_SCALE_SEMITONES: dict[int, int] = {
    1: 0,
    2: 2,
    3: 4,
    4: 5,
    5: 7,
    6: 9,
    7: 11,
}

_CHORD_TONES = frozenset({1, 3, 5, 7})
_TENSIONS = frozenset({2, 4, 6, 9, 11, 13})

_NAME_PREFIXES: dict[AlterationCode, str] = {
    AlterationCode.NATURAL: "",
    AlterationCode.FLAT: "flat ",
    AlterationCode.SHARP: "sharp ",
}


@dataclass(frozen=True)
class FormulaDegree:
    """
    A degree in a chord formula.

    Examples:
        FormulaDegree.natural(3) = major third
        FormulaDegree.flat(7) = minor seventh
        FormulaDegree.sharp(11) = raised eleventh (lydian tension)
    """

    degree: int
    code: AlterationCode = AlterationCode.NATURAL

    def __post_init__(self) -> None:
        if self.degree < 0:
            raise ValueError(ErrorMessages.NEGATIVE_DEGREE.format(degree=self.degree))

    @classmethod
    def natural(cls, degree: int) -> FormulaDegree:
        return cls(degree, AlterationCode.NATURAL)

    @classmethod
    def flat(cls, degree: int) -> FormulaDegree:
        return cls(degree, AlterationCode.FLAT)

    @classmethod
    def sharp(cls, degree: int) -> FormulaDegree:
        return cls(degree, AlterationCode.SHARP)

    def base_degree(self) -> int:
        """The degree number without its alteration."""
        return self.degree

    def alteration(self) -> int:
        """-1 for flat, 0 for natural, +1 for sharp."""
        return self.code.semitone_offset()

    def to_semitone_offset(self) -> int | None:
        """
        Semitones above the root, reduced into a single octave (0-11).

        The degree is reduced to a diatonic slot, looked up in the major
        scale, then altered. A flattened root wraps to 11 rather than -1.

        Returns:
            Offset in 0-11, or None for degrees outside 1-15
        """
        reduced = _REDUCED_DEGREES.get(self.degree)
        if reduced is None:
            return None

        adjusted = _MAJOR_SCALE_SEMITONES[reduced] + self.alteration()
        if adjusted < 0:
            return adjusted + SEMITONES_IN_OCTAVE
        return adjusted % SEMITONES_IN_OCTAVE

    def is_extended(self) -> bool:
        """True past the first octave (9ths, 11ths, 13ths, ...)."""
        return self.degree > 7

    def is_chord_tone(self) -> bool:
        """True for 1, 3, 5 and 7."""
        return self.degree in _CHORD_TONES

    def is_tension(self) -> bool:
        """True for 2, 4, 6, 9, 11 and 13."""
        return self.degree in _TENSIONS

    def symbol(self) -> str:
        """Compact form: '7', '♭9', '♯11'."""
        return f"{self.code.symbol()}{self.degree}"

    def name(self) -> str:
        """Spoken form: '9', 'flat 9', 'sharp 11'."""
        return f"{_NAME_PREFIXES[self.code]}{self.degree}"

    def __str__(self) -> str:
        return self.symbol()

    def __repr__(self) -> str:
        return f"FormulaDegree({self.degree}, AlterationCode.{self.code.name})"
