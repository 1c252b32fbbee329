"""
Alteration codes - the natural/flat/sharp state of a formula degree.

The member value is the 2-bit code stored in a chord formula slot.
Code 0 is not an alteration: it marks an absent degree and only ever
appears inside a packed ChordFormula.
"""

from __future__ import annotations

from enum import Enum

from chuk_music_formula.constants import ErrorMessages


class AlterationCode(Enum):
    """
    A degree alteration with a lossless 2-bit codec.

    NATURAL <-> 1, FLAT <-> 2, SHARP <-> 3.
    NONE is an alias of NATURAL (no alteration).
    """

    NATURAL = 1
    FLAT = 2
    SHARP = 3
    NONE = 1

    def symbol(self) -> str:
        """Display symbol: '' / '♭' / '♯'."""
        return _SYMBOLS[self]

    def semitone_offset(self) -> int:
        """Semitones added to the natural degree: 0 / -1 / +1."""
        return _OFFSETS[self]

    def opposite(self) -> AlterationCode:
        """Flat <-> sharp; natural stays natural."""
        if self is AlterationCode.FLAT:
            return AlterationCode.SHARP
        if self is AlterationCode.SHARP:
            return AlterationCode.FLAT
        return AlterationCode.NATURAL

    def is_natural(self) -> bool:
        return self is AlterationCode.NATURAL

    def is_flat(self) -> bool:
        return self is AlterationCode.FLAT

    def is_sharp(self) -> bool:
        return self is AlterationCode.SHARP

    def encode(self) -> int:
        """The 2-bit code (1, 2 or 3)."""
        return int(self.value)

    @classmethod
    def decode(cls, code: int) -> AlterationCode:
        """
        Decode a 2-bit code.

        Args:
            code: 1 (natural), 2 (flat) or 3 (sharp)

        Returns:
            The alteration

        Raises:
            ValueError: For any other code, including the absent marker 0.
                Such a code only comes from a corrupted or hand-built word.
        """
        if isinstance(code, bool) or not isinstance(code, int) or code not in (1, 2, 3):
            raise ValueError(ErrorMessages.INVALID_ALTERATION_CODE.format(code=code))
        return cls(code)

    @classmethod
    def default(cls) -> AlterationCode:
        """The unaltered state."""
        return cls.NATURAL

    def __str__(self) -> str:
        return self.symbol()


_SYMBOLS: dict[AlterationCode, str] = {
    AlterationCode.NATURAL: "",
    AlterationCode.FLAT: "♭",
    AlterationCode.SHARP: "♯",
}

_OFFSETS: dict[AlterationCode, int] = {
    AlterationCode.NATURAL: 0,
    AlterationCode.FLAT: -1,
    AlterationCode.SHARP: 1,
}
