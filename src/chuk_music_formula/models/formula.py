"""
Encoded formula model - the wire form of chord and scale formulas.

A formula travels as exactly one unsigned 32-bit integer plus a tag saying
which encoding it is. Decoding rebuilds the formula bit-for-bit.

Chords and scales are separate encodings of different things; a chord
payload never decodes into a scale or the other way round.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from chuk_music_formula.constants import SCHEMA_VERSION, WORD_MASK, ErrorMessages, SchemaVersion
from chuk_music_formula.core.chord_formula import ChordFormula
from chuk_music_formula.core.scale_formula import ScaleFormula


class FormulaKind(str, Enum):
    """Which encoding the bits use."""

    CHORD = "chord"
    SCALE = "scale"


class EncodedFormula(BaseModel):
    """
    A chord or scale formula ready for transport.

    Round-trips through JSON with model_dump_json / model_validate_json.
    """

    schema_version: SchemaVersion = Field(SCHEMA_VERSION, description="Wire schema version")
    kind: FormulaKind = Field(..., description="Encoding of the bits (chord or scale)")
    bits: int = Field(..., ge=0, le=WORD_MASK, description="Raw unsigned 32-bit word")
    name: str | None = Field(None, description="Catalog name, if the formula has one")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, formula: ChordFormula, name: str | None = None) -> EncodedFormula:
        return cls(kind=FormulaKind.CHORD, bits=formula.bits, name=name)

    @classmethod
    def from_scale(cls, formula: ScaleFormula, name: str | None = None) -> EncodedFormula:
        return cls(kind=FormulaKind.SCALE, bits=formula.bits, name=name)

    def to_chord(self) -> ChordFormula:
        """
        Rebuild the chord formula.

        Raises:
            ValueError: If this payload encodes a scale
        """
        self._require(FormulaKind.CHORD)
        return ChordFormula(self.bits)

    def to_scale(self) -> ScaleFormula:
        """
        Rebuild the scale formula.

        Raises:
            ValueError: If this payload encodes a chord
        """
        self._require(FormulaKind.SCALE)
        return ScaleFormula(self.bits)

    def _require(self, expected: FormulaKind) -> None:
        if self.kind != expected:
            raise ValueError(
                ErrorMessages.WRONG_KIND.format(actual=self.kind.value, expected=expected.value)
            )
