"""
Formula Catalog - discovers, identifies and describes named formulas.

The catalog provides access to the built-in chord and scale tables by
name, reverse lookup from a formula to its names, and plain-dict
summaries suitable for display or JSON.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_music_formula.constants import normalize_name
from chuk_music_formula.core.chord_formula import CHORD_FORMULAS, ChordFormula
from chuk_music_formula.core.scale_formula import SCALE_FORMULAS, ScaleFormula
from chuk_music_formula.models.formula import EncodedFormula

logger = logging.getLogger(__name__)


class FormulaCatalog:
    """
    Named chord and scale formulas.

    Lookups are case-insensitive and accept spaces or hyphens in place
    of underscores ('Dominant Ninth', 'dominant-ninth').
    """

    def __init__(
        self,
        chords: dict[str, ChordFormula] | None = None,
        scales: dict[str, ScaleFormula] | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            chords: Chord formulas by name (defaults to the built-in table)
            scales: Scale formulas by name (defaults to the built-in table)
        """
        source_chords = CHORD_FORMULAS if chords is None else chords
        source_scales = SCALE_FORMULAS if scales is None else scales
        self._chords = {normalize_name(k): v for k, v in source_chords.items()}
        self._scales = {normalize_name(k): v for k, v in source_scales.items()}

    def list_chords(self) -> list[str]:
        """Chord formula names, sorted."""
        return sorted(self._chords)

    def list_scales(self) -> list[str]:
        """Scale formula names, sorted."""
        return sorted(self._scales)

    def get_chord(self, name: str) -> ChordFormula | None:
        """
        Get a chord formula by name.

        Returns:
            ChordFormula or None if not found
        """
        formula = self._chords.get(normalize_name(name))
        if formula is None:
            logger.debug("Chord formula not found: %s", name)
        else:
            logger.debug("Found chord formula %s: %s", name, formula)
        return formula

    def get_scale(self, name: str) -> ScaleFormula | None:
        """
        Get a scale formula by name.

        Returns:
            ScaleFormula or None if not found
        """
        formula = self._scales.get(normalize_name(name))
        if formula is None:
            logger.debug("Scale formula not found: %s", name)
        else:
            logger.debug("Found scale formula %s: %s", name, formula)
        return formula

    def identify_chord(self, formula: ChordFormula) -> list[str]:
        """Names whose formula has exactly the same bits, sorted."""
        return sorted(name for name, known in self._chords.items() if known == formula)

    def identify_scale(self, formula: ScaleFormula) -> list[str]:
        """Names whose formula has exactly the same bits, sorted."""
        return sorted(name for name, known in self._scales.items() if known == formula)

    def describe_chord(self, name: str) -> dict[str, Any] | None:
        """
        Summarize a chord formula.

        Returns:
            Dict with name, bits, hex, display and degrees, or None if not found
        """
        formula = self.get_chord(name)
        if formula is None:
            return None

        return {
            "name": normalize_name(name),
            "bits": formula.bits,
            "hex": f"0x{formula:X}",
            "display": str(formula),
            "degrees": [str(degree) for degree in formula.formula_degrees()],
            "offsets": [degree.to_semitone_offset() for degree in formula.formula_degrees()],
        }

    def describe_scale(self, name: str) -> dict[str, Any] | None:
        """
        Summarize a scale formula.

        Returns:
            Dict with name, bits, binary, display, semitones and note count,
            or None if not found
        """
        formula = self.get_scale(name)
        if formula is None:
            return None

        return {
            "name": normalize_name(name),
            "bits": formula.bits,
            "binary": f"0b{formula:b}",
            "display": str(formula),
            "semitones": formula.semitones(),
            "note_count": formula.note_count(),
        }

    def encode_chord(self, name: str) -> EncodedFormula | None:
        """Wire form of a named chord formula, or None if not found."""
        formula = self.get_chord(name)
        if formula is None:
            return None
        logger.debug("Encoding chord formula %s as 0x%08X", name, formula.bits)
        return EncodedFormula.from_chord(formula, name=normalize_name(name))

    def encode_scale(self, name: str) -> EncodedFormula | None:
        """Wire form of a named scale formula, or None if not found."""
        formula = self.get_scale(name)
        if formula is None:
            return None
        logger.debug("Encoding scale formula %s as 0x%08X", name, formula.bits)
        return EncodedFormula.from_scale(formula, name=normalize_name(name))
