#!/usr/bin/env python3
"""
Example: A tour of chord and scale formulas.

Usage:
    python examples/formula_tour.py

This example shows:
1. Building chord formulas degree by degree and reading them back
2. Materializing a scale from a root note
3. Reverse lookup of a formula by its bits
4. Sending a formula over the wire as JSON and decoding it again

Each formula is a single 32-bit word:
    ChordFormula.MINOR_SEVENTH.bits == 0x2121
"""

import logging

from chuk_music_formula import (
    AlterationCode,
    ChordFormula,
    EncodedFormula,
    FormulaCatalog,
    Note,
    ScaleFormula,
)


def main() -> None:
    """Walk through the formula types."""
    catalog = FormulaCatalog()

    print("CHUK Music Formula Tour")
    print("=" * 40)
    print()

    # Step 1: Chords
    print("1. Building a chord...")
    chord = (
        ChordFormula.empty()
        .with_degree(1, AlterationCode.NATURAL)
        .with_degree(3, AlterationCode.FLAT)
        .with_degree(5, AlterationCode.NATURAL)
        .with_degree(7, AlterationCode.FLAT)
    )
    print(f"   Formula: {chord}")
    print(f"   Word:    0x{chord:X}")
    print(f"   Known as: {', '.join(catalog.identify_chord(chord)) or '(unnamed)'}")
    print()

    print("   Named chords:")
    for name in ("dominant_seventh_sharp_ninth", "altered_dominant", "six_nine"):
        info = catalog.describe_chord(name)
        if info is not None:
            print(f"   - {name:<30} {info['display']:<22} offsets {info['offsets']}")
    print()

    # Step 2: Scales
    print("2. Scales from a root...")
    root = Note(62)
    for name in ("dorian", "blues", "major_extended"):
        scale = ScaleFormula.from_name(name)
        notes = " ".join(str(note) for note in scale.notes_from_root(root))
        print(f"   {name} from {root}: {notes}")
    print(f"   Outside C major: {~ScaleFormula.MAJOR}")
    print()

    # Step 3: Wire round trip
    print("3. Wire round trip...")
    encoded = catalog.encode_scale("harmonic minor")
    if encoded is not None:
        payload = encoded.model_dump_json()
        print(f"   JSON: {payload}")
        decoded = EncodedFormula.model_validate_json(payload).to_scale()
        print(f"   Decoded: {decoded} ({decoded == ScaleFormula.HARMONIC_MINOR})")
    print()
    print("Done!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
