"""
Tests for ScaleFormula.

Tests cover:
- Building from semitone offsets and the two-octave range
- Set operations, including the first-octave complement
- Materializing notes from a root
- Named scales and display
"""

import copy
import pickle

import pytest

from chuk_music_formula.core import SCALE_FORMULAS, Note, ScaleFormula


class TestConstruction:
    """Tests for building scales."""

    def test_empty(self) -> None:
        """An empty scale has no offsets."""
        empty = ScaleFormula.empty()
        assert empty.is_empty()
        assert empty.note_count() == 0
        assert empty.semitones() == []

    def test_from_semitones(self) -> None:
        """Each offset sets one bit."""
        formula = ScaleFormula.from_semitones([0, 4, 7])
        assert formula.bits == 0b10010001
        assert formula.semitones() == [0, 4, 7]

    def test_from_semitones_drops_out_of_range(self) -> None:
        """Offsets outside 0-23 are ignored."""
        formula = ScaleFormula.from_semitones([0, 2, 24, 30, -1])
        assert formula.semitones() == [0, 2]

    def test_from_semitones_duplicates(self) -> None:
        """Repeated offsets set the same bit."""
        assert ScaleFormula.from_semitones([3, 3, 3]).note_count() == 1

    def test_rejects_words_outside_u32(self) -> None:
        """Only unsigned 32-bit words are formulas."""
        with pytest.raises(ValueError, match="unsigned 32-bit"):
            ScaleFormula(-1)
        with pytest.raises(ValueError, match="unsigned 32-bit"):
            ScaleFormula(1 << 32)

    def test_reserved_bits_kept(self) -> None:
        """Bits 24-31 are preserved and counted but never listed."""
        formula = ScaleFormula(0xFF000001)
        assert formula.bits == 0xFF000001
        assert formula.semitones() == [0]
        assert formula.note_count() == 9

    def test_copy_and_pickle(self) -> None:
        """Scales survive copy, deepcopy and pickle unchanged."""
        major = ScaleFormula.MAJOR
        assert copy.copy(major) == major
        assert copy.deepcopy({"scale": major}) == {"scale": major}
        blues = ScaleFormula.BLUES_EXTENDED
        assert pickle.loads(pickle.dumps(blues)) == blues


class TestQueries:
    """Tests for membership and counting."""

    def test_major_semitones(self) -> None:
        """Major is 0 2 4 5 7 9 11."""
        assert ScaleFormula.MAJOR.semitones() == [0, 2, 4, 5, 7, 9, 11]
        assert ScaleFormula.MAJOR.note_count() == 7

    def test_contains_semitone(self) -> None:
        """Membership per offset."""
        major = ScaleFormula.MAJOR
        assert major.contains_semitone(0)
        assert major.contains_semitone(4)
        assert not major.contains_semitone(3)
        assert major.has_root()

    def test_contains_out_of_range(self) -> None:
        """Offsets outside 0-23 are never contained."""
        full = ScaleFormula(0xFFFFFFFF)
        assert not full.contains_semitone(24)
        assert not full.contains_semitone(31)
        assert not full.contains_semitone(-1)

    def test_extended_second_octave(self) -> None:
        """Extended scales repeat the pattern in bits 12-23."""
        extended = ScaleFormula.MAJOR_EXTENDED
        assert extended.note_count() == 14
        assert extended.contains_semitone(14)
        assert extended.contains_semitone(17)
        assert extended.contains_semitone(21)
        assert not extended.contains_semitone(13)

    def test_chromatic(self) -> None:
        """Chromatic fills an octave, extended fills both."""
        assert ScaleFormula.CHROMATIC.note_count() == 12
        assert ScaleFormula.CHROMATIC_EXTENDED.note_count() == 24


class TestSetOperations:
    """Tests for union, intersection and complement."""

    def test_union(self) -> None:
        """Union contains offsets from either scale."""
        combined = ScaleFormula.MAJOR | ScaleFormula.MINOR
        assert combined.semitones() == [0, 2, 3, 4, 5, 7, 8, 9, 10, 11]
        assert combined == ScaleFormula.MAJOR.union(ScaleFormula.MINOR)

    def test_intersection(self) -> None:
        """Intersection keeps shared offsets."""
        shared = ScaleFormula.MAJOR & ScaleFormula.MINOR
        assert shared.semitones() == [0, 2, 5, 7]
        assert shared == ScaleFormula.MAJOR.intersection(ScaleFormula.MINOR)

    def test_complement(self) -> None:
        """Complement lists the missing first-octave offsets."""
        assert (~ScaleFormula.MAJOR).semitones() == [1, 3, 6, 8, 10]
        assert ScaleFormula.MAJOR.complement() == ~ScaleFormula.MAJOR

    def test_complement_first_octave_only(self) -> None:
        """Complement clears the second octave and reserved bits."""
        assert (~ScaleFormula.empty()) == ScaleFormula.CHROMATIC
        assert (~ScaleFormula.CHROMATIC_EXTENDED).is_empty()
        assert ~~ScaleFormula.MAJOR_EXTENDED == ScaleFormula.MAJOR

    def test_pentatonic_inside_major(self) -> None:
        """Major pentatonic is a subset of major."""
        penta = ScaleFormula.PENTATONIC_MAJOR
        assert (penta & ScaleFormula.MAJOR) == penta

    def test_operators_reject_other_types(self) -> None:
        """Scales only combine with scales."""
        with pytest.raises(TypeError):
            ScaleFormula.MAJOR | 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            ScaleFormula.MAJOR & 1  # type: ignore[operator]


class TestNotesFromRoot:
    """Tests for notes_from_root."""

    def test_major_from_f(self) -> None:
        """Offsets are added to the root."""
        notes = list(ScaleFormula.MAJOR.notes_from_root(Note(5)))
        assert [note.semitone for note in notes] == [5, 7, 9, 10, 12, 14, 16]

    def test_from_middle_c(self, middle_c: Note) -> None:
        """C major from C4 spells the white keys."""
        names = [str(note) for note in ScaleFormula.MAJOR.notes_from_root(middle_c)]
        assert names == ["C4", "D4", "E4", "F4", "G4", "A4", "B4"]

    def test_fresh_iterator_per_call(self) -> None:
        """Each call restarts from the root."""
        scale = ScaleFormula.PENTATONIC_MINOR
        assert list(scale.notes_from_root(Note(60))) == list(scale.notes_from_root(Note(60)))

    def test_saturates_near_top(self) -> None:
        """Notes past 255 clamp to 255."""
        notes = list(ScaleFormula.MAJOR.notes_from_root(Note(250)))
        assert [note.semitone for note in notes] == [250, 252, 254, 255, 255, 255, 255]

    def test_empty_scale(self) -> None:
        """An empty scale yields nothing."""
        assert list(ScaleFormula.empty().notes_from_root(Note(60))) == []


class TestNamedScales:
    """Tests for the named scale table."""

    @pytest.mark.parametrize(
        ("name", "semitones"),
        [
            ("minor", [0, 2, 3, 5, 7, 8, 10]),
            ("pentatonic_major", [0, 2, 4, 7, 9]),
            ("pentatonic_minor", [0, 3, 5, 7, 10]),
            ("blues", [0, 3, 5, 6, 7, 10]),
            ("harmonic_minor", [0, 2, 3, 5, 7, 8, 11]),
            ("melodic_minor", [0, 2, 3, 5, 7, 9, 11]),
            ("dorian", [0, 2, 3, 5, 7, 9, 10]),
            ("phrygian", [0, 1, 3, 5, 7, 8, 10]),
            ("lydian", [0, 2, 4, 6, 7, 9, 11]),
            ("mixolydian", [0, 2, 4, 5, 7, 9, 10]),
            ("locrian", [0, 1, 3, 5, 6, 8, 10]),
        ],
    )
    def test_scale_offsets(self, name: str, semitones: list[int]) -> None:
        """Named scales hold their standard offsets."""
        assert ScaleFormula.from_name(name).semitones() == semitones

    def test_table_complete(self) -> None:
        """Every table entry is a class constant."""
        assert len(SCALE_FORMULAS) == 19
        for name, formula in SCALE_FORMULAS.items():
            assert getattr(ScaleFormula, name.upper()) is formula

    def test_from_name_normalizes(self) -> None:
        """Names are case-insensitive and accept spaces or hyphens."""
        assert ScaleFormula.from_name("Pentatonic-Minor") == ScaleFormula.PENTATONIC_MINOR
        assert ScaleFormula.from_name("harmonic minor") == ScaleFormula.HARMONIC_MINOR

    def test_from_name_unknown(self) -> None:
        """Unknown names raise."""
        with pytest.raises(ValueError, match="Unknown scale formula"):
            ScaleFormula.from_name("bebop")


class TestDisplay:
    """Tests for text and numeric formatting."""

    def test_str(self) -> None:
        """Interval names joined by commas."""
        assert str(ScaleFormula.MAJOR) == "1, 2, 3, 4, 5, 6, 7"
        assert str(ScaleFormula.MINOR) == "1, 2, ♭3, 4, 5, ♭6, ♭7"
        assert str(ScaleFormula.BLUES) == "1, ♭3, 4, ♭5, 5, ♭7"

    def test_str_empty(self) -> None:
        """An empty scale displays as Empty."""
        assert str(ScaleFormula.empty()) == "Empty"

    def test_str_second_octave_repeats_names(self) -> None:
        """Second-octave offsets reuse first-octave names."""
        assert str(ScaleFormula.from_semitones([0, 12])) == "1, 1"

    def test_binary(self) -> None:
        """'b' pads to one octave."""
        assert f"{ScaleFormula.MAJOR:b}" == "101010110101"
        assert f"{ScaleFormula.empty():b}" == "000000000000"
        assert f"{ScaleFormula.from_semitones([0]):b}" == "000000000001"

    def test_repr(self) -> None:
        """Named scales repr by name."""
        assert repr(ScaleFormula.DORIAN) == "ScaleFormula.DORIAN"
        assert repr(ScaleFormula(0b11)) == "ScaleFormula(0b11)"
