"""
Tests for pitch primitives.

Tests cover:
- PitchClass (pitch.py)
- Semitone (pitch.py)
- Note arithmetic, octave shifts and display (pitch.py)
"""

import copy
import pickle

import pytest

from chuk_music_formula.core import Note, PitchClass, Semitone


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.G.transpose(7) == PitchClass.D
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_from_semitones(self) -> None:
        """Extract pitch class from an absolute semitone count."""
        assert PitchClass.from_semitones(60) == PitchClass.C
        assert PitchClass.from_semitones(69) == PitchClass.A
        assert PitchClass.from_semitones(23) == PitchClass.B

    def test_spell(self) -> None:
        """Spell pitch class as string."""
        assert PitchClass.C.spell() == "C"
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(prefer_flats=True) == "Db"


class TestSemitone:
    """Tests for Semitone."""

    def test_value(self) -> None:
        """Semitone wraps its count."""
        assert Semitone(7).value == 7
        assert int(Semitone(7)) == 7

    def test_range(self) -> None:
        """Semitones are unsigned 8-bit."""
        assert Semitone(0).value == 0
        assert Semitone(255).value == 255
        with pytest.raises(ValueError, match="Semitone must be 0-255"):
            Semitone(-1)
        with pytest.raises(ValueError, match="Semitone must be 0-255"):
            Semitone(256)

    def test_octave_and_pitch_class(self) -> None:
        """A semitone count reads as an absolute pitch."""
        assert Semitone(0).octave == -1
        assert Semitone(60).octave == 4
        assert Semitone(61).pitch_class == PitchClass.Cs

    def test_comparison_and_hash(self) -> None:
        """Semitones compare and hash by value."""
        assert Semitone(3) < Semitone(4)
        assert Semitone(4) == Semitone(4)
        assert len({Semitone(4), Semitone(4), Semitone(5)}) == 2

    def test_immutable(self) -> None:
        """Semitones cannot be mutated."""
        semitone = Semitone(4)
        with pytest.raises(AttributeError):
            semitone._value = 5  # type: ignore[misc]

    def test_copy_and_pickle(self) -> None:
        """Semitones survive copy and pickle."""
        assert copy.copy(Semitone(7)) == Semitone(7)
        assert pickle.loads(pickle.dumps(Semitone(255))) == Semitone(255)


class TestNote:
    """Tests for Note."""

    def test_add_semitone(self) -> None:
        """Adding a semitone moves the note up."""
        assert (Note(0) + Semitone(4)).semitone == 4
        assert (Note(7) + Semitone(7)).semitone == 14

    def test_add_saturates(self) -> None:
        """Addition saturates at 255."""
        assert (Note(250) + Semitone(10)).semitone == 255

    def test_sub_semitone(self) -> None:
        """Subtracting a semitone moves the note down, saturating at 0."""
        assert (Note(7) - Semitone(3)).semitone == 4
        assert (Note(0) - Semitone(12)).semitone == 0

    def test_octave_shifts(self) -> None:
        """>> and << shift by whole octaves."""
        assert (Note(60) >> 1).semitone == 72
        assert (Note(60) << 2).semitone == 36
        assert (Note(250) >> 1).semitone == 255
        assert (Note(5) << 1).semitone == 0

    def test_octave_shift_rejects_negative(self) -> None:
        """Shift counts are non-negative."""
        with pytest.raises(ValueError, match="Octave shift must be non-negative"):
            Note(60) >> -1
        with pytest.raises(ValueError, match="Octave shift must be non-negative"):
            Note(60) << -2

    def test_octave_shift_rejects_bool(self) -> None:
        """Shift counts are integers, not booleans."""
        with pytest.raises(TypeError):
            Note(60) >> True
        with pytest.raises(TypeError):
            Note(60) << False

    def test_copy_and_pickle(self) -> None:
        """Notes survive copy, deepcopy and pickle."""
        assert copy.copy(Note(60)) == Note(60)
        assert copy.deepcopy([Note(61)]) == [Note(61)]
        assert pickle.loads(pickle.dumps(Note(69))) == Note(69)

    def test_octave(self) -> None:
        """Octaves follow the MIDI convention."""
        assert Note(0).octave == -1
        assert Note(12).octave == 0
        assert Note(60).octave == 4
        assert Note(71).octave == 4
        assert Note(127).octave == 9

    def test_display(self) -> None:
        """Notes display as name plus octave."""
        assert str(Note(0)) == "C-1"
        assert str(Note(60)) == "C4"
        assert str(Note(61)) == "C#4"
        assert str(Note(69)) == "A4"
        assert str(Note(127)) == "G9"
        assert str(Note(255)) == "D#20"

    def test_as_semitone(self) -> None:
        """A note converts to a semitone count from note 0."""
        assert Note(9).as_semitone() == Semitone(9)

    def test_invalid_note(self) -> None:
        """Notes outside 0-255 are rejected."""
        with pytest.raises(ValueError, match="Note must be 0-255"):
            Note(256)

    def test_add_requires_semitone(self) -> None:
        """Notes only add Semitone values."""
        with pytest.raises(TypeError):
            Note(60) + 4  # type: ignore[operator]

    def test_ordering(self) -> None:
        """Notes are ordered by number."""
        assert Note(60) < Note(62)
        assert max(Note(64), Note(60)) == Note(64)
