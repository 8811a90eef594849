"""Unit tests for the note/scale model."""

import pytest

from chordsheet.notes import (
    ALL_KEYS,
    FLAT_SCALE,
    SHARP_SCALE,
    normalize_key,
    note_index,
    prefers_flats,
    semitones_between,
    transpose_note,
)


def test_note_index_sharp_and_flat_spellings_agree() -> None:
    for sharp, flat in zip(SHARP_SCALE, FLAT_SCALE):
        assert note_index(sharp) == note_index(flat)


def test_note_index_c_is_zero_b_is_eleven() -> None:
    assert note_index("C") == 0
    assert note_index("B") == 11


@pytest.mark.parametrize("name", ["H", "c", "", "C##", "Cb", "E#", "Do"])
def test_note_index_unknown_returns_none(name: str) -> None:
    assert note_index(name) is None


def test_transpose_note_wraps_upwards() -> None:
    assert transpose_note("B", 1, False) == "C"
    assert transpose_note("A", 5, False) == "D"


def test_transpose_note_negative_offset_wraps_downwards() -> None:
    assert transpose_note("C", -1, False) == "B"
    assert transpose_note("D", -14, False) == "C"


def test_transpose_note_spelling_follows_use_flats() -> None:
    assert transpose_note("C", 6, False) == "F#"
    assert transpose_note("C", 6, True) == "Gb"
    assert transpose_note("Bb", 0, False) == "A#"


def test_transpose_note_unknown_passes_through() -> None:
    assert transpose_note("X", 5, False) == "X"


def test_semitones_between_examples() -> None:
    assert semitones_between("C", "G") == 7
    assert semitones_between("C", "D") == 2
    assert semitones_between("C", "F") == 5
    assert semitones_between("C", "Eb") == 3


def test_semitones_between_wraps() -> None:
    assert semitones_between("C", "B") == 11
    assert semitones_between("G", "C") == 5


@pytest.mark.parametrize("key", ["C", "G", "Bb"])
def test_semitones_between_same_key_is_zero(key: str) -> None:
    assert semitones_between(key, key) == 0


def test_semitones_between_unknown_keys_is_zero() -> None:
    assert semitones_between("X", "Y") == 0
    assert semitones_between("C", "H") == 0


@pytest.mark.parametrize("key", ["F", "Bb", "Eb", "Ab", "Db", "Gb"])
def test_prefers_flats_for_flat_keys(key: str) -> None:
    assert prefers_flats(key) is True


@pytest.mark.parametrize("key", ["C", "G", "D", "A", "E", "B", "F#", "C#", "A#", ""])
def test_prefers_flats_false_for_sharp_and_natural_keys(key: str) -> None:
    assert prefers_flats(key) is False


@pytest.mark.parametrize(("name", "expected"), [("D#", "Eb"), ("G#", "Ab"), ("A#", "Bb")])
def test_normalize_key_maps_sharp_only_spellings(name: str, expected: str) -> None:
    assert normalize_key(name) == expected


@pytest.mark.parametrize("key", ["C", "G", "D", "A", "E", "B", "F", "F#", "Eb", "Bb", "Ab", "C#", "nonsense"])
def test_normalize_key_passes_other_keys_through(key: str) -> None:
    assert normalize_key(key) == key


def test_all_keys_is_fixed_literal() -> None:
    assert ALL_KEYS == ("C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B")
    assert len(set(ALL_KEYS)) == 12


def test_all_keys_are_normalized() -> None:
    assert all(normalize_key(key) == key for key in ALL_KEYS)
