"""Note/scale model: pitch-class arithmetic and sharp/flat spelling."""

from types import MappingProxyType
from typing import Final, Mapping

SEMITONES_PER_OCTAVE = 12

# Chromatic pitch class names (index 0 = C)
SHARP_SCALE: Final[tuple[str, ...]] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
FLAT_SCALE: Final[tuple[str, ...]] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)

#: Keys where flat notation is conventional
FLAT_KEYS: Final[frozenset[str]] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})

#: Keys offered by a key selector. Mixed sharp/flat by lead-sheet convention.
ALL_KEYS: Final[tuple[str, ...]] = (
    "C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B",
)

#: Sharp spellings with no slot in ALL_KEYS, mapped to the listed flat name
SELECTOR_KEY_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {"D#": "Eb", "G#": "Ab", "A#": "Bb"}
)


def note_index(name: str) -> int | None:
    """
    Return the pitch class (0=C, ..., 11=B) for a note name.

    The sharp table is searched before the flat table. Returns ``None`` for
    anything that is not one of the 17 recognised spellings.
    """
    if name in SHARP_SCALE:
        return SHARP_SCALE.index(name)
    if name in FLAT_SCALE:
        return FLAT_SCALE.index(name)
    return None


def transpose_note(name: str, semitones: int, use_flats: bool) -> str:
    """
    Shift a note name by ``semitones`` and spell it from the sharp or flat scale.

    Unrecognised names are returned unchanged.
    """
    index = note_index(name)
    if index is None:
        return name
    scale = FLAT_SCALE if use_flats else SHARP_SCALE
    return scale[(index + semitones) % SEMITONES_PER_OCTAVE]


def semitones_between(from_key: str, to_key: str) -> int:
    """
    Upward distance in semitones (0-11) from ``from_key`` to ``to_key``.

    Returns 0 when either key is unknown, i.e. no transposition.
    """
    start = note_index(from_key)
    end = note_index(to_key)
    if start is None or end is None:
        return 0
    return (end - start) % SEMITONES_PER_OCTAVE


def prefers_flats(key: str) -> bool:
    """True if chords in ``key`` are conventionally spelled with flats."""
    return key in FLAT_KEYS


def normalize_key(name: str) -> str:
    """Map ``D#``/``G#``/``A#`` onto the ``ALL_KEYS`` spelling; pass others through."""
    return SELECTOR_KEY_ALIASES.get(name, name)
