"""chordsheet — chord sheet parsing and transposition."""

from chordsheet.chord_grammar import (
    is_chord_token,
    is_marker_token,
    parse_chord,
    transpose_chord,
    transpose_line,
)
from chordsheet.line_classifier import is_chord_line
from chordsheet.notes import (
    ALL_KEYS,
    normalize_key,
    note_index,
    prefers_flats,
    semitones_between,
    transpose_note,
)
from chordsheet.sheet_models import ChordToken, LineType, ParsedLine, SheetDocument
from chordsheet.sheet_parser import build_document, classify_line, parse_chord_sheet

__version__ = "0.1.0"

__all__ = [
    "ALL_KEYS",
    "ChordToken",
    "LineType",
    "ParsedLine",
    "SheetDocument",
    "build_document",
    "classify_line",
    "is_chord_line",
    "is_chord_token",
    "is_marker_token",
    "normalize_key",
    "note_index",
    "parse_chord",
    "parse_chord_sheet",
    "prefers_flats",
    "semitones_between",
    "transpose_chord",
    "transpose_line",
    "transpose_note",
]
