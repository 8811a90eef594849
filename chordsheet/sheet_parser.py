"""Sheet parser: split a raw chord sheet into typed, transposed lines."""

from chordsheet.chord_grammar import transpose_line
from chordsheet.line_classifier import is_chord_line, is_section_header
from chordsheet.notes import normalize_key, prefers_flats, semitones_between
from chordsheet.sheet_models import LineType, ParsedLine, SheetDocument


def classify_line(line: str) -> LineType:
    """Assign exactly one LineType; checks run empty, section, chord, then lyric."""
    if not line.strip():
        return LineType.EMPTY
    if is_section_header(line):
        return LineType.SECTION
    if is_chord_line(line):
        return LineType.CHORD
    return LineType.LYRIC


def parse_line(line: str, semitones: int, use_flats: bool) -> ParsedLine:
    line_type = classify_line(line)
    if line_type is LineType.CHORD:
        return ParsedLine(type=line_type, raw=line, display=transpose_line(line, semitones, use_flats))
    return ParsedLine(type=line_type, raw=line, display=line)


def parse_chord_sheet(text: str, semitones: int, to_key: str) -> list[ParsedLine]:
    """
    Classify every line of ``text`` and transpose the chord lines.

    Args:
        text:      Plain-text chord sheet; lines separated by ``\\n``
                   (a trailing ``\\r`` on each line is dropped).
        semitones: Signed offset applied to chord lines.
        to_key:    Target key; selects flat or sharp spelling.

    Returns:
        One ParsedLine per input line, in order. An empty string gives a
        single EMPTY line.
    """
    use_flats = prefers_flats(to_key)
    return [
        parse_line(raw.removesuffix("\r"), semitones, use_flats)
        for raw in text.split("\n")
    ]


def build_document(text: str, source_key: str, target_key: str, title: str = "") -> SheetDocument:
    """
    Parse ``text`` written in ``source_key`` and transpose it to ``target_key``.

    Both keys are normalised first, so a chart stored in "D#" is treated as
    "Eb". Unknown keys mean no transposition.
    """
    source = normalize_key(source_key)
    target = normalize_key(target_key)
    semitones = semitones_between(source, target)
    return SheetDocument(
        title=title,
        source_key=source,
        target_key=target,
        semitones=semitones,
        lines=parse_chord_sheet(text, semitones, target),
    )
