"""Line classifier: decide whether a line of raw text is a chord line."""

import re
from typing import Final

from chordsheet.chord_grammar import is_chord_token, is_marker_token

# Performance notes such as "(straight to next verse)"; not nested
_ANNOTATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\([^)]*\)")


def is_section_header(line: str) -> bool:
    """True for bracketed labels like ``[Verse]`` or ``[Chorus] [2x]``."""
    return line.strip().startswith("[")


def strip_annotations(line: str) -> str:
    """Remove every parenthesised substring and trim the result."""
    return _ANNOTATION_PATTERN.sub("", line).strip()


def is_chord_line(line: str) -> bool:
    """
    Return True if every non-marker token on the line is a chord.

    Rules, in order:

    1. Blank lines and section headers are never chord lines.
    2. Parenthesised annotations are removed before tokenising.
    3. Bar/rhythm markers (``|``, ``//`` ...) are skipped.
    4. Any other token that is not a chord disqualifies the line.
    5. At least one real chord must be present; markers alone do not count.
    """
    trimmed = line.strip()
    if not trimmed or is_section_header(trimmed):
        return False

    stripped = strip_annotations(trimmed)
    if not stripped:
        return False

    has_chord = False
    for token in stripped.split():
        if is_marker_token(token):
            continue
        if not is_chord_token(token):
            return False
        has_chord = True
    return has_chord
