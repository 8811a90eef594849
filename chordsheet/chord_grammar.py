"""Chord token grammar: recognise, decompose and transpose chord symbols."""

import re
from typing import Final

from chordsheet.notes import transpose_note
from chordsheet.sheet_models import ChordToken

# root [quality] [/bass], anchored at both ends.
#
# The quality alternatives are tried left to right and the first one that
# lets the whole pattern match wins. ``m[0-9]+`` MUST stay ahead of
# ``m(?!aj)`` so "Am7" is read as quality "m7" directly. With the bare minor
# first, the "7" is left unconsumed and the match only survives if the
# engine backtracks into a later alternative; engines without that
# backtracking reject the token.
CHORD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<root>[A-G][#b]?)
    (?P<quality>
        m[0-9]+         # minor with extension: m7, m9
      | m(?!aj)         # bare minor, but not the start of "maj"
      | M
      | maj[0-9]*
      | min[0-9]*
      | sus[0-9]*
      | aug
      | dim
      | add[0-9]*
      | [0-9]+          # dominant / extension only: 7, 9
    )?
    (?:/(?P<bass>[A-G][#b]?))?
    \Z
    """,
    re.VERBOSE,
)

# Bar and rhythm markers that may sit on a chord line: |, /, //, (, ), [, ]
MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?:[|/()\[\]]+|/{1,3})\Z")

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+")


def parse_chord(token: str) -> ChordToken | None:
    """Decompose ``token`` into root, quality and bass, or ``None`` if it is not a chord."""
    match = CHORD_PATTERN.match(token)
    if match is None:
        return None
    return ChordToken(
        root=match.group("root"),
        quality=match.group("quality") or "",
        bass=match.group("bass"),
    )


def is_chord_token(token: str) -> bool:
    return CHORD_PATTERN.match(token) is not None


def is_marker_token(token: str) -> bool:
    return MARKER_PATTERN.match(token) is not None


def transpose_chord(token: str, semitones: int, use_flats: bool) -> str:
    """
    Transpose the root and bass note of a chord symbol.

    The quality suffix is copied verbatim. Tokens that are not chords are
    returned unchanged.
    """
    chord = parse_chord(token)
    if chord is None:
        return token
    bass = transpose_note(chord.bass, semitones, use_flats) if chord.bass else None
    return ChordToken(
        root=transpose_note(chord.root, semitones, use_flats),
        quality=chord.quality,
        bass=bass,
    ).symbol


def _transpose_token(token: str, semitones: int, use_flats: bool) -> str:
    if is_marker_token(token):
        return token
    return transpose_chord(token, semitones, use_flats)


def transpose_line(line: str, semitones: int, use_flats: bool) -> str:
    """
    Transpose every chord token in ``line``, keeping whitespace exactly as is.

    Markers and anything that is not a chord pass through untouched.
    """
    if semitones == 0:
        return line
    return _TOKEN_PATTERN.sub(
        lambda match: _transpose_token(match.group(0), semitones, use_flats),
        line,
    )
