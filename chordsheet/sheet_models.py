"""Data models shared by the chord grammar, sheet parser and renderers."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ChordToken:
    """
    A single chord symbol split into its parts.

    Attributes:
        root:    Root note spelling, e.g. "F#".
        quality: Chord-type suffix kept verbatim ("m7", "sus4", "" for major).
        bass:    Bass note of a slash chord, or None.
    """

    root: str
    quality: str = ""
    bass: str | None = None

    @property
    def symbol(self) -> str:
        """The chord written back out, e.g. 'Bsus4' or 'B/D#'."""
        suffix = f"/{self.bass}" if self.bass else ""
        return f"{self.root}{self.quality}{suffix}"


class LineType(str, Enum):
    """Classification of one chord-sheet line."""

    EMPTY = "empty"
    SECTION = "section"
    CHORD = "chord"
    LYRIC = "lyric"


@dataclass(frozen=True)
class ParsedLine:
    """One classified line; ``display`` is transposed for chord lines only."""

    type: LineType
    raw: str
    display: str


@dataclass(frozen=True)
class SheetDocument:
    """A parsed chord sheet together with the keys it was transposed between."""

    title: str
    source_key: str
    target_key: str
    semitones: int
    lines: list[ParsedLine]

    @property
    def heading(self) -> str:
        """Heading used by rendered outputs, e.g. 'Amazing Grace — Key of G'."""
        if self.title:
            return f"{self.title} — Key of {self.target_key}"
        return f"Key of {self.target_key}"
