"""SheetExporter: transposes chord sheet text and writes HTML or plain-text output."""

from __future__ import annotations

import logging
from typing import Final

from chordsheet.sheet_models import SheetDocument
from chordsheet.sheet_parser import build_document
from chordsheet.sheet_renderers import HtmlSheetRenderer, SheetRenderer, TextSheetRenderer

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Final[set[str]] = {"html", "txt"}


class SheetExporter:
    """
    Convert chord sheet text into a rendered file via a pluggable renderer.

    Supported formats:
    - ``html``: printable page, chord lines and section headers styled.
    - ``txt``: plain text with a "Key of ..." heading.
    """

    def __init__(self, title: str = "", output_format: str = "html", autoprint: bool = False) -> None:
        self.title = title
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized, autoprint)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_renderer(self, output_format: str, autoprint: bool) -> SheetRenderer:
        if output_format == "html":
            return HtmlSheetRenderer(autoprint=autoprint)
        return TextSheetRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def default_extension(self) -> str:
        return self.renderer.default_extension

    def document(self, text: str, source_key: str, target_key: str) -> SheetDocument:
        return build_document(text, source_key, target_key, title=self.title)

    def render(self, text: str, source_key: str, target_key: str) -> str:
        """Transpose ``text`` from ``source_key`` to ``target_key`` and render it."""
        document = self.document(text, source_key, target_key)
        logger.debug(
            "Rendering %d line(s) as %s, %s -> %s (%+d semitones)",
            len(document.lines),
            self.output_format,
            document.source_key,
            document.target_key,
            document.semitones,
        )
        return self.renderer.render(document)

    def export(self, text: str, source_key: str, target_key: str, output_path: str) -> str:
        """
        Render the transposed sheet and write it to ``output_path``.

        Returns:
            The path written.

        Raises:
            OSError: If the output file cannot be written.
        """
        content = self.render(text, source_key, target_key)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.info("Wrote %s", output_path)
        return output_path
