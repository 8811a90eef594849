"""Renderer implementations for chord sheet output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod

from chordsheet.sheet_models import LineType, ParsedLine, SheetDocument


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class SheetRenderer(ABC):
    """Abstract sheet renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, document: SheetDocument) -> str:
        """Render a parsed sheet into a file content string."""


class HtmlSheetRenderer(SheetRenderer):
    """Render a parsed sheet as a self-contained, printable HTML page."""

    _SPACER = '<div style="height:8px"></div>'
    _SECTION_STYLE = "font-weight:700;color:#374151;margin-top:16px"
    _CHORD_STYLE = "color:#b45309;font-weight:600"

    def __init__(self, autoprint: bool = False) -> None:
        """
        Args:
            autoprint: Append a script that opens the browser print dialog
                       as soon as the page loads.
        """
        self.autoprint = autoprint

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, document: SheetDocument) -> str:
        body = "\n".join(self.render_line(line) for line in document.lines)
        return self.build_html(document.heading, body)

    def render_line(self, line: ParsedLine) -> str:
        """Render one line as a ``<div>`` styled by its type."""
        if line.type is LineType.EMPTY:
            return self._SPACER
        escaped = _escape_html(line.display)
        if line.type is LineType.SECTION:
            return f'<div style="{self._SECTION_STYLE}">{escaped}</div>'
        if line.type is LineType.CHORD:
            return f'<div style="{self._CHORD_STYLE}">{escaped}</div>'
        return f"<div>{escaped}</div>"

    def build_html(self, heading: str, body: str) -> str:
        """
        Wrap rendered lines in an HTML document.

        Monospace type keeps chords aligned over their lyrics. The ``@media
        print`` rule sets page margins for Print → Save as PDF.
        """
        heading_safe = _escape_html(heading)
        script = (
            "\n  <script>window.onload = function(){ window.print(); }</script>"
            if self.autoprint
            else ""
        )

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>{heading_safe}</title>
  <style>
    body {{
      font-family: 'Courier New', Courier, monospace;
      font-size: 13px;
      line-height: 1.55;
      padding: 28px 36px;
      color: #111;
    }}
    div {{
      white-space: pre;
    }}
    h1 {{
      font-size: 15px;
      margin: 0 0 20px;
    }}
    @media print {{
      @page {{ margin: 18mm 20mm; }}
    }}
  </style>
</head>
<body>
  <h1>{heading_safe}</h1>
{body}{script}
</body>
</html>"""


class TextSheetRenderer(SheetRenderer):
    """Render a parsed sheet as plain text: heading, blank line, then the lines."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, document: SheetDocument) -> str:
        body = "\n".join(line.display for line in document.lines)
        return f"{document.heading}\n\n{body}"
