"""Unit tests for renderers used by SheetExporter."""

from chordsheet.sheet_models import LineType, ParsedLine, SheetDocument
from chordsheet.sheet_renderers import HtmlSheetRenderer, TextSheetRenderer


def _sample_document(title: str = "Demo") -> SheetDocument:
    return SheetDocument(
        title=title,
        source_key="C",
        target_key="D",
        semitones=2,
        lines=[
            ParsedLine(type=LineType.SECTION, raw="[Verse]", display="[Verse]"),
            ParsedLine(type=LineType.CHORD, raw="C   G", display="D   A"),
            ParsedLine(type=LineType.LYRIC, raw="Rock & <roll>", display="Rock & <roll>"),
            ParsedLine(type=LineType.EMPTY, raw="", display=""),
        ],
    )


def test_html_renderer_default_extension() -> None:
    assert HtmlSheetRenderer().default_extension == ".html"


def test_html_renderer_heading_in_title_and_h1() -> None:
    html = HtmlSheetRenderer().render(_sample_document("My Song"))
    assert "<title>My Song — Key of D</title>" in html
    assert "<h1>My Song — Key of D</h1>" in html


def test_html_renderer_escapes_heading() -> None:
    html = HtmlSheetRenderer().render(_sample_document("<Cool> & Song"))
    assert "&lt;Cool&gt; &amp; Song" in html
    assert "<Cool>" not in html


def test_html_renderer_escapes_line_text() -> None:
    html = HtmlSheetRenderer().render(_sample_document())
    assert "<div>Rock &amp; &lt;roll&gt;</div>" in html


def test_html_renderer_styles_lines_by_type() -> None:
    renderer = HtmlSheetRenderer()
    lines = _sample_document().lines
    assert renderer.render_line(lines[0]) == '<div style="font-weight:700;color:#374151;margin-top:16px">[Verse]</div>'
    assert renderer.render_line(lines[1]) == '<div style="color:#b45309;font-weight:600">D   A</div>'
    assert renderer.render_line(lines[3]) == '<div style="height:8px"></div>'


def test_html_renderer_uses_display_text() -> None:
    html = HtmlSheetRenderer().render(_sample_document())
    assert "D   A" in html
    assert "C   G" not in html


def test_html_renderer_is_valid_html_skeleton() -> None:
    html = HtmlSheetRenderer().render(_sample_document())
    assert html.startswith("<!DOCTYPE html>")
    assert "<body>" in html
    assert html.endswith("</html>")
    assert "@media print" in html


def test_html_renderer_autoprint_script() -> None:
    assert "window.print()" not in HtmlSheetRenderer().render(_sample_document())
    assert "window.print()" in HtmlSheetRenderer(autoprint=True).render(_sample_document())


def test_text_renderer_heading_then_lines() -> None:
    content = TextSheetRenderer().render(_sample_document("My Song"))
    assert content == "My Song — Key of D\n\n[Verse]\nD   A\nRock & <roll>\n"


def test_text_renderer_default_extension() -> None:
    assert TextSheetRenderer().default_extension == ".txt"
