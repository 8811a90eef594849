"""chordsheet CLI entry point."""

import logging
import re
import sys
from pathlib import Path

import click

from chordsheet import __version__
from chordsheet.doc_source import ChordSheetSourceError, DocumentFetcher, is_document_url
from chordsheet.notes import ALL_KEYS, normalize_key, semitones_between
from chordsheet.sheet_exporter import SUPPORTED_FORMATS, SheetExporter
from chordsheet.sheet_parser import build_document

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _title_to_filename(title: str, target_key: str, extension: str) -> str:
    """
    Build a safe output filename like ``Amazing_Grace_-_Key_of_G.html``.

    Strips characters that are invalid in filenames and collapses whitespace
    to underscores.
    """
    stem = f"{title} - Key of {target_key}" if title else f"Key of {target_key}"
    sanitized = re.sub(r"[^\w\s#-]", "", stem)
    sanitized = re.sub(r"\s+", "_", sanitized.strip())
    return f"{sanitized}{extension}"


def _read_source(source: str, timeout: float) -> str:
    """Return chord sheet text from stdin (``-``), a Google Docs URL, or a local file."""
    if source == "-":
        text = sys.stdin.read()
    elif is_document_url(source):
        with DocumentFetcher(timeout=timeout) as fetcher:
            text = fetcher.fetch_text(source)
    else:
        text = Path(source).read_text(encoding="utf-8")
    # A leading BOM would make the first line a lyric
    return text.removeprefix("\ufeff")


def _load_or_exit(source: str, timeout: float) -> str:
    try:
        return _read_source(source, timeout)
    except ChordSheetSourceError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        click.echo(f"  ERROR: '{source}' is not UTF-8 text — {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"  ERROR: Could not read '{source}' — {exc}", err=True)
        sys.exit(1)


def _source_options(func):
    """Options shared by commands that read and transpose a chord sheet."""
    func = click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=DEFAULT_TIMEOUT,
        show_default=True,
        envvar="CHORDSHEET_TIMEOUT",
        metavar="SECS",
        help="HTTP timeout when SOURCE is a Google Docs URL.",
    )(func)
    func = click.option(
        "--to",
        "to_key",
        default=None,
        metavar="KEY",
        help="Target key. Defaults to --from (no transposition).",
    )(func)
    func = click.option(
        "--from",
        "from_key",
        required=True,
        metavar="KEY",
        help="Key the chord sheet is written in, e.g. G or Bb.",
    )(func)
    return click.argument("source")(func)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="chordsheet")
@click.option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug).")
def main(verbose: int) -> None:
    """chordsheet — chord sheet transposer and printable sheet generator."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# ── keys / semitones subcommands ───────────────────────────────────────────────

@main.command()
def keys() -> None:
    """List the keys a sheet can be transposed to."""
    for key in ALL_KEYS:
        click.echo(key)


@main.command()
@click.argument("from_key")
@click.argument("to_key")
def semitones(from_key: str, to_key: str) -> None:
    """
    Print the upward distance in semitones from FROM_KEY to TO_KEY (0-11).

    Unknown keys print 0.
    """
    click.echo(semitones_between(normalize_key(from_key), normalize_key(to_key)))


# ── show subcommand ────────────────────────────────────────────────────────────

@main.command()
@_source_options
def show(source: str, from_key: str, to_key: str | None, timeout: float) -> None:
    """
    Print a transposed chord sheet to stdout.

    SOURCE is a text file, a Google Docs share URL, or - for stdin.
    Only chord lines are transposed; lyrics and [Section] headers are untouched.

    \b
    Examples:
      chordsheet show amazing_grace.txt --from G --to A
      chordsheet show "https://docs.google.com/document/d/<id>/edit" --from B --to Bb
    """
    text = _load_or_exit(source, timeout)
    target = to_key if to_key is not None else from_key
    document = build_document(text, from_key, target)
    logger.info("Transposing %s -> %s (%+d semitones)", document.source_key, document.target_key, document.semitones)
    for line in document.lines:
        click.echo(line.display)


# ── export subcommand ──────────────────────────────────────────────────────────

@main.command()
@_source_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="html",
    show_default=True,
    envvar="CHORDSHEET_FORMAT",
    help="Output format: printable HTML page or plain text.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to '<title> - Key of <to>' with the format's extension.",
)
@click.option(
    "--title",
    default=None,
    metavar="TEXT",
    help="Song title shown in the heading. Defaults to the SOURCE filename stem.",
)
@click.option(
    "--autoprint",
    is_flag=True,
    default=False,
    help="HTML only: open the browser print dialog when the page loads.",
)
def export(
    source: str,
    from_key: str,
    to_key: str | None,
    timeout: float,
    output_format: str,
    output: str | None,
    title: str | None,
    autoprint: bool,
) -> None:
    """
    Transpose a chord sheet and save it as HTML or plain text.

    SOURCE is a text file, a Google Docs share URL, or - for stdin.

    \b
    Examples:
      chordsheet export amazing_grace.txt --from G --to A
      chordsheet export song.txt --from D# --to C --format txt -o song_in_c.txt
    """
    target = to_key if to_key is not None else from_key
    if title is None:
        title = "" if source == "-" or is_document_url(source) else Path(source).stem.replace("_", " ")

    exporter = SheetExporter(title=title, output_format=output_format, autoprint=autoprint)
    resolved_output = output or _title_to_filename(title, normalize_key(target), exporter.default_extension)

    click.echo(f"chordsheet v{__version__}")
    click.echo(f"  Source : {source}")
    click.echo(f"  Key    : {normalize_key(from_key)} -> {normalize_key(target)}")
    click.echo(f"  Format : {exporter.output_format}")
    click.echo(f"  Output : {resolved_output}")
    click.echo()

    click.echo("[1/2] Reading chord sheet...")
    text = _load_or_exit(source, timeout)

    click.echo("[2/2] Transposing and writing file...")
    try:
        exporter.export(text, from_key, target, resolved_output)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo()
    if exporter.output_format == "html":
        click.echo(f"Done!  Open '{resolved_output}' in any browser. Use Print → Save as PDF.")
    else:
        click.echo(f"Done!  Wrote '{resolved_output}'.")
