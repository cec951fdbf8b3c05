import logging
import sys
from pathlib import Path

import click

from .exceptions import FetchError, ParseError
from .formatters import JsonFormatter, TextFormatter
from .models import LyricsSource
from .parser import parse_lyrics
from .providers.lrclib import DEFAULT_BASE_URL, LrclibProvider

_FORMATTERS = {
    "json": JsonFormatter,
    "text": TextFormatter,
}


def _read_text(path: Path | None) -> str | None:
    """Read a local lyrics file, skipping a UTF-8 byte order mark if present."""
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        click.echo(f"Error: {path} is not UTF-8 text", err=True)
        sys.exit(1)


@click.command()
@click.argument("title", required=False)
@click.argument("artist", required=False)
@click.option("--lrc", "lrc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, metavar="PATH", help="Read synced lyrics from a local .lrc file.")
@click.option("--plain", "plain_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, metavar="PATH", help="Read plain-text fallback lyrics from a local file.")
@click.option("--instrumental", is_flag=True, default=False,
              help="Mark a local track as instrumental.")
@click.option("--base-url", default=DEFAULT_BASE_URL, show_default=True, envvar="LRCSYNC_BASE_URL",
              help="LRCLIB API root.")
@click.option("--format", "output_format", type=click.Choice(sorted(_FORMATTERS)), default="json",
              show_default=True, help="Output format.")
@click.option("--duration", type=float, default=None, metavar="SECONDS",
              help="Track length; ends the last synced line there (implies --extend-last).")
@click.option("--extend-last", is_flag=True, default=False,
              help="End the last synced line at the track length instead of its own start.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: stdout).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(
    title: str | None,
    artist: str | None,
    lrc_path: Path | None,
    plain_path: Path | None,
    instrumental: bool,
    base_url: str,
    output_format: str,
    duration: float | None,
    extend_last: bool,
    output_path: str | None,
    verbose: bool,
) -> None:
    """Convert synced (LRC) lyrics into time-segmented lyrics.

    \b
    Look a track up on LRCLIB:
      lrcsync "Song Title" "Artist Name"
    Or convert local files:
      lrcsync --lrc song.lrc [--plain song.txt]
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # --- Resolve source ---
    if lrc_path or plain_path or instrumental:
        source = LyricsSource(
            synced_lyrics=_read_text(lrc_path),
            plain_lyrics=_read_text(plain_path),
            instrumental=instrumental,
        )
    elif title and artist:
        try:
            source = LrclibProvider(base_url=base_url).lookup(title, artist)
        except FetchError as exc:
            msg = f"Error: Could not fetch {exc.url}"
            if exc.status_code:
                msg += f" (HTTP {exc.status_code})"
            if exc.status_code == 404:
                msg += " — no lyrics found for this title and artist"
            click.echo(msg, err=True)
            sys.exit(1)
        except ParseError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
    else:
        click.echo("Error: give TITLE and ARTIST, or --lrc/--plain files.", err=True)
        sys.exit(1)

    if duration is not None:
        source.duration = duration
        extend_last = True

    # --- Parse + render ---
    result = parse_lyrics(source, track_duration=source.duration if extend_last else None)
    text = _FORMATTERS[output_format]().render(result)

    # --- Output ---
    if output_path is None:
        click.echo(text, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")
