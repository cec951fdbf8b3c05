"""Turns raw lyrics into a :data:`~lrcsync.models.LyricsResult`.

Pipeline:

  1. tokenize_lrc()     — ``[mm:ss.xx]text`` records → list[RawTimedLine]
  2. build_segments()   — RawTimedLine list → SyncedLyrics (contiguous segments)
  3. normalize_plain()  — plain multi-line text → StaticLyrics
  4. parse_lyrics()     — picks instrumental / synced / plain / empty

Nothing in here raises on bad input.  Lines that don't carry a timestamp are
dropped, and a source with no usable synced lines falls through to its plain
text and then to an empty result.
"""

import logging
import re

from .models import (
    InterludeSegment,
    LyricSegment,
    LyricsResult,
    LyricsSource,
    RawTimedLine,
    StaticLine,
    StaticLyrics,
    SyncedLyrics,
    VocalSegment,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

# Record separator: "\n" or "\r\n".
LINE_SPLIT_RE = re.compile(r"\r?\n")

# Fixed-width timestamp: [mm:ss.xx] followed by the lyric text.
# Anything else ([m:ss.xx], [mm:ss], [mm:ss.xxx], [ar:Artist], ...) is rejected.
# The text may not contain a lone CR or a Unicode line/paragraph separator.
TIMESTAMP_LINE_RE = re.compile(r"^\[(\d{2}):(\d{2}\.\d{2})\]([^\r\n\u2028\u2029]*)$", re.ASCII)


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def tokenize_lrc(text: str | None) -> list[RawTimedLine]:
    """Extract timed records from LRC text, in source order.

    A trailing bare timestamp marks the end of the lyrics rather than a gap,
    so a final interlude record is dropped.

    Args:
        text: LRC text, or ``None``.

    Returns:
        The matched records.  Empty when nothing matches.
    """
    if not text:
        return []

    records = LINE_SPLIT_RE.split(text)
    parsed: list[RawTimedLine] = []
    for record in records:
        m = TIMESTAMP_LINE_RE.match(record)
        if not m:
            continue
        offset = int(m.group(1)) * 60 + float(m.group(2))
        content = m.group(3).strip()
        parsed.append(
            RawTimedLine(offset=offset, text=content or None, is_interlude=not content)
        )

    logger.debug("Matched %d of %d LRC records", len(parsed), len(records))

    if parsed and parsed[-1].is_interlude:
        parsed.pop()
    return parsed


# ---------------------------------------------------------------------------
# Segment builder
# ---------------------------------------------------------------------------


def build_segments(
    lines: list[RawTimedLine], track_duration: float | None = None
) -> SyncedLyrics | None:
    """Turn timed records into contiguous segments.

    Each segment ends where the next one starts.  The last one ends at its own
    start (zero duration) unless *track_duration* is given, in which case it
    runs to the end of the track.  Records are not re-sorted.

    Returns ``None`` for an empty *lines*.
    """
    if not lines:
        return None

    segments: list[LyricSegment] = []
    for i, item in enumerate(lines):
        start = item.offset
        if i + 1 < len(lines):
            end = lines[i + 1].offset
        elif track_duration is not None:
            end = max(track_duration, start)
        else:
            end = start

        if item.is_interlude:
            segments.append(InterludeSegment(start_time=start, end_time=end))
        else:
            segments.append(VocalSegment(text=item.text, start_time=start, end_time=end))

    return SyncedLyrics(
        start_time=segments[0].start_time,
        end_time=segments[-1].end_time,
        segments=segments,
    )


# ---------------------------------------------------------------------------
# Plain-text fallback
# ---------------------------------------------------------------------------


def normalize_plain(text: str | None) -> StaticLyrics:
    """Wrap each non-blank line of *text* as a :class:`StaticLine`.

    Surviving lines keep their original whitespace.
    """
    if not text:
        return StaticLyrics()
    return StaticLyrics(
        lines=[StaticLine(text=line) for line in LINE_SPLIT_RE.split(text) if line.strip()]
    )


# ---------------------------------------------------------------------------
# Selector
# ---------------------------------------------------------------------------


def parse_lyrics(source: LyricsSource, track_duration: float | None = None) -> LyricsResult:
    """Pick the best representation available in *source*.

    Checked in order, first match wins:

    1. Instrumental track → empty :class:`StaticLyrics`, whatever the text fields hold.
    2. Synced lyrics with at least one timed line → :class:`SyncedLyrics`.
    3. Plain lyrics → :class:`StaticLyrics` from :func:`normalize_plain`.
    4. Otherwise → empty :class:`StaticLyrics`.

    Args:
        source:         Raw lyrics as returned by a provider.
        track_duration: Track length in seconds; extends the last synced segment.
    """
    if source.instrumental:
        logger.debug("Instrumental track, returning no lines")
        return StaticLyrics()

    if source.synced_lyrics:
        synced = build_segments(tokenize_lrc(source.synced_lyrics), track_duration)
        if synced is not None:
            logger.debug("Using synced lyrics (%d segments)", len(synced.segments))
            return synced
        logger.debug("Synced lyrics had no timed lines, falling back")

    if source.plain_lyrics:
        logger.debug("Using plain lyrics")
        return normalize_plain(source.plain_lyrics)

    logger.debug("No lyrics available")
    return StaticLyrics()
