"""Renders a :data:`~lrcsync.models.LyricsResult` for downstream consumers.

JSON payload shape
------------------

Every object carries a ``"Type"`` discriminant so consumers can branch
without inspecting the rest of the object:

+-----------------------------+---------------------------------------------+
| Result / segment            | Payload                                     |
+=============================+=============================================+
| ``StaticLyrics``            | ``{"Type": "Static", "Lines": [{"Text"}]}`` |
+-----------------------------+---------------------------------------------+
| ``SyncedLyrics``            | ``{"Type": "Line", "StartTime", "EndTime",``|
|                             | ``"Content": [...]}``                       |
+-----------------------------+---------------------------------------------+
| ``VocalSegment``            | ``{"Type": "Vocal", "OppositeAligned",``    |
|                             | ``"Text", "StartTime", "EndTime"}``         |
+-----------------------------+---------------------------------------------+
| ``InterludeSegment``        | ``{"Type": "Interlude", "StartTime",``      |
|                             | ``"EndTime"}``                              |
+-----------------------------+---------------------------------------------+

Usage::

    from lrcsync.formatters import JsonFormatter
    text = JsonFormatter().render(result)
"""

import json
from typing import Any

from .models import InterludeSegment, LyricSegment, LyricsResult, StaticLyrics

INTERLUDE_MARK = "♪"


def format_timestamp(seconds: float) -> str:
    """Return *seconds* as ``mm:ss.xx``, rounded to the hundredth."""
    minutes, hundredths = divmod(round(seconds * 100), 6000)
    return f"{minutes:02d}:{hundredths / 100:05.2f}"


def to_payload(result: LyricsResult) -> dict[str, Any]:
    """Return *result* as a JSON-ready dict (see module docstring)."""
    if isinstance(result, StaticLyrics):
        return {
            "Type": "Static",
            "Lines": [{"Text": line.text} for line in result.lines],
        }
    return {
        "Type": "Line",
        "StartTime": result.start_time,
        "EndTime": result.end_time,
        "Content": [_segment_payload(s) for s in result.segments],
    }


class JsonFormatter:
    """Render a result as the JSON payload of :func:`to_payload`."""

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, result: LyricsResult) -> str:
        return json.dumps(to_payload(result), ensure_ascii=False, indent=self.indent) + "\n"


class TextFormatter:
    """Render a result as human-readable text.

    Synced lyrics come out one ``[mm:ss.xx] text`` line per segment, with
    interludes shown as ``[mm:ss.xx] ♪``.  Static lyrics come out as their
    original lines.  The returned string ends with a single newline unless
    there is nothing to show, in which case it is empty.
    """

    def render(self, result: LyricsResult) -> str:
        if isinstance(result, StaticLyrics):
            lines = [line.text for line in result.lines]
        else:
            lines = [_segment_text(s) for s in result.segments]
        return "\n".join(lines) + "\n" if lines else ""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _segment_payload(segment: LyricSegment) -> dict[str, Any]:
    if isinstance(segment, InterludeSegment):
        return {
            "Type": "Interlude",
            "StartTime": segment.start_time,
            "EndTime": segment.end_time,
        }
    return {
        "Type": "Vocal",
        "OppositeAligned": segment.opposite_aligned,
        "Text": segment.text,
        "StartTime": segment.start_time,
        "EndTime": segment.end_time,
    }


def _segment_text(segment: LyricSegment) -> str:
    stamp = f"[{format_timestamp(segment.start_time)}]"
    if isinstance(segment, InterludeSegment):
        return f"{stamp} {INTERLUDE_MARK}"
    return f"{stamp} {segment.text}"
