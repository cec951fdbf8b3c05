from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidFieldError


@dataclass
class RawTimedLine:
    """One ``[mm:ss.xx]text`` record as read from LRC text.

    Only lives between the tokenizer and the segment builder.
    """

    offset: float  # seconds from the start of the track
    text: str | None
    is_interlude: bool


@dataclass
class VocalSegment:
    """A sung or spoken phrase, active during ``[start_time, end_time)``."""

    text: str
    start_time: float
    end_time: float
    opposite_aligned: bool = False  # reserved for bidirectional layouts, always False

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


@dataclass
class InterludeSegment:
    """A wordless gap between sung lines."""

    start_time: float
    end_time: float

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


LyricSegment = VocalSegment | InterludeSegment


@dataclass
class StaticLine:
    text: str


@dataclass
class StaticLyrics:
    """Untimed lyrics: instrumental tracks, plain-text fallback, or nothing at all."""

    lines: list[StaticLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass
class SyncedLyrics:
    """Line-synchronized lyrics as contiguous, time-ordered segments."""

    start_time: float
    end_time: float
    segments: list[LyricSegment] = field(default_factory=list)

    @property
    def vocals(self) -> list[VocalSegment]:
        return [s for s in self.segments if isinstance(s, VocalSegment)]

    def active_index(self, position: float) -> int | None:
        """Return the index of the segment playing at *position* seconds.

        That is the last segment whose ``start_time`` is at or before
        *position*.  The final segment stays active past its ``end_time``
        since it may have zero duration.  Returns ``None`` before the first
        segment starts or when there are no segments.
        """
        starts = [s.start_time for s in self.segments]
        index = bisect_right(starts, position) - 1
        return index if index >= 0 else None

    def active_segment(self, position: float) -> LyricSegment | None:
        index = self.active_index(position)
        return self.segments[index] if index is not None else None


LyricsResult = StaticLyrics | SyncedLyrics


@dataclass
class LyricsSource:
    """Raw lyrics for one track as a provider returns them."""

    synced_lyrics: str | None = None  # LRC text
    plain_lyrics: str | None = None
    instrumental: bool = False
    duration: float | None = None  # track length in seconds, when known

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "LyricsSource":
        """Build a source from a dict using LRCLIB's key names.

        Missing keys and JSON nulls fall back to ``None`` / ``False``.

        Raises InvalidFieldError when a present value has the wrong type,
        e.g. ``"instrumental": "false"`` or ``"syncedLyrics": 123``.
        """
        synced = payload.get("syncedLyrics")
        if synced is not None and not isinstance(synced, str):
            raise InvalidFieldError("syncedLyrics", "string or null", synced)

        plain = payload.get("plainLyrics")
        if plain is not None and not isinstance(plain, str):
            raise InvalidFieldError("plainLyrics", "string or null", plain)

        instrumental = payload.get("instrumental")
        if instrumental is None:
            instrumental = False
        elif not isinstance(instrumental, bool):
            raise InvalidFieldError("instrumental", "boolean", instrumental)

        duration = payload.get("duration")
        if duration is not None and (isinstance(duration, bool) or not isinstance(duration, (int, float))):
            raise InvalidFieldError("duration", "number or null", duration)

        return cls(
            synced_lyrics=synced,
            plain_lyrics=plain,
            instrumental=instrumental,
            duration=float(duration) if duration is not None else None,
        )
