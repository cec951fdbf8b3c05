import pytest

from lrcsync.exceptions import InvalidFieldError
from lrcsync.models import (
    InterludeSegment,
    LyricsSource,
    StaticLine,
    StaticLyrics,
    SyncedLyrics,
    VocalSegment,
)


def _synced() -> SyncedLyrics:
    return SyncedLyrics(
        start_time=1.0,
        end_time=6.0,
        segments=[
            VocalSegment(text="Hello", start_time=1.0, end_time=2.0),
            InterludeSegment(start_time=2.0, end_time=4.0),
            VocalSegment(text="World", start_time=4.0, end_time=6.0),
        ],
    )


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


def test_vocal_defaults():
    segment = VocalSegment(text="Hello", start_time=1.0, end_time=2.5)
    assert segment.opposite_aligned is False
    assert segment.duration == 1.5


def test_interlude_duration():
    assert InterludeSegment(start_time=2.0, end_time=4.0).duration == 2.0


def test_static_lyrics_defaults():
    lyrics = StaticLyrics()
    assert lyrics.lines == []
    assert lyrics.is_empty


def test_static_lyrics_not_empty():
    assert not StaticLyrics(lines=[StaticLine(text="A")]).is_empty


def test_synced_vocals():
    assert [s.text for s in _synced().vocals] == ["Hello", "World"]


# ---------------------------------------------------------------------------
# active_index / active_segment
# ---------------------------------------------------------------------------


def test_active_before_first_segment():
    assert _synced().active_index(0.5) is None
    assert _synced().active_segment(0.5) is None


def test_active_at_segment_start():
    assert _synced().active_index(1.0) == 0
    assert _synced().active_index(2.0) == 1


def test_active_inside_segment():
    assert isinstance(_synced().active_segment(3.0), InterludeSegment)


def test_active_past_end_stays_on_last():
    assert _synced().active_index(100.0) == 2


def test_active_zero_duration_last_segment():
    lyrics = SyncedLyrics(
        start_time=0.0,
        end_time=3.5,
        segments=[
            VocalSegment(text="Hello", start_time=0.0, end_time=3.5),
            VocalSegment(text="World", start_time=3.5, end_time=3.5),
        ],
    )
    assert lyrics.active_segment(3.5).text == "World"


def test_active_no_segments():
    assert SyncedLyrics(start_time=0.0, end_time=0.0).active_index(1.0) is None


# ---------------------------------------------------------------------------
# LyricsSource
# ---------------------------------------------------------------------------


def test_source_defaults():
    source = LyricsSource()
    assert source.synced_lyrics is None
    assert source.plain_lyrics is None
    assert source.instrumental is False
    assert source.duration is None


def test_source_from_payload():
    source = LyricsSource.from_payload({
        "syncedLyrics": "[00:01.00]Hi",
        "plainLyrics": "Hi",
        "instrumental": False,
        "duration": 233,
        "id": 42,
    })
    assert source.synced_lyrics == "[00:01.00]Hi"
    assert source.plain_lyrics == "Hi"
    assert source.instrumental is False
    assert source.duration == 233.0


def test_source_from_payload_missing_keys():
    assert LyricsSource.from_payload({}) == LyricsSource()


def test_source_from_payload_rejects_wrong_types():
    with pytest.raises(InvalidFieldError) as exc_info:
        LyricsSource.from_payload({"syncedLyrics": 123})
    assert exc_info.value.field == "syncedLyrics"

    with pytest.raises(InvalidFieldError):
        LyricsSource.from_payload({"instrumental": "false"})

    with pytest.raises(InvalidFieldError):
        LyricsSource.from_payload({"duration": True})


def test_source_from_payload_nulls():
    source = LyricsSource.from_payload({"syncedLyrics": None, "plainLyrics": None, "instrumental": True})
    assert source.instrumental is True
    assert source.synced_lyrics is None
