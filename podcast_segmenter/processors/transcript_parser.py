"""Transcript segmentation, lookup, search, and cleanup"""

import logging
import re
from typing import List, Optional, Sequence

from ..models.transcript import TranscriptSegment

logger = logging.getLogger(__name__)

# [00:02:15], [2:15], (00:02:15), (2:15); only the first alternative that
# matches at a position wins, so H:MM:SS is tried before MM:SS
MARKER_PATTERN = re.compile(
    r"[\[(](\d{1,2}):(\d{2}):(\d{2})[\])]|[\[(](\d{1,2}):(\d{2})[\])]", re.ASCII
)

BLANK_LINE_RUN = re.compile(r"\n\s*\n")

LEADING_TIMESTAMP = "00:00:00"

DEFAULT_MARK_OPEN = "<mark>"
DEFAULT_MARK_CLOSE = "</mark>"


def strip_markers(text: str) -> str:
    """Remove every timestamp marker from text

    Repeats until none are left, so markers exposed by removing a nested
    one are removed too.
    """
    count = 1
    while count:
        text, count = MARKER_PATTERN.subn("", text)
    return text


def _read_marker(match: re.Match):
    """Return (timestamp, seconds) for a marker match"""
    hours, minutes, seconds, short_minutes, short_seconds = match.groups()
    if hours is not None:
        timestamp = f"{hours.zfill(2)}:{minutes}:{seconds}"
        return timestamp, int(hours) * 3600 + int(minutes) * 60 + int(seconds)

    timestamp = f"{short_minutes.zfill(2)}:{short_seconds}"
    return timestamp, int(short_minutes) * 60 + int(short_seconds)


def parse_transcript(transcript: str) -> List[TranscriptSegment]:
    """Split a timestamp-annotated transcript into segments

    A line carrying a marker starts a new segment and closes the previous
    one; lines without a marker continue the current segment. Text before
    the first marker becomes a leading segment at 00:00:00.

    Args:
        transcript: Raw transcript text, newline delimited

    Returns:
        Segments in transcript order; the last one has no end_time
    """
    drafts = []

    for line in transcript.split("\n"):
        line = line.strip()
        if not line:
            continue

        match = MARKER_PATTERN.search(line)
        if match:
            timestamp, start_time = _read_marker(match)
            if drafts:
                previous = drafts[-1]
                if start_time < previous["start_time"]:
                    logger.debug(
                        "Marker %s goes back in time, closing %s with an empty window",
                        timestamp,
                        previous["timestamp"],
                    )
                previous["end_time"] = max(start_time, previous["start_time"])
            drafts.append(
                {
                    "timestamp": timestamp,
                    "text": MARKER_PATTERN.sub("", line).strip(),
                    "start_time": start_time,
                    "end_time": None,
                }
            )
        elif drafts:
            drafts[-1]["text"] += " " + line
        else:
            drafts.append(
                {
                    "timestamp": LEADING_TIMESTAMP,
                    "text": line,
                    "start_time": 0,
                    "end_time": None,
                }
            )

    logger.debug("Parsed transcript into %d segments", len(drafts))
    return [TranscriptSegment(**draft) for draft in drafts]


def find_segment_at_time(
    segments: Sequence[TranscriptSegment], seconds: float
) -> Optional[TranscriptSegment]:
    """Return the first segment whose [start, end) window contains a time"""
    for segment in segments:
        if segment.contains(seconds):
            return segment
    return None


def search_transcript(
    segments: Sequence[TranscriptSegment], query: str
) -> List[TranscriptSegment]:
    """Case-insensitive substring search over segment text"""
    lower_query = query.lower()
    return [segment for segment in segments if lower_query in segment.text.lower()]


def highlight_search_terms(
    text: str,
    search_term: str,
    open_tag: str = DEFAULT_MARK_OPEN,
    close_tag: str = DEFAULT_MARK_CLOSE,
) -> str:
    """Wrap each case-insensitive occurrence of a term in highlight tags

    The term is matched literally and the original casing is kept.
    """
    if not search_term:
        return text

    pattern = re.compile(re.escape(search_term), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", text)


def clean_transcript_for_export(transcript: str) -> str:
    """Remove timestamp markers and blank lines from a transcript"""
    cleaned = strip_markers(transcript)
    cleaned = BLANK_LINE_RUN.sub("\n", cleaned)
    return cleaned.strip()
