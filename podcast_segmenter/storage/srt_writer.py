"""Writer for SRT subtitle format"""

from pathlib import Path
from typing import Sequence, Union

from ..models.transcript import TranscriptSegment
from ..timecodes import format_srt_time
from .files import write_text_atomic

DEFAULT_CUE_SECONDS = 5


def convert_to_srt(
    segments: Sequence[TranscriptSegment], default_duration: int = DEFAULT_CUE_SECONDS
) -> str:
    """Render segments as SRT cues

    Segments with blank text are skipped and cue numbers count only the
    cues written. An open-ended segment lasts default_duration seconds.
    """
    blocks = []
    for segment in segments:
        text = segment.text.strip()
        if not text:
            continue

        end_time = segment.end_time
        if end_time is None:
            end_time = segment.start_time + default_duration

        # SRT format: index, timestamps, text, blank line
        blocks.append(
            f"{len(blocks) + 1}\n"
            f"{format_srt_time(segment.start_time)} --> {format_srt_time(end_time)}\n"
            f"{text}\n\n"
        )

    return "".join(blocks)


class SRTWriter:
    """Write transcript segments to SRT subtitle files"""

    @staticmethod
    def write_output(
        segments: Sequence[TranscriptSegment],
        output_path: Union[str, Path],
        default_duration: int = DEFAULT_CUE_SECONDS,
    ) -> Path:
        """Write segments to an SRT file

        Raises:
            IOError: If file cannot be written
        """
        return write_text_atomic(convert_to_srt(segments, default_duration), output_path)
