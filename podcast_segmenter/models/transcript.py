"""Transcript data models"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class TranscriptSegment(BaseModel):
    """A span of transcript text anchored to a single starting timestamp"""

    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(..., description="Display timestamp (MM:SS or HH:MM:SS)")
    text: str = Field(..., description="The text content of this segment")
    start_time: int = Field(..., ge=0, description="Start time in seconds")
    end_time: Optional[int] = Field(
        None, description="End time in seconds (start of the next segment)"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "TranscriptSegment":
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not precede start_time")
        return self

    @computed_field
    @property
    def duration(self) -> Optional[int]:
        """Length in seconds, unknown for an open-ended segment"""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time

    def contains(self, seconds: float) -> bool:
        """Whether a time falls in [start_time, end_time)"""
        if seconds < self.start_time:
            return False
        return self.end_time is None or seconds < self.end_time


class Topic(BaseModel):
    """Topic derived from a transcript segment"""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Generated topic title")
    timestamp: str = Field(..., description="Timestamp of the source segment")
    description: str = Field(..., description="Truncated segment text")


class Transcript(BaseModel):
    """Segmented transcript"""

    model_config = ConfigDict(frozen=True)

    segments: List[TranscriptSegment] = Field(
        default_factory=list, description="Transcript segments in order"
    )

    @computed_field
    @property
    def full_text(self) -> str:
        """Complete transcript text joined from all segments"""
        return " ".join(segment.text for segment in self.segments)

    @computed_field
    @property
    def word_count(self) -> int:
        """Approximate word count"""
        return len(self.full_text.split())

    @computed_field
    @property
    def character_count(self) -> int:
        """Total character count"""
        return len(self.full_text)
