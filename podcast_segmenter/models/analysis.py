"""Analysis, export, and batch result models"""

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field

from .transcript import Topic, Transcript


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExportData(BaseModel):
    """Aggregate handed to the Markdown, JSON, and PDF exporters"""

    title: str = Field(..., description="Episode title")
    duration: str = Field(..., description="Display duration (MM:SS or HH:MM:SS)")
    summary: str = Field("", description="Episode summary")
    topics: List[Topic] = Field(default_factory=list, description="Topic timeline")
    transcript: str = Field("", description="Transcript text, markers removed")


class TranscriptAnalysis(BaseModel):
    """Segmented transcript with derived topics for one episode"""

    title: str = Field(..., description="Episode title")
    source: Optional[str] = Field(None, description="Where the transcript was read from")
    transcript: Transcript = Field(default_factory=Transcript, description="Segmented transcript")
    topics: List[Topic] = Field(default_factory=list, description="Extracted topics")
    summary: str = Field("", description="Episode summary, if one was supplied")
    duration_seconds: int = Field(0, ge=0, description="Episode duration in seconds")
    raw_text: str = Field("", description="Original transcript text")

    def to_export_data(self) -> ExportData:
        """Build the exporter aggregate for this analysis"""
        # Deferred: the processors package imports these models
        from ..processors.transcript_parser import clean_transcript_for_export
        from ..timecodes import format_time

        return ExportData(
            title=self.title,
            duration=format_time(self.duration_seconds),
            summary=self.summary,
            topics=self.topics,
            transcript=clean_transcript_for_export(self.raw_text),
        )


class BatchMetadata(BaseModel):
    """Metadata about a batch run"""

    processed_at: datetime = Field(default_factory=_utcnow, description="Processing timestamp")
    processor_version: str = Field("1.0.0", description="Processor version")
    total_transcripts: int = Field(0, description="Transcripts submitted")
    successful: int = Field(0, description="Transcripts analyzed")
    failed: int = Field(0, description="Transcripts that failed")


class ErrorEntry(BaseModel):
    """Error information for a transcript that failed to process"""

    source: str = Field(..., description="Transcript path that failed")
    error_type: str = Field(..., description="Error type/category")
    error_message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=_utcnow, description="When error occurred")


class BatchResult(BaseModel):
    """Complete result of a batch run"""

    schema_version: str = Field("1.0.0", description="Output schema version")
    metadata: BatchMetadata = Field(default_factory=BatchMetadata, description="Batch metadata")
    analyses: List[TranscriptAnalysis] = Field(default_factory=list, description="Analyzed transcripts")
    errors: List[ErrorEntry] = Field(default_factory=list, description="Processing errors")
