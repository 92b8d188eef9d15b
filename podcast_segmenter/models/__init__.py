"""Data models for transcript segmentation and export"""

from .transcript import TranscriptSegment, Topic, Transcript
from .analysis import ExportData, TranscriptAnalysis, BatchMetadata, BatchResult, ErrorEntry

__all__ = [
    "TranscriptSegment",
    "Topic",
    "Transcript",
    "ExportData",
    "TranscriptAnalysis",
    "BatchMetadata",
    "BatchResult",
    "ErrorEntry",
]
