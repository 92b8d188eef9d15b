"""Transcript segmentation and analysis"""

from .transcript_parser import (
    parse_transcript,
    find_segment_at_time,
    search_transcript,
    highlight_search_terms,
    clean_transcript_for_export,
)
from .topic_extractor import extract_topics
from .transcript_processor import TranscriptProcessor

__all__ = [
    "parse_transcript",
    "find_segment_at_time",
    "search_transcript",
    "highlight_search_terms",
    "clean_transcript_for_export",
    "extract_topics",
    "TranscriptProcessor",
]
