"""Exporters for segmented transcripts"""

from .json_writer import JSONWriter
from .markdown_writer import MarkdownWriter
from .srt_writer import SRTWriter, convert_to_srt

__all__ = ["JSONWriter", "MarkdownWriter", "SRTWriter", "convert_to_srt"]
