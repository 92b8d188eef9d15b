"""JSON output formatting and storage"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from ..models import BatchResult, ExportData
from .files import write_text_atomic

logger = logging.getLogger(__name__)

EXPORT_FORMAT = "Podcast Segmenter Export v1.0"


def export_document(data: ExportData) -> Dict[str, Any]:
    """Export fields plus the export time and format tag"""
    document = data.model_dump(mode="json")
    document["exported_at"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    document["format"] = EXPORT_FORMAT
    return document


def render_json(data: Union[ExportData, BatchResult], pretty: bool = True) -> str:
    """Serialize an export or batch result to a JSON string"""
    if isinstance(data, ExportData):
        document = export_document(data)
    else:
        document = data.model_dump(mode="json")

    if pretty:
        return json.dumps(document, indent=2, ensure_ascii=False)
    return json.dumps(document, ensure_ascii=False)


class JSONWriter:
    """Write exports and batch results to JSON files"""

    @staticmethod
    def write_output(
        result: Union[ExportData, BatchResult],
        output_path: Union[str, Path],
        pretty: bool = True,
    ) -> Path:
        """Write an export or batch result to a JSON file

        Args:
            result: ExportData or BatchResult to write
            output_path: Output file path
            pretty: Whether to pretty-print JSON (default: True)

        Raises:
            IOError: If file cannot be written
        """
        return write_text_atomic(render_json(result, pretty), output_path)

    @staticmethod
    def load_output(output_path: Union[str, Path]) -> BaseModel:
        """Load a JSON file written by write_output

        Raises:
            FileNotFoundError: If the file does not exist
            json.JSONDecodeError: If the file is not JSON
            pydantic.ValidationError: If the content matches neither schema
        """
        with open(output_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict) and data.get("format") == EXPORT_FORMAT:
            return ExportData(**data)
        return BatchResult(**data)

    @staticmethod
    def validate_output(output_path: Union[str, Path]) -> bool:
        """Validate a JSON output file

        Args:
            output_path: Path to JSON file

        Returns:
            True if valid, False otherwise
        """
        output_path = Path(output_path)

        if not output_path.exists():
            logger.error("File not found: %s", output_path)
            return False

        try:
            result = JSONWriter.load_output(output_path)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON: %s", e)
            return False
        except (ValidationError, TypeError) as e:
            logger.error("Validation failed: %s", e)
            return False

        if isinstance(result, ExportData):
            logger.info(
                "Valid export: %s (%s, %d topics)",
                result.title,
                result.duration,
                len(result.topics),
            )
        else:
            logger.info(
                "Valid batch result: schema %s, %d analyses, %d errors",
                result.schema_version,
                len(result.analyses),
                len(result.errors),
            )
        return True

    @staticmethod
    def get_summary(result: BatchResult) -> str:
        """Get a summary of a batch run

        Args:
            result: BatchResult

        Returns:
            Summary string
        """
        lines = [
            "",
            "=" * 60,
            "Batch Summary",
            "=" * 60,
            f"Transcripts Submitted: {result.metadata.total_transcripts}",
            f"Transcripts Analyzed: {result.metadata.successful}",
            f"Failed: {result.metadata.failed}",
            "",
        ]

        if result.errors:
            lines.append(f"Errors ({len(result.errors)}):")
            for i, error in enumerate(result.errors[:5], 1):  # Show first 5 errors
                lines.append(f"  {i}. {error.source}: {error.error_type} - {error.error_message}")
            if len(result.errors) > 5:
                lines.append(f"  ... and {len(result.errors) - 5} more errors")
            lines.append("")

        if result.analyses:
            total_segments = sum(len(a.transcript.segments) for a in result.analyses)
            total_words = sum(a.transcript.word_count for a in result.analyses)
            total_topics = sum(len(a.topics) for a in result.analyses)

            lines.extend(
                [
                    "Transcript Statistics:",
                    f"  Total Segments: {total_segments:,}",
                    f"  Total Words: {total_words:,}",
                    f"  Total Topics: {total_topics:,}",
                ]
            )

        lines.append("=" * 60)
        return "\n".join(lines)
