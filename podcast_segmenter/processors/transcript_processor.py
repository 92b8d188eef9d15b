"""Transcript analysis pipeline"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from tqdm import tqdm

from ..config import config
from ..models import (
    BatchMetadata,
    BatchResult,
    ErrorEntry,
    Transcript,
    TranscriptAnalysis,
)
from ..timecodes import calculate_total_duration
from .topic_extractor import extract_topics
from .transcript_parser import parse_transcript

logger = logging.getLogger(__name__)


class TranscriptProcessor:
    """Segment transcripts and derive topics from them"""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        encoding: Optional[str] = None,
        show_progress: bool = True,
    ):
        """Initialize transcript processor

        Args:
            max_workers: Concurrent transcripts in a batch (default from config)
            encoding: Text encoding of transcript files (default from config)
            show_progress: Whether to show a progress bar for batches
        """
        self.max_workers = max_workers or config.max_concurrent_transcripts
        self.encoding = encoding or config.transcript_encoding
        self.show_progress = show_progress

    def analyze_text(
        self,
        text: str,
        title: str,
        summary: str = "",
        duration_seconds: Optional[int] = None,
        source: Optional[str] = None,
    ) -> TranscriptAnalysis:
        """Analyze a single transcript

        Args:
            text: Raw transcript text with inline timestamp markers
            title: Episode title
            summary: Episode summary, if one is available
            duration_seconds: Episode duration; defaults to the latest timestamp
            source: Where the transcript came from

        Returns:
            TranscriptAnalysis with segments and topics
        """
        segments = parse_transcript(text)
        topics = extract_topics(segments)

        if duration_seconds is None:
            duration_seconds = calculate_total_duration(s.timestamp for s in segments)

        return TranscriptAnalysis(
            title=title,
            source=source,
            transcript=Transcript(segments=segments),
            topics=topics,
            summary=summary,
            duration_seconds=duration_seconds,
            raw_text=text,
        )

    def analyze_file(self, path: Union[str, Path], summary: str = "") -> TranscriptAnalysis:
        """Analyze a transcript file, titled after the file name

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not in the configured encoding
        """
        path = Path(path)
        text = path.read_text(encoding=self.encoding)
        title = path.stem.replace("_", " ").replace("-", " ").strip() or path.name
        return self.analyze_text(text, title=title, summary=summary, source=str(path))

    def process_batch(self, paths: Sequence[Union[str, Path]]) -> BatchResult:
        """Analyze many transcript files concurrently

        Args:
            paths: Transcript file paths

        Returns:
            BatchResult with analyses in input order and one error per failure
        """
        paths = [Path(p) for p in paths]
        if not paths:
            logger.info("No transcripts to process.")
            return BatchResult(metadata=BatchMetadata())

        analyses: Dict[int, TranscriptAnalysis] = {}
        errors: Dict[int, ErrorEntry] = {}

        logger.info("Processing %d transcripts with %d workers", len(paths), self.max_workers)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.analyze_file, path): index
                for index, path in enumerate(paths)
            }

            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                desc="Processing transcripts",
                unit="transcript",
                disable=not self.show_progress,
            ):
                index = futures[future]
                try:
                    analyses[index] = future.result()
                except Exception as e:
                    # Log error and continue
                    logger.warning("Error processing %s: %s", paths[index], e)
                    errors[index] = ErrorEntry(
                        source=str(paths[index]),
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )

        logger.info(
            "Processing complete! %d transcripts analyzed, %d errors.",
            len(analyses),
            len(errors),
        )

        return BatchResult(
            metadata=BatchMetadata(
                total_transcripts=len(paths),
                successful=len(analyses),
                failed=len(errors),
            ),
            analyses=[analyses[i] for i in sorted(analyses)],
            errors=[errors[i] for i in sorted(errors)],
        )
