"""Markdown export and share text"""

from pathlib import Path
from typing import Union

from ..models.analysis import ExportData
from .files import write_text_atomic

SHARE_SUMMARY_LENGTH = 200
SHARE_HASHTAGS = "#PodcastSegmenter #PodcastSummary #Podcast"


def render_markdown(data: ExportData) -> str:
    """Render an export as a Markdown document"""
    lines = [
        f"# {data.title}",
        "",
        f"**Duration:** {data.duration}",
        "",
        "## Summary",
        "",
        data.summary,
        "",
        "## Topics",
        "",
    ]

    for topic in data.topics:
        lines.extend([f"### {topic.timestamp} - {topic.title}", "", topic.description, ""])

    lines.extend(["## Full Transcript", "", "```", data.transcript, "```", ""])
    return "\n".join(lines)


def generate_share_text(data: ExportData) -> str:
    """Short text for posting an episode summary to social media"""
    summary = data.summary
    if len(summary) > SHARE_SUMMARY_LENGTH:
        summary = summary[:SHARE_SUMMARY_LENGTH] + "..."

    return f'🎧 Just analyzed "{data.title}"!\n\n{summary}\n\n{SHARE_HASHTAGS}'


class MarkdownWriter:
    """Write exports to Markdown files"""

    @staticmethod
    def write_output(data: ExportData, output_path: Union[str, Path]) -> Path:
        """Write an export to a Markdown file

        Raises:
            IOError: If file cannot be written
        """
        return write_text_atomic(render_markdown(data), output_path)
