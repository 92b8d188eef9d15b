"""Tests for podcast_segmenter/storage/markdown_writer.py and files.py."""

from podcast_segmenter.models import ExportData, Topic
from podcast_segmenter.storage.files import export_filename, write_text_atomic
from podcast_segmenter.storage.markdown_writer import (
    MarkdownWriter,
    generate_share_text,
    render_markdown,
)


def _make_export(summary="Short summary."):
    return ExportData(
        title="AI Today",
        duration="18:30",
        summary=summary,
        topics=[
            Topic(title="Intro", timestamp="00:00:00", description="Welcome"),
            Topic(title="Ethics", timestamp="00:13:10", description="Bias and privacy"),
        ],
        transcript="Line one.\nLine two.",
    )


class TestRenderMarkdown:
    def test_document(self):
        expected = (
            "# AI Today\n\n"
            "**Duration:** 18:30\n\n"
            "## Summary\n\n"
            "Short summary.\n\n"
            "## Topics\n\n"
            "### 00:00:00 - Intro\n\n"
            "Welcome\n\n"
            "### 00:13:10 - Ethics\n\n"
            "Bias and privacy\n\n"
            "## Full Transcript\n\n"
            "```\n"
            "Line one.\nLine two.\n"
            "```\n"
        )
        assert render_markdown(_make_export()) == expected

    def test_no_topics(self):
        data = ExportData(title="Empty", duration="00:00")
        assert "## Topics\n\n## Full Transcript" in render_markdown(data)


class TestShareText:
    def test_short_summary_kept(self):
        text = generate_share_text(_make_export())
        assert '"AI Today"' in text
        assert "Short summary." in text
        assert "..." not in text

    def test_long_summary_truncated(self):
        text = generate_share_text(_make_export(summary="x" * 250))
        assert "x" * 200 + "..." in text
        assert "x" * 201 not in text


class TestFiles:
    def test_export_filename(self):
        assert export_filename("My Episode: Part 1!", "_summary.md") == (
            "my_episode__part_1__summary.md"
        )

    def test_write_text_atomic(self, tmp_path):
        out = write_text_atomic("hello\n", tmp_path / "a" / "b.txt")
        assert out.read_text(encoding="utf-8") == "hello\n"
        assert not list(out.parent.glob(".tmp_*"))

    def test_markdown_writer(self, tmp_path):
        out = tmp_path / "episode.md"
        MarkdownWriter.write_output(_make_export(), out)
        assert out.read_text(encoding="utf-8").startswith("# AI Today\n")
