"""CLI interface for the podcast transcript segmenter"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import config
from .processors import (
    TranscriptProcessor,
    clean_transcript_for_export,
    extract_topics,
    find_segment_at_time,
    highlight_search_terms,
    parse_transcript,
    search_transcript,
)
from .storage import JSONWriter, MarkdownWriter, SRTWriter, convert_to_srt
from .storage.files import export_filename, write_text_atomic
from .timecodes import format_duration, is_valid_timestamp, parse_time

app = typer.Typer(
    name="podcast-segmenter",
    help="Segment timestamped podcast transcripts and export them as SRT, Markdown, or JSON",
)
console = Console()


class ExportFormat(str, Enum):
    markdown = "markdown"
    json = "json"
    srt = "srt"


EXPORT_SUFFIXES = {
    ExportFormat.markdown: "_summary.md",
    ExportFormat.json: "_data.json",
    ExportFormat.srt: ".srt",
}


def _read_transcript(source: str) -> str:
    """Read a transcript from a file path, or from stdin when given -"""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding=config.transcript_encoding)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read transcript: {e}")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}", style="bold")
    raise typer.Exit(1)


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """Check settings and configure logging before any command runs"""
    try:
        config.validate()
    except ValueError as e:
        _fail(str(e))

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def segments(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
):
    """List the timed segments of a transcript

    Example:
        podcast-segmenter segments episode.txt
    """
    parsed = parse_transcript(_read_transcript(transcript))
    if not parsed:
        console.print("No segments found.")
        raise typer.Exit(0)

    table = Table(title=f"{len(parsed)} segments")
    table.add_column("Start", style="cyan", no_wrap=True)
    table.add_column("Length", no_wrap=True)
    table.add_column("Text")
    for segment in parsed:
        length = format_duration(segment.duration) if segment.duration is not None else "open"
        table.add_row(segment.timestamp, length, segment.text)
    console.print(table)


@app.command()
def at(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
    time: str = typer.Argument(..., help="Time as MM:SS, HH:MM:SS, or seconds"),
):
    """Show the segment playing at a given time

    Examples:
        podcast-segmenter at episode.txt 12:30
        podcast-segmenter at episode.txt 750
    """
    if time.isdecimal():
        seconds = int(time)
    elif is_valid_timestamp(time):
        seconds = parse_time(time)
    else:
        _fail(f"Invalid time: {time}")

    segment = find_segment_at_time(parse_transcript(_read_transcript(transcript)), seconds)
    if segment is None:
        console.print(f"No segment at {time}.")
        raise typer.Exit(1)

    console.print(f"[cyan]{segment.timestamp}[/cyan]")
    console.print(segment.text, markup=False, highlight=False)


@app.command()
def search(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
    query: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
):
    """Find segments mentioning a phrase, with matches marked

    Example:
        podcast-segmenter search episode.txt "machine learning"
    """
    matches = search_transcript(parse_transcript(_read_transcript(transcript)), query)
    console.print(f"{len(matches)} matching segments")
    for segment in matches:
        console.print(f"\n[cyan]{segment.timestamp}[/cyan]")
        console.print(highlight_search_terms(segment.text, query), markup=False, highlight=False)


@app.command()
def topics(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
):
    """Show the topic timeline of a transcript"""
    extracted = extract_topics(parse_transcript(_read_transcript(transcript)))
    if not extracted:
        console.print("No topics found.")
        raise typer.Exit(0)

    for topic in extracted:
        console.print(f"[bold cyan]{topic.timestamp}[/bold cyan] [bold]{topic.title}[/bold]")
        console.print(f"  {topic.description}", markup=False, highlight=False)


@app.command()
def srt(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output .srt path (default: print to stdout)"
    ),
):
    """Convert a transcript to SRT subtitles"""
    parsed = parse_transcript(_read_transcript(transcript))
    if output is None:
        typer.echo(convert_to_srt(parsed, config.default_cue_seconds), nl=False)
        return

    SRTWriter.write_output(parsed, output, config.default_cue_seconds)
    console.print(f"[green]Output saved to:[/green] {output.absolute()}")


@app.command()
def clean(
    transcript: str = typer.Argument(..., help="Transcript file, or - for stdin"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output text path (default: print to stdout)"
    ),
):
    """Strip timestamp markers and blank lines from a transcript"""
    cleaned = clean_transcript_for_export(_read_transcript(transcript))
    if output is None:
        typer.echo(cleaned)
        return

    write_text_atomic(cleaned + "\n", output)
    console.print(f"[green]Output saved to:[/green] {output.absolute()}")


@app.command()
def export(
    transcript: Path = typer.Argument(..., help="Transcript file"),
    export_format: ExportFormat = typer.Option(
        ExportFormat.markdown, "--format", "-f", help="Export format"
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Episode title"),
    summary_file: Optional[Path] = typer.Option(
        None, "--summary", "-s", help="File holding the episode summary"
    ),
    duration: Optional[str] = typer.Option(
        None, "--duration", "-d", help="Episode length as MM:SS or HH:MM:SS"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output path (default: OUTPUT_DIR/<title><suffix>)"
    ),
):
    """Export a transcript with its topic timeline

    Examples:
        podcast-segmenter export episode.txt --format markdown
        podcast-segmenter export episode.txt -f json -t "AI Today" -s summary.txt
    """
    try:
        if duration is not None and not is_valid_timestamp(duration):
            _fail(f"Invalid duration: {duration}")

        processor = TranscriptProcessor(show_progress=False)
        summary = ""
        if summary_file is not None:
            summary = summary_file.read_text(encoding=config.transcript_encoding).strip()

        analysis = processor.analyze_file(transcript, summary=summary)
        updates = {}
        if title:
            updates["title"] = title
        if duration is not None:
            updates["duration_seconds"] = parse_time(duration)
        if updates:
            analysis = analysis.model_copy(update=updates)

        if output is None:
            output = config.output_dir / export_filename(
                analysis.title, EXPORT_SUFFIXES[export_format]
            )

        if export_format is ExportFormat.srt:
            SRTWriter.write_output(
                analysis.transcript.segments, output, config.default_cue_seconds
            )
        elif export_format is ExportFormat.json:
            JSONWriter.write_output(analysis.to_export_data(), output, config.pretty_json)
        else:
            MarkdownWriter.write_output(analysis.to_export_data(), output)

        console.print(f"[green]Output saved to:[/green] {output.absolute()}")
        console.print(
            f"{len(analysis.transcript.segments)} segments, "
            f"{len(analysis.topics)} topics, "
            f"{format_duration(analysis.duration_seconds)}"
        )

    except (OSError, UnicodeDecodeError) as e:
        _fail(str(e))


@app.command()
def batch(
    transcripts: List[Path] = typer.Argument(..., help="Transcript files"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path (default: output/batch_results.json)",
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Concurrent transcripts (default: MAX_CONCURRENT_TRANSCRIPTS)"
    ),
):
    """Analyze many transcripts and save the results as one JSON file

    Example:
        podcast-segmenter batch transcripts/*.txt -o results.json
    """
    try:
        if workers is not None and workers < 1:
            _fail("--workers must be at least 1")

        if output is None:
            output = config.output_dir / "batch_results.json"

        console.print("\n[bold cyan]Podcast Transcript Batch[/bold cyan]")
        console.print(f"Transcripts: {len(transcripts)}")
        console.print(f"Output: {output.absolute()}")
        console.print("")

        processor = TranscriptProcessor(max_workers=workers)
        result = processor.process_batch(transcripts)

        JSONWriter.write_output(result, output, config.pretty_json)
        console.print(JSONWriter.get_summary(result))

        if result.errors and not result.analyses:
            console.print("\n[bold red]✗ No transcripts could be processed[/bold red]")
            raise typer.Exit(1)

        console.print("\n[bold green]✓ Batch completed successfully![/bold green]")

    except KeyboardInterrupt:
        console.print("\n\n[yellow]Batch cancelled by user[/yellow]")
        raise typer.Exit(130)

    except OSError as e:
        _fail(str(e))


@app.command()
def validate(
    output: Path = typer.Argument(..., help="Path to JSON output file to validate")
):
    """Validate a JSON export or batch result file

    Example:
        podcast-segmenter validate output/batch_results.json
    """
    console.print(f"\n[bold cyan]Validating:[/bold cyan] {output}")
    console.print("")

    is_valid = JSONWriter.validate_output(output)

    if is_valid:
        console.print("\n[bold green]✓ File is valid![/bold green]")
        raise typer.Exit(0)
    else:
        console.print("\n[bold red]✗ File is invalid![/bold red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information"""
    from . import __version__

    console.print(f"[bold cyan]Podcast Segmenter[/bold cyan] v{__version__}")
    console.print("Segment timestamped transcripts into topics, subtitles, and exports")


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
