"""Shared fixtures for all tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ── Sample data factories ──────────────────────────────────────────

EPISODE_TRANSCRIPT = """Welcome to today's episode where we dive deep into the fascinating world of artificial intelligence.

[00:00:30] Our conversation begins with the fundamental question: what exactly is artificial intelligence?

[00:02:15] We're seeing remarkable advances in machine learning algorithms that can process vast amounts of data.

[00:05:45] The healthcare industry is experiencing a revolution thanks to AI-powered diagnostic tools.

[00:09:20] In the automotive sector, self-driving cars are no longer a distant dream.

[00:13:10] The ethical implications of AI development cannot be ignored.

[00:18:30] Looking toward the future, we can expect to see AI integration in virtually every aspect of our daily lives.
"""


@pytest.fixture
def episode_transcript():
    """Timestamped transcript with pre-roll narration and seven segments."""
    return EPISODE_TRANSCRIPT


@pytest.fixture
def episode_file(tmp_path):
    """The sample transcript written to disk."""
    path = tmp_path / "ai_today-episode.txt"
    path.write_text(EPISODE_TRANSCRIPT, encoding="utf-8")
    return path


@pytest.fixture
def segment_dicts():
    """Raw segment dicts for building TranscriptSegment objects."""
    return [
        {"timestamp": "00:00", "text": "Hello world.", "start_time": 0, "end_time": 5},
        {"timestamp": "00:05", "text": "This is a test.", "start_time": 5, "end_time": 12},
        {"timestamp": "00:12", "text": "Goodbye.", "start_time": 12},
    ]
