"""Naive topic extraction from transcript segments"""

from typing import List, Sequence

from ..models.transcript import Topic, TranscriptSegment

SIGNIFICANT_LENGTH = 50
TOPIC_STRIDE = 3
DESCRIPTION_LENGTH = 100
TITLE_WORDS = 3
DEFAULT_TITLE = "Discussion Topic"

STOP_WORDS = frozenset(
    ["this", "that", "with", "from", "they", "have", "will", "been", "were", "said"]
)


def generate_topic_title(text: str) -> str:
    """Build a title from the first few meaningful words of a text"""
    meaningful = [
        word
        for word in text.split()
        if len(word) > 3 and word.lower() not in STOP_WORDS
    ][:TITLE_WORDS]

    if not meaningful:
        return DEFAULT_TITLE

    return " ".join(word[:1].upper() + word[1:].lower() for word in meaningful)


def extract_topics(segments: Sequence[TranscriptSegment]) -> List[Topic]:
    """Pick every third substantial segment as a topic

    This is a placeholder heuristic, not a summarizer: segments longer
    than 50 characters are candidates and every third candidate, starting
    with the first, becomes a topic.
    """
    significant = [s for s in segments if len(s.text) > SIGNIFICANT_LENGTH]

    topics = []
    for index, segment in enumerate(significant):
        if index % TOPIC_STRIDE != 0:
            continue

        description = segment.text[:DESCRIPTION_LENGTH]
        if len(segment.text) > DESCRIPTION_LENGTH:
            description += "..."

        topics.append(
            Topic(
                title=generate_topic_title(segment.text),
                timestamp=segment.timestamp,
                description=description,
            )
        )

    return topics
