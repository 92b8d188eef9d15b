"""Shared file helpers for exporters"""

import logging
import re
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def export_filename(title: str, suffix: str) -> str:
    """Build a download filename from a title (e.g. my_episode_summary.md)"""
    return UNSAFE_FILENAME_CHARS.sub("_", title).lower() + suffix


def write_text_atomic(content: str, output_path: Union[str, Path]) -> Path:
    """Write text to a file via a temporary file in the same directory

    Args:
        content: Text to write
        output_path: Output file path

    Returns:
        The output path

    Raises:
        IOError: If file cannot be written
    """
    output_path = Path(output_path)

    # Create output directory if it doesn't exist
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=output_path.parent, prefix=".tmp_", suffix=output_path.suffix
        )

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            # Rename temp file to final path (atomic on most systems)
            Path(temp_path).replace(output_path)

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

    except Exception as e:
        raise IOError(f"Failed to write output file: {str(e)}") from e

    logger.info("Output saved to %s", output_path.absolute())
    return output_path
