"""Configuration management"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Application configuration"""

    def __init__(self):
        # Output Configuration
        self.output_dir = Path(os.getenv("OUTPUT_DIR", "./output"))
        self.pretty_json = self._parse_bool(os.getenv("PRETTY_JSON", "true"))

        # Processing Configuration
        self.max_concurrent_transcripts = int(
            os.getenv("MAX_CONCURRENT_TRANSCRIPTS", "4")
        )
        self.transcript_encoding = os.getenv("TRANSCRIPT_ENCODING", "utf-8")

        # Subtitle Configuration
        self.default_cue_seconds = int(os.getenv("DEFAULT_CUE_SECONDS", "5"))

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _parse_bool(self, value: str) -> bool:
        """Parse boolean from string"""
        return value.lower() in ("true", "1", "yes", "on")

    def validate(self) -> None:
        """Validate configuration"""
        if self.max_concurrent_transcripts < 1:
            raise ValueError("MAX_CONCURRENT_TRANSCRIPTS must be at least 1")

        if self.default_cue_seconds < 1:
            raise ValueError("DEFAULT_CUE_SECONDS must be at least 1")

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a known logging level: {self.log_level}")


# Global configuration instance
config = Config()
