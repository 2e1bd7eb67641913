"""
RescueNet Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

from .environment.graph import DUPLICATE_POLICIES
from .logging_utils import env_flag

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # What add_area does with an existing name: "reject" or "overwrite"
    DUPLICATE_AREAS: str = os.getenv("RESCUENET_DUPLICATE_AREAS", "reject")

    # Console output
    NO_COLOR: bool = env_flag("RESCUENET_NO_COLOR")
    VERBOSE: bool = env_flag("RESCUENET_VERBOSE")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.DUPLICATE_AREAS not in DUPLICATE_POLICIES:
            raise ValueError(
                f"RESCUENET_DUPLICATE_AREAS must be one of {DUPLICATE_POLICIES}, "
                f"got '{cls.DUPLICATE_AREAS}'"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "RescueNet Configuration:",
            f"  Duplicate areas: {cls.DUPLICATE_AREAS}",
            f"  Color output: {'off' if cls.NO_COLOR else 'on'}",
            f"  Verbose dispatch: {'on' if cls.VERBOSE else 'off'}",
            f"  Log level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
