"""Logging configuration for the bella-run entry point."""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr so it never mixes with program output."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger(__name__).debug("Logging initialized at %s level", level.upper())
