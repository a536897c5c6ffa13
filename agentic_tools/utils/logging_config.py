"""Logging setup."""

import logging
import sys


def configure_logging(level: str = 'INFO') -> None:
    """Send log records to stderr so stdout stays free for JSON-RPC."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
