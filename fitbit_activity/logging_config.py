"""
Logging bootstrap for the command line run.

Call setup_logging() once before running the pipeline.
"""

import logging


def setup_logging(level: str = 'INFO') -> None:
    """Configure the root logger format and level."""
    log_level = (level or 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
