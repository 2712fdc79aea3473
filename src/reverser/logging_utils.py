import logging
import sys


def setup_logging(level=logging.INFO):
    """Setup basic logging configuration; results own stdout, logs go to stderr"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
