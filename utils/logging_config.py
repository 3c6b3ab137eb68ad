"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger and sets
its level.  It is safe to call more than once; later calls only adjust
the level.
"""

import logging


def setup_logging(level="INFO"):
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if logger.handlers:
        # already configured (tests, repeated create_app calls)
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
