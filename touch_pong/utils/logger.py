"""
Logging module for Touch Pong
"""

import logging

logger = logging.getLogger("touch_pong")


def configure_logging(level: str = "INFO") -> None:
    """Set up console logging for the application entry point"""
    # Change level to DEBUG to trace every state transition
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(threadName)s: %(message)s")
    logger.setLevel(level.upper())
