"""
Logging infrastructure.

One call at startup configures the root logger; modules keep using
logging.getLogger(__name__).
"""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging.

    Args:
        level: Level name (DEBUG, INFO, ...)
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
