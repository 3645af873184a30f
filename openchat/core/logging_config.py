# Standard library imports
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the application process.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # Motor/PyMongo heartbeat logs are noisy at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
