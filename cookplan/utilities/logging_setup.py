"""Root logging configuration for the application entry point."""
import logging

from cookplan.utilities.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Apply basicConfig once; later calls only adjust the root level."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
