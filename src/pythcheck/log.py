import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "pythcheck"


def configure_logging(verbose: bool = False) -> None:
    """Send pythcheck log records to stderr through rich."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_time=False, show_path=False))
