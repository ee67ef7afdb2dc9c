import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, name: str = "winepath") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True, emoji=False), show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
