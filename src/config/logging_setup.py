"""Logging configuration shared by the CLI and the Streamlit front end."""

import logging

from rich.logging import RichHandler

_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "anthropic")


def setup_logging(level: str = "INFO") -> None:
    """
    Install a Rich console handler on the root logger.

    Safe to call on every Streamlit rerun: an existing RichHandler is reused
    and only the level is updated.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
