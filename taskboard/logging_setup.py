import logging
import sys

from .config import LOG_LEVEL


class _QuietThirdPartyFilter(logging.Filter):
    """Let taskboard logs through, keep library chatter to warnings and up."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskboard") or record.name.startswith("uvicorn"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger with a single stderr handler.

    Safe to call more than once; existing handlers are replaced so reloads
    don't duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(_QuietThirdPartyFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
