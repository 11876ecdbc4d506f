import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar

NO_CORRELATION_ID = "NO Correlation ID"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _is_ours(handler: logging.Handler) -> bool:
    return getattr(handler, "_flowing_links", False)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    fmt: str = DEFAULT_LOG_FORMAT,
):
    """
    Configure the root logger: stdout handler plus optional rotating file.

    Safe to call more than once (each app factory call does); handlers added
    by a previous call are replaced.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise

    for handler in [h for h in root.handlers if _is_ours(h)]:
        root.removeHandler(handler)
        handler.close()

    formatter = SafeFormatter(fmt)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(CorrelationIdFilter())
    stream_handler._flowing_links = True
    root.addHandler(stream_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        file_handler._flowing_links = True
        root.addHandler(file_handler)

    # Only our own package logs below WARNING
    logging.getLogger("flowing_links").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("flowing_links").info(
        "Logging is set up: level=%s, log_file=%s", level, log_file
    )

    return root
