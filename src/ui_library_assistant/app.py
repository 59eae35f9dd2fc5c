"""Application wiring: logging setup and assistant factory."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

from ui_library_assistant.config import Settings, get_settings
from ui_library_assistant.responses.streaming import MockStreamingClient
from ui_library_assistant.widget.assistant import Assistant
from ui_library_assistant.widget.history import JsonFileChatHistory

logger = structlog.get_logger()

LOG_FORMATS = ("auto", "json", "console")

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _select_renderer(log_format: str, log_file: str):
    """Pick the final structlog processor.

    "auto" writes JSON lines when logging to a file and readable console
    output otherwise.
    """
    fmt = log_format.lower()
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {log_format!r}, expected one of {LOG_FORMATS}")
    if fmt == "json" or (fmt == "auto" and log_file):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=not log_file)


def configure_logging(
    log_level: str = "INFO",
    log_file: str = "",
    log_file_max_bytes: int = 10_485_760,
    log_file_backup_count: int = 5,
    log_format: str = "auto",
) -> None:
    """Route structlog events through standard library logging.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names fall
            back to INFO.
        log_file: Rotating log file next to the console. Empty = console only.
        log_file_max_bytes: Size at which the log file rotates.
        log_file_backup_count: Rotated files to keep.
        log_format: "auto", "json" or "console".

    Raises:
        ValueError: If ``log_format`` is not one of LOG_FORMATS.
    """
    renderer = _select_renderer(log_format, log_file)
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=log_file_max_bytes,
                backupCount=log_file_backup_count,
                encoding="utf-8",
            )
        )

    logging.root.setLevel(level)
    logging.root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.addHandler(handler)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Apply the LOG_* settings, for hosts embedding the assistant."""
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        log_file_max_bytes=settings.log_file_max_bytes,
        log_file_backup_count=settings.log_file_backup_count,
        log_format=settings.log_format,
    )


def create_assistant(settings: Settings | None = None) -> Assistant:
    """Create an assistant wired to the mock backend and transcript store."""
    settings = settings or get_settings()

    history = JsonFileChatHistory(settings.history_path)
    client = MockStreamingClient(settings)

    logger.info(
        "assistant_created",
        history_path=settings.history_path or None,
        message_count=len(history.messages),
        stream_chunk_delay=settings.stream_chunk_delay,
    )
    return Assistant(settings, client=client, history=history)
