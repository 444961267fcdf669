"""
File logging with queue-based writing and rotation.
Keeps the calling thread free of file I/O while records are written.
"""

import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler

from .structured_logger import SERVICE_NAME, build_formatter


class FileLogger:
    """Queue-based file logger with rotation."""

    def __init__(
        self,
        log_file_path: str = "logs/app.log",
        max_bytes: int = 50 * 1024 * 1024,  # 50MB
        backup_count: int = 5,
        log_level: str = "INFO",
        use_json_format: bool = True,
    ):
        self.log_file_path = log_file_path
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_level = log_level
        self.use_json_format = use_json_format
        self._log_queue: queue.Queue = queue.Queue()
        self._listener: QueueListener | None = None
        self._queue_handler: QueueHandler | None = None

        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    def setup_file_handler(self) -> RotatingFileHandler:
        """Set up rotating file handler with the configured formatter."""
        file_handler = RotatingFileHandler(
            self.log_file_path, maxBytes=self.max_bytes, backupCount=self.backup_count
        )
        file_handler.setLevel(getattr(logging, self.log_level.upper()))
        file_handler.setFormatter(build_formatter(self.use_json_format))
        return file_handler

    def setup_console_handler(self) -> logging.StreamHandler:
        """Set up console handler with the configured formatter."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, self.log_level.upper()))
        console_handler.setFormatter(build_formatter(self.use_json_format))
        return console_handler

    def start_queue_listener(self, handlers: list[logging.Handler]) -> None:
        """Start the queue listener with provided handlers."""
        self._listener = QueueListener(
            self._log_queue, *handlers, respect_handler_level=True
        )
        self._listener.start()

    def get_queue_handler(self) -> QueueHandler:
        """Get the queue handler for attaching to loggers."""
        if self._queue_handler is None:
            self._queue_handler = QueueHandler(self._log_queue)
            self._queue_handler.setLevel(getattr(logging, self.log_level.upper()))
        return self._queue_handler

    def stop(self) -> None:
        """Stop the queue listener, flushing pending records."""
        if self._listener:
            self._listener.stop()
            for handler in self._listener.handlers:
                handler.close()
            self._listener = None


def setup_file_logging(
    enabled: bool = True,
    log_file_path: str = "logs/app.log",
    log_level: str = "INFO",
    use_json_format: bool = True,
    max_bytes: int = 50 * 1024 * 1024,
    backup_count: int = 5,
) -> FileLogger | None:
    """
    Set up file logging with queue-based writing.

    Args:
        enabled: Whether to enable file logging
        log_file_path: Path to the log file
        log_level: Logging level
        use_json_format: Whether to use JSON formatting
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        FileLogger instance if enabled, None otherwise
    """
    if not enabled:
        return None

    try:
        file_logger = FileLogger(
            log_file_path=log_file_path,
            max_bytes=max_bytes,
            backup_count=backup_count,
            log_level=log_level,
            use_json_format=use_json_format,
        )

        handlers = [
            file_logger.setup_console_handler(),
            file_logger.setup_file_handler(),
        ]
        file_logger.start_queue_listener(handlers)

        return file_logger

    except OSError as e:
        logging.getLogger(SERVICE_NAME).error(f"Failed to setup file logging: {e}")
        return None


def attach_queue_handler(queue_handler: QueueHandler, log_level: str = "INFO") -> None:
    """Route the package logger through the queue handler."""
    logger = logging.getLogger(SERVICE_NAME)
    logger.handlers.clear()
    logger.addHandler(queue_handler)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False
