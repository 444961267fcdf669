"""
Central logging configuration for paginator.
Provides setup functions and logger management.
"""

import logging

from .context import CorrelationIdFilter
from .file_logger import FileLogger, attach_queue_handler, setup_file_logging
from .structured_logger import SERVICE_NAME, setup_structured_logging


class LoggingConfig:
    """Central logging configuration manager."""

    def __init__(self):
        self.file_logger: FileLogger | None = None
        self.correlation_filter: CorrelationIdFilter | None = None
        self._is_configured = False

    def setup(
        self,
        log_to_file: bool = False,
        log_level: str = "INFO",
        log_file_path: str = "logs/app.log",
        use_json_format: bool = True,
        max_bytes: int = 50 * 1024 * 1024,
        backup_count: int = 5,
    ) -> logging.Logger:
        """
        Set up logging for the package logger.

        Args:
            log_to_file: Whether to enable file logging
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_file_path: Path to the log file
            use_json_format: Whether to use JSON formatting
            max_bytes: Maximum file size before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured package logger
        """
        if self._is_configured:
            return get_logger()

        self.correlation_filter = CorrelationIdFilter()

        if log_to_file:
            self.file_logger = setup_file_logging(
                enabled=True,
                log_file_path=log_file_path,
                log_level=log_level,
                use_json_format=use_json_format,
                max_bytes=max_bytes,
                backup_count=backup_count,
            )

        if self.file_logger:
            queue_handler = self.file_logger.get_queue_handler()
            queue_handler.addFilter(self.correlation_filter)
            attach_queue_handler(queue_handler, log_level)
        else:
            logger = setup_structured_logging(log_level, use_json_format)

            for handler in logger.handlers:
                handler.addFilter(self.correlation_filter)

        main_logger = get_logger()
        self._is_configured = True

        return main_logger

    def shutdown(self) -> None:
        """Shutdown logging gracefully."""
        if self.file_logger:
            self.file_logger.stop()
            self.file_logger = None
        logger = logging.getLogger(SERVICE_NAME)
        logger.handlers.clear()
        logger.propagate = True
        self._is_configured = False


# Global logging configuration instance
_logging_config = LoggingConfig()


def setup_logging(
    log_to_file: bool | None = None,
    log_level: str | None = None,
    log_file_path: str | None = None,
    use_json_format: bool | None = None,
    settings=None,
) -> logging.Logger:
    """
    Set up logging, filling unspecified options from settings.

    Args:
        log_to_file: Whether to enable file logging (LOG_TO_FILE)
        log_level: Logging level (LOG_LEVEL)
        log_file_path: Path to log file (LOG_FILE_PATH)
        use_json_format: Whether to use JSON format (LOG_FORMAT=json)
        settings: Settings instance; loaded with get_settings() when omitted

    Returns:
        Configured package logger
    """
    if settings is None:
        from paginator.config import get_settings

        settings = get_settings()

    if log_to_file is None:
        log_to_file = settings.log_to_file

    if log_level is None:
        log_level = settings.log_level.upper()

    if log_file_path is None:
        log_file_path = settings.log_file_path

    if use_json_format is None:
        use_json_format = settings.log_format.lower() == "json"

    return _logging_config.setup(
        log_to_file=log_to_file,
        log_level=log_level,
        log_file_path=log_file_path,
        use_json_format=use_json_format,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger instance under the package namespace.

    Args:
        name: Optional logger name; module names already inside the package
            are used as-is, anything else is prefixed with the package name

    Returns:
        Logger instance
    """
    if not name:
        return logging.getLogger(SERVICE_NAME)
    if name == SERVICE_NAME or name.startswith(f"{SERVICE_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{SERVICE_NAME}.{name}")


def shutdown_logging() -> None:
    """Shutdown logging gracefully."""
    _logging_config.shutdown()
