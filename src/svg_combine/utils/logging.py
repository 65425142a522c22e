"""Logging configuration module for svg-combine.

Provides structured logging setup with support for console and file output
in both JSON and human-readable formats. Console logs go to stderr because
stdout may carry the sprite itself.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog
from structlog.stdlib import ProcessorFormatter

from svg_combine.constants import BYTES_PER_MEGABYTE, INPUT_LOGGER_NAME
from svg_combine.models.config import LoggingConfig
from svg_combine.utils.early_error_handler import handle_startup_error
from svg_combine.utils.path_utils import path_resolver


def setup_logging(config: LoggingConfig, name: str) -> logging.Logger:
    """Set up logging with the specified configuration.

    Args:
        config: Logging configuration.
        name: Logger name.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    logger.handlers = []

    level = getattr(logging, config.level.upper(), logging.WARNING)
    logger.setLevel(level)

    # Skipped inputs are reported even when the configured level is higher
    handler_level = min(level, logging.WARNING)
    logging.getLogger(INPUT_LOGGER_NAME).setLevel(handler_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.format.lower() == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(handler_level)
    logger.addHandler(console_handler)

    if config.file:
        try:
            log_path = path_resolver.normalize_path(config.file)
            path_resolver.ensure_dir_exists(log_path.parent)

            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * BYTES_PER_MEGABYTE,
                backupCount=config.backup_count,
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(handler_level)
            logger.addHandler(file_handler)
        except OSError as e:
            error_msg = f"Failed to set up file logging: {e}"
            handle_startup_error("LOGGING_FILE_ERROR", error_msg, {"log_file": str(config.file)})
            logger.error(error_msg)

    return logger
