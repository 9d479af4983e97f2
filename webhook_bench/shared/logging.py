import logging
import sys
from typing import Optional

from webhook_bench.const import LOG_DATE_FORMAT, LOG_FORMAT
from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO", config: Optional[Config] = None) -> None:
        """Setup structured logging for the application.

        Calling it again replaces the handler installed by the previous call.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            config: Settings providing library log levels; a fresh Config is used if omitted.
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

        # Set levels for noisy libraries
        config = config or Config()
        for logger_name, lib_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, lib_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
