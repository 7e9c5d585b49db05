import logging
import sys


class _BelowLevelFilter(logging.Filter):
    """Pass only records below ``level``; the rest go to stderr."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


class Log:
    """Centralized logging: progress on stdout, warnings and failures on stderr."""

    _logger: logging.Logger = logging.getLogger("toolshed")
    _format = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, verbose: bool = False) -> None:
        """Set the level and (re)attach the stdout/stderr handler pair.

        ``verbose`` forces DEBUG regardless of ``log_level``. Handlers are
        replaced on every call so they always write to the current streams.
        """
        cls._logger.setLevel("DEBUG" if verbose else log_level.upper())
        cls._logger.handlers.clear()

        out_handler = logging.StreamHandler(sys.stdout)
        out_handler.addFilter(_BelowLevelFilter(logging.WARNING))
        err_handler = logging.StreamHandler(sys.stderr)
        err_handler.setLevel(logging.WARNING)
        for handler in (out_handler, err_handler):
            handler.setFormatter(logging.Formatter(cls._format))
            cls._logger.addHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Drop all handlers and return to the unconfigured state."""
        cls._logger.handlers.clear()
        cls._logger.setLevel(logging.NOTSET)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def fatal(cls, message: str, **kwargs: object) -> None:
        """Log a run-ending failure at CRITICAL, so no configured level hides it."""
        cls._logger.critical(f"Fatal: {message}. Exiting.", extra=kwargs)
