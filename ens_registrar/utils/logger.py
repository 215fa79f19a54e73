"""
Logging configuration for the registrar client.

The library only names its loggers (ens_registrar.<subsystem>) and
leaves output to the application: until setup_logging is called the
package logger carries a NullHandler, so importing the client prints
nothing and records still propagate to whatever the host configured.
The CLI calls setup_logging to get colored console output on stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

PACKAGE_LOGGER = "ens_registrar"

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _console_handler(level: int) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s" + LOG_FORMAT.replace("%(message)s", "%(reset)s%(message)s"),
        datefmt=DATE_FORMAT,
        log_colors=LOG_COLORS,
    ))
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / f"{PACKAGE_LOGGER}.log")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


class RegistrarLogger:
    """Owns the handlers attached to the package logger"""

    _configured = False

    @classmethod
    def setup(
        cls,
        level: int = logging.INFO,
        log_dir: Optional[str] = None,
        log_to_file: bool = False,
    ):
        """
        Attach console (and optionally file) handlers.

        Calling it again replaces the handlers, so the level and
        destinations of the last call win.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_dir: Directory for log files. If None, uses ./logs
            log_to_file: Whether to write logs to file
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        package_logger.setLevel(level)
        package_logger.addHandler(_console_handler(level))
        if log_to_file:
            package_logger.addHandler(_file_handler(Path(log_dir or "logs"), level))

        cls._configured = True

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """
        Get a logger for a specific subsystem.

        Does not configure output; see setup_logging.

        Args:
            name: Subsystem name (e.g., 'names', 'registrar', 'contract')
        """
        return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific subsystem"""
    return RegistrarLogger.get_logger(name)


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    log_to_file: bool = False,
):
    """Setup logging configuration"""
    RegistrarLogger.setup(level=level, log_dir=log_dir, log_to_file=log_to_file)
