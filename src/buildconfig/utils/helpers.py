"""
Helper utilities for BuildConfig.

This module provides the application data directory lookup and the logging setup
used by host applications at startup.
"""

import os
import sys
import logging
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional, Union
from pathlib import Path

from buildconfig import constants

# Thread lock for logging setup
_logging_lock: threading.Lock = threading.Lock()


def get_app_data_path() -> Path:
    """
    Retrieve the application data directory path, creating it if needed.

    Uses %APPDATA% when set and falls back to the home directory.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    appdata: Optional[str] = os.getenv("APPDATA")
    if not appdata:
        appdata = os.path.expanduser("~")
        logger.debug("APPDATA environment variable not set, using home directory: %s", appdata)
    path: Path = Path(appdata) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        test_file = path / f".bc_write_test_{os.getpid()}"
        with open(test_file, 'w') as f:
            f.write("test")
        test_file.unlink()
        logger.debug("App data path ensured and writable: %s", path)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating/writing to app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create or verify app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def is_production() -> bool:
    return os.environ.get(constants.logs.ENV_VAR_PROD_MODE, "").lower() == "true"


def setup_logging(log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure the application logger with a rotating file handler and a console handler.

    Safe to call more than once and from several threads; only the first call adds
    handlers. If the log file cannot be opened, file logging is disabled and the
    console handler is still installed.
    """
    logger: logging.Logger = logging.getLogger(constants.app.APP_NAME)
    with _logging_lock:
        if logger.handlers:
            return logger

        production = is_production()
        root_log_level = constants.logs.PRODUCTION_LOG_LEVEL if production else logging.DEBUG
        logger.setLevel(root_log_level)

        log_formatter = logging.Formatter(
            fmt=constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT
        )

        log_file_path: Optional[Path] = None
        file_log_level = constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.FILE_LOG_LEVEL
        try:
            log_file_path = Path(log_dir) if log_dir is not None else get_app_data_path()
            log_file_path = log_file_path / constants.logs.LOG_FILENAME
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8',
                delay=True
            )
            file_handler.setFormatter(log_formatter)
            file_handler.setLevel(file_log_level)
            logger.addHandler(file_handler)
        except (PermissionError, OSError) as e:
            print(f"CRITICAL: Failed to set up file logging at {log_file_path}: {e}. File logging will be disabled.", file=sys.stderr)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(log_formatter)
        console_handler.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.CONSOLE_LOG_LEVEL)
        logger.addHandler(console_handler)

        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            logger.info("File logging target: %s, Level: %s", log_file_path, logging.getLevelName(file_log_level))
        else:
            logger.warning("File logging is NOT active due to previous errors.")
        logger.info("Logging initialized. Production mode: %s. Root Log Level: %s.", production, logging.getLevelName(root_log_level))

    return logger
