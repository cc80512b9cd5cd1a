# Configures logging once for the whole process; every module fetches its logger through get_logger

import logging
import os
from datetime import datetime
from typing import Optional

_logger_configured = False
_log_file_path = None

LOG_FORMAT = '%(asctime)s - %(levelname)-8s - %(name)s.%(funcName)s:%(lineno)d - %(message)s'


def setup_logging(base_name: str = "opti", level=logging.WARNING, log_dir: Optional[str] = None) -> Optional[str]:
    """
    Set up the global logging configuration. Should be called once at application startup.
    Long optimization runs usually want a log file: pass log_dir to get one, otherwise
    records go to stderr.
    Returns the log file path, or None when logging to stderr.
    """
    global _logger_configured, _log_file_path

    if _logger_configured:
        return _log_file_path

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        _log_file_path = os.path.join(log_dir, f"{base_name}_{timestamp}.log")
        handler = logging.FileHandler(_log_file_path)
    else:
        handler = logging.StreamHandler()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler]
    )

    _logger_configured = True
    return _log_file_path


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance. Automatically sets up logging if not already configured.

    Args:
        name: Logger name. If None, uses the calling module's name.
    """
    if not _logger_configured:
        setup_logging()

    if name is None:
        # Automatically determine the calling module's name
        import inspect
        frame = inspect.currentframe().f_back
        name = frame.f_globals.get('__name__', 'unknown')

    return logging.getLogger(name)
