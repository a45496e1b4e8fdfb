"""Logging configuration module for the JSON flattener application."""
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
import config

# Level between INFO and WARNING for completed work
SUCCESS = 25
logging.addLevelName(SUCCESS, 'SUCCESS')

LEVEL_SYMBOLS = {
    logging.DEBUG: '🔍',
    logging.INFO: 'ℹ️',
    SUCCESS: '✅',
    logging.WARNING: '⚠️',
    logging.ERROR: '❌',
    logging.CRITICAL: '❌',
}


class SymbolFormatter(logging.Formatter):
    """Console formatter that prefixes each message with a severity symbol."""

    def format(self, record):
        symbol = LEVEL_SYMBOLS.get(record.levelno, '•')
        return f"{symbol} {record.getMessage()}"


class MaxLevelFilter(logging.Filter):
    """Only let through records strictly below the given level."""

    def __init__(self, max_level):
        super().__init__()
        self.max_level = max_level

    def filter(self, record):
        return record.levelno < self.max_level


def _add_handler_once(target_logger, handler, name):
    """Attach a named handler unless one with the same name is already present."""
    if any(existing.get_name() == name for existing in target_logger.handlers):
        handler.close()
        return
    handler.set_name(name)
    target_logger.addHandler(handler)


def setup_logging():
    """Set up logging with appropriate handlers and formatters."""
    # Ensure logs directory exists
    os.makedirs(config.LOGS_FOLDER, exist_ok=True)

    # Log file paths
    app_log_path = os.path.join(config.LOGS_FOLDER, 'app.log')
    error_log_path = os.path.join(config.LOGS_FOLDER, 'error.log')
    debug_log_path = os.path.join(config.LOGS_FOLDER, 'debug.log')

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_formatter = SymbolFormatter()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    # Console handlers: status lines on stdout, warnings and errors on stderr
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(console_formatter)
    stdout_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    _add_handler_once(root_logger, stdout_handler, 'console_stdout')

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(console_formatter)
    stderr_handler.setLevel(logging.WARNING)
    _add_handler_once(root_logger, stderr_handler, 'console_stderr')

    # 1. App Logger (INFO level)
    app_logger = logging.getLogger('app')
    app_logger.setLevel(logging.INFO)
    app_handler = RotatingFileHandler(
        app_log_path, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8'
    )
    app_handler.setFormatter(simple_formatter)
    app_handler.setLevel(logging.INFO)
    _add_handler_once(app_logger, app_handler, 'app_file')

    # 2. Error Logger (ERROR level)
    error_logger = logging.getLogger('error')
    error_logger.setLevel(logging.ERROR)
    error_handler = RotatingFileHandler(
        error_log_path, maxBytes=2*1024*1024, backupCount=10, encoding='utf-8'
    )
    error_handler.setFormatter(detailed_formatter)
    error_handler.setLevel(logging.ERROR)
    _add_handler_once(error_logger, error_handler, 'error_file')

    # 3. Debug Logger (DEBUG level)
    debug_logger = logging.getLogger('debug')
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    debug_handler = RotatingFileHandler(
        debug_log_path, maxBytes=10*1024*1024, backupCount=3, encoding='utf-8'
    )
    debug_handler.setFormatter(detailed_formatter)
    debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    _add_handler_once(debug_logger, debug_handler, 'debug_file')

    return {
        'app': app_logger,
        'error': error_logger,
        'debug': debug_logger
    }


def log_success(message):
    """Log a completed step on the app logger at SUCCESS level."""
    logging.getLogger('app').log(SUCCESS, message)
