"""File processing logic for the JSON flattener application."""
import os
import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional, Tuple

from watchdog.events import FileSystemEventHandler

from logger import log_success
from utils.flattener import flatten
from utils.file_operations import (
    derive_output_path,
    ensure_output_directory,
    wait_for_file_access,
)
import config

# Get loggers
app_logger = logging.getLogger('app')
error_logger = logging.getLogger('error')
debug_logger = logging.getLogger('debug')


def _reject_constant(name):
    """Refuse the NaN and Infinity tokens that are not part of JSON."""
    raise ValueError(f"Non-standard JSON constant: {name}")


def _load_json_file(file_path: str) -> Tuple[Optional[Any], Optional[str]]:
    """Load and parse a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Tuple containing the parsed data (or None) and an error message (or None)
    """
    debug_logger.debug(f"Reading file content: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            return json.load(file, parse_constant=_reject_constant), None
    except json.JSONDecodeError as je:
        return None, f"Invalid JSON format: {str(je)}"
    except UnicodeDecodeError as ue:
        return None, f"File is not valid UTF-8: {str(ue)}"
    except ValueError as ve:
        return None, f"Invalid JSON format: {str(ve)}"
    except RecursionError:
        return None, "JSON nesting too deep"
    except OSError as e:
        return None, f"Error reading file: {str(e)}"


def _write_json_file(file_path: str, data: Dict[str, Any]) -> None:
    """Serialize data as indented JSON, replacing any existing file."""
    with open(file_path, 'w', encoding='utf-8') as file:
        file.write(json.dumps(data, indent=config.JSON_INDENT, ensure_ascii=False))
    debug_logger.debug(f"Wrote {len(data)} keys to {file_path}")


def process_file(input_path: str, output_path: str) -> bool:
    """Flatten one JSON file and write the result to its output path.

    Read, parse, flatten, create the output directory and write. Every failure
    along the way is logged against the input path and reported as ``False``;
    nothing is raised to the caller.

    Args:
        input_path: Path to the source JSON file
        output_path: Path the flattened JSON is written to

    Returns:
        bool: True if processing succeeded, False otherwise
    """
    data, error = _load_json_file(input_path)
    if error:
        error_logger.error(f"Failed to process {input_path}: {error}")
        return False

    if not isinstance(data, dict):
        error_logger.error(
            f"Failed to process {input_path}: Top-level JSON value must be an object, "
            f"got {type(data).__name__}"
        )
        return False

    try:
        flattened = flatten(data, separator=config.KEY_SEPARATOR)
    except RecursionError:
        error_logger.error(f"Failed to process {input_path}: JSON nesting too deep")
        return False

    try:
        ensure_output_directory(output_path)
        _write_json_file(output_path, flattened)
    except OSError as e:
        error_logger.error(f"Failed to process {input_path}: {str(e)}")
        return False

    log_success(f"Processed: {input_path} → {output_path}")
    return True


def _file_version(file_path):
    """Return (mtime_ns, size) for a file, or None if it cannot be stat-ed."""
    try:
        stat_result = os.stat(file_path)
    except OSError:
        return None
    return stat_result.st_mtime_ns, stat_result.st_size


@contextmanager
def track_processing(handler, file_path):
    """Context manager to track file processing and ensure cleanup.

    Args:
        handler: The file handler instance
        file_path: Path to the file being processed
    """
    try:
        handler.processing_files.add(file_path)
        yield
    finally:
        handler.processing_files.discard(file_path)


class JSONFileHandler(FileSystemEventHandler):
    """Flattens JSON files as they appear or change under the input root."""

    def __init__(self, input_root: str, output_root: str):
        super().__init__()
        self.input_root = os.path.abspath(input_root)
        self.output_root = os.path.abspath(output_root)
        self.processing_files = set()  # Track files being processed to avoid duplicates
        # A single write usually raises both a created and a modified event;
        # remember what each file looked like when it was last flattened
        self.processed_versions = {}

    def on_created(self, event):
        """Handle file creation events."""
        if not event.is_directory:
            self._dispatch_path(event.src_path)

    def on_modified(self, event):
        """Handle file modification events."""
        if not event.is_directory:
            self._dispatch_path(event.src_path)

    def on_moved(self, event):
        """Handle files renamed into place, e.g. by editors writing a temp file first."""
        if not event.is_directory:
            self._dispatch_path(event.dest_path)

    def _dispatch_path(self, path):
        if not path.endswith(config.JSON_SUFFIX):
            return
        self.handle_file(os.path.abspath(path))

    def handle_file(self, file_path: str) -> bool:
        """Process a watched JSON file once it is readable.

        Args:
            file_path: Absolute path to the JSON file below the input root

        Returns:
            bool: True if processing succeeded or the file is unchanged since it was last flattened, False otherwise
        """
        # Skip if already processing this file
        if file_path in self.processing_files:
            debug_logger.debug(f"Already processing {file_path}, skipping")
            return False

        output_path = derive_output_path(file_path, self.input_root, self.output_root)

        with track_processing(self, file_path):
            # Wait for file to be completely written and check access
            if not wait_for_file_access(file_path):
                error_logger.error(f"Cannot access file after multiple attempts: {file_path}")
                return False

            version = _file_version(file_path)
            if version is not None and self.processed_versions.get(file_path) == version:
                debug_logger.debug(f"Unchanged since last run, skipping: {file_path}")
                return True

            app_logger.info(f"Change detected: {file_path}")
            success = process_file(file_path, output_path)
            if success and version is not None:
                self.processed_versions[file_path] = version
            return success
