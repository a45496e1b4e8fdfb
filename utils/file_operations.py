"""File operation utilities for the JSON flattener application."""
import os
import time
import logging
import config

# Get loggers
logger = logging.getLogger('debug')
error_logger = logging.getLogger('error')


class DirectoryCreateError(OSError):
    """Raised when the parent directory of an output file cannot be created."""


def wait_for_file_access(file_path, max_attempts=None, delay=None):
    """Wait for a file to be accessible with multiple retries.

    Args:
        file_path: Path to the file to check
        max_attempts: Maximum number of attempts to try accessing the file
        delay: Delay in seconds between attempts

    Returns:
        bool: True if file is accessible, False otherwise
    """
    max_attempts = max_attempts or config.FILE_ACCESS_MAX_ATTEMPTS
    delay = config.FILE_ACCESS_DELAY if delay is None else delay

    for attempt in range(max_attempts):
        if not os.path.exists(file_path):
            logger.debug(f"File does not exist yet (attempt {attempt+1}): {file_path}")
            time.sleep(delay)
            continue

        try:
            # Try to open the file to ensure it's not locked
            with open(file_path, 'rb') as f:
                f.read(1)
            return True
        except (PermissionError, OSError) as e:
            logger.debug(f"File not accessible yet (attempt {attempt+1}): {str(e)}")
            time.sleep(delay)

    return False


def ensure_output_directory(file_path):
    """Create every missing parent directory of an output file.

    Args:
        file_path: Path of the file that is about to be written

    Raises:
        DirectoryCreateError: If the directory could not be created
    """
    directory = os.path.dirname(file_path)
    if not directory:
        return

    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        error_logger.error(f"Failed to create directory {directory}: {str(e)}")
        raise DirectoryCreateError(f"Failed to create directory {directory}: {str(e)}") from e


def derive_output_path(input_path, input_root, output_root):
    """Mirror an input file's location under the output root.

    Args:
        input_path: Path of a file somewhere below ``input_root``
        input_root: Root of the input tree
        output_root: Root of the output tree

    Returns:
        str: ``output_root`` joined with the path of ``input_path`` relative to ``input_root``
    """
    relative_path = os.path.relpath(input_path, input_root)
    return os.path.join(output_root, relative_path)


def find_json_files(root_dir):
    """Recursively collect every ``.json`` file below a directory.

    Entries are visited depth-first in the order the filesystem lists them.
    A directory that cannot be read is logged and skipped; the rest of the scan
    carries on.

    Args:
        root_dir: Directory to search

    Returns:
        list: Paths of all JSON files found
    """
    json_files = []
    try:
        entries = os.listdir(root_dir)
    except OSError as e:
        error_logger.error(f"Error reading directory: {root_dir} ({str(e)})")
        return json_files

    for entry in entries:
        entry_path = os.path.join(root_dir, entry)
        if os.path.isdir(entry_path):
            json_files.extend(find_json_files(entry_path))
        elif entry.endswith(config.JSON_SUFFIX):
            json_files.append(entry_path)

    logger.debug(f"Found {len(json_files)} JSON files under {root_dir}")
    return json_files
