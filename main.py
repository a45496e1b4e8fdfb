"""Main entry point for the JSON flattener application."""
import os
import sys
import time
import signal
import logging
import traceback
from watchdog.observers.polling import PollingObserver

# Application modules
import config
from logger import setup_logging, log_success
from handlers.file_handler import JSONFileHandler, process_file
from models.schemas import FileTask, RunSummary
from utils.validators import PathValidationError, validate_paths
from utils.file_operations import derive_output_path, find_json_files

# Global variables for graceful shutdown
observer = None
running = True

app_logger = logging.getLogger('app')
error_logger = logging.getLogger('error')
debug_logger = logging.getLogger('debug')


def signal_handler(sig, frame):
    """Handle termination signals for graceful shutdown."""
    global running
    app_logger.info(f"Received signal {sig}, shutting down gracefully...")
    running = False


def build_tasks(json_files, input_root, output_root):
    """Pair every discovered input file with its mirrored output path."""
    return [
        FileTask(
            input_path=file_path,
            output_path=derive_output_path(file_path, input_root, output_root),
        )
        for file_path in json_files
    ]


def process_tasks(tasks):
    """Process file tasks one after another.

    Args:
        tasks: FileTask instances to process

    Returns:
        RunSummary: How many of the tasks succeeded
    """
    success_count = 0
    for task in tasks:
        if process_file(task.input_path, task.output_path):
            success_count += 1
    return RunSummary(success_count=success_count, total_count=len(tasks))


def watch_input_folder(input_root, output_root):
    """Keep flattening JSON files as they change until a shutdown signal arrives.

    Returns:
        int: Process exit code
    """
    global observer, running
    running = True

    # Register signal handlers for graceful shutdown
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
    if hasattr(signal, 'SIGHUP'):  # Not available on Windows
        signal.signal(signal.SIGHUP, signal_handler)

    event_handler = JSONFileHandler(input_root, output_root)
    observer = PollingObserver(timeout=config.WATCH_POLL_INTERVAL)
    observer.schedule(event_handler, input_root, recursive=True)

    try:
        observer.start()
        app_logger.info(f"Watching folder: {input_root}")
        debug_logger.debug("Observer started successfully")

        while running:
            time.sleep(config.WATCH_POLL_INTERVAL)

            if observer is None or not observer.is_alive():
                error_logger.critical("Observer has died unexpectedly. Restarting...")
                observer = PollingObserver(timeout=config.WATCH_POLL_INTERVAL)
                observer.schedule(event_handler, input_root, recursive=True)
                observer.start()
    except KeyboardInterrupt:
        app_logger.info("Process terminated by user")
    except Exception as e:
        stack_trace = traceback.format_exc()
        error_logger.critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1
    finally:
        if observer is not None:
            try:
                observer.stop()
                observer.join(timeout=5)
                app_logger.info("Observer stopped successfully")
            except Exception as e:
                error_logger.error(f"Error stopping observer: {str(e)}")

    return 0


def run_flattener(input_root=None, output_root=None):
    """Flatten every JSON file under the input root into the output root.

    Args:
        input_root: Directory to read from, defaults to ``config.INPUT_FOLDER``
        output_root: Directory to write to, defaults to ``config.OUTPUT_FOLDER``

    Returns:
        int: 0 once the run completes (even if some files failed), 1 if the roots are invalid
    """
    input_root = config.INPUT_FOLDER if input_root is None else input_root
    output_root = config.OUTPUT_FOLDER if output_root is None else output_root

    try:
        validate_paths(input_root, output_root)
    except PathValidationError as e:
        error_logger.critical(f"Fatal error: {str(e)}")
        return 1

    input_root = os.path.abspath(input_root)
    output_root = os.path.abspath(output_root)

    app_logger.info(f"Starting JSON processing from {input_root}")
    json_files = find_json_files(input_root)
    app_logger.info(f"Found {len(json_files)} JSON files to process")

    summary = process_tasks(build_tasks(json_files, input_root, output_root))

    log_success(f"Processing complete. {summary} files processed successfully")
    if summary.failed_count:
        app_logger.warning(f"{summary.failed_count} files could not be processed, see the error log")

    if config.WATCH_MODE:
        return watch_input_folder(input_root, output_root)

    return 0


def main():
    """Set up logging and run the flattener with the configured roots."""
    setup_logging()
    debug_logger.debug(f"Working directory: {os.getcwd()}")
    return run_flattener()


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
