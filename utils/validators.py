"""Path validation utilities for the JSON flattener application."""
import logging

from pydantic import ValidationError

from models.schemas import ProcessingRoots

logger = logging.getLogger('debug')


class PathValidationError(ValueError):
    """Raised when the input/output roots cannot be used for a run."""


def validate_paths(input_root, output_root):
    """Check that the input and output roots are set and distinct.

    Args:
        input_root: Directory the JSON files are read from
        output_root: Directory the flattened files are written to

    Returns:
        ProcessingRoots: The validated roots

    Raises:
        PathValidationError: If either root is empty or both point at the same directory
    """
    try:
        roots = ProcessingRoots(input_root=input_root, output_root=output_root)
    except ValidationError as e:
        messages = [error['msg'].removeprefix('Value error, ') for error in e.errors()]
        raise PathValidationError('; '.join(messages)) from e

    logger.debug(f"Validated roots: input={roots.input_root}, output={roots.output_root}")
    return roots
