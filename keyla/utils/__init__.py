"""Utility functions for Keyla."""

from keyla.utils.helpers import expand_file_path
from keyla.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "expand_file_path",
    "setup_logger",
]
