"""
Shared utilities.
"""

from .logging_setup import create_run_directory, setup_logging, verbosity_to_level

__all__ = ['setup_logging', 'create_run_directory', 'verbosity_to_level']
