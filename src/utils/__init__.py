"""
Utility Modules

Common utilities for the configuration bootstrap.

Modules:
    - logger: Structured logging setup
    - exceptions: Custom exception types
"""

from src.utils.logger import get_logger, setup_logging
from src.utils.exceptions import *

__all__ = [
    'get_logger',
    'setup_logging',
    'BootstrapError',
    'ConfigurationError',
    'EnvironmentLoadError',
]
