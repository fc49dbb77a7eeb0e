"""
Custom Exception Types

Specific exceptions for configuration bootstrap failures.
"""

from typing import List, Optional


class BootstrapError(Exception):
    """Base exception for configuration bootstrap."""
    pass


class ConfigurationError(BootstrapError):
    """
    Invalid configuration for one section.

    Raised by the section builders (app, database) when an environment
    variable holds a value that fails validation.
    """

    def __init__(self, section: str, errors: Optional[List[str]] = None):
        self.section = section
        self.errors = list(errors or [])
        detail = '; '.join(self.errors) if self.errors else 'invalid configuration'
        super().__init__(f"Invalid {section} configuration: {detail}")


class EnvironmentLoadError(BootstrapError):
    """Environment file missing, unreadable or malformed."""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        self.message = message
        self.path = path
        self.line = line
        super().__init__(message)
