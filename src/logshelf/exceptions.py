"""
Custom exceptions for logshelf.

The write and read paths of the store never raise; these exceptions are
only used for programmer errors such as invalid retention settings.
"""


class LogShelfError(Exception):
    """Base class for all logshelf errors."""


class ConfigError(LogShelfError, ValueError):
    """
    Raised when a configuration value is out of range or has the wrong type.

    Example:
        RetentionPolicy(max_file_count=0)  ← raises this exception
    """

    def __init__(self, field_name, value, details=None):
        self.field_name = field_name
        self.value = value
        self.details = details or "Invalid value."
        msg = f"Invalid {field_name}: {value!r}\nDetails: {self.details}"
        super().__init__(msg)
