"""Output formatting package."""

from .formatter import (
    format_bytes,
    format_created,
    format_error,
    format_table
)

__all__ = [
    "format_bytes",
    "format_created",
    "format_error",
    "format_table"
]
