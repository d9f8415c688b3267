"""Plain-text output formatting for the CLI."""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from logshelf.store.files import parse_timestamp


def format_bytes(size: float) -> str:
    """Format byte size for display."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def format_created(path: Path) -> str:
    """Creation time of a log file for display, '-' when the name doesn't encode one."""
    created: Optional[datetime] = parse_timestamp(path)
    if created is None:
        return "-"
    return created.isoformat(timespec="seconds")


def format_error(
    error_type: str,
    error_msg: str,
    suggestion: Optional[str] = None,
    available: Optional[list[str]] = None
) -> str:
    """Format an error with helpful context."""

    lines = [f"Error: {error_type}: {error_msg}"]

    if available:
        lines.append("")
        lines.append(f"Available: {', '.join(available)}")

    if suggestion:
        lines.append("")
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_table(headers: list[str], rows: list[list[Any]]) -> str:
    """Format data as a simple text table."""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = "  ".join(
        str(h).ljust(widths[i]) for i, h in enumerate(headers)
    )
    lines.append(header_line)
    lines.append("-" * len(header_line))

    for row in rows:
        row_line = "  ".join(
            str(cell).ljust(widths[i]) for i, cell in enumerate(row) if i < len(widths)
        )
        lines.append(row_line)

    return "\n".join(lines)
