"""Turn a LogInfo into a log line, with replaceable format and output hooks."""

from typing import Callable, Optional

from logshelf.message.info import LogInfo

Formatter = Callable[[LogInfo], str]
OutputHook = Callable[[LogInfo], None]

_on_format: Optional[Formatter] = None
_on_output: Optional[OutputHook] = None


def set_formatter(formatter: Optional[Formatter]) -> None:
    """Replace the default line format. Pass None to restore it."""
    global _on_format
    _on_format = formatter


def set_output_hook(hook: Optional[OutputHook]) -> None:
    """Register a callback run for every message sent through ``log()``."""
    global _on_output
    _on_output = hook


def output_hook() -> Optional[OutputHook]:
    return _on_output


def default_format(info: LogInfo) -> str:
    return f"{info.level.emoji} [{info.category.name}] {info.file_name}・{info.line} -- {info.message}"


def format_message(info: LogInfo) -> str:
    if _on_format is not None:
        return _on_format(info)
    return default_format(info)
