"""Per-category console printers (``LogCategory.NETWORK.printer.error(...)``)."""

from typing import Any, Optional

from rich.console import Console

from logshelf.message.category import LogCategory
from logshelf.message.format import format_message
from logshelf.message.info import LogInfo
from logshelf.message.level import LogLevel

console = Console(highlight=False)


class CategoryPrinter:
    """Print formatted messages for one category to the console.

    Debug messages are only printed when Python runs without ``-O``.
    """

    def __init__(self, category: LogCategory, output: Optional[Console] = None):
        self.category = category
        self.output = output or console

    def _print(self, level: LogLevel, items: tuple[Any, ...]) -> str:
        # 3 = caller of debug()/info()/... -> that method -> _print
        info = LogInfo.capture(self.category, level, items, stacklevel=3)
        line = format_message(info)
        self.output.print(line, markup=False)
        return line

    def debug(self, *items: Any) -> None:
        if __debug__:
            self._print(LogLevel.DEBUG, items)

    def info(self, *items: Any) -> None:
        self._print(LogLevel.INFO, items)

    def notice(self, *items: Any) -> None:
        self._print(LogLevel.NOTICE, items)

    def error(self, *items: Any) -> None:
        self._print(LogLevel.ERROR, items)

    def fault(self, *items: Any) -> None:
        self._print(LogLevel.FAULT, items)
