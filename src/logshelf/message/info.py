"""Everything known about one log call."""

import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from logshelf.message.category import LogCategory
from logshelf.message.level import LogLevel


@dataclass(frozen=True)
class LogInfo:
    category: LogCategory
    level: LogLevel
    message: str
    file: str
    function: str
    line: int
    timestamp: str

    @property
    def file_name(self) -> str:
        """Source file name without directory or extension."""
        return Path(self.file).stem

    @classmethod
    def build(
        cls,
        category: LogCategory,
        level: LogLevel,
        items: Iterable[Any],
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> "LogInfo":
        return cls(
            category=category,
            level=level,
            message=", ".join(str(item) for item in items),
            file=file,
            function=function,
            line=line,
            timestamp=datetime.now().astimezone().isoformat(timespec="seconds"),
        )

    @classmethod
    def capture(
        cls,
        category: LogCategory,
        level: LogLevel,
        items: Iterable[Any],
        stacklevel: int = 1,
    ) -> "LogInfo":
        """Build a LogInfo stamped with the caller's location.

        ``stacklevel=1`` means the function that called ``capture``; each
        wrapper in between adds one.
        """
        frame = sys._getframe(stacklevel)
        code = frame.f_code
        return cls.build(
            category, level, items,
            file=code.co_filename,
            function=code.co_name,
            line=frame.f_lineno,
        )
