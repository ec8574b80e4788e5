"""
Structured category logger

Compact, human-readable console output for the animation engine:

    [14:23:45] ANIMATION · Interrupted running animation
               ├─ dropped: 2
               └─ keyframes: 1

Every module binds a logger to its category once at import time
(`log = get_logger().for_category(LogCategory.ANIMATION)`);
configure_logger() retunes the shared instance in place, so those bound
loggers follow the new level immediately.
"""

from datetime import datetime
from typing import Dict, List, Optional, TextIO, Tuple

from models.enums import LogCategory, LogLevel


class Colors:
    """ANSI escape codes used by the logger"""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS: Dict[LogCategory, str] = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.SPRING: Colors.BRIGHT_CYAN,
    LogCategory.SERVICE: Colors.BRIGHT_GREEN,
    LogCategory.TICKER: Colors.BRIGHT_BLUE,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# level -> (priority, symbol, color)
LEVELS: Dict[LogLevel, Tuple[int, str, str]] = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Console logger with categories, levels and tree-formatted details.

    Args:
        min_level: Messages below this level are dropped
        use_colors: ANSI colors (turn off for files and CI logs)
        stream: Target stream; None writes to the current sys.stdout
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def enabled(self, level: LogLevel) -> bool:
        return LEVELS[level][0] >= LEVELS[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def _header(self, category: LogCategory, message: str, level: LogLevel) -> str:
        _, symbol, color = LEVELS[level]
        stamp = datetime.now().strftime('[%H:%M:%S]')
        name = self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE))
        return f"{stamp} {name} {self._paint(symbol, color)} {self._paint(message, color)}"

    def _detail_lines(self, details: List[str]) -> List[str]:
        lines = []
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Write one message.

        Args:
            category: Subsystem the message belongs to
            message: Headline text
            level: DEBUG, INFO, WARN or ERROR
            details: Extra preformatted lines
            **kwargs: Shown as "key: value" detail lines, in call order

        Example:
            logger.log(LogCategory.SERVICE, "Added subject 'card'", properties=3)
        """
        if not self.enabled(level):
            return

        lines = [self._header(category, message, level)]
        detail_text = list(details or []) + [f"{k}: {v}" for k, v in kwargs.items()]
        lines.extend(self._detail_lines(detail_text))

        for line in lines:
            print(line, file=self.stream)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a fixed default category (overridable per call)."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[TextIO] = None,
):
    """Retune the shared logger in place (bound loggers keep working)."""
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
