from enum import IntEnum, auto
from typing import Union


class LogLevel(IntEnum):
    NONE = auto()
    INFO = auto()
    DEBUG = auto()
    VERBOSE = auto()

    @classmethod
    def parse(cls, level: Union[str, "LogLevel"]) -> "LogLevel":
        """Return the LogLevel matching an enum member or its (case-insensitive) name."""
        if isinstance(level, str):
            return cls[level.upper()]
        return level


class Logger:
    """Logger is a class for logging messages to the console host with consistent formatting."""

    def __init__(self, level: Union[str, LogLevel] = LogLevel.NONE):
        self.level = LogLevel.parse(level)

    def normal(self, *message):
        print(*message)

    def error(self, *message):
        print('[ERROR]', *message)

    def info(self, *message):
        if self.level >= LogLevel.INFO:
            print('[INFO]', *message)

    def debug(self, *message):
        if self.level >= LogLevel.DEBUG:
            print('[DEBUG]', *message)

    def verbose(self, *message):
        if self.level >= LogLevel.VERBOSE:
            print('[VERBOSE]', *message)
