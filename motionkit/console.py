"""Hierarchical console logging with per-logger levels read from a config file.

Logger names are dotted paths. Each logger takes its initial level from its
parent, and the root logger is named ``""``. A configuration file in INI style
can switch on formatting options in a ``[format]`` section. Any other
``key = LEVEL`` entry sets the level of the logger with that fully qualified
name.
"""

from __future__ import annotations

import enum
import os
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
NOBOLD = "\x1b[22m"
ULINE = "\x1b[4m"
NOULINE = "\x1b[24m"
XOUT = "\x1b[9m"
NOXOUT = "\x1b[29m"
OLINE = "\x1b[53m"
NOOLINE = "\x1b[55m"
SBLINK = "\x1b[5m"
FBLINK = "\x1b[6m"
NOBLINK = "\x1b[25m"
NEG = "\x1b[7m"
NONEG = "\x1b[27m"
BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

CONFIG_ENV_VAR = "SMPL_CONSOLE_CONFIG_FILE"


class Level(enum.IntEnum):
    """Severity of a log message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


_LEVEL_COLORS = {
    Level.DEBUG: GREEN,
    Level.INFO: WHITE,
    Level.WARN: YELLOW,
    Level.ERROR: RED,
    Level.FATAL: RED,
}

_LEVEL_TAGS = {
    Level.DEBUG: "[DEBUG] ",
    Level.INFO: "[INFO]  ",
    Level.WARN: "[WARN]  ",
    Level.ERROR: "[ERROR] ",
    Level.FATAL: "[FATAL] ",
}

_TRUE_WORDS = {"", "on", "yes", "1", "true"}
_FALSE_WORDS = {"off", "no", "0", "false"}


def parse_level(text: str) -> Optional[Level]:
    """Return the level named by ``text`` (for example ``"WARN"``), or None."""
    try:
        return Level[text]
    except KeyError:
        return None


def _parse_bool(key: str, text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value {text!r} for option {key!r}")


def _read_config(path: Path) -> list[tuple[str, str]]:
    """Return the ``(qualified key, value)`` pairs of an INI-style file, in order."""
    entries: list[tuple[str, str]] = []
    section = ""
    with open(path, encoding="utf-8") as stream:
        for number, raw in enumerate(stream, start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1].strip()
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise ValueError(f"{path}:{number}: invalid config file syntax: {raw.rstrip()!r}")
            key = key.strip()
            full_key = f"{section}.{key}" if section else key
            entries.append((full_key, value.strip()))
    return entries


@dataclass(eq=False)
class Logger:
    """A named logger; messages below ``level`` are suppressed."""

    parent: Optional["Logger"] = None
    level: Level = Level.INFO


@dataclass(eq=False)
class LogLocation:
    """A call site's cached decision on whether its messages are enabled."""

    logger: Optional[Logger] = None
    level: Level = Level.INFO
    enabled: bool = False
    initialized: bool = False


class Console:
    """The set of named loggers and the output format they share."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.stdout = stdout
        self.stderr = stderr
        self.unbuffered = False
        self.colored = False
        self.show_locations = False
        self.initialized = False
        self._loggers: dict[str, Logger] = {"": Logger(None, Level.INFO)}
        self._init_lock = threading.Lock()
        self._locations_lock = threading.Lock()

    def get_logger(self, name: str) -> Logger:
        """Return the logger with ``name``, creating it and its ancestors if needed."""
        logger = self._loggers.get(name)
        if logger is not None:
            return logger
        logger = Logger()
        self._loggers[name] = logger
        dot = name.rfind(".")
        parent = self._loggers[""] if dot < 0 else self.get_logger(name[:dot])
        logger.parent = parent
        logger.level = parent.level
        return logger

    def initialize(self, config_path=None) -> None:
        """Reset the root logger and apply a configuration file, once.

        Without ``config_path`` the file named by the environment variable
        ``SMPL_CONSOLE_CONFIG_FILE`` is used, if it is set.
        """
        with self._init_lock:
            if self.initialized:
                return

            self._loggers[""] = Logger(None, Level.INFO)

            if config_path is None:
                config_path = os.environ.get(CONFIG_ENV_VAR)
            if not config_path:
                self.initialized = True
                return

            entries = _read_config(Path(config_path))

            options = {"unbuffered": False, "colored": False, "show_locations": False}
            for key, value in entries:
                section, _, option = key.partition(".")
                if section == "format" and option in options:
                    options[option] = _parse_bool(key, value)
                    continue
                level = parse_level(value)
                if level is not None:
                    self.get_logger(key).level = level

            self.unbuffered = options["unbuffered"]
            self.colored = options["colored"]
            self.show_locations = options["show_locations"]
            self.initialized = True

    def init_log_location(self, location: LogLocation, name: str, level: Level) -> None:
        """Bind ``location`` to the logger ``name`` and decide if it is enabled."""
        with self._locations_lock:
            if location.initialized:
                return
            location.logger = self.get_logger(name)
            location.level = Level(level)
            location.enabled = location.level >= location.logger.level
            location.initialized = True

    def emit(self, level: Level, filename: str, line: int, message: str) -> None:
        """Write one formatted message; ERROR and above go to the error stream."""
        level = Level(level)
        if level >= Level.ERROR:
            out = self.stderr if self.stderr is not None else sys.stderr
        else:
            out = self.stdout if self.stdout is not None else sys.stdout

        parts = []
        if self.colored:
            parts.append(_LEVEL_COLORS[level])
        parts.append(_LEVEL_TAGS[level])
        parts.append(str(message))
        if self.show_locations:
            base = filename.rsplit("\\", 1)[-1]
            parts.append(f" [{base}:{line}]")
        if self.colored:
            parts.append(RESET)
        parts.append("\n")
        out.write("".join(parts))
        if self.unbuffered:
            out.flush()