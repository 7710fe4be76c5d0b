# logger_utils.py -  for logging messages and timing metrics from the menu
# Lines go to a plain log file, are forwarded to the stdlib "word_search"
# logger (same handlers as the core modules) and can be echoed with Rich.

import logging
import os
import time
from datetime import datetime

from rich.console import Console
from rich.text import Text

# Path to the default log file, can be overriden per Log instance
DEFAULT_LOG_PATH = os.path.join("logs", "word_search.log")

LEVELS = {
    "DEBUG": (logging.DEBUG, "dim"),
    "INFO": (logging.INFO, "blue"),
    "WARNING": (logging.WARNING, "yellow"),
    "ERROR": (logging.ERROR, "bold red"),
}


class Log:
    """Menu-side logger: timestamped file lines, optional console echo, timings."""

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True,
                 console: Console = None, logger_name: str = "word_search"):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo
        self.console = console or Console(no_color=not use_color, highlight=False)
        self._logger = logging.getLogger(logger_name)

    def write(self, level: str, msg: str) -> str:
        """
        Record `msg` at `level` and return the file line,
        formatted as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        num, style = LEVELS.get(level, (logging.INFO, ""))
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)
        self._logger.log(num, msg)
        if self.echo:
            self.console.print(Text(line, style=style if self.use_color else ""), soft_wrap=True)
        return line

    def debug(self, msg: str):
        return self.write("DEBUG", msg)

    def info(self, msg: str):
        return self.write("INFO", msg)

    def warning(self, msg: str):
        return self.write("WARNING", msg)

    def error(self, msg: str):
        return self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timings, counts).
        Example line: [12:45:02] load done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        _append(self.path, line)
        self._logger.debug("%s: %s%s", tag, value, unit)
        if self.echo:
            self.console.print(Text(line), soft_wrap=True)
        return line

    def time_block(self, label):
        """
        Measure how long a block takes and record it as a metric:
            with log.time_block("load"):
                dictionary.load_file(path)
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.log.metric(f"{self.label} done", self.elapsed, "s")


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
