# logger_utils.py - log lines and performance metrics for the app shell

import os
import time
from datetime import datetime

# Directory where all log files will be stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocomplete.log")


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    # class level so the static helpers and instances agree on one file
    path = DEFAULT_LOG_PATH
    echo = False

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = None):
        if path:
            self.path = path
        self.use_color = use_color
        if echo is not None:
            self.echo = echo

    def _write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self._write("DEBUG", msg)

    def info(self, msg: str):
        self._write("INFO", msg)

    def warning(self, msg: str):
        self._write("WARNING", msg)

    def error(self, msg: str):
        self._write("ERROR", msg)

    @classmethod
    def write(cls, msg: str):
        """Shortcut for an INFO line without building an instance."""
        cls()._write("INFO", msg)

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: [12:45:02] load dictionary: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if cls.echo:
            print(line)
        _append(cls.path, line)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load dictionary"):
                terms = load_terms(path)
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
