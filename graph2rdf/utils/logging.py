"""
Console and file logging for graph2rdf runs.

Console lines are tagged with the export stage that produced them
(loading, selection, catalog, triples, serialization); the log file gets
the same lines without colours.
"""

import logging
import re
import sys
from pathlib import Path

RESET = "\033[0m"
ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

LEVEL_COLORS = {
    "DEBUG": "\033[37m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;31m",
}

# Logger prefix -> (icon, colour). Checked in order, most specific first.
STAGES = (
    ("graph2rdf.loaders", "📂", "\033[1;36m"),
    ("graph2rdf.selectors", "🔎", "\033[1;35m"),
    ("graph2rdf.triples.catalog", "📖", "\033[1;33m"),
    ("graph2rdf.triples.serializer", "💾", "\033[1;34m"),
    ("graph2rdf.triples", "🔗", "\033[1;32m"),
    ("graph2rdf.pipeline", "⚙️ ", "\033[1;34m"),
    ("graph2rdf.main", "🚀", "\033[1;32m"),
    ("__main__", "🚀", "\033[1;32m"),
    ("root", "⚙️ ", "\033[1;90m"),
)
OTHER_STAGE = ("•", "\033[1m")

CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Handler writing the current log file, if any
_file_handler: logging.FileHandler | None = None


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI colour sequences such as `\\033[1;33m`."""
    return ANSI_ESCAPE.sub("", text)


def stage_of(logger_name: str) -> tuple[str, str]:
    """Return the (icon, colour) of the stage a logger belongs to."""
    for prefix, icon, color in STAGES:
        if logger_name.startswith(prefix):
            return icon, color
    return OTHER_STAGE


class _StageFormatter(logging.Formatter):
    """Shared layout: `time | LEVEL | module | message` plus any traceback."""

    def format_fields(self, record: logging.LogRecord) -> tuple[str, str, str]:
        raise NotImplementedError

    def format(self, record):
        level, module, message = self.format_fields(record)
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{self.formatTime(record, self.datefmt)} | {level} | {module} | {message}"


class ColoredFormatter(_StageFormatter):
    """Console formatter: coloured level, stage icon, highlighted warnings."""

    def format_fields(self, record):
        level_color = LEVEL_COLORS.get(record.levelname, RESET)
        icon, stage_color = stage_of(record.name)
        short_name = record.name.rsplit(".", 1)[-1]

        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            message = f"{level_color}{message}{RESET}"

        return (
            f"{level_color}{record.levelname:8}{RESET}",
            f"{stage_color}{icon} {short_name:12}{RESET}",
            message,
        )


class PlainFormatter(_StageFormatter):
    """Log file formatter (no ANSI codes)."""

    def format_fields(self, record):
        return (
            f"{record.levelname:8}",
            f"{record.name.rsplit('.', 1)[-1]:12}",
            strip_ansi_codes(record.getMessage()),
        )


def setup_colored_logging(level=logging.INFO, log_file: str | Path | None = None) -> None:
    """
    Route all logging to stdout, and to `log_file` when given.

    Calling it again replaces the previous configuration; a log file
    opened by an earlier call is closed.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path of a log file, truncated on open
    """
    remove_file_handler()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColoredFormatter(datefmt=CONSOLE_DATEFMT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        add_file_handler(log_file, level)

    # rdflib logs plugin loading at INFO
    logging.getLogger("rdflib").setLevel(logging.WARNING)


def add_file_handler(log_file: str | Path, level=logging.DEBUG) -> logging.FileHandler:
    """Start writing log records to `log_file`, replacing any current log file."""
    global _file_handler

    remove_file_handler()

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(PlainFormatter(datefmt=FILE_DATEFMT))
    logging.getLogger().addHandler(handler)
    _file_handler = handler

    logging.getLogger(__name__).info("Logging to %s", log_path)
    return handler


def remove_file_handler() -> None:
    """Detach and close the current log file handler, if any."""
    global _file_handler

    if _file_handler is not None:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
