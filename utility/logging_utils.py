# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog
from tqdm import tqdm

BASE_NAME = "record_embed"

CONSOLE_FORMAT = (
    "%(log_color)s%(asctime)s [%(levelname)s] "
    "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
)
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogSettings:
    level: int = logging.INFO
    to_file: bool = False
    file: Path = Path("./logs/record_embed.log")
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5

    @staticmethod
    def from_env() -> "LogSettings":
        level_name = os.getenv("RECEMBED_LOG_LEVEL", "INFO").strip().upper()
        return LogSettings(
            level=getattr(logging, level_name, logging.INFO),
            to_file=os.getenv("RECEMBED_LOG_TO_FILE", "0").lower() in ("1", "true", "yes", "y"),
            file=Path(os.getenv("RECEMBED_LOG_FILE", "./logs/record_embed.log")),
            max_bytes=int(os.getenv("RECEMBED_LOG_MAX_BYTES", str(5 * 1024 * 1024))),
            backup_count=int(os.getenv("RECEMBED_LOG_BACKUP_COUNT", "5")),
        )


class TqdmLoggingHandler(logging.StreamHandler):
    """
    Console handler that writes through tqdm.write so log lines emitted
    mid-run land above the progress bar instead of breaking it.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def _console_formatter() -> colorlog.ColoredFormatter:
    return colorlog.ColoredFormatter(
        fmt=CONSOLE_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        secondary_log_colors={
            "message": {
                "INFO": "white",
                "WARNING": "yellow",
                "ERROR": "light_red",
                "CRITICAL": "red",
            }
        },
        style="%",
    )


def configure_logging(settings: LogSettings | None = None) -> logging.Logger:
    """
    Attach handlers to the project root logger once. Every logger handed out
    below is a child of it and propagates up, so handlers exist in one place.
    """
    root = logging.getLogger(BASE_NAME)
    if root.handlers:
        return root

    settings = settings or LogSettings.from_env()

    console = TqdmLoggingHandler()
    console.setFormatter(_console_formatter())
    root.addHandler(console)

    if settings.to_file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(settings.file),
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

    root.setLevel(settings.level)
    root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Project logger, e.g. get_logger("cli.embed_records") -> record_embed.cli.embed_records"""
    configure_logging()
    return logging.getLogger(f"{BASE_NAME}.{name}" if name else BASE_NAME)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after module + class, e.g.:

      record_embed.embedding.RecordEmbedder.RecordEmbedder
      record_embed.services.RecordEmbedService.RecordEmbedService
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return get_logger(f"{module}.{classname}")
