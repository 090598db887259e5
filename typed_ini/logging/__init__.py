"""Module de logging."""

from typed_ini.logging.base import Logger
from typed_ini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
