"""Utility helpers for the catalog pipeline."""
from __future__ import annotations

import itertools
import logging
import os
import pathlib
from typing import Iterable, List, Optional, TypeVar

LOGGER_NAME = "loa_format"

T = TypeVar("T")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module level logger configured for the catalog tools."""
    logger_name = name or LOGGER_NAME
    logger = logging.getLogger(logger_name)
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logger


def ensure_parent_directory(path: str | os.PathLike[str]) -> pathlib.Path:
    """Create the parent directory of *path* if needed and return *path* as Path."""
    file_path = pathlib.Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Map ``None`` and the empty string to ``None``."""
    if value is None or value == "":
        return None
    return value


def partition_by(values: Iterable[T], key) -> List[List[T]]:
    """Split *values* into runs of consecutive items with an equal ``key``."""
    return [list(run) for _, run in itertools.groupby(values, key)]


class PipelineError(RuntimeError):
    """Raised when the catalog pipeline encounters an unrecoverable error."""


class SourceNotFoundError(PipelineError, FileNotFoundError):
    """An input document is missing from the source directory."""


class DatasetError(PipelineError):
    """The dataset cannot be turned into a catalog."""


class DanglingReferenceError(DatasetError):
    """A print instance refers to a set that ``setinfo.xml`` does not define."""


class UnsupportedMergeError(PipelineError):
    """Rule text cannot be merged with the supported phrasing."""
