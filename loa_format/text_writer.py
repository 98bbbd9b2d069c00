"""Persist the rendered catalog as a text file."""
from __future__ import annotations

import os
import pathlib
from typing import Iterable

from .utils import ensure_parent_directory, get_logger

LOGGER = get_logger(__name__)


class TextWriter:
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def write(self, chunks: Iterable[str], output_path: str | os.PathLike[str]) -> pathlib.Path:
        """Write *chunks* to *output_path*, replacing any existing file."""
        path = ensure_parent_directory(output_path)
        with path.open("w", encoding=self.encoding, newline="\n") as handle:
            for chunk in chunks:
                handle.write(chunk)
        LOGGER.info("Wrote %s", path)
        return path
