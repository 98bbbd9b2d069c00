"""Load the XML documents that make up a card dataset.

A dataset directory holds three documents, addressed by logical name. The
file stems default to the logical names and can be overridden per dataset:

* ``cards``   – card definitions (``cards.xml``)
* ``setinfo`` – set codes, names and release dates (``setinfo.xml``)
* ``meta``    – per-card print instances (``meta.xml``)

Parsing is delegated to :mod:`lxml`; malformed documents raise
:class:`lxml.etree.XMLSyntaxError` unchanged.
"""
from __future__ import annotations

import pathlib
from typing import Dict, List, Optional, Sequence

from lxml import etree

from .utils import SourceNotFoundError, get_logger

LOGGER = get_logger(__name__)

SOURCE_NAMES: Sequence[str] = ("cards", "setinfo", "meta")


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        recover=False,
        remove_blank_text=True,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
    )


def element_text(element: Optional[etree._Element]) -> Optional[str]:
    """Concatenated descendant text of *element*, or ``None`` if there is none."""
    if element is None:
        return None
    text = "".join(element.itertext())
    return text or None


def child_text(element: etree._Element, tag: str) -> Optional[str]:
    """Text of the first direct child named *tag*."""
    return element_text(element.find(tag))


def children(element: etree._Element, *path: str) -> List[etree._Element]:
    """Direct children along *path*, e.g. ``children(card, "rulelist", "rule")``."""
    return element.findall("/".join(path))


class XmlDataset:
    """Parsed XML roots of a dataset directory, keyed by logical name."""

    def __init__(
        self,
        directory: str | pathlib.Path,
        source_names: Sequence[str] = SOURCE_NAMES,
    ) -> None:
        if len(source_names) != len(SOURCE_NAMES):
            raise ValueError(
                f"Expected file names for {', '.join(SOURCE_NAMES)}, got {list(source_names)!r}"
            )
        self.directory = pathlib.Path(directory)
        # Logical name -> file stem, e.g. "cards" -> "cards"
        self.file_stems: Dict[str, str] = dict(zip(SOURCE_NAMES, source_names))
        self.roots: Dict[str, etree._Element] = {}

    def path_for(self, name: str) -> pathlib.Path:
        return self.directory / f"{self.file_stems[name]}.xml"

    def load(self) -> "XmlDataset":
        """Parse every source document; all files are checked before any is parsed."""
        paths = {name: self.path_for(name) for name in SOURCE_NAMES}
        for path in paths.values():
            if not path.is_file():
                raise SourceNotFoundError(f"Missing input document: {path}")

        parser = _make_parser()
        for name, path in paths.items():
            LOGGER.debug("Parsing %s", path)
            tree = etree.parse(str(path), parser)
            self.roots[name] = tree.getroot()
        LOGGER.info("Loaded %s documents from %s", len(self.roots), self.directory)
        return self

    # ------------------------------------------------------------------
    def root(self, name: str) -> etree._Element:
        if name not in self.roots:
            raise KeyError(f"Document {name!r} has not been loaded")
        return self.roots[name]

    @property
    def cards(self) -> etree._Element:
        return self.root("cards")

    @property
    def setinfo(self) -> etree._Element:
        return self.root("setinfo")

    @property
    def meta(self) -> etree._Element:
        return self.root("meta")
