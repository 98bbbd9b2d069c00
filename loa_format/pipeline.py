"""Pipeline driver: XML sources in, text catalog out."""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from typing import Optional, Sequence

from .assembler import assemble
from .mapper import map_cards, map_meta_entries, map_set_infos
from .models import Catalog
from .render import render_catalog
from .text_writer import TextWriter
from .utils import get_logger
from .xml_reader import SOURCE_NAMES, XmlDataset

LOGGER = get_logger(__name__)


@dataclass
class PipelineConfig:
    """Configuration values for :class:`CatalogPipeline`."""

    # File stems for the cards, setinfo and meta documents, in that order.
    source_names: Sequence[str] = SOURCE_NAMES
    encoding: str = "utf-8"
    # Unknown set references raise instead of being dropped.
    strict_references: bool = True


def build_catalog(dataset: XmlDataset, config: Optional[PipelineConfig] = None) -> Catalog:
    config = config or PipelineConfig()
    return assemble(
        map_cards(dataset.cards),
        map_set_infos(dataset.setinfo),
        map_meta_entries(dataset.meta),
        strict_references=config.strict_references,
    )


class CatalogPipeline:
    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        writer: Optional[TextWriter] = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.writer = writer or TextWriter(encoding=self.config.encoding)

    def render(self, input_dir: str | os.PathLike[str]) -> str:
        """Read and render the dataset in *input_dir* without writing anything."""
        dataset = XmlDataset(input_dir, self.config.source_names).load()
        catalog = build_catalog(dataset, self.config)
        return render_catalog(catalog)

    def run(
        self,
        input_dir: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
    ) -> pathlib.Path:
        LOGGER.info("Building catalog from %s", input_dir)
        # Rendered in full first so that a failure leaves no partial file.
        document = self.render(input_dir)
        return self.writer.write([document], output_path)


def run_pipeline(
    input_dir: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    config: Optional[PipelineConfig] = None,
) -> pathlib.Path:
    return CatalogPipeline(config).run(input_dir, output_path)
