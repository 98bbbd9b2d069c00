"""Plain-text catalog generator for XML card datasets."""

from .models import Card, Catalog, MetaEntry, PrintInstance, Rule, SetInfo, TypeEntry
from .transliterate import TRANSLITERATION_TABLE, capitalize, transliterate
from .xml_reader import XmlDataset
from .mapper import map_card, map_meta_entry, map_set_info
from .assembler import assemble
from .rules_text import combine_rule_text, combine_rules
from .render import (
    render_card,
    render_card_face,
    render_card_meta,
    render_catalog,
    render_set_index,
    render_type_line,
)
from .text_writer import TextWriter
from .pipeline import CatalogPipeline, PipelineConfig, build_catalog, run_pipeline
from .utils import (
    DanglingReferenceError,
    DatasetError,
    PipelineError,
    SourceNotFoundError,
    UnsupportedMergeError,
)
from .cli import main

__all__ = [
    "Card",
    "Catalog",
    "MetaEntry",
    "PrintInstance",
    "Rule",
    "SetInfo",
    "TypeEntry",
    "TRANSLITERATION_TABLE",
    "capitalize",
    "transliterate",
    "XmlDataset",
    "map_card",
    "map_meta_entry",
    "map_set_info",
    "assemble",
    "combine_rule_text",
    "combine_rules",
    "render_card",
    "render_card_face",
    "render_card_meta",
    "render_catalog",
    "render_set_index",
    "render_type_line",
    "TextWriter",
    "CatalogPipeline",
    "PipelineConfig",
    "build_catalog",
    "run_pipeline",
    "DanglingReferenceError",
    "DatasetError",
    "PipelineError",
    "SourceNotFoundError",
    "UnsupportedMergeError",
    "main",
]
