"""Map parsed XML elements onto the catalog models."""
from __future__ import annotations

from typing import List, Optional

from lxml import etree

from .models import Card, MetaEntry, PrintInstance, Rule, SetInfo, TypeEntry
from .transliterate import transliterate
from .utils import DatasetError, blank_to_none, get_logger
from .xml_reader import child_text, children, element_text

LOGGER = get_logger(__name__)


def _ascii(value: Optional[str]) -> Optional[str]:
    return transliterate(value) if value is not None else None


def map_rule(rule_xml: etree._Element) -> Rule:
    return Rule(
        number=blank_to_none(rule_xml.get("no")),
        text=_ascii(element_text(rule_xml)),
        reminder=blank_to_none(rule_xml.get("reminder")),
    )


def map_type(type_xml: etree._Element) -> TypeEntry:
    return TypeEntry(
        name=_ascii(element_text(type_xml)) or "",
        kind=blank_to_none(type_xml.get("type")),
    )


def map_card(card_xml: etree._Element, *, allow_second_face: bool = True) -> Card:
    """Build a :class:`Card` from a ``card`` (or ``multi``) element."""
    name = child_text(card_xml, "name")
    if name is None:
        raise DatasetError(f"Card element on line {card_xml.sourceline} has no name")

    second_face = None
    multi_xml = card_xml.find("multi")
    if multi_xml is not None:
        if not allow_second_face:
            raise DatasetError(f"Second face of {name!r} has a nested face")
        second_face = map_card(multi_xml, allow_second_face=False)

    return Card(
        name=transliterate(name),
        cost=child_text(card_xml, "cost"),
        color=child_text(card_xml, "color"),
        power=child_text(card_xml, "pow"),
        toughness=child_text(card_xml, "tgh"),
        types=[map_type(t) for t in children(card_xml, "typelist", "type")],
        rules=[map_rule(r) for r in children(card_xml, "rulelist", "rule")],
        second_face=second_face,
    )


def map_set_info(set_xml: etree._Element) -> SetInfo:
    return SetInfo(
        code=child_text(set_xml, "code"),
        name=_ascii(child_text(set_xml, "name")),
        release_date=child_text(set_xml, "release-date"),
    )


def map_instance(instance_xml: etree._Element) -> PrintInstance:
    return PrintInstance(
        set_name=_ascii(child_text(instance_xml, "set")),
        rarity=child_text(instance_xml, "rarity"),
    )


def map_meta_entry(meta_xml: etree._Element) -> MetaEntry:
    return MetaEntry(
        card_name=_ascii(blank_to_none(meta_xml.get("name"))),
        instances=[map_instance(i) for i in children(meta_xml, "instance")],
    )


# ----------------------------------------------------------------------
def map_cards(root: etree._Element) -> List[Card]:
    cards = [map_card(card_xml) for card_xml in children(root, "card")]
    LOGGER.info("Mapped %s cards", len(cards))
    return cards


def map_set_infos(root: etree._Element) -> List[SetInfo]:
    set_infos = [map_set_info(set_xml) for set_xml in children(root, "set")]
    LOGGER.info("Mapped %s sets", len(set_infos))
    return set_infos


def map_meta_entries(root: etree._Element) -> List[MetaEntry]:
    entries = [map_meta_entry(meta_xml) for meta_xml in children(root, "card")]
    LOGGER.info(
        "Mapped %s meta entries with %s print instances",
        len(entries),
        sum(len(entry.instances) for entry in entries),
    )
    return entries
