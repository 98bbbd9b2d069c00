"""Cross-link mapped cards, sets and print instances into a :class:`Catalog`."""
from __future__ import annotations

from typing import Dict, Iterable, List

from .models import Card, Catalog, MetaEntry, PrintInstance, SetInfo
from .utils import DanglingReferenceError, get_logger

LOGGER = get_logger(__name__)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Order cards by name using plain code point comparison."""
    return sorted(cards, key=lambda card: card.name)


def rank_sets(set_infos: Iterable[SetInfo]) -> Dict[str, SetInfo]:
    """Assign each set its release order and index the sets by name.

    Release dates are pre-formatted sortable strings, so they are compared as
    text. When two sets share a name the later one in release order wins.
    """
    ranked = sorted(set_infos, key=lambda info: info.release_date or "")
    by_name: Dict[str, SetInfo] = {}
    for order, info in enumerate(ranked):
        key = info.name or ""
        if key in by_name:
            LOGGER.warning(
                "Duplicate set name %r: %s replaces %s",
                key,
                info.code,
                by_name[key].code,
            )
        by_name[key] = info.model_copy(update={"order": order})
    return by_name


def group_instances(entries: Iterable[MetaEntry]) -> Dict[str, List[PrintInstance]]:
    """Collect print instances per card name, keeping document order."""
    grouped: Dict[str, List[PrintInstance]] = {}
    for entry in entries:
        grouped.setdefault(entry.card_name or "", []).extend(entry.instances)
    return grouped


def resolve_references(
    instances_by_card_name: Dict[str, List[PrintInstance]],
    set_info_by_name: Dict[str, SetInfo],
    *,
    strict: bool = True,
) -> Dict[str, List[PrintInstance]]:
    """Check that every instance names a known set.

    In strict mode an unknown set raises :class:`DanglingReferenceError`;
    otherwise the instance is dropped with a warning.
    """
    resolved: Dict[str, List[PrintInstance]] = {}
    for card_name, instances in instances_by_card_name.items():
        kept: List[PrintInstance] = []
        for instance in instances:
            if (instance.set_name or "") in set_info_by_name:
                kept.append(instance)
                continue
            if strict:
                raise DanglingReferenceError(
                    f"Card {card_name!r} is printed in unknown set {instance.set_name!r}"
                )
            LOGGER.warning(
                "Dropping %s print of %r: unknown set", instance.set_name, card_name
            )
        resolved[card_name] = kept
    return resolved


def assemble(
    cards: Iterable[Card],
    set_infos: Iterable[SetInfo],
    meta_entries: Iterable[MetaEntry],
    *,
    strict_references: bool = True,
) -> Catalog:
    set_info_by_name = rank_sets(set_infos)
    instances = resolve_references(
        group_instances(meta_entries),
        set_info_by_name,
        strict=strict_references,
    )
    catalog = Catalog(
        cards=sort_cards(cards),
        set_info_by_name=set_info_by_name,
        instances_by_card_name=instances,
    )
    LOGGER.debug(
        "Assembled catalog: %s cards, %s sets, %s cards with prints",
        len(catalog.cards),
        len(catalog.set_info_by_name),
        len(catalog.instances_by_card_name),
    )
    return catalog
