"""Render a :class:`Catalog` as plain text."""
from __future__ import annotations

import itertools
from typing import Iterable, Iterator, List, Optional, Sequence

from .models import Card, Catalog, Rule, SetInfo, TypeEntry
from .rules_text import combine_rules

FACE_SEPARATOR = "----"
LEADING_TYPE_KINDS = frozenset({"super", "card"})


def _unlines(*lines: Optional[str]) -> str:
    return "\n".join(line for line in lines if line is not None)


def render_type_line(types: Sequence[TypeEntry]) -> Optional[str]:
    """``"Legendary Creature - Elf Warrior"``, or ``None`` for an untyped card."""
    if not types:
        return None
    leading = list(itertools.takewhile(lambda t: t.kind in LEADING_TYPE_KINDS, types))
    trailing = types[len(leading):]
    pre = " ".join(t.name for t in leading)
    if not trailing:
        return pre
    return f"{pre} - {' '.join(t.name for t in trailing)}"


def render_rule(rule: Rule) -> str:
    text = rule.text or ""
    if not rule.reminder:
        return text
    if text:
        return f"{text} ({rule.reminder})"
    return f"({rule.reminder})"


def render_rules(rules: Iterable[Rule]) -> str:
    return "\n".join(render_rule(rule) for rule in combine_rules(rules))


def render_card_face(card: Card) -> str:
    return _unlines(
        card.name,
        card.cost,
        f"({card.color})" if card.color else None,
        render_type_line(card.types),
        f"{card.power}/{card.toughness or ''}" if card.power else None,
        render_rules(card.rules) if card.rules else None,
    )


def render_card_meta(card: Card, catalog: Catalog) -> str:
    """Sets and rarities the card was printed in, oldest set first.

    Repeated prints are counted: ``"M10 common (x2), M11 rare"``.
    """
    instances = sorted(
        catalog.instances_by_card_name.get(card.name, []),
        key=lambda inst: catalog.set_info_by_name[inst.set_name or ""].order,
    )
    labels = [
        f"{catalog.set_info_by_name[inst.set_name or ''].code or ''} {inst.rarity or ''}"
        for inst in instances
    ]
    fragments: List[str] = []
    for label, run in itertools.groupby(labels):
        count = len(list(run))
        fragments.append(f"{label} (x{count})" if count > 1 else label)
    return ", ".join(fragments)


def render_card(card: Card, catalog: Catalog) -> str:
    text = render_card_face(card)
    if card.second_face is not None:
        text = _unlines(text, FACE_SEPARATOR, render_card_face(card.second_face))
    return f"{text}\n\n{render_card_meta(card, catalog)}"


def render_set_index(set_infos: Iterable[SetInfo]) -> str:
    """One fixed-width line per set, ordered by set code."""
    return "\n".join(
        f"{info.code or '':<6.6}  {info.release_date or '':<10}  {info.name or ''}"
        for info in sorted(set_infos, key=lambda info: info.code or "")
    )


def iter_catalog(catalog: Catalog) -> Iterator[str]:
    yield render_set_index(catalog.set_info_by_name.values())
    yield "\n\n"
    for card in catalog.cards:
        yield render_card(card, catalog)
        yield "\n\n"


def render_catalog(catalog: Catalog) -> str:
    return "".join(iter_catalog(catalog))
