"""Merge rules that share a rule number into a single line of text.

Two instances of the same keyword ability are printed once, e.g. two rules
numbered ``3`` with texts ``"Flying"`` and ``"Vigilance"`` become
``"Flying, vigilance"``. Consecutive "Protection from X" abilities collapse
into one sentence: ``"Protection from black and white"``.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import Rule
from .transliterate import capitalize
from .utils import UnsupportedMergeError, partition_by

PROTECTION_PREFIX = "Protection from "

_PROTECTION_RUN = "protection"


def _lower_first(value: str) -> str:
    if not value:
        return value
    return value[0].lower() + value[1:]


def _is_protection(value: str) -> bool:
    return value.startswith(PROTECTION_PREFIX)


def join_protection(items: Sequence[str]) -> str:
    """Join two or three "Protection from X" clauses into one."""
    qualities = [item[len(PROTECTION_PREFIX):] for item in items]
    # Only the final clause keeps its closing period.
    qualities = [q.rstrip(".") for q in qualities[:-1]] + qualities[-1:]

    if len(qualities) == 2:
        joined = "%s and %s" % tuple(qualities)
    elif len(qualities) == 3:
        joined = "%s, %s and %s" % tuple(qualities)
    else:
        raise UnsupportedMergeError(
            f"Cannot merge {len(qualities)} protection clauses: {list(items)!r}"
        )
    return PROTECTION_PREFIX + joined


def combine_protection_text(values: Iterable[str]) -> List[str]:
    """Collapse each run of adjacent protection clauses; other values pass through."""
    runs = partition_by(
        values, key=lambda v: _PROTECTION_RUN if _is_protection(v) else object()
    )
    return [run[0] if len(run) == 1 else join_protection(run) for run in runs]


def combine_rule_text(values: Iterable[Optional[str]]) -> Optional[str]:
    """Combine the texts (or reminders) of merged rules into one string.

    Absent values are skipped. Returns ``None`` when nothing is left.
    """
    present = [value for value in values if value is not None]
    fragments = [_lower_first(f) for f in combine_protection_text(present)]
    combined = capitalize(", ".join(fragments))
    return combined or None


def combine_rules(rules: Iterable[Rule]) -> List[Rule]:
    """Merge consecutive rules that share a number.

    Rules without a number are never merged.
    """
    runs = partition_by(
        rules, key=lambda r: r.number if r.number is not None else object()
    )
    combined: List[Rule] = []
    for run in runs:
        if len(run) == 1:
            combined.append(run[0])
            continue
        combined.append(
            Rule(
                number=run[0].number,
                text=combine_rule_text(r.text for r in run),
                reminder=combine_rule_text(r.reminder for r in run),
            )
        )
    return combined
