"""Latin transliteration of card text into plain ASCII."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

TRANSLITERATION_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "®": "",  # registered sign
        "Æ": "AE",
        "à": "a",
        "á": "a",
        "â": "a",
        "é": "e",
        "í": "i",
        "ö": "o",
        "ú": "u",
        "û": "u",
        "—": "-",  # em dash
        "‘": "'",
        "’": "'",
    }
)

_COMPILED: Dict[int, str] = str.maketrans(dict(TRANSLITERATION_TABLE))


def transliterate(value: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Replace every character found in *table* and keep everything else."""
    if table is None:
        return value.translate(_COMPILED)
    return value.translate(str.maketrans(dict(table)))


def capitalize(value: str) -> str:
    """Upper-case the first character and keep the rest verbatim."""
    if not value:
        return value
    return value[0].upper() + value[1:]
