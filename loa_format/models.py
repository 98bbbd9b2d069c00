from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Rule(BaseModel):
    """One line of rules text.

    - number: rules sharing a number in a consecutive run are merged.
    - reminder: parenthetical reminder text, kept as written.
    """

    model_config = ConfigDict(frozen=True)

    number: Optional[str] = None
    text: Optional[str] = None
    reminder: Optional[str] = None


class TypeEntry(BaseModel):
    """One word of the type line.

    kind is "super" for supertypes, "card" for card types; anything else
    (including no kind at all) is a subtype.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: Optional[str] = None


class Card(BaseModel):
    """A card face, optionally carrying the second face of a split or flip card."""

    model_config = ConfigDict(frozen=True)

    name: str
    cost: Optional[str] = None
    color: Optional[str] = None
    power: Optional[str] = None
    toughness: Optional[str] = None

    # Printed type line order
    types: List[TypeEntry] = Field(default_factory=list)
    rules: List[Rule] = Field(default_factory=list)

    second_face: Optional["Card"] = None

    @model_validator(mode="after")
    def _validate_second_face(self) -> "Card":
        if self.second_face is not None and self.second_face.second_face is not None:
            raise ValueError(f"second face of {self.name!r} cannot have its own second face")

        return self


class SetInfo(BaseModel):
    """Set metadata; order is the rank of the set by release date."""

    model_config = ConfigDict(frozen=True)

    code: Optional[str] = None
    name: Optional[str] = None
    release_date: Optional[str] = None
    order: int = Field(default=0, ge=0)


class PrintInstance(BaseModel):
    """One appearance of a card in a set."""

    model_config = ConfigDict(frozen=True)

    set_name: Optional[str] = None
    rarity: Optional[str] = None


class MetaEntry(BaseModel):
    """A ``meta.xml`` card entry before grouping."""

    model_config = ConfigDict(frozen=True)

    card_name: Optional[str] = None
    instances: List[PrintInstance] = Field(default_factory=list)


class Catalog(BaseModel):
    """Cross-linked dataset consumed by the renderers."""

    model_config = ConfigDict(frozen=True)

    # Sorted by name
    cards: List[Card] = Field(default_factory=list)
    set_info_by_name: Dict[str, SetInfo] = Field(default_factory=dict)
    instances_by_card_name: Dict[str, List[PrintInstance]] = Field(default_factory=dict)
