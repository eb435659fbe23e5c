from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from tetramaster.domain import models as dm
from tetramaster.domain.enums import BattleClass, Direction
from tetramaster.factory import create_card

STAT_FIELDS = ("power", "battle_class", "physical_defense", "magical_defense")


class CardTypeSchema(BaseModel):
    id: int = Field(..., ge=0, description="Catalog identifier of the card type")
    name: str = Field(..., min_length=1, description="Display name of the card type")
    power: int = Field(..., ge=0, description="Offensive stat")
    battle_class: BattleClass = Field(..., description="Battle class (physical/magical/...)")
    physical_defense: int = Field(..., ge=0, description="Defense against physical attacks")
    magical_defense: int = Field(..., ge=0, description="Defense against magical attacks")

    def to_domain(self) -> dm.CardType:
        return dm.CardType(
            id=dm.CardTypeID(self.id),
            name=self.name,
            power=self.power,
            battle_class=self.battle_class,
            physical_defense=self.physical_defense,
            magical_defense=self.magical_defense,
        )

    @classmethod
    def from_domain(cls, card_type: dm.CardType) -> "CardTypeSchema":
        return cls(
            id=int(card_type.id),
            name=card_type.name,
            power=card_type.power,
            battle_class=card_type.battle_class,
            physical_defense=card_type.physical_defense,
            magical_defense=card_type.magical_defense,
        )


class CardCreate(BaseModel):
    id: int = Field(..., description="Unique card identifier")
    owner_id: int = Field(..., description="Player owning the card")
    card_type_id: int | None = Field(
        None, description="Catalog card type; stats default to the catalog entry when set"
    )
    power: int | None = Field(None, ge=0, description="Offensive stat")
    battle_class: BattleClass | None = Field(
        None, description="Battle class (physical/magical/...)"
    )
    physical_defense: int | None = Field(
        None, ge=0, description="Defense against physical attacks"
    )
    magical_defense: int | None = Field(None, ge=0, description="Defense against magical attacks")
    arrows: list[Direction] = Field(
        default_factory=list, max_length=8, description="Directions the card points to"
    )

    @field_validator("arrows")
    @classmethod
    def _arrows_unique(cls, arrows: list[Direction]) -> list[Direction]:
        if len(set(arrows)) != len(arrows):
            raise ValueError("arrows must not contain duplicates")
        return arrows

    @model_validator(mode="after")
    def _stats_or_card_type(self) -> Self:
        missing = self._missing_stats()
        if self.card_type_id is None and missing:
            raise ValueError(f"{', '.join(missing)} required when card_type_id is not set")
        return self

    def _missing_stats(self) -> list[str]:
        return [name for name in STAT_FIELDS if getattr(self, name) is None]

    def stat_conflicts(self, card_type: dm.CardType) -> list[str]:
        """Return the stats given explicitly that differ from ``card_type``."""

        return [
            name
            for name in STAT_FIELDS
            if getattr(self, name) is not None and getattr(self, name) != getattr(card_type, name)
        ]

    def to_domain(self, card_type: dm.CardType | None = None) -> dm.Card:
        """Build the card; with a catalog entry the stats come from the entry."""

        if card_type is not None:
            return create_card(card_type, self.id, self.owner_id, self.arrows)
        return dm.Card(
            id=dm.CardID(self.id),
            owner_id=dm.PlayerID(self.owner_id),
            card_type=None,
            power=self.power,
            battle_class=self.battle_class,
            physical_defense=self.physical_defense,
            magical_defense=self.magical_defense,
            arrows=frozenset(self.arrows),
        )


class CardRead(CardCreate):
    power: int = Field(..., ge=0, description="Offensive stat")
    battle_class: BattleClass = Field(..., description="Battle class (physical/magical/...)")
    physical_defense: int = Field(..., ge=0, description="Defense against physical attacks")
    magical_defense: int = Field(..., ge=0, description="Defense against magical attacks")
    battle_class_tag: str = Field(..., description="Single character shown on the card face")

    @classmethod
    def from_domain(cls, card: dm.Card) -> "CardRead":
        return cls(
            id=int(card.id),
            owner_id=int(card.owner_id),
            card_type_id=int(card.card_type.id) if card.card_type is not None else None,
            power=card.power,
            battle_class=card.battle_class,
            physical_defense=card.physical_defense,
            magical_defense=card.magical_defense,
            # Clockwise order keeps the payload stable.
            arrows=[direction for direction in Direction if direction in card.arrows],
            battle_class_tag=card.battle_class.ui_char,
        )
