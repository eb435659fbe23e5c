"""Dataclasses describing cards and fight outcomes.

Cards are immutable values handed to the rules layer by a catalog. Nothing in
this module touches a board, a player turn or any storage; callers apply the
returned :class:`Fight` to their own state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NewType

from .enums import BattleClass, Direction
from .rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from tetramaster.interfaces import IRandomSource

# --- Strongly typed identifiers -------------------------------------------------

CardID = NewType("CardID", int)
CardTypeID = NewType("CardTypeID", int)
PlayerID = NewType("PlayerID", int)


# --- Core dataclasses -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CardType:
    """Catalog entry shared by every card of the same kind."""

    id: CardTypeID
    name: str
    power: int
    battle_class: BattleClass
    physical_defense: int
    magical_defense: int


@dataclass(frozen=True, slots=True)
class Card:
    """Unique card instance owned by a player.

    ``arrows`` lists the directions the card can attack and defend from. Any
    iterable is accepted and stored as a frozenset.
    """

    id: CardID
    owner_id: PlayerID
    card_type: CardType | None
    power: int
    battle_class: BattleClass
    physical_defense: int
    magical_defense: int
    arrows: frozenset[Direction] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.arrows, frozenset):
            object.__setattr__(self, "arrows", frozenset(self.arrows))

    def has_arrow(self, direction: Direction) -> bool:
        return direction in self.arrows

    def fight(
        self,
        other: Card,
        direction: Direction,
        *,
        rng: IRandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> Fight:
        """Challenge ``other``, which sits in ``direction`` from this card.

        Raises:
            InvalidDirectionError: If this card has no arrow towards ``direction``.
        """
        from .combat import resolve_fight

        return resolve_fight(self, other, direction, rng=rng, rules=rules)


@dataclass(frozen=True, slots=True)
class Fight:
    """Outcome of a single fight between two cards."""

    attacker: Card
    defender: Card
    attack_score: int
    defense_score: int
    attacker_wins: bool

    @property
    def winner(self) -> Card:
        return self.attacker if self.attacker_wins else self.defender

    @property
    def loser(self) -> Card:
        return self.defender if self.attacker_wins else self.attacker

    @property
    def contested(self) -> bool:
        """False when the defender had no arrow pointing back at the attacker."""

        # An unopposed capture is the only way to win with two zero scores.
        return not (self.attacker_wins and self.attack_score == 0 and self.defense_score == 0)
