"""Tetra Master card combat rules."""

from tetramaster.domain.combat import InvalidDirectionError, resolve_fight
from tetramaster.domain.enums import BattleClass, Direction
from tetramaster.domain.models import Card, CardType, Fight

__all__ = [
    "BattleClass",
    "Card",
    "CardType",
    "Direction",
    "Fight",
    "InvalidDirectionError",
    "resolve_fight",
]
