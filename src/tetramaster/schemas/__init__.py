from .card import CardCreate, CardRead, CardTypeSchema
from .fight import FightRead, FightRequest

__all__ = [
    "CardCreate",
    "CardRead",
    "CardTypeSchema",
    "FightRead",
    "FightRequest",
]
