"""Built-in card type catalog.

Stats use the card-face scale: each value is a single hex digit (0-15).
"""

from __future__ import annotations

from .enums import BattleClass
from .models import CardType, CardTypeID


def _card(type_id: int, name: str, face: str) -> CardType:
    """Build a card type from its face notation, e.g. ``"0P00"``.

    The four characters are power, battle class tag, physical defense and
    magical defense.
    """

    power, tag, pdef, mdef = face
    return CardType(
        id=CardTypeID(type_id),
        name=name,
        power=int(power, 16),
        battle_class=BattleClass.from_ui_char(tag),
        physical_defense=int(pdef, 16),
        magical_defense=int(mdef, 16),
    )


DEFAULT_CARD_TYPES: tuple[CardType, ...] = (
    _card(0, "Goblin", "0P00"),
    _card(1, "Fang", "0P01"),
    _card(2, "Skeleton", "0P10"),
    _card(3, "Flan", "1M04"),
    _card(4, "Zaghnol", "1P11"),
    _card(5, "Lizard Man", "1P21"),
    _card(6, "Zombie", "1M03"),
    _card(7, "Bomb", "2M13"),
    _card(8, "Ironite", "2P32"),
    _card(9, "Sahagin", "2P22"),
    _card(10, "Mimic", "3X23"),
    _card(11, "Wyerd", "3M25"),
    _card(12, "Cactuar", "4X38"),
    _card(13, "Tonberry", "5A55"),
    _card(14, "Malboro", "6M47"),
    _card(15, "Ironclad", "8P91"),
    _card(16, "Ozma", "BA8F"),
    _card(17, "Odin", "CPAB"),
    _card(18, "Ark", "EAAE"),
    _card(19, "Alexander", "FAFF"),
)
