"""Enumerations used by the card combat domain."""

from __future__ import annotations

from enum import StrEnum


class BattleClass(StrEnum):
    """Battle class of a card.

    Decides which stats are compared when the card attacks:

    - PHYSICAL attacks the physical defense stat
    - MAGICAL attacks the magical defense stat
    - FLEXIBLE attacks the lowest defense stat
    - ASSAULT uses its best stat against the defender's lowest stat
    """

    PHYSICAL = "physical"
    MAGICAL = "magical"
    FLEXIBLE = "flexible"
    ASSAULT = "assault"

    @property
    def ui_char(self) -> str:
        """Single character tag shown on the card face."""

        return _UI_CHARS[self]

    @classmethod
    def from_ui_char(cls, char: str) -> BattleClass:
        """Parse a card face tag such as ``"P"`` back into a battle class."""

        for battle_class, tag in _UI_CHARS.items():
            if tag == char.upper():
                return battle_class
        raise ValueError(f"Unknown battle class tag: {char!r}")


_UI_CHARS: dict[BattleClass, str] = {
    BattleClass.PHYSICAL: "P",
    BattleClass.MAGICAL: "M",
    BattleClass.FLEXIBLE: "X",
    BattleClass.ASSAULT: "A",
}


class Direction(StrEnum):
    """Compass direction an arrow points to, listed clockwise from north."""

    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"

    def opposite(self) -> Direction:
        """Return the direction pointing straight back."""

        members = list(Direction)
        return members[(members.index(self) + 4) % len(members)]

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return _OFFSETS[self][1]


# Screen coordinates: y grows downwards.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (1, 1),
    Direction.S: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, -1),
}
