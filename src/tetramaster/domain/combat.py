"""Fight resolution rules."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from tetramaster.domain.enums import BattleClass, Direction
from tetramaster.domain.models import Card, Fight
from tetramaster.domain.rules_config import DEFAULT_RULES, RulesConfig
from tetramaster.interfaces import IRandomSource

logger = logging.getLogger(__name__)

MAX_LEVEL = DEFAULT_RULES.combat.max_level

_default_rng = random.Random()


class InvalidDirectionError(ValueError):
    """Raised when a card attacks in a direction it has no arrow for."""

    def __init__(self, card: Card, direction: Direction) -> None:
        super().__init__(f"card {int(card.id)} has no arrow pointing {direction.name}")
        self.card = card
        self.direction = direction


StatSelector = Callable[[Card, Card], tuple[int, int]]

# Attack stat of the attacker, defense stat of the defender.
STAT_SELECTORS: dict[BattleClass, StatSelector] = {
    BattleClass.PHYSICAL: lambda atk, dfn: (atk.power, dfn.physical_defense),
    BattleClass.MAGICAL: lambda atk, dfn: (atk.power, dfn.magical_defense),
    BattleClass.FLEXIBLE: lambda atk, dfn: (
        atk.power,
        min(dfn.physical_defense, dfn.magical_defense),
    ),
    BattleClass.ASSAULT: lambda atk, dfn: (
        max(atk.power, atk.physical_defense, atk.magical_defense),
        min(dfn.power, dfn.physical_defense, dfn.magical_defense),
    ),
}


def select_stats(attacker: Card, defender: Card) -> tuple[int, int]:
    """Return the ``(attack_stat, defense_stat)`` pair for the attacker's battle class."""

    return STAT_SELECTORS[attacker.battle_class](attacker, defender)


def roll_scores(
    attack_stat: int,
    defense_stat: int,
    rng: IRandomSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> tuple[int, int]:
    """Turn two stats into randomized attack and defense scores.

    Each stat is scaled by ``max_level`` and inflated by a jitter roll in
    ``[0, max_level - 1]``. A second roll in ``[0, ceiling]`` is then
    subtracted, so every score can drop all the way to zero.
    """

    max_level = rules.combat.max_level
    attack_ceiling = attack_stat * max_level + rng.randint(0, max_level - 1)
    defense_ceiling = defense_stat * max_level + rng.randint(0, max_level - 1)
    return (
        attack_ceiling - rng.randint(0, attack_ceiling),
        defense_ceiling - rng.randint(0, defense_ceiling),
    )


def resolve_fight(
    attacker: Card,
    defender: Card,
    direction: Direction,
    *,
    rng: IRandomSource | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> Fight:
    """Resolve ``attacker`` challenging ``defender`` located in ``direction``.

    A defender without an arrow pointing back is captured outright with both
    scores reported as zero. Otherwise the stats picked by the attacker's
    battle class are rolled against each other and ties favour the defender.

    Raises:
        InvalidDirectionError: If the attacker has no arrow towards ``direction``.
    """

    if not attacker.has_arrow(direction):
        raise InvalidDirectionError(attacker, direction)

    if not defender.has_arrow(direction.opposite()):
        logger.debug(
            "card %s captures undefended card %s from %s",
            int(attacker.id),
            int(defender.id),
            direction.name,
        )
        return Fight(attacker, defender, 0, 0, True)

    attack_stat, defense_stat = select_stats(attacker, defender)
    attack_score, defense_score = roll_scores(
        attack_stat, defense_stat, rng or _default_rng, rules
    )
    fight = Fight(attacker, defender, attack_score, defense_score, attack_score > defense_score)
    logger.debug(
        "card %s (%s) vs card %s: %s/%s -> %s/%s, attacker %s",
        int(attacker.id),
        attacker.battle_class.ui_char,
        int(defender.id),
        attack_stat,
        defense_stat,
        attack_score,
        defense_score,
        "wins" if fight.attacker_wins else "loses",
    )
    return fight
