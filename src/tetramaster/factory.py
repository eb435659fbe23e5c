"""Card factory.

Mints :class:`~tetramaster.domain.models.Card` instances from catalog entries.
The stat block is copied from the card type; the arrows are chosen by the
caller (deck builder, board setup or tests).

Example:
    from tetramaster.factory import create_card
    from tetramaster.repository import CardCatalog

    goblin = CardCatalog().get(0)
    card = create_card(goblin, card_id=1, owner_id=1, arrows=[Direction.N, Direction.E])
"""

from collections.abc import Iterable

from tetramaster.domain import models as dm
from tetramaster.domain.enums import Direction


def create_card(
    card_type: dm.CardType,
    card_id: int,
    owner_id: int,
    arrows: Iterable[Direction] = (),
) -> dm.Card:
    """Create a card of ``card_type`` owned by ``owner_id``.

    Args:
        card_type: Catalog entry providing the stats
        card_id: Unique identifier of the new card
        owner_id: Player owning the card
        arrows: Directions the card points to

    Returns:
        Fully initialized Card
    """
    return dm.Card(
        id=dm.CardID(card_id),
        owner_id=dm.PlayerID(owner_id),
        card_type=card_type,
        power=card_type.power,
        battle_class=card_type.battle_class,
        physical_defense=card_type.physical_defense,
        magical_defense=card_type.magical_defense,
        arrows=frozenset(arrows),
    )
