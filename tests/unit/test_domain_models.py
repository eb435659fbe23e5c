"""Unit tests for card enums and dataclasses."""

from __future__ import annotations

import dataclasses

import pytest

from tetramaster.domain import models as dm
from tetramaster.domain.card_data import DEFAULT_CARD_TYPES
from tetramaster.domain.enums import BattleClass, Direction


def _card(**overrides) -> dm.Card:
    fields = {
        "id": dm.CardID(7),
        "owner_id": dm.PlayerID(1),
        "card_type": None,
        "power": 4,
        "battle_class": BattleClass.MAGICAL,
        "physical_defense": 2,
        "magical_defense": 3,
        "arrows": frozenset({Direction.N}),
    }
    fields.update(overrides)
    return dm.Card(**fields)


@pytest.mark.parametrize(
    ("battle_class", "tag"),
    [
        (BattleClass.PHYSICAL, "P"),
        (BattleClass.MAGICAL, "M"),
        (BattleClass.FLEXIBLE, "X"),
        (BattleClass.ASSAULT, "A"),
    ],
)
def test_battle_class_ui_char(battle_class, tag):
    assert battle_class.ui_char == tag
    assert BattleClass.from_ui_char(tag) is battle_class
    assert BattleClass.from_ui_char(tag.lower()) is battle_class


def test_unknown_battle_class_tag():
    with pytest.raises(ValueError, match="Unknown battle class tag"):
        BattleClass.from_ui_char("Z")


@pytest.mark.parametrize(
    ("direction", "opposite"),
    [
        (Direction.N, Direction.S),
        (Direction.NE, Direction.SW),
        (Direction.E, Direction.W),
        (Direction.SE, Direction.NW),
    ],
)
def test_direction_opposites(direction, opposite):
    assert direction.opposite() is opposite
    assert opposite.opposite() is direction


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_direction_offsets_cancel_out(direction):
    back = direction.opposite()
    assert (direction.dx + back.dx, direction.dy + back.dy) == (0, 0)
    assert (direction.dx, direction.dy) != (0, 0)


def test_arrows_are_normalised_to_a_set():
    card = _card(arrows=[Direction.N, Direction.E, Direction.N])

    assert card.arrows == frozenset({Direction.N, Direction.E})
    assert card.has_arrow(Direction.E)
    assert not card.has_arrow(Direction.S)


def test_card_is_immutable():
    card = _card()

    with pytest.raises(dataclasses.FrozenInstanceError):
        card.power = 10  # type: ignore[misc]


def test_cards_compare_by_value():
    assert _card() == _card()
    assert len({_card(), _card()}) == 1


def test_unopposed_fight_is_not_contested():
    attacker = _card(id=dm.CardID(1))
    defender = _card(id=dm.CardID(2))

    assert dm.Fight(attacker, defender, 0, 0, True).contested is False
    assert dm.Fight(attacker, defender, 0, 0, False).contested is True
    assert dm.Fight(attacker, defender, 5, 3, True).contested is True


def test_default_card_types_are_unique_and_on_card_scale():
    ids = [int(card_type.id) for card_type in DEFAULT_CARD_TYPES]
    assert len(ids) == len(set(ids))
    for card_type in DEFAULT_CARD_TYPES:
        for stat in (card_type.power, card_type.physical_defense, card_type.magical_defense):
            assert 0 <= stat <= 15


def test_default_card_type_face_notation():
    by_name = {card_type.name: card_type for card_type in DEFAULT_CARD_TYPES}

    goblin = by_name["Goblin"]
    assert (goblin.power, goblin.battle_class) == (0, BattleClass.PHYSICAL)

    alexander = by_name["Alexander"]
    assert alexander.battle_class is BattleClass.ASSAULT
    assert (alexander.power, alexander.physical_defense, alexander.magical_defense) == (15, 15, 15)
