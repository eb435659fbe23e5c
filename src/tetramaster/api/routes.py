"""HTTP routes for the Tetra Master API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from tetramaster.api.runtime import ApiState
from tetramaster.domain import models as dm
from tetramaster.domain.combat import InvalidDirectionError, resolve_fight
from tetramaster.domain.enums import BattleClass
from tetramaster.repository import UnknownCardTypeError
from tetramaster.schemas import CardCreate, CardTypeSchema, FightRead, FightRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def _to_card(card: CardCreate, state: ApiState) -> dm.Card:
    if card.card_type_id is None:
        return card.to_domain()
    try:
        card_type = state.catalog.get(card.card_type_id)
    except UnknownCardTypeError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"card type {card.card_type_id} not found",
        ) from exc
    conflicts = card.stat_conflicts(card_type)
    if conflicts:
        logger.warning(
            "card %s disagrees with card type %s on %s", card.id, card.card_type_id, conflicts
        )
        raise HTTPException(
            status_code=422,
            detail=f"card {card.id} does not match card type {card.card_type_id}: "
            f"{', '.join(conflicts)}",
        )
    return card.to_domain(card_type)


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "rules_version": state.settings.rules_version,
        "card_types": len(state.catalog),
    }


@router.get("/rules")
async def rules_overview(state: ApiStateDep) -> dict[str, object]:
    return {
        "max_level": state.rules.combat.max_level,
        "battle_classes": {battle_class.value: battle_class.ui_char for battle_class in BattleClass},
    }


@router.get("/card-types", response_model=list[CardTypeSchema])
async def list_card_types(state: ApiStateDep) -> list[CardTypeSchema]:
    return [CardTypeSchema.from_domain(card_type) for card_type in state.catalog.list_types()]


@router.get("/card-types/{type_id}", response_model=CardTypeSchema)
async def get_card_type(type_id: int, state: ApiStateDep) -> CardTypeSchema:
    try:
        card_type = state.catalog.get(type_id)
    except UnknownCardTypeError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="card type not found"
        ) from exc
    return CardTypeSchema.from_domain(card_type)


@router.post("/fights", response_model=FightRead)
async def create_fight(request: FightRequest, state: ApiStateDep) -> FightRead:
    attacker = _to_card(request.attacker, state)
    defender = _to_card(request.defender, state)
    try:
        fight = resolve_fight(
            attacker, defender, request.direction, rng=state.rng, rules=state.rules
        )
    except InvalidDirectionError as exc:
        logger.warning("rejected fight: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return FightRead.from_fight(fight)
