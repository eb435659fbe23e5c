from pydantic import BaseModel, Field

from tetramaster.domain import models as dm
from tetramaster.domain.enums import Direction

from .card import CardCreate, CardRead


class FightRequest(BaseModel):
    attacker: CardCreate = Field(..., description="Card starting the fight")
    defender: CardCreate = Field(..., description="Card being challenged")
    direction: Direction = Field(..., description="Where the defender sits, seen from the attacker")


class FightRead(BaseModel):
    attacker: CardRead
    defender: CardRead
    attack_score: int = Field(..., ge=0, description="Final attack score (0 when unopposed)")
    defense_score: int = Field(..., ge=0, description="Final defense score (0 when unopposed)")
    attacker_wins: bool
    contested: bool = Field(..., description="False when the defender had no counter-arrow")

    @classmethod
    def from_fight(cls, fight: dm.Fight) -> "FightRead":
        return cls(
            attacker=CardRead.from_domain(fight.attacker),
            defender=CardRead.from_domain(fight.defender),
            attack_score=fight.attack_score,
            defense_score=fight.defense_score,
            attacker_wins=fight.attacker_wins,
            contested=fight.contested,
        )
