"""Declarative rule configuration for card combat."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CombatRules:
    """Constants used when two cards fight."""

    max_level: int = 16  # stat scale and exclusive bound of the jitter roll


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    combat: CombatRules = CombatRules()


DEFAULT_RULES = RulesConfig()
