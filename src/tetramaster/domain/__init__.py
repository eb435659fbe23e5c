"""Card combat domain.

This package hosts the pure rules of a card fight. It exposes:

* Dataclasses describing cards and fight outcomes (see :mod:`models`).
* Enumerations for battle classes and arrow directions (see :mod:`enums`).
* Rule configuration objects (see :mod:`rules_config`).
* The fight resolution rules (see :mod:`combat`).

Everything here operates in-memory; boards, turns and storage belong to the
callers.
"""

from . import combat, enums, models, rules_config

__all__ = [
    "combat",
    "enums",
    "models",
    "rules_config",
]
