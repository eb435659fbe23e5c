"""Protocol-based interfaces for the combat rules.

Exposing the contract rather than a concrete generator enables dependency
injection and deterministic testing.
"""

from tetramaster.interfaces.rng import IRandomSource

__all__ = [
    "IRandomSource",
]
