"""Runtime primitives backing the Tetra Master HTTP API."""

from __future__ import annotations

import logging
import random

from tetramaster.config import Settings, get_settings
from tetramaster.domain.rules_config import CombatRules, RulesConfig
from tetramaster.interfaces import IRandomSource
from tetramaster.repository import CardCatalog, JsonCardCatalog
from tetramaster.utils.rng import seeded_rng

logger = logging.getLogger(__name__)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        catalog: CardCatalog | None = None,
        rng: IRandomSource | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = RulesConfig(combat=CombatRules(max_level=self.settings.max_level))
        self.catalog = catalog if catalog is not None else self._load_catalog()
        self.rng: IRandomSource
        if rng is not None:
            self.rng = rng
        elif self.settings.rng_seed is not None:
            self.rng = seeded_rng(self.settings.rng_seed)
        else:
            self.rng = random.Random()

    def _load_catalog(self) -> CardCatalog:
        path = self.settings.catalog_path
        if path is None:
            return CardCatalog()
        catalog = JsonCardCatalog.load(path)
        logger.info("loaded %d card types from %s", len(catalog), path)
        return catalog


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
