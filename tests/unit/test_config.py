"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tetramaster.api.runtime import ApiState
from tetramaster.config import Settings


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TETRA_MAX_LEVEL", "4")
    monkeypatch.setenv("TETRA_RNG_SEED", "1234")
    monkeypatch.setenv("TETRA_CATALOG_PATH", str(tmp_path / "cards.json"))

    settings = Settings()

    assert settings.max_level == 4
    assert settings.rng_seed == 1234
    assert settings.catalog_path == tmp_path / "cards.json"


def test_max_level_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_level=0)


def test_seeded_state_is_reproducible():
    first = ApiState(settings=Settings(rng_seed=99))
    second = ApiState(settings=Settings(rng_seed=99))

    assert [first.rng.randint(0, 255) for _ in range(10)] == [
        second.rng.randint(0, 255) for _ in range(10)
    ]
    assert first.rules.combat.max_level == 16
