"""Test fixtures: small polygons, seeded RNGs and an isolated app per module."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from robot_service.config import Settings
from robot_service.main import create_app
from robot_service.services.geo_polygon import GeoPolygon


UNIT_SQUARE = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]


@pytest.fixture
def unit_square() -> GeoPolygon:
    return GeoPolygon(UNIT_SQUARE)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def make_settings(**overrides) -> Settings:
    values = {"robot_count": 5, "move_meters": 1.0, "move_interval_ms": 60000}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(scope="module")
def client():
    app = create_app(make_settings(), rng=random.Random(7))
    with TestClient(app) as c:
        yield c
