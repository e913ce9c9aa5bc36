import pytest

from robot_service.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ROBOT_COUNT", "MOVE_METERS", "MOVE_INTERVAL_MS", "PORT", "BACKEND_PORT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings(_env_file=None)
    assert s.robot_count == 20
    assert s.move_meters == 1.0
    assert s.move_interval_ms == 60000.0
    assert s.backend_port == 4000
    assert s.cors_origins_list == ["*"]
    assert not s.is_production


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROBOT_COUNT", "8")
    monkeypatch.setenv("MOVE_METERS", "2.5")
    monkeypatch.setenv("MOVE_INTERVAL_MS", "1000")
    monkeypatch.setenv("PORT", "5050")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    s = Settings(_env_file=None)
    assert s.robot_count == 8
    assert s.move_meters == 2.5
    assert s.move_interval_ms == 1000.0
    assert s.backend_port == 5050
    assert s.cors_origins_list == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("raw", ["0", "-4", "abc", "nan"])
def test_unusable_numbers_fall_back(monkeypatch, raw):
    monkeypatch.setenv("ROBOT_COUNT", raw)
    monkeypatch.setenv("MOVE_METERS", raw)
    monkeypatch.setenv("MOVE_INTERVAL_MS", raw)
    s = Settings(_env_file=None)
    assert s.robot_count == 20
    assert s.move_meters == 1.0
    assert s.move_interval_ms == 60000.0
