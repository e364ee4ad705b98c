"""Tests for application settings."""

from greenpro.config import Settings


def test_sequence_pool_defaults():
    config = Settings(_env_file=None)

    assert config.sequence_pool_size == 5
    assert config.sequence_max_overflow == 5


def test_sequence_pool_from_environment(monkeypatch):
    monkeypatch.setenv("SEQUENCE_POOL_SIZE", "12")

    assert Settings(_env_file=None).sequence_pool_size == 12


def test_no_listen_port_setting():
    # The server binds through uvicorn's own options
    assert "port" not in Settings.model_fields
