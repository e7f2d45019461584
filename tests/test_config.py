"""Tests for environment-driven generator configuration."""

import logging

import pytest

from prospect.config import GeneratorConfig, get_config, reset_config

ENV_VARS = (
    "PROSPECT_SEED",
    "PROSPECT_CURRENT_YEAR",
    "PROSPECT_DRAFT_CLASS_SIZE",
    "PROSPECT_LEAGUE_SIZE",
    "PROSPECT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


class TestGeneratorConfig:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        config = GeneratorConfig.from_env()
        assert config.seed is None
        assert config.draft_class_size == 300
        assert config.league_size == 32
        assert config.log_level == "WARNING"
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PROSPECT_SEED", "99")
        monkeypatch.setenv("PROSPECT_CURRENT_YEAR", "2030")
        monkeypatch.setenv("PROSPECT_DRAFT_CLASS_SIZE", "224")
        monkeypatch.setenv("PROSPECT_LOG_LEVEL", "debug")
        config = GeneratorConfig.from_env()
        assert config.seed == 99
        assert config.current_year == 2030
        assert config.draft_class_size == 224
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    @pytest.mark.parametrize("name", ["BASIC_FORMAT", "LOUD", "root"])
    def test_unknown_log_level_falls_back(self, monkeypatch, name):
        monkeypatch.setenv("PROSPECT_LOG_LEVEL", name)
        config = GeneratorConfig.from_env()
        assert config.logging_level == logging.WARNING
        assert config.validate()

    def test_empty_seed_is_unset(self, monkeypatch):
        monkeypatch.setenv("PROSPECT_SEED", "")
        assert GeneratorConfig.from_env().seed is None

    def test_validate_reports_every_error(self):
        config = GeneratorConfig(
            draft_class_size=0,
            league_size=-1,
            log_level="LOUD",
            current_year=1800,
        )
        errors = config.validate()
        assert len(errors) == 4
        assert any("PROSPECT_DRAFT_CLASS_SIZE" in e for e in errors)
        assert any("PROSPECT_LOG_LEVEL" in e for e in errors)

    def test_seeded_rng_reproducible(self):
        config = GeneratorConfig(seed=5)
        assert config.make_rng().random() == config.make_rng().random()


class TestConfigSingleton:
    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_config().league_size == 32
        monkeypatch.setenv("PROSPECT_LEAGUE_SIZE", "16")
        assert get_config().league_size == 32
        reset_config()
        assert get_config().league_size == 16
