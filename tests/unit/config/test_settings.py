"""Unit tests for age_calculator.config.Settings."""

import importlib

import pytest
from pydantic import ValidationError


def _reload_settings_module():
    import age_calculator.config as cfg_module
    return importlib.reload(cfg_module)


@pytest.mark.unit
class TestSettings:
    def test_loads_model_arn_from_env(self, monkeypatch):
        monkeypatch.setenv("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/my-model")
        cfg_module = _reload_settings_module()
        assert cfg_module.Settings().model_arn == "arn:aws:bedrock:us-east-1::foundation-model/my-model"

    def test_model_arn_is_optional(self, monkeypatch):
        monkeypatch.delenv("MODEL_ARN", raising=False)
        from age_calculator.config import Settings
        assert Settings(_env_file=None).model_arn is None

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AGE_CALC_LANGUAGE", raising=False)
        monkeypatch.delenv("COUNTDOWN_INTERVAL_SECONDS", raising=False)
        from age_calculator.config import Settings
        s = Settings(_env_file=None)
        assert s.language == "en"
        assert s.countdown_interval_seconds == 1.0

    def test_language_from_env(self, monkeypatch):
        monkeypatch.setenv("AGE_CALC_LANGUAGE", "id")
        from age_calculator.config import Settings
        assert Settings(_env_file=None).language == "id"

    def test_case_insensitive_env_var(self, monkeypatch):
        monkeypatch.setenv("age_calc_language", "id")
        from age_calculator.config import Settings
        assert Settings(_env_file=None).language == "id"

    def test_rejects_unknown_language(self, monkeypatch):
        monkeypatch.setenv("AGE_CALC_LANGUAGE", "fr")
        from age_calculator.config import Settings
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_interval_from_env(self, monkeypatch):
        monkeypatch.setenv("COUNTDOWN_INTERVAL_SECONDS", "0.5")
        from age_calculator.config import Settings
        assert Settings(_env_file=None).countdown_interval_seconds == 0.5

    @pytest.mark.parametrize("bad", ["0", "-1", "soon"])
    def test_rejects_bad_interval(self, monkeypatch, bad):
        monkeypatch.setenv("COUNTDOWN_INTERVAL_SECONDS", bad)
        from age_calculator.config import Settings
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_settings_is_singleton_at_module_level(self):
        cfg_module = _reload_settings_module()
        assert isinstance(cfg_module.settings, cfg_module.Settings)

    def test_declared_fields(self):
        from age_calculator.config import Settings
        assert list(Settings.model_fields) == ["model_arn", "language", "countdown_interval_seconds"]

    def test_settings_rejects_extra_fields(self):
        from age_calculator.config import Settings
        with pytest.raises(ValidationError):
            Settings(_env_file=None, unexpected="bad")

    def test_env_file_encoding_is_utf8(self):
        from age_calculator.config import Settings
        assert Settings.model_config["env_file_encoding"] == "utf-8"
