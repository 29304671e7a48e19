"""Tests for settings loading and scoring configuration."""

import dataclasses

import pytest

from reviewrot.config import ScoringConfig, Settings, load_config


class TestLoadConfig:
    """Test YAML + environment settings."""

    def test_defaults(self):
        settings = load_config(environ={})

        assert settings.provider == "google_places"
        assert settings.hot_lead_threshold == 60
        assert settings.airtable_table_name == "Leads"
        assert settings.request_timeout == 30.0
        assert not settings.provider_configured
        assert not settings.airtable_configured

    def test_environment(self):
        settings = load_config(environ={
            "GOOGLE_PLACES_API_KEY": "places-key",
            "AIRTABLE_API_KEY": "air-key",
            "AIRTABLE_BASE_ID": "appXYZ",
            "HOT_LEAD_THRESHOLD": "75",
            "REQUEST_TIMEOUT": "12.5",
        })

        assert settings.google_places_api_key == "places-key"
        assert settings.provider_configured
        assert settings.airtable_configured
        assert settings.hot_lead_threshold == 75
        assert settings.request_timeout == 12.5

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "reviewrot.yaml"
        config_file.write_text(
            "provider: serpapi\n"
            "serpapi_key: serp-key\n"
            "hot_lead_threshold: 70\n"
            "airtable_table_name: Inbound\n"
            "unknown_setting: ignored\n"
        )

        settings = load_config(str(config_file), environ={})

        assert settings.provider == "serpapi"
        assert settings.provider_configured
        assert settings.hot_lead_threshold == 70
        assert settings.airtable_table_name == "Inbound"

    def test_environment_beats_yaml(self, tmp_path):
        config_file = tmp_path / "reviewrot.yaml"
        config_file.write_text("hot_lead_threshold: 70\n")

        settings = load_config(str(config_file), environ={"HOT_LEAD_THRESHOLD": "90"})
        assert settings.hot_lead_threshold == 90

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_config(str(tmp_path / "missing.yaml"), environ={})
        assert settings == Settings()

    def test_empty_environment_values_ignored(self):
        settings = load_config(environ={"AIRTABLE_TABLE_NAME": ""})
        assert settings.airtable_table_name == "Leads"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            load_config(environ={"REVIEWROT_PROVIDER": "yelp"})

    def test_settings_are_immutable(self):
        settings = load_config(environ={})
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.hot_lead_threshold = 10


class TestOrigins:
    """Test CORS origin parsing."""

    def test_wildcard(self):
        assert Settings().origins() == ["*"]

    def test_list(self):
        settings = Settings(allowed_origins="https://a.example.com, https://b.example.com,")
        assert settings.origins() == ["https://a.example.com", "https://b.example.com"]


class TestScoringConfig:
    """Test scoring defaults."""

    def test_profile_points_total_100(self):
        assert ScoringConfig().profile_total_points == 100

    def test_weights_sum_to_one(self):
        config = ScoringConfig()
        assert config.freshness_weight + config.volume_weight + config.quality_weight == pytest.approx(1.0)
        assert (
            config.review_health_weight + config.profile_weight
            + config.photo_weight + config.response_weight
        ) == pytest.approx(1.0)


class TestProcessEnvironment:
    """Test reading os.environ when no mapping is passed."""

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/env")
        monkeypatch.setenv("REVIEWROT_PROVIDER", "serpapi")

        settings = load_config()

        assert settings.slack_webhook_url == "https://hooks.slack.com/env"
        assert settings.provider == "serpapi"
