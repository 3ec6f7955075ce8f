"""Tests for environment-driven configuration."""

from config import BedrockConfig, Config, UIConfig, load_env_file


def test_defaults_run_in_demo_mode(monkeypatch):
    monkeypatch.delenv("USE_BEDROCK", raising=False)
    bedrock = BedrockConfig.from_env()
    assert bedrock.enabled is False
    assert bedrock.max_retries == 3
    assert bedrock.connect_timeout == 30
    assert bedrock.read_timeout == 60


def test_bedrock_settings_from_env(monkeypatch):
    monkeypatch.setenv("USE_BEDROCK", "TRUE")
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("BEDROCK_MODEL_ID", "my-model")
    monkeypatch.setenv("BEDROCK_MAX_TOKENS", "64")
    monkeypatch.setenv("BEDROCK_TEMPERATURE", "0.2")
    monkeypatch.setenv("BEDROCK_READ_TIMEOUT", "5")
    monkeypatch.setenv("BEDROCK_MAX_RETRIES", "1")

    bedrock = BedrockConfig.from_env()

    assert bedrock.enabled is True
    assert bedrock.region == "eu-west-1"
    assert bedrock.model_id == "my-model"
    assert bedrock.max_tokens == 64
    assert bedrock.temperature == 0.2
    assert bedrock.read_timeout == 5
    assert bedrock.max_retries == 1


def test_config_combines_sections(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("PAGE_TITLE", "Forecast Desk")

    cfg = Config.from_env()

    assert cfg.debug is True
    assert isinstance(cfg.bedrock, BedrockConfig)
    assert isinstance(cfg.ui, UIConfig)
    assert cfg.ui.page_title == "Forecast Desk"


def test_env_file_does_not_override_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "WEATHER_AGENT_TEST_A='from file'\n"
        "WEATHER_AGENT_TEST_B=from file\n"
        "EMPTY_VALUE=\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("WEATHER_AGENT_TEST_A", raising=False)
    monkeypatch.setenv("WEATHER_AGENT_TEST_B", "from env")
    monkeypatch.delenv("EMPTY_VALUE", raising=False)

    load_env_file(str(env_file))

    import os
    assert os.environ["WEATHER_AGENT_TEST_A"] == "from file"
    assert os.environ["WEATHER_AGENT_TEST_B"] == "from env"
    assert "EMPTY_VALUE" not in os.environ
    monkeypatch.delenv("WEATHER_AGENT_TEST_A")


def test_missing_env_file_is_ignored(tmp_path):
    load_env_file(str(tmp_path / "missing.env"))
