"""Tests for configuration loading (YAML + env + secret files)."""

from pathlib import Path

import pytest

from prnotify.config import AppConfig, ConfigError, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("SLACK_TOKEN", "SLACK_TOKEN_FILE", "SLACK_API_URL", "WEBHOOK_PORT", "WEBHOOK_PATH", "LOGGING_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml")

    assert isinstance(config, AppConfig)
    assert config.users == {}
    assert config.slack.api_url == "https://slack.com/api"
    assert config.webhook.port == 8000
    assert config.webhook.path == "/webhook/github"
    assert config.logging.level == "INFO"
    assert config.slack_token_resolved is None


def test_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "slack:\n"
        "  token: xoxb-file\n"
        "users:\n"
        "  foo: foo@email.com\n"
        "  bar: U024BE7LH\n"
        "webhook:\n"
        "  port: 9000\n"
        "  path: /hooks/gh\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path)

    assert config.users == {"foo": "foo@email.com", "bar": "U024BE7LH"}
    assert config.webhook.port == 9000
    assert config.webhook.path == "/hooks/gh"
    assert config.logging.level == "DEBUG"
    assert config.slack_token_resolved == "xoxb-file"


def test_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_TOKEN", "xoxb-env")
    monkeypatch.setenv("FOO_EMAIL", "foo@corp.example")
    path = tmp_path / "config.yaml"
    path.write_text("slack:\n  token: ${SLACK_TOKEN}\nusers:\n  foo: $FOO_EMAIL\n")

    config = load_config(path)

    assert config.slack.token == "xoxb-env"
    assert config.users == {"foo": "foo@corp.example"}


def test_token_from_secret_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Unresolved ${VAR} falls back to SLACK_TOKEN_FILE."""
    secret = tmp_path / "slack_token"
    secret.write_text("xoxb-secret\n")
    monkeypatch.setenv("SLACK_TOKEN_FILE", str(secret))
    path = tmp_path / "config.yaml"
    path.write_text("slack:\n  token: ${SLACK_TOKEN}\n")

    config = load_config(path)

    assert config.slack_token_resolved == "xoxb-secret"


def test_invalid_port_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("webhook:\n  port: 70000\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_env_reference_inside_string(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAIL_DOMAIN", "corp.example")
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  foo: foo@${MAIL_DOMAIN}\n  bar: bar@$UNSET_DOMAIN_VAR\n")

    config = load_config(path)

    assert config.users == {"foo": "foo@corp.example", "bar": "bar@$UNSET_DOMAIN_VAR"}


def test_users_list_rejected(tmp_path: Path) -> None:
    """users must map logins to contacts; a list is a config error."""
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  - foo\n  - bar\n")
    with pytest.raises(ConfigError, match="users"):
        load_config(path)


def test_users_empty_contact_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A login with no contact is dropped rather than mapped to "None"."""
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  foo:\n  bar: '  '\n  baz: U0BAZ\n")

    with caplog.at_level("WARNING", logger="prnotify.config"):
        config = load_config(path)

    assert config.users == {"baz": "U0BAZ"}
    assert "foo" in caplog.text
    assert "bar" in caplog.text


def test_users_non_string_contact_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  foo:\n    email: foo@email.com\n")
    with pytest.raises(ConfigError, match="users.foo"):
        load_config(path)


def test_section_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("webhook: 8000\n")
    with pytest.raises(ConfigError, match="webhook"):
        load_config(path)
