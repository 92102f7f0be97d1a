"""Configuration loading from YAML and environment.

The Slack token comes from config, from SLACK_TOKEN, or from the file named
by SLACK_TOKEN_FILE (Docker secrets). Never put real tokens in config files
committed to the repo.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG = logging.getLogger("prnotify.config")

# ${NAME} or $NAME anywhere in a string value
ENV_REFERENCE = re.compile(r"\$\{\s*(\w+)\s*\}|\$(\w+)")


class ConfigError(ValueError):
    """Raised when the YAML config has an invalid shape."""


def secret_from_env(name: str) -> str | None:
    """Return ``NAME`` from the environment, else the contents of the file at
    ``NAME_FILE``."""
    value = os.environ.get(name, "").strip()
    if value:
        return value
    secret_file = os.environ.get(f"{name}_FILE")
    if not secret_file:
        return None
    return Path(secret_file).read_text().strip() or None


class SlackConfig(BaseSettings):
    """Slack Web API settings."""

    model_config = SettingsConfigDict(env_prefix="SLACK_", extra="ignore")

    token: str | None = Field(default=None, description="Bot token (xoxb-...); use env or secret file")
    api_url: str = Field(default="https://slack.com/api", description="Web API base URL")


class WebhookConfig(BaseSettings):
    """Webhook server settings."""

    model_config = SettingsConfigDict(env_prefix="WEBHOOK_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    path: str = Field(default="/webhook/github", description="Webhook URL path")
    enabled: bool = Field(default=True, description="Enable webhook server")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Level for prnotify loggers")
    root_level: str = Field(default="WARNING", description="Level for third-party loggers")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    slack: SlackConfig = Field(default_factory=SlackConfig)
    # GitHub login -> Slack email or member ID (U.../W...)
    users: Dict[str, str] = Field(default_factory=dict)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def slack_token_resolved(self) -> str | None:
        """Slack token from config unless it is an unexpanded env reference."""
        t = self.slack.token
        if t and not ENV_REFERENCE.search(t):
            return t
        return secret_from_env("SLACK_TOKEN")


def expand_env(value: Any, env: Mapping[str, str]) -> Any:
    """Expand env references in every string of a parsed YAML tree.

    Unknown variables are left as written.
    """
    if isinstance(value, str):
        return ENV_REFERENCE.sub(lambda m: env.get(m.group(1) or m.group(2), m.group(0)), value)
    if isinstance(value, dict):
        return {k: expand_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env(v, env) for v in value]
    return value


def _users_section(raw: Any) -> Dict[str, str]:
    """Validate ``users``: GitHub login -> Slack email or member ID.

    Logins without a contact are skipped with a warning.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"users: expected a mapping of GitHub login to Slack contact, got {type(raw).__name__}")
    users: Dict[str, str] = {}
    for login, contact in raw.items():
        if contact is None or not str(contact).strip():
            LOG.warning("users: no Slack contact for %s; skipping", login)
            continue
        if not isinstance(contact, str):
            raise ConfigError(f"users.{login}: expected an email or member ID, got {type(contact).__name__}")
        users[str(login)] = contact.strip()
    return users


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name}: expected a mapping, got {type(value).__name__}")
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults. Raises ConfigError (or a pydantic
    ValidationError) for a malformed file.
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    raw = expand_env(raw, os.environ)

    return AppConfig(
        slack=SlackConfig(**_section(raw, "slack")),
        users=_users_section(raw.get("users")),
        webhook=WebhookConfig(**_section(raw, "webhook")),
        logging=LoggingConfig(**_section(raw, "logging")),
    )
