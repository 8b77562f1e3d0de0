"""Runtime settings for jays.

Settings are read from ~/.jays/config.yaml, then overridden by
environment variables (a .env file in the working directory is loaded
first).
"""

import os
import shlex
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from jays import global_config


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_GENERATOR_COMMAND = ["jjlama"]
DEFAULT_LOG_LIMIT = 3
DEFAULT_INITIAL_COMMIT_MESSAGE = "initial commit"
DEFAULT_REMOTE_URL_TEMPLATE = "git@github.com:{user}/{repo}.git"

# Environment overrides
GENERATOR_COMMAND_ENV_VAR = "JAYS_GENERATOR_COMMAND"
LOG_LIMIT_ENV_VAR = "JAYS_LOG_LIMIT"


class GeneratorSettings(BaseModel):
    """Commit message generator settings."""

    enabled: bool = True
    command: list[str] = DEFAULT_GENERATOR_COMMAND.copy()

    @field_validator("command", mode="before")
    @classmethod
    def split_command_string(cls, v):
        """Accept a shell-style string as well as a list."""
        if isinstance(v, str):
            return shlex.split(v)
        return v

    @field_validator("command")
    @classmethod
    def require_command(cls, v):
        if not v:
            raise ValueError("generator command must not be empty")
        return v


class Settings(BaseModel):
    """Settings for one jays session."""

    generator: GeneratorSettings = GeneratorSettings()
    log_limit: int = DEFAULT_LOG_LIMIT
    initial_commit_message: str = DEFAULT_INITIAL_COMMIT_MESSAGE
    remote_url_template: str = DEFAULT_REMOTE_URL_TEMPLATE

    @field_validator("log_limit")
    @classmethod
    def positive_log_limit(cls, v):
        if v < 1:
            raise ValueError("log_limit must be at least 1")
        return v

    @field_validator("remote_url_template")
    @classmethod
    def template_has_placeholders(cls, v):
        if "{user}" not in v or "{repo}" not in v:
            raise ValueError("remote_url_template must contain {user} and {repo}")
        try:
            v.format(user="user", repo="repo")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"remote_url_template may only use {{user}} and {{repo}}: {e}"
            )
        return v

    def remote_url(self, user: str, repo: str) -> str:
        """Build the SSH URL for a newly created hosted repository."""
        return self.remote_url_template.format(user=user, repo=repo)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(data)
    command = os.environ.get(GENERATOR_COMMAND_ENV_VAR)
    if command:
        generator = data.get("generator") or {}
        if not isinstance(generator, dict):
            raise global_config.GlobalConfigError(
                "Invalid configuration: generator must be a mapping"
            )
        generator = dict(generator)
        generator["command"] = command
        data["generator"] = generator
    log_limit = os.environ.get(LOG_LIMIT_ENV_VAR)
    if log_limit:
        data["log_limit"] = log_limit
    return data


def load_config() -> Settings:
    """Load settings from the global config file and environment.

    Returns:
        Validated Settings.

    Raises:
        GlobalConfigError: If the config file is unreadable or invalid.
    """
    load_dotenv()

    data = _apply_env_overrides(global_config.load_global_config())
    try:
        return Settings(**data)
    except ValidationError as e:
        raise global_config.GlobalConfigError(f"Invalid configuration: {e}")
