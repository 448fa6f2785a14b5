"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from jira_sync.configuration.models import DEFAULT_JIRA_ACCOUNT_FIELD_ID, DEFAULT_JIRA_EPIC_FIELD_ID

DEFAULT_CONFIG_FILE_NAME = ".jira-sync.toml"


def default_config_file() -> Path:
    """Return the default configuration file location in the user's home directory."""
    return Path.home() / DEFAULT_CONFIG_FILE_NAME


class Settings(BaseSettings):
    """Environment variable and configuration file settings for the application.

    Environment variables take precedence over the ``.env`` file, which takes
    precedence over the TOML configuration file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Generic application-wide settings
    debug: bool = False

    # GitLab API settings
    gitlab_url: str = "https://gitlab.com"
    gitlab_token: str | None = None

    # Jira API settings
    jira_url: str | None = None
    jira_username: str | None = None
    jira_password: str | None = None

    # Jira instance-specific custom field identifiers
    jira_epic_field_id: str = DEFAULT_JIRA_EPIC_FIELD_ID
    jira_account_field_id: str = DEFAULT_JIRA_ACCOUNT_FIELD_ID

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add the TOML configuration file as the lowest priority source."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings, reading the given TOML file or the default one if it exists."""
    toml_file = config_file if config_file is not None else default_config_file()

    class FileSettings(Settings):
        model_config = SettingsConfigDict(toml_file=toml_file)

    return FileSettings()
