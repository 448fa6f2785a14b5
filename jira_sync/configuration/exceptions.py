"""Contains exceptions raised when reconciling application configuration."""

from pathlib import Path


class RequiredConfigurationElementError(Exception):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (set it with {cli_name} or the {env_name} environment variable)")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class ConfigurationFileNotFoundError(Exception):
    """Raised when an explicitly requested configuration file does not exist."""

    def __init__(self, path: Path) -> None:
        """Initializes the exception with the path of the missing file."""
        super().__init__(f"Configuration file not found: {path}")
        self.path = path
