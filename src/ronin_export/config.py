"""
Exporter configuration management.

Loads the YAML configuration into dataclasses with validated defaults.

Usage:
    from ronin_export.config import ExportConfig

    config = ExportConfig.from_yaml("configs/export_config.yaml")
    print(config.api.base_url)  # https://ronin.rest
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent / "configs" / "export_config.yaml"
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ApiConfig:
    """REST API connection settings."""

    base_url: str = "https://ronin.rest"
    timeout: float = 30
    max_retries: int = 3
    backoff_factor: float = 2.0

    def __post_init__(self):
        """Validate API settings."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries <= 0:
            raise ValueError(f"max_retries must be positive, got {self.max_retries}")
        if self.backoff_factor < 0:
            raise ValueError(
                f"backoff_factor must be non-negative, got {self.backoff_factor}"
            )


@dataclass
class PaginationConfig:
    """Listing pagination settings."""

    start_page: int = 1

    def __post_init__(self):
        if self.start_page < 0:
            raise ValueError(f"start_page must be non-negative, got {self.start_page}")


@dataclass
class OutputConfig:
    """Export output settings."""

    output_dir: str = "."
    pretty: bool = False
    skip_self_transfers: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level}"
            )


@dataclass
class ExportConfig:
    """Complete exporter configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    export: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def output_dir(self) -> Path:
        """Get output directory as Path object."""
        return Path(self.export.output_dir)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "ExportConfig":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            ExportConfig instance with loaded values

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML structure is invalid
            yaml.YAMLError: If YAML parsing fails
        """
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        logger.info(f"Loading export configuration from {yaml_path}")

        with open(yaml_path, "r") as f:
            config_dict = yaml.safe_load(f)

        if not config_dict:
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        try:
            config = cls.from_dict(config_dict)
        except (TypeError, AttributeError) as e:
            raise ValueError(
                f"Invalid configuration structure in {yaml_path}: {e}"
            ) from e

        logger.debug(f"API base URL: {config.api.base_url}")
        logger.debug(f"Output directory: {config.export.output_dir}")
        return config

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ExportConfig":
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            ExportConfig instance
        """
        return cls(
            api=ApiConfig(**config_dict.get("api", {})),
            pagination=PaginationConfig(**config_dict.get("pagination", {})),
            export=OutputConfig(**config_dict.get("export", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )


def load_config(config_path: Path | None = None) -> ExportConfig:
    """
    Load exporter configuration, falling back to defaults.

    Args:
        config_path: Path to config file. Defaults to configs/export_config.yaml

    Returns:
        Loaded configuration, or the built-in defaults when no file is
        given and the default file does not exist
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.debug(f"No config file at {DEFAULT_CONFIG_PATH}, using defaults")
            return ExportConfig()
        config_path = DEFAULT_CONFIG_PATH

    return ExportConfig.from_yaml(config_path)
