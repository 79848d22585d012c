"""
Configuration management for regcreds.

Handles loading config from ~/.regcreds/config.yaml and providing
default values for all settings.

The config file only controls *where* credential inputs are read from and
how logging/masking behave. Credential payloads themselves are never stored
here.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default paths
DEFAULT_BASE_DIR = Path.home() / ".regcreds"
DEFAULT_CONFIG_FILE = DEFAULT_BASE_DIR / "config.yaml"

# Environment variables the host platform exposes action inputs under
DEFAULT_REGISTRY_SECRETS_VAR = "INPUT_REGISTRY_SECRETS"
DEFAULT_REGISTRIES_CREDENTIALS_VAR = "INPUT_REGISTRIES_CREDENTIALS"
DEFAULT_LANGUAGE_VAR = "INPUT_LANGUAGE"


@dataclass
class InputsConfig:
    """Environment variable names for the credential sources."""

    registry_secrets_var: str = DEFAULT_REGISTRY_SECRETS_VAR
    registries_credentials_var: str = DEFAULT_REGISTRIES_CREDENTIALS_VAR
    language_var: str = DEFAULT_LANGUAGE_VAR


@dataclass
class MaskingConfig:
    """Secret masking settings."""

    enabled: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    file: Optional[Path] = None


@dataclass
class Config:
    """Main configuration container."""

    base_dir: Path = DEFAULT_BASE_DIR
    config_file: Path = DEFAULT_CONFIG_FILE

    inputs: InputsConfig = field(default_factory=InputsConfig)
    masking: MaskingConfig = field(default_factory=MaskingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to config file. If None, uses default location.
                         Can also be set via REGCREDS_CONFIG env var.

        Returns:
            Config instance with values from file merged with defaults.
        """
        if config_path is None:
            config_path = Path(
                os.environ.get("REGCREDS_CONFIG", str(DEFAULT_CONFIG_FILE))
            )

        config = cls()
        config.config_file = config_path

        # If config file doesn't exist, return defaults
        if not config_path.exists():
            return config

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config YAML: {e}")

        if not isinstance(data, dict):
            raise ValueError("Invalid config YAML: top level must be a mapping")

        if "inputs" in data:
            inputs_data = data["inputs"] or {}
            config.inputs = InputsConfig(
                registry_secrets_var=inputs_data.get(
                    "registry_secrets_var", DEFAULT_REGISTRY_SECRETS_VAR
                ),
                registries_credentials_var=inputs_data.get(
                    "registries_credentials_var", DEFAULT_REGISTRIES_CREDENTIALS_VAR
                ),
                language_var=inputs_data.get("language_var", DEFAULT_LANGUAGE_VAR),
            )

        if "masking" in data:
            masking_data = data["masking"] or {}
            config.masking = MaskingConfig(
                enabled=bool(masking_data.get("enabled", True)),
            )

        if "logging" in data:
            log_data = data["logging"] or {}
            log_file = log_data.get("file")
            config.logging = LoggingConfig(
                level=str(log_data.get("level", "INFO")).upper(),
                file=Path(log_file).expanduser() if log_file else None,
            )

        return config

    def save_default_config(self) -> bool:
        """
        Save a default config file if one doesn't exist.

        Returns:
            True if a file was written.
        """
        if self.config_file.exists():
            return False

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        default_config = f"""\
# regcreds Configuration

# =============================================================================
# Inputs
# =============================================================================
# Environment variables holding the credential sources. The base64 source
# takes precedence over the plain-text one when both are set.

inputs:
  registry_secrets_var: {self.inputs.registry_secrets_var}
  registries_credentials_var: {self.inputs.registries_credentials_var}
  language_var: {self.inputs.language_var}

# =============================================================================
# Secret Masking
# =============================================================================

masking:
  enabled: {str(self.masking.enabled).lower()}

# =============================================================================
# Logging
# =============================================================================

logging:
  level: {self.logging.level}              # DEBUG, INFO, WARNING, ERROR
"""

        with open(self.config_file, "w") as f:
            f.write(default_config)

        return True


# Singleton instance
_config: Optional[Config] = None


def get_config(reload: bool = False) -> Config:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload from file.

    Returns:
        Config instance.
    """
    global _config

    if _config is None or reload:
        _config = Config.load()

    return _config
