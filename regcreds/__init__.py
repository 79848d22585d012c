"""
regcreds - Package registry credential extraction for build jobs.

Usage:
    regcreds check --language rust
    regcreds export --output /tmp/credentials.json
    regcreds init
"""

__version__ = "0.1.0"

from regcreds.core.config import Config, get_config
from regcreds.core.errors import ConfigurationError
from regcreds.core.languages import Language, parse_language
from regcreds.vault.models import Credential, LANGUAGE_TO_REGISTRY_TYPE
from regcreds.vault.masking import ActionsSecretMasker, RedactingFilter, CompositeMasker
from regcreds.vault.inputs import CredentialInputs, read_inputs
from regcreds.vault.resolver import get_credentials, configure_logging

__all__ = [
    # Version
    "__version__",
    # Config
    "Config",
    "get_config",
    # Errors
    "ConfigurationError",
    # Languages
    "Language",
    "parse_language",
    # Vault
    "Credential",
    "LANGUAGE_TO_REGISTRY_TYPE",
    "ActionsSecretMasker",
    "RedactingFilter",
    "CompositeMasker",
    "CredentialInputs",
    "read_inputs",
    "get_credentials",
    "configure_logging",
]
