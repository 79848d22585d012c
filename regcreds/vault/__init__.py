"""Registry credential extraction, validation and masking."""

from regcreds.vault.models import Credential, LANGUAGE_TO_REGISTRY_TYPE
from regcreds.vault.masking import (
    SecretMasker,
    ActionsSecretMasker,
    RedactingFilter,
    CompositeMasker,
)
from regcreds.vault.inputs import CredentialInputs, read_inputs
from regcreds.vault.resolver import get_credentials, validate_record, configure_logging

__all__ = [
    "Credential",
    "LANGUAGE_TO_REGISTRY_TYPE",
    "SecretMasker",
    "ActionsSecretMasker",
    "RedactingFilter",
    "CompositeMasker",
    "CredentialInputs",
    "read_inputs",
    "get_credentials",
    "validate_record",
    "configure_logging",
]
