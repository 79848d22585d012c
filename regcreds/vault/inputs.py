"""
Reading credential inputs from the job environment.

The host platform exposes each action input as an ``INPUT_<NAME>``
environment variable. Unset and blank inputs are treated the same way.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from regcreds.core.config import Config, get_config


@dataclass
class CredentialInputs:
    """Raw values of the three inputs. Values may hold secrets."""

    registry_secrets: Optional[str] = None
    registries_credentials: Optional[str] = None
    language: Optional[str] = None

    @property
    def source(self) -> Optional[str]:
        """Name of the input that will be used, if any."""
        if self.registries_credentials:
            return "registries_credentials"
        if self.registry_secrets:
            return "registry_secrets"
        return None

    def __repr__(self) -> str:
        return (
            "CredentialInputs("
            f"registry_secrets={'<set>' if self.registry_secrets else None}, "
            f"registries_credentials={'<set>' if self.registries_credentials else None}, "
            f"language={self.language!r})"
        )


def get_optional_input(env: Mapping[str, str], name: str) -> Optional[str]:
    """Read an input, returning None when unset or blank."""
    value = env.get(name, "").strip()
    return value or None


def read_inputs(
    env: Optional[Mapping[str, str]] = None,
    config: Optional[Config] = None,
) -> CredentialInputs:
    """
    Read the credential inputs from the environment.

    Args:
        env: Environment mapping. If None, uses os.environ.
        config: Config naming the variables. If None, uses get_config().

    Returns:
        CredentialInputs.
    """
    env = os.environ if env is None else env
    config = config or get_config()

    return CredentialInputs(
        registry_secrets=get_optional_input(env, config.inputs.registry_secrets_var),
        registries_credentials=get_optional_input(
            env, config.inputs.registries_credentials_var
        ),
        language=get_optional_input(env, config.inputs.language_var),
    )
