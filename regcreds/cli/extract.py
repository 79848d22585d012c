"""
Credential CLI handlers.

Handles:
    regcreds check
    regcreds export --output PATH
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from regcreds.core.config import Config, get_config
from regcreds.core.errors import ConfigurationError
from regcreds.vault.inputs import CredentialInputs, read_inputs
from regcreds.vault.masking import ActionsSecretMasker, CompositeMasker, RedactingFilter
from regcreds.vault.models import Credential
from regcreds.vault.resolver import configure_logging, get_credentials


logger = logging.getLogger(__name__)


def _setup_logging(config: Config, level_name: Optional[str]) -> RedactingFilter:
    """Attach handlers that scrub every secret found later in the run."""
    redactor = RedactingFilter()
    level = getattr(logging, level_name or config.logging.level, logging.INFO)

    handler = configure_logging(level=level, handler=logging.StreamHandler(sys.stderr))
    handler.addFilter(redactor)

    if config.logging.file:
        config.logging.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = configure_logging(
            level=level, handler=logging.FileHandler(config.logging.file)
        )
        file_handler.addFilter(redactor)

    return redactor


def _resolve_inputs(args, config: Config) -> CredentialInputs:
    """Environment inputs, with any command line values taking over."""
    inputs = read_inputs(config=config)

    if args.registry_secrets is not None:
        inputs.registry_secrets = args.registry_secrets or None
    if args.registries_credentials is not None:
        inputs.registries_credentials = args.registries_credentials or None
    if args.language is not None:
        inputs.language = args.language or None

    return inputs


def _load(args) -> List[Credential]:
    config = get_config()
    redactor = _setup_logging(config, getattr(args, "log_level", None))

    if config.masking.enabled:
        masker = CompositeMasker(ActionsSecretMasker(), redactor)
    else:
        masker = redactor

    inputs = _resolve_inputs(args, config)
    logger.debug(f"Inputs: {inputs!r}")

    return get_credentials(
        inputs.registry_secrets,
        inputs.registries_credentials,
        inputs.language,
        masker=masker,
    )


def handle_check(args) -> int:
    """Validate credentials and print a summary."""
    try:
        credentials = _load(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not credentials:
        print("No credentials configured")
        return 0

    print(f"{len(credentials)} credential(s):")
    for cred in credentials:
        print(f"  {cred.describe()}")
    return 0


def handle_export(args) -> int:
    """Write normalized credentials to a JSON file readable only by the owner."""
    try:
        credentials = _load(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = Path(args.output).expanduser()
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(output, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump([cred.to_dict() for cred in credentials], f, indent=2)
        os.chmod(output, 0o600)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Wrote {len(credentials)} credential(s) to {output}")
    print(f"✓ Exported {len(credentials)} credential(s) to {output}")
    return 0
