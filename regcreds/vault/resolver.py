"""
Credential Resolver - registry credential extraction and validation.

This module handles:
- Choosing between the base64 and plain-text credential inputs
- Parsing the JSON payload without leaking it on failure
- Registering every secret with the masker before validating a record
- Filtering records by the registry type of the analysed language
- Deciding whether an ambiguous secret is a token or a password

Usage:
    from regcreds.vault.resolver import get_credentials

    creds = get_credentials(
        registry_secrets=None,
        registries_credentials=encoded_blob,
        language="rust",
    )
    for cred in creds:
        print(cred.describe())
"""

import base64
import binascii
import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from regcreds.core.errors import ConfigurationError
from regcreds.core.languages import Language, parse_language
from regcreds.vault.masking import ActionsSecretMasker, SecretMasker
from regcreds.vault.models import Credential, LANGUAGE_TO_REGISTRY_TYPE


# Module logger - configure at application level
logger = logging.getLogger(__name__)

INVALID_FORMAT = "Invalid credentials format."
NOT_AN_ARRAY = "Expected credentials data to be an array of configurations, but it is not."
NOT_AN_OBJECT = "Invalid credentials - must be an object"
MISSING_TARGET = "Invalid credentials - must specify host or url"
NOT_PRINTABLE = "Invalid credentials - fields must contain only printable characters"

CHECKED_FIELDS = ("type", "host", "url", "username", "password", "token")

_PRINTABLE = re.compile(r"[\x20-\x7E]*")
_NOT_BASE64 = re.compile(r"[^A-Za-z0-9+/]")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


class RecordStatus(Enum):
    """What happened to a single credential entry."""

    ACCEPTED = "accepted"
    SKIPPED = "skipped"
    REJECTED = "rejected"


@dataclass
class RecordOutcome:
    """Result of validating one entry of the credentials array."""

    status: RecordStatus
    credential: Optional[Credential] = None
    reason: Optional[str] = None

    @classmethod
    def accepted(cls, credential: Credential) -> "RecordOutcome":
        return cls(RecordStatus.ACCEPTED, credential=credential)

    @classmethod
    def skipped(cls) -> "RecordOutcome":
        return cls(RecordStatus.SKIPPED)

    @classmethod
    def rejected(cls, reason: str) -> "RecordOutcome":
        return cls(RecordStatus.REJECTED, reason=reason)


def _is_defined(entry: Dict[str, Any], key: str) -> bool:
    return entry.get(key) is not None


def _is_printable(value: Any) -> bool:
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    return _PRINTABLE.fullmatch(value) is not None


def _as_text(value: Any) -> str:
    """Spell a value the way it appeared in the JSON input."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Unsupported constant {name}")


def _token_or_password(entry: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Pick the field the secret belongs in.

    The backend sometimes sends a token in ``password``. When it does,
    ``username`` is left out entirely, which is how the two are told apart.
    """
    # A known token always wins over the password.
    if _is_defined(entry, "token"):
        return {"token": entry["token"]}
    # No username key: the password is really a token.
    if "username" not in entry:
        return {"token": entry.get("password")}
    return {"password": entry.get("password")}


def registry_type_for(
    language: Optional[str],
    language_parser: Callable[[str], Optional[Language]] = parse_language,
) -> Optional[str]:
    """
    Registry type to filter on for a language hint.

    Returns None when there is no hint or it cannot be resolved, and "" for
    languages without an established proxy type. Both disable filtering.
    """
    if not language:
        return None
    parsed = language_parser(language)
    if parsed is None:
        return None
    return LANGUAGE_TO_REGISTRY_TYPE[parsed]


def validate_record(
    entry: Any,
    masker: SecretMasker,
    registry_type: Optional[str] = None,
) -> RecordOutcome:
    """
    Validate and normalize one entry of the credentials array.

    Secrets are registered with the masker before any check that could
    reject the entry.

    Args:
        entry: Parsed JSON value, untrusted.
        masker: Receives every password and token found.
        registry_type: Only keep entries of this type, when non-empty.

    Returns:
        RecordOutcome describing whether the entry was kept.
    """
    if not isinstance(entry, dict):
        return RecordOutcome.rejected(NOT_AN_OBJECT)

    if _is_defined(entry, "password"):
        masker.mask(_as_text(entry["password"]))
    if _is_defined(entry, "token"):
        masker.mask(_as_text(entry["token"]))

    # The proxy needs one of these; url takes precedence when both are set.
    if not _is_defined(entry, "url") and not _is_defined(entry, "host"):
        return RecordOutcome.rejected(MISSING_TARGET)

    if registry_type and entry.get("type") != registry_type:
        return RecordOutcome.skipped()

    if not all(_is_printable(entry.get(key)) for key in CHECKED_FIELDS):
        return RecordOutcome.rejected(NOT_PRINTABLE)

    return RecordOutcome.accepted(Credential(
        type=entry.get("type"),
        host=entry.get("host"),
        url=entry.get("url"),
        username=entry.get("username"),
        **_token_or_password(entry),
    ))


def _decode_base64(data: str) -> str:
    """
    Lenient base64 decode; stray characters and missing padding are tolerated.

    Decoding stops at the first ``=``, so anything concatenated after a
    padded payload is ignored rather than decoded into garbage.
    """
    data = data.split("=", 1)[0]
    cleaned = _NOT_BASE64.sub("", data.translate(_URLSAFE_TO_STANDARD))
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned).decode("utf-8", errors="replace")


def get_credentials(
    registry_secrets: Optional[str],
    registries_credentials: Optional[str],
    language: Optional[str],
    *,
    masker: Optional[SecretMasker] = None,
    language_parser: Callable[[str], Optional[Language]] = parse_language,
    log: Optional[logging.Logger] = None,
) -> List[Credential]:
    """
    Get registry credentials from the job inputs.

    ``registries_credentials`` (base64) is preferred over ``registry_secrets``
    (plain JSON). If neither is set, returns an empty list.

    Args:
        registry_secrets: JSON array of credential objects.
        registries_credentials: The same array, base64-encoded.
        language: Language hint used to filter by registry type.
        masker: Secret sink. Defaults to the workflow command masker.
        language_parser: Resolves the language hint.
        log: Logger for progress messages. Defaults to the module logger.

    Returns:
        Normalized credentials in input order.

    Raises:
        ConfigurationError: If the input is malformed. Nothing is returned
            for the other entries.
    """
    log = log or logger
    masker = masker or ActionsSecretMasker()
    registry_type = registry_type_for(language, language_parser)

    try:
        if registries_credentials:
            log.info("Using registries_credentials input.")
            credentials_str = _decode_base64(registries_credentials)
        elif registry_secrets:
            log.info("Using registry_secrets input.")
            credentials_str = registry_secrets
        else:
            log.info("No credentials defined.")
            return []

        parsed = json.loads(credentials_str, parse_constant=_reject_constant)
    except (ValueError, binascii.Error, RecursionError):
        # Don't log the error since it might contain sensitive information.
        log.error("Failed to parse the credentials data.")
        raise ConfigurationError(INVALID_FORMAT) from None

    if not isinstance(parsed, list):
        raise ConfigurationError(NOT_AN_ARRAY)

    out: List[Credential] = []
    for entry in parsed:
        outcome = validate_record(entry, masker, registry_type)
        if outcome.status is RecordStatus.REJECTED:
            raise ConfigurationError(outcome.reason)
        if outcome.status is RecordStatus.ACCEPTED:
            out.append(outcome.credential)

    log.debug(f"Resolved {len(out)} of {len(parsed)} credential(s)")
    return out


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """
    Configure logging for the regcreds package.

    Call this at application startup to enable logging.

    Args:
        level: Logging level (default: INFO).
        format_string: Optional custom format string.
        handler: Optional custom handler (default: StreamHandler).

    Returns:
        The handler that was attached, so filters can be added to it.

    Example:
        from regcreds.vault.resolver import configure_logging
        configure_logging(level=logging.DEBUG)
    """
    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(format_string))
    package_logger = logging.getLogger("regcreds")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler
