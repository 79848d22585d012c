"""
Secret masking.

Registers secret values with the host platform so they are scrubbed from
job output, and optionally redacts them from this process's own logs.

Usage:
    masker = CompositeMasker(ActionsSecretMasker(), RedactingFilter())
    masker.mask("hunter2")
"""

import logging
import sys
from typing import Optional, List, Protocol, TextIO


REDACTED_VALUE = "***"


def escape_command_data(value: str) -> str:
    """Escape a workflow command payload; the runner reverses this."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class SecretMasker(Protocol):
    """Anything that can be told about a secret value."""

    def mask(self, value: str) -> None:
        ...


class ActionsSecretMasker:
    """
    Registers secrets through the workflow command channel.

    The runner watches stdout for ``::add-mask::<value>`` and replaces the
    value with ``***`` in every later line of the job log.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def mask(self, value: str) -> None:
        if not value:
            return
        stream = self._stream or sys.stdout
        # The runner reads one command per line.
        for line in value.splitlines():
            if line:
                stream.write(f"::add-mask::{escape_command_data(line)}\n")
        stream.flush()


class RedactingFilter(logging.Filter):
    """
    Logging filter that replaces registered secrets with ``***``.

    Attach it to a handler, then pass it wherever a SecretMasker is
    expected so discovered secrets are registered as they are found.
    """

    def __init__(self, name: str = ""):
        super().__init__(name)
        self._secrets: List[str] = []

    @property
    def secret_count(self) -> int:
        return len(self._secrets)

    def mask(self, value: str) -> None:
        if not value or value in self._secrets:
            return
        self._secrets.append(value)
        # Longest first so a secret containing another is fully replaced.
        self._secrets.sort(key=len, reverse=True)

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, REDACTED_VALUE)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if self._secrets:
            record.msg = self.redact(record.getMessage())
            record.args = None
        return True


class CompositeMasker:
    """Forwards each registration to several maskers."""

    def __init__(self, *maskers: SecretMasker):
        self.maskers = list(maskers)

    def mask(self, value: str) -> None:
        for masker in self.maskers:
            masker.mask(value)
