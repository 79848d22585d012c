"""
Language identifiers.

Maps the free-text language names users pass to the job onto a closed set
of canonical languages.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Supported languages."""

    ACTIONS = "actions"
    CPP = "cpp"
    CSHARP = "csharp"
    GO = "go"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUBY = "ruby"
    RUST = "rust"
    SWIFT = "swift"


# Alternate spellings accepted for a canonical language
LANGUAGE_ALIASES = {
    "c": Language.CPP,
    "c++": Language.CPP,
    "c-cpp": Language.CPP,
    "c#": Language.CSHARP,
    "kotlin": Language.JAVA,
    "java-kotlin": Language.JAVA,
    "typescript": Language.JAVASCRIPT,
    "javascript-typescript": Language.JAVASCRIPT,
}


def parse_language(name: str) -> Optional[Language]:
    """
    Resolve a language name or alias.

    Args:
        name: Language name as given by the user, e.g. "Rust" or "c++".

    Returns:
        The canonical Language, or None if the name is not recognised.
    """
    normalized = name.strip().lower()

    try:
        return Language(normalized)
    except ValueError:
        pass

    if normalized in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[normalized]

    logger.debug(f"Unrecognised language: {normalized!r}")
    return None
