"""
Credential data models.

Dataclasses representing registry credentials after normalization, plus the
fixed language to registry-type table used for filtering.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Optional, Dict, Mapping

from regcreds.core.languages import Language


# Registry type expected by the proxy for each language. An empty string
# means there is no established proxy type, so no filtering is applied.
LANGUAGE_TO_REGISTRY_TYPE: Mapping[Language, str] = MappingProxyType({
    Language.JAVA: "maven_repository",
    Language.CSHARP: "nuget_feed",
    Language.JAVASCRIPT: "npm_registry",
    Language.PYTHON: "python_index",
    Language.RUBY: "rubygems_server",
    Language.RUST: "cargo_registry",
    Language.GO: "goproxy_server",
    Language.ACTIONS: "",
    Language.CPP: "",
    Language.SWIFT: "",
})


@dataclass(frozen=True)
class Credential:
    """Registry credential. Carries a token or a password, never both."""

    type: Optional[str] = None
    host: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None

    @property
    def target(self) -> Optional[str]:
        """Address the proxy should match; url wins over host."""
        return self.url if self.url is not None else self.host

    @property
    def auth_kind(self) -> str:
        if self.token is not None:
            return "token"
        if self.password is not None:
            return "password"
        return "none"

    def to_dict(self) -> Dict[str, str]:
        """Serialize, dropping unset fields."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    def describe(self) -> str:
        """One-line summary without secrets."""
        parts = [self.type or "-", self.target or "-"]
        if self.username is not None:
            parts.append(self.username)
        parts.append(f"auth={self.auth_kind}")
        return " ".join(parts)

    def __repr__(self) -> str:
        # Omit secrets so the object is safe to log.
        return (
            "Credential("
            f"type={self.type!r}, "
            f"host={self.host!r}, "
            f"url={self.url!r}, "
            f"username={self.username!r}, "
            f"auth={self.auth_kind!r})"
        )

    __str__ = __repr__
