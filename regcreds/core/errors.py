"""Error types."""


class ConfigurationError(Exception):
    """
    Raised when the supplied credential configuration is malformed.

    Messages are fixed, pre-written strings. They never carry the raw
    configuration or parser diagnostics, since either may contain secrets.
    """
