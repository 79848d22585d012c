import base64
import json
import logging

import pytest

import regcreds.core.config as config_module


class RecordingMasker:
    """Masker that remembers what it was given."""

    def __init__(self):
        self.masked = []

    def mask(self, value):
        self.masked.append(value)


@pytest.fixture
def masker():
    return RecordingMasker()


@pytest.fixture
def encode():
    """Serialize a credentials list the way the base64 input carries it."""
    def _encode(data):
        return base64.b64encode(json.dumps(data).encode()).decode()
    return _encode


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at a temp file and drop the cached instance."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("REGCREDS_CONFIG", str(config_path))
    for var in ("INPUT_REGISTRY_SECRETS", "INPUT_REGISTRIES_CREDENTIALS", "INPUT_LANGUAGE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    yield config_path
    config_module._config = None


@pytest.fixture(autouse=True)
def reset_package_logger():
    package_logger = logging.getLogger("regcreds")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
