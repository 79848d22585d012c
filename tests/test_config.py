import pytest

from regcreds.core.config import Config, get_config
from regcreds.vault.inputs import get_optional_input, read_inputs


def test_defaults_when_file_missing(isolated_config):
    config = Config.load()

    assert config.config_file == isolated_config
    assert config.inputs.registry_secrets_var == "INPUT_REGISTRY_SECRETS"
    assert config.masking.enabled is True
    assert config.logging.level == "INFO"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "inputs:\n"
        "  registry_secrets_var: MY_SECRETS\n"
        "  language_var: MY_LANG\n"
        "masking:\n"
        "  enabled: false\n"
        "logging:\n"
        "  level: debug\n"
        f"  file: {tmp_path / 'regcreds.log'}\n"
    )

    config = Config.load(path)

    assert config.inputs.registry_secrets_var == "MY_SECRETS"
    assert config.inputs.registries_credentials_var == "INPUT_REGISTRIES_CREDENTIALS"
    assert config.inputs.language_var == "MY_LANG"
    assert config.masking.enabled is False
    assert config.logging.level == "DEBUG"
    assert config.logging.file == tmp_path / "regcreds.log"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("inputs: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid config YAML"):
        Config.load(path)


def test_save_default_config_round_trips(isolated_config):
    config = get_config()

    assert config.save_default_config() is True
    assert config.save_default_config() is False

    loaded = Config.load(isolated_config)
    assert loaded.inputs == config.inputs
    assert loaded.masking == config.masking
    assert loaded.logging.level == "INFO"


def test_get_config_is_cached():
    assert get_config() is get_config()
    assert get_config(reload=True) is not None


def test_get_optional_input():
    env = {"A": "  value ", "B": "   ", "C": ""}

    assert get_optional_input(env, "A") == "value"
    assert get_optional_input(env, "B") is None
    assert get_optional_input(env, "C") is None
    assert get_optional_input(env, "D") is None


def test_read_inputs_uses_configured_names(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("inputs:\n  registry_secrets_var: CUSTOM\n")
    config = Config.load(path)
    env = {"CUSTOM": "[]", "INPUT_REGISTRY_SECRETS": "ignored", "INPUT_LANGUAGE": "go"}

    inputs = read_inputs(env=env, config=config)

    assert inputs.registry_secrets == "[]"
    assert inputs.registries_credentials is None
    assert inputs.language == "go"
    assert inputs.source == "registry_secrets"


def test_inputs_repr_hides_values():
    inputs = read_inputs(env={"INPUT_REGISTRIES_CREDENTIALS": "c2VjcmV0"})

    assert "c2VjcmV0" not in repr(inputs)
    assert inputs.source == "registries_credentials"
