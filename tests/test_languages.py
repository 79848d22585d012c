import pytest

from regcreds.core.languages import Language, parse_language
from regcreds.vault.models import LANGUAGE_TO_REGISTRY_TYPE


@pytest.mark.parametrize("name,expected", [
    ("rust", Language.RUST),
    ("  Python ", Language.PYTHON),
    ("JAVA", Language.JAVA),
    ("c", Language.CPP),
    ("c++", Language.CPP),
    ("c-cpp", Language.CPP),
    ("c#", Language.CSHARP),
    ("kotlin", Language.JAVA),
    ("java-kotlin", Language.JAVA),
    ("typescript", Language.JAVASCRIPT),
    ("javascript-typescript", Language.JAVASCRIPT),
])
def test_parse_language(name, expected):
    assert parse_language(name) is expected


@pytest.mark.parametrize("name", ["", "cobol", "rust-lang"])
def test_unknown_language(name):
    assert parse_language(name) is None


def test_every_language_has_registry_type():
    assert set(LANGUAGE_TO_REGISTRY_TYPE) == set(Language)


def test_registry_type_table_is_read_only():
    with pytest.raises(TypeError):
        LANGUAGE_TO_REGISTRY_TYPE[Language.SWIFT] = "swift_registry"


def test_known_registry_types():
    assert LANGUAGE_TO_REGISTRY_TYPE[Language.RUST] == "cargo_registry"
    assert LANGUAGE_TO_REGISTRY_TYPE[Language.JAVA] == "maven_repository"
    assert LANGUAGE_TO_REGISTRY_TYPE[Language.CSHARP] == "nuget_feed"
    assert LANGUAGE_TO_REGISTRY_TYPE[Language.CPP] == ""
