import json

import pytest
from pydantic import ValidationError

from infra.models import Language, TranslationConfig, load_config


def test_defaults():
    config = TranslationConfig()
    assert config.enable_debug_logging is False
    assert config.auto_load_preferred_language is True
    assert config.preferred_language_save_key == "preferred_language"
    assert config.available_languages == []


def test_languages_from_strings_and_objects():
    config = TranslationConfig(available_languages=["Spanish", {"name": "English"}])
    assert config.available_languages == [Language(name="Spanish"), Language(name="English")]
    assert config.language_names() == ["Spanish", "English"]


@pytest.mark.parametrize("key", ["", "   ", None])
def test_blank_save_key_uses_default(key):
    assert TranslationConfig(preferred_language_save_key=key).preferred_language_save_key == "preferred_language"


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "enable_debug_logging": True,
                "available_languages": ["Spanish", "English"],
                "unused": 1,
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(path))
    assert config.enable_debug_logging is True
    assert config.language_names() == ["Spanish", "English"]


def test_load_config_missing_file(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == TranslationConfig()


def test_load_config_invalid(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"available_languages": [42]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(str(path))
