# -*- coding: utf-8 -*-
"""
infra/models.py — Pydantic models for the translation configuration
and the load_config helper that reads it from a JSON file.
"""

from __future__ import annotations

import os
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infra.config import DEFAULT_SAVE_KEY


class Language(BaseModel):
    """A translation column, addressed by its declared name."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str


class TranslationConfig(BaseModel):
    """
    Options recognised by TranslationStore:
      {
        "enable_debug_logging": false,
        "auto_load_preferred_language": true,
        "preferred_language_save_key": "preferred_language",
        "available_languages": ["Spanish", {"name": "English"}]
      }
    """
    model_config = ConfigDict(extra="ignore")

    enable_debug_logging: bool = False
    auto_load_preferred_language: bool = True
    preferred_language_save_key: str = Field(default=DEFAULT_SAVE_KEY)
    available_languages: List[Language] = Field(default_factory=list)

    @field_validator("preferred_language_save_key", mode="before")
    @classmethod
    def _blank_key_means_default(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_SAVE_KEY
        return value

    @field_validator("available_languages", mode="before")
    @classmethod
    def _accept_plain_names(cls, value):
        # Plain strings are shorthand for {"name": ...}
        if isinstance(value, (list, tuple)):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    def language_names(self) -> List[str]:
        return [language.name for language in self.available_languages]


def load_config(path: str) -> TranslationConfig:
    """
    Reads a TranslationConfig from a JSON file.
    A missing file yields the defaults; invalid content raises ValidationError.
    """
    if not path or not os.path.exists(path):
        return TranslationConfig()
    with open(path, "r", encoding="utf-8") as fp:
        return TranslationConfig.model_validate_json(fp.read())
