# -*- coding: utf-8 -*-
"""
Global constants and defaults of the translation table project.
"""
import os

# === Paths ===
INFRA_DIR = os.path.dirname(os.path.abspath(__file__))   # .../project-root/infra
PROJECT_ROOT = os.path.dirname(INFRA_DIR)                # .../project-root
DATA_DIR = os.path.join(PROJECT_ROOT, "data")

TRANSLATIONS_PATH = os.path.join(DATA_DIR, "translations.csv")
CONFIG_PATH = os.path.join(DATA_DIR, "translation_config.json")
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "settings.json")

# === Table format ===
DEFAULT_DELIMITER = ";"
TABLE_ENCODING = "utf-8-sig"  # tolerates a BOM written by spreadsheet tools

# Placeholder -> decoded text, applied in this order at lookup time
PLACEHOLDERS = (
    ("<semicolon>", ";"),
    ("<newline>", "\n"),
)

# === Language preference ===
DEFAULT_SAVE_KEY = "preferred_language"
UNRESOLVED_LANGUAGE_INDEX = 0
