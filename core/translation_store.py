# -*- coding: utf-8 -*-
"""Translation lookup by item id for the currently selected language."""
from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, Sequence

from core.table_loader import Rows, decode_placeholders, load_table
from infra.config import DEFAULT_DELIMITER, UNRESOLVED_LANGUAGE_INDEX
from infra.models import Language, TranslationConfig
from infra.settings import SettingsStore

logger = logging.getLogger(__name__)


class DiagnosticKind(enum.Enum):
    INFO = "info"
    LANGUAGE_NOT_FOUND = "language_not_found"
    TRANSLATION_NOT_FOUND = "translation_not_found"
    LANGUAGE_INDEX_UNRESOLVED = "language_index_unresolved"


_LOG_LEVELS = {
    DiagnosticKind.INFO: logging.INFO,
    DiagnosticKind.LANGUAGE_NOT_FOUND: logging.ERROR,
    DiagnosticKind.TRANSLATION_NOT_FOUND: logging.ERROR,
    DiagnosticKind.LANGUAGE_INDEX_UNRESOLVED: logging.ERROR,
}


class TranslationStore:
    """
    Holds the parsed table, the configured languages and the current selection.

    Build one instance at startup and hand it to whatever needs translated
    text. Lookup misses never raise: they are logged (when
    ``enable_debug_logging`` is on) and resolve to ``None`` or the fallback
    index.
    """

    def __init__(
        self,
        rows: Rows,
        config: Optional[TranslationConfig] = None,
        settings_store: Optional[SettingsStore] = None,
    ):
        self.config = config or TranslationConfig()
        self.rows = rows
        self.languages: tuple[Language, ...] = tuple(self.config.available_languages)
        self.settings_store = settings_store
        self._current: Optional[Language] = None
        self._listeners: list[Callable[[Language], None]] = []

        if self.config.auto_load_preferred_language:
            self.load_preferred_language()

    @classmethod
    def from_file(
        cls,
        path: str,
        config: Optional[TranslationConfig] = None,
        settings_store: Optional[SettingsStore] = None,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "TranslationStore":
        return cls(load_table(path, delimiter), config, settings_store)

    # ------------------------------------------------------------------ diagnostics

    def _report(self, message: str, kind: DiagnosticKind = DiagnosticKind.INFO) -> None:
        if not self.config.enable_debug_logging:
            return
        logger.log(_LOG_LEVELS[kind], "[%s] %s", kind.value, message)

    # ------------------------------------------------------------------ selection

    def select_language(self, name: str) -> Optional[Language]:
        """
        Makes the first configured language called ``name`` current and
        persists the choice. Returns the selected language, or None when no
        such language is configured (the current one is kept).
        """
        for language in self.languages:
            if language.name != name:
                continue

            changed = self._current != language
            self._current = language
            self._save_preferred_language()
            self._report(f"Language changed to: {language.name}")
            if changed:
                self._notify(language)
            return language

        self._report(
            f"No language named {name!r}. Make sure it is listed in available_languages.",
            DiagnosticKind.LANGUAGE_NOT_FOUND,
        )
        return None

    def load_preferred_language(self) -> Optional[Language]:
        """Restores the persisted language, defaulting to the first configured one."""
        if not self.languages:
            self._report("No languages configured, nothing to load.", DiagnosticKind.LANGUAGE_NOT_FOUND)
            return None

        key = self.get_current_save_path()
        default = self.languages[0].name
        loaded = default
        if self.settings_store is not None:
            try:
                loaded = self.settings_store.get(key, default)
            except OSError as exc:
                logger.warning("Could not read %r from settings: %s", key, exc)

        selected = self.select_language(loaded)
        if selected is not None:
            self._report(f"Loaded {loaded} from {key!r}")
        return selected

    def _save_preferred_language(self) -> None:
        if self.settings_store is None or self._current is None:
            return
        key = self.get_current_save_path()
        self.settings_store.set(key, self._current.name)
        self._report(f"Saved {self._current.name} to {key!r}")

    # ------------------------------------------------------------------ lookup

    def language_index(self, name: str) -> int:
        for index, language in enumerate(self.languages):
            if language.name == name:
                return index

        self._report(
            f"Could not resolve the index of language {name!r}, "
            f"using column {UNRESOLVED_LANGUAGE_INDEX}.",
            DiagnosticKind.LANGUAGE_INDEX_UNRESOLVED,
        )
        return UNRESOLVED_LANGUAGE_INDEX

    def get_translation(self, item_id: str) -> Optional[str]:
        """
        Returns the text of ``item_id`` in the current language with
        ``<semicolon>`` and ``<newline>`` decoded, or None if there is none.
        """
        if self._current is None:
            self._report(
                f"No language selected, cannot translate {item_id!r}",
                DiagnosticKind.TRANSLATION_NOT_FOUND,
            )
            return None

        for row in self.rows:
            if row[0] != item_id:
                continue
            column = self.language_index(self._current.name) + 1
            if column >= len(row):
                break
            return decode_placeholders(row[column])

        self._report(
            f"No translation for {item_id!r} in {self._current.name}",
            DiagnosticKind.TRANSLATION_NOT_FOUND,
        )
        return None

    # ------------------------------------------------------------------ accessors

    def get_current_language(self) -> Optional[Language]:
        return self._current

    def get_available_languages(self) -> Sequence[Language]:
        return self.languages

    def get_current_save_path(self) -> str:
        return self.config.preferred_language_save_key

    # ------------------------------------------------------------------ listeners

    def register_listener(self, callback: Callable[[Language], None]) -> Callable[[], None]:
        self._listeners.append(callback)

        def _unsubscribe() -> None:
            self.unregister_listener(callback)

        return _unsubscribe

    def unregister_listener(self, callback: Callable[[Language], None]) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    def _notify(self, language: Language) -> None:
        for callback in tuple(self._listeners):
            try:
                callback(language)
            except Exception:
                logger.exception("Language listener %r failed", callback)


__all__ = [
    "DiagnosticKind",
    "TranslationStore",
]
