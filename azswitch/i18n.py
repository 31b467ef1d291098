"""UI strings for AZSwitch in English and French.

The language is picked from ``LANG`` (falling back to the locale module);
anything that is not French gets English.
"""

from __future__ import annotations

import locale
import os


class I18n:
    """Translation lookup for the current system language."""

    def __init__(self, lang: str | None = None):
        self.lang = lang or self._detect_language()
        self._translations = self._load_translations()

    def _detect_language(self) -> str:
        lang = os.environ.get('LANG', '')
        if lang:
            return 'fr' if lang.startswith('fr') else 'en'

        try:
            system_locale = locale.getlocale()[0]
        except ValueError:
            system_locale = None
        if system_locale and system_locale.startswith('fr'):
            return 'fr'
        return 'en'

    def _load_translations(self) -> dict[str, dict[str, str]]:
        return {
            'en': {
                'window_title': 'AZERTY → QWERTY',
                'caps_on': 'CAPS',
                'caps_off': 'caps',
                'shift_on': 'SHIFT',
                'shift_off': 'shift',
                'last_char': 'Last: {char}',
                'last_char_none': 'Last: –',
                'space': 'space',
            },
            'fr': {
                'window_title': 'AZERTY → QWERTY',
                'caps_on': 'VERR. MAJ',
                'caps_off': 'verr. maj',
                'shift_on': 'MAJ',
                'shift_off': 'maj',
                'last_char': 'Dernier : {char}',
                'last_char_none': 'Dernier : –',
                'space': 'espace',
            },
        }

    def t(self, key: str, **kwargs) -> str:
        """Return the translation for *key*, formatted with *kwargs*."""
        lang_map = self._translations.get(self.lang, self._translations['en'])
        text = lang_map.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    def get_lang(self) -> str:
        return self.lang


# Process-wide instance
_i18n = I18n()


def t(key: str, **kwargs) -> str:
    """Translate *key* using the process-wide instance."""
    return _i18n.t(key, **kwargs)


def get_lang() -> str:
    return _i18n.get_lang()
