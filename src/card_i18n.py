"""Localized labels for the repository card."""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"

REPO_CARD_LOCALES: dict[str, dict[str, str]] = {
    "repocard.template": {
        "ar": "قالب",
        "bn": "টেমপ্লেট",
        "cn": "模板",
        "zh-tw": "模板",
        "cs": "Šablona",
        "de": "Vorlage",
        "en": "Template",
        "es": "Plantilla",
        "fr": "Modèle",
        "hu": "Sablon",
        "it": "Template",
        "ja": "テンプレート",
        "kr": "템플릿",
        "nl": "Sjabloon",
        "np": "टेम्पलेट",
        "el": "Πρότυπο",
        "pt-br": "Modelo",
        "pt-pt": "Modelo",
        "ru": "Шаблон",
        "uk-ua": "Шаблон",
        "id": "Template",
        "my": "Templat",
        "sk": "Šablóna",
        "tr": "Şablon",
        "pl": "Szablony",
        "uz": "Shablon",
        "vi": "Mẫu",
        "se": "Mall",
        "he": "תבנית",
        "fil": "Suleras",
        "th": "เทมเพลต",
        "no": "Mal",
    },
    "repocard.archived": {
        "ar": "مؤرشف",
        "bn": "আর্কাইভড",
        "cn": "已归档",
        "zh-tw": "已封存",
        "cs": "Archivováno",
        "de": "Archiviert",
        "en": "Archived",
        "es": "Archivado",
        "fr": "Archivé",
        "hu": "Archivált",
        "it": "Archiviata",
        "ja": "アーカイブ済み",
        "kr": "보관됨",
        "nl": "Gearchiveerd",
        "np": "अभिलेख राखियो",
        "el": "Αρχειοθετημένα",
        "pt-br": "Arquivados",
        "pt-pt": "Arquivados",
        "ru": "Архивирован",
        "uk-ua": "Архивований",
        "id": "Arsip",
        "my": "Arkib",
        "sk": "Archivované",
        "tr": "Arşiv",
        "pl": "Zarchiwizowano",
        "uz": "Arxivlangan",
        "vi": "Đã Lưu Trữ",
        "se": "Arkiverade",
        "he": "גנוז",
        "fil": "Naka-arkibo",
        "th": "เก็บถาวร",
        "no": "Arkivert",
    },
}


def available_locales(translations: Mapping[str, Mapping[str, str]] = REPO_CARD_LOCALES) -> set[str]:
    locales: set[str] = set()
    for table in translations.values():
        locales.update(table.keys())
    return locales


def is_locale_available(locale: str | None, translations: Mapping[str, Mapping[str, str]] = REPO_CARD_LOCALES) -> bool:
    return bool(locale) and locale.lower() in available_locales(translations)


class I18n:
    """Looks up translated strings, falling back to English for unknown locales."""

    def __init__(self, locale: str | None = None, translations: Mapping[str, Mapping[str, str]] = REPO_CARD_LOCALES):
        self.translations = translations
        self.locale = (locale or FALLBACK_LOCALE).lower()
        if not is_locale_available(self.locale, translations):
            logger.warning("Unknown locale %r, using %s", locale, FALLBACK_LOCALE)
            self.locale = FALLBACK_LOCALE

    def t(self, key: str) -> str:
        if key not in self.translations:
            raise KeyError(f"{key} translation string not found")

        table = self.translations[key]
        if self.locale in table:
            return table[self.locale]

        logger.debug("No %r translation for locale %r, using %s", key, self.locale, FALLBACK_LOCALE)
        return table[FALLBACK_LOCALE]
