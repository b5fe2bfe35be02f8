# bilingual_lens/domain/languages.py
# Display metadata only. Matching never depends on the language code.

SUPPORTED_LANGUAGES: dict[str, tuple[str, str]] = {
    "ja": ("Japanese", "日本語"),
    "zh": ("Chinese (Simplified)", "简体中文"),
    "zh-TW": ("Chinese (Traditional)", "繁體中文"),
    "ko": ("Korean", "한국어"),
    "es": ("Spanish", "Español"),
    "fr": ("French", "Français"),
    "de": ("German", "Deutsch"),
    "it": ("Italian", "Italiano"),
    "pt": ("Portuguese", "Português"),
    "ru": ("Russian", "Русский"),
    "ar": ("Arabic", "العربية"),
    "hi": ("Hindi", "हिन्दी"),
    "th": ("Thai", "ไทย"),
    "vi": ("Vietnamese", "Tiếng Việt"),
    "nl": ("Dutch", "Nederlands"),
    "pl": ("Polish", "Polski"),
    "tr": ("Turkish", "Türkçe"),
    "he": ("Hebrew", "עברית"),
    "sv": ("Swedish", "Svenska"),
    "da": ("Danish", "Dansk"),
    "fi": ("Finnish", "Suomi"),
    "no": ("Norwegian", "Norsk"),
    "cs": ("Czech", "Čeština"),
    "el": ("Greek", "Ελληνικά"),
    "hu": ("Hungarian", "Magyar"),
    "ro": ("Romanian", "Română"),
    "uk": ("Ukrainian", "Українська"),
    "id": ("Indonesian", "Bahasa Indonesia"),
    "ms": ("Malay", "Bahasa Melayu"),
    "en": ("English", "English"),
}


def is_supported(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def language_name(code: str) -> str:
    """English display name, or the raw code when it is not in the table."""
    entry = SUPPORTED_LANGUAGES.get(code)
    return entry[0] if entry else code


def native_name(code: str) -> str:
    entry = SUPPORTED_LANGUAGES.get(code)
    return entry[1] if entry else code
