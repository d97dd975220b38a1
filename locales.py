"""
Translations for SimpleCalc
English strings are the keys; missing entries fall back to English.
"""

LANGUAGES = {
    "en": "English",
    "hi": "हिन्दी",
}

TRANSLATIONS = {
    "hi": {
        "Cannot divide by zero": "शून्य से भाग नहीं दिया जा सकता",
        "Invalid input": "अमान्य इनपुट",
        "Settings": "सेटिंग्स",
        "Dark mode": "डार्क मोड",
        "Language": "भाषा",
    },
}


def get_translator(language):
    """Return a tr(text) callable for the given language code"""
    table = TRANSLATIONS.get(language, {})

    def tr(text):
        return table.get(text, text)

    return tr
