"""Tests for translations and theme configuration."""

import config
import locales


def test_english_is_identity():
    tr = locales.get_translator("en")
    assert tr("Cannot divide by zero") == "Cannot divide by zero"


def test_unknown_language_falls_back_to_english():
    tr = locales.get_translator("xx")
    assert tr("Invalid input") == "Invalid input"


def test_every_error_message_has_a_hindi_translation():
    tr = locales.get_translator("hi")
    for message in config.ERROR_MESSAGES.values():
        assert tr(message) != message


def test_get_theme_palettes_share_keys():
    assert config.get_theme(False) is config.NEU_LIGHT
    assert config.get_theme(True) is config.NEU_DARK
    assert set(config.NEU_LIGHT) == set(config.NEU_DARK)
