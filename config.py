"""
SimpleCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "SimpleCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 340
WINDOW_HEIGHT = 520
DISPLAY_FONT = ("Consolas", 28, "bold")   # LCD/segmented-style font
FORMULA_FONT = ("Segoe UI", 12)
BUTTON_FONT = ("Segoe UI", 14)

# ── Engine limits ──────────────────────────────────────────────────────────────

# Characters allowed in the entry before a decimal point / minus sign bonus
MAX_ENTRY_DIGITS = 13

# Significant digits used whenever a float is rendered for display
SIGNIFICANT_DIGITS = 14

# Error code -> English message; locales translates from these keys
ERROR_MESSAGES = {
    "divide_by_zero": "Cannot divide by zero",
    "invalid_domain": "Invalid input",
}

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # high-contrast dark text (LCD dark on light)
    "formula_fg":   "#6E8090",
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",   # teal-green accent
    "equals_bg":    "#2E8B57",   # sea-green confirm
    "equals_fg":    "#FFFFFF",
    "disabled_fg":  "#9AA8B4",
    "danger":       "#B03A2E",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # soft green glow – LCD green-on-dark
    "formula_fg":   "#4E6070",
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "disabled_fg":  "#3A4656",
    "danger":       "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# UI preferences (theme, language) – never calculation state
SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "settings.json")
DEFAULT_LANGUAGE = "en"

# Web Portal settings
WEB_PORTAL_ENABLED = True
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
DEFAULT_SESSION = "default"

# Seconds the launcher waits before trusting the portal subprocess is up
API_STARTUP_WAIT = 1.5
