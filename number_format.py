"""
Number formatting for SimpleCalc displays
Every float shown on screen goes through format_number, and every entry
string is read back through parse_number.
"""
import math
from decimal import Decimal

import config


def format_number(value):
    """Render a float with up to SIGNIFICANT_DIGITS digits, never in E-notation"""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = format(value, f".{config.SIGNIFICANT_DIGITS}g")
    text = format(Decimal(rounded), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def parse_number(text):
    """Parse display text back into a float (raises ValueError)"""
    return float(text)


def standardize(text):
    """Re-normalize display text; unparsable text collapses to "0" """
    try:
        return format_number(parse_number(text))
    except ValueError:
        return "0"
