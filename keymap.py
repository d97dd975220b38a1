"""
Keyboard equivalents for SimpleCalc
Maps tkinter key events (char + keysym) onto engine actions
"""

# Characters typed on the main keyboard or produced by the keypad
CHAR_ACTIONS = {
    '+': ("operator", "+"),
    '-': ("operator", "-"),
    '*': ("operator", "×"),
    '/': ("operator", "÷"),
    '.': ("dot", None),
}

# Non-printing keys, plus keypad keys that may arrive without a char
KEYSYM_ACTIONS = {
    'Delete': ("clear_entry", None),
    'BackSpace': ("backspace", None),
    'Return': ("equals", None),
    'KP_Enter': ("equals", None),
    'KP_Add': ("operator", "+"),
    'KP_Subtract': ("operator", "-"),
    'KP_Multiply': ("operator", "×"),
    'KP_Divide': ("operator", "÷"),
    'KP_Decimal': ("dot", None),
}


def key_to_event(char, keysym=""):
    """Return (action, value) for a key press, or None if the key is unbound"""
    keysym = keysym or ""
    if keysym in KEYSYM_ACTIONS:
        return KEYSYM_ACTIONS[keysym]

    if keysym.startswith("KP_") and keysym[3:].isdigit() and len(keysym) == 4:
        return ("digit", keysym[3:])

    if char and len(char) == 1:
        if char in "0123456789":
            return ("digit", char)
        if char in CHAR_ACTIONS:
            return CHAR_ACTIONS[char]
    return None
