"""
GUI for SimpleCalc
Tkinter window that forwards button and key events to the calculator engine
and mirrors its display state
"""
import json
import tkinter as tk

import config
import locales
from calculator import CalculatorEngine, SpecialOperation
from keymap import key_to_event

# (caption, action, value, kind) laid out row by row, four columns
BUTTON_LAYOUT = [
    [("%", "special", SpecialOperation.PERCENT, "operator"),
     ("CE", "clear_entry", None, "danger"),
     ("C", "clear", None, "danger"),
     ("⌫", "backspace", None, "normal")],
    [("1/x", "special", SpecialOperation.RECIPROCAL, "operator"),
     ("x²", "special", SpecialOperation.SQUARE, "operator"),
     ("√x", "special", SpecialOperation.SQUARE_ROOT, "operator"),
     ("÷", "operator", "÷", "operator")],
    [("7", "digit", "7", "normal"), ("8", "digit", "8", "normal"),
     ("9", "digit", "9", "normal"), ("×", "operator", "×", "operator")],
    [("4", "digit", "4", "normal"), ("5", "digit", "5", "normal"),
     ("6", "digit", "6", "normal"), ("-", "operator", "-", "operator")],
    [("1", "digit", "1", "normal"), ("2", "digit", "2", "normal"),
     ("3", "digit", "3", "normal"), ("+", "operator", "+", "operator")],
    [("+/-", "toggle_sign", None, "operator"), ("0", "digit", "0", "normal"),
     (".", "dot", None, "normal"), ("=", "equals", None, "equals")],
]

# Buttons locked while the engine is in an error state
OPERATION_ACTIONS = ("operator", "special", "toggle_sign", "dot")


class SimpleCalcGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")
        self.root.minsize(280, 420)

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.language = settings.get("language", config.DEFAULT_LANGUAGE)
        self.tr = locales.get_translator(self.language)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.engine = CalculatorEngine(tr=self.tr)
        self.operation_buttons = []

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.render(self.engine.snapshot())

    # ── Settings persistence ─────────────────────────────────────────────
    def _load_settings(self):
        try:
            with open(config.SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(config.SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def apply_theme(self):
        """Refresh T and the translator, then destroy+rebuild all widgets."""
        self.tr = locales.get_translator(self.language)
        self.engine.tr = self.tr
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.render(self.engine.snapshot())

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = self._dark_var.get()
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def _change_language(self, lang_code):
        """Persist language setting and apply immediately."""
        self.language = lang_code
        self._save_settings({"language": lang_code})
        self.apply_theme()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["bg_dark"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "danger":
            bg, fg, abg = T["btn_bg"], T["danger"], T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            disabledforeground=T["disabled_fg"],
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    # ── Layout ─────────────────────────────────────────────────────────────
    def create_widgets(self):
        T = self.T
        self._create_menu()

        display_frame = tk.Frame(self.root, bg=T["display_bg"])
        display_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(8, 4))

        self.formula_display = tk.Label(
            display_frame, text="", anchor=tk.E,
            font=config.FORMULA_FONT, bg=T["display_bg"], fg=T["formula_fg"])
        self.formula_display.pack(side=tk.TOP, fill=tk.X, padx=10, pady=(6, 0))

        self.display = tk.Label(
            display_frame, text="0", anchor=tk.E,
            font=config.DISPLAY_FONT, bg=T["display_bg"], fg=T["display_fg"])
        self.display.pack(side=tk.TOP, fill=tk.X, padx=10, pady=(0, 6))

        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=(4, 8))

        self.operation_buttons = []
        for r, row in enumerate(BUTTON_LAYOUT):
            keypad.rowconfigure(r, weight=1)
            for c, (caption, action, value, kind) in enumerate(row):
                keypad.columnconfigure(c, weight=1)
                btn = self._neu_btn(
                    keypad, caption, kind=kind,
                    command=lambda a=action, v=value: self.dispatch(a, v))
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
                if action in OPERATION_ACTIONS:
                    self.operation_buttons.append(btn)

    def _create_menu(self):
        menubar = tk.Menu(self.root)
        settings_menu = tk.Menu(menubar, tearoff=0)

        self._dark_var = tk.BooleanVar(value=self.dark_mode)
        settings_menu.add_checkbutton(label=self.tr("Dark mode"),
                                      variable=self._dark_var,
                                      command=self._toggle_dark_mode)

        lang_menu = tk.Menu(settings_menu, tearoff=0)
        for code, name in locales.LANGUAGES.items():
            lang_menu.add_command(label=name,
                                  command=lambda c=code: self._change_language(c))
        settings_menu.add_cascade(label=self.tr("Language"), menu=lang_menu)

        menubar.add_cascade(label=self.tr("Settings"), menu=settings_menu)
        self.root.config(menu=menubar)

    # ── Engine wiring ──────────────────────────────────────────────────────
    def dispatch(self, action, value=None):
        """Forward one input event to the engine and redraw"""
        self.render(self.engine.handle(action, value))

    def render(self, state):
        self.display.config(text=state['entry'])
        self.formula_display.config(text=state['formula'])
        btn_state = tk.NORMAL if state['operations_enabled'] else tk.DISABLED
        for btn in self.operation_buttons:
            btn.config(state=btn_state)

    def on_key_press(self, event):
        """Handle keyboard input"""
        mapped = key_to_event(event.char, event.keysym)
        if mapped is None:
            return
        self.dispatch(*mapped)
        return "break"
