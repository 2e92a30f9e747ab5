"""Simulation settings and the state machine behind the configuration form."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field

CANCELLED_PRESET = -1
PRESET_IDS = range(1, 5)
START_BUTTON = 100
QUIT_BUTTON = 101
MAX_INPUT_LENGTH = 10

KEY_BACKSPACE = "backspace"
KEY_RETURN = "return"
KEY_KP_ENTER = "keypad enter"
KEY_ESCAPE = "escape"

DEFAULT_NUM_BODIES = 10
DEFAULT_G = 50.0
DEFAULT_TIME_STEP = 0.01

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class SimulationConfig:
    """Parameters chosen before the simulation starts."""

    num_bodies: int = DEFAULT_NUM_BODIES
    gravitational_constant: float = DEFAULT_G
    time_step: float = DEFAULT_TIME_STEP
    preset: int = 1
    use_preset: bool = True

    @property
    def cancelled(self) -> bool:
        return self.preset == CANCELLED_PRESET


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixel coordinates."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside; right and bottom edges are excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


@dataclass
class Button:
    rect: Rect
    text: str
    button_id: int
    pressed: bool = False


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group())
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    value = float(match.group())
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def _clamp(value, low, high):
    return max(low, min(high, value))


@dataclass
class ConfigForm:
    """Buttons, editable fields and the configuration they produce."""

    config: SimulationConfig = field(default_factory=SimulationConfig)
    running: bool = True
    selected_field: int | None = None
    input_active: bool = False
    input_buffer: str = ""
    buttons: list[Button] = field(init=False)
    input_fields: list[Rect] = field(init=False)
    field_labels: list[str] = field(init=False)
    field_values: list[str] = field(init=False)

    def __post_init__(self) -> None:
        self.buttons = [
            Button(Rect(50, 30, 140, 40), "Systeme Solaire", 1),
            Button(Rect(200, 30, 140, 40), "Etoiles Binaires", 2),
            Button(Rect(350, 30, 140, 40), "Corps Aleatoires", 3),
            Button(Rect(500, 30, 140, 40), "Galaxies", 4),
        ]
        self.field_labels = ["Nombre de corps:", "Constante gravitationnelle:", "Pas de temps:"]
        self.field_values = ["10", "50.0", "0.01"]
        y_offset = 80
        self.input_fields = []
        for _ in self.field_labels:
            self.input_fields.append(Rect(200, y_offset, 150, 30))
            y_offset += 50
        self.buttons.append(Button(Rect(200, y_offset + 30, 120, 50), "Demarrer", START_BUTTON))
        self.buttons.append(Button(Rect(340, y_offset + 30, 120, 50), "Quitter", QUIT_BUTTON))

    def _editing(self) -> bool:
        return (
            self.input_active
            and self.selected_field is not None
            and 0 <= self.selected_field < len(self.field_values)
        )

    def click(self, x: int, y: int) -> None:
        """Handle a left click: press buttons and select or deselect a field."""
        for button in self.buttons:
            if not button.rect.contains(x, y):
                continue
            button.pressed = True
            if button.button_id in PRESET_IDS:
                self.config.preset = button.button_id
                self.config.use_preset = True
                self.running = False
            elif button.button_id == START_BUTTON:
                self.update_config()
                self.config.use_preset = False
                self.running = False
            elif button.button_id == QUIT_BUTTON:
                self.cancel()

        self.selected_field = None
        for index, rect in enumerate(self.input_fields):
            if rect.contains(x, y):
                self.selected_field = index
                self.input_active = True
                self.input_buffer = self.field_values[index]
                break
        if self.selected_field is None:
            self.input_active = False

    def handle_text_input(self, text: str) -> None:
        """Append the first typed character if the selected field accepts it."""
        if not self._editing() or not text:
            return
        char = text[0]
        if self.selected_field == 0:
            accepted = char.isdigit() and char.isascii()
        else:
            accepted = (char.isdigit() and char.isascii()) or char in ".-"
        if accepted:
            self.input_buffer += char
        self.input_buffer = self.input_buffer[:MAX_INPUT_LENGTH]

    def handle_key_down(self, key: str) -> None:
        """Edit keys: backspace deletes, return commits, escape discards."""
        if not self._editing():
            return
        if key == KEY_BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
        elif key in (KEY_RETURN, KEY_KP_ENTER):
            self.field_values[self.selected_field] = self.input_buffer
            self.selected_field = None
            self.input_active = False
        elif key == KEY_ESCAPE:
            self.input_buffer = self.field_values[self.selected_field]
            self.selected_field = None
            self.input_active = False

    def update_config(self) -> None:
        """Read the fields into the configuration, clamped to the allowed ranges.

        Unparseable input resets all three values to their defaults.
        """
        try:
            num_bodies = _parse_int(self.field_values[0])
            g = _parse_float(self.field_values[1])
            time_step = _parse_float(self.field_values[2])
        except ValueError as exc:
            print(f"Erreur de conversion des valeurs: {exc}", file=sys.stderr)
            self.config.num_bodies = DEFAULT_NUM_BODIES
            self.config.gravitational_constant = DEFAULT_G
            self.config.time_step = DEFAULT_TIME_STEP
            return
        self.config.num_bodies = _clamp(num_bodies, 1, 100)
        self.config.gravitational_constant = _clamp(g, 0.1, 1000.0)
        self.config.time_step = _clamp(time_step, 0.001, 0.1)

    def cancel(self) -> None:
        """Close the form without starting a simulation."""
        self.running = False
        self.config.preset = CANCELLED_PRESET

    def display_text(self, index: int) -> str:
        """Text shown in field ``index``: the edit buffer while it is being edited."""
        if self.selected_field == index and self.input_active:
            return self.input_buffer
        return self.field_values[index]