"""Graphical configuration dialog shown before the simulation starts."""

from __future__ import annotations

import sys

import pygame

from ncorps.config import (
    KEY_BACKSPACE,
    KEY_ESCAPE,
    KEY_KP_ENTER,
    KEY_RETURN,
    PRESET_IDS,
    Button,
    ConfigForm,
    Rect,
    SimulationConfig,
)

TITLE = "Configuration de la Simulation N-Corps"
_FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
)
_TITLE_FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"

BACKGROUND = (30, 30, 50)
WHITE = (255, 255, 255)
LABEL_COLOR = (200, 200, 200)
HINT_COLOR = (150, 150, 150)
BORDER_COLOR = (150, 150, 150)
BUTTON_ACTIVE = (100, 150, 200)
BUTTON_IDLE = (70, 70, 100)
FIELD_SELECTED = (80, 80, 120)
FIELD_IDLE = (50, 50, 70)

_KEYS = {
    pygame.K_BACKSPACE: KEY_BACKSPACE,
    pygame.K_RETURN: KEY_RETURN,
    pygame.K_KP_ENTER: KEY_KP_ENTER,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


def _load_font(paths, size: int):
    for path in paths:
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error):
            continue
    return None


def _set_text_input(active: bool) -> None:
    if not pygame.display.get_init():
        return
    if active:
        pygame.key.start_text_input()
    else:
        pygame.key.stop_text_input()


class ConfigWindow:
    """Window that lets the user pick a preset or enter custom parameters."""

    def __init__(self, width: int = 700, height: int = 500):
        self.width = width
        self.height = height
        self.form = ConfigForm()
        self._screen: pygame.Surface | None = None
        self._font = None
        self._title_font = None

    @property
    def config(self) -> SimulationConfig:
        return self.form.config

    def __enter__(self) -> ConfigWindow:
        if not self.initialize():
            raise RuntimeError("configuration window could not be created")
        return self

    def __exit__(self, *exc_info) -> None:
        self.cleanup()

    def initialize(self) -> bool:
        """Open the window and load fonts; False if the display is unavailable."""
        try:
            pygame.display.init()
            pygame.font.init()
            self._screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
        except pygame.error as exc:
            print(f"Window could not be created! SDL Error: {exc}", file=sys.stderr)
            return False

        self._font = _load_font(_FONT_PATHS, 16)
        if self._font is None:
            print("Failed to load font!", file=sys.stderr)
            print("Utilisation de la police par défaut...", file=sys.stderr)
            self._font = _load_font((None,), 16)
        self._title_font = _load_font((_TITLE_FONT_PATH,), 20) or self._font

        self.form = ConfigForm()
        return True

    def cleanup(self) -> None:
        """Release fonts and forget the window surface."""
        _set_text_input(False)
        self._font = None
        self._title_font = None
        self._screen = None
        if pygame.font.get_init():
            pygame.font.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Feed one pygame event to the form."""
        form = self.form
        if event.type == pygame.QUIT:
            form.cancel()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            form.click(*event.pos)
            _set_text_input(form.input_active)
        elif event.type == pygame.TEXTINPUT:
            form.handle_text_input(event.text)
        elif event.type == pygame.KEYDOWN:
            key = _KEYS.get(event.key)
            if key is not None and form.input_active:
                form.handle_key_down(key)
                if not form.input_active:
                    _set_text_input(False)

    def render(self) -> None:
        """Draw the whole dialog and flip the display."""
        if self._screen is None:
            raise RuntimeError("configuration window is not initialized")
        self._screen.fill(BACKGROUND)
        self._draw_text_centered(TITLE, 0, 10, self.width, WHITE, self._title_font)
        for button in self.form.buttons:
            self._draw_button(button)
        for index, label in enumerate(self.form.field_labels):
            self._draw_text(label, 20, self.form.input_fields[index].y + 8, LABEL_COLOR)
            self._draw_input_field(index)
        self._draw_text("Choisissez un prereglage ou configurez manuellement:", 20, self.height - 60, HINT_COLOR)
        self._draw_text("Vitesse reglable en jeu avec +/- ou molette", 20, self.height - 40, HINT_COLOR)
        pygame.display.flip()

    def show_config_dialog(self) -> SimulationConfig:
        """Run the dialog until the user chooses or cancels; return the result."""
        self.form.running = True
        clock = pygame.time.Clock()
        while self.form.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.render()
            clock.tick(60)
        return self.form.config

    def _render_text(self, text: str, color, font):
        font = font or self._font
        if font is None or not text:
            return None
        return font.render(text, False, color)

    def _draw_text(self, text: str, x: int, y: int, color=WHITE, font=None) -> None:
        surface = self._render_text(text, color, font)
        if surface is not None:
            self._screen.blit(surface, (x, y))

    def _draw_text_centered(self, text: str, x: int, y: int, width: int, color=WHITE, font=None) -> None:
        surface = self._render_text(text, color, font)
        if surface is not None:
            self._screen.blit(surface, (x + int((width - surface.get_width()) / 2), y))

    def _draw_button(self, button: Button) -> None:
        selected = button.button_id in PRESET_IDS and self.form.config.preset == button.button_id
        rect = _to_pygame(button.rect)
        pygame.draw.rect(self._screen, BUTTON_ACTIVE if button.pressed or selected else BUTTON_IDLE, rect)
        pygame.draw.rect(self._screen, BORDER_COLOR, rect, 1)
        surface = self._render_text(button.text, WHITE, None)
        if surface is not None:
            x = rect.x + int((rect.w - surface.get_width()) / 2)
            y = rect.y + int((rect.h - surface.get_height()) / 2)
            self._screen.blit(surface, (x, y))

    def _draw_input_field(self, index: int) -> None:
        form = self.form
        rect = _to_pygame(form.input_fields[index])
        selected = form.selected_field == index
        pygame.draw.rect(self._screen, FIELD_SELECTED if selected else FIELD_IDLE, rect)
        pygame.draw.rect(self._screen, BORDER_COLOR, rect, 1)
        self._draw_text(form.display_text(index), rect.x + 5, rect.y + 8, WHITE)
        if selected and form.input_active:
            cursor_x = rect.x + 5 + len(form.input_buffer) * 8
            pygame.draw.line(self._screen, WHITE, (cursor_x, rect.y + 5), (cursor_x, rect.y + rect.h - 5))