"""Interactive N-body window: configuration, main loop and controls."""

from __future__ import annotations

import argparse
import sys

import pygame

from ncorps.body import Vector2D
from ncorps.config import SimulationConfig
from ncorps.config_window import ConfigWindow
from ncorps.renderer import Color, Renderer
from ncorps.simulation import Simulation

WINDOW_TITLE = "N-Body Problem Simulation"
BACKGROUND = Color(10, 10, 30, 255)
MIN_SPEED = 0.1
MAX_SPEED = 10.0
CAMERA_SPEED = 5.0
RANDOM_AREA = (800, 600)

_PRESET_KEYS = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4}
_FASTER_KEYS = {pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS}
_SLOWER_KEYS = {pygame.K_MINUS, pygame.K_KP_MINUS}
_CTRL_KEYS = {pygame.K_LCTRL, pygame.K_RCTRL}

CONTROLS = """
=== Contrôles de la Simulation ===
  ESPACE - Pause/Resume simulation
  R - Reset simulation
  T - Toggle trails
  C - Clear trails
  1-4 - Préréglages
  +/- - Ajuster vitesse
  0 - Vitesse normale
  WASD/Arrow Keys - Move camera
  Ctrl + Mouse Wheel - Zoom
  Mouse Wheel - Vitesse
  Mouse Drag - Pan camera
==============================="""


class Application:
    """Owns the simulation and the renderer and reacts to user input."""

    def __init__(self, window_width: int = 1200, window_height: int = 800, renderer: Renderer | None = None):
        if renderer is None:
            renderer = Renderer(window_width, window_height, WINDOW_TITLE)
        self.renderer = renderer
        self.config = SimulationConfig()
        self.simulation = Simulation(self.config.gravitational_constant, self.config.time_step)
        self.running = False
        self.paused = False
        self.delta_time = 0.0
        self.speed_multiplier = 1.0
        self.steps_per_frame = 1
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_pressed = False
        self._pressed: set[int] = set()
        self._last_ticks = 0

    def initialize(self) -> bool:
        if not self.renderer.initialize():
            print("Failed to initialize renderer!", file=sys.stderr)
            return False
        return True

    def show_config_dialog(self) -> bool:
        """Ask for the configuration; False if the user cancelled."""
        try:
            with ConfigWindow() as window:
                config = window.show_config_dialog()
        except RuntimeError:
            print("Failed to initialize config window!", file=sys.stderr)
            return False

        self.config = config
        if config.cancelled:
            return False
        # The dialog reused the display; give it back to the simulation window.
        if not self.renderer.initialize():
            return False
        self.apply_config(config)
        self.running = True
        self._last_ticks = pygame.time.get_ticks()
        return True

    def run(self) -> None:
        clock = pygame.time.Clock()
        while self.running:
            now = pygame.time.get_ticks()
            self.delta_time = (now - self._last_ticks) / 1000.0
            self._last_ticks = now
            self.handle_events()
            if not self.paused:
                self.update()
            self.render()
            clock.tick(60)

    def cleanup(self) -> None:
        self.renderer.cleanup()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)
        self.handle_keyboard()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._pressed.add(event.key)
            self._handle_key(event.key)
        elif event.type == pygame.KEYUP:
            self._pressed.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_pressed = True
                self.mouse_x, self.mouse_y = event.pos
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self.mouse_pressed = False
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            if self.mouse_pressed:
                drag = Vector2D(-(x - self.mouse_x), -(y - self.mouse_y))
                self.renderer.set_camera(self.renderer.camera_offset + drag, self.renderer.zoom_level)
            self.mouse_x, self.mouse_y = x, y
        elif event.type == pygame.MOUSEWHEEL:
            if self._pressed & _CTRL_KEYS:
                factor = 1.1 if event.y > 0 else 0.9
                self.renderer.set_camera(self.renderer.camera_offset, self.renderer.zoom_level * factor)
            else:
                self.adjust_speed(1.2 if event.y > 0 else 0.8)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.toggle_pause()
        elif key == pygame.K_r:
            self.reset_simulation()
        elif key == pygame.K_t:
            self.renderer.show_trails = not self.renderer.show_trails
        elif key == pygame.K_c:
            self.renderer.clear_trails()
        elif key in _PRESET_KEYS:
            self.switch_preset(_PRESET_KEYS[key])
        elif key in _FASTER_KEYS:
            self.adjust_speed(1.2)
        elif key in _SLOWER_KEYS:
            self.adjust_speed(0.8)
        elif key == pygame.K_0:
            self.set_speed_multiplier(1.0)

    def handle_keyboard(self) -> None:
        """Move the camera while direction keys are held."""
        pressed = self._pressed
        dx = dy = 0.0
        if pressed & {pygame.K_w, pygame.K_UP}:
            dy -= CAMERA_SPEED
        if pressed & {pygame.K_s, pygame.K_DOWN}:
            dy += CAMERA_SPEED
        if pressed & {pygame.K_a, pygame.K_LEFT}:
            dx -= CAMERA_SPEED
        if pressed & {pygame.K_d, pygame.K_RIGHT}:
            dx += CAMERA_SPEED
        movement = Vector2D(dx, dy)
        if movement.magnitude() > 0:
            self.renderer.set_camera(self.renderer.camera_offset + movement, self.renderer.zoom_level)

    def update(self) -> None:
        for _ in range(self.steps_per_frame):
            self.simulation.step()

    def render(self) -> None:
        self.renderer.clear(BACKGROUND)
        self.renderer.render_simulation(self.simulation)
        self.renderer.present()

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def reset_simulation(self) -> None:
        self.renderer.clear_trails()
        self.switch_preset(1)

    def switch_preset(self, preset: int) -> None:
        """Load preset 1-4; anything else loads the solar system."""
        self.renderer.clear_trails()
        if preset == 2:
            self.simulation.setup_binary_system()
        elif preset == 3:
            self.simulation.setup_random_bodies(15, *RANDOM_AREA)
        elif preset == 4:
            self.simulation.setup_galaxy_collision()
        else:
            self.simulation.setup_solar_system()
        self.renderer.set_camera(Vector2D(0, 0), 1.0)

    def _sync_steps(self) -> None:
        self.steps_per_frame = max(int(self.speed_multiplier), 1)

    def adjust_speed(self, factor: float) -> None:
        """Scale the speed, kept between 0.1 and 10."""
        self.speed_multiplier = min(max(self.speed_multiplier * factor, MIN_SPEED), MAX_SPEED)
        self._sync_steps()
        print(f"Vitesse: x{self.speed_multiplier:.1f}")

    def set_speed_multiplier(self, multiplier: float) -> None:
        self.speed_multiplier = multiplier
        self._sync_steps()
        print(f"Vitesse réinitialisée: x{self.speed_multiplier:.1f}")

    def apply_config(self, config: SimulationConfig) -> None:
        """Build a fresh simulation from ``config``."""
        self.config = config
        self.simulation = Simulation(config.gravitational_constant, config.time_step)
        if config.use_preset:
            self.switch_preset(config.preset)
        else:
            self.setup_custom_simulation(config.num_bodies, config.gravitational_constant)
        print("Configuration appliquée:")
        print(f"  Nombre de corps: {config.num_bodies}")
        print(f"  Constante G: {config.gravitational_constant:g}")
        print(f"  Pas de temps: {config.time_step:g}")

    def setup_custom_simulation(self, num_bodies: int, g: float) -> None:
        """Scatter ``num_bodies`` random bodies; ``g`` is already set on the simulation."""
        self.renderer.clear_trails()
        self.simulation.setup_random_bodies(num_bodies, *RANDOM_AREA)
        print(f"Simulation personnalisée créée avec {num_bodies} corps")
        print("Utilisez +/- ou la molette pour ajuster la vitesse")
        self.renderer.set_camera(Vector2D(0, 0), 1.0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive N-body gravity simulation.")
    parser.parse_args(argv)

    print("=== N-Body Problem Simulation ===")
    print("Lancement de la fenêtre de configuration...")

    app = Application(1200, 800)
    try:
        if not app.initialize():
            print("Failed to initialize application!", file=sys.stderr)
            return 1
        if not app.show_config_dialog():
            print("Configuration annulée ou fermée.")
            return 0
        print(CONTROLS)
        app.run()
    finally:
        app.cleanup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())