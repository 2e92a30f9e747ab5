"""Drawing of bodies, their trails and the camera transform."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import pairwise

import pygame

from ncorps.body import Body, Vector2D
from ncorps.simulation import Simulation

DEFAULT_TITLE = "N-Body Problem Simulation"
TRAIL_GREY = 100


@dataclass(frozen=True)
class Color:
    """RGBA colour with 8-bit channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


STAR_COLOR = Color(255, 255, 0, 255)
GIANT_COLOR = Color(255, 165, 0, 255)
LARGE_PLANET_COLOR = Color(0, 255, 0, 255)
SMALL_PLANET_COLOR = Color(100, 150, 255, 255)


def body_color(mass: float) -> Color:
    """Colour used for a body of the given mass."""
    if mass > 100:
        return STAR_COLOR
    if mass > 50:
        return GIANT_COLOR
    if mass > 10:
        return LARGE_PLANET_COLOR
    return SMALL_PLANET_COLOR


def circle_points(center_x: int, center_y: int, radius: int) -> list[tuple[int, int]]:
    """Pixels of a circle outline, traced with the midpoint algorithm."""
    points: list[tuple[int, int]] = []
    x, y, err = radius, 0, 0
    while x >= y:
        points.extend(
            (
                (center_x + x, center_y + y),
                (center_x + y, center_y + x),
                (center_x - y, center_y + x),
                (center_x - x, center_y + y),
                (center_x - x, center_y - y),
                (center_x - y, center_y - x),
                (center_x + y, center_y - x),
                (center_x + x, center_y - y),
            )
        )
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1
    return points


def disc_points(center_x: int, center_y: int, radius: int) -> Iterator[tuple[int, int]]:
    """Pixels of a filled disc, row by row from the top."""
    limit = radius * radius
    for y in range(-radius, radius + 1):
        for x in range(-radius, radius + 1):
            if x * x + y * y <= limit:
                yield (center_x + x, center_y + y)


class Renderer:
    """Draws a simulation on a pygame surface through a movable camera."""

    def __init__(
        self,
        width: int = 1200,
        height: int = 800,
        title: str = DEFAULT_TITLE,
        surface: pygame.Surface | None = None,
    ):
        self.width = width
        self.height = height
        self.title = title
        self.camera_offset = Vector2D(0.0, 0.0)
        self.zoom_level = 1.0
        self.show_trails = True
        self.max_trail_length = 100
        self.trails: list[list[Vector2D]] = []
        self._surface = surface
        self._owns_display = False

    def initialize(self) -> bool:
        """Open the display window; False if it cannot be created."""
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
            pygame.display.set_caption(self.title)
        except pygame.error as exc:
            print(f"Window could not be created! SDL Error: {exc}", file=sys.stderr)
            return False
        self._owns_display = True
        return True

    def cleanup(self) -> None:
        """Close the display window if this renderer opened it."""
        if self._owns_display:
            self._surface = None
            self._owns_display = False
            pygame.display.quit()

    def _target(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("renderer is not initialized")
        return self._surface

    def clear(self, color: Color = Color(0, 0, 0, 255)) -> None:
        self._target().fill(color.rgba)

    def present(self) -> None:
        self._target()
        if self._owns_display:
            pygame.display.flip()

    def render_simulation(self, simulation: Simulation) -> None:
        """Record trail points, then draw trails and bodies."""
        self.update_trails(simulation)
        if self.show_trails:
            self.render_trails()
        for body in simulation.bodies:
            self.render_body(body, body_color(body.mass))

    def render_body(self, body: Body, color: Color = Color(255, 255, 255, 255)) -> None:
        """Draw a filled disc with a darker outline; at least one pixel wide."""
        screen = self.world_to_screen(body.position)
        radius = max(int(body.radius * self.zoom_level), 1)
        x, y = int(screen.x), int(screen.y)
        self.fill_circle(x, y, radius, color)
        border = Color(color.r // 2, color.g // 2, color.b // 2, color.a)
        self.draw_circle(x, y, radius, border)

    def render_trails(self) -> None:
        """Draw each trail as grey segments fading out towards the oldest point."""
        surface = self._target()
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for trail in self.trails:
            count = len(trail)
            if count < 2:
                continue
            for age, (start, end) in enumerate(pairwise(trail), start=1):
                alpha = int(255.0 * age / count)
                a = self.world_to_screen(start)
                b = self.world_to_screen(end)
                pygame.draw.line(
                    overlay,
                    (TRAIL_GREY, TRAIL_GREY, TRAIL_GREY, alpha),
                    (int(a.x), int(a.y)),
                    (int(b.x), int(b.y)),
                )
        surface.blit(overlay, (0, 0))

    def fill_circle(self, center_x: int, center_y: int, radius: int, color: Color) -> None:
        surface = self._target()
        rgba = color.rgba
        for point in disc_points(center_x, center_y, radius):
            surface.set_at(point, rgba)

    def draw_circle(self, center_x: int, center_y: int, radius: int, color: Color) -> None:
        surface = self._target()
        rgba = color.rgba
        for point in circle_points(center_x, center_y, radius):
            surface.set_at(point, rgba)

    def set_camera(self, offset: Vector2D, zoom: float) -> None:
        self.camera_offset = offset
        self.zoom_level = zoom

    def world_to_screen(self, world_pos: Vector2D) -> Vector2D:
        scaled = (world_pos - self.camera_offset) * self.zoom_level
        return Vector2D(scaled.x + self.width // 2, scaled.y + self.height // 2)

    def screen_to_world(self, screen_pos: Vector2D) -> Vector2D:
        centered = Vector2D(screen_pos.x - self.width // 2, screen_pos.y - self.height // 2)
        return centered * (1.0 / self.zoom_level) + self.camera_offset

    def update_trails(self, simulation: Simulation) -> None:
        """Append each body's position to its trail, keeping trails bounded."""
        bodies = simulation.bodies
        del self.trails[len(bodies):]
        self.trails.extend([] for _ in range(len(bodies) - len(self.trails)))
        limit = max(self.max_trail_length, 0)
        for trail, body in zip(self.trails, bodies):
            trail.append(body.position)
            if len(trail) > limit:
                del trail[: len(trail) - limit]

    def clear_trails(self) -> None:
        for trail in self.trails:
            trail.clear()