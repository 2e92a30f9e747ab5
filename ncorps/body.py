"""Two-dimensional vectors and point masses under Newtonian gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_G = 6.67430e-11


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / mag, self.y / mag)


@dataclass
class Body:
    """A massive disc moving in the plane."""

    position: Vector2D
    velocity: Vector2D
    mass: float
    radius: float = 5.0
    acceleration: Vector2D = field(default_factory=Vector2D)

    def apply_force(self, force: Vector2D) -> None:
        """Add the acceleration produced by ``force`` (a = F / m)."""
        self.acceleration = self.acceleration + force * (1.0 / self.mass)

    def update(self, dt: float) -> None:
        """Advance one step: velocity first, then position."""
        self.velocity = self.velocity + self.acceleration * dt
        self.position = self.position + self.velocity * dt

    def reset_acceleration(self) -> None:
        self.acceleration = Vector2D(0.0, 0.0)

    def gravitational_force(self, other: Body, g: float = DEFAULT_G) -> Vector2D:
        """Force exerted on this body by ``other``.

        The distance is never taken below the sum of both radii, which
        keeps the force finite when bodies overlap.
        """
        direction = other.position - self.position
        distance = max(direction.magnitude(), self.radius + other.radius)
        magnitude = g * self.mass * other.mass / (distance * distance)
        return direction.normalize() * magnitude