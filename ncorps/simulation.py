"""Direct-summation N-body simulation and its preset systems."""

from __future__ import annotations

import math
import random
from itertools import combinations

from ncorps.body import Body, Vector2D


class Simulation:
    """A set of bodies attracting each other pairwise."""

    def __init__(self, g: float = 1.0, dt: float = 0.01, rng: random.Random | None = None):
        self.gravitational_constant = g
        self.time_step = dt
        self.bodies: list[Body] = []
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.bodies)

    @property
    def body_count(self) -> int:
        return len(self.bodies)

    def add_body(self, body: Body) -> None:
        self.bodies.append(body)

    def add(self, position: Vector2D, velocity: Vector2D, mass: float, radius: float = 5.0) -> Body:
        """Create a body, add it and return it."""
        body = Body(position, velocity, mass, radius)
        self.bodies.append(body)
        return body

    def step(self) -> None:
        self.calculate_forces()
        self.update_bodies()

    def calculate_forces(self) -> None:
        """Reset accelerations and apply equal and opposite pairwise forces."""
        for body in self.bodies:
            body.reset_acceleration()
        for first, second in combinations(self.bodies, 2):
            force = first.gravitational_force(second, self.gravitational_constant)
            first.apply_force(force)
            second.apply_force(force * -1.0)

    def update_bodies(self) -> None:
        for body in self.bodies:
            body.update(self.time_step)

    def setup_solar_system(self) -> None:
        self.bodies.clear()
        self.add(Vector2D(0, 0), Vector2D(0, 0), 1000.0, 20.0)
        self.add(Vector2D(100, 0), Vector2D(0, 30), 1.0, 3.0)
        self.add(Vector2D(150, 0), Vector2D(0, 25), 2.0, 4.0)
        self.add(Vector2D(200, 0), Vector2D(0, 22), 3.0, 5.0)
        self.add(Vector2D(250, 0), Vector2D(0, 18), 1.5, 4.0)
        self.add(Vector2D(350, 0), Vector2D(0, 12), 50.0, 12.0)
        self.add(Vector2D(450, 0), Vector2D(0, 10), 40.0, 10.0)

    def setup_random_bodies(self, count: int, width: float, height: float) -> None:
        """Scatter ``count`` bodies uniformly over a centred width x height box."""
        self.bodies.clear()
        rng = self._rng
        for _ in range(count):
            position = Vector2D(rng.uniform(-width / 2, width / 2), rng.uniform(-height / 2, height / 2))
            velocity = Vector2D(rng.uniform(-10, 10), rng.uniform(-10, 10))
            mass = rng.uniform(1, 20)
            self.add(position, velocity, mass, math.sqrt(mass) + 2)

    def setup_binary_system(self) -> None:
        self.bodies.clear()
        separation = 200.0
        speed = 15.0
        self.add(Vector2D(-separation / 2, 0), Vector2D(0, -speed), 100.0, 15.0)
        self.add(Vector2D(separation / 2, 0), Vector2D(0, speed), 100.0, 15.0)
        self.add(Vector2D(0, 300), Vector2D(20, 0), 2.0, 4.0)
        self.add(Vector2D(0, -300), Vector2D(-20, 0), 2.0, 4.0)

    def setup_galaxy_collision(self) -> None:
        """Two galactic cores of 20 stars each heading towards one another."""
        self.bodies.clear()
        for center, drift in ((Vector2D(-200, 0), Vector2D(5, 0)), (Vector2D(200, 0), Vector2D(-5, 0))):
            self.add(center, drift, 200.0, 20.0)
            for _ in range(20):
                r = self._rng.uniform(20, 150)
                a = self._rng.uniform(0, 2 * math.pi)
                position = center + Vector2D(r * math.cos(a), r * math.sin(a))
                velocity = Vector2D(-math.sin(a), math.cos(a)) * (math.sqrt(200.0 / r) * 0.5) + drift
                self.add(position, velocity, 2.0, 3.0)