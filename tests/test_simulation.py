import math
import random

import pytest

from ncorps.body import Body, Vector2D
from ncorps.simulation import Simulation


def _momentum(sim):
    px = sum(b.mass * b.velocity.x for b in sim.bodies)
    py = sum(b.mass * b.velocity.y for b in sim.bodies)
    return px, py


def test_basic_simulation_moves_bodies():
    sim = Simulation(50.0, 0.01)
    sim.add(Vector2D(0, 0), Vector2D(0, 0), 100.0, 10.0)
    sim.add(Vector2D(100, 0), Vector2D(0, 20), 1.0, 3.0)
    assert sim.body_count == 2
    initial = sim.bodies[1].position
    for _ in range(100):
        sim.step()
    final = sim.bodies[1].position
    assert initial.x != final.x or initial.y != final.y


def test_add_body_and_len():
    sim = Simulation()
    body = Body(Vector2D(1, 2), Vector2D(), 3.0)
    sim.add_body(body)
    assert len(sim) == 1
    assert sim.bodies[0] is body


def test_add_returns_body_with_default_radius():
    sim = Simulation()
    body = sim.add(Vector2D(), Vector2D(), 1.0)
    assert body.radius == 5.0
    assert sim.bodies == [body]


def test_defaults():
    sim = Simulation()
    assert sim.gravitational_constant == 1.0
    assert sim.time_step == 0.01


def test_presets_counts():
    sim = Simulation(50.0, 0.01)
    sim.setup_solar_system()
    assert sim.body_count == 7
    sim.setup_binary_system()
    assert sim.body_count == 4
    sim.setup_random_bodies(10, 800, 600)
    assert sim.body_count == 10
    sim.setup_galaxy_collision()
    assert sim.body_count == 42


def test_solar_system_sun():
    sim = Simulation()
    sim.setup_solar_system()
    sun = sim.bodies[0]
    assert sun.mass == 1000.0
    assert sun.radius == 20.0
    assert sun.position == Vector2D(0, 0)


def test_random_bodies_within_bounds():
    sim = Simulation(rng=random.Random(7))
    sim.setup_random_bodies(50, 800, 600)
    for body in sim.bodies:
        assert -400 <= body.position.x <= 400
        assert -300 <= body.position.y <= 300
        assert -10 <= body.velocity.x <= 10
        assert 1 <= body.mass <= 20
        assert body.radius == pytest.approx(math.sqrt(body.mass) + 2)


def test_random_bodies_reproducible_with_seed():
    a = Simulation(rng=random.Random(3))
    b = Simulation(rng=random.Random(3))
    a.setup_random_bodies(5, 100, 100)
    b.setup_random_bodies(5, 100, 100)
    assert [x.position for x in a.bodies] == [x.position for x in b.bodies]


def test_galaxy_stars_near_centres():
    sim = Simulation(rng=random.Random(1))
    sim.setup_galaxy_collision()
    first, second = sim.bodies[:21], sim.bodies[21:]
    assert first[0].position == Vector2D(-200, 0)
    assert second[0].position == Vector2D(200, 0)
    for star in first[1:]:
        d = (star.position - Vector2D(-200, 0)).magnitude()
        assert 20 <= d <= 150
    for star in second[1:]:
        d = (star.position - Vector2D(200, 0)).magnitude()
        assert 20 <= d <= 150


def test_preset_replaces_bodies():
    sim = Simulation()
    sim.add(Vector2D(), Vector2D(), 1.0)
    sim.setup_binary_system()
    assert sim.body_count == 4


def test_momentum_is_conserved():
    sim = Simulation(50.0, 0.01)
    sim.setup_binary_system()
    before = _momentum(sim)
    for _ in range(200):
        sim.step()
    after = _momentum(sim)
    assert after[0] == pytest.approx(before[0], abs=1e-9)
    assert after[1] == pytest.approx(before[1], abs=1e-9)


def test_calculate_forces_opposite():
    sim = Simulation(1.0, 0.1)
    a = sim.add(Vector2D(0, 0), Vector2D(), 2.0, 1.0)
    b = sim.add(Vector2D(10, 0), Vector2D(), 3.0, 1.0)
    sim.calculate_forces()
    assert a.acceleration.x * a.mass == pytest.approx(-b.acceleration.x * b.mass)
    assert a.acceleration.x > 0
    sim.update_bodies()
    assert a.position.x > 0
    assert b.position.x < 10