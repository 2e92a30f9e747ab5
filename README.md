# ncorps

A two-dimensional N-body gravity simulation. Bodies attract one another
pairwise by Newtonian gravity and move by a simple explicit time-stepping
integrator (velocity first, then position). A pygame window lets you choose
a preset or a custom setup and then watch the system evolve. A text-mode
demonstration runs the same physics without graphics.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Interactive simulation

```
ncorps
```

A configuration window opens first. Either click one of the presets
(*Systeme Solaire*, *Etoiles Binaires*, *Corps Aleatoires*, *Galaxies*), or
fill in the three fields and click *Demarrer*:

- number of bodies, clamped to 1–100 (digits only);
- gravitational constant, clamped to 0.1–1000;
- time step, clamped to 0.001–0.1.

Click a field to edit it. Fields hold at most 10 characters. Press Enter to
keep the edited value, Escape to discard it; clicking elsewhere also drops
the edit. If a value cannot be read, all three fall back to 10 bodies,
G = 50 and dt = 0.01. *Quitter* or closing the window exits without
starting a simulation.

Controls in the simulation window:

| Key / action            | Effect                              |
|-------------------------|-------------------------------------|
| Space                   | Pause / resume                      |
| R                       | Reset to the solar system           |
| T                       | Toggle trails                       |
| C                       | Clear trails                        |
| 1–4                     | Solar system, binary stars, 15 random bodies, galaxies |
| + / -                   | Speed ×1.2 / ×0.8 (kept within ×0.1–×10) |
| 0                       | Normal speed                        |
| WASD / arrow keys       | Move camera                         |
| Ctrl + mouse wheel      | Zoom in / out                       |
| Mouse wheel             | Speed up / slow down                |
| Mouse drag              | Pan camera                          |

At speeds of ×2 and above, that many simulation steps run per frame. Bodies
are coloured by mass: yellow above 100, orange above 50, green above 10,
blue otherwise. Console messages are in French.

## Demonstration without graphics

```
ncorps-demo [--csv PATH]
```

This runs three text demonstrations:

- a circular orbit of a planet around a star over 2000 steps, with every
  100th position written to `orbit_data.csv` (or `PATH`);
- three equal masses, printing the centre of mass every 100 steps;
- the solar-system, binary and galaxy presets, each with its kinetic energy
  before and after 100 steps.

## Library use

```python
from ncorps.body import Vector2D
from ncorps.simulation import Simulation

sim = Simulation(50.0, 0.01)
sim.add(Vector2D(0, 0), Vector2D(0, 0), 100.0, 10.0)
sim.add(Vector2D(100, 0), Vector2D(0, 20), 1.0, 3.0)
for _ in range(100):
    sim.step()
print(sim.bodies[1].position)
```

- `ncorps.body`: `Vector2D` (immutable, with `+`, `-`, scalar `*`,
  `magnitude()`, `normalize()`) and `Body` (`apply_force`, `update`,
  `reset_acceleration`, `gravitational_force`). The gravitational distance
  never drops below the sum of both radii.
- `ncorps.simulation`: `Simulation(g, dt, rng=None)` with `add`,
  `add_body`, `step`, `bodies`, `body_count` and the presets
  `setup_solar_system()`, `setup_binary_system()`,
  `setup_random_bodies(count, width, height)` and
  `setup_galaxy_collision()`. Pass a `random.Random` as `rng` for
  reproducible random presets.
- `ncorps.demo`: `center_of_mass(simulation)`, `kinetic_energy(simulation)`
  and the three demonstration functions, which also return their results.
- `ncorps.config`: `SimulationConfig` and `ConfigForm`, the input handling
  behind the configuration window, usable without a display.
- `ncorps.renderer`: `Renderer`, which can draw onto any pygame `Surface`
  passed as `surface=`, plus `body_color`, `circle_points` and
  `disc_points`.

## What it does not do

The simulation window shows no text; controls are printed to the console
only. There is no collision handling or merging of bodies, and no way to
save or load a running simulation.