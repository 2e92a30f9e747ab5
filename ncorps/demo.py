"""Text-mode demonstration of the physics engine."""

from __future__ import annotations

import argparse
import csv
import math
from dataclasses import dataclass
from pathlib import Path

from ncorps.body import Vector2D
from ncorps.simulation import Simulation


@dataclass(frozen=True)
class PresetReport:
    """Summary of one preset run."""

    name: str
    body_count: int
    total_mass: float
    initial_energy: float
    energy_change: float


def center_of_mass(simulation: Simulation) -> Vector2D:
    """Mass-weighted mean position of all bodies."""
    total_mass = sum(body.mass for body in simulation.bodies)
    weighted = Vector2D()
    for body in simulation.bodies:
        weighted = weighted + body.position * body.mass
    return weighted * (1.0 / total_mass)


def kinetic_energy(simulation: Simulation) -> float:
    """Total kinetic energy of the system."""
    return sum(0.5 * body.mass * body.velocity.magnitude() ** 2 for body in simulation.bodies)


def demonstrate_orbit(csv_path: str | Path = "orbit_data.csv") -> tuple[float, float]:
    """Run a star and planet for 2000 steps and log the orbit to CSV.

    Returns the initial and final star-planet distance.
    """
    print("\n=== Démonstration d'Orbite Circulaire ===")
    sim = Simulation(100.0, 0.001)
    sim.add(Vector2D(0, 0), Vector2D(0, 0), 1000.0, 20.0)
    planet = sim.add(Vector2D(100, 0), Vector2D(0, 31.6), 1.0, 3.0)

    print("Configuration initiale:")
    print("  Étoile: Position(0,0), Masse=1000")
    print("  Planète: Position(100,0), Vitesse(0,31.6), Masse=1")
    print(f"  Vitesse orbitale théorique: v = sqrt(GM/r) = {math.sqrt(100.0 * 1000.0 / 100.0):g}")

    initial_distance = planet.position.magnitude()
    print("\nSimulation en cours...")

    with open(csv_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(["step", "x", "y", "distance", "velocity"])
        for step in range(2000):
            sim.step()
            pos = planet.position
            distance = pos.magnitude()
            speed = planet.velocity.magnitude()
            if step % 100 == 0:
                writer.writerow([step, f"{pos.x:g}", f"{pos.y:g}", f"{distance:g}", f"{speed:g}"])
                print(f"  Étape {step:4d}: Distance={distance:.2f}, Vitesse={speed:.2f}")

    final_distance = planet.position.magnitude()
    variation = abs(final_distance - initial_distance) / initial_distance
    print("\nRésultats:")
    print(f"  Distance initiale: {initial_distance:.2f}")
    print(f"  Distance finale: {final_distance:.2f}")
    print(f"  Variation: {variation * 100:.2f}%")
    if variation < 0.1:
        print("  ✅ Orbite stable!")
    else:
        print("  ⚠️  Orbite instable (normal pour une simulation numérique)")
    print(f"  Données sauvegardées dans {csv_path}")
    return initial_distance, final_distance


def demonstrate_chaos() -> list[Vector2D]:
    """Evolve three equal masses and report the centre of mass every 100 steps.

    Returns the initial centre of mass followed by the ten sampled ones.
    """
    print("\n=== Démonstration du Chaos Gravitationnel ===")
    sim = Simulation(50.0, 0.01)
    sim.add(Vector2D(-50, 0), Vector2D(0, 10), 100.0, 10.0)
    sim.add(Vector2D(50, 0), Vector2D(0, -10), 100.0, 10.0)
    sim.add(Vector2D(0, 50), Vector2D(-10, 0), 100.0, 10.0)

    print("Système de 3 corps identiques en formation triangulaire")
    print("Positions initiales: (-50,0), (50,0), (0,50)")

    initial = center_of_mass(sim)
    print(f"Centre de masse initial: ({initial.x:.2f}, {initial.y:.2f})")

    centers = [initial]
    for step in range(0, 1000, 100):
        for _ in range(100):
            sim.step()
        com = center_of_mass(sim)
        centers.append(com)
        print(f"Étape {step:4d}: Centre de masse({com.x:.2f}, {com.y:.2f})")

    print("✅ Conservation du moment: le centre de masse reste stable")
    return centers


def demonstrate_presets() -> list[PresetReport]:
    """Run each preset for 100 steps and report the kinetic energy change."""
    print("\n=== Test des Préréglages ===")
    sim = Simulation(50.0, 0.01)
    presets = [
        ("Système Solaire", sim.setup_solar_system),
        ("Système Binaire", sim.setup_binary_system),
        ("Collision de Galaxies", sim.setup_galaxy_collision),
    ]
    reports = []
    for name, setup in presets:
        setup()
        print(f"\n{name}:")
        print(f"  Nombre de corps: {sim.body_count}")

        total_mass = sum(body.mass for body in sim.bodies)
        energy = kinetic_energy(sim)
        print(f"  Masse totale: {total_mass:.2f}")
        print(f"  Énergie cinétique initiale: {energy:.2f}")

        for _ in range(100):
            sim.step()

        change = abs(kinetic_energy(sim) - energy) / energy * 100
        print(f"  Variation d'énergie après 100 étapes: {change:.2f}%")
        if change < 10.0:
            print("  ✅ Préréglage stable")
        else:
            print("  ⚠️  Système dynamique (normal)")
        reports.append(PresetReport(name, sim.body_count, total_mass, energy, change))
    return reports


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="N-body physics demonstration (no graphics).")
    parser.add_argument("--csv", default="orbit_data.csv", help="where to write the orbit samples")
    args = parser.parse_args(argv)

    print("🌟 DÉMONSTRATION SIMULATION N-CORPS 🌟")
    print("=======================================")
    demonstrate_orbit(args.csv)
    demonstrate_chaos()
    demonstrate_presets()
    print("\n🎉 DÉMONSTRATION TERMINÉE 🎉")
    print("La simulation fonctionne correctement!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())