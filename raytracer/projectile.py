"""Projectile flight simulation and plotting its path onto a canvas."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from raytracer.canvas import Canvas
from raytracer.color import Color
from raytracer.ppm import ppm
from raytracer.tuple import Tuple


@dataclass(frozen=True)
class Projectile:
    """A body with a position (a point) and a velocity (a vector)."""

    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    """Constant forces acting on a projectile every tick."""

    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position, velocity)


def trajectory(environment: Environment, projectile: Projectile) -> Iterator[Projectile]:
    """Yield the projectile and its successors while it stays above the ground."""
    current = projectile
    while current.position.y > 0.0:
        yield current
        current = tick(environment, current)


def _to_pixel(value: float) -> int:
    return max(0, int(value))


def plot_trajectory(canvas: Canvas, projectiles: Iterable[Projectile], color: Color) -> None:
    """Paint each projectile's position onto ``canvas``, with y growing upwards."""
    for projectile in projectiles:
        x = _to_pixel(projectile.position.x)
        y = canvas.height - _to_pixel(projectile.position.y)
        canvas.set_pixel(x, y, color)


def _default_environment() -> Environment:
    return Environment(
        gravity=Tuple.vector(0.0, -0.1, 0.0),
        wind=Tuple.vector(-0.01, 0.0, 0.0),
    )


def _print_flight() -> None:
    environment = _default_environment()
    projectile = tick(
        environment,
        Projectile(Tuple.point(0.0, 1.0, 0.0), Tuple.vector(1.0, 1.0, 0.0)),
    )
    while projectile.position.y > 0.0:
        print(f"Projectile position: {projectile.position!r}")
        projectile = tick(environment, projectile)
    print(f"Final position: {projectile.position!r}")


def _plot_flight(output: Path) -> None:
    environment = _default_environment()
    canvas = Canvas(900, 550, Color.black())
    start = Projectile(
        Tuple.point(0.0, 1.0, 0.0),
        Tuple.vector(1.0, 1.8, 0.0).normalize() * 10.0,
    )
    plot_trajectory(canvas, trajectory(environment, start), Color(1.0, 0.0, 0.0))
    output.write_text(ppm(canvas), encoding="ascii")


def main(argv: list[str] | None = None) -> int:
    """Print a projectile's flight or plot one to a PPM file."""
    parser = argparse.ArgumentParser(description="Simulate a projectile in flight.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("positions", help="print the projectile's positions")
    plot = commands.add_parser("plot", help="plot the flight to a PPM image")
    plot.add_argument(
        "-o", "--output", type=Path, default=Path("chapter_2.ppm"),
        help="file to write the image to",
    )
    args = parser.parse_args(argv)

    if args.command == "positions":
        _print_flight()
    else:
        _plot_flight(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())