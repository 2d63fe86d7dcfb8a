# raytracer

The building blocks of a small ray tracer, written in plain Python with no
third-party dependencies.

## What is in the package

- `raytracer.tuple.Tuple`: four-component tuples `(x, y, z, w)` used as
  points (`w == 1`, made with `Tuple.point(x, y, z)`) and vectors (`w == 0`,
  made with `Tuple.vector(x, y, z)`). Tuples support `+`, `-`, unary `-` and
  multiplication by a number. They also have `is_point()`, `is_vector()`,
  `magnitude()`, `normalize()`, `dot(other)` and `cross(other)`.
  `normalize()` always returns a vector. It raises `ZeroDivisionError` for a
  zero-length tuple. Equality compares `x`, `y` and `z` within machine
  epsilon and `w` exactly. Tuples are immutable and not hashable.
- `raytracer.color.Color`: RGB colours `(r, g, b)` with `+`, `-`,
  multiplication by a number, and component-wise multiplication by another
  colour. `Color.white()` and `Color.black()` are provided. Equality
  compares each component within machine epsilon.
- `raytracer.canvas.Canvas`: `Canvas(width, height, color=None)` is a grid
  of pixels. It is filled with `color`, or with black if no colour is given.
  `set_pixel(x, y, color)` and `get_pixel(x, y)` address a pixel by column
  and row. They raise `IndexError` for a pixel outside the canvas. A
  negative size raises `ValueError`.
- `raytracer.ppm.ppm(canvas)`: returns the canvas as the text of a
  plain-text PPM (P3) file with a maximum colour value of 255:
  - Components are scaled by 255, clamped to 0–255 and rounded half up.
  - Each canvas row starts on a new line.
  - Lines are broken so that none is longer than 70 characters.
  - The text ends with a newline.
  - A canvas of zero width raises `ValueError`.
- `raytracer.projectile`: a projectile simulation.
  - `Projectile(position, velocity)` and `Environment(gravity, wind)` hold
    the state.
  - `tick(environment, projectile)` advances the projectile by one step.
  - `trajectory(environment, projectile)` yields the projectile and its
    successors while its `y` stays above zero.
  - `plot_trajectory(canvas, projectiles, color)` paints each position onto
    a canvas, with `y` growing upwards.

## Installation

```
pip install .
```

## Example

```python
from raytracer.canvas import Canvas
from raytracer.color import Color
from raytracer.ppm import ppm

canvas = Canvas(5, 3)
canvas.set_pixel(0, 0, Color(1.0, 0.0, 0.0))
print(ppm(canvas))
```

## Projectile demo

Both forms of the command use gravity `(0, -0.1, 0)` and wind
`(-0.01, 0, 0)`.

```
raytracer-projectile positions
```

This prints each position of a projectile launched from `(0, 1, 0)` with
velocity `(1, 1, 0)`, then its final position once it reaches the ground.

```
raytracer-projectile plot
raytracer-projectile plot --output flight.ppm
```

This launches a projectile from `(0, 1, 0)` along `(1, 1.8, 0)` at speed 10.
It plots the path in red on a black 900×550 canvas and writes the image as
PPM. By default the file is `chapter_2.ppm` in the current directory.

## What it does not do

The package does not yet trace rays. It has no spheres, rays,
intersections, matrices, lights or cameras. The only image it produces is
the projectile plot.

## Running the tests

```
pip install .[test]
pytest
```