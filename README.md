# fractview

An interactive window for exploring three escape-time fractals: the
Mandelbrot set, Julia sets and the Phoenix fractal. The window is drawn
with pygame and is 1000 by 1000 pixels, with the name of the current
fractal written near the top.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
fractview mandelbrot
fractview julia <real> <imaginary>
fractview phoenix
```

The Julia set takes two numbers for the constant `c`, for example
`fractview julia -0.8 0.156`. Each number may have a leading sign and at
most one decimal point, and must contain at least one digit; anything
else is rejected. Values whose magnitude is 2 or more are accepted, but
a note is printed because they rarely produce an interesting picture.
The numbers replace the first of the eight preset Julia constants.

Running with no arguments, with an unknown fractal name, or with missing
or bad Julia input prints the usage text and exits with status 2. If the
window cannot be opened, the command exits with status 1.

## Controls

Keyboard:

| Key          | Action                                   |
|--------------|------------------------------------------|
| Arrow keys   | Move the view by a quarter of the zoom   |
| `d` / `a`    | Next / previous colour scheme            |
| `w` / `s`    | Next / previous preset constant          |
| `m`          | Switch to the Mandelbrot set             |
| `j`          | Switch to the Julia set                  |
| `p`          | Switch to the Phoenix fractal            |
| `Esc`        | Quit                                     |

Closing the window also quits.

Mouse:

| Button       | Action                                   |
|--------------|------------------------------------------|
| Wheel up     | Zoom in, drifting towards the pointer    |
| Wheel down   | Zoom out                                 |
| Left click   | Double the iteration limit (up to 1024)  |
| Right click  | Halve the iteration limit (down to 1)    |
| Middle click | Reset the zoom                           |

The iteration limit starts at 256. There are four colour schemes, two
built from Bernstein polynomials and two from cosine palettes, and eight
preset constants each for the Julia and Phoenix fractals.

Frames are computed in pure Python, one pixel at a time, so each redraw
of the full window takes a while; the view is only redrawn after input
changes it.

## Using it as a library

The pieces behind the viewer can be used on their own:

```python
from fractview.config import Settings
from fractview.fractals import Fractal, escape_count
from fractview.colors import coloring
from fractview.render import pixel_to_complex, render_fractal

settings = Settings(name=Fractal.JULIA.value)
count = escape_count(-0.5, 0.0, settings)   # iterations before escape
rgb = coloring(count, settings)             # 0xRRGGBB
point = pixel_to_complex(100, 100, settings, 200, 200)
pixels = render_fractal(settings, 200, 200) # rows of 0xRRGGBB, top row first
```

- `fractview.config.Settings` holds the view (offsets, zoom), the colour
  scheme, the preset index, the iteration limit and the fractal
  constants.
- `fractview.fractals` has `mandelbrot`, `julia`, `phoenix` and
  `escape_count`, which picks one by `Settings.name`.
- `fractview.colors` has `coloring`, `bernstein_polynomials` and
  `cosine_coloring`.
- `fractview.parsing.parse_arguments` builds `Settings` from command-line
  arguments and raises `UsageError` on bad input.
- `fractview.app.Viewer` applies key and mouse input to a `Settings`.

## What it does not do

It does not save pictures to files, and it has no settings file: every
run starts from the defaults and the command-line arguments.