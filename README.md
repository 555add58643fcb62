# fractscope

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×600 window. You zoom with the mouse wheel and change the iteration limit
from the keyboard.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

Show the Mandelbrot set:

```
fractscope Mandelbrot
```

Show a Julia set. If you give no parameters, the constant `c = -0.7 + 0.27015i`
is used. You can also give the real and imaginary parts of `c`:

```
fractscope Julia
fractscope Julia -0.8 0.156
```

The same entry point can be run as `python -m fractscope.app`.

### Argument rules

- The fractal name must be written exactly `Mandelbrot` or `Julia`.
- `Mandelbrot` takes no parameters.
- `Julia` rejects a single parameter. When exactly two are given, they become
  the constant. In any other case the default constant is used.
- A Julia parameter may start with one `+` or `-`. After that it may hold only
  digits and dots. It must contain exactly one dot, with at most 38 characters
  after it.

When the arguments are invalid, the program prints a message to standard error
and exits without opening a window. The exit status is still 0.

### Descriptions

Before the window opens, the program prints a text description of the chosen
fractal to standard output. It reads the description from `mandelbrot.txt` or
`julia.txt` in a directory. That directory is `./descriptions` by default, and
you can set another with the `FRACTSCOPE_DESCRIPTIONS` environment variable. If
the file does not exist, nothing is printed. No description files come with the
package.

## Controls

| Input            | Action                                                   |
|------------------|----------------------------------------------------------|
| Mouse wheel up   | Zoom in by ×1.5, keeping the point under the pointer     |
| Mouse wheel down | Zoom out by ×0.5 (the scale never goes below 0.01)       |
| Up arrow         | Add 10 iterations                                        |
| Down arrow       | Remove 10 iterations (for Julia, only while above 15)    |
| Escape           | Quit                                                     |
| Window close     | Quit                                                     |

Pixels are coloured by escape time. The colour runs along a gradient through
black, blue, cyan, violet, magenta and white. Points that reach the iteration
limit are drawn black.

## Library use

You can also use the parts of the package directly:

- `fractscope.parsing.parse_arguments(args)` validates the arguments that follow
  the program name. It returns an `Arguments` value, which holds a `FractalKind`
  and an optional Julia constant. Invalid arguments raise `UsageError`.
- `fractscope.view.Settings` holds the view state: centre, scale, iteration
  limit and Julia constant. `Settings.from_arguments` builds it from an
  `Arguments` value. It has the methods `zoom_in`, `zoom_out` and
  `rescale(mouse_x, mouse_y)`.
- `fractscope.render` has these functions:
  - `mandelbrot_counts(settings)` and `julia_counts(settings)` return escape
    counts.
  - `colorize(counts, max_iteration)` maps escape counts to colours.
  - `render(settings, kind)` returns a (600, 800) numpy array of packed
    `0xRRGGBB` values.
- `fractscope.colors.get_color(iteration, max_iteration)` maps one count to a
  packed `0xRRGGBB` colour. `color_shift` blends two colours.
- `fractscope.atod.atod(text)` converts the decimal text of a parameter to a
  float.
- `fractscope.app.FractalApp` holds the state of the viewer:
  - `handle_key` and `handle_scroll` apply input.
  - `frame()` returns the current image and draws it again only after the view
    has changed.
  - `run()` opens the pygame window.

## Limitations

The viewer only shows images on screen. It cannot save images to a file, and it
cannot pan with the keyboard.