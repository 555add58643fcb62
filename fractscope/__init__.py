"""Interactive Mandelbrot and Julia set viewer: argument parsing, view state, escape-time rendering and a pygame window."""

__version__ = "1.0.0"