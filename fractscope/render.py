"""Escape-time rendering of the Mandelbrot and Julia sets."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

import numpy as np

from fractscope.colors import get_color
from fractscope.parsing import FractalKind
from fractscope.view import HEIGHT, PLANE_SPAN, WIDTH, Settings

ESCAPE_RADIUS_SQUARED = 4.0


def plane_grid(settings: Settings) -> Tuple[np.ndarray, np.ndarray]:
    """Return the real and imaginary parts of every pixel, shaped (HEIGHT, WIDTH)."""
    xs = (np.arange(WIDTH) - WIDTH // 2) / (WIDTH * settings.scale / PLANE_SPAN)
    ys = (np.arange(HEIGHT) - HEIGHT // 2) / (HEIGHT * settings.scale / PLANE_SPAN)
    real, imag = np.meshgrid(xs + settings.center_x, ys + settings.center_y)
    return real, imag


def _escape_counts(
    z_real: np.ndarray,
    z_imag: np.ndarray,
    c_real: np.ndarray,
    c_imag: np.ndarray,
    iterations: int,
) -> np.ndarray:
    """Count the steps taken while |z| stays below 2, at most ``iterations + 1``."""
    zr = np.array(z_real, dtype=np.float64)
    zi = np.array(z_imag, dtype=np.float64)
    cr = np.broadcast_to(np.asarray(c_real, dtype=np.float64), zr.shape)
    ci = np.broadcast_to(np.asarray(c_imag, dtype=np.float64), zr.shape)
    counts = np.zeros(zr.shape, dtype=np.int64)
    active = zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED
    for _ in range(iterations + 1):
        if not active.any():
            break
        old_r = zr[active]
        old_i = zi[active]
        zr[active] = old_r * old_r - old_i * old_i + cr[active]
        zi[active] = 2.0 * old_r * old_i + ci[active]
        counts[active] += 1
        active &= zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED
    return counts


def mandelbrot_counts(settings: Settings) -> np.ndarray:
    """Escape counts for the Mandelbrot set over the current view."""
    real, imag = plane_grid(settings)
    zeros = np.zeros_like(real)
    return _escape_counts(zeros, zeros, real, imag, settings.iterations)


def julia_counts(settings: Settings) -> np.ndarray:
    """Escape counts for the Julia set of the settings' constant over the view."""
    real, imag = plane_grid(settings)
    return _escape_counts(
        real, imag, settings.julia_real, settings.julia_imag, settings.iterations
    )


def colorize(counts: np.ndarray, max_iteration: int) -> np.ndarray:
    """Map escape counts to 0xRRGGBB colours with the palette."""
    counts = np.asarray(counts)
    values, inverse = np.unique(counts, return_inverse=True)
    lookup = np.array(
        [get_color(int(value), max_iteration) for value in values], dtype=np.uint32
    )
    return lookup[inverse].reshape(counts.shape)


_COUNTERS: Dict[FractalKind, Callable[[Settings], np.ndarray]] = {
    FractalKind.MANDELBROT: mandelbrot_counts,
    FractalKind.JULIA: julia_counts,
}


def render(settings: Settings, kind: FractalKind) -> np.ndarray:
    """Draw the chosen fractal as a (HEIGHT, WIDTH) array of 0xRRGGBB colours."""
    try:
        counter = _COUNTERS[kind]
    except KeyError:
        raise ValueError(f"unknown fractal: {kind!r}") from None
    return colorize(counter(settings), settings.iterations)