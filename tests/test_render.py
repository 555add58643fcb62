import numpy as np
import pytest

from fractscope.colors import INSIDE_COLOR, get_color
from fractscope.parsing import FractalKind
from fractscope.render import (
    colorize,
    julia_counts,
    mandelbrot_counts,
    plane_grid,
    render,
)
from fractscope.view import HEIGHT, WIDTH, Settings


def test_plane_grid_shape_and_centre():
    settings = Settings(center_x=-0.5, center_y=0.25)
    real, imag = plane_grid(settings)
    assert real.shape == (HEIGHT, WIDTH)
    assert imag.shape == (HEIGHT, WIDTH)
    assert real[HEIGHT // 2, WIDTH // 2] == -0.5
    assert imag[HEIGHT // 2, WIDTH // 2] == 0.25


def test_plane_grid_rows_and_columns_constant():
    real, imag = plane_grid(Settings(center_x=0.0, center_y=0.0, scale=1.0))
    assert real[:, 0].tolist() == [-2.0] * HEIGHT
    assert imag[0, :].tolist() == [-2.0] * WIDTH
    assert real[3, 1] == pytest.approx(-1.995)
    assert imag[1, 3] == pytest.approx(-2.0 + 1.0 / 150.0)
    assert real[0, 1] > real[0, 0]
    assert imag[1, 0] > imag[0, 0]


def test_plane_grid_zoom_shrinks_span():
    real1, imag1 = plane_grid(Settings(scale=1.0))
    real2, imag2 = plane_grid(Settings(scale=2.0))
    span1 = real1[0, -1] - real1[0, 0]
    span2 = real2[0, -1] - real2[0, 0]
    assert span2 == pytest.approx(span1 / 2)
    assert (imag2[-1, 0] - imag2[0, 0]) == pytest.approx((imag1[-1, 0] - imag1[0, 0]) / 2)


def test_mandelbrot_centre_never_escapes():
    settings = Settings(iterations=30)
    counts = mandelbrot_counts(settings)
    assert counts[HEIGHT // 2, WIDTH // 2] == settings.iterations + 1


def test_mandelbrot_far_corner_escapes_after_one_step():
    counts = mandelbrot_counts(Settings(iterations=30))
    assert counts[0, 0] == 1


def test_julia_far_corner_escapes_immediately():
    counts = julia_counts(Settings(iterations=30))
    assert counts[0, 0] == 0


def test_counts_are_bounded():
    settings = Settings(iterations=25)
    for counts in (mandelbrot_counts(settings), julia_counts(settings)):
        assert counts.shape == (HEIGHT, WIDTH)
        assert counts.min() >= 0
        assert counts.max() <= settings.iterations + 1


def test_negative_iterations_give_zero_counts():
    counts = mandelbrot_counts(Settings(iterations=-10))
    assert counts.shape == (HEIGHT, WIDTH)
    assert int(counts.max()) == 0
    assert int(counts.min()) == 0


def test_julia_point_symmetry():
    counts = julia_counts(Settings(center_x=0.0, center_y=0.0, iterations=40))
    inner = counts[1:, 1:]
    assert np.array_equal(inner, inner[::-1, ::-1])


def test_mandelbrot_conjugate_symmetry():
    counts = mandelbrot_counts(Settings(center_y=0.0, iterations=40))
    inner = counts[1:, :]
    assert np.array_equal(inner, inner[::-1, :])


def test_colorize_matches_palette():
    counts = np.array([[0, 5, 10], [11, 3, 7]])
    colors = colorize(counts, 10)
    assert colors.shape == counts.shape
    for value, color in zip(counts.ravel(), colors.ravel()):
        assert int(color) == get_color(int(value), 10)
    assert colors[0, 2] == INSIDE_COLOR
    assert colors[1, 0] == INSIDE_COLOR


def test_render_equals_colorized_counts():
    settings = Settings(iterations=20)
    image = render(settings, FractalKind.MANDELBROT)
    assert image.shape == (HEIGHT, WIDTH)
    assert np.array_equal(image, colorize(mandelbrot_counts(settings), 20))
    assert image[HEIGHT // 2, WIDTH // 2] == INSIDE_COLOR


def test_render_julia_uses_constant():
    settings = Settings(iterations=20, julia_real=0.0, julia_imag=0.0)
    image = render(settings, FractalKind.JULIA)
    assert np.array_equal(image, colorize(julia_counts(settings), 20))
    other = render(Settings(iterations=20, julia_real=-0.8, julia_imag=0.156), FractalKind.JULIA)
    assert not np.array_equal(image, other)


def test_render_rejects_unknown_kind():
    with pytest.raises(ValueError):
        render(Settings(iterations=5), "Sierpinski")