"""The view state: window size, centre of the plane, zoom and iterations."""

from __future__ import annotations

from dataclasses import dataclass

from fractscope.parsing import Arguments, FractalKind

WIDTH = 800
HEIGHT = 600
PLANE_SPAN = 4.0
ZOOM_IN_FACTOR = 1.5
ZOOM_OUT_FACTOR = 0.5
MIN_SCALE = 0.01
DEFAULT_ITERATIONS = 100
DEFAULT_JULIA = (-0.7, 0.27015)


@dataclass
class Settings:
    """Where the window looks on the complex plane and how finely."""

    center_x: float = -0.5
    center_y: float = 0.0
    scale: float = 1.0
    previous_scale: float = 1.0
    iterations: int = DEFAULT_ITERATIONS
    julia_real: float = DEFAULT_JULIA[0]
    julia_imag: float = DEFAULT_JULIA[1]

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> "Settings":
        """Build the starting view for a validated command line."""
        if arguments.kind is FractalKind.JULIA and arguments.julia_constant is not None:
            real, imaginary = arguments.julia_constant
            return cls(julia_real=real, julia_imag=imaginary)
        return cls()

    def zoom_in(self) -> None:
        """Magnify the view by one step."""
        self.previous_scale = self.scale
        self.scale *= ZOOM_IN_FACTOR

    def zoom_out(self) -> None:
        """Shrink the view by one step, never below the minimum scale."""
        self.previous_scale = self.scale
        self.scale = max(self.scale * ZOOM_OUT_FACTOR, MIN_SCALE)

    def rescale(self, mouse_x: float, mouse_y: float) -> None:
        """Move the centre so the point under the mouse stays in place."""
        ratio = 1.0 / self.previous_scale - 1.0 / self.scale
        self.center_x += (mouse_x - WIDTH / 2) * (PLANE_SPAN / WIDTH) * ratio
        self.center_y += (mouse_y - HEIGHT / 2) * (PLANE_SPAN / HEIGHT) * ratio