"""Interactive window that shows a fractal and reacts to keys and the wheel."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, TextIO

import numpy as np

from fractscope.parsing import FractalKind, UsageError, parse_arguments
from fractscope.render import render
from fractscope.view import HEIGHT, WIDTH, Settings

WINDOW_TITLE = "fractol"
ITERATION_STEP = 10
JULIA_MIN_ITERATIONS = 15
SCROLL_UP = 4
SCROLL_DOWN = 5
DESCRIPTIONS_ENV = "FRACTSCOPE_DESCRIPTIONS"
DEFAULT_DESCRIPTIONS = Path("descriptions")

_DESCRIPTION_FILES = {
    FractalKind.MANDELBROT: "mandelbrot.txt",
    FractalKind.JULIA: "julia.txt",
}


class Key(Enum):
    """Keys the viewer responds to, valued by their X keysym."""

    ESCAPE = 0xFF1B
    UP = 0xFF52
    DOWN = 0xFF54


class FractalApp:
    """Holds the view of one fractal and the image drawn for it."""

    def __init__(self, settings: Settings, kind: FractalKind) -> None:
        self.settings = settings
        self.kind = kind
        self.running = True
        self.needs_redraw = True
        self._image: Optional[np.ndarray] = None

    def handle_key(self, key: Key) -> None:
        """Quit on Escape; Up and Down change the iteration limit."""
        if key is Key.ESCAPE:
            self.running = False
            return
        if key is Key.UP:
            self.settings.iterations += ITERATION_STEP
            self.needs_redraw = True
        elif key is Key.DOWN:
            if self.kind is FractalKind.JULIA and self.settings.iterations <= JULIA_MIN_ITERATIONS:
                return
            self.settings.iterations -= ITERATION_STEP
            self.needs_redraw = True

    def handle_scroll(self, button: int, mouse_x: float, mouse_y: float) -> None:
        """Zoom towards the mouse on wheel up, away from it on wheel down."""
        if button == SCROLL_UP:
            self.settings.zoom_in()
        elif button == SCROLL_DOWN:
            self.settings.zoom_out()
        else:
            return
        self.settings.rescale(mouse_x, mouse_y)
        self.needs_redraw = True

    def frame(self) -> np.ndarray:
        """Return the current image, drawing it again only when the view changed."""
        if self.needs_redraw or self._image is None:
            self._image = render(self.settings, self.kind)
            self.needs_redraw = False
        return self._image

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        keys = {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            shown = None
            while self.running:
                image = self.frame()
                if image is not shown:
                    surface = pygame.surfarray.make_surface(_to_rgb(image))
                    screen.blit(surface, (0, 0))
                    pygame.display.flip()
                    shown = image
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    self.handle_key(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.handle_scroll(event.button, *event.pos)
        finally:
            pygame.quit()


def _to_rgb(image: np.ndarray) -> np.ndarray:
    """Split 0xRRGGBB values into a (WIDTH, HEIGHT, 3) byte array."""
    channels = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    ).astype(np.uint8)
    return channels.transpose(1, 0, 2)


def print_description(kind: FractalKind, directory: Path, stream: TextIO) -> bool:
    """Copy the description of ``kind`` from ``directory`` to ``stream``.

    Returns False, writing nothing, when there is no description file.
    """
    path = Path(directory) / _DESCRIPTION_FILES[kind]
    try:
        text = path.read_text()
    except OSError:
        return False
    stream.write(text)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the viewer for the fractal named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        arguments = parse_arguments(args)
    except UsageError as error:
        print(error, file=sys.stderr)
        return 0
    settings = Settings.from_arguments(arguments)
    directory = Path(os.environ.get(DESCRIPTIONS_ENV, DEFAULT_DESCRIPTIONS))
    print_description(arguments.kind, directory, sys.stdout)
    FractalApp(settings, arguments.kind).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())