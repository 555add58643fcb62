"""Validation of the command-line arguments that choose a fractal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from fractscope.atod import atod

INVALID_FRACTAL_MESSAGE = "Invalid fractal !\nYou must choose between:\n-Mandelbrot\n-Julia"
MANDELBROT_PARAMETERS_MESSAGE = "You cannot add any parameters with Mandelbrot !"
JULIA_PARAMETERS_MESSAGE = "Please use Julia with valid parameters"

MAX_DECIMALS = 38
_DIGITS = "0123456789"


class UsageError(Exception):
    """The command line does not describe a fractal that can be drawn."""


class FractalKind(Enum):
    """The fractals that can be displayed."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"


@dataclass(frozen=True)
class Arguments:
    """A validated command line; ``julia_constant`` is set only when given."""

    kind: FractalKind
    julia_constant: Optional[Tuple[float, float]] = None


def _has_invalid_characters(parameter: str) -> bool:
    if not parameter:
        return False
    body = parameter[1:] if parameter[0] in "+-" else parameter
    if not body:
        return True
    return any(char not in _DIGITS and char != "." for char in body)


def _has_too_many_decimals(parameter: str) -> bool:
    if not parameter:
        return False
    dot = parameter.find(".")
    if dot < 0:
        return True
    return len(parameter) - dot - 1 > MAX_DECIMALS


def _julia_parameters_invalid(parameters: Sequence[str]) -> bool:
    if len(parameters) == 1:
        return True
    return any(
        parameter.count(".") > 1
        or _has_invalid_characters(parameter)
        or _has_too_many_decimals(parameter)
        for parameter in parameters
    )


def parse_arguments(args: Sequence[str]) -> Arguments:
    """Validate the arguments after the program name.

    Raises UsageError with the message to show the user.
    """
    if not args:
        raise UsageError(INVALID_FRACTAL_MESSAGE)
    name, *parameters = args
    try:
        kind = FractalKind(name)
    except ValueError:
        raise UsageError(INVALID_FRACTAL_MESSAGE) from None
    if kind is FractalKind.MANDELBROT:
        if parameters:
            raise UsageError(MANDELBROT_PARAMETERS_MESSAGE)
        return Arguments(kind)
    if _julia_parameters_invalid(parameters):
        raise UsageError(JULIA_PARAMETERS_MESSAGE)
    if len(parameters) == 2:
        real, imaginary = parameters
        return Arguments(kind, (atod(real), atod(imaginary)))
    return Arguments(kind)