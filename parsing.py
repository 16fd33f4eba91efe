#!/usr/bin/env python3
"""
Parsing utilities for the refraction explorer input fields. Extracted for testability.
"""

import math

from backend.optics_solver import InvalidInputError, validate_index


def parse_index(s):
    """Parse a custom refractive index. Empty, non-numeric or n <= 0 -> InvalidInputError."""
    s = (s or "").strip()
    if not s:
        raise InvalidInputError("Enter a refractive index")
    try:
        n = float(s)
    except ValueError as e:
        raise InvalidInputError(f"Not a number: '{s}'") from e
    return validate_index(n, "refractive index")


def clamp_angle(angle):
    """Clamp an incidence angle (degrees from the boundary) to [0, 90]."""
    return min(max(float(angle), 0.0), 90.0)


def angle_from_pointer(x, y, width, height):
    """
    Map a pointer position on the canvas to the laser angle.
    Angle from the +x axis to the vector centre -> pointer (y downward), clamped to [0, 90].
    """
    angle = math.degrees(math.atan2(y - height / 2, x - width / 2))
    return clamp_angle(angle)
