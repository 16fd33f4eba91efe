"""
Refraction engine for a single planar boundary between two media.

Given two refractive indices and an incidence angle measured from the boundary
tangent, derives whether total internal reflection occurs, the outgoing angle,
the critical angle and the speed of light in each medium.
All functions are pure; nothing is cached between calls.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

import numpy as np

SPEED_OF_LIGHT = 299792458.0  # m/s, vacuum

# Relative distance of sin(theta1) from n2/n1 that counts as exactly at the critical angle
CRITICAL_ANGLE_TOLERANCE = 1e-12


class InvalidInputError(ValueError):
    pass


@dataclass(frozen=True)
class OpticsResult:
    incidence_angle_deg: float
    total_internal_reflection: bool
    refraction_angle_deg: Optional[float]
    reflection_angle_deg: Optional[float]
    critical_angle_deg: Optional[float]
    speed_medium1: float
    speed_medium2: float

    @property
    def outgoing_angle_deg(self) -> float:
        """Angle from the normal of whichever ray leaves the boundary."""
        if self.total_internal_reflection:
            return self.reflection_angle_deg
        return self.refraction_angle_deg

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_index(n, name: str = "n") -> float:
    """Return n as float, or raise InvalidInputError unless it is a positive finite number."""
    if isinstance(n, bool) or not isinstance(n, (int, float, np.integer, np.floating)):
        raise InvalidInputError(f"{name} must be a number, got {type(n).__name__}")
    n = float(n)
    if not math.isfinite(n) or n <= 0:
        raise InvalidInputError(f"{name} must be positive and finite, got {n}")
    return n


def validate_angle(angle) -> float:
    """Return the tangent-referenced incidence angle as float; must lie in [0, 90] degrees."""
    if isinstance(angle, bool) or not isinstance(angle, (int, float, np.integer, np.floating)):
        raise InvalidInputError(f"incidence angle must be a number, got {type(angle).__name__}")
    angle = float(angle)
    if not math.isfinite(angle) or angle < 0.0 or angle > 90.0:
        raise InvalidInputError(f"incidence angle must be within [0, 90] degrees, got {angle}")
    return angle


def _at_critical(sin_theta1: float, ratio: float) -> bool:
    """sin(theta1) equals n2/n1 to within CRITICAL_ANGLE_TOLERANCE (relative)."""
    return ratio > 0.0 and math.isclose(abs(sin_theta1), ratio, rel_tol=CRITICAL_ANGLE_TOLERANCE, abs_tol=0.0)


def snell_law(n1: float, n2: float, theta1_rad: float) -> Optional[float]:
    """
    Compute refraction angle (theta2) from Snell's law: n1*sin(theta1) = n2*sin(theta2).

    Args:
        n1: Refractive index of incident medium
        n2: Refractive index of transmitted medium
        theta1_rad: Angle of incidence in radians (0 = normal incidence)

    Returns:
        Angle of refraction in radians, or None if total internal reflection occurs.
        Exactly at the critical angle the ray exits grazing (pi/2, sign of theta1).
    """
    sin_theta1 = float(np.sin(theta1_rad))
    ratio = n2 / n1
    if n1 > n2:
        if _at_critical(sin_theta1, ratio):
            return math.copysign(math.pi / 2, sin_theta1)
        if abs(sin_theta1) > ratio:
            return None  # Total internal reflection
    # |sin_theta2| <= 1 here: either n1 <= n2, or |sin_theta1| is below n2/n1
    sin_theta2 = n1 * sin_theta1 / n2
    return float(np.arcsin(sin_theta2))


def critical_angle(n1: float, n2: float) -> Optional[float]:
    """Critical angle in degrees for light going from n1 into n2; None when n1 <= n2."""
    if n1 > n2:
        return float(np.degrees(np.arcsin(n2 / n1)))
    return None


def light_speed(n: float) -> float:
    """Speed of light (m/s) in a medium of refractive index n."""
    return SPEED_OF_LIGHT / n


def solve(n1: float, n2: float, incidence_angle_from_tangent_deg: float) -> OpticsResult:
    """
    Solve refraction / reflection at the boundary.

    Args:
        n1: Refractive index of the medium the ray comes from (top)
        n2: Refractive index of the medium beyond the boundary (bottom)
        incidence_angle_from_tangent_deg: Ray angle measured from the boundary, in [0, 90]

    Returns:
        OpticsResult with exactly one of refraction_angle_deg / reflection_angle_deg set.

    Raises:
        InvalidInputError: non-positive or non-finite index, or angle outside [0, 90].
    """
    n1 = validate_index(n1, "n1")
    n2 = validate_index(n2, "n2")
    angle = validate_angle(incidence_angle_from_tangent_deg)

    theta1_deg = 90.0 - angle
    theta2_rad = snell_law(n1, n2, np.radians(theta1_deg))
    tir = theta2_rad is None

    if tir:
        refraction_deg = None
        reflection_deg = theta1_deg
    else:
        refraction_deg = float(np.degrees(theta2_rad))
        reflection_deg = None

    return OpticsResult(
        incidence_angle_deg=theta1_deg,
        total_internal_reflection=tir,
        refraction_angle_deg=refraction_deg,
        reflection_angle_deg=reflection_deg,
        critical_angle_deg=critical_angle(n1, n2),
        speed_medium1=light_speed(n1),
        speed_medium2=light_speed(n2),
    )
