"""
Ray segment endpoints and text annotations derived from an OpticsResult.

Canvas convention: y grows downward, medium 1 sits above the boundary and
medium 2 below it. Angles passed in are the ones held by OpticsResult
(from the normal) plus the tangent-referenced incidence angle the user set.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from backend.optics_solver import OpticsResult

RAY_LENGTH = 150.0
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400

Point = Tuple[float, float]


@dataclass(frozen=True)
class RaySegment:
    kind: str  # "incident" | "refracted" | "reflected"
    start: Point
    end: Point

    def to_dict(self) -> Dict[str, object]:
        return {"kind": self.kind, "start": list(self.start), "end": list(self.end)}


def canvas_center(width: float = CANVAS_WIDTH, height: float = CANVAS_HEIGHT) -> Point:
    """Point where the normal meets the boundary (middle of the canvas)."""
    return (width / 2.0, height / 2.0)


def incident_segment(angle_from_tangent_deg: float, center: Point, length: float = RAY_LENGTH) -> RaySegment:
    cx, cy = center
    a = math.radians(angle_from_tangent_deg)
    start = (cx - length * math.cos(a), cy - length * math.sin(a))
    return RaySegment("incident", start, (cx, cy))


def refracted_segment(refraction_angle_deg: float, center: Point, length: float = RAY_LENGTH) -> RaySegment:
    cx, cy = center
    t = math.radians(refraction_angle_deg)
    return RaySegment("refracted", (cx, cy), (cx + length * math.sin(t), cy + length * math.cos(t)))


def reflected_segment(reflection_angle_deg: float, center: Point, length: float = RAY_LENGTH) -> RaySegment:
    cx, cy = center
    t = math.radians(reflection_angle_deg)
    return RaySegment("reflected", (cx, cy), (cx + length * math.sin(t), cy - length * math.cos(t)))


def trace_segments(
    result: OpticsResult,
    angle_from_tangent_deg: float,
    center: Optional[Point] = None,
    length: float = RAY_LENGTH,
) -> List[RaySegment]:
    """
    Incident segment followed by the single outgoing segment.

    Under total internal reflection the outgoing ray stays in medium 1 (upward);
    otherwise it continues into medium 2 (downward).
    """
    if center is None:
        center = canvas_center()
    segments = [incident_segment(angle_from_tangent_deg, center, length)]
    if result.total_internal_reflection:
        segments.append(reflected_segment(result.reflection_angle_deg, center, length))
    else:
        segments.append(refracted_segment(result.refraction_angle_deg, center, length))
    return segments


def format_speed(speed: float) -> str:
    """Scientific notation with 2 decimals and a bare exponent, e.g. 3.00e8."""
    mantissa, exponent = f"{speed:.2e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def angle_annotations(result: OpticsResult) -> List[str]:
    lines = [f"Incidence Angle: {result.incidence_angle_deg:.1f}°"]
    if result.total_internal_reflection:
        lines.append("Total Internal Reflection")
    else:
        lines.append(f"Refraction Angle: {result.refraction_angle_deg:.1f}°")
    return lines


def speed_annotations(result: OpticsResult) -> List[str]:
    return [
        f"Speed in Medium 1: {format_speed(result.speed_medium1)} m/s",
        f"Speed in Medium 2: {format_speed(result.speed_medium2)} m/s",
    ]


def critical_angle_annotation(result: OpticsResult) -> str:
    if result.critical_angle_deg is None:
        return "Critical Angle: none"
    return f"Critical Angle: {result.critical_angle_deg:.1f}°"


def annotations(result: OpticsResult, show_angles: bool = True) -> List[str]:
    """Text lines for the scene; angle lines only when show_angles is on."""
    lines = []
    if show_angles:
        lines.extend(angle_annotations(result))
        lines.append(critical_angle_annotation(result))
    lines.extend(speed_annotations(result))
    return lines
