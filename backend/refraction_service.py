"""
Refraction service: converts a frontend request dict into solver inputs,
runs the solver, and returns JSON-ready result, ray segments and annotations.
"""

import logging
import math
from typing import Any, Dict, Optional, Sequence

from backend.optics_solver import InvalidInputError, solve, light_speed, validate_index
from backend.ray_geometry import RAY_LENGTH, annotations, canvas_center, format_speed, trace_segments

logger = logging.getLogger(__name__)


def _finite(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return value


def _center_from(value: Optional[Sequence[float]]):
    if value is None:
        return canvas_center()
    if len(value) != 2:
        raise InvalidInputError(f"center must be [x, y], got {list(value)}")
    return (_finite(value[0], "center x"), _finite(value[1], "center y"))


def _ray_length_from(value) -> float:
    if value is None:
        return RAY_LENGTH
    length = _finite(value, "rayLength")
    if length <= 0:
        raise InvalidInputError(f"rayLength must be positive, got {length}")
    return length


def _checked_inputs(request: Dict[str, Any]):
    """Solve and validate geometry; rejected input is logged and re-raised."""
    try:
        result = solve(request.get("n1"), request.get("n2"), request.get("incidenceAngle"))
        center = _center_from(request.get("center"))
        length = _ray_length_from(request.get("rayLength"))
    except InvalidInputError as e:
        logger.warning(
            "Rejected input n1=%r n2=%r incidenceAngle=%r center=%r rayLength=%r: %s",
            request.get("n1"), request.get("n2"), request.get("incidenceAngle"),
            request.get("center"), request.get("rayLength"), e,
        )
        raise
    return result, center, length


def run_refraction(request: Dict[str, Any]) -> Dict[str, Any]:
    """
    Solve one boundary configuration.
    request keys: n1, n2, incidenceAngle (degrees from the boundary), optional center [x, y],
    rayLength (> 0), showAngles.
    Returns: { result: {...}, segments: [{kind, start, end}, ...], annotations: [str, ...] }
    """
    result, center, length = _checked_inputs(request)
    angle = float(request["incidenceAngle"])
    segments = trace_segments(result, angle, center=center, length=length)
    show_angles = request.get("showAngles", True)

    logger.debug(
        "Solved n1=%s n2=%s angle=%s -> tir=%s outgoing=%.3f",
        request["n1"], request["n2"], angle, result.total_internal_reflection, result.outgoing_angle_deg,
    )
    return {
        "result": result.to_dict(),
        "segments": [s.to_dict() for s in segments],
        "annotations": annotations(result, show_angles=show_angles),
    }


def render_scene_html(request: Dict[str, Any]) -> str:
    """
    Render the scene for a request as standalone Plotly HTML.
    Extra request keys: showNormals, laserColor.
    """
    from optics_visualization import SceneState, render_refraction_scene

    result, _, length = _checked_inputs(request)
    state = SceneState(
        n1=float(request["n1"]),
        n2=float(request["n2"]),
        incidence_angle_deg=float(request["incidenceAngle"]),
        show_normals=request.get("showNormals", True),
        show_angles=request.get("showAngles", True),
        laser_color=request.get("laserColor", "#ff0000"),
    )
    try:
        return render_refraction_scene(state, result=result, ray_length=length, return_html=True)
    except ValueError as e:
        logger.warning("Rejected laserColor=%r: %s", state.laser_color, e)
        raise InvalidInputError(f"Invalid laserColor: {e}") from e


def medium_speed(n: float) -> Dict[str, Any]:
    """Speed of light in a medium, raw and formatted for display."""
    n = validate_index(n, "n")
    speed = light_speed(n)
    return {"n": n, "speed": speed, "formatted": f"{format_speed(speed)} m/s"}
