"""Unit tests for ray segment endpoints and scene annotations."""

import math

import pytest

from backend.optics_solver import solve
from backend.ray_geometry import (
    RAY_LENGTH,
    annotations,
    canvas_center,
    format_speed,
    trace_segments,
)


@pytest.fixture
def center():
    return (400.0, 200.0)


class TestTraceSegments:
    """Tests for trace_segments."""

    def test_default_center_is_canvas_middle(self):
        assert canvas_center() == (400.0, 200.0)
        segs = trace_segments(solve(1.0, 1.5, 45.0), 45.0)
        assert segs[0].end == (400.0, 200.0)

    def test_incident_ray_ends_at_boundary(self, center):
        segs = trace_segments(solve(1.0, 1.33, 45.0), 45.0, center=center)
        inc = segs[0]
        assert inc.kind == "incident"
        assert inc.end == center
        d = math.radians(45.0)
        assert inc.start[0] == pytest.approx(400 - RAY_LENGTH * math.cos(d))
        assert inc.start[1] == pytest.approx(200 - RAY_LENGTH * math.sin(d))

    def test_refracted_ray_goes_into_medium_two(self, center):
        r = solve(1.0, 1.33, 45.0)
        segs = trace_segments(r, 45.0, center=center)
        assert [s.kind for s in segs] == ["incident", "refracted"]
        out = segs[1]
        t = math.radians(r.refraction_angle_deg)
        assert out.start == center
        assert out.end[0] == pytest.approx(400 + RAY_LENGTH * math.sin(t))
        assert out.end[1] == pytest.approx(200 + RAY_LENGTH * math.cos(t))
        assert out.end[1] > center[1]

    def test_reflected_ray_stays_in_medium_one(self, center):
        r = solve(1.5, 1.0, 30.0)
        segs = trace_segments(r, 30.0, center=center)
        assert [s.kind for s in segs] == ["incident", "reflected"]
        out = segs[1]
        t = math.radians(60.0)
        assert out.end[0] == pytest.approx(400 + RAY_LENGTH * math.sin(t))
        assert out.end[1] == pytest.approx(200 - RAY_LENGTH * math.cos(t))
        assert out.end[1] < center[1]

    def test_reflection_mirrors_incident_ray(self, center):
        """Under TIR the reflected ray is the incident ray mirrored in the normal."""
        segs = trace_segments(solve(1.5, 1.0, 20.0), 20.0, center=center)
        inc, out = segs
        assert out.end[0] - center[0] == pytest.approx(center[0] - inc.start[0])
        assert out.end[1] == pytest.approx(inc.start[1])

    def test_custom_length(self, center):
        segs = trace_segments(solve(1.0, 1.0, 90.0), 90.0, center=center, length=50.0)
        inc, out = segs
        assert inc.start == pytest.approx((400.0, 150.0))
        assert out.end == pytest.approx((400.0, 250.0))

    def test_to_dict(self, center):
        seg = trace_segments(solve(1.0, 1.0, 90.0), 90.0, center=center)[1]
        d = seg.to_dict()
        assert d["kind"] == "refracted"
        assert d["start"] == [400.0, 200.0]
        assert len(d["end"]) == 2


class TestAnnotations:
    """Tests for format_speed and annotations."""

    def test_format_speed(self):
        assert format_speed(299792458.0) == "3.00e8"
        assert format_speed(3e8 / 1.33) == "2.26e8"
        assert format_speed(299792458.0 / 1.5) == "2.00e8"
        assert format_speed(1.5e10) == "1.50e10"

    def test_refraction_lines(self):
        lines = annotations(solve(1.0, 1.33, 45.0))
        assert lines[0] == "Incidence Angle: 45.0°"
        assert lines[1] == "Refraction Angle: 32.1°"
        assert lines[2] == "Critical Angle: none"
        assert lines[3] == "Speed in Medium 1: 3.00e8 m/s"
        assert lines[4] == "Speed in Medium 2: 2.25e8 m/s"

    def test_tir_lines(self):
        lines = annotations(solve(1.5, 1.0, 30.0))
        assert lines[0] == "Incidence Angle: 60.0°"
        assert lines[1] == "Total Internal Reflection"
        assert lines[2] == "Critical Angle: 41.8°"

    def test_angles_hidden(self):
        lines = annotations(solve(1.5, 1.0, 30.0), show_angles=False)
        assert lines == [
            "Speed in Medium 1: 2.00e8 m/s",
            "Speed in Medium 2: 3.00e8 m/s",
        ]
