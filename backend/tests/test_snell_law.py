"""Unit tests for snell_law, the radians-level refraction step used by solve."""

import math

import pytest

from backend.optics_solver import snell_law


def _snell_residual(n1, n2, theta1, theta2):
    return n1 * math.sin(theta1) - n2 * math.sin(theta2)


class TestSnellLaw:
    """Tests for snell_law."""

    @pytest.mark.parametrize("n1, n2", [(1.0, 1.33), (1.5, 1.0), (1.33, 1.33), (1e13, 1.0)])
    def test_normal_incidence_is_undeviated(self, n1, n2):
        assert snell_law(n1, n2, 0.0) == 0.0

    def test_into_water_bends_toward_normal(self):
        theta1 = math.radians(45)
        theta2 = snell_law(1.0, 1.33, theta1)
        assert theta2 < theta1
        assert _snell_residual(1.0, 1.33, theta1, theta2) == pytest.approx(0.0, abs=1e-12)

    def test_out_of_glass_bends_away_from_normal(self):
        theta1 = math.radians(30)
        theta2 = snell_law(1.5, 1.0, theta1)
        assert theta2 > theta1
        assert _snell_residual(1.5, 1.0, theta1, theta2) == pytest.approx(0.0, abs=1e-12)

    def test_beyond_critical_angle_is_tir(self):
        assert snell_law(1.5, 1.0, math.radians(60)) is None
        assert snell_law(1.33, 1.0, math.radians(89)) is None

    def test_denser_to_rarer_never_tir_into_denser(self):
        assert snell_law(1.0, 1.5, math.radians(89.9)) is not None

    def test_exactly_critical_angle_grazes(self):
        theta_c = math.asin(1.0 / 1.5)
        assert snell_law(1.5, 1.0, theta_c) == math.pi / 2

    def test_just_inside_critical_angle_refracts(self):
        theta1 = math.asin(1.0 / 1.5) - 1e-6
        theta2 = snell_law(1.5, 1.0, theta1)
        assert theta2 < math.pi / 2
        assert _snell_residual(1.5, 1.0, theta1, theta2) == pytest.approx(0.0, abs=1e-12)

    def test_sign_follows_incidence(self):
        theta1 = math.radians(25)
        assert snell_law(1.0, 1.5, -theta1) == pytest.approx(-snell_law(1.0, 1.5, theta1))
        assert snell_law(1.5, 1.0, -math.asin(1.0 / 1.5)) == -math.pi / 2

    def test_huge_index_ratio_small_angle(self):
        """Tolerance at the critical angle is relative, so tiny n2/n1 does not snap to grazing."""
        theta1 = 5e-14
        theta2 = snell_law(1e13, 1.0, theta1)
        assert theta2 == pytest.approx(math.asin(0.5), rel=1e-6)
