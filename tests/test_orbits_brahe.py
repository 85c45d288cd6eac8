"""Cross-validation tests comparing orbitax.orbits output against brahe 1.0+.

Both libraries run in float64 here (see conftest.py), so tolerances only
need to absorb differences in formulation and solver stopping criteria.
"""

import math

import numpy as np
import pytest

import brahe as bh

from orbitax.orbits import (
    CartesianParameters,
    KeplerianParameters,
    PositionAngle,
    PVCoordinates,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_true,
    anomaly_true_to_eccentric,
    anomaly_true_to_mean,
    apoapsis_distance,
    mean_motion,
    orbital_period,
    periapsis_distance,
    semimajor_axis_from_orbital_period,
)

DEGREES = bh.AngleFormat.DEGREES
RADIANS = bh.AngleFormat.RADIANS

_REL_TOL = 1e-9
_POS_ATOL = 1e-4   # metres
_VEL_ATOL = 1e-7   # m/s
_ANGLE_DEG_ATOL = 1e-7
_ANGLE_RAD_ATOL = 1e-9


def _koe_cases():
    return [
        (bh.R_EARTH + 500e3, 0.0, 0.0, 0.0, 0.0, 0.0),
        (bh.R_EARTH + 500e3, 0.0, 90.0, 0.0, 0.0, 0.0),
        (7000e3, 0.001, 98.0, 15.0, 30.0, 45.0),
        (26560e3, 0.74, 63.4, 250.0, 90.0, 180.0),
        (42164e3, 0.0, 0.0, 0.0, 0.0, 0.0),
        (7000e3, 0.5, 45.0, 120.0, 270.0, 300.0),
    ]


# ──────────────────────────────────────────────
# Keplerian elements to position/velocity
# ──────────────────────────────────────────────

class TestKeplerianParametersVsBrahe:
    @pytest.mark.parametrize("a, e, i, raan, omega, M", _koe_cases())
    def test_pv_coordinates(self, a, e, i, raan, omega, M):
        """KeplerianParameters.pv_coordinates matches brahe state_koe_to_eci."""
        x_oe = np.array([a, e, i, raan, omega, M])
        expected = bh.state_koe_to_eci(x_oe, DEGREES)

        kep = KeplerianParameters(
            a, e, math.radians(i), math.radians(omega), math.radians(raan),
            math.radians(M), PositionAngle.MEAN,
        )
        pv = kep.pv_coordinates(bh.GM_EARTH)

        np.testing.assert_allclose(
            np.array(pv.position), expected[:3], atol=_POS_ATOL, rtol=_REL_TOL,
            err_msg=f"position mismatch for a={a}, e={e}",
        )
        np.testing.assert_allclose(
            np.array(pv.velocity), expected[3:], atol=_VEL_ATOL, rtol=_REL_TOL,
            err_msg=f"velocity mismatch for a={a}, e={e}",
        )

    @pytest.mark.parametrize(
        "a, e, i, raan, omega, M",
        [
            (bh.R_EARTH + 500e3, 0.001, 45.0, 30.0, 60.0, 90.0),
            (7000e3, 0.2, 98.0, 200.0, 10.0, 300.0),
            (26560e3, 0.74, 63.4, 250.0, 90.0, 170.0),
        ],
    )
    def test_elements_from_brahe_state(self, a, e, i, raan, omega, M):
        """Elements recovered from a brahe state match brahe state_eci_to_koe."""
        x_cart = bh.state_koe_to_eci(np.array([a, e, i, raan, omega, M]), DEGREES)
        expected = bh.state_eci_to_koe(x_cart, RADIANS)

        cart = CartesianParameters(PVCoordinates.from_state(x_cart), bh.GM_EARTH)
        kep = KeplerianParameters.from_parameters(cart)

        assert float(kep.a) == pytest.approx(expected[0], rel=1e-9)
        assert float(kep.e) == pytest.approx(expected[1], rel=1e-8, abs=1e-12)
        assert float(kep.i) == pytest.approx(expected[2], abs=1e-10)
        for actual, ref in ((kep.raan, expected[3]), (kep.pa, expected[4]), (kep.mean_anomaly, expected[5])):
            diff = math.remainder(float(actual) - ref, 2.0 * math.pi)
            assert abs(diff) < 1e-8


# ──────────────────────────────────────────────
# Periods, semi-major axis, mean motion
# ──────────────────────────────────────────────

class TestKeplerianQuantitiesVsBrahe:
    @pytest.mark.parametrize("alt_km", [200, 500, 800, 2000, 35786])
    def test_orbital_period(self, alt_km):
        """orbital_period matches brahe across altitude range."""
        a = bh.R_EARTH + alt_km * 1e3
        expected = bh.orbital_period(a)
        actual = float(orbital_period(a, bh.GM_EARTH))
        assert actual == pytest.approx(expected, rel=_REL_TOL)

    def test_semimajor_axis_from_period(self):
        """semimajor_axis_from_orbital_period matches brahe."""
        T = bh.orbital_period(bh.R_EARTH + 500e3)
        expected = bh.semimajor_axis_from_orbital_period(T)
        actual = float(semimajor_axis_from_orbital_period(T, bh.GM_EARTH))
        assert actual == pytest.approx(expected, rel=_REL_TOL)

    @pytest.mark.parametrize("alt_km", [200, 500, 800, 2000])
    def test_mean_motion_radians(self, alt_km):
        """mean_motion in radians matches brahe across altitudes."""
        a = bh.R_EARTH + alt_km * 1e3
        expected = bh.mean_motion(a, RADIANS)
        actual = float(mean_motion(a, bh.GM_EARTH, use_degrees=False))
        assert actual == pytest.approx(expected, rel=_REL_TOL)

    @pytest.mark.parametrize("alt_km", [200, 500, 800, 2000])
    def test_mean_motion_degrees(self, alt_km):
        """mean_motion in degrees matches brahe across altitudes."""
        a = bh.R_EARTH + alt_km * 1e3
        expected = bh.mean_motion(a, DEGREES)
        actual = float(mean_motion(a, bh.GM_EARTH, use_degrees=True))
        assert actual == pytest.approx(expected, rel=_REL_TOL)

    @pytest.mark.parametrize("e", [0.0, 0.1, 0.5, 0.9])
    def test_apsides(self, e):
        """Periapsis and apoapsis distances match brahe."""
        a = bh.R_EARTH + 1000e3
        assert float(periapsis_distance(a, e)) == pytest.approx(bh.periapsis_distance(a, e), rel=_REL_TOL)
        assert float(apoapsis_distance(a, e)) == pytest.approx(bh.apoapsis_distance(a, e), rel=_REL_TOL)


# ──────────────────────────────────────────────
# Anomaly conversions
# ──────────────────────────────────────────────

class TestAnomalyConversionsVsBrahe:
    @pytest.mark.parametrize("E_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_eccentric_to_mean_degrees(self, E_deg, e):
        """anomaly_eccentric_to_mean matches brahe in degrees."""
        expected = bh.anomaly_eccentric_to_mean(E_deg, e, angle_format=DEGREES)
        actual = float(anomaly_eccentric_to_mean(E_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("M_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_mean_to_eccentric_degrees(self, M_deg, e):
        """anomaly_mean_to_eccentric matches brahe in degrees."""
        expected = bh.anomaly_mean_to_eccentric(M_deg, e, angle_format=DEGREES)
        actual = float(anomaly_mean_to_eccentric(M_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("nu_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_true_to_eccentric_degrees(self, nu_deg, e):
        """anomaly_true_to_eccentric matches brahe in degrees."""
        expected = bh.anomaly_true_to_eccentric(nu_deg, e, angle_format=DEGREES)
        actual = float(anomaly_true_to_eccentric(nu_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("E_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_eccentric_to_true_degrees(self, E_deg, e):
        """anomaly_eccentric_to_true matches brahe in degrees."""
        expected = bh.anomaly_eccentric_to_true(E_deg, e, angle_format=DEGREES)
        actual = float(anomaly_eccentric_to_true(E_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("nu_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_true_to_mean_degrees(self, nu_deg, e):
        """anomaly_true_to_mean matches brahe in degrees."""
        expected = bh.anomaly_true_to_mean(nu_deg, e, angle_format=DEGREES)
        actual = float(anomaly_true_to_mean(nu_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("M_deg", [0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 179.0])
    @pytest.mark.parametrize("e", [0.0, 0.1, 0.3, 0.5, 0.7])
    def test_mean_to_true_degrees(self, M_deg, e):
        """anomaly_mean_to_true matches brahe in degrees."""
        expected = bh.anomaly_mean_to_true(M_deg, e, angle_format=DEGREES)
        actual = float(anomaly_mean_to_true(M_deg, e, use_degrees=True))
        assert actual == pytest.approx(expected, abs=_ANGLE_DEG_ATOL)

    @pytest.mark.parametrize("M_rad", [0.0, 0.5, 1.0, 1.5707963, 2.5, 3.0])
    def test_mean_to_eccentric_radians(self, M_rad):
        """anomaly_mean_to_eccentric matches brahe in radians."""
        e = 0.1
        expected = bh.anomaly_mean_to_eccentric(M_rad, e, angle_format=RADIANS)
        actual = float(anomaly_mean_to_eccentric(M_rad, e, use_degrees=False))
        assert actual == pytest.approx(expected, abs=_ANGLE_RAD_ATOL)
