import math

import jax.numpy as jnp
import numpy as np
import pytest

from orbitax.epoch import Epoch
from orbitax.frames import EME2000, GCRF, Frame, Transform, rotation_z
from orbitax.utils import normalize_angle

_TOL = 1e-12


def _spinning_provider(rate):
    """Provider rotating about z at ``rate`` rad/s since J2000, offset by 1 km along x."""
    ref = Epoch.j2000()

    def provider(epoch):
        angle = rate * (epoch - ref)
        return Transform(rotation_z(angle), jnp.array([1000.0, 0.0, 0.0]))

    return provider


# ──────────────────────────────────────────────
# Transform
# ──────────────────────────────────────────────


class TestTransform:
    def test_identity(self):
        t = Transform.identity()
        p = jnp.array([1.0, 2.0, 3.0])
        np.testing.assert_allclose(t.apply_position(p), p, atol=_TOL)
        np.testing.assert_allclose(t.apply_direction(p), p, atol=_TOL)

    def test_rotation_z_quarter_turn(self):
        R = rotation_z(math.pi / 2)
        np.testing.assert_allclose(R @ jnp.array([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0], atol=_TOL)

    def test_rotation_z_orthonormal(self):
        R = rotation_z(0.7)
        np.testing.assert_allclose(R @ R.T, jnp.eye(3), atol=_TOL)
        assert float(jnp.linalg.det(R)) == pytest.approx(1.0, abs=_TOL)

    def test_direction_ignores_translation(self):
        t = Transform(jnp.eye(3), jnp.array([5.0, 0.0, 0.0]))
        np.testing.assert_allclose(t.apply_direction([0.0, 1.0, 0.0]), [0.0, 1.0, 0.0], atol=_TOL)
        np.testing.assert_allclose(t.apply_position([0.0, 1.0, 0.0]), [5.0, 1.0, 0.0], atol=_TOL)

    def test_inverse_roundtrip(self):
        t = Transform(rotation_z(1.1), jnp.array([10.0, -20.0, 30.0]))
        p = jnp.array([7.0e6, 1.0e6, 4.0e6])
        back = t.inverse().apply_position(t.apply_position(p))
        np.testing.assert_allclose(back, p, rtol=1e-14, atol=1e-8)


# ──────────────────────────────────────────────
# Frame
# ──────────────────────────────────────────────


class TestFrame:
    def test_root_frame_identity_transform(self):
        t = GCRF.transform(Epoch(2024, 1, 1))
        np.testing.assert_allclose(t.rotation, jnp.eye(3), atol=_TOL)
        np.testing.assert_allclose(t.translation, jnp.zeros(3), atol=_TOL)

    def test_predefined_frames_are_pseudo_inertial(self):
        assert GCRF.pseudo_inertial
        assert EME2000.pseudo_inertial
        assert GCRF.parent is None

    def test_identity_comparison(self):
        a = Frame("LOCAL")
        b = Frame("LOCAL")
        assert a == a
        assert a != b

    def test_provider_called_with_epoch(self):
        rate = 7.292115e-5
        body = Frame("BODY", parent=GCRF, provider=_spinning_provider(rate))
        epoch = Epoch.j2000() + 1000.0
        t = body.transform(epoch)
        np.testing.assert_allclose(t.rotation, rotation_z(rate * 1000.0), atol=_TOL)
        np.testing.assert_allclose(t.translation, [1000.0, 0.0, 0.0], atol=_TOL)
        assert body.parent is GCRF
        assert not body.pseudo_inertial

    def test_parent_without_provider_raises(self):
        with pytest.raises(ValueError, match="parent and a transform provider"):
            Frame("BROKEN", parent=GCRF)

    def test_provider_without_parent_raises(self):
        with pytest.raises(ValueError):
            Frame("BROKEN", provider=lambda epoch: Transform.identity())

    def test_str_and_repr(self):
        assert str(GCRF) == "GCRF"
        assert repr(GCRF) == "Frame('GCRF', pseudo_inertial=True)"


# ──────────────────────────────────────────────
# normalize_angle
# ──────────────────────────────────────────────


class TestNormalizeAngle:
    @pytest.mark.parametrize(
        "angle, center, expected",
        [
            (3 * math.pi, math.pi, math.pi),
            (-0.5, math.pi, 2 * math.pi - 0.5),
            (7.0, 0.0, 7.0 - 2 * math.pi),
            (0.25, 0.0, 0.25),
            (100.0, 100.0, 100.0),
        ],
    )
    def test_normalize(self, angle, center, expected):
        assert float(normalize_angle(angle, center)) == pytest.approx(expected, abs=1e-12)

    def test_default_center_range(self):
        angles = jnp.linspace(-20.0, 20.0, 101)
        result = normalize_angle(angles)
        assert bool(jnp.all(result >= 0.0))
        assert bool(jnp.all(result < 2 * math.pi))
