"""Spacecraft attitude and attitude laws.

An :class:`Attitude` is the orientation of the spacecraft body axes with
respect to a reference frame, together with the body's angular velocity.

An *attitude law* is any object with an
``attitude_at(date, pv, frame) -> Attitude`` method; the keplerian
propagator queries it for every state it builds.  Two laws are provided:

- :class:`InertialLaw`: a fixed orientation in the reference frame.
- :class:`LofAlignedLaw`: body axes aligned with the local orbital frame
  (radial, along-track, cross-track), rotating with the orbit.

References:
    1. H. Schaub and J. Junkins, *Analytical Mechanics of Space Systems*,
       2nd ed., AIAA, 2009.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.orbits._types import PVCoordinates

if TYPE_CHECKING:
    from orbitax.epoch import Epoch
    from orbitax.frames import Frame


class Attitude:
    """Orientation and angular velocity of the spacecraft body axes.

    Args:
        frame (Frame | None): Reference frame of the orientation.
        rotation (ArrayLike): 3x3 rotation matrix mapping vectors from
            ``frame`` to body axes.
        spin (ArrayLike): Angular velocity of the body axes with respect
            to ``frame``, expressed in body axes. Units: *rad/s*
    """

    __slots__ = ('_frame', '_rotation', '_spin')

    def __init__(self, frame: Frame | None, rotation: ArrayLike, spin: ArrayLike | None = None) -> None:
        dtype = get_dtype()
        rotation = jnp.asarray(rotation, dtype=dtype)
        if rotation.shape != (3, 3):
            raise ValueError(f"Attitude rotation must be a 3x3 matrix, got shape {rotation.shape}")
        self._frame = frame
        self._rotation = rotation
        self._spin = jnp.zeros(3, dtype=dtype) if spin is None else jnp.asarray(spin, dtype=dtype)

    @classmethod
    def identity(cls, frame: Frame | None = None) -> Attitude:
        """Body axes aligned with ``frame`` and not rotating."""
        return cls(frame, jnp.eye(3, dtype=get_dtype()))

    @property
    def frame(self) -> Frame | None:
        """Reference frame."""
        return self._frame

    @property
    def rotation(self) -> Array:
        """3x3 rotation matrix, reference frame -> body axes."""
        return self._rotation

    @property
    def spin(self) -> Array:
        """Angular velocity in body axes. Units: *rad/s*"""
        return self._spin

    def __str__(self) -> str:
        return f"Attitude(frame={self._frame}, spin={[float(w) for w in self._spin]})"

    def __repr__(self) -> str:
        return self.__str__()


class AttitudeLaw(Protocol):
    """Capability queried by the propagator for the attitude of each state."""

    def attitude_at(self, date: Epoch, pv: PVCoordinates, frame: Frame | None) -> Attitude:
        """Return the attitude at ``date`` for a spacecraft at ``pv`` in ``frame``."""
        ...


class InertialLaw:
    """Attitude law holding a fixed orientation in the reference frame.

    Args:
        rotation (ArrayLike | None): 3x3 rotation, reference frame -> body
            axes. Default: identity.
    """

    __slots__ = ('_rotation',)

    def __init__(self, rotation: ArrayLike | None = None) -> None:
        self._rotation = rotation

    def attitude_at(self, date: Epoch, pv: PVCoordinates, frame: Frame | None) -> Attitude:
        if self._rotation is None:
            return Attitude.identity(frame)
        return Attitude(frame, self._rotation)


def rotation_frame_to_lof(pv: PVCoordinates) -> Array:
    """Rotation matrix from the frame of ``pv`` to its local orbital frame.

    Rows are the RTN unit vectors expressed in the frame of ``pv``:
    ``r_hat = r / |r|``, ``t_hat = n_hat x r_hat`` and ``n_hat = h / |h|``.

    Args:
        pv: Position (*m*) and velocity (*m/s*).

    Returns:
        jax.Array: 3x3 rotation matrix (frame -> RTN).
    """
    dtype = get_dtype()
    r = jnp.asarray(pv.position, dtype=dtype)
    v = jnp.asarray(pv.velocity, dtype=dtype)

    h = jnp.cross(r, v)
    r_hat = r / jnp.linalg.norm(r)
    n_hat = h / jnp.linalg.norm(h)
    t_hat = jnp.cross(n_hat, r_hat)

    return jnp.stack([r_hat, t_hat, n_hat])


class LofAlignedLaw:
    """Attitude law aligning the body axes with the local orbital frame.

    Body x points radially outward, z along the orbital angular momentum and
    y completes the triad (along-track).  The body spins about z at the
    instantaneous orbital angular rate ``|r x v| / |r|^2``.
    """

    __slots__ = ()

    def attitude_at(self, date: Epoch, pv: PVCoordinates, frame: Frame | None) -> Attitude:
        r = jnp.asarray(pv.position, dtype=get_dtype())
        h = jnp.cross(r, jnp.asarray(pv.velocity, dtype=get_dtype()))
        rate = jnp.linalg.norm(h) / jnp.dot(r, r)
        spin = jnp.array([0.0, 0.0, 1.0], dtype=get_dtype()) * rate
        return Attitude(frame, rotation_frame_to_lof(pv), spin)
