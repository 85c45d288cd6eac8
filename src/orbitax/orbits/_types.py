"""Value types shared by the orbit modules.

- :class:`PVCoordinates`: position/velocity pair.
- :class:`PositionAngle`: which anomaly (or latitude argument) a value is.
- :class:`OrbitType`: the four orbital parameter representations.
- :class:`KeplerSolution`: result of the bounded Kepler equation solver.
- :class:`KeplerSolverConfig`: tuning of that solver.

The tuple types are :class:`~typing.NamedTuple` instances, which JAX treats
as pytrees, so they pass through ``jax.jit`` and ``jax.vmap`` unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype


class PVCoordinates(NamedTuple):
    """Position and velocity of a body in some frame.

    Attributes:
        position: Position vector ``[x, y, z]``. Units: *m*
        velocity: Velocity vector ``[vx, vy, vz]``. Units: *m/s*
    """

    position: Array
    velocity: Array

    @classmethod
    def from_state(cls, state: ArrayLike) -> PVCoordinates:
        """Split a 6-element state ``[x, y, z, vx, vy, vz]``."""
        state = jnp.asarray(state, dtype=get_dtype())
        return cls(state[:3], state[3:6])

    def to_state(self) -> Array:
        """Return the 6-element state ``[x, y, z, vx, vy, vz]``."""
        return jnp.concatenate([self.position, self.velocity])


class PositionAngle(Enum):
    """Kind of angle locating the body on its orbit."""

    TRUE = "true"
    MEAN = "mean"
    ECCENTRIC = "eccentric"


class OrbitType(Enum):
    """Orbital parameter representations."""

    CARTESIAN = "cartesian"
    KEPLERIAN = "keplerian"
    EQUINOCTIAL = "equinoctial"
    CIRCULAR = "circular"


class KeplerSolution(NamedTuple):
    """Outcome of solving Kepler's equation.

    A solve either converges, or stops at the iteration cap; both outcomes
    are returned as data so traced code can branch on ``converged``.

    Attributes:
        anomaly: Eccentric anomaly (or eccentric latitude argument) reached. Units: *rad*
        iterations: Number of Newton iterations performed.
        converged: Whether the last Newton correction was below tolerance.
        residual: Kepler equation residual at ``anomaly``. Units: *rad*
    """

    anomaly: Array
    iterations: Array
    converged: Array
    residual: Array


class KeplerSolverConfig(NamedTuple):
    """Tuning of the Kepler equation solver.

    Attributes:
        tolerance: Convergence threshold on the Newton correction. ``None``
            selects :func:`orbitax.config.get_kepler_tolerance` for the active
            dtype. Units: *rad*
        max_iterations: Iteration cap. Reaching it without converging is a
            :class:`~orbitax.errors.NonConvergence` failure.
    """

    tolerance: float | None = None
    max_iterations: int = 50


class EquinoctialElements(NamedTuple):
    """Raw equinoctial elements.

    Attributes:
        a: Semi-major axis. Units: *m*
        ex: ``e cos(w + RAAN)``. Dimensionless.
        ey: ``e sin(w + RAAN)``. Dimensionless.
        hx: ``tan(i/2) cos(RAAN)``. Dimensionless.
        hy: ``tan(i/2) sin(RAAN)``. Dimensionless.
        lv: True latitude argument ``v + w + RAAN``. Units: *rad*
    """

    a: Array
    ex: Array
    ey: Array
    hx: Array
    hy: Array
    lv: Array


class KeplerianElements(NamedTuple):
    """Raw classical keplerian elements.

    Attributes:
        a: Semi-major axis. Units: *m*
        e: Eccentricity. Dimensionless.
        i: Inclination. Units: *rad*
        pa: Argument of perigee ``w``. Units: *rad*
        raan: Right ascension of the ascending node. Units: *rad*
        v: True anomaly. Units: *rad*
    """

    a: Array
    e: Array
    i: Array
    pa: Array
    raan: Array
    v: Array


class CircularElements(NamedTuple):
    """Raw circular elements.

    Attributes:
        a: Semi-major axis. Units: *m*
        ex: ``e cos(w)``. Dimensionless.
        ey: ``e sin(w)``. Dimensionless.
        i: Inclination. Units: *rad*
        raan: Right ascension of the ascending node. Units: *rad*
        alpha_v: True latitude argument ``v + w``. Units: *rad*
    """

    a: Array
    ex: Array
    ey: Array
    i: Array
    raan: Array
    alpha_v: Array
