"""Two-body quantities derived from the size and shape of an orbit.

Every function takes the central attraction coefficient ``gm`` explicitly,
defaulting to Earth's.  All functions use JAX operations and are compatible
with ``jax.jit``, ``jax.vmap`` and ``jax.grad``.  Inputs are coerced to the
configured float dtype (see :func:`orbitax.config.set_dtype`).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.constants import GM_EARTH
from orbitax.utils import from_radians

# ──────────────────────────────────────────────
# Orbital period and semi-major axis
# ──────────────────────────────────────────────


def orbital_period(a: ArrayLike, gm: ArrayLike = GM_EARTH) -> Array:
    """Compute the keplerian orbital period ``2 pi sqrt(a^3 / gm)``.

    Args:
        a: Semi-major axis. Units: *m*
        gm: Central attraction coefficient. Units: *m^3/s^2*

    Returns:
        Orbital period. Units: *s*

    Examples:
        ```python
        from orbitax.constants import R_EARTH
        from orbitax.orbits import orbital_period
        T = orbital_period(R_EARTH + 500e3)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    return 2.0 * jnp.pi * jnp.sqrt(a**3 / gm)


def semimajor_axis_from_orbital_period(period: ArrayLike, gm: ArrayLike = GM_EARTH) -> Array:
    """Compute semi-major axis from orbital period.

    Args:
        period: Orbital period. Units: *s*
        gm: Central attraction coefficient. Units: *m^3/s^2*

    Returns:
        Semi-major axis. Units: *m*
    """
    period = jnp.asarray(period, dtype=get_dtype())
    return (period**2 * gm / (4.0 * jnp.pi**2)) ** (1.0 / 3.0)


# ──────────────────────────────────────────────
# Mean motion
# ──────────────────────────────────────────────


def mean_motion(a: ArrayLike, gm: ArrayLike = GM_EARTH, use_degrees: bool = False) -> Array:
    """Compute the keplerian mean motion ``sqrt(gm / a^3)``.

    Args:
        a: Semi-major axis. Units: *m*
        gm: Central attraction coefficient. Units: *m^3/s^2*
        use_degrees: If ``True``, return mean motion in degrees per second.

    Returns:
        Mean motion. Units: *rad/s* or *deg/s*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    n = jnp.sqrt(gm / a**3)
    return from_radians(n, use_degrees)


# ──────────────────────────────────────────────
# Apsides
# ──────────────────────────────────────────────


def periapsis_distance(a: ArrayLike, e: ArrayLike) -> Array:
    """Distance from the central body's center to periapsis, ``a (1 - e)``. Units: *m*"""
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 - e)


def apoapsis_distance(a: ArrayLike, e: ArrayLike) -> Array:
    """Distance from the central body's center to apoapsis, ``a (1 + e)``. Units: *m*"""
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 + e)
