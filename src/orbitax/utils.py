"""Shared angle helpers.

These helpers wrap the ``use_degrees`` convention used throughout
orbitax, providing JAX-traceable degree/radian conversion via
``jnp.where``, plus angle normalization about an arbitrary center.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def normalize_angle(angle: ArrayLike, center: ArrayLike = jnp.pi) -> Array:
    """Shift an angle by a multiple of 2pi into ``[center - pi, center + pi)``.

    ``normalize_angle(a, 0.0)`` maps into ``[-pi, pi)`` and the default
    center maps into ``[0, 2pi)``.

    Args:
        angle: Angle to normalize. Units: *rad*
        center: Center of the target interval. Units: *rad*

    Returns:
        Normalized angle. Units: *rad*
    """
    two_pi = 2.0 * jnp.pi
    return angle - two_pi * jnp.floor((angle + jnp.pi - center) / two_pi)
