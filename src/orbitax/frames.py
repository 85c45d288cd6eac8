"""Reference-frame handles.

A :class:`Frame` is an opaque, identity-compared token naming the frame a
set of orbital parameters is expressed in.  Orbits and attitudes carry the
frame they were given and hand it back unchanged; nothing in orbitax
creates, composes or looks up frames on its own.

A frame may be attached to a parent through a *transform provider*, a
callable ``provider(epoch) -> Transform`` supplied by the caller.  Only
frames flagged ``pseudo_inertial`` are suitable for keplerian motion; this
is a documented precondition of the propagator and is not checked there.

Two pseudo-inertial root handles, :data:`GCRF` and :data:`EME2000`, are
provided for convenience.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype

if TYPE_CHECKING:
    from orbitax.epoch import Epoch


class Transform(NamedTuple):
    """Rigid transform from a frame to its parent at one instant.

    A position ``p`` expressed in the child frame maps to
    ``rotation @ p + translation`` in the parent frame.

    Attributes:
        rotation: 3x3 rotation matrix (child -> parent).
        translation: Origin of the child frame in the parent frame. Units: *m*
    """

    rotation: Array
    translation: Array

    @classmethod
    def identity(cls) -> Transform:
        """Return the identity transform."""
        dtype = get_dtype()
        return cls(jnp.eye(3, dtype=dtype), jnp.zeros(3, dtype=dtype))

    def apply_position(self, position: ArrayLike) -> Array:
        """Map a position from the child frame to the parent frame."""
        return self.rotation @ jnp.asarray(position) + self.translation

    def apply_direction(self, direction: ArrayLike) -> Array:
        """Rotate a free vector from the child frame to the parent frame."""
        return self.rotation @ jnp.asarray(direction)

    def inverse(self) -> Transform:
        """Return the parent -> child transform."""
        rot_t = self.rotation.T
        return Transform(rot_t, -(rot_t @ self.translation))


def rotation_z(angle: ArrayLike) -> Array:
    """Active rotation matrix by ``angle`` about the z-axis.

    Args:
        angle: Rotation angle, counter-clockwise about +z. Units: *rad*

    Returns:
        jax.Array: 3x3 rotation matrix.
    """
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    return jnp.array([[c, -s, 0.0],
                      [s, c, 0.0],
                      [0.0, 0.0, 1.0]], dtype=get_dtype())


class Frame:
    """Opaque reference-frame handle.

    Frames compare by identity: two handles with the same name are still
    different frames.

    Args:
        name (str): Human readable frame name.
        pseudo_inertial (bool): Whether two-body dynamics hold in this frame
            without fictitious forces.
        parent (Frame | None): Parent frame of ``provider``'s transforms.
        provider (Callable | None): ``provider(epoch) -> Transform`` from this
            frame to ``parent``. Required when ``parent`` is given.
    """

    __slots__ = ('_name', '_pseudo_inertial', '_parent', '_provider')

    def __init__(
        self,
        name: str,
        pseudo_inertial: bool = False,
        parent: Frame | None = None,
        provider: Callable[[Epoch], Transform] | None = None,
    ) -> None:
        if (parent is None) != (provider is None):
            raise ValueError("A frame needs both a parent and a transform provider, or neither")
        self._name = name
        self._pseudo_inertial = pseudo_inertial
        self._parent = parent
        self._provider = provider

    @property
    def name(self) -> str:
        """Frame name."""
        return self._name

    @property
    def pseudo_inertial(self) -> bool:
        """Whether the frame is pseudo-inertial."""
        return self._pseudo_inertial

    @property
    def parent(self) -> Frame | None:
        """Parent frame, or ``None`` for a root frame."""
        return self._parent

    def transform(self, epoch: Epoch) -> Transform:
        """Return the transform from this frame to its parent at ``epoch``.

        Root frames return the identity transform.

        Args:
            epoch (Epoch): Date of the transform.

        Returns:
            Transform: Child -> parent transform.
        """
        if self._provider is None:
            return Transform.identity()
        return self._provider(epoch)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Frame({self._name!r}, pseudo_inertial={self._pseudo_inertial})"


GCRF = Frame("GCRF", pseudo_inertial=True)
"""Geocentric Celestial Reference Frame handle."""

EME2000 = Frame("EME2000", pseudo_inertial=True)
"""Earth Mean Equator and Equinox of J2000 handle."""
