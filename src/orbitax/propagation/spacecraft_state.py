"""The :class:`SpacecraftState` aggregate returned by propagators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jax import Array

from orbitax.attitudes import Attitude
from orbitax.constants import DEFAULT_MASS
from orbitax.orbits._types import PVCoordinates
from orbitax.orbits.orbit import Orbit

if TYPE_CHECKING:
    from orbitax.epoch import Epoch
    from orbitax.frames import Frame


class SpacecraftState:
    """Orbit, attitude and mass of a spacecraft at one date.

    The orbital accessors (``date``, ``frame``, ``a``, ``e``, ``i``, ``ex``,
    ``ey``, ``hx``, ``hy``, ``lv``, ``le``, ``lm`` and ``pv_coordinates``)
    delegate to :attr:`orbit`.

    Args:
        orbit (Orbit): Orbital state.
        attitude (Attitude | None): Attitude. Default: identity in the
            orbit's frame.
        mass (float): Spacecraft mass. Units: *kg*

    Raises:
        TypeError: If ``orbit`` is not an :class:`~orbitax.orbits.Orbit`.
        ValueError: If ``mass`` is not strictly positive.
    """

    __slots__ = ('_orbit', '_attitude', '_mass')

    def __init__(self, orbit: Orbit, attitude: Attitude | None = None, mass: float = DEFAULT_MASS) -> None:
        if not isinstance(orbit, Orbit):
            raise TypeError(f"SpacecraftState requires an Orbit, got {type(orbit).__name__}")
        mass = float(mass)
        if not mass > 0.0:
            raise ValueError(f"Spacecraft mass must be positive, got {mass}")
        self._orbit = orbit
        self._attitude = Attitude.identity(orbit.frame) if attitude is None else attitude
        self._mass = mass

    @property
    def orbit(self) -> Orbit:
        return self._orbit

    @property
    def attitude(self) -> Attitude:
        return self._attitude

    @property
    def mass(self) -> float:
        """Spacecraft mass. Units: *kg*"""
        return self._mass

    @property
    def date(self) -> Epoch:
        return self._orbit.date

    @property
    def frame(self) -> Frame | None:
        return self._orbit.frame

    @property
    def a(self) -> Array:
        return self._orbit.a

    @property
    def e(self) -> Array:
        return self._orbit.e

    @property
    def i(self) -> Array:
        return self._orbit.i

    @property
    def ex(self) -> Array:
        return self._orbit.ex

    @property
    def ey(self) -> Array:
        return self._orbit.ey

    @property
    def hx(self) -> Array:
        return self._orbit.hx

    @property
    def hy(self) -> Array:
        return self._orbit.hy

    @property
    def lv(self) -> Array:
        return self._orbit.lv

    @property
    def le(self) -> Array:
        return self._orbit.le

    @property
    def lm(self) -> Array:
        return self._orbit.lm

    def pv_coordinates(self, mu: float) -> PVCoordinates:
        return self._orbit.pv_coordinates(mu)

    def __str__(self) -> str:
        return f"SpacecraftState({self._orbit}, mass={self._mass})"

    def __repr__(self) -> str:
        return self.__str__()
