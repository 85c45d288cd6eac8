"""The :class:`Orbit` value: a date paired with orbital parameters.

An orbit is immutable.  Its only internal state besides the date and the
parameters is a memo of the last position/velocity pair it computed, keyed
by the central attraction coefficient the pair was computed for.  The memo
is a single ``(mu, pv)`` tuple replaced in one assignment, so readers never
see a pair belonging to another ``mu``; concurrent readers asking for
different ``mu`` values may recompute redundantly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jax import Array

from orbitax.epoch import Epoch
from orbitax.orbits._types import OrbitType, PVCoordinates
from orbitax.orbits.keplerian import mean_motion, orbital_period
from orbitax.orbits.parameters import (
    AnyParameters,
    CartesianParameters,
    CircularParameters,
    EquinoctialParameters,
    KeplerianParameters,
    OrbitalParameters,
    _check_mu,
    convert_parameters,
)

if TYPE_CHECKING:
    from orbitax.frames import Frame

_PARAMETER_TYPES = (
    CartesianParameters, KeplerianParameters, EquinoctialParameters, CircularParameters
)


class Orbit:
    """Orbital state at a given date.

    The frame is the one carried by ``parameters``; the orbit never creates
    or modifies it.  It is expected to be pseudo-inertial when the orbit is
    propagated with keplerian motion.

    Args:
        date (Epoch): Date of the state.
        parameters (OrbitalParameters): Any of the four parameter representations.

    Raises:
        TypeError: If ``date`` is not an :class:`~orbitax.epoch.Epoch` or
            ``parameters`` is not an orbital parameters instance.

    Examples:
        ```python
        from orbitax import Epoch, GCRF
        from orbitax.orbits import KeplerianParameters, Orbit
        params = KeplerianParameters(7.0e6, 0.01, 1.0, 0.5, 0.2, 0.1, frame=GCRF)
        orbit = Orbit(Epoch(2024, 1, 1), params)
        pv = orbit.pv_coordinates(3.986004415e14)
        ```
    """

    __slots__ = ('_date', '_parameters', '_pv_cache')

    def __init__(self, date: Epoch, parameters: OrbitalParameters) -> None:
        if not isinstance(date, Epoch):
            raise TypeError(f"Orbit date must be an Epoch, got {type(date).__name__}")
        if not isinstance(parameters, _PARAMETER_TYPES):
            raise TypeError(
                f"Orbit parameters must be orbital parameters, got {type(parameters).__name__}"
            )
        self._date = date
        self._parameters = parameters
        self._pv_cache = None

    @classmethod
    def from_pv(cls, date: Epoch, pv: PVCoordinates, mu: float, frame: Frame | None = None) -> Orbit:
        """Create an orbit from a position/velocity pair.

        The pair is stored as :class:`CartesianParameters` and pre-seeds the
        position/velocity memo for ``mu``.

        Args:
            date (Epoch): Date of the state.
            pv (PVCoordinates): Position (*m*) and velocity (*m/s*).
            mu (float): Central attraction coefficient. Units: *m^3/s^2*
            frame (Frame | None): Frame ``pv`` is expressed in.

        Raises:
            InvalidOrbitGeometry: If the state is not on an elliptical orbit.
        """
        params = CartesianParameters(pv, mu, frame)
        orbit = cls(date, params)
        orbit._pv_cache = (params.mu, params.pv_coordinates(params.mu))
        return orbit

    # Conversions

    def convert(self, orbit_type: OrbitType, mu: float | None = None) -> Orbit:
        """Return the same state at the same date in another representation.

        Args:
            orbit_type (OrbitType): Target representation.
            mu (float | None): Central attraction coefficient, required for
                ``OrbitType.CARTESIAN``. Units: *m^3/s^2*

        Returns:
            Orbit: New orbit sharing this orbit's date and frame.
        """
        return Orbit(self._date, convert_parameters(self._parameters, orbit_type, mu))

    def to_cartesian(self, mu: float) -> Orbit:
        return self.convert(OrbitType.CARTESIAN, mu)

    def to_keplerian(self) -> Orbit:
        return self.convert(OrbitType.KEPLERIAN)

    def to_equinoctial(self) -> Orbit:
        return self.convert(OrbitType.EQUINOCTIAL)

    def to_circular(self) -> Orbit:
        return self.convert(OrbitType.CIRCULAR)

    # Accessors

    @property
    def date(self) -> Epoch:
        """Date of the state."""
        return self._date

    @property
    def parameters(self) -> AnyParameters:
        """Orbital parameters, in the representation the orbit was built with."""
        return self._parameters

    @property
    def orbit_type(self) -> OrbitType:
        """Representation of :attr:`parameters`."""
        return self._parameters.orbit_type

    @property
    def frame(self) -> Frame | None:
        """Frame the parameters are expressed in."""
        return self._parameters.frame

    @property
    def equinoctial(self) -> EquinoctialParameters:
        """Equinoctial form of the parameters."""
        return self._parameters.equinoctial

    @property
    def a(self) -> Array:
        return self._parameters.a

    @property
    def e(self) -> Array:
        return self._parameters.e

    @property
    def i(self) -> Array:
        return self._parameters.i

    @property
    def ex(self) -> Array:
        return self._parameters.ex

    @property
    def ey(self) -> Array:
        return self._parameters.ey

    @property
    def hx(self) -> Array:
        return self._parameters.hx

    @property
    def hy(self) -> Array:
        return self._parameters.hy

    @property
    def lv(self) -> Array:
        return self._parameters.lv

    @property
    def le(self) -> Array:
        return self._parameters.le

    @property
    def lm(self) -> Array:
        return self._parameters.lm

    def keplerian_period(self, mu: float) -> Array:
        """Keplerian period for central attraction coefficient ``mu``. Units: *s*"""
        return orbital_period(self.a, _check_mu(mu))

    def keplerian_mean_motion(self, mu: float) -> Array:
        """Keplerian mean motion for central attraction coefficient ``mu``. Units: *rad/s*"""
        return mean_motion(self.a, _check_mu(mu))

    def pv_coordinates(self, mu: float) -> PVCoordinates:
        """Position and velocity for central attraction coefficient ``mu``.

        The pair is computed on the first call and returned from the memo on
        later calls with the same ``mu``; a call with another ``mu``
        replaces it.

        Args:
            mu (float): Central attraction coefficient. Units: *m^3/s^2*

        Returns:
            PVCoordinates: Position (*m*) and velocity (*m/s*) in :attr:`frame`.

        Raises:
            ValueError: If ``mu`` is not positive and finite.
        """
        mu = _check_mu(mu)
        cache = self._pv_cache
        if cache is not None and cache[0] == mu:
            return cache[1]
        pv = self._parameters.pv_coordinates(mu)
        self._pv_cache = (mu, pv)
        return pv

    def __str__(self) -> str:
        return f"Orbit({self._date}, {self._parameters})"

    def __repr__(self) -> str:
        return self.__str__()
